from __future__ import annotations

import logging

from ....extensions import socketio
from ...middleware import require_connection


def register() -> None:
    @socketio.on("sync")
    @require_connection()
    def _on_sync(hub, sid, time=None, *_args):
        logging.info("player: sid=%s requested action sync (time: %s)", sid, time)
        hub.relay.sync(sid, time)
