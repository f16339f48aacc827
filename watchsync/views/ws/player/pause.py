from __future__ import annotations

import logging

from ....extensions import socketio
from ...middleware import require_connection


def register() -> None:
    @socketio.on("pause")
    @require_connection()
    def _on_pause(hub, sid, *_args):
        logging.info("player: sid=%s requested action pause", sid)
        hub.relay.pause(sid)
