from __future__ import annotations

import logging

from ....extensions import socketio
from ...middleware import require_connection


def register() -> None:
    @socketio.on("play")
    @require_connection()
    def _on_play(hub, sid, *_args):
        logging.info("player: sid=%s requested action play", sid)
        hub.relay.play(sid)
