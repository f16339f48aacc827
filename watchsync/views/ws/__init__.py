from __future__ import annotations

import logging

from flask import request

from ...extensions import socketio
from .player import register_socket_handlers as register_player_handlers
from .rooms import register_socket_handlers as register_room_handlers

__all__ = [
    "register_socket_handlers",
]


def register_socket_handlers() -> None:
    register_room_handlers()
    register_player_handlers()

    # Default Socket.IO error handler to log exceptions uniformly
    @socketio.on_error_default
    def _default_error_handler(e):
        logging.error(
            "SOCK error sid=%s event=%s: %r",
            getattr(request, "sid", None),
            (getattr(request, "event", None) or {}).get("message"),
            e,
            exc_info=e,
        )
