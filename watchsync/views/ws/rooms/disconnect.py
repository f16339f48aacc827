from __future__ import annotations

import logging

from ....extensions import socketio
from ....helpers.ws import get_sid_from_socket
from ....lib.hub import get_hub


def register() -> None:
    @socketio.on("disconnect")
    def _on_disconnect(*_args):
        sid = get_sid_from_socket()
        try:
            get_hub().disconnect(sid)
        except Exception:
            logging.exception("disconnect handler error (sid=%s)", sid)
