from __future__ import annotations

import logging

from flask import request

from ....extensions import socketio
from ....helpers.ws import get_sid_from_socket
from ....lib.hub import get_hub


def register() -> None:
    @socketio.on("connect")
    def _on_connect(*_args):
        sid = get_sid_from_socket()
        logging.info(
            "SOCK connect sid=%s ua=%s",
            sid,
            request.headers.get("User-Agent", "-"),
        )
        try:
            get_hub().connect(sid)
        except Exception:
            logging.exception("connect handler error (sid=%s)", sid)
            return False
