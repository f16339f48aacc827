from __future__ import annotations

from ....extensions import socketio
from ...middleware import INTERNAL_ERROR, require_connection


def register() -> None:
    @socketio.on("change-username")
    @require_connection(failure=INTERNAL_ERROR)
    def _on_change_username(hub, sid, name=None, *_args):
        # Names are only unique when generated; a manual rename is taken as is
        hub.rename(sid, "" if name is None else str(name))
        return {"error": None}

    @socketio.on("get-username")
    @require_connection(failure=INTERNAL_ERROR)
    def _on_get_username(hub, sid, *_args):
        return {"error": None, "username": hub.username(sid)}
