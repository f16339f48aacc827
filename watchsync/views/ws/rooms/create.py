from __future__ import annotations

from ....extensions import socketio
from ...middleware import INTERNAL_ERROR, require_connection


def register() -> None:
    @socketio.on("create-room")
    @require_connection(failure={**INTERNAL_ERROR, "roomID": None})
    def _on_create_room(hub, sid, *_args):
        code = hub.rooms.create_room(sid)
        return {"error": None, "roomID": code}
