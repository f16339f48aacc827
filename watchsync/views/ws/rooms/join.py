from __future__ import annotations

from ....extensions import socketio
from ....lib.rooms import RoomNotFound
from ...middleware import INTERNAL_ERROR, require_connection


def register() -> None:
    @socketio.on("join-room")
    @require_connection(failure={**INTERNAL_ERROR, "roomID": None})
    def _on_join_room(hub, sid, code=None, *_args):
        try:
            joined = hub.rooms.join_room(sid, code if isinstance(code, str) else None)
        except RoomNotFound as e:
            return {"error": e.reason, "roomID": None}
        return {"error": None, "roomID": joined}
