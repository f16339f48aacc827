from __future__ import annotations

from ....extensions import socketio
from ....lib.rooms import NoRoomToLeave
from ...middleware import INTERNAL_ERROR, require_connection


def register() -> None:
    @socketio.on("leave-room")
    @require_connection(failure=INTERNAL_ERROR)
    def _on_leave_room(hub, sid, *_args):
        try:
            hub.rooms.leave_room(sid)
        except NoRoomToLeave as e:
            return {"error": e.reason}
        return {"error": None}
