from __future__ import annotations

from ....extensions import socketio
from ...middleware import require_connection


def register() -> None:
    @socketio.on("get-current-room")
    @require_connection()
    def _on_get_current_room(hub, sid, *_args):
        return hub.rooms.current_room(sid)
