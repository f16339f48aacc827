from __future__ import annotations

from typing import Any, Callable, Optional

from flask import request
from flask_socketio import SocketIO

NAMESPACE = "/"


# Build the Socket.IO room name for a given room code
def room_socket_name(code: str) -> str:
    return f"room:{code}"


def get_sid_from_socket() -> Optional[str]:
    """Socket.IO session id of the connection that sent the current event."""
    return getattr(request, "sid", None)


class SocketTransport:
    """Group membership, broadcast and task primitives of the Socket.IO server."""

    def __init__(self, socketio: SocketIO):
        self.socketio = socketio

    def enter_room(self, sid: str, code: str) -> None:
        self.socketio.server.enter_room(sid, room_socket_name(code), namespace=NAMESPACE)

    def leave_room(self, sid: str, code: str) -> None:
        self.socketio.server.leave_room(sid, room_socket_name(code), namespace=NAMESPACE)

    def emit_to_room(self, code: str, event: str, *args: Any) -> None:
        self.socketio.emit(event, *args, to=room_socket_name(code), namespace=NAMESPACE)

    def request(self, sid: str, event: str, callback: Callable[..., None]) -> None:
        """Emit ``event`` to a single connection; ``callback`` runs on its acknowledgement."""
        self.socketio.emit(event, to=sid, namespace=NAMESPACE, callback=callback)

    def start_background_task(self, target: Callable, *args: Any):
        return self.socketio.start_background_task(target, *args)

    def sleep(self, seconds: float) -> None:
        self.socketio.sleep(seconds)
