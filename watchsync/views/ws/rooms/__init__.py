from __future__ import annotations

from .connect import register as register_connect
from .disconnect import register as register_disconnect
from .username import register as register_username
from .create import register as register_room_create
from .join import register as register_room_join
from .leave import register as register_room_leave
from .current_room import register as register_current_room

__all__ = [
    "register_socket_handlers",
]


def register_socket_handlers() -> None:
    register_connect()
    register_disconnect()
    register_username()
    register_room_create()
    register_room_join()
    register_room_leave()
    register_current_room()
