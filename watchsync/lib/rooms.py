"""
Room membership coordinator.

Rooms are virtual: a room code exists only while at least one connection is
associated with it. Each connection is associated with at most one room, and
every association change is followed by one presence broadcast per affected
room.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Dict, Optional

if TYPE_CHECKING:
    from ..helpers.ws import SocketTransport


class RoomError(Exception):
    """Base class for room command failures; ``reason`` is sent to the client."""

    reason = "Room error"

    def __init__(self, sid: str, code: Optional[str] = None):
        super().__init__(self.reason)
        self.sid = sid
        self.code = code


class RoomNotFound(RoomError):
    reason = "Room does not exist"


class NoRoomToLeave(RoomError):
    reason = "No room to leave"


class RoomCoordinator:
    def __init__(
        self,
        transport: "SocketTransport",
        broadcast: Callable[[str], object],
        code_factory: Callable[[], str],
    ):
        self.transport = transport
        self._broadcast = broadcast
        self._code_factory = code_factory
        # sid -> room code; insertion order gives a stable member order
        self._room_by_sid: Dict[str, str] = {}

    def current_room(self, sid: str) -> Optional[str]:
        return self._room_by_sid.get(sid)

    def members(self, code: str) -> list[str]:
        return [sid for sid, room in self._room_by_sid.items() if room == code]

    def exists(self, code: str) -> bool:
        return code in self._room_by_sid.values()

    def room_count(self) -> int:
        return len(set(self._room_by_sid.values()))

    def create_room(self, sid: str) -> str:
        self._leave_current(sid)
        code = self._code_factory()
        while self.exists(code):
            code = self._code_factory()
        self._enter(sid, code)
        logging.info("rooms: sid=%s created room %s", sid, code)
        return code

    def join_room(self, sid: str, code: str) -> str:
        if not code or not self.exists(code):
            logging.info("rooms: sid=%s failed to join room %s", sid, code)
            raise RoomNotFound(sid, code)
        if self.current_room(sid) != code:
            self._leave_current(sid)
        self._enter(sid, code)
        logging.info("rooms: sid=%s joined room %s", sid, code)
        return code

    def leave_room(self, sid: str) -> str:
        code = self._leave_current(sid)
        if code is None:
            logging.info("rooms: sid=%s failed to leave room (not in a room)", sid)
            raise NoRoomToLeave(sid)
        logging.info("rooms: sid=%s left room %s", sid, code)
        return code

    def _enter(self, sid: str, code: str) -> None:
        self._room_by_sid[sid] = code
        self.transport.enter_room(sid, code)
        self._broadcast(code)

    def _leave_current(self, sid: str) -> Optional[str]:
        code = self._room_by_sid.pop(sid, None)
        if code is None:
            return None
        self.transport.leave_room(sid, code)
        # No-op when the departing connection was the last member
        self._broadcast(code)
        return code
