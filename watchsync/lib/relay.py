"""
Playback synchronization relay.

Forwards play/pause/sync from one member to every member of the same room
(the sender included) and records the sender's watching state. Events from a
connection that is not in a room are dropped without a reply.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..helpers.ws import SocketTransport
    from .registry import ConnectionRegistry
    from .rooms import RoomCoordinator


def _coerce_time(value: Any):
    # user-list is strict JSON, so inf and nan never reach a presence record
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        number = value
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return 0
    return number if math.isfinite(number) else 0


class PlaybackRelay:
    def __init__(
        self,
        registry: "ConnectionRegistry",
        rooms: "RoomCoordinator",
        transport: "SocketTransport",
    ):
        self.registry = registry
        self.rooms = rooms
        self.transport = transport

    def play(self, sid: str) -> Optional[str]:
        return self._forward(sid, "play")

    def pause(self, sid: str) -> Optional[str]:
        return self._forward(sid, "pause")

    def sync(self, sid: str, time: Any) -> Optional[str]:
        return self._forward(sid, "sync", time)

    def report_watching(self, sid: str, media_id: Any, time: Any) -> Optional[str]:
        # Stored only; the next presence broadcast carries it
        code = self.rooms.current_room(sid)
        if code is None:
            return None
        self.registry.update(
            sid,
            currently_watching="" if media_id is None else str(media_id),
            current_time=_coerce_time(time),
        )
        return code

    def _forward(self, sid: str, event: str, *args: Any) -> Optional[str]:
        code = self.rooms.current_room(sid)
        if code is None:
            logging.debug("relay: dropping %s from sid=%s (not in a room)", event, sid)
            return None
        self.transport.emit_to_room(code, event, *args)
        return code
