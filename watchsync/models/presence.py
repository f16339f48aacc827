# Enable postponed annotations to avoid runtime import issues and allow future-style typing
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


# Presence of a single live connection, broadcast to the members of its room
@dataclass
class Presence:
    # Socket.IO session id of the connection; stable for the connection's lifetime
    id: str
    # Display name; generated on connect, freely renamed afterwards
    name: str
    # Last measured round trip in milliseconds (0 until the first sample)
    ping: int = 0
    # Opaque media identifier the member reports watching ("" when none)
    currently_watching: str = ""
    # Last playback position reported by the member
    current_time: Number = 0

    # Attribute names that may be changed through ConnectionRegistry.update()
    MUTABLE_FIELDS = ("name", "ping", "currently_watching", "current_time")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "ping": self.ping,
            "currentlyWatching": self.currently_watching,
            "currentTime": self.current_time,
        }
