from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from ..helpers.ws import SocketTransport
    from .registry import ConnectionRegistry


class PresenceBroadcaster:
    """Sends the ``user-list`` of a room to every member of that room.

    This is the only path by which presence data reaches clients.
    """

    def __init__(
        self,
        registry: "ConnectionRegistry",
        transport: "SocketTransport",
        members: Callable[[str], list[str]],
    ):
        self.registry = registry
        self.transport = transport
        self._members = members

    def broadcast(self, code: str) -> Optional[list[dict]]:
        sids = self._members(code)
        if not sids:
            # The room vanished between trigger and broadcast
            logging.debug("presence: room %s has no members, skipping user-list", code)
            return None
        payload = []
        for sid in sids:
            record = self.registry.get(sid)
            if record is None:
                logging.warning("presence: room %s member sid=%s has no presence record", code, sid)
                continue
            payload.append(record.to_dict())
        self.transport.emit_to_room(code, "user-list", payload)
        return payload
