"""
Connection registry:
- One presence record per live Socket.IO connection, keyed by sid
- Lifecycle tied to connect/disconnect
"""

from __future__ import annotations

import logging
from typing import Callable, Collection, Dict, Iterator, Optional

from ..models import Presence
from .utils import random_username


class ConnectionRegistry:
    """Owns the presence records of every live connection.

    Not thread safe on its own; callers serialize access through the hub lock.
    """

    def __init__(self, name_factory: Callable[[Collection[str]], str] = random_username):
        self._records: Dict[str, Presence] = {}
        self._name_factory = name_factory

    def register(self, sid: str) -> Presence:
        """Create the presence record for a new connection.

        The generated name is not held by any other live record. Manual renames
        through update() are never checked against it.
        """
        existing = self._records.get(sid)
        if existing is not None:
            logging.warning("registry.register: sid=%s already registered", sid)
            return existing
        record = Presence(id=sid, name=self._name_factory(self.names()))
        self._records[sid] = record
        return record

    def get(self, sid: str) -> Optional[Presence]:
        return self._records.get(sid)

    def update(self, sid: str, **fields) -> Optional[Presence]:
        unknown = set(fields) - set(Presence.MUTABLE_FIELDS)
        if unknown:
            raise ValueError(f"cannot update presence fields: {sorted(unknown)}")
        record = self._records.get(sid)
        if record is None:
            return None
        for key, value in fields.items():
            setattr(record, key, value)
        return record

    def remove(self, sid: str) -> Optional[Presence]:
        return self._records.pop(sid, None)

    def names(self) -> set[str]:
        return {record.name for record in self}

    def __contains__(self, sid: object) -> bool:
        return sid in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Presence]:
        return iter(list(self._records.values()))
