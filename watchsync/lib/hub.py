"""
Session hub: the single owner of all in-memory session state.

Socket handlers, probe ticks and probe replies all run while holding
``hub.lock``. Under gevent that lock is cooperative; under the threading async
mode it is what keeps the registry and room map single-writer.
"""
from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, Optional

from flask import Flask, current_app

from ..models import Presence
from .latency import LatencyProber
from .presence import PresenceBroadcaster
from .registry import ConnectionRegistry
from .relay import PlaybackRelay
from .rooms import RoomCoordinator
from .utils import generate_room_code

if TYPE_CHECKING:
    from ..helpers.ws import SocketTransport

EXTENSION_KEY = "watchsync"


class SyncHub:
    def __init__(
        self,
        transport: "SocketTransport",
        probe_interval_seconds: float = 0.5,
        room_code_length: int = 10,
        code_factory: Optional[Callable[[], str]] = None,
    ):
        self.lock = threading.RLock()
        self.transport = transport
        self.registry = ConnectionRegistry()
        self.rooms = RoomCoordinator(
            transport,
            broadcast=self.broadcast_presence,
            code_factory=code_factory or (lambda: generate_room_code(room_code_length)),
        )
        self.broadcaster = PresenceBroadcaster(self.registry, transport, members=self.rooms.members)
        self.relay = PlaybackRelay(self.registry, self.rooms, transport)
        self.prober = LatencyProber(
            self.lock,
            self.registry,
            self.rooms,
            self.broadcaster,
            transport,
            interval_seconds=probe_interval_seconds,
        )

    @classmethod
    def from_app(cls, app: Flask, transport: "SocketTransport") -> "SyncHub":
        return cls(
            transport,
            probe_interval_seconds=app.config.get("LATENCY_PROBE_INTERVAL_MS", 500) / 1000.0,
            room_code_length=app.config.get("ROOM_CODE_LENGTH", 10),
        )

    def broadcast_presence(self, code: str) -> Optional[list[dict]]:
        return self.broadcaster.broadcast(code)

    def connect(self, sid: str) -> Presence:
        with self.lock:
            record = self.registry.register(sid)
            self.prober.start(sid)
        logging.info("hub: sid=%s connected as %r", sid, record.name)
        return record

    def disconnect(self, sid: str) -> None:
        """Leave semantics first, then drop the record, then the probe timer."""
        with self.lock:
            code = self.rooms.current_room(sid)
            if code is not None:
                self.rooms.leave_room(sid)
            self.registry.remove(sid)
            self.prober.stop(sid)
        logging.info("hub: sid=%s disconnected (room=%s)", sid, code)

    def rename(self, sid: str, name: str) -> Optional[Presence]:
        with self.lock:
            record = self.registry.update(sid, name=name)
            if record is None:
                return None
            code = self.rooms.current_room(sid)
            if code is not None:
                self.broadcast_presence(code)
        logging.info("hub: sid=%s set username to %r", sid, name)
        return record

    def username(self, sid: str) -> Optional[str]:
        record = self.registry.get(sid)
        return record.name if record else None


def get_hub(app: Optional[Flask] = None) -> SyncHub:
    app = app or current_app
    return app.extensions[EXTENSION_KEY]
