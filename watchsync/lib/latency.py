"""
Latency prober.

Each live connection gets one background loop that wakes every probe interval
and, while the connection is in a room, sends it a ``ping`` expecting an
acknowledgement. The round trip is written to the connection's presence record
and the room's user list is re-broadcast.

The request and its reply are separated by a suspension during which the
connection may leave, switch rooms or disconnect, so the reply handler
re-checks liveness and looks the room up again instead of reusing the one seen
at request time.
"""
from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, ContextManager, Dict, Optional

from .utils import elapsed_ms

if TYPE_CHECKING:
    from ..helpers.ws import SocketTransport
    from .presence import PresenceBroadcaster
    from .registry import ConnectionRegistry
    from .rooms import RoomCoordinator

PROBE_EVENT = "ping"


class ProbeTimer:
    """Handle for one connection's probe loop; cancelled exactly once at disconnect."""

    def __init__(self, sid: str):
        self.sid = sid
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class LatencyProber:
    def __init__(
        self,
        lock: ContextManager,
        registry: "ConnectionRegistry",
        rooms: "RoomCoordinator",
        broadcaster: "PresenceBroadcaster",
        transport: "SocketTransport",
        interval_seconds: float = 0.5,
    ):
        self.lock = lock
        self.registry = registry
        self.rooms = rooms
        self.broadcaster = broadcaster
        self.transport = transport
        self.interval_seconds = interval_seconds
        self._timers: Dict[str, ProbeTimer] = {}

    def start(self, sid: str) -> ProbeTimer:
        timer = self._timers.get(sid)
        if timer is not None:
            return timer
        timer = ProbeTimer(sid)
        self._timers[sid] = timer
        self.transport.start_background_task(self._run, timer)
        logging.debug("latency: started probe loop for sid=%s", sid)
        return timer

    def stop(self, sid: str) -> bool:
        # Disconnect may race a pending tick; stopping twice is harmless
        timer = self._timers.pop(sid, None)
        if timer is None:
            return False
        timer.cancel()
        logging.debug("latency: stopped probe loop for sid=%s", sid)
        return True

    def timer_for(self, sid: str) -> Optional[ProbeTimer]:
        return self._timers.get(sid)

    def tick(self, sid: str) -> bool:
        with self.lock:
            timer = self.timer_for(sid)
            if timer is None:
                return False
            return self._tick(timer)

    def record_reply(self, sid: str, started_ns: int, finished_ns: Optional[int] = None) -> Optional[int]:
        latency = elapsed_ms(started_ns, finished_ns)
        with self.lock:
            if self.timer_for(sid) is None or self.registry.get(sid) is None:
                logging.debug("latency: dropping reply from departed sid=%s", sid)
                return None
            self.registry.update(sid, ping=latency)
            code = self.rooms.current_room(sid)
            if code is not None:
                self.broadcaster.broadcast(code)
        return latency

    def _tick(self, timer: ProbeTimer) -> bool:
        if timer.cancelled or self.timer_for(timer.sid) is not timer:
            return False
        sid = timer.sid
        if self.registry.get(sid) is None or self.rooms.current_room(sid) is None:
            return False
        started_ns = time.perf_counter_ns()

        def _on_reply(*_args) -> None:
            try:
                self.record_reply(sid, started_ns)
            except Exception:
                logging.exception("latency: failed to record probe reply for sid=%s", sid)

        self.transport.request(sid, PROBE_EVENT, callback=_on_reply)
        return True

    def _run(self, timer: ProbeTimer) -> None:
        while not timer.cancelled:
            self.transport.sleep(self.interval_seconds)
            if timer.cancelled:
                break
            try:
                with self.lock:
                    self._tick(timer)
            except Exception:
                logging.exception("latency: probe tick failed for sid=%s", timer.sid)
        logging.debug("latency: probe loop for sid=%s exited", timer.sid)
