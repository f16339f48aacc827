from __future__ import annotations

import itertools

import pytest

from watchsync import create_app
from watchsync.extensions import socketio
from watchsync.lib.hub import SyncHub, get_hub


class FakeTransport:
    """In-memory stand-in for the Socket.IO server primitives."""

    def __init__(self):
        self.groups: dict[str, set[str]] = {}
        self.emitted: list[tuple[str, str, tuple]] = []
        self.requests: list[tuple[str, str, object]] = []
        self.tasks: list[tuple[object, tuple]] = []
        self.slept: list[float] = []

    def enter_room(self, sid, code):
        self.groups.setdefault(code, set()).add(sid)

    def leave_room(self, sid, code):
        members = self.groups.get(code, set())
        members.discard(sid)
        if not members:
            self.groups.pop(code, None)

    def emit_to_room(self, code, event, *args):
        self.emitted.append((code, event, args))

    def request(self, sid, event, callback):
        self.requests.append((sid, event, callback))

    def start_background_task(self, target, *args):
        self.tasks.append((target, args))

    def sleep(self, seconds):
        self.slept.append(seconds)

    def events(self, event, code=None):
        return [args for c, e, args in self.emitted if e == event and (code is None or c == code)]

    def user_lists(self, code=None):
        return [args[0] for args in self.events("user-list", code)]


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def hub(transport):
    codes = (f"ROOM{n:06d}" for n in itertools.count(1))
    return SyncHub(transport, probe_interval_seconds=0.5, code_factory=lambda: next(codes))


@pytest.fixture
def app():
    return create_app(
        {
            "TESTING": True,
            "SOCKETIO_ASYNC_MODE": "threading",
            # Keep the probe loops asleep for the duration of a test
            "LATENCY_PROBE_INTERVAL_MS": 3_600_000,
        }
    )


@pytest.fixture
def connect(app):
    """Open a Socket.IO test client; returns (client, sid)."""
    clients = []

    def _connect():
        hub = get_hub(app)
        before = {record.id for record in hub.registry}
        client = socketio.test_client(app)
        (sid,) = {record.id for record in hub.registry} - before
        client.get_received()
        clients.append(client)
        return client, sid

    yield _connect

    for client in clients:
        if client.is_connected():
            client.disconnect()
