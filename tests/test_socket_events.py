from __future__ import annotations

from watchsync.lib.hub import get_hub


def _events(messages, name):
    return [message["args"] for message in messages if message["name"] == name]


def _user_lists(client):
    return [args[0] for args in _events(client.get_received(), "user-list")]


def test_get_username_returns_generated_name(app, connect):
    client, sid = connect()
    ack = client.emit("get-username", callback=True)
    assert ack == {"error": None, "username": get_hub(app).registry.get(sid).name}


def test_create_room_returns_code_and_user_list(connect):
    client, sid = connect()
    ack = client.emit("create-room", callback=True)

    assert ack["error"] is None
    code = ack["roomID"]
    assert len(code) == 10 and code == code.upper()
    assert client.emit("get-current-room", callback=True) == code
    lists = _user_lists(client)
    assert [[entry["id"] for entry in users] for users in lists] == [[sid]]


def test_get_current_room_without_room(connect):
    client, _ = connect()
    assert not client.emit("get-current-room", callback=True)


def test_join_and_sync_reach_both_members(connect):
    a, _ = connect()
    b, _ = connect()
    code = a.emit("create-room", callback=True)["roomID"]

    assert b.emit("join-room", code, callback=True) == {"error": None, "roomID": code}
    assert len(_user_lists(a)[-1]) == 2
    assert len(_user_lists(b)[-1]) == 2

    a.emit("sync", 42)

    assert _events(a.get_received(), "sync") == [[42]]
    assert _events(b.get_received(), "sync") == [[42]]


def test_play_and_pause_are_relayed(connect):
    a, _ = connect()
    b, _ = connect()
    code = a.emit("create-room", callback=True)["roomID"]
    b.emit("join-room", code, callback=True)
    a.get_received()
    b.get_received()

    b.emit("play")
    b.emit("pause")

    for client in (a, b):
        names = [m["name"] for m in client.get_received() if m["name"] in ("play", "pause")]
        assert names == ["play", "pause"]


def test_playback_events_outside_room_are_dropped(connect):
    a, _ = connect()
    b, _ = connect()
    a.emit("play")
    a.emit("sync", 3)
    a.emit("currentlyWatching", "movie-1", 3)
    assert a.get_received() == []
    assert b.get_received() == []


def test_join_unknown_room(connect):
    client, _ = connect()
    ack = client.emit("join-room", "NOTAREALCODE", callback=True)
    assert ack == {"error": "Room does not exist", "roomID": None}


def test_leave_room_succeeds_exactly_once(connect):
    client, _ = connect()
    assert client.emit("leave-room", callback=True) == {"error": "No room to leave"}

    client.emit("create-room", callback=True)
    assert client.emit("leave-room", callback=True) == {"error": None}
    assert client.emit("leave-room", callback=True) == {"error": "No room to leave"}


def test_join_second_room_keeps_only_second(connect):
    a, sid_a = connect()
    b, _ = connect()
    c, sid_c = connect()
    room_a = a.emit("create-room", callback=True)["roomID"]
    room_b = b.emit("create-room", callback=True)["roomID"]

    c.emit("join-room", room_a, callback=True)
    c.emit("join-room", room_b, callback=True)

    assert c.emit("get-current-room", callback=True) == room_b
    assert [entry["id"] for entry in _user_lists(a)[-1]] == [sid_a]
    assert sid_c in [entry["id"] for entry in _user_lists(b)[-1]]


def test_disconnect_broadcasts_shrunk_user_list(app, connect):
    clients = [connect() for _ in range(3)]
    (host, _), (guest, guest_sid), (third, _) = clients
    code = host.emit("create-room", callback=True)["roomID"]
    guest.emit("join-room", code, callback=True)
    third.emit("join-room", code, callback=True)
    assert len(_user_lists(host)[-1]) == 3

    guest.disconnect()

    latest = _user_lists(host)[-1]
    assert len(latest) == 2
    assert guest_sid not in [entry["id"] for entry in latest]
    hub = get_hub(app)
    assert hub.registry.get(guest_sid) is None
    assert hub.prober.timer_for(guest_sid) is None


def test_rename_to_taken_name_is_accepted(app, connect):
    a, _ = connect()
    b, _ = connect()
    taken = a.emit("get-username", callback=True)["username"]
    code = a.emit("create-room", callback=True)["roomID"]
    b.emit("join-room", code, callback=True)
    a.get_received()

    assert b.emit("change-username", taken, callback=True) == {"error": None}

    assert b.emit("get-username", callback=True)["username"] == taken
    names = [entry["name"] for entry in _user_lists(a)[-1]]
    assert names == [taken, taken]


def test_currently_watching_surfaces_on_next_broadcast(connect):
    a, sid_a = connect()
    b, _ = connect()
    code = a.emit("create-room", callback=True)["roomID"]
    a.emit("currentlyWatching", 99, 12.5)
    assert _user_lists(a)[-1][0]["currentlyWatching"] == ""

    b.emit("join-room", code, callback=True)

    entry = next(e for e in _user_lists(a)[-1] if e["id"] == sid_a)
    assert entry["currentlyWatching"] == "99"
    assert entry["currentTime"] == 12.5


def test_probe_reply_updates_ping_for_room(app, connect):
    a, sid_a = connect()
    a.emit("create-room", callback=True)
    a.get_received()

    get_hub(app).prober.record_reply(sid_a, started_ns=0, finished_ns=21_000_000)

    assert _user_lists(a)[-1][0]["ping"] == 21


def test_health_reports_connections_and_rooms(app, connect):
    a, _ = connect()
    connect()
    a.emit("create-room", callback=True)

    response = app.test_client().get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "connections": 2, "rooms": 1}
