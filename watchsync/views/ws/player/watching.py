from __future__ import annotations

from ....extensions import socketio
from ...middleware import require_connection


def register() -> None:
    @socketio.on("currentlyWatching")
    @require_connection()
    def _on_currently_watching(hub, sid, media_id=None, time=None, *_args):
        hub.relay.report_watching(sid, media_id, time)
