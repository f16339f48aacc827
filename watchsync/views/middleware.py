from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, Optional

from flask import request

from ..helpers.ws import get_sid_from_socket
from ..lib.hub import get_hub

INTERNAL_ERROR = {"error": "Internal server error"}


def _event_name() -> Optional[str]:
    try:
        if getattr(request, "event", None):
            return request.event.get("message")
    except Exception:
        return None
    return None


def _copy(value: Any) -> Any:
    return dict(value) if isinstance(value, dict) else value


def require_connection(failure: Any = None) -> Callable:
    """
    Decorator for socket handlers that act on the caller's live connection.

    Resolves the session hub and the caller's sid and passes (hub, sid, *args)
    to the handler while holding the hub lock. Events from a sid without a
    presence record are dropped. Unexpected exceptions are logged and contained
    to this event; in both cases ``failure`` is returned as the acknowledgement.

    Usage:
        @socketio.on("leave-room")
        @require_connection(failure=INTERNAL_ERROR)
        def _on_leave_room(hub, sid, *_args):
            # sid is guaranteed to have a presence record here
            ...
    """

    def decorator(handler: Callable) -> Callable:
        @wraps(handler)
        def wrapper(*args: Any) -> Any:
            sid = get_sid_from_socket()
            hub = get_hub()
            with hub.lock:
                if sid is None or sid not in hub.registry:
                    logging.warning(
                        "require_connection: no presence record for sid=%s "
                        "(handler=%s, event=%s)",
                        sid,
                        handler.__name__,
                        _event_name(),
                    )
                    return _copy(failure)
                try:
                    return handler(hub, sid, *args)
                except Exception:
                    logging.exception(
                        "%s handler error (sid=%s)", _event_name() or handler.__name__, sid
                    )
                    return _copy(failure)

        return wrapper

    return decorator
