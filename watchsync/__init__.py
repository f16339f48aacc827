# Future annotations for forward reference typing compatibility
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

# Flask primitives for creating the app
from flask import Flask, jsonify

# Enable Cross-Origin Resource Sharing for HTTP routes and Socket.IO
from flask_cors import CORS

# Import configuration object
from .config import Config

# Import the shared Socket.IO extension
from .extensions import socketio

from .helpers.ws import SocketTransport
from .lib.hub import EXTENSION_KEY, SyncHub, get_hub

# Configure a standard log format for console handlers
log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Initialize base logging so our explicit logging.info calls show up
logging.basicConfig(level=getattr(logging, Config.LOG_LEVEL, logging.INFO), format=log_format)

# Reduce noisy third-party loggers so we only see our explicit INFO logs and exceptions
for _noisy_name in (
    "engineio",
    "engineio.server",
    "socketio",
    "socketio.server",
):
    logging.getLogger(_noisy_name).setLevel(logging.WARNING)


def _allowed_origins(origins_cfg: str):
    # A single '*' means allow all origins
    if origins_cfg.strip() == "*":
        return "*"
    # Split comma-separated list into an array of origins
    return [o.strip() for o in origins_cfg.split(",") if o.strip()]


# Application factory returning a configured Flask app
def create_app(config_overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    # Load configuration from the Config class, then any explicit overrides
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    allowed_origins = _allowed_origins(app.config["CORS_ORIGINS"])
    CORS(app, resources={r"/*": {"origins": allowed_origins}})
    # Initialize Socket.IO with the same CORS policy
    socketio.init_app(
        app,
        cors_allowed_origins=allowed_origins,
        async_mode=app.config.get("SOCKETIO_ASYNC_MODE") or "gevent",
        ping_interval=app.config["SOCKETIO_PING_INTERVAL_SECONDS"],
        ping_timeout=app.config["SOCKETIO_PING_TIMEOUT_SECONDS"],
    )
    app.logger.info(
        "SocketIO configured: async_mode=%s, probe_interval_ms=%s",
        socketio.async_mode,
        app.config["LATENCY_PROBE_INTERVAL_MS"],
    )

    # One session hub per app; every connection, room and probe timer lives here
    app.extensions[EXTENSION_KEY] = SyncHub.from_app(app, SocketTransport(socketio))

    register_routes(app)
    return app


# Helper to bind routes and socket handlers
def register_routes(app: Flask) -> None:
    @app.route("/api/health")
    def health():
        hub = get_hub()
        with hub.lock:
            return jsonify(
                {
                    "ok": True,
                    "connections": len(hub.registry),
                    "rooms": hub.rooms.room_count(),
                }
            )

    from .views.ws import register_socket_handlers

    register_socket_handlers()
