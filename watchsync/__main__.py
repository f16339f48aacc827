from __future__ import annotations

import logging

from . import create_app
from .extensions import socketio


def main() -> None:
    app = create_app()
    host = app.config["HOST"]
    port = app.config["PORT"]
    logging.info("Server running on port %s", port)
    socketio.run(app, host=host, port=port, debug=app.config.get("DEBUG", False))


if __name__ == "__main__":
    main()
