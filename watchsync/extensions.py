from __future__ import annotations

from flask_socketio import SocketIO

# Shared Socket.IO server; bound to the Flask app in create_app()
socketio = SocketIO()
