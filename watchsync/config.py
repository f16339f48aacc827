# Import the standard library module used for environment variables
import os

# Import helper to load environment variables from a .env file
from dotenv import load_dotenv


# Load variables from a .env file into process environment if present
load_dotenv()


# Define a configuration holder class for the Flask application
class Config:
    # Secret key used by Flask and extensions; falls back to a dev value
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")

    APP_NAME = os.getenv("APP_NAME", "WatchSync")

    # Interface and port the standalone server listens on
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8700"))

    # Development toggle controlling Flask debug behavior
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"

    # Global logging level
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Comma-separated list of CORS origins; '*' means allow all
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Socket.IO async mode override (e.g., 'gevent', 'threading'); empty means gevent
    SOCKETIO_ASYNC_MODE = os.getenv("SOCKETIO_ASYNC_MODE", "")
    # Engine.IO keepalive ping interval and timeout in seconds
    SOCKETIO_PING_INTERVAL_SECONDS = float(os.getenv("SOCKETIO_PING_INTERVAL_SECONDS", "1"))
    SOCKETIO_PING_TIMEOUT_SECONDS = float(os.getenv("SOCKETIO_PING_TIMEOUT_SECONDS", "20"))

    # Period of the per-connection latency probe in milliseconds
    LATENCY_PROBE_INTERVAL_MS = int(os.getenv("LATENCY_PROBE_INTERVAL_MS", "500"))

    # Length of generated room codes
    ROOM_CODE_LENGTH = int(os.getenv("ROOM_CODE_LENGTH", "10"))
