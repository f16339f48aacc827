# WSGI entry point for gunicorn (see gunicorn.conf.py)
from . import create_app

# Instantiate the application at import time for WSGI servers
app = create_app()
