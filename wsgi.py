"""
WSGI entry point for deployment (Gunicorn).
Run:  gunicorn -c gunicorn.conf.py wsgi:server
"""
from superstore_dashboard.app import server  # noqa: F401
