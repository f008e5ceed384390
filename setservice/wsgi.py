"""
WSGI entry point.

Serves the ASGI application from WSGI servers (Gunicorn sync workers,
Waitress, mod_wsgi) through a2wsgi's ASGIMiddleware:

    gunicorn setservice.wsgi:application

The set lives in process memory, so each WSGI worker process holds
its own copy. Run a single worker when clients must share one set.
"""

from a2wsgi import ASGIMiddleware

from setservice.main import app

application = ASGIMiddleware(app)
