"""
WSGI compatibility layer.

Wraps the ASGI FastAPI application for deployment on WSGI servers
such as Gunicorn or Waitress. Prefer ASGI deployment when possible.
"""

import logging
from typing import Optional

from a2wsgi import ASGIMiddleware

from app.core.config import Settings
from app.main import create_app

logger = logging.getLogger(__name__)


def build_application(settings: Optional[Settings] = None) -> ASGIMiddleware:
    """Build a WSGI callable around a freshly created application.

    Ledger state is in memory, so every worker process that imports this
    module holds its own independent ledger.
    """
    asgi_app = create_app(settings)
    logger.info("WSGI application ready; ledger is local to this worker")
    return ASGIMiddleware(asgi_app)


application = build_application()
