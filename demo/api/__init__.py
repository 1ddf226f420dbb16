"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from demo.api import app

    uvicorn demo.api:app
"""

from demo.api.app import app, create_app

__all__ = ["app", "create_app"]
