"""HTTP server bootstrap.

Binds a uvicorn listener to the configured address and serves the demo app
until SIGINT / SIGTERM.  A bind failure is fatal: uvicorn logs the error and
exits the process with a nonzero status.
"""

from __future__ import annotations

import copy
from typing import Any, Optional

import uvicorn
from uvicorn.config import LOG_LEVELS, LOGGING_CONFIG

from demo.config import settings


def build_log_config(level: str) -> dict[str, Any]:
    """Return uvicorn's logging config with the ``demo`` logger attached.

    The ``demo`` logger shares uvicorn's ``default`` handler so application
    and server lines come out in one format.  *level* is one of uvicorn's
    level names (``trace`` included).
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["loggers"]["demo"] = {
        "handlers": ["default"],
        "level": LOG_LEVELS[level.lower()],
        "propagate": False,
    }
    return config


def serve(
    host: Optional[str] = None,
    port: Optional[int] = None,
    log_level: Optional[str] = None,
) -> None:
    """Serve the app, blocking until shutdown.

    Arguments left as ``None`` fall back to ``demo.config.settings``.
    """
    from demo.api.app import app

    host = host if host is not None else settings.host
    port = port if port is not None else settings.port
    log_level = (log_level or settings.log_level).lower()

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=log_level,
        access_log=settings.access_log,
        log_config=build_log_config(log_level),
    )
