"""Centralised settings for the Hello World demo.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv
from uvicorn.config import LOG_LEVELS

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in _TRUTHY


@dataclass
class Settings:
    app_name: str = field(
        default_factory=lambda: os.environ.get("APP_NAME", "Hello World")
    )

    # ------------------------------------------------------------------
    # Listener
    # ------------------------------------------------------------------
    host: str = field(
        default_factory=lambda: os.environ.get("SERVER_HOST", "0.0.0.0")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("SERVER_PORT", "8080"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "info").lower()
    )
    access_log: bool = field(
        default_factory=lambda: _env_flag("ACCESS_LOG", "true")
    )

    def __post_init__(self) -> None:
        if not 1 <= self.port <= 65535:
            raise ValueError(f"SERVER_PORT must be between 1 and 65535, got {self.port}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )


# Module-level singleton — import this everywhere:
#   from demo.config import settings
settings = Settings()
