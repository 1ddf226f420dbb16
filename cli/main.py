"""Hello World demo CLI — entry-point for running and inspecting the app.

Usage:
    python cli/main.py --help

Commands:
    serve        → start the HTTP listener (blocks until SIGINT / SIGTERM)
    page         → print the home page HTML
    show-config  → print the effective settings
"""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path

# Ensure the project root is on sys.path so that `from demo.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from dataclasses import asdict
from typing import Optional

import typer

from demo.config import settings
from demo.pages import HOME_PAGE

app = typer.Typer(
    name="demo",
    help="Hello World deployment demo.",
    no_args_is_help=True,
)


class LogLevel(str, Enum):
    critical = "critical"
    error = "error"
    warning = "warning"
    info = "info"
    debug = "debug"
    trace = "trace"


@app.command("serve")
def serve_cmd(
    host: Optional[str] = typer.Option(None, help="Interface to bind (default: SERVER_HOST)."),
    port: Optional[int] = typer.Option(
        None, min=1, max=65535, help="Port to bind (default: SERVER_PORT)."
    ),
    log_level: Optional[LogLevel] = typer.Option(
        None, "--log-level", help="Log level (default: LOG_LEVEL)."
    ),
) -> None:
    """Start the HTTP server and block until it is stopped."""
    from demo.server import serve

    serve(
        host=host,
        port=port,
        log_level=log_level.value if log_level is not None else None,
    )


@app.command("page")
def page() -> None:
    """Print the home page exactly as GET / returns it."""
    typer.echo(HOME_PAGE, nl=False)


@app.command("show-config")
def show_config() -> None:
    """Print the effective settings (environment and .env applied)."""
    for key, value in asdict(settings).items():
        typer.echo(f"{key} = {value}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
