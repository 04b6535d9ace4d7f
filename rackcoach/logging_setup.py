"""Centralised logging setup for RackCoach.

- Configures a Rich console handler and a rotating file handler.
- Avoids duplicate handlers on repeated calls.
- Provides `REQUEST_ID_VAR` for propagating a request id via ContextVar.
"""
from __future__ import annotations

import logging
import os
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Id of the request being solved, visible to every module logger
REQUEST_ID_VAR: ContextVar[str] = ContextVar("request_id", default="-")


class _RequestIdFilter(logging.Filter):
    """Adds `request_id` from the ContextVar to every record.

    Installed on both the console and the file handler.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = REQUEST_ID_VAR.get()
        return True


def default_log_path() -> str:
    """Default log file path.

    `rackcoach.log` in the working directory, overridable with
    `RACKCOACH_LOG_PATH`.
    """

    env = os.getenv("RACKCOACH_LOG_PATH")
    if env:
        return env
    return str(Path.cwd() / "rackcoach.log")


def configure_logging(*, log_path: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Initialise logging once and return the project logger.

    - Rich on the console (readable tracebacks)
    - Rotating file handler (~1 MB, 5 backups)
    - Format includes `request_id` from `REQUEST_ID_VAR`
    """

    root = logging.getLogger()
    if root.handlers:
        return logging.getLogger("rackcoach")

    root.setLevel(logging.DEBUG if level <= logging.DEBUG else logging.INFO)
    request_filter = _RequestIdFilter()

    # Console on stderr, stdout may carry the MCP stdio stream
    ch = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
    ch.setLevel(level)
    ch.addFilter(request_filter)
    ch.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(ch)

    # Rotating file
    try:
        path = log_path or default_log_path()
        fh = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.addFilter(request_filter)
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s [request=%(request_id)s] %(message)s"
            )
        )
        root.addHandler(fh)
    except OSError:
        # Without a file keep at least the console
        root.warning("File logging disabled, cannot open %s", log_path or default_log_path())

    return logging.getLogger("rackcoach")
