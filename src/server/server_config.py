"""Server-side limits and settings."""

from __future__ import annotations

import os

from orgtree.config import ORGTREE_LOG_LEVEL, ORGTREE_MAX_INPUT_KB
from orgtree.utils.logging_config import configure_logging

MAX_INPUT_SIZE_KB = ORGTREE_MAX_INPUT_KB
MAX_INPUT_SIZE = MAX_INPUT_SIZE_KB * 1024  # characters

# Level of uvicorn's own loggers (startup, errors, access lines).
UVICORN_LOG_LEVEL = os.getenv("UVICORN_LOG_LEVEL", "INFO").upper()


def configure_server_logging() -> None:
    """Send the package loggers and uvicorn's loggers through one handler."""
    configure_logging(ORGTREE_LOG_LEVEL, extra_loggers={"uvicorn": UVICORN_LOG_LEVEL})
