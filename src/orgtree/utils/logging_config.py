"""Structured logging setup shared by the CLI and the HTTP server."""

from __future__ import annotations

import logging
import sys
from typing import Any, Mapping

import structlog

from orgtree.config import ORGTREE_LOG_LEVEL

_PACKAGE_LOGGERS = ("orgtree", "server")
_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Applied to structlog events and to records from plain ``logging`` loggers alike.
_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]

_configured = False


def configure_logging(level: str | None = None, *, extra_loggers: Mapping[str, str] | None = None) -> None:
    """Route structlog and standard library logging through one stderr handler.

    Events render as ``key=value`` pairs. Module loggers created with
    ``logging.getLogger(__name__)`` share the handler, so their records are
    rendered the same way.

    Args:
        level: Log level name for the ``orgtree`` and ``server`` loggers.
            Defaults to ``ORGTREE_LOG_LEVEL``; unknown names fall back to WARNING.
        extra_loggers: Further logger names mapped to their own level, for
            example ``{"uvicorn": "INFO"}``.
    """
    global _configured

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "logger", "event"], sort_keys=True),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    levels = dict.fromkeys(_PACKAGE_LOGGERS, _level_name(level or ORGTREE_LOG_LEVEL))
    levels.update({name: _level_name(value) for name, value in (extra_loggers or {}).items()})
    for name, level_name in levels.items():
        logger = logging.getLogger(name)
        logger.handlers = [handler]
        logger.setLevel(level_name)
        logger.propagate = False

    _configured = True


def get_logger(name: str) -> Any:
    """Return a structured logger, configuring logging on first use.

    Example:
        >>> logger = get_logger("orgtree.cli")
        >>> logger.info("Document parsed", input_chars=42)
    """
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)


def _level_name(level: str) -> str:
    level_name = level.upper()
    if level_name not in _VALID_LEVELS:
        return "WARNING"
    return level_name
