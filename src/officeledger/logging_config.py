"""Logging setup for officeledger."""

import logging
import os
import sys
import threading
from typing import Any, Optional

_LOGGER_PREFIX = "officeledger"
LOG_LEVEL_ENV_VAR = "OFFICELEDGER_LOG_LEVEL"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False
_lock = threading.Lock()


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the officeledger namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


def resolve_log_level(level: Optional[str | int] = None) -> int:
    """Resolve a level name or number, falling back to OFFICELEDGER_LOG_LEVEL."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: '{level}'")
    return resolved


def configure_logging(
    *,
    level: Optional[str | int] = None,
    stream: Any = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Configure the officeledger logger hierarchy (idempotent)."""
    global _configured
    with _lock:
        if _configured:
            return

        root_logger = logging.getLogger(_LOGGER_PREFIX)
        root_logger.setLevel(resolve_log_level(level))
        root_logger.propagate = False

        h = handler if handler is not None else logging.StreamHandler(stream or sys.stderr)
        h.setFormatter(logging.Formatter(_LOG_FORMAT))
        root_logger.addHandler(h)
        _configured = True


def reset_logging() -> None:
    """Reset logging configuration. FOR TESTING ONLY."""
    global _configured
    with _lock:
        _configured = False
        logger = logging.getLogger(_LOGGER_PREFIX)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
