# listify/core/log.py
"""
Process-wide logging setup.

One call to `setup_logging()` attaches a stderr stream handler and, when a log
file is configured, a rotating file handler to the ``listify`` logger. Modules
obtain loggers through `get_logger(__name__)`.

Environment
-----------
- LISTIFY_LOG_LEVEL  (default INFO)
- LISTIFY_LOG_FILE   (unset → no file handler)
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

ROOT_LOGGER_NAME = "listify"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_configured = False


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.getenv("LISTIFY_LOG_LEVEL") or "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: str | int | None = None,
    *,
    log_file: str | None = None,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
    force: bool = False,
) -> logging.Logger:
    """Configure the ``listify`` logger once (or again with force=True)."""
    global _configured
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured and not force:
        return logger

    lvl = _resolve_level(level)
    logger.setLevel(lvl)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    path = log_file or os.getenv("LISTIFY_LOG_FILE")
    if path:
        try:
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            fh = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
            fh.setFormatter(formatter)
            logger.addHandler(fh)
        except OSError as exc:
            # Stream logging keeps working without the file handler.
            logger.warning("Failed to initialize file logging at %s: %s", path, exc)

    _configured = True
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the ``listify`` namespace without forcing handler setup."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
