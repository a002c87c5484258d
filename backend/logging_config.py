"""Logging setup for the bot service.

Decisions are logged under ``donkey.*`` and the web layer under
``donkey.backend``. httpx logs every request at INFO, which at one ranking
call per turn drowns the decision log, so it is held at WARNING unless DEBUG
is requested.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable

LOG_LEVEL_ENV = "DONKEY_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
CHATTY_LOGGERS = ("httpx", "httpcore")


def resolve_level(level: str | None = None) -> int:
    """Numeric level from ``level``, else ``DONKEY_LOG_LEVEL``, else INFO.

    Unknown names fall back to INFO rather than failing startup.
    """
    name = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    *,
    level: str | None = None,
    extra_loggers: Iterable[str] | None = None,
) -> logging.Logger:
    """Configure root handlers and align the bot, uvicorn and httpx loggers.

    Safe to call more than once; ``basicConfig`` only installs handlers once.

    Returns:
        The backend logger (``donkey.backend``).
    """
    resolved = resolve_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    for name in ("donkey", *UVICORN_LOGGERS, *(extra_loggers or ())):
        logging.getLogger(name).setLevel(resolved)

    chatty_level = resolved if resolved <= logging.DEBUG else logging.WARNING
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(chatty_level)

    app_logger = logging.getLogger("donkey.backend")
    app_logger.debug("Logging configured at %s", logging.getLevelName(resolved))
    return app_logger
