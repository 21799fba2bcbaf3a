"""
logging_config.py — Centralized Logging Configuration for the exercise tracker

Sets up Loguru as the single logging backend. Intercepts Python's stdlib
logging module so uvicorn, SQLAlchemy and any getLogger() call route
through Loguru with the same format and the current request ID.

Business Rules:
- All logs go through Loguru (no direct print() or stdlib handlers)
- JSON format in production for machine parsing
- Human-readable format in development
- Request ID from middleware is included when available

Called by: app/main.py (lifespan)
Depends on: app/config.py (log_level, app_env)
"""

import logging
import sys

from loguru import logger

from .config import get_settings

_DEV_FORMAT = (
    "<green>{time:HH:mm:ss}</green> {level.icon} <level>{level: <8}</level> "
    "[<magenta>{extra[request_id]}</magenta>] <cyan>{name}:{line}</cyan> {message}"
)

_LOGURU_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


def setup_logging() -> None:
    """Configure Loguru and intercept stdlib logging.

    Safe to call more than once; each call replaces the previous handlers.
    """
    logger.remove()

    settings = get_settings()
    log_level = settings.log_level.upper()

    if settings.is_production:
        logger.add(sys.stdout, level=log_level, format="{message}", serialize=True)
    else:
        logger.add(sys.stdout, level=log_level, format=_DEV_FORMAT, colorize=True)

    # Records logged outside a request still need the key for the format
    logger.configure(extra={"request_id": "-"})

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)

    for noisy in ("uvicorn.access", "sqlalchemy.engine", "aiosqlite", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logger.info("Logging configured (level={}, production={})", log_level, settings.is_production)


class _StdlibBridge(logging.Handler):
    """Forward stdlib records to Loguru, attributed to the original call site."""

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int = record.levelname
        if level not in _LOGURU_LEVELS:
            level = record.levelno

        origin = {"name": record.name, "function": record.funcName, "line": record.lineno}
        logger.patch(lambda r: r.update(origin)).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )
