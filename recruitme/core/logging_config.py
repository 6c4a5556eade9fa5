"""
Logging setup for the RecruitMe API.

Every module logs through logging.getLogger(__name__); this module only wires
handlers once at startup and keeps credentials out of log lines.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Loggers that are too chatty at INFO for a request-per-line service
NOISY_LOGGERS = ("uvicorn", "uvicorn.access", "sqlalchemy.engine", "alembic.runtime.migration")

REDACTED = "***REDACTED***"
SENSITIVE_KEYS = (
    "password",
    "password_hash",
    "token",
    "secret",
    "authorization",
    "database_url",
)


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """
    Configure the root logger.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown names fall back to INFO
        log_file: Path of a rotating log file; stdout only when omitted
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(_handler(logging.StreamHandler(sys.stdout), level, CONSOLE_FORMAT))

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS)
        root.addHandler(_handler(file_handler, level, FILE_FORMAT))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def sanitize_log_data(data: dict) -> dict:
    """Return a copy of `data` with credential-like values replaced."""
    return {
        key: REDACTED if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS) else value
        for key, value in data.items()
    }
