"""
TMS Logging Configuration
Console and rotating-file handlers for the ``tms`` logger tree
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from .config import settings

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "tms"


def _rotating_handler(path: Path, level: int, max_mb: int, backups: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=max_mb * 1024 * 1024, backupCount=backups, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
    return handler


def setup_logging(log_level: Optional[str] = None, log_to_file: Optional[bool] = None) -> logging.Logger:
    """
    (Re)configure the ``tms`` logger.

    Always logs to stdout. With file logging on, also writes the full log and
    an errors-only log under LOG_DIR. Calling it again replaces the handlers.
    """
    level = logging.getLevelName((log_level or settings.LOG_LEVEL).upper())
    if not isinstance(level, int):
        level = logging.INFO
    to_file = settings.LOG_TO_FILE if log_to_file is None else log_to_file

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    logger.addHandler(console)

    if to_file:
        settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_rotating_handler(settings.LOG_DIR / settings.LOG_FILE, level, 10, 5))
        logger.addHandler(_rotating_handler(settings.LOG_DIR / settings.ERROR_LOG_FILE, logging.ERROR, 5, 3))

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``tms`` namespace, e.g. ``get_logger("main")`` -> ``tms.main``"""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
