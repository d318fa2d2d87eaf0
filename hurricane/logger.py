import logging
import sys
from pathlib import Path
from typing import Optional

from config import settings

LOGGER_NAME = "hurricane"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# Marks handlers installed here so repeated setup calls replace them instead of stacking.
_HANDLER_TAG = "_hurricane_handler"


def _tag(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    return handler


def setup_logging(level: Optional[str] = None, log_dir: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'hurricane' logger with a console handler and two file sinks:
    <log_dir>/combined.log receives every record at or above the level,
    <log_dir>/error.log receives ERROR and above.
    """
    level_name = (level or settings.get_log_level()).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    directory = Path(log_dir or settings.get_log_dir())
    directory.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = _tag(logging.StreamHandler(sys.stderr))
    console.setFormatter(formatter)

    combined = _tag(logging.FileHandler(directory / "combined.log", encoding="utf-8"))
    combined.setFormatter(formatter)

    errors = _tag(logging.FileHandler(directory / "error.log", encoding="utf-8"))
    errors.setLevel(logging.ERROR)
    errors.setFormatter(formatter)

    for handler in (console, combined, errors):
        logger.addHandler(handler)
    logger.setLevel(log_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
