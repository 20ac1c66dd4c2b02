# src/photokml/logging_config.py
"""Console and rotating file logging for the photokml command line."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .constants import LOG_BACKUP_COUNT, LOG_FORMAT, LOG_MAX_BYTES, TRACE

logging.addLevelName(TRACE, "TRACE")

LEVELS = {
    "off": logging.CRITICAL + 10,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}

# Handlers added by setup_logging, replaced on every call
_installed_handlers = []


def get_level(name: str) -> int:
    """Maps a level name (case-insensitive) to a logging level number."""
    try:
        return LEVELS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown log level: {name}") from None


def setup_logging(level: str = "info", file_level: str = "debug", log_file="logs/photokml.log") -> logging.Logger:
    """
    Configures the root logger with a console handler and a rotating file handler.

    Each handler filters at its own level, so the console can stay quiet while
    the log file keeps full diagnostics. If the log folder cannot be created
    only console logging is set up.

    Returns:
        The configured root logger.
    """
    console_level = get_level(level)
    file_log_level = get_level(file_level)
    formatter = logging.Formatter(LOG_FORMAT)

    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()
    root.setLevel(min(console_level, file_log_level))

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(formatter)
    root.addHandler(console)
    _installed_handlers.append(console)

    log_path = Path(log_file)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        )
    except OSError as e:
        root.error(f"Failed to create log file {log_path}: {e}")
    else:
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        _installed_handlers.append(file_handler)
        root.debug(f"Log directory {log_path.parent} created successfully")

    return root
