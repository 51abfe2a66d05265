"""Logging setup for the Virtual Stylist.

Every module logger gets a colored console handler (stderr) and a shared
rotating log file. The level comes from the caller, then ``LOG_LEVEL``,
then INFO; the CLI re-applies ``AppConfig.log_level`` to all ``stylist.*``
loggers once the configuration is loaded.
"""

import logging
import os
import time
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import colorlog


CONSOLE_FORMAT = "%(log_color)s%(levelname)-8s%(reset)s %(blue)s%(name)s%(reset)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}

LOG_FILE_NAME = "stylist.log"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def _resolve_level(level: Optional[str]) -> int:
    """Map a level name to its numeric value (argument > LOG_LEVEL > INFO)."""
    name = level if level is not None else os.environ.get('LOG_LEVEL', 'INFO')
    return getattr(logging, name.upper(), logging.INFO)


def _resolve_log_dir(log_dir: Optional[Path]) -> Path:
    """Pick the log directory: argument, then STYLIST_LOG_DIR, then <project>/logs."""
    if log_dir is not None:
        return Path(log_dir)
    env_log_dir = os.environ.get('STYLIST_LOG_DIR')
    if env_log_dir:
        return Path(env_log_dir)
    return Path(__file__).parent.parent.parent / "logs"


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        colorlog.ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT, log_colors=LOG_COLORS)
    )
    return handler


def _file_handler(level: int, log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _apply_level(logger: logging.Logger, log_level: int) -> None:
    logger.setLevel(log_level)
    for handler in logger.handlers:
        handler.setLevel(log_level)


def get_logger(name: str, log_dir: Optional[Path] = None, level: Optional[str] = None) -> logging.Logger:
    """Return the named logger, attaching console and file handlers on first use.

    Args:
        name: Logger name, usually ``__name__``
        log_dir: Directory for stylist.log (default: STYLIST_LOG_DIR or logs/)
        level: Level name; falls back to the LOG_LEVEL env var, then INFO

    Returns:
        Configured logger that does not propagate to the root logger
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    log_level = _resolve_level(level)
    logger.setLevel(log_level)
    logger.addHandler(_console_handler(log_level))
    logger.addHandler(_file_handler(log_level, _resolve_log_dir(log_dir)))
    logger.propagate = False
    return logger


@contextmanager
def log_execution_time(logger: logging.Logger, operation: str):
    """Log the start and duration of a block at DEBUG.

    Usage:
        with log_execution_time(logger, "external suggestion (chat:glm)"):
            external = await source.suggest(request)
    """
    logger.debug(f"Starting: {operation}")
    started = time.perf_counter()
    try:
        yield
    finally:
        logger.debug(f"Completed: {operation} in {time.perf_counter() - started:.3f}s")


def set_log_level(logger: logging.Logger, level: str) -> None:
    """Change the level of one logger and its handlers."""
    _apply_level(logger, _resolve_level(level))
    logger.info(f"Log level changed to {level.upper()}")


def set_package_log_level(level: str, package: str = "stylist") -> None:
    """Apply a level to every logger already created under ``package``.

    Module loggers do not propagate, so each one is updated in place.
    """
    log_level = _resolve_level(level)
    for name, candidate in list(logging.root.manager.loggerDict.items()):
        if not isinstance(candidate, logging.Logger):
            continue
        if name == package or name.startswith(package + "."):
            _apply_level(candidate, log_level)


def log_exception(logger: logging.Logger, operation: str, exception: Exception) -> None:
    """Log a failed operation at ERROR with its traceback."""
    logger.error(f"Failed: {operation}: {exception}", exc_info=exception)
