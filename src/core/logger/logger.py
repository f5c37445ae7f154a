"""Logging setup backed by Rich."""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from src.core.config.settings import LoggingSettings, get_settings

_loggers: dict[str, logging.Logger] = {}

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    settings: LoggingSettings | None = None,
    level: str | None = None,
) -> None:
    """Configure the root logger.

    Args:
        settings: Logging settings. Uses global settings if not provided.
        level: Overrides the configured level (e.g. "DEBUG" for --verbose).
    """
    if settings is None:
        settings = get_settings().logging

    log_level = getattr(logging, (level or settings.level).upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler: RichHandler | logging.StreamHandler
    if settings.use_rich:
        console = Console(stderr=True)
        handler = RichHandler(
            console=console,
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            markup=False,
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.format))

    root_logger.addHandler(handler)

    if settings.file:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger by name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance. Logging is configured on first use.
    """
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
        if not logging.getLogger().handlers:
            setup_logging()

    return _loggers[name]
