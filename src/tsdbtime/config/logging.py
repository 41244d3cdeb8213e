"""Logging setup for the tsdbtime logger."""

import logging
import sys

from .settings import TSDBTimeSettings, get_settings

LOGGER_NAME = "tsdbtime"
LOG_FORMAT = "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s"


def configure_logging(settings: TSDBTimeSettings | None = None) -> logging.Logger:
    """
    Configure the package logger from settings.

    Handlers are attached only once; calling again just updates the level.

    Args:
        settings: Settings to use (defaults to the global settings)

    Returns:
        The configured ``tsdbtime`` logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
