"""
Logging setup for article_extractor.

Records from every ``article_extractor.*`` module go to one package logger.
Its console handler writes to stderr because stdout carries the extracted
text, and a file handler is added when the configuration names a log file.
The chatty third-party extraction libraries are held at WARNING unless the
configuration asks for DEBUG.
"""

import logging
import sys
from typing import Optional

from .models.config import ExtractorConfig

LOGGER_NAME = "article_extractor"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# readability-lxml logs every scoring step at INFO and DEBUG
THIRD_PARTY_LOGGERS = ("readability",)


def _add_handler(logger: logging.Logger, handler: logging.Handler, level: int, format_string: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(handler)


def setup_logging(
    config: Optional[ExtractorConfig] = None,
    format_string: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Set up logging for article_extractor from its configuration.

    Args:
        config: Extractor configuration; its log_level and log_file are used
            (defaults if None)
        format_string: Optional custom format string for log messages
        force: If True, reconfigure even if handlers exist

    Returns:
        The configured package logger
    """
    config = config or ExtractorConfig()
    format_string = format_string or DEFAULT_FORMAT
    level = getattr(logging, config.log_level, logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if force or not logger.handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        _add_handler(logger, logging.StreamHandler(sys.stderr), level, format_string)
        if config.log_file:
            _add_handler(logger, logging.FileHandler(config.log_file), level, format_string)

    logger.propagate = False

    third_party_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)

    logger.debug(f"Logging configured at {config.log_level}")
    return logger
