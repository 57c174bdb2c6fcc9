"""
Logging configuration and utilities
"""

import logging
import sys
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging settings, readable before the action configuration is."""

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    log_level: str = Field("INFO")
    log_format: str = Field("%(asctime)s - %(name)s - %(levelname)s - %(message)s")


@lru_cache()
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings instance"""
    return LoggingSettings()


def setup_logging(
    name: Optional[str] = None,
    level: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Setup logging configuration

    Args:
        name: Logger name
        level: Log level
        format_string: Log format string

    Returns:
        Configured logger instance
    """
    settings = get_logging_settings()

    log_level = level or settings.log_level
    log_format = format_string or settings.log_format

    logger = logging.getLogger(name or __name__)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # stdout carries machine readable output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    console_handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(console_handler)

    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return setup_logging(name)


class LoggerMixin:
    """Mixin class to add logging capability to other classes"""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class"""
        name = self.__class__.__name__
        existing = logging.getLogger(name)
        if existing.handlers:
            return existing
        return get_logger(name)
