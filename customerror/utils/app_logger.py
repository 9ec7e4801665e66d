"""
Logging utilities for customerror
"""

import logging
import sys
from typing import Optional, Union

LOGGER_NAMESPACE = "customerror"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Optional[Union[str, int]]) -> int:
    if level is None:
        # Imported here: the settings module itself imports customerror.utils.
        from customerror.config.settings import get_settings

        level = get_settings().log_level
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Names outside the ``customerror`` namespace are nested under it so a
    single ``configure_logging`` call controls every library logger.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override; defaults to CUSTOMERROR_LOG_LEVEL

    Returns:
        Configured logger instance
    """
    if name != LOGGER_NAMESPACE and not name.startswith(f"{LOGGER_NAMESPACE}."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    logger = logging.getLogger(name)

    # Don't add handlers if already configured
    if logger.handlers:
        return logger

    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    # Prevent duplicate logs
    logger.propagate = False

    return logger


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """
    Set the level of every logger in the customerror namespace.

    Args:
        level: Log level name or number; defaults to CUSTOMERROR_LOG_LEVEL
    """
    log_level = _resolve_level(level)

    logging.getLogger(LOGGER_NAMESPACE).setLevel(log_level)
    for name, logger in list(logging.root.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
            logger.setLevel(log_level)
            for handler in logger.handlers:
                handler.setLevel(log_level)
