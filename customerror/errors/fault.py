"""
Construction fault policy

Building an error from invalid inputs (a short message, an out of range status
code, a malformed language tag, ...) is a programming mistake. Outside of the
testing environment the whole process is terminated, whichever thread hit the
fault; with ``CUSTOMERROR_ENVIRONMENT=testing`` an ``InvalidCustomErrorFault``
is raised instead so tests can assert on it.
"""

import logging
import os
import sys
from typing import NoReturn, Optional

from customerror.config.settings import CustomErrorSettings
from customerror.utils.app_logger import get_logger

logger = get_logger(__name__)

FAULT_PREFIX = "Invalid custom error."
FAULT_EXIT_CODE = 1


class InvalidCustomErrorFault(RuntimeError):
    """Raised instead of terminating when running in the testing environment"""

    def __init__(self, message: str, reason: str = ""):
        super().__init__(message)
        self.reason = reason


def is_testing() -> bool:
    # Read at failure time so the switch can be flipped between tests.
    return CustomErrorSettings().is_testing


def _flush_logs() -> None:
    # os._exit skips interpreter shutdown, so buffered records would be lost.
    handlers = list(logger.handlers) + list(logging.getLogger().handlers)
    for handler in handlers:
        try:
            handler.flush()
        except (OSError, ValueError):
            pass
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError, AttributeError):
            pass


def abort(reason: str, error: Optional[BaseException] = None) -> NoReturn:
    """
    Report an invalid construction.

    Outside of testing this never returns: ``os._exit`` ends the process even
    from a worker thread, and no ``except BaseException`` can intercept it.

    Args:
        reason: What was wrong with the inputs
        error: Underlying library error, chained as ``__cause__``

    Raises:
        InvalidCustomErrorFault: in the testing environment
    """
    message = f"{FAULT_PREFIX} {reason}"
    if is_testing():
        raise InvalidCustomErrorFault(message, reason) from error

    logger.critical(message)
    _flush_logs()
    os._exit(FAULT_EXIT_CODE)
