"""
Utility functions for customerror
"""

from .app_logger import configure_logging, get_logger
from .concurrent import ConcurrentDict
from .http_status import is_valid_status_code, status_text

__all__ = [
    "ConcurrentDict",
    "configure_logging",
    "get_logger",
    "is_valid_status_code",
    "status_text",
]
