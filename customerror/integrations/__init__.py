"""
Framework integrations
"""

from .fastapi import build_error_response, install_error_handlers, localize

__all__ = ["build_error_response", "install_error_handlers", "localize"]
