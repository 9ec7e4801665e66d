"""
Unified configuration access point

    from customerror.config import get_settings

    if get_settings().is_testing:
        ...
"""

from .settings import CustomErrorSettings, Environment, get_settings, reload_settings

__all__ = [
    "CustomErrorSettings",
    "Environment",
    "get_settings",
    "reload_settings",
]
