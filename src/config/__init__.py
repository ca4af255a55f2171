"""
Package: config
Description: Action configuration loaded from environment variables.
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
