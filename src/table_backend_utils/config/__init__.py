"""Configuration management for table-backend-utils.

Usage:
    >>> from table_backend_utils.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.LOG_LEVEL)
"""

from table_backend_utils.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
