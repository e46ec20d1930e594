"""Configuration management for sqlite-statements.

Usage:
    >>> from sqlite_statements.config import get_settings
    >>> settings = get_settings()
    >>> settings.log_sql
    False
"""

from sqlite_statements.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
