"""Configuration module for user-crud."""

from user_crud.config.settings import (
    DEFAULT_LOG_FORMAT,
    Settings,
    get_settings,
    load_settings,
)

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "Settings",
    "get_settings",
    "load_settings",
]
