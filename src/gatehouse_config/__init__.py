"""Shared application configuration package."""

from .log_setup import configure_logging
from .settings import (
    Settings,
    clear_settings_cache,
    get_config_dir,
    get_settings,
)

__all__ = [
    "Settings",
    "clear_settings_cache",
    "configure_logging",
    "get_config_dir",
    "get_settings",
]
