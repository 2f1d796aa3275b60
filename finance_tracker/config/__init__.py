"""Configuration package."""

from finance_tracker.config.settings import (
    AppSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "get_settings",
]
