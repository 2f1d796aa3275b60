"""
Configuration Management for the Personal Finance Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here and every field has a
default, so the tracker starts with no environment at all. Settings only
affect presentation and logging, never ledger arithmetic.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from FINANCE_TRACKER_* environment variables
    and an optional .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="FINANCE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Display
    currency_symbol: str = Field(
        default="Rs.",
        max_length=8,
        description="Symbol printed in front of amounts"
    )
    amount_decimal_places: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Digits shown after the decimal point"
    )

    # Logging
    log_level: str = Field(
        default="ERROR",
        description="Minimum stdlib log level for structured logs"
    )
    log_json: bool = Field(
        default=True,
        description="Render logs as JSON (otherwise human-readable console output)"
    )
    audit_enabled: bool = Field(
        default=True,
        description="Record audit events for ledger activity"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return AppSettings()
