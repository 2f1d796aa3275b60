"""Validation package."""

from finance_tracker.validation.dates import (
    INVALID_MONTH_KEY,
    month_key,
    validate_format,
)
from finance_tracker.validation.validator import TransactionValidator

__all__ = [
    "INVALID_MONTH_KEY",
    "TransactionValidator",
    "month_key",
    "validate_format",
]
