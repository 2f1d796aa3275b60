"""
Date format checks and month grouping keys.

Transaction dates are plain strings in DD-MM-YYYY form. Only the shape is
checked: ``99-99-9999`` is accepted. Grouping by month is done on the
MM-YYYY substring, without any calendar arithmetic.
"""

from typing import Any

DATE_FORMAT = "DD-MM-YYYY"
MONTH_KEY_FORMAT = "MM-YYYY"

# Bucket for dates that fail the format check
INVALID_MONTH_KEY = "00-0000"

_DATE_LENGTH = 10
_SEPARATOR_POSITIONS = (2, 5)
_ASCII_DIGITS = frozenset("0123456789")


def validate_format(date: Any) -> bool:
    """Return ``True`` when ``date`` has the exact shape DD-MM-YYYY."""

    if not isinstance(date, str) or len(date) != _DATE_LENGTH:
        return False
    for position, char in enumerate(date):
        if position in _SEPARATOR_POSITIONS:
            if char != "-":
                return False
        elif char not in _ASCII_DIGITS:
            return False
    return True


def month_key(date: Any) -> str:
    """Return the MM-YYYY part of ``date``, or ``INVALID_MONTH_KEY``."""

    if not validate_format(date):
        return INVALID_MONTH_KEY
    return date[3:10]
