"""Sakadate exception hierarchy.

All Sakadate-specific exceptions inherit from SakaDateError.
"""

from __future__ import annotations


class SakaDateError(Exception):
    """Base exception for all Sakadate errors."""

    pass


class ValidationError(SakaDateError):
    """Invalid input values.

    Raised when a calendar value is out of range or invalid.

    Examples:
        - Saka month value outside 1-12
        - Day value outside the month's length (Chaitra 31 in a 30-day year)
        - Gregorian source date that does not exist (2023-02-29)
    """

    pass


class ParseError(SakaDateError):
    """Failed to parse string or JSON representation.

    Examples:
        - String not of the form YYYY-MM-DD
        - JSON payload missing its 'value' field
        - JSON payload tagged with an unknown '_type'
    """

    pass


class OverflowError(SakaDateError):
    """Arithmetic operation exceeded representable range.

    Raised when date arithmetic produces a Saka year outside
    MIN_YEAR..MAX_YEAR.
    """

    pass


__all__ = [
    "SakaDateError",
    "ValidationError",
    "ParseError",
    "OverflowError",
]
