"""Validation utilities for Sakadate.

This module provides checks that keep Saka and Gregorian values within
valid ranges before they reach the unchecked conversion arithmetic in
sakadate.core.conversion.

This module is not part of the public API.
"""

from __future__ import annotations

from sakadate._internal.constants import (
    EARLIEST_VALID_JD,
    LATEST_VALID_JD,
    MAX_YEAR,
    MIN_YEAR,
)
from sakadate.errors import ValidationError


def validate_year(year: int) -> None:
    """Validate that a Saka year is within the supported range.

    Args:
        year: The Saka year to validate.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month number is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given Saka year and month.

    Args:
        year: The Saka year.
        month: The Saka month number (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from sakadate.core.conversion import month_length
    from sakadate.units.month import month_index

    max_day = month_length(year, month_index(month))
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_jd(jd: int) -> None:
    """Validate that a Julian Day Number is within the supported date range.

    Args:
        jd: The Julian Day Number to validate.

    Raises:
        ValidationError: If jd is outside EARLIEST_VALID_JD to LATEST_VALID_JD.
    """
    if jd < EARLIEST_VALID_JD or jd > LATEST_VALID_JD:
        raise ValidationError(
            f"jd must be between {EARLIEST_VALID_JD} and {LATEST_VALID_JD}, got {jd}"
        )


def validate_gregorian_date(year: int, month: int, day: int) -> None:
    """Validate a Gregorian source date.

    Raises:
        ValidationError: If the triple is not a real Gregorian date.
    """
    from sakadate._internal.calendar import validate_date

    try:
        validate_date(year, month, day)
    except ValueError as e:
        raise ValidationError(f"invalid Gregorian date: {e}") from e


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_jd",
    "validate_gregorian_date",
]
