"""Gregorian calendar utilities for Sakadate.

This module provides internal functions for proleptic Gregorian
calendar calculations: leap year logic and conversion between
(year, month, day) triples and Julian Day Numbers (JDN).

JDN 1721426 = 0001-01-01 (proleptic Gregorian)
JDN 2451545 = 2000-01-01

Years use astronomical numbering (year 0 = 1 BCE) and are not range
limited here; Saka year 9999 lies in Gregorian year 10077.

This module is not part of the public API.
"""

from __future__ import annotations

from sakadate._internal.constants import DAYS_IN_MONTH, JD_ORDINAL_OFFSET


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2077)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given Gregorian month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for Gregorian leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 (last day of year 0 / 1 BCE) is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1
    # Floor division keeps this correct for years <= 0
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Works for any integer ordinal, including ordinals <= 0 (BCE dates),
    because divmod floors toward negative infinity and the Gregorian
    calendar repeats every 400 years.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)
    # 100-year cycles: 36524 days each (the last one in a 400 has one more)
    n100, n = divmod(n, 36524)
    # 4-year cycles: 1461 days each
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year closing a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert 1-indexed day-of-year to month and day."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def ymd_to_jd(year: int, month: int, day: int) -> int:
    """Convert a Gregorian year, month, day to a Julian Day Number.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The Julian Day Number.

    Examples:
        >>> ymd_to_jd(2000, 1, 1)
        2451545
        >>> ymd_to_jd(2000, 3, 21)
        2451625
    """
    return ymd_to_ordinal(year, month, day) + JD_ORDINAL_OFFSET


def jd_to_ymd(jd: int) -> tuple[int, int, int]:
    """Convert a Julian Day Number to a Gregorian year, month, day.

    Args:
        jd: The Julian Day Number.

    Returns:
        Tuple of (year, month, day).
    """
    return ordinal_to_ymd(jd - JD_ORDINAL_OFFSET)


def jd_to_day_of_week(jd: int) -> int:
    """Convert a Julian Day Number to day of week (Monday=0, Sunday=6).

    JDN 0 (4714 BCE November 24, proleptic Gregorian) was a Monday.
    """
    return jd % 7


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid Gregorian date.

    Args:
        year: The year to validate.
        month: The month to validate.
        day: The day to validate.

    Raises:
        ValueError: If the date is invalid.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValueError(
            f"day must be 1-{max_day} for {year}-{month:02d}, got {day}"
        )


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_jd",
    "jd_to_ymd",
    "jd_to_day_of_week",
    "validate_date",
]
