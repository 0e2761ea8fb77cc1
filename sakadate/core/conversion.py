"""Conversion between Gregorian dates and Saka dates.

The Indian National calendar shares its year length with the Gregorian
calendar. A Saka year starts on Gregorian March 22 (March 21 in Gregorian
leap years). Saka year Y starts in Gregorian year Y + 78. Month lengths
are fixed:

    Chaitra             30 days (31 when Y + 78 is a Gregorian leap year)
    Vaisakha - Bhadra   31 days each
    Asvina - Phalguna   30 days each

The forward conversion (saka_to_jd) and the inverse (gregorian_to_saka)
each derive the month boundaries on their own rather than sharing a
table; tests/test_conversion.py checks them against each other.

None of these functions validate their input. Results for out-of-range
months or days are undefined; SakaDate validates before calling in.
"""

from __future__ import annotations

from sakadate._internal.calendar import is_leap_year, jd_to_ymd, ymd_to_jd
from sakadate._internal.constants import (
    DAYS_IN_LONG_MONTHS,
    LONG_MONTH_COUNT,
    LONG_MONTH_DAYS,
    MONTHS_IN_YEAR,
    SAKA_ERA_START,
    SAKA_YEAR_START,
    SHORT_MONTH_DAYS,
)
from sakadate.units.month import MonthIndex, MonthNumber, month_number

# Days from the Saka new year to Gregorian January 1, less Chaitra:
# five 31-day months, three 30-day months (Asvina..Agrahayana) and the
# first 10 days of Pausa.
_DAYS_TO_JANUARY = DAYS_IN_LONG_MONTHS + SHORT_MONTH_DAYS * 3 + 10


def chaitra_length(year: int) -> int:
    """Return the length of Chaitra in a Saka year (30 or 31)."""
    return LONG_MONTH_DAYS if is_leap_year(year + SAKA_ERA_START) else SHORT_MONTH_DAYS


def month_length(year: int, month: MonthIndex) -> int:
    """Return the number of days in a Saka month.

    Month indexes outside 0-11 roll over into neighbouring years, so
    month_length(y, 12) is the length of Chaitra in year y + 1 and
    month_length(y, -1) is the length of Phalguna in year y - 1.

    Args:
        year: The Saka year.
        month: Zero-based month index (0 = Chaitra).

    Returns:
        30 or 31.

    Examples:
        >>> month_length(1922, 0)  # Gregorian 2000 is a leap year
        31
        >>> month_length(1999, 0)  # Gregorian 2077 is not
        30
        >>> month_length(1999, 5)
        31
    """
    if month < 0 or month >= MONTHS_IN_YEAR:
        carry, month = divmod(month, MONTHS_IN_YEAR)
        year += carry

    if month == 0:
        return chaitra_length(year)
    if 1 <= month <= LONG_MONTH_COUNT:
        return LONG_MONTH_DAYS
    return SHORT_MONTH_DAYS


def saka_to_jd(year: int, month: MonthNumber, day: int) -> int:
    """Convert a Saka date to a Julian Day Number.

    Args:
        year: The Saka year.
        month: One-based month number (1 = Chaitra).
        day: The day of the month.

    Returns:
        The Julian Day Number.

    Examples:
        >>> saka_to_jd(1922, 1, 1)  # 2000-03-21
        2451625
    """
    gregorian_year = year + SAKA_ERA_START

    if is_leap_year(gregorian_year):
        leap_month = LONG_MONTH_DAYS
        start = ymd_to_jd(gregorian_year, 3, 21)
    else:
        leap_month = SHORT_MONTH_DAYS
        start = ymd_to_jd(gregorian_year, 3, 22)

    if month == 1:
        return start + (day - 1)

    jd = start + leap_month
    jd += min(month - 2, LONG_MONTH_COUNT) * LONG_MONTH_DAYS
    if month >= 8:
        jd += (month - 7) * SHORT_MONTH_DAYS
    return jd + (day - 1)


jd_from_saka = saka_to_jd


def gregorian_to_saka(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Convert a Gregorian date to a Saka date.

    Args:
        year: The Gregorian year.
        month: The Gregorian month (1-12).
        day: The Gregorian day of the month.

    Returns:
        Tuple of (Saka year, one-based Saka month, day).

    Examples:
        >>> gregorian_to_saka(2000, 3, 21)
        (1922, 1, 1)
        >>> gregorian_to_saka(2000, 3, 20)
        (1921, 12, 30)
    """
    day_of_year = ymd_to_jd(year, month, day) - ymd_to_jd(year, 1, 1)
    saka_year = year - SAKA_ERA_START

    if day_of_year < SAKA_YEAR_START:
        # Jan 1 up to the new year belongs to the previous Saka year
        saka_year -= 1
        leap_month = LONG_MONTH_DAYS if is_leap_year(year - 1) else SHORT_MONTH_DAYS
        day_of_year += leap_month + _DAYS_TO_JANUARY
    else:
        leap_month = LONG_MONTH_DAYS if is_leap_year(year) else SHORT_MONTH_DAYS
        day_of_year -= SAKA_YEAR_START

    if day_of_year < leap_month:
        index = MonthIndex(0)
        saka_day = day_of_year + 1
    else:
        remaining = day_of_year - leap_month
        if remaining < DAYS_IN_LONG_MONTHS:
            index = MonthIndex(remaining // LONG_MONTH_DAYS + 1)
            saka_day = remaining % LONG_MONTH_DAYS + 1
        else:
            remaining -= DAYS_IN_LONG_MONTHS
            index = MonthIndex(remaining // SHORT_MONTH_DAYS + LONG_MONTH_COUNT + 1)
            saka_day = remaining % SHORT_MONTH_DAYS + 1

    # Unreachable: the largest index produced above is 11 (Phalguna).
    if index == MONTHS_IN_YEAR:
        index = MonthIndex(0)

    return (saka_year, month_number(index), saka_day)


def jd_to_saka(jd: int) -> tuple[int, int, int]:
    """Convert a Julian Day Number to a Saka (year, month, day)."""
    return gregorian_to_saka(*jd_to_ymd(jd))


def saka_year_of(year: int, month: int, day: int) -> int:
    """Return the Saka year containing a Gregorian date.

    Dates from January 1 up to the Saka new year belong to the Saka
    year that started in the previous Gregorian year.

    Examples:
        >>> saka_year_of(2000, 3, 21)
        1922
        >>> saka_year_of(2000, 1, 1)
        1921
    """
    saka_year, _, _ = gregorian_to_saka(year, month, day)
    return saka_year


def saka_month_and_day_of(year: int, month: int, day: int) -> tuple[int, int]:
    """Return the one-based Saka (month, day) for a Gregorian date."""
    _, saka_month, saka_day = gregorian_to_saka(year, month, day)
    return (saka_month, saka_day)


__all__ = [
    "chaitra_length",
    "month_length",
    "saka_to_jd",
    "jd_from_saka",
    "gregorian_to_saka",
    "jd_to_saka",
    "saka_year_of",
    "saka_month_and_day_of",
]
