"""Internal constants for Sakadate.

These constants define the era relationship between the Saka and
Gregorian calendars, the supported range, and the month tables used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Saka era relationship to the Gregorian calendar
# Saka year 0 is Gregorian year 78
SAKA_ERA_START: int = 78
# The Saka year begins 80 days into the Gregorian year (Mar 21 leap, Mar 22 otherwise)
SAKA_YEAR_START: int = 80

# Saka year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

MONTHS_IN_YEAR: int = 12
DAYS_IN_WEEK: int = 7

# Saka month lengths outside Chaitra
LONG_MONTH_DAYS: int = 31   # Vaisakha through Bhadra
SHORT_MONTH_DAYS: int = 30  # Asvina through Phalguna
LONG_MONTH_COUNT: int = 5
DAYS_IN_LONG_MONTHS: int = LONG_MONTH_DAYS * LONG_MONTH_COUNT  # 155

# Days in each Gregorian month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Julian Day Number reference points
# JDN 1721426 = 0001-01-01 (proleptic Gregorian), ordinal 1
JD_GREGORIAN_EPOCH: int = 1721426
JD_ORDINAL_OFFSET: int = JD_GREGORIAN_EPOCH - 1

# Range accepted by the calendar system: JDN 1 (4714 BCE) to 9999-12-31
EARLIEST_VALID_JD: int = 1
LATEST_VALID_JD: int = 5373484


__all__ = [
    "SAKA_ERA_START",
    "SAKA_YEAR_START",
    "MIN_YEAR",
    "MAX_YEAR",
    "MONTHS_IN_YEAR",
    "DAYS_IN_WEEK",
    "LONG_MONTH_DAYS",
    "SHORT_MONTH_DAYS",
    "LONG_MONTH_COUNT",
    "DAYS_IN_LONG_MONTHS",
    "DAYS_IN_MONTH",
    "JD_GREGORIAN_EPOCH",
    "JD_ORDINAL_OFFSET",
    "EARLIEST_VALID_JD",
    "LATEST_VALID_JD",
]
