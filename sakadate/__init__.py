"""Sakadate: Indian National (Saka) calendar dates for Python.

Sakadate converts between proleptic Gregorian dates, Julian Day Numbers,
and dates in the Indian National calendar, whose years are counted in
the Saka era and begin on Gregorian March 22 (March 21 in leap years).

Core Types:
    SakaDate: Calendar date (Saka year, month, day)
    IndianCalendar: Calendar system facade (epoch, valid range, queries)

Units:
    Era: Saka era designation
    SakaMonth: The twelve Saka months (Chaitra .. Phalguna)

Conversion Functions:
    gregorian_to_saka: Gregorian (y, m, d) -> Saka (y, m, d)
    saka_to_jd: Saka (y, m, d) -> Julian Day Number
    jd_to_saka: Julian Day Number -> Saka (y, m, d)
    month_length: Days in a Saka month (zero-based month index)

Exceptions:
    SakaDateError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string or JSON
    OverflowError: Arithmetic overflow

Example:
    >>> from sakadate import SakaDate
    >>> d = SakaDate.from_gregorian(2000, 3, 21)
    >>> d
    SakaDate(1922, 1, 1)
    >>> d.add_days(-1)
    SakaDate(1921, 12, 30)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from sakadate.core.calendar_system import IndianCalendar
from sakadate.core.date import SakaDate

# Conversion functions
from sakadate.core.conversion import (
    gregorian_to_saka,
    jd_from_saka,
    jd_to_saka,
    month_length,
    saka_month_and_day_of,
    saka_to_jd,
    saka_year_of,
)

# Units
from sakadate.units.era import Era
from sakadate.units.month import MonthIndex, MonthNumber, SakaMonth

# Exceptions
from sakadate.errors import (
    OverflowError,
    ParseError,
    SakaDateError,
    ValidationError,
)

# JSON
from sakadate.convert import from_json, to_json

__all__: list[str] = [
    "__version__",
    # Core types
    "IndianCalendar",
    "SakaDate",
    # Conversion functions
    "gregorian_to_saka",
    "jd_from_saka",
    "jd_to_saka",
    "month_length",
    "saka_month_and_day_of",
    "saka_to_jd",
    "saka_year_of",
    # Units
    "Era",
    "MonthIndex",
    "MonthNumber",
    "SakaMonth",
    # Exceptions
    "SakaDateError",
    "ValidationError",
    "ParseError",
    "OverflowError",
    # JSON
    "to_json",
    "from_json",
]
