"""Core calendar types and conversions.

This module provides:
    - SakaDate: Calendar date in the Indian National (Saka) calendar
    - IndianCalendar: Calendar system facade (epoch, valid range, queries)
    - Conversion functions between Gregorian dates, Julian Day Numbers,
      and Saka dates
"""

from __future__ import annotations

from sakadate.core.calendar_system import IndianCalendar
from sakadate.core.conversion import (
    gregorian_to_saka,
    jd_from_saka,
    jd_to_saka,
    month_length,
    saka_month_and_day_of,
    saka_to_jd,
    saka_year_of,
)
from sakadate.core.date import SakaDate

__all__: list[str] = [
    "IndianCalendar",
    "SakaDate",
    "gregorian_to_saka",
    "jd_from_saka",
    "jd_to_saka",
    "month_length",
    "saka_month_and_day_of",
    "saka_to_jd",
    "saka_year_of",
]
