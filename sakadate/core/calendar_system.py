"""Calendar system facade for the Indian National calendar.

IndianCalendar gathers the calendar-wide facts (epoch, valid range,
month and week counts, calendar kind) and offers query and construction
helpers that report invalid input with False or None instead of
raising. The class is stateless; a single instance can be shared freely.
"""

from __future__ import annotations

from sakadate._internal.calendar import is_leap_year as _is_gregorian_leap_year
from sakadate._internal.constants import (
    DAYS_IN_WEEK,
    EARLIEST_VALID_JD,
    JD_GREGORIAN_EPOCH,
    LATEST_VALID_JD,
    MONTHS_IN_YEAR,
)
from sakadate._internal.decorators import deprecated
from sakadate._internal.validation import validate_jd
from sakadate.core.conversion import jd_to_saka, month_length
from sakadate.core.date import SakaDate
from sakadate.errors import SakaDateError, ValidationError
from sakadate.units.month import MonthIndex


class IndianCalendar:
    """The Indian National (Saka) calendar system.

    Examples:
        >>> cal = IndianCalendar()
        >>> cal.calendar_type
        'indic'
        >>> cal.is_valid(1921, 1, 31)
        False
        >>> cal.set_date(1922, 1, 31)
        SakaDate(1922, 1, 31)
    """

    calendar_type: str = "indic"

    @property
    def epoch(self) -> SakaDate:
        """Return the calendar epoch (Gregorian 0001-01-01)."""
        return SakaDate.from_jd(JD_GREGORIAN_EPOCH)

    @property
    def earliest_valid_date(self) -> SakaDate:
        """Return the first supported date (Julian Day 1)."""
        return SakaDate.from_jd(EARLIEST_VALID_JD)

    @property
    def latest_valid_date(self) -> SakaDate:
        """Return the last supported date (Gregorian 9999-12-31)."""
        return SakaDate.from_jd(LATEST_VALID_JD)

    def is_valid(self, year: int, month: int, day: int) -> bool:
        """Return True if (year, month, day) is a valid Saka date."""
        try:
            SakaDate(year, month, day)
        except SakaDateError:
            return False
        return True

    def is_valid_date(self, date: SakaDate) -> bool:
        """Return True if date lies within the supported date range."""
        try:
            validate_jd(date.to_jd())
        except ValidationError:
            return False
        return True

    def set_date(self, year: int, month: int, day: int) -> SakaDate | None:
        """Return the SakaDate for (year, month, day), or None if invalid."""
        try:
            return SakaDate(year, month, day)
        except SakaDateError:
            return None

    @deprecated("Use set_date() instead")
    def set_ymd(self, year: int, month: int, day: int) -> SakaDate | None:
        """Return the SakaDate for (year, month, day), or None if invalid."""
        return self.set_date(year, month, day)

    def year(self, date: SakaDate) -> int:
        """Return the Saka year of date."""
        return date.year

    def month(self, date: SakaDate) -> int:
        """Return the one-based Saka month of date."""
        return date.month

    def day(self, date: SakaDate) -> int:
        """Return the day of the month of date."""
        return date.day

    def add_years(self, date: SakaDate, years: int) -> SakaDate:
        """Return date shifted by years, clamping the day to the month length."""
        return date.add_years(years)

    def add_months(self, date: SakaDate, months: int) -> SakaDate:
        """Return date shifted by months, clamping the day to the month length."""
        return date.add_months(months)

    def add_days(self, date: SakaDate, days: int) -> SakaDate:
        """Return date shifted by days."""
        return date.add_days(days)

    @property
    def months_in_year(self) -> int:
        """Return the number of months in a Saka year (12)."""
        return MONTHS_IN_YEAR

    @property
    def days_in_week(self) -> int:
        """Return the number of days in a week (7)."""
        return DAYS_IN_WEEK

    def days_in_year(self, date: SakaDate) -> int:
        """Return the number of days in the Saka year of date."""
        return date.days_in_year

    def days_in_month(self, date: SakaDate) -> int:
        """Return the number of days in the Saka month of date."""
        return date.days_in_month

    def day_of_year(self, date: SakaDate) -> int:
        """Return the one-based day of the Saka year."""
        return date.day_of_year

    def day_of_week(self, date: SakaDate) -> int:
        """Return the day of the week (0=Monday, 6=Sunday)."""
        return date.day_of_week

    def month_length(self, year: int, month: MonthIndex) -> int:
        """Return the length of a Saka month given its zero-based index."""
        return month_length(year, month)

    def is_leap_year(self, year: int) -> bool:
        """Return True if Gregorian year is a leap year.

        The Saka year y has a 31-day Chaitra exactly when
        is_leap_year(y + 78) is True.
        """
        return _is_gregorian_leap_year(year)

    @property
    def week_day_of_pray(self) -> int:
        """Return the weekly day of prayer (Sunday, 0=Monday convention)."""
        return 6

    @property
    def is_lunar(self) -> bool:
        """Return False; months do not follow the moon."""
        return False

    @property
    def is_lunisolar(self) -> bool:
        """Return False."""
        return False

    @property
    def is_solar(self) -> bool:
        """Return True; the year follows the Gregorian solar year."""
        return True

    @property
    def is_proleptic(self) -> bool:
        """Return False; dates before the 1957 adoption are extrapolated."""
        return False

    def julian_day_to_date(self, jd: int) -> tuple[int, int, int] | None:
        """Return the Saka (year, month, day) for a Julian Day, or None.

        None is returned for Julian Days outside the supported range.
        """
        try:
            validate_jd(jd)
        except ValidationError:
            return None
        return jd_to_saka(jd)

    def date_to_julian_day(self, year: int, month: int, day: int) -> int | None:
        """Return the Julian Day for a Saka date, or None if invalid."""
        date = self.set_date(year, month, day)
        if date is None:
            return None
        return date.to_jd()


__all__ = ["IndianCalendar"]
