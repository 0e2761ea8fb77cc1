"""SakaDate class representing a date in the Indian National calendar.

This module provides the SakaDate class, an immutable calendar date
in the Saka era backed by a Julian Day Number.
"""

from __future__ import annotations

import datetime
import re

from sakadate._internal.calendar import (
    jd_to_day_of_week,
    jd_to_ymd,
    ymd_to_jd,
)
from sakadate._internal.constants import MAX_YEAR, MIN_YEAR, MONTHS_IN_YEAR
from sakadate._internal.validation import (
    validate_day,
    validate_gregorian_date,
    validate_month,
    validate_year,
)
from sakadate.core.conversion import (
    chaitra_length,
    gregorian_to_saka,
    jd_to_saka,
    month_length,
    saka_to_jd,
)
from sakadate.errors import OverflowError, ParseError, ValidationError
from sakadate.units.era import Era
from sakadate.units.month import MonthIndex, SakaMonth, month_index

_STRING_PATTERN = re.compile(r"^([+-]?\d{4,})-(\d{2})-(\d{2})$")


class SakaDate:
    """A calendar date in the Indian National (Saka) calendar.

    SakaDate represents a specific day with Saka year, month, and day
    components. Years before the Saka era are supported using
    astronomical numbering, where year 0 exists.

    Internal representation is the Julian Day Number; year, month and
    day are recomputed from it on access.

    Attributes:
        year: The Saka year (can be 0 or negative).
        month: The month (1-12, 1 = Chaitra).
        day: The day of the month (1-31).

    Examples:
        >>> d = SakaDate(1922, 1, 1)
        >>> d.to_gregorian()
        (2000, 3, 21)

        >>> SakaDate.from_gregorian(2000, 3, 20)
        SakaDate(1921, 12, 30)

        >>> SakaDate(1921, 1, 31)  # Gregorian 1999 is not a leap year
        Traceback (most recent call last):
        ...
        ValidationError: day must be between 1 and 30 for 1921-01, got 31
    """

    __slots__ = ("_jd",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a SakaDate from year, month, and day.

        Args:
            year: The Saka year.
            month: The month (1-12).
            day: The day of the month.

        Raises:
            ValidationError: If any component is out of range.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._jd = saka_to_jd(year, month, day)

    @classmethod
    def today(cls) -> SakaDate:
        """Return today's date in the local timezone."""
        return cls.from_date(datetime.date.today())

    @classmethod
    def from_jd(cls, jd: int) -> SakaDate:
        """Create a SakaDate from a Julian Day Number.

        Raises:
            ValidationError: If the resulting Saka year is out of range.

        Examples:
            >>> SakaDate.from_jd(2451625)
            SakaDate(1922, 1, 1)
        """
        year, month, day = jd_to_saka(jd)
        return cls(year, month, day)

    @classmethod
    def from_gregorian(cls, year: int, month: int, day: int) -> SakaDate:
        """Create a SakaDate from a proleptic Gregorian date.

        Raises:
            ValidationError: If the Gregorian date does not exist or the
                resulting Saka year is out of range.

        Examples:
            >>> SakaDate.from_gregorian(2024, 1, 15)
            SakaDate(1945, 10, 25)
        """
        validate_gregorian_date(year, month, day)
        return cls(*gregorian_to_saka(year, month, day))

    @classmethod
    def from_date(cls, date: datetime.date) -> SakaDate:
        """Create a SakaDate from a standard library date."""
        return cls.from_gregorian(date.year, date.month, date.day)

    @classmethod
    def from_string(cls, s: str) -> SakaDate:
        """Parse a Saka date from the numeric form YYYY-MM-DD.

        Negative years carry a leading minus and at least four digits.

        Raises:
            ParseError: If the string is not of the form YYYY-MM-DD.
            ValidationError: If the date components are invalid.

        Examples:
            >>> SakaDate.from_string("1922-01-01")
            SakaDate(1922, 1, 1)

            >>> SakaDate.from_string("-0010-07-15")
            SakaDate(-10, 7, 15)
        """
        match = _STRING_PATTERN.match(s)
        if not match:
            raise ParseError(
                f"Invalid Saka date format: {s!r}. "
                "Expected YYYY-MM-DD or -YYYY-MM-DD"
            )

        year = int(match.group(1))
        month = int(match.group(2))
        day = int(match.group(3))

        return cls(year, month, day)

    @classmethod
    def from_json(cls, data: dict) -> SakaDate:
        """Create a SakaDate from a JSON dictionary.

        Raises:
            ParseError: If the data is invalid.

        Examples:
            >>> SakaDate.from_json({'_type': 'SakaDate', 'value': '1922-01-01'})
            SakaDate(1922, 1, 1)
        """
        if not isinstance(data, dict):
            raise ParseError(f"expected dict, got {type(data).__name__}")

        value = data.get("value")
        if not value:
            raise ParseError("missing 'value' field for SakaDate")
        if not isinstance(value, str):
            raise ParseError(f"'value' must be a string, got {type(value).__name__}")

        return cls.from_string(value)

    @property
    def year(self) -> int:
        """Return the Saka year."""
        year, _, _ = jd_to_saka(self._jd)
        return year

    @property
    def month(self) -> int:
        """Return the month (1-12)."""
        _, month, _ = jd_to_saka(self._jd)
        return month

    @property
    def day(self) -> int:
        """Return the day of the month."""
        _, _, day = jd_to_saka(self._jd)
        return day

    @property
    def saka_month(self) -> SakaMonth:
        """Return the month as a SakaMonth.

        Examples:
            >>> SakaDate(1922, 1, 1).saka_month
            <SakaMonth.CHAITRA: 1>
        """
        return SakaMonth(self.month)

    @property
    def month_index(self) -> MonthIndex:
        """Return the zero-based month index (0 = Chaitra)."""
        return month_index(self.month)

    @property
    def day_of_week(self) -> int:
        """Return the day of the week (0=Monday, 6=Sunday).

        Examples:
            >>> SakaDate(1922, 1, 1).day_of_week  # 2000-03-21, a Tuesday
            1
        """
        return jd_to_day_of_week(self._jd)

    @property
    def day_of_year(self) -> int:
        """Return the day of the Saka year (1-366).

        Examples:
            >>> SakaDate(1922, 1, 1).day_of_year
            1
            >>> SakaDate(1922, 12, 30).day_of_year  # 31-day Chaitra
            366
        """
        year, _, _ = jd_to_saka(self._jd)
        return self._jd - saka_to_jd(year, 1, 1) + 1

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        year, month, _ = jd_to_saka(self._jd)
        return month_length(year, month_index(month))

    @property
    def days_in_year(self) -> int:
        """Return the number of days in this date's Saka year (365 or 366)."""
        return 366 if self.is_leap_year else 365

    @property
    def months_in_year(self) -> int:
        """Return the number of months in a Saka year (always 12)."""
        return MONTHS_IN_YEAR

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date's Saka year has a 31-day Chaitra."""
        return chaitra_length(self.year) == 31

    @property
    def era(self) -> Era:
        """Return the era for this date.

        Examples:
            >>> SakaDate(1922, 1, 1).era
            <Era.SAKA: 'SE'>
            >>> SakaDate(0, 1, 1).era
            <Era.BEFORE_SAKA: 'BSE'>
        """
        return Era.for_year(self.year)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> SakaDate:
        """Return a new SakaDate with specified components replaced.

        Raises:
            ValidationError: If the resulting date is invalid.

        Examples:
            >>> SakaDate(1922, 1, 15).replace(month=6)
            SakaDate(1922, 6, 15)
        """
        y, m, d = jd_to_saka(self._jd)
        new_year = year if year is not None else y
        new_month = month if month is not None else m
        new_day = day if day is not None else d
        return SakaDate(new_year, new_month, new_day)

    def add_days(self, days: int) -> SakaDate:
        """Return a new SakaDate offset by the given number of days.

        Raises:
            OverflowError: If the result is out of range.

        Examples:
            >>> SakaDate(1921, 12, 30).add_days(1)
            SakaDate(1922, 1, 1)
        """
        year, month, day = jd_to_saka(self._jd + days)
        return self._checked(year, month, day)

    def add_months(self, months: int) -> SakaDate:
        """Return a new SakaDate offset by the given number of months.

        If the day does not exist in the target month, it is clamped to
        the last day of that month.

        Raises:
            OverflowError: If the result is out of range.

        Examples:
            >>> SakaDate(1922, 6, 31).add_months(1)  # Asvina has 30 days
            SakaDate(1922, 7, 30)

            >>> SakaDate(1922, 12, 15).add_months(1)
            SakaDate(1923, 1, 15)
        """
        year, month, day = jd_to_saka(self._jd)

        total_months = year * MONTHS_IN_YEAR + (month - 1) + months
        new_year, new_index = divmod(total_months, MONTHS_IN_YEAR)

        new_day = min(day, month_length(new_year, MonthIndex(new_index)))
        return self._checked(new_year, new_index + 1, new_day)

    def add_years(self, years: int) -> SakaDate:
        """Return a new SakaDate offset by the given number of Saka years.

        Month and day are kept. Chaitra 31 moved into a year whose
        Chaitra has 30 days is clamped to Chaitra 30.

        Raises:
            OverflowError: If the result is out of range.

        Examples:
            >>> SakaDate(1922, 4, 10).add_years(1)
            SakaDate(1923, 4, 10)

            >>> SakaDate(1922, 1, 31).add_years(1)  # Gregorian 2001 is not leap
            SakaDate(1923, 1, 30)
        """
        year, month, day = jd_to_saka(self._jd)
        new_year = year + years

        new_day = min(day, month_length(new_year, month_index(month)))
        return self._checked(new_year, month, new_day)

    def _checked(self, year: int, month: int, day: int) -> SakaDate:
        """Build an arithmetic result, reporting range errors as overflow."""
        if year < MIN_YEAR or year > MAX_YEAR:
            raise OverflowError(
                f"result year {year} outside {MIN_YEAR}..{MAX_YEAR}"
            )
        return SakaDate(year, month, day)

    def to_jd(self) -> int:
        """Return the Julian Day Number for this date.

        Examples:
            >>> SakaDate(1922, 1, 1).to_jd()
            2451625
        """
        return self._jd

    def to_gregorian(self) -> tuple[int, int, int]:
        """Return the proleptic Gregorian (year, month, day) for this date."""
        return jd_to_ymd(self._jd)

    def to_date(self) -> datetime.date:
        """Return this date as a standard library date.

        Raises:
            ValidationError: If the Gregorian year is outside 1-9999,
                which datetime.date cannot represent.
        """
        year, month, day = jd_to_ymd(self._jd)
        if year < datetime.MINYEAR or year > datetime.MAXYEAR:
            raise ValidationError(
                f"Gregorian year {year} cannot be represented as datetime.date"
            )
        return datetime.date(year, month, day)

    def to_string(self) -> str:
        """Return the date in the numeric form YYYY-MM-DD.

        Examples:
            >>> SakaDate(1922, 1, 1).to_string()
            '1922-01-01'

            >>> SakaDate(-10, 7, 15).to_string()
            '-0010-07-15'
        """
        year, month, day = jd_to_saka(self._jd)
        if year >= 0:
            return f"{year:04d}-{month:02d}-{day:02d}"
        return f"{year:05d}-{month:02d}-{day:02d}"

    def to_json(self) -> dict:
        """Return the date as a JSON-serializable dictionary.

        Examples:
            >>> SakaDate(1922, 1, 1).to_json()
            {'_type': 'SakaDate', 'value': '1922-01-01'}
        """
        return {"_type": "SakaDate", "value": self.to_string()}

    def __sub__(self, other: object) -> int:
        """Return the number of days between two dates.

        Examples:
            >>> SakaDate(1922, 2, 1) - SakaDate(1922, 1, 1)
            31
        """
        if not isinstance(other, SakaDate):
            return NotImplemented  # type: ignore[return-value]
        return self._jd - other._jd

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SakaDate):
            return NotImplemented
        return self._jd == other._jd

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SakaDate):
            return NotImplemented
        return self._jd < other._jd

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SakaDate):
            return NotImplemented
        return self._jd <= other._jd

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SakaDate):
            return NotImplemented
        return self._jd > other._jd

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SakaDate):
            return NotImplemented
        return self._jd >= other._jd

    def __hash__(self) -> int:
        return hash(self._jd)

    def __repr__(self) -> str:
        year, month, day = jd_to_saka(self._jd)
        return f"SakaDate({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["SakaDate"]
