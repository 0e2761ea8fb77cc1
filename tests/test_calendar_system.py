"""Tests for the IndianCalendar calendar system facade."""

from __future__ import annotations

import warnings

import pytest

from sakadate import IndianCalendar, SakaDate


class TestCalendarFacts:
    """Tests for calendar-wide constants."""

    def test_calendar_type(self, calendar: IndianCalendar) -> None:
        """The calendar identifies itself as 'indic'."""
        assert calendar.calendar_type == "indic"

    def test_epoch(self, calendar: IndianCalendar) -> None:
        """The epoch is Gregorian 0001-01-01."""
        assert calendar.epoch.to_gregorian() == (1, 1, 1)
        assert calendar.epoch == SakaDate(-78, 10, 11)

    def test_valid_range(self, calendar: IndianCalendar) -> None:
        """The valid range runs from Julian Day 1 to Gregorian 9999-12-31."""
        assert calendar.earliest_valid_date.to_jd() == 1
        assert calendar.latest_valid_date.to_gregorian() == (9999, 12, 31)
        assert calendar.latest_valid_date == SakaDate(9921, 10, 10)

    def test_counts(self, calendar: IndianCalendar) -> None:
        """Twelve months, seven-day weeks."""
        assert calendar.months_in_year == 12
        assert calendar.days_in_week == 7

    def test_calendar_kind(self, calendar: IndianCalendar) -> None:
        """The calendar is solar and not proleptic."""
        assert calendar.is_solar is True
        assert calendar.is_lunar is False
        assert calendar.is_lunisolar is False
        assert calendar.is_proleptic is False

    def test_week_day_of_pray(self, calendar: IndianCalendar) -> None:
        """The day of prayer is Sunday."""
        assert calendar.week_day_of_pray == 6


class TestValidity:
    """Tests for is_valid(), is_valid_date() and set_date()."""

    def test_is_valid(self, calendar: IndianCalendar) -> None:
        """Valid triples return True, invalid ones False."""
        assert calendar.is_valid(1922, 1, 31) is True
        assert calendar.is_valid(1921, 1, 31) is False
        assert calendar.is_valid(1922, 13, 1) is False
        assert calendar.is_valid(1922, 7, 0) is False
        assert calendar.is_valid(10000, 1, 1) is False

    def test_is_valid_date(self, calendar: IndianCalendar) -> None:
        """Dates after Gregorian 9999-12-31 are outside the valid range."""
        assert calendar.is_valid_date(SakaDate(1922, 1, 1)) is True
        assert calendar.is_valid_date(calendar.latest_valid_date) is True
        assert calendar.is_valid_date(calendar.latest_valid_date.add_days(1)) is False
        assert calendar.is_valid_date(calendar.earliest_valid_date.add_days(-1)) is False

    def test_set_date(self, calendar: IndianCalendar) -> None:
        """set_date returns a SakaDate or None."""
        assert calendar.set_date(1922, 1, 1) == SakaDate(1922, 1, 1)
        assert calendar.set_date(1923, 1, 31) is None

    def test_set_ymd_is_deprecated(self, calendar: IndianCalendar) -> None:
        """set_ymd still works but warns."""
        with pytest.warns(DeprecationWarning, match="set_ymd is deprecated"):
            result = calendar.set_ymd(1922, 1, 1)
        assert result == SakaDate(1922, 1, 1)

    def test_set_ymd_marker_attributes(self) -> None:
        """set_ymd carries the deprecation markers."""
        assert IndianCalendar.set_ymd._deprecated is True
        assert "set_date" in IndianCalendar.set_ymd._deprecation_message

    def test_set_date_does_not_warn(self, calendar: IndianCalendar) -> None:
        """set_date emits no warning."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            calendar.set_date(1922, 1, 1)


class TestQueries:
    """Tests for per-date queries and arithmetic delegation."""

    def test_components(self, calendar: IndianCalendar) -> None:
        """year/month/day read the date's components."""
        d = SakaDate.from_gregorian(2000, 3, 20)
        assert calendar.year(d) == 1921
        assert calendar.month(d) == 12
        assert calendar.day(d) == 30

    def test_lengths(self, calendar: IndianCalendar) -> None:
        """Year and month lengths come from the date."""
        d = SakaDate(1922, 1, 10)
        assert calendar.days_in_year(d) == 366
        assert calendar.days_in_month(d) == 31
        assert calendar.month_length(1923, 0) == 30

    def test_day_of_year_and_week(self, calendar: IndianCalendar) -> None:
        """day_of_year and day_of_week delegate to the date."""
        d = SakaDate(1879, 1, 1)
        assert calendar.day_of_year(d) == 1
        assert calendar.day_of_week(d) == 4

    def test_arithmetic(self, calendar: IndianCalendar) -> None:
        """add_years/add_months/add_days delegate to the date."""
        d = SakaDate(1922, 1, 31)
        assert calendar.add_years(d, 1) == SakaDate(1923, 1, 30)
        assert calendar.add_months(d, 1) == SakaDate(1922, 2, 31)
        assert calendar.add_days(d, 1) == SakaDate(1922, 2, 1)

    def test_is_leap_year_is_gregorian(self, calendar: IndianCalendar) -> None:
        """is_leap_year applies the Gregorian rule to the given year."""
        assert calendar.is_leap_year(2000) is True
        assert calendar.is_leap_year(1900) is False


class TestJulianDay:
    """Tests for julian_day_to_date() and date_to_julian_day()."""

    def test_julian_day_to_date(self, calendar: IndianCalendar) -> None:
        """Valid Julian Days return a Saka triple."""
        assert calendar.julian_day_to_date(2451625) == (1922, 1, 1)

    def test_julian_day_to_date_out_of_range(self, calendar: IndianCalendar) -> None:
        """Julian Days outside the valid range return None."""
        assert calendar.julian_day_to_date(0) is None
        assert calendar.julian_day_to_date(5373485) is None

    def test_julian_day_to_date_range_ends(self, calendar: IndianCalendar) -> None:
        """Both ends of the valid range convert."""
        assert calendar.julian_day_to_date(1) is not None
        assert calendar.julian_day_to_date(5373484) == (9921, 10, 10)

    def test_is_valid_date_range_ends(self, calendar: IndianCalendar) -> None:
        """Dates one day past either end are outside the valid range."""
        assert calendar.is_valid_date(calendar.latest_valid_date) is True
        assert calendar.is_valid_date(calendar.latest_valid_date.add_days(1)) is False
        assert calendar.is_valid_date(calendar.earliest_valid_date.add_days(-1)) is False

    def test_date_to_julian_day(self, calendar: IndianCalendar) -> None:
        """Valid Saka triples return their Julian Day."""
        assert calendar.date_to_julian_day(1922, 1, 1) == 2451625

    def test_date_to_julian_day_invalid(self, calendar: IndianCalendar) -> None:
        """Invalid Saka triples return None."""
        assert calendar.date_to_julian_day(1921, 1, 31) is None

    def test_roundtrip(self, calendar: IndianCalendar) -> None:
        """The two directions agree."""
        for jd in range(2451500, 2452000, 7):
            ymd = calendar.julian_day_to_date(jd)
            assert ymd is not None
            assert calendar.date_to_julian_day(*ymd) == jd
