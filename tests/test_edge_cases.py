"""Edge case tests for Sakadate.

This module tests the internal decorators and validation helpers, and
the exception hierarchy as seen by callers.
"""

from __future__ import annotations

import warnings

import pytest

from sakadate import SakaDate
from sakadate.errors import (
    OverflowError,
    ParseError,
    SakaDateError,
    ValidationError,
)
from sakadate._internal.constants import (
    EARLIEST_VALID_JD,
    LATEST_VALID_JD,
    MAX_YEAR,
    MIN_YEAR,
)
from sakadate._internal.decorators import deprecated
from sakadate._internal.validation import (
    validate_day,
    validate_gregorian_date,
    validate_jd,
    validate_month,
    validate_year,
)


# ============================================================================
# Test @deprecated Decorator
# ============================================================================


class TestDeprecatedDecorator:
    """Tests for the @deprecated parameterized decorator."""

    def test_deprecated_emits_warning(self) -> None:
        """Test that @deprecated emits a DeprecationWarning."""

        @deprecated("Use new_function() instead")
        def old_function() -> str:
            return "old"

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            result = old_function()

            assert result == "old"
            assert len(w) == 1
            assert issubclass(w[0].category, DeprecationWarning)
            assert "old_function is deprecated" in str(w[0].message)
            assert "Use new_function() instead" in str(w[0].message)

    def test_deprecated_preserves_metadata(self) -> None:
        """Test that @deprecated preserves the name and docstring."""

        @deprecated("Old API")
        def documented_function() -> None:
            """This is the docstring."""

        assert documented_function.__name__ == "documented_function"
        assert documented_function.__doc__ == "This is the docstring."

    def test_deprecated_passes_arguments(self) -> None:
        """Test that @deprecated forwards positional and keyword arguments."""

        @deprecated("Use add_days() instead")
        def old_add(a: int, b: int = 0) -> int:
            return a + b

        with warnings.catch_warnings(record=True):
            warnings.simplefilter("always")
            assert old_add(3, b=4) == 7


# ============================================================================
# Test Validation Helpers
# ============================================================================


class TestValidation:
    """Tests for the validation helpers."""

    def test_validate_year_limits(self) -> None:
        """The year limits themselves are valid."""
        validate_year(MIN_YEAR)
        validate_year(MAX_YEAR)

    def test_validate_year_out_of_range(self) -> None:
        """One past either limit fails."""
        with pytest.raises(ValidationError):
            validate_year(MIN_YEAR - 1)
        with pytest.raises(ValidationError):
            validate_year(MAX_YEAR + 1)

    def test_validate_month(self) -> None:
        """Months 1-12 pass, others fail."""
        validate_month(1)
        validate_month(12)
        with pytest.raises(ValidationError, match="got 13"):
            validate_month(13)

    def test_validate_day_uses_saka_month_lengths(self) -> None:
        """Chaitra 31 depends on the year; Asvina 31 never exists."""
        validate_day(1922, 1, 31)
        with pytest.raises(ValidationError, match="for 1923-01, got 31"):
            validate_day(1923, 1, 31)
        with pytest.raises(ValidationError, match="between 1 and 30"):
            validate_day(1922, 7, 31)

    def test_validate_jd_limits(self) -> None:
        """The first and last supported Julian Days are valid."""
        validate_jd(EARLIEST_VALID_JD)
        validate_jd(LATEST_VALID_JD)

    def test_validate_jd_out_of_range(self) -> None:
        """Julian Days just outside the supported range fail."""
        with pytest.raises(ValidationError, match="jd must be between 1 and 5373484, got 0"):
            validate_jd(EARLIEST_VALID_JD - 1)
        with pytest.raises(ValidationError, match="got 5373485"):
            validate_jd(LATEST_VALID_JD + 1)

    def test_validate_gregorian_date(self) -> None:
        """Gregorian errors surface as ValidationError."""
        validate_gregorian_date(2000, 2, 29)
        with pytest.raises(ValidationError, match="invalid Gregorian date"):
            validate_gregorian_date(1900, 2, 29)

    def test_gregorian_error_chains_value_error(self) -> None:
        """The original ValueError is kept as the cause."""
        with pytest.raises(ValidationError) as excinfo:
            validate_gregorian_date(2023, 13, 1)
        assert isinstance(excinfo.value.__cause__, ValueError)


# ============================================================================
# Test Exception Hierarchy
# ============================================================================


class TestExceptionHierarchy:
    """Callers can catch every library error through SakaDateError."""

    def test_validation_error_is_catchable_as_base(self) -> None:
        with pytest.raises(SakaDateError):
            SakaDate(1922, 13, 1)

    def test_parse_error_is_catchable_as_base(self) -> None:
        with pytest.raises(SakaDateError):
            SakaDate.from_string("not a date")

    def test_overflow_error_is_catchable_as_base(self) -> None:
        with pytest.raises(SakaDateError):
            SakaDate(MAX_YEAR, 12, 1).add_months(1)

    def test_overflow_error_is_not_builtin(self) -> None:
        """The library OverflowError is distinct from the builtin."""
        import builtins

        assert OverflowError is not builtins.OverflowError
        assert not issubclass(ParseError, ValidationError)
