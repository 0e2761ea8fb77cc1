"""Era enumeration for Saka era designation.

This module provides the Era enum for distinguishing dates in the
Saka era from dates before it.
"""

from __future__ import annotations

from enum import Enum


class Era(Enum):
    """Saka era designation.

    Saka year 1 begins in Gregorian 79 CE. Year 0 exists (astronomical
    convention) and, with negative years, is before the Saka era.

    Examples:
        >>> Era.SAKA.is_before_saka_era
        False

        >>> Era.BEFORE_SAKA.is_before_saka_era
        True
    """

    BEFORE_SAKA = "BSE"  # Before Saka Era
    SAKA = "SE"  # Saka Era

    @property
    def is_before_saka_era(self) -> bool:
        """Return True if this era is before the Saka era."""
        return self == Era.BEFORE_SAKA

    @classmethod
    def for_year(cls, year: int) -> Era:
        """Return the era containing a Saka year."""
        return cls.BEFORE_SAKA if year <= 0 else cls.SAKA


__all__ = ["Era"]
