"""Saka month numbering.

The conversion routines use two month conventions: a zero-based month
index (0 = Chaitra) for month-length lookups and a one-based month
number (1 = Chaitra) everywhere callers see a month. They are kept as
distinct types so one cannot be passed where the other is expected
without an explicit conversion.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NewType

MonthIndex = NewType("MonthIndex", int)
"""Zero-based Saka month index, 0 (Chaitra) to 11 (Phalguna)."""

MonthNumber = NewType("MonthNumber", int)
"""One-based Saka month number, 1 (Chaitra) to 12 (Phalguna)."""


def month_index(month: int) -> MonthIndex:
    """Convert a one-based month number to a zero-based month index."""
    return MonthIndex(month - 1)


def month_number(index: int) -> MonthNumber:
    """Convert a zero-based month index to a one-based month number."""
    return MonthNumber(index + 1)


class SakaMonth(IntEnum):
    """The twelve months of the Indian National calendar.

    Member values are the one-based month numbers, so a SakaMonth can be
    passed anywhere a month number is accepted.

    Examples:
        >>> SakaMonth.CHAITRA == 1
        True
        >>> SakaMonth.PHALGUNA.index
        11
        >>> SakaMonth.from_index(5)
        <SakaMonth.BHADRA: 6>
    """

    CHAITRA = 1
    VAISAKHA = 2
    JYAISHTHA = 3
    ASADHA = 4
    SRAVANA = 5
    BHADRA = 6
    ASVINA = 7
    KARTIKA = 8
    AGRAHAYANA = 9
    PAUSA = 10
    MAGHA = 11
    PHALGUNA = 12

    @property
    def index(self) -> MonthIndex:
        """Return the zero-based month index."""
        return month_index(self.value)

    @property
    def is_long(self) -> bool:
        """Return True for the five months that always have 31 days.

        Chaitra is not included: its length depends on the year.
        """
        return SakaMonth.VAISAKHA <= self <= SakaMonth.BHADRA

    @classmethod
    def from_index(cls, index: int) -> SakaMonth:
        """Return the month for a zero-based index.

        Raises:
            ValueError: If index is outside 0-11.
        """
        return cls(month_number(index))


__all__ = [
    "MonthIndex",
    "MonthNumber",
    "SakaMonth",
    "month_index",
    "month_number",
]
