"""Calendar units and enumerations.

This module provides:
    - Era: Saka era designation enum
    - SakaMonth: The twelve Saka months
    - MonthIndex / MonthNumber: zero- and one-based month types
"""

from __future__ import annotations

from sakadate.units.era import Era
from sakadate.units.month import MonthIndex, MonthNumber, SakaMonth

__all__: list[str] = [
    "Era",
    "MonthIndex",
    "MonthNumber",
    "SakaMonth",
]
