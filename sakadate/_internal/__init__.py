"""Internal utilities for Sakadate.

This module contains private implementation details:
    - Era constants and month tables
    - Gregorian calendar / Julian Day Number utility
    - Validation helpers
    - Custom decorators (@deprecated)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from sakadate._internal.decorators import deprecated
from sakadate._internal.validation import (
    validate_day,
    validate_gregorian_date,
    validate_jd,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "deprecated",
    "validate_day",
    "validate_gregorian_date",
    "validate_jd",
    "validate_month",
    "validate_year",
]
