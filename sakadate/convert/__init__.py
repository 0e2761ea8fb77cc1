"""Conversion utilities.

This module provides functions for converting Saka dates to and from
JSON-serializable dictionaries.

Examples:
    >>> from sakadate import SakaDate
    >>> from sakadate.convert import to_json, from_json

    >>> restored = from_json(to_json(SakaDate(1945, 10, 25)))
    >>> restored
    SakaDate(1945, 10, 25)
"""

from __future__ import annotations

from sakadate.convert.json import from_json, to_json

__all__ = [
    "to_json",
    "from_json",
]
