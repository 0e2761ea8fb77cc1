"""JSON serialization and deserialization for Saka dates.

Functions:
    to_json: Convert a SakaDate to a JSON-serializable dict.
    from_json: Create a SakaDate from a JSON dict.

The JSON format uses the numeric YYYY-MM-DD string with a type tag, plus
the Julian Day Number for consumers working in another calendar:

    {"_type": "SakaDate", "value": "1922-01-01", "jd": 2451625}

Examples:
    >>> from sakadate import SakaDate
    >>> from sakadate.convert import to_json, from_json

    >>> data = to_json(SakaDate(1922, 1, 1))
    >>> data['jd']
    2451625

    >>> from_json(data) == SakaDate(1922, 1, 1)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sakadate.errors import ParseError

if TYPE_CHECKING:
    from sakadate.core.date import SakaDate


def to_json(value: SakaDate) -> dict[str, Any]:
    """Convert a SakaDate to a JSON-serializable dictionary.

    Raises:
        TypeError: If value is not a SakaDate.
    """
    # Import here to avoid circular imports
    from sakadate.core.date import SakaDate

    if not isinstance(value, SakaDate):
        raise TypeError(f"expected SakaDate, got {type(value).__name__}")

    data = value.to_json()
    data["jd"] = value.to_jd()
    return data


def from_json(data: dict[str, Any]) -> SakaDate:
    """Create a SakaDate from a JSON dictionary.

    When both are present, `value` wins over `jd`; `jd` alone is enough.

    Args:
        data: A dictionary with `_type` and `value` and/or `jd` fields.

    Raises:
        ParseError: If the data is missing required fields, has an
            invalid format, or names an unknown `_type`.

    Examples:
        >>> from_json({'_type': 'SakaDate', 'value': '1945-10-25'})
        SakaDate(1945, 10, 25)

        >>> from_json({'_type': 'SakaDate', 'jd': 2451625})
        SakaDate(1922, 1, 1)
    """
    from sakadate.core.date import SakaDate

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")
    if type_name != "SakaDate":
        raise ParseError(f"unknown calendar type: {type_name!r}")

    value = data.get("value")
    if value:
        if not isinstance(value, str):
            raise ParseError(f"'value' must be a string, got {type(value).__name__}")
        return SakaDate.from_string(value)

    jd = data.get("jd")
    if jd is None:
        raise ParseError("missing 'value' or 'jd' field for SakaDate")
    if not isinstance(jd, int) or isinstance(jd, bool):
        raise ParseError(f"'jd' must be an integer, got {type(jd).__name__}")
    return SakaDate.from_jd(jd)


__all__ = ["to_json", "from_json"]
