"""JSON serialization and deserialization for Chronospan values.

This module converts values to and from JSON-serializable dictionaries.
Each dictionary carries a type tag for polymorphic deserialization, the
rendered text and the pattern it was rendered with:

    {"_type": "Time", "value": "12:21:46", "format": "%H:%M:%S"}
    {"_type": "Date", "value": "09/10/2023", "format": "%d/%m/%Y"}
    {"_type": "DateTime", "value": "2024-01-15 14:30:00", "format": "%Y-%m-%d %H:%M:%S"}

A dictionary without "format" is parsed with the configured default
pattern for its type.

Examples:
    >>> from chronospan import Date
    >>> from chronospan.convert import to_json, from_json

    >>> data = to_json(Date(2024, 1, 15))
    >>> data["_type"]
    'Date'
    >>> from_json(data) == Date(2024, 1, 15)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from chronospan.errors import ParseError

if TYPE_CHECKING:
    from chronospan.core.date import Date
    from chronospan.core.datetime import DateTime
    from chronospan.core.time import Time

# Type alias for Chronospan values
ChronospanType = Union["Time", "Date", "DateTime"]


def read_payload(data: Any, kind: str) -> tuple[str, str | None]:
    """Extract the text and pattern from a JSON dictionary.

    Args:
        data: The dictionary to read.
        kind: The type name the dictionary must be tagged with.

    Returns:
        Tuple of (text, pattern or None).

    Raises:
        ParseError: If data is not a dict, is tagged with another type, or
            has no usable "value" or "format".
    """
    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}", kind=kind)

    type_name = data.get("_type", kind)
    if type_name != kind:
        raise ParseError(
            f"expected '_type' {kind!r}, got {type_name!r}", kind=kind, field="_type"
        )

    value = data.get("value")
    if not isinstance(value, str) or not value:
        raise ParseError(f"missing 'value' field for {kind}", kind=kind, field="value")

    fmt = data.get("format")
    if fmt is not None and not isinstance(fmt, str):
        raise ParseError(
            f"'format' must be a string, got {type(fmt).__name__}",
            kind=kind,
            field="format",
        )
    return value, fmt


def to_json(value: ChronospanType) -> dict[str, Any]:
    """Convert a value to a JSON-serializable dictionary.

    Raises:
        TypeError: If value is not a Time, Date or DateTime.

    Examples:
        >>> from chronospan import Time
        >>> to_json(Time(14, 30, 45))
        {'_type': 'Time', 'value': '14:30:45', 'format': '%H:%M:%S'}
    """
    # Import here to avoid circular imports
    from chronospan.core.date import Date
    from chronospan.core.datetime import DateTime
    from chronospan.core.time import Time

    if isinstance(value, (Time, Date, DateTime)):
        return value.to_json()
    raise TypeError(f"expected Time, Date, or DateTime, got {type(value).__name__}")


def from_json(data: dict[str, Any]) -> ChronospanType:
    """Create a value from a JSON dictionary.

    The dictionary must include a "_type" field naming the type to create.

    Raises:
        ParseError: If the data is missing required fields or the text does
            not match its pattern.
        TypeError: If "_type" is not a recognized type.

    Examples:
        >>> from_json({"_type": "Date", "value": "2024-01-15"})
        Date(2024, 1, 15)
    """
    # Import here to avoid circular imports
    from chronospan.core.date import Date
    from chronospan.core.datetime import DateTime
    from chronospan.core.time import Time

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")

    types: dict[str, type[Time] | type[Date] | type[DateTime]] = {
        "Time": Time,
        "Date": Date,
        "DateTime": DateTime,
    }
    if type_name not in types:
        raise TypeError(f"unknown value type: {type_name!r}")
    return types[type_name].from_json(data)


__all__ = ["to_json", "from_json", "read_payload"]
