"""Conversion utilities.

This module converts values to and from other representations:
    - JSON dictionaries tagged with the value type
    - Unix epoch timestamps (seconds, milliseconds, microseconds, nanoseconds)

pydantic support lives in chronospan.convert.pydantic_schema and is
picked up automatically by pydantic models.

Examples:
    >>> from chronospan import DateTime
    >>> from chronospan.convert import to_json, from_json

    >>> dt = DateTime(2024, 1, 15, 14, 30, 45)
    >>> from_json(to_json(dt)) == dt
    True
"""

from __future__ import annotations

from chronospan.convert.epoch import (
    from_unix_micros,
    from_unix_millis,
    from_unix_nanos,
    from_unix_seconds,
    to_unix_micros,
    to_unix_millis,
    to_unix_nanos,
    to_unix_seconds,
)
from chronospan.convert.json import from_json, to_json

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # Epoch
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
    "to_unix_micros",
    "from_unix_micros",
    "to_unix_nanos",
    "from_unix_nanos",
]
