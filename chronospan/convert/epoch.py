"""Epoch conversion utilities for DateTime.

Functions:
    to_unix_seconds / from_unix_seconds
    to_unix_millis / from_unix_millis
    to_unix_micros / from_unix_micros
    to_unix_nanos / from_unix_nanos

DateTime has no timezone; these conversions treat it as UTC. Values only
have second precision, so the sub-second part of a timestamp is dropped
(rounding toward negative infinity) and the *_millis / *_micros / *_nanos
exports are whole seconds scaled up.

Examples:
    >>> from chronospan import DateTime
    >>> to_unix_seconds(DateTime(1970, 1, 1))
    0
    >>> from_unix_millis(1_500).second
    1
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chronospan.core.datetime import DateTime


def to_unix_seconds(dt: DateTime) -> int:
    """Return Unix seconds for a DateTime.

    Examples:
        >>> from chronospan import DateTime
        >>> to_unix_seconds(DateTime(2024, 1, 15, 12, 30, 0))
        1705321800
    """
    return dt.timestamp()


def from_unix_seconds(seconds: int, fmt: str | None = None) -> DateTime:
    """Create a DateTime from Unix seconds.

    Raises:
        OverflowError: If the result is outside the supported years.
    """
    from chronospan.core.datetime import DateTime

    return DateTime.from_timestamp(seconds, fmt)


def to_unix_millis(dt: DateTime) -> int:
    """Return Unix milliseconds for a DateTime."""
    return dt.timestamp() * 1_000


def from_unix_millis(millis: int, fmt: str | None = None) -> DateTime:
    """Create a DateTime from Unix milliseconds."""
    from chronospan.core.datetime import DateTime

    return DateTime.from_timestamp_millis(millis, fmt)


def to_unix_micros(dt: DateTime) -> int:
    """Return Unix microseconds for a DateTime."""
    return dt.timestamp() * 1_000_000


def from_unix_micros(micros: int, fmt: str | None = None) -> DateTime:
    """Create a DateTime from Unix microseconds."""
    from chronospan.core.datetime import DateTime

    return DateTime.from_timestamp_micros(micros, fmt)


def to_unix_nanos(dt: DateTime) -> int:
    """Return Unix nanoseconds for a DateTime."""
    return dt.timestamp() * 1_000_000_000


def from_unix_nanos(nanos: int, fmt: str | None = None) -> DateTime:
    """Create a DateTime from Unix nanoseconds."""
    from chronospan.core.datetime import DateTime

    return DateTime.from_timestamp_nanos(nanos, fmt)


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
    "to_unix_micros",
    "from_unix_micros",
    "to_unix_nanos",
    "from_unix_nanos",
]
