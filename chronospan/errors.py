"""Chronospan exception hierarchy.

All Chronospan-specific exceptions inherit from ChronospanError. Every
error can name the value kind it came from ("Time", "Date" or "DateTime"),
the field involved and what was expected, so callers can build an
actionable message without parsing the text.
"""

from __future__ import annotations


class ChronospanError(Exception):
    """Base exception for all Chronospan errors.

    Attributes:
        message: The bare error message.
        kind: The value kind that raised ("Time", "Date", "DateTime"), if any.
        field: The field involved (e.g. "month"), if any.
        expected: A description of the accepted values, if any.

    Examples:
        >>> str(ParseError("input is out of range", kind="Date"))
        'Date ➤ input is out of range'
    """

    def __init__(
        self,
        message: str,
        *,
        kind: str | None = None,
        field: str | None = None,
        expected: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.field = field
        self.expected = expected

    def with_kind(self, kind: str) -> ChronospanError:
        """Return this error tagged with a value kind, unless already tagged."""
        if self.kind is None:
            self.kind = kind
        return self

    def __str__(self) -> str:
        if self.kind:
            return f"{self.kind} ➤ {self.message}"
        return self.message


class ValidationError(ChronospanError):
    """Invalid component values.

    Raised when a value is constructed directly from components that are
    out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Hour value outside 0-23
    """

    pass


class ParseError(ChronospanError):
    """Failed to parse text against a format pattern.

    Examples:
        - Text does not match the pattern
        - A parsed field is out of range (month 13, hour 24, Feb 30)
        - A required field is missing from the pattern
    """

    pass


class FormatError(ChronospanError):
    """Malformed or unsupported format pattern.

    Patterns are opaque until first used, so this surfaces on the first
    parse or render that touches the pattern.

    Examples:
        - Unsupported directive such as %a
        - A trailing lone %
        - %Y used to render a Time
    """

    pass


class ClockError(ChronospanError):
    """The system clock could not supply the current time."""

    pass


class OverflowError(ChronospanError):
    """Arithmetic moved a value outside the representable year range.

    Examples:
        - Adding years past 9999
        - Subtracting days before -9999-01-01
    """

    pass


__all__ = [
    "ChronospanError",
    "ValidationError",
    "ParseError",
    "FormatError",
    "ClockError",
    "OverflowError",
]
