"""strftime-style formatting and parsing.

This module compiles format patterns and uses them to render field values
to text and to parse text back into field values. It supports a minimal
subset of directives that covers common use cases while avoiding
locale-dependent behavior.

Supported Directives:
    %Y - Year, at least 4 digits, leading minus for negative years (e.g., 2024, -0044)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %H - 2-digit hour, 24-hour (00-23)
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59)
    %F - Shorthand for %Y-%m-%d
    %T - Shorthand for %H:%M:%S
    %R - Shorthand for %H:%M
    %% - Literal %

Any other character is copied (and matched) literally. Any other
directive raises FormatError the first time the pattern is used.

Functions:
    compile_format: Compile and cache a pattern.
    strftime: Render a mapping of field values with a pattern.
    strptime: Parse text with a pattern into a mapping of field values.

Examples:
    >>> strftime({"hour": 23, "minute": 17, "second": 12}, "T%H:%M:%SZ.000")
    'T23:17:12Z.000'

    >>> strptime("2024-01-15", "%Y-%m-%d")
    {'year': 2024, 'month': 1, 'day': 15}
"""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Collection, Mapping
from dataclasses import dataclass

from chronospan.errors import FormatError, ParseError

logger = logging.getLogger(__name__)

# Directive letter -> (field name, regex for parsing)
_FIELD_DIRECTIVES: dict[str, tuple[str, str]] = {
    "Y": ("year", r"(-?\d{4,})"),
    "m": ("month", r"(\d{2})"),
    "d": ("day", r"(\d{2})"),
    "H": ("hour", r"(\d{2})"),
    "M": ("minute", r"(\d{2})"),
    "S": ("second", r"(\d{2})"),
}

# Directive letter -> equivalent pattern
_SHORTHAND_DIRECTIVES: dict[str, str] = {
    "F": "%Y-%m-%d",
    "T": "%H:%M:%S",
    "R": "%H:%M",
}

_SUPPORTED = "%Y, %m, %d, %H, %M, %S, %F, %T, %R, %%"


@dataclass(frozen=True)
class CompiledFormat:
    """A parsed format pattern.

    Attributes:
        pattern: The source pattern.
        tokens: Sequence of (field, literal) pairs; exactly one side is set.
        regex: Full-match regex with one group per field token.
        fields: Field names referenced by the pattern.
    """

    pattern: str
    tokens: tuple[tuple[str | None, str], ...]
    regex: re.Pattern[str]
    fields: frozenset[str]

    @property
    def field_order(self) -> tuple[str, ...]:
        """Field names in the order their groups appear in the regex."""
        return tuple(field for field, _ in self.tokens if field is not None)


def _tokenize(pattern: str) -> list[tuple[str | None, str]]:
    tokens: list[tuple[str | None, str]] = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char != "%":
            tokens.append((None, char))
            i += 1
            continue

        if i + 1 >= len(pattern):
            raise FormatError(
                f"format {pattern!r} ends with a lone '%'",
                expected=f"one of {_SUPPORTED}",
            )

        letter = pattern[i + 1]
        if letter == "%":
            tokens.append((None, "%"))
        elif letter in _FIELD_DIRECTIVES:
            tokens.append((_FIELD_DIRECTIVES[letter][0], f"%{letter}"))
        elif letter in _SHORTHAND_DIRECTIVES:
            tokens.extend(_tokenize(_SHORTHAND_DIRECTIVES[letter]))
        else:
            raise FormatError(
                f"unsupported directive %{letter} in format {pattern!r}. "
                f"Supported: {_SUPPORTED}",
                expected=f"one of {_SUPPORTED}",
            )
        i += 2
    return tokens


def _merge_literals(tokens: list[tuple[str | None, str]]) -> tuple[tuple[str | None, str], ...]:
    merged: list[tuple[str | None, str]] = []
    for field, text in tokens:
        if field is None and merged and merged[-1][0] is None:
            merged[-1] = (None, merged[-1][1] + text)
        else:
            merged.append((field, text))
    return tuple(merged)


_PARSE_REGEX_BY_FIELD = {name: regex for name, regex in _FIELD_DIRECTIVES.values()}


@functools.lru_cache(maxsize=128)
def compile_format(pattern: str) -> CompiledFormat:
    """Compile a format pattern.

    Results are cached, so a pattern shared by many values is only
    tokenized once.

    Args:
        pattern: Format pattern with %-directives.

    Returns:
        The compiled pattern.

    Raises:
        FormatError: If the pattern is not a string, contains an unsupported
            directive or ends with a lone '%'.
    """
    if not isinstance(pattern, str):
        raise FormatError(
            f"format must be a string, got {type(pattern).__name__}",
            expected="str",
        )

    tokens = _merge_literals(_tokenize(pattern))
    regex = re.compile(
        "".join(
            _PARSE_REGEX_BY_FIELD[field] if field is not None else re.escape(text)
            for field, text in tokens
        )
    )
    fields = frozenset(field for field, _ in tokens if field is not None)
    logger.debug("compiled format %r with fields %s", pattern, sorted(fields))
    return CompiledFormat(pattern=pattern, tokens=tokens, regex=regex, fields=fields)


def check_fields(pattern: str, allowed: Collection[str], kind: str) -> CompiledFormat:
    """Compile a pattern and check it only references allowed fields.

    Args:
        pattern: Format pattern with %-directives.
        allowed: Field names the value kind has.
        kind: Value kind name for error messages.

    Returns:
        The compiled pattern.

    Raises:
        FormatError: If the pattern is invalid or references a field the
            value kind does not have.
    """
    compiled = compile_format(pattern)
    for field, directive in compiled.tokens:
        if field is not None and field not in allowed:
            raise FormatError(
                f"directive {directive} in format {pattern!r} requires {field}, "
                f"but {kind} has no {field}",
                kind=kind,
                field=field,
            )
    return compiled


def _format_field(field: str, value: int) -> str:
    if field == "year" and value < 0:
        return f"{value:05d}"  # Include minus sign
    if field == "year":
        return f"{value:04d}"
    return f"{value:02d}"


def strftime(values: Mapping[str, int], pattern: str, *, kind: str = "value") -> str:
    """Render field values with a format pattern.

    Args:
        values: Mapping of field names ("year", "hour", ...) to values.
        pattern: Format pattern with %-directives.
        kind: Value kind name for error messages.

    Returns:
        Formatted string.

    Raises:
        FormatError: If the pattern is invalid or references a field that
            is not in values.

    Examples:
        >>> strftime({"year": 2024, "month": 1, "day": 15}, "%d/%m/%Y")
        '15/01/2024'
    """
    compiled = check_fields(pattern, values.keys(), kind)
    return "".join(
        _format_field(field, values[field]) if field is not None else text
        for field, text in compiled.tokens
    )


def strptime(
    text: str,
    pattern: str,
    *,
    kind: str = "value",
    allowed: Collection[str] | None = None,
    required: Collection[str] = (),
    defaults: Mapping[str, int] | None = None,
) -> dict[str, int]:
    """Parse text strictly against a format pattern.

    The whole text must match. Values are not range-checked here; callers
    validate them against their own bounds.

    Args:
        text: The string to parse.
        pattern: Format pattern with %-directives.
        kind: Value kind name for error messages.
        allowed: If given, field names the pattern may reference.
        required: Field names that must be present after defaults apply.
        defaults: Values for fields the pattern does not provide.

    Returns:
        Mapping of field names to parsed integers.

    Raises:
        FormatError: If the pattern is invalid or references a field not in
            allowed.
        ParseError: If the text does not match, a field is not written the
            way strftime renders it, a field appears twice with different
            values, or a required field is missing.

    Examples:
        >>> strptime("12:30", "%H:%M", defaults={"second": 0})
        {'second': 0, 'hour': 12, 'minute': 30}
    """
    if allowed is not None:
        compiled = check_fields(pattern, allowed, kind)
    else:
        compiled = compile_format(pattern)

    if not isinstance(text, str):
        raise ParseError(
            f"expected str, got {type(text).__name__}", kind=kind, expected="str"
        )

    match = compiled.regex.fullmatch(text)
    if match is None:
        raise ParseError(
            f"input {text!r} does not match format {pattern!r}",
            kind=kind,
            expected=pattern,
        )

    parsed: dict[str, int] = dict(defaults or {})
    seen: set[str] = set()
    for field, raw in zip(compiled.field_order, match.groups()):
        value = int(raw)
        canonical = _format_field(field, value)
        if canonical != raw:
            # Only text that renders back unchanged is accepted
            raise ParseError(
                f"{field} {raw!r} is not in canonical form, expected {canonical!r}",
                kind=kind,
                field=field,
                expected=canonical,
            )
        if field in seen and parsed[field] != value:
            raise ParseError(
                f"conflicting values for {field}: {parsed[field]} and {value}",
                kind=kind,
                field=field,
            )
        parsed[field] = value
        seen.add(field)

    for field in required:
        if field not in parsed:
            raise ParseError(
                f"format {pattern!r} does not provide {field}",
                kind=kind,
                field=field,
            )
    return parsed


__all__ = ["CompiledFormat", "compile_format", "check_fields", "strftime", "strptime"]
