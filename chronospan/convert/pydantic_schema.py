"""pydantic integration for Chronospan values.

Time, Date and DateTime can be used directly as fields of a pydantic
model. From JSON they are parsed from a string with ``build()`` and the
configured pattern; in Python mode an existing instance is accepted as-is
and a string is parsed. They always serialize to their ``to_string()``.

Examples:
    >>> from pydantic import BaseModel
    >>> from chronospan import Date
    >>> class Event(BaseModel):
    ...     on: Date
    >>> Event(on="2024-01-15").on
    Date(2024, 1, 15)
    >>> Event(on="2024-01-15").model_dump_json()
    '{"on":"2024-01-15"}'
"""

from __future__ import annotations

from typing import Any, Callable

from pydantic_core import core_schema

from chronospan.errors import ChronospanError


def _parser(cls: Any) -> Callable[[str], Any]:
    def parse(text: str) -> Any:
        try:
            return cls.build(text)
        except ChronospanError as e:
            # pydantic only reports ValueError and AssertionError as validation errors
            raise ValueError(str(e)) from e

    return parse


def text_core_schema(cls: Any) -> core_schema.CoreSchema:
    """Return the pydantic core schema for a value class with build()/to_string().

    Args:
        cls: Time, Date or DateTime.

    Returns:
        A schema that validates from strings and serializes to strings.
    """
    from_str = core_schema.chain_schema(
        [
            core_schema.str_schema(),
            core_schema.no_info_plain_validator_function(_parser(cls)),
        ]
    )
    return core_schema.json_or_python_schema(
        json_schema=from_str,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_str]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            lambda value: value.to_string(), when_used="always"
        ),
    )


__all__ = ["text_core_schema"]
