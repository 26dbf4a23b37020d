"""Format configuration, formatting and parsing.

This module provides:
    - FormatConfig: Immutable set of time, date and datetime patterns
    - FormatBuilder: Builds a FormatConfig from optional overrides
    - get_default_config / set_default_config / reset_default_config:
      Manage the process-wide default configuration
    - strftime / strptime: Render and parse field values with a pattern

Examples:
    >>> from chronospan.format import FormatBuilder
    >>> FormatBuilder().date_format("%d/%m/%Y").build().datetime_format
    '%d/%m/%Y %H:%M:%S'
"""

from __future__ import annotations

from chronospan.format.config import (
    DEFAULT_CONFIG,
    FormatBuilder,
    FormatConfig,
    get_default_config,
    reset_default_config,
    set_default_config,
)
from chronospan.format.strftime import compile_format, strftime, strptime

__all__: list[str] = [
    # Configuration
    "DEFAULT_CONFIG",
    "FormatBuilder",
    "FormatConfig",
    "get_default_config",
    "reset_default_config",
    "set_default_config",
    # Patterns
    "compile_format",
    "strftime",
    "strptime",
]
