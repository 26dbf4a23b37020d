"""Chronospan: format-aware time, date and datetime values.

Chronospan parses values from a configurable textual format, updates them
field by field with calendar rollover, measures the time between them and
renders them back with the pattern they were built with.

Core Types:
    Time: Time of day (hour, minute, second), wrapping at midnight
    Date: Calendar date (year, month, day)
    DateTime: Combined date and time, carrying across days

Units:
    TimeUnit, DateUnit, DateTimeUnit: Fields addressable by update/matches

Configuration:
    FormatBuilder: Build a FormatConfig from optional overrides
    FormatConfig: The time, date and datetime patterns
    get_default_config / set_default_config / reset_default_config

Exceptions:
    ChronospanError: Base exception
    ValidationError: Invalid component values
    ParseError: Text does not match its pattern
    FormatError: Malformed or unsupported pattern
    ClockError: The clock could not supply "now"
    OverflowError: Year outside the supported range

Example:
    >>> from chronospan import DateTime, DateTimeUnit
    >>> dt = DateTime.build("2024-10-31 06:32:28")
    >>> str(dt.update(DateTimeUnit.MONTH, 1))
    '2024-11-30 06:32:28'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from chronospan.core.date import Date
from chronospan.core.datetime import DateTime
from chronospan.core.time import Time

# Units
from chronospan.units.dateunit import DateUnit
from chronospan.units.datetimeunit import DateTimeUnit
from chronospan.units.timeunit import TimeUnit

# Clock
from chronospan.clock import Clock, FixedClock, SystemClock

# Exceptions
from chronospan.errors import (
    ChronospanError,
    ClockError,
    FormatError,
    OverflowError,
    ParseError,
    ValidationError,
)

# Configuration
from chronospan.format.config import (
    FormatBuilder,
    FormatConfig,
    get_default_config,
    reset_default_config,
    set_default_config,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Time",
    # Units
    "DateUnit",
    "DateTimeUnit",
    "TimeUnit",
    # Clock
    "Clock",
    "FixedClock",
    "SystemClock",
    # Exceptions
    "ChronospanError",
    "ValidationError",
    "ParseError",
    "FormatError",
    "ClockError",
    "OverflowError",
    # Configuration
    "FormatBuilder",
    "FormatConfig",
    "get_default_config",
    "reset_default_config",
    "set_default_config",
]
