"""Core value types.

This module provides the three value kinds:
    - Time: A time of day, wrapping at midnight
    - Date: A calendar date
    - DateTime: A date and time of day, carrying across days
"""

from __future__ import annotations

from chronospan.core.date import Date
from chronospan.core.datetime import DateTime
from chronospan.core.time import Time

__all__: list[str] = [
    "Date",
    "DateTime",
    "Time",
]
