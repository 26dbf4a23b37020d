"""Unit enumerations.

Closed sets of addressable fields, one per value kind:
    - TimeUnit: HOUR, MINUTE, SECOND
    - DateUnit: YEAR, MONTH, DAY
    - DateTimeUnit: YEAR, MONTH, DAY, HOUR, MINUTE, SECOND
"""

from __future__ import annotations

from chronospan.units.dateunit import DateUnit
from chronospan.units.datetimeunit import DateTimeUnit
from chronospan.units.timeunit import TimeUnit

__all__: list[str] = [
    "DateUnit",
    "DateTimeUnit",
    "TimeUnit",
]
