"""Internal implementation modules for Chronospan.

This package contains implementation details that are not part of
the public API. Do not import directly from this package.

Modules:
    constants: Internal constants (limits, default patterns)
    calendar: Calendar calculations (leap years, ordinals, month shifts)
    validation: Range checks shared by constructors and parsers
"""

from __future__ import annotations

__all__: list[str] = []
