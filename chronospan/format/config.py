"""Format configuration and its builder.

A FormatConfig holds the three patterns (time, date, datetime) used to
parse and render values when no explicit pattern is given. It is
immutable once built and safe to share between threads.

The process-wide default starts as the fixed defaults and can be replaced
with set_default_config(). Replacing it swaps a single reference; values
built earlier keep the pattern they were built with.

Examples:
    >>> config = FormatBuilder().date_format("%d/%m/%Y").build()
    >>> config.date_format
    '%d/%m/%Y'
    >>> config.datetime_format
    '%d/%m/%Y %H:%M:%S'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chronospan._internal.constants import DEFAULT_DATE_FORMAT, DEFAULT_TIME_FORMAT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatConfig:
    """The patterns used by Time, Date and DateTime.

    Attributes:
        time_format: Pattern for Time values.
        date_format: Pattern for Date values.
        datetime_format: Pattern for DateTime values.
    """

    time_format: str = DEFAULT_TIME_FORMAT
    date_format: str = DEFAULT_DATE_FORMAT
    datetime_format: str = f"{DEFAULT_DATE_FORMAT} {DEFAULT_TIME_FORMAT}"

    @classmethod
    def default(cls) -> FormatConfig:
        """Return the configuration made of the fixed defaults."""
        return DEFAULT_CONFIG


DEFAULT_CONFIG = FormatConfig()


class FormatBuilder:
    """Build a FormatConfig from optional overrides.

    Each setter is optional and returns the builder. build() substitutes
    the fixed default for anything left unset; an unset datetime pattern
    is derived from the resolved date and time patterns. Patterns are not
    checked here; an invalid pattern raises FormatError on first use.

    Examples:
        >>> config = (
        ...     FormatBuilder()
        ...     .time_format("T%H:%M:%SZ.000")
        ...     .datetime_format("%Y-%m-%d %H:%M:%S")
        ...     .build()
        ... )
        >>> config.time_format
        'T%H:%M:%SZ.000'
    """

    def __init__(self) -> None:
        self._time_format: str | None = None
        self._date_format: str | None = None
        self._datetime_format: str | None = None

    def time_format(self, pattern: str) -> FormatBuilder:
        """Set the Time pattern."""
        self._time_format = pattern
        return self

    def date_format(self, pattern: str) -> FormatBuilder:
        """Set the Date pattern."""
        self._date_format = pattern
        return self

    def datetime_format(self, pattern: str) -> FormatBuilder:
        """Set the DateTime pattern."""
        self._datetime_format = pattern
        return self

    def build(self) -> FormatConfig:
        """Return a FormatConfig, filling unset patterns with defaults."""
        time_format = self._time_format if self._time_format is not None else DEFAULT_TIME_FORMAT
        date_format = self._date_format if self._date_format is not None else DEFAULT_DATE_FORMAT
        if self._datetime_format is not None:
            datetime_format = self._datetime_format
        else:
            datetime_format = f"{date_format} {time_format}"
        return FormatConfig(
            time_format=time_format,
            date_format=date_format,
            datetime_format=datetime_format,
        )

    def install(self) -> FormatConfig:
        """Build the configuration and make it the process-wide default."""
        config = self.build()
        set_default_config(config)
        return config

    def __repr__(self) -> str:
        return (
            f"FormatBuilder(time_format={self._time_format!r}, "
            f"date_format={self._date_format!r}, "
            f"datetime_format={self._datetime_format!r})"
        )


_default_config: FormatConfig = DEFAULT_CONFIG


def get_default_config() -> FormatConfig:
    """Return the configuration used when no explicit pattern is given."""
    return _default_config


def set_default_config(config: FormatConfig) -> None:
    """Install a configuration as the process-wide default.

    Raises:
        TypeError: If config is not a FormatConfig.
    """
    global _default_config

    if not isinstance(config, FormatConfig):
        raise TypeError(f"expected FormatConfig, got {type(config).__name__}")
    logger.debug("installing default format configuration %r", config)
    _default_config = config


def reset_default_config() -> None:
    """Restore the fixed default configuration."""
    set_default_config(DEFAULT_CONFIG)


__all__ = [
    "DEFAULT_CONFIG",
    "FormatBuilder",
    "FormatConfig",
    "get_default_config",
    "reset_default_config",
    "set_default_config",
]
