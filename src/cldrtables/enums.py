"""Enumerations for cldrtables type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class TableDomain(StrEnum):
    """Data domain of a locale table.

    The value doubles as the file name prefix: ``CurrencyNames_ps.json``.
    """

    CURRENCY_NAMES = "CurrencyNames"
    """ISO 4217 symbols (uppercase keys) and display names (lowercase keys)."""

    LOCALE_NAMES = "LocaleNames"
    """Region, language and script display names plus ``type.*`` metadata keys."""

    TIME_ZONE_NAMES = "TimeZoneNames"
    """IANA zone IDs mapped to 6-field name sets, plus ``timezone.*`` strings."""

    FORMAT_DATA = "FormatData"
    """Month/day names, eras, date/time patterns and number symbols."""


class TimeZoneNameField(IntEnum):
    """Position of each name inside a timezone name set."""

    LONG_STANDARD = 0
    SHORT_STANDARD = 1
    LONG_DAYLIGHT = 2
    SHORT_DAYLIGHT = 3
    LONG_GENERIC = 4
    SHORT_GENERIC = 5


class LoadStatus(StrEnum):
    """Outcome of a single table load attempt.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Table decoded and validated."""

    NOT_FOUND = "not_found"
    """No table exists for the locale/domain pair."""

    ERROR = "error"
    """Table exists but could not be read or failed validation."""


__all__ = [
    "LoadStatus",
    "TableDomain",
    "TimeZoneNameField",
]
