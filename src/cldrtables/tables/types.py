"""Type aliases for the table domain.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cldrtables.tables.model import TimeZoneNames

__all__ = [
    "LocaleCode",
    "TableEntry",
    "TableKey",
    "TableValue",
]

type LocaleCode = str
"""Canonical CLDR locale identifier (e.g., 'ps', 'pt_PT', 'zh_Hant_HK', 'root')."""

type TableKey = str
"""Table key: currency code, region code, language subtag, zone ID or metadata key."""

type TableValue = str | TimeZoneNames | tuple[str, ...]
"""Display string, timezone name set, or FormatData string array."""

type TableEntry = tuple[TableKey, TableValue]
"""One (key, value) pair of a table."""
