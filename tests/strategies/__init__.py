"""Hypothesis strategies for cldrtables property-based testing.

- tables: keys, values and whole LocaleTable instances per domain
- locales: locale identifiers in BCP-47 and POSIX spellings

Usage:
    from tests.strategies import locale_tables, bundled_locales
"""

from .locales import bundled_locales, locale_identifiers, locale_spellings
from .tables import (
    format_data_values,
    locale_tables,
    table_keys,
    time_zone_name_sets,
    time_zone_tables,
)

__all__ = [
    "bundled_locales",
    "format_data_values",
    "locale_identifiers",
    "locale_spellings",
    "locale_tables",
    "table_keys",
    "time_zone_name_sets",
    "time_zone_tables",
]
