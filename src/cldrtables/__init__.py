"""cldrtables - Per-locale CLDR display-name tables behind a lookup contract.

Bundles CLDR-derived overrides for a subset of locales (currency names and
symbols, language and territory names, time zone names, format data) and
answers key lookups against them, exactly or along the CLDR locale
fallback chain.

Public API:
    TableRegistry - Cached table access with fallback (custom loaders)
    TableDomain - CurrencyNames, LocaleNames, TimeZoneNames, FormatData
    LocaleTable - Immutable per-locale table
    TimeZoneNames - Six-field time zone name set
    get_entries, get_table, lookup, lookup_with_fallback, resolve,
    available_locales - Shortcuts bound to the default registry

Exceptions:
    TableError - Base exception for table access
    TableNotFoundError - No table for (domain, locale)
    InvalidLocaleError - Unusable locale identifier
    DataIntegrityError - Base exception for data defects
    TableSchemaError - Malformed table document

Submodules:
    cldrtables.tables - Model, schema, codec, loaders and registry
    cldrtables.introspection - Currency, language, territory, time zone names
    cldrtables.locale_utils - Locale canonicalization and fallback chains
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .enums import TableDomain, TimeZoneNameField
from .errors import InvalidLocaleError, TableError, TableNotFoundError
from .integrity import DataIntegrityError, DuplicateKeyError, TableSchemaError
from .tables import (
    LocaleTable,
    ResolvedValue,
    TableRegistry,
    TimeZoneNames,
    get_default_registry,
)

if TYPE_CHECKING:
    from .tables.types import LocaleCode, TableEntry, TableKey, TableValue

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("cldrtables")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"


def get_entries(domain: TableDomain, locale: str) -> tuple[TableEntry, ...]:
    """Get every (key, value) pair of a bundled table.

    Raises:
        TableNotFoundError: If no table is bundled for (domain, locale)
    """
    return get_default_registry().get_entries(domain, locale)


def get_table(domain: TableDomain, locale: str) -> LocaleTable:
    """Get a bundled table."""
    return get_default_registry().get_table(domain, locale)


def lookup(domain: TableDomain, locale: str, key: TableKey) -> TableValue | None:
    """Look up a key in exactly one bundled table."""
    return get_default_registry().lookup(domain, locale, key)


def lookup_with_fallback(domain: TableDomain, locale: str, key: TableKey) -> TableValue | None:
    """Look up a key along the fallback chain of the locale."""
    return get_default_registry().lookup_with_fallback(domain, locale, key)


def resolve(domain: TableDomain, locale: str, key: TableKey) -> ResolvedValue | None:
    """Like lookup_with_fallback, but also report the locale that answered."""
    return get_default_registry().resolve(domain, locale, key)


def available_locales(domain: TableDomain) -> tuple[LocaleCode, ...]:
    """Return the sorted locales with a bundled table in a domain."""
    return get_default_registry().available_locales(domain)


__all__ = [
    "DataIntegrityError",
    "DuplicateKeyError",
    "InvalidLocaleError",
    "LocaleTable",
    "ResolvedValue",
    "TableDomain",
    "TableError",
    "TableNotFoundError",
    "TableRegistry",
    "TableSchemaError",
    "TimeZoneNameField",
    "TimeZoneNames",
    "__version__",
    "available_locales",
    "get_default_registry",
    "get_entries",
    "get_table",
    "lookup",
    "lookup_with_fallback",
    "resolve",
]
