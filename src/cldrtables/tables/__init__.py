"""Locale table package: model, schema, codec, loaders and registry.

Submodules:
    types    - PEP 695 type aliases (LocaleCode, TableKey, TableValue, TableEntry)
    model    - LocaleTable, TimeZoneNames
    schema   - build_table() document validation
    codec    - JSON serialization (dumps_table, loads_table, read_table, write_table)
    config   - RegistryConfig
    loading  - TableLoader protocol, PathTableLoader, PackageTableLoader,
               FallbackInfo, TableLoadResult, LoadSummary
    registry - TableRegistry (cached access with CLDR fallback)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from cldrtables.enums import LoadStatus, TableDomain, TimeZoneNameField
from cldrtables.tables.codec import (
    decode_table_bytes,
    dumps_table,
    loads_table,
    read_table,
    to_document,
    write_table,
)
from cldrtables.tables.config import RegistryConfig
from cldrtables.tables.loading import (
    FallbackInfo,
    LoadSummary,
    PackageTableLoader,
    PathTableLoader,
    TableLoader,
    TableLoadResult,
    parse_table_file_name,
    table_file_name,
)
from cldrtables.tables.model import LocaleTable, TimeZoneNames
from cldrtables.tables.registry import ResolvedValue, TableRegistry, get_default_registry
from cldrtables.tables.schema import build_table
from cldrtables.tables.types import LocaleCode, TableEntry, TableKey, TableValue

__all__ = [
    # Registry
    "TableRegistry",
    "RegistryConfig",
    "ResolvedValue",
    "get_default_registry",
    # Model
    "LocaleTable",
    "TimeZoneNames",
    "TableDomain",
    "TimeZoneNameField",
    # Loaders
    "TableLoader",
    "PathTableLoader",
    "PackageTableLoader",
    "table_file_name",
    "parse_table_file_name",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "TableLoadResult",
    # Fallback observability
    "FallbackInfo",
    # Schema and codec
    "build_table",
    "decode_table_bytes",
    "dumps_table",
    "loads_table",
    "read_table",
    "to_document",
    "write_table",
    # Type aliases
    "LocaleCode",
    "TableEntry",
    "TableKey",
    "TableValue",
]
