"""Shared constants for cldrtables.

Constants are grouped by domain:
- Table shape: Fixed field counts and reserved keys
- Cache limits: Memory bounds for the table registry
- Input limits: Size constraints on persisted table files

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Table shape
    "TIME_ZONE_NAME_FIELD_COUNT",
    "TIME_ZONE_METADATA_PREFIX",
    "EXEMPLAR_CITY_PREFIX",
    "ROOT_LOCALE",
    "DEFAULT_LOCALE",
    # Persisted format
    "TABLE_FILE_SUFFIX",
    "DATA_PACKAGE",
    "PARENT_LOCALES_FILE",
    # Cache limits
    "MAX_TABLE_CACHE_SIZE",
    "MAX_FALLBACK_CHAIN_CACHE_SIZE",
    # Input limits
    "MAX_TABLE_SIZE",
]

# ============================================================================
# TABLE SHAPE
# ============================================================================

# long standard, short standard, long daylight, short daylight,
# long generic, short generic
TIME_ZONE_NAME_FIELD_COUNT: int = 6

# Timezone table keys under this prefix carry plain strings, never name sets.
TIME_ZONE_METADATA_PREFIX: str = "timezone."

EXEMPLAR_CITY_PREFIX: str = "timezone.excity."

# Terminal element of every fallback chain.
ROOT_LOCALE: str = "root"

# Used when the system locale cannot be determined.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# PERSISTED FORMAT
# ============================================================================

TABLE_FILE_SUFFIX: str = ".json"

# Package holding the bundled table files.
DATA_PACKAGE: str = "cldrtables.data"

# CLDR parentLocales map (parent -> children) matching the bundled tables.
PARENT_LOCALES_FILE: str = "parent_locales.json"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleTable instances per registry.
# Below the bundled table count, so preloading everything evicts.
MAX_TABLE_CACHE_SIZE: int = 128

MAX_FALLBACK_CHAIN_CACHE_SIZE: int = 256

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Largest bundled table is well under 100 KB; 10 MB means a broken file.
MAX_TABLE_SIZE: int = 10 * 1024 * 1024
