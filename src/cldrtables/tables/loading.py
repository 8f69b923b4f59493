"""Table loading infrastructure for TableRegistry.

Provides the protocol for table loaders, a filesystem implementation with
path-traversal security, a loader for the tables bundled with this
package, and result/summary data structures for tracking load attempts.

Components:
    TableLoader - Protocol for loading tables (structural typing)
    PathTableLoader - Disk-based loader with path-traversal prevention
    PackageTableLoader - Loader for tables shipped inside a Python package
    FallbackInfo - Immutable record of a locale fallback event
    TableLoadResult - Immutable result of a single table load attempt
    LoadSummary - Immutable aggregate of load results

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from cldrtables.constants import DATA_PACKAGE, MAX_TABLE_SIZE, TABLE_FILE_SUFFIX
from cldrtables.enums import LoadStatus, TableDomain
from cldrtables.tables.codec import decode_table_bytes, read_table

if TYPE_CHECKING:
    from collections.abc import Iterable
    from importlib.resources.abc import Traversable

    from cldrtables.tables.model import LocaleTable
    from cldrtables.tables.types import LocaleCode, TableKey

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "TableLoader",
    # Concrete loaders
    "PathTableLoader",
    "PackageTableLoader",
    # File naming
    "table_file_name",
    "parse_table_file_name",
    # Fallback observability
    "FallbackInfo",
    # Load result types
    "TableLoadResult",
    "LoadSummary",
]


def table_file_name(domain: TableDomain, locale: LocaleCode) -> str:
    """Return the persisted file name of a table.

    Example:
        >>> table_file_name(TableDomain.TIME_ZONE_NAMES, "en_CA")
        'TimeZoneNames_en_CA.json'
    """
    return f"{domain}_{locale}{TABLE_FILE_SUFFIX}"


def parse_table_file_name(name: str) -> tuple[TableDomain, LocaleCode] | None:
    """Split a table file name into domain and locale.

    Returns:
        (domain, locale), or None if the name does not follow
        ``<Domain>_<locale>.json``

    Example:
        >>> parse_table_file_name("TimeZoneNames_zh_Hant_HK.json")
        (<TableDomain.TIME_ZONE_NAMES: 'TimeZoneNames'>, 'zh_Hant_HK')
        >>> parse_table_file_name("README.md") is None
        True
    """
    if not name.endswith(TABLE_FILE_SUFFIX):
        return None
    stem = name[: -len(TABLE_FILE_SUFFIX)]
    prefix, sep, locale = stem.partition("_")
    if not sep or not locale:
        return None
    try:
        return TableDomain(prefix), locale
    except ValueError:
        return None


def _validate_locale(locale: LocaleCode) -> None:
    """Validate locale code for path traversal attacks.

    Raises:
        ValueError: If locale contains unsafe path components
    """
    if not locale:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)
    if ".." in locale:
        msg = f"Path traversal sequences not allowed in locale: '{locale}'"
        raise ValueError(msg)
    if "/" in locale or "\\" in locale:
        msg = f"Path separators not allowed in locale: '{locale}'"
        raise ValueError(msg)


class TableLoader(Protocol):
    """Protocol for loading locale tables.

    Implementations return a validated LocaleTable for a domain/locale pair
    and report which locales they hold. This is a Protocol (structural
    typing) rather than an ABC so custom loaders need no base class.

    Example:
        >>> class InMemoryLoader:
        ...     def __init__(self, tables):
        ...         self._tables = {(t.domain, t.locale): t for t in tables}
        ...     def load(self, domain, locale):
        ...         try:
        ...             return self._tables[domain, locale]
        ...         except KeyError:
        ...             raise FileNotFoundError(f"{domain}_{locale}") from None
        ...     def available_locales(self, domain):
        ...         return tuple(sorted(l for d, l in self._tables if d == domain))
        ...     def describe_path(self, domain, locale):
        ...         return f"memory:{domain}_{locale}"
    """

    def load(self, domain: TableDomain, locale: LocaleCode) -> LocaleTable:
        """Load the table of one locale in one domain.

        Args:
            domain: Table domain
            locale: Canonical locale identifier

        Returns:
            Validated LocaleTable

        Raises:
            FileNotFoundError: If no table exists for this locale/domain
            TableSchemaError: If the table exists but is malformed
            OSError: If the table cannot be read
        """
        ...

    def available_locales(self, domain: TableDomain) -> tuple[LocaleCode, ...]:
        """Return the sorted locales that have a table in a domain."""
        ...

    def describe_path(self, domain: TableDomain, locale: LocaleCode) -> str:
        """Return human-readable location of a table for diagnostics."""
        ...


@dataclass(frozen=True, slots=True)
class PathTableLoader:
    """File system table loader.

    Reads ``<root_dir>/<Domain>_<locale>.json``.

    Security:
        Locale codes containing path separators or ".." are rejected, and
        every resolved path is verified to stay inside root_dir.

    Example:
        >>> loader = PathTableLoader("locale-data")
        >>> table = loader.load(TableDomain.CURRENCY_NAMES, "ps")
        # Loads from: locale-data/CurrencyNames_ps.json

    Attributes:
        root_dir: Directory holding table files
        max_table_bytes: Largest file accepted
    """

    root_dir: str | Path
    max_table_bytes: int = MAX_TABLE_SIZE
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory."""
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    @staticmethod
    def _is_safe_path(base_dir: Path, full_path: Path) -> bool:
        """Check if full_path resolves inside base_dir."""
        try:
            full_path.resolve().relative_to(base_dir.resolve())
            return True
        except ValueError:
            return False

    def _path_for(self, domain: TableDomain, locale: LocaleCode) -> Path:
        _validate_locale(locale)
        full_path = self._resolved_root / table_file_name(domain, locale)
        if not self._is_safe_path(self._resolved_root, full_path):
            msg = (
                "Path traversal detected: resolved path escapes root directory. "
                f"domain='{domain}', locale='{locale}'"
            )
            raise ValueError(msg)
        return full_path

    def describe_path(self, domain: TableDomain, locale: LocaleCode) -> str:
        """Return the file path a table would be read from."""
        return str(Path(self.root_dir) / table_file_name(domain, locale))

    def load(self, domain: TableDomain, locale: LocaleCode) -> LocaleTable:
        """Load and validate a table file.

        Raises:
            ValueError: If locale contains path traversal sequences
            FileNotFoundError: If the file doesn't exist
            TableSchemaError: If the file is malformed
        """
        return read_table(
            self._path_for(domain, locale),
            expected_domain=domain,
            expected_locale=locale,
            max_bytes=self.max_table_bytes,
        )

    def available_locales(self, domain: TableDomain) -> tuple[LocaleCode, ...]:
        """Return sorted locales with a table file in a domain."""
        if not self._resolved_root.is_dir():
            return ()
        return _collect_locales(
            (entry.name for entry in self._resolved_root.iterdir() if entry.is_file()), domain
        )


@dataclass(frozen=True, slots=True)
class PackageTableLoader:
    """Loader for tables shipped as package data.

    Uses importlib.resources, so it also works from zip imports.

    Attributes:
        package: Dotted name of the package holding table files
        max_table_bytes: Largest file accepted
    """

    package: str = DATA_PACKAGE
    max_table_bytes: int = MAX_TABLE_SIZE

    def _root(self) -> Traversable:
        return resources.files(self.package)

    def describe_path(self, domain: TableDomain, locale: LocaleCode) -> str:
        """Return package-relative location of a table."""
        return f"{self.package}:{table_file_name(domain, locale)}"

    def load(self, domain: TableDomain, locale: LocaleCode) -> LocaleTable:
        """Load and validate a bundled table.

        Raises:
            ValueError: If locale contains path traversal sequences
            FileNotFoundError: If the package has no such table
            TableSchemaError: If the table is malformed
        """
        _validate_locale(locale)
        name = table_file_name(domain, locale)
        resource = self._root().joinpath(name)
        if not resource.is_file():
            msg = f"No bundled table {name} in {self.package}"
            raise FileNotFoundError(msg)
        return decode_table_bytes(
            resource.read_bytes(),
            source=name,
            expected_domain=domain,
            expected_locale=locale,
            max_bytes=self.max_table_bytes,
        )

    def available_locales(self, domain: TableDomain) -> tuple[LocaleCode, ...]:
        """Return sorted locales with a bundled table in a domain."""
        return _collect_locales(
            (entry.name for entry in self._root().iterdir() if entry.is_file()), domain
        )


def _collect_locales(names: Iterable[str], domain: TableDomain) -> tuple[LocaleCode, ...]:
    locales: set[LocaleCode] = set()
    for name in names:
        parsed = parse_table_file_name(name)
        if parsed is not None and parsed[0] is domain:
            locales.add(parsed[1])
    return tuple(sorted(locales))


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when TableRegistry resolves a key
    from an ancestor locale instead of the requested one.

    Attributes:
        domain: Table domain searched
        requested_locale: The locale the caller asked for (canonical form)
        resolved_locale: The locale whose table contained the key
        key: The key that was resolved

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.domain}:{info.key} from {info.resolved_locale}")
        >>> registry = TableRegistry(on_fallback=log_fallback)
    """

    domain: TableDomain
    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    key: TableKey


@dataclass(frozen=True, slots=True)
class TableLoadResult:
    """Result of loading a single table.

    Attributes:
        domain: Table domain
        locale: Locale code (canonical form)
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        source_path: Human-readable location of the table
        entry_count: Number of entries if status is SUCCESS
    """

    domain: TableDomain
    locale: LocaleCode
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None
    entry_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check if table loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if table was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if table load failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of table load results.

    All statistics are computed properties derived from the ``results`` tuple.

    Example:
        >>> summary = registry.preload()
        >>> if summary.has_errors:
        ...     for result in summary.get_errors():
        ...         print(f"Failed: {result.source_path}: {result.error}")
    """

    results: tuple[TableLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of tables not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        """Check if any table failed to load with an error."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every attempted table was found and loaded."""
        return self.errors == 0 and self.not_found == 0

    def get_errors(self) -> tuple[TableLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[TableLoadResult, ...]:
        """Get all results where the table was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[TableLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_locale(self, locale: LocaleCode) -> tuple[TableLoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale == locale)

    def get_by_domain(self, domain: TableDomain) -> tuple[TableLoadResult, ...]:
        """Get all results for a specific domain."""
        return tuple(r for r in self.results if r.domain is domain)
