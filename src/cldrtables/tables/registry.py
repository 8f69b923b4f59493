"""Cached table access with CLDR locale fallback.

TableRegistry is the single entry point for reading tables: it loads a
table on first access through a TableLoader, keeps it in a bounded LRU
cache, and answers exact lookups plus lookups along the CLDR fallback
chain (pt_PT -> pt -> root).

Key architectural decisions:
- Lazy loading: a table is decoded on first access, then served from cache
- Malformed tables raise on every access; they are never cached
- Missing keys and missing tables are None for lookups, not exceptions
- Locale arguments are canonicalized at the boundary

Thread Safety:
    Tables are immutable and shared without synchronization. The cache is
    an OrderedDict guarded by an RLock with double-checked insertion. A
    table is decoded outside the lock, so racing first accesses may decode
    twice, but only one instance is ever published.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from typing import TYPE_CHECKING

from cldrtables.enums import LoadStatus, TableDomain
from cldrtables.errors import TableNotFoundError
from cldrtables.integrity import DataIntegrityError
from cldrtables.locale_utils import canonicalize_locale, get_fallback_chain
from cldrtables.tables.config import RegistryConfig
from cldrtables.tables.loading import (
    FallbackInfo,
    LoadSummary,
    PackageTableLoader,
    TableLoader,
    TableLoadResult,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from cldrtables.tables.model import LocaleTable
    from cldrtables.tables.types import LocaleCode, TableEntry, TableKey, TableValue

__all__ = ["ResolvedValue", "TableRegistry", "get_default_registry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedValue:
    """A value found along a fallback chain, with the locale that held it.

    Attributes:
        value: The table value
        locale: Locale whose table contained the key
        is_fallback: True if locale is not the requested one
    """

    value: TableValue
    locale: LocaleCode
    is_fallback: bool


class TableRegistry:
    """Lazy, cached access to locale tables.

    Example - Bundled tables:
        >>> registry = TableRegistry()
        >>> registry.lookup(TableDomain.CURRENCY_NAMES, "ps", "AFN")
        '؋'
        >>> registry.lookup(TableDomain.LOCALE_NAMES, "dyo", "dyo")
        'joola'

    Example - Tables on disk:
        >>> registry = TableRegistry(PathTableLoader("locale-data"))
        >>> registry.lookup_with_fallback(TableDomain.LOCALE_NAMES, "pt-PT", "fr")
        # Tries pt_PT, then pt, then root

    Attributes:
        loader: Source of tables
        config: Cache and size limits
    """

    __slots__ = (
        "_cache",
        "_config",
        "_lock",
        "_loader",
        "_on_fallback",
    )

    def __init__(
        self,
        loader: TableLoader | None = None,
        *,
        config: RegistryConfig | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize a registry.

        Args:
            loader: Table source (default: tables bundled with this package).
                The loader's own size limit applies; config.max_table_bytes
                configures the default loader only.
            config: Cache and size limits (default: RegistryConfig())
            on_fallback: Optional callback invoked when lookup_with_fallback
                resolves a key from an ancestor locale.
        """
        self._config = config if config is not None else RegistryConfig()
        self._loader: TableLoader = (
            loader
            if loader is not None
            else PackageTableLoader(max_table_bytes=self._config.max_table_bytes)
        )
        self._on_fallback = on_fallback
        self._cache: OrderedDict[tuple[TableDomain, LocaleCode], LocaleTable] = OrderedDict()
        self._lock = RLock()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"TableRegistry(loader={self._loader!r}, cached={self.cache_size})"

    @property
    def loader(self) -> TableLoader:
        """Source of tables."""
        return self._loader

    @property
    def config(self) -> RegistryConfig:
        """Cache and size limits."""
        return self._config

    # ------------------------------------------------------------------
    # Table access
    # ------------------------------------------------------------------

    def _load(self, domain: TableDomain, locale: LocaleCode) -> LocaleTable:
        """Get a cached table or load it.

        Args:
            domain: Table domain
            locale: Canonical locale identifier

        Raises:
            TableNotFoundError: If the loader has no such table
            TableSchemaError: If the table is malformed
        """
        cache_key = (domain, locale)
        with self._lock:
            table = self._cache.get(cache_key)
            if table is not None:
                self._cache.move_to_end(cache_key)
                return table

        try:
            loaded = self._loader.load(domain, locale)
        except FileNotFoundError as e:
            raise TableNotFoundError(domain, locale) from e

        with self._lock:
            # Double-check: another thread may have published first
            table = self._cache.get(cache_key)
            if table is not None:
                return table
            if len(self._cache) >= self._config.cache_size:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug("Evicted table %s_%s", evicted[0], evicted[1])
            self._cache[cache_key] = loaded
        logger.debug("Loaded table %s_%s (%d entries)", domain, locale, len(loaded))
        return loaded

    def get_table(self, domain: TableDomain, locale: str) -> LocaleTable:
        """Get the table of one locale in one domain.

        Args:
            domain: Table domain
            locale: Locale identifier (BCP-47 or POSIX; canonicalized)

        Returns:
            Immutable LocaleTable

        Raises:
            InvalidLocaleError: If locale is malformed
            TableNotFoundError: If no such table exists
            TableSchemaError: If the table is malformed
        """
        return self._load(TableDomain(domain), canonicalize_locale(locale))

    def get_entries(self, domain: TableDomain, locale: str) -> tuple[TableEntry, ...]:
        """Get every (key, value) pair of one table, in stored order.

        Deterministic: repeated calls return equal data.

        Raises:
            InvalidLocaleError: If locale is malformed
            TableNotFoundError: If no such table exists
            TableSchemaError: If the table is malformed
        """
        return self.get_table(domain, locale).entries

    def has_table(self, domain: TableDomain, locale: str) -> bool:
        """Check whether a table exists (loading it if necessary).

        Raises:
            TableSchemaError: If the table exists but is malformed
        """
        try:
            self.get_table(domain, locale)
        except TableNotFoundError:
            return False
        return True

    def available_locales(self, domain: TableDomain) -> tuple[LocaleCode, ...]:
        """Return sorted locales for which the loader holds a table."""
        return self._loader.available_locales(TableDomain(domain))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _lookup_canonical(
        self, domain: TableDomain, locale: LocaleCode, key: TableKey
    ) -> TableValue | None:
        try:
            table = self._load(domain, locale)
        except TableNotFoundError:
            return None
        return table.get(key)

    def lookup(self, domain: TableDomain, locale: str, key: TableKey) -> TableValue | None:
        """Look up a key in exactly one table.

        Never consults other locales. Keys are matched exactly and
        case-sensitively.

        Returns:
            The value, or None if the key or the table is absent

        Raises:
            InvalidLocaleError: If locale is malformed
            TableSchemaError: If the table is malformed
        """
        return self._lookup_canonical(TableDomain(domain), canonicalize_locale(locale), key)

    def resolve(self, domain: TableDomain, locale: str, key: TableKey) -> ResolvedValue | None:
        """Look up a key along the locale's fallback chain.

        Walks from the requested locale through its CLDR ancestors to root
        and returns the first hit together with the locale that held it.
        Invokes on_fallback when the hit comes from an ancestor.

        Returns:
            ResolvedValue, or None once root is exhausted

        Raises:
            InvalidLocaleError: If locale is malformed
            TableSchemaError: If a table on the chain is malformed
        """
        domain = TableDomain(domain)
        chain = get_fallback_chain(locale)
        requested = chain[0]
        for candidate in chain:
            value = self._lookup_canonical(domain, candidate, key)
            if value is None:
                continue
            is_fallback = candidate != requested
            if is_fallback:
                logger.debug(
                    "Resolved %s '%s' from %s (requested %s)", domain, key, candidate, requested
                )
                if self._on_fallback is not None:
                    self._on_fallback(
                        FallbackInfo(
                            domain=domain,
                            requested_locale=requested,
                            resolved_locale=candidate,
                            key=key,
                        )
                    )
            return ResolvedValue(value=value, locale=candidate, is_fallback=is_fallback)
        return None

    def lookup_with_fallback(
        self, domain: TableDomain, locale: str, key: TableKey
    ) -> TableValue | None:
        """Look up a key, retrying less specific locales down to root.

        Returns:
            The first value found, or None once root is exhausted

        Raises:
            InvalidLocaleError: If locale is malformed
            TableSchemaError: If a table on the chain is malformed
        """
        resolved = self.resolve(domain, locale, key)
        return None if resolved is None else resolved.value

    # ------------------------------------------------------------------
    # Eager loading and cache management
    # ------------------------------------------------------------------

    def preload(
        self,
        domains: Iterable[TableDomain] | None = None,
        locales: Iterable[str] | None = None,
    ) -> LoadSummary:
        """Load tables eagerly and report the outcome of each attempt.

        Errors are captured in the summary, not raised.

        Args:
            domains: Domains to load (default: all; an empty iterable loads nothing)
            locales: Locales to load (default: every locale the loader
                holds for each domain)

        Returns:
            Immutable LoadSummary
        """
        domain_list = (
            tuple(TableDomain(d) for d in domains) if domains is not None else tuple(TableDomain)
        )
        locale_list = tuple(locales) if locales is not None else None

        results: list[TableLoadResult] = []
        for domain in domain_list:
            targets = locale_list if locale_list is not None else self.available_locales(domain)
            for locale in targets:
                results.append(self._preload_one(domain, locale))
        summary = LoadSummary(results=tuple(results))
        logger.debug("Preload finished: %r", summary)
        return summary

    def _preload_one(self, domain: TableDomain, locale: str) -> TableLoadResult:
        try:
            canonical = canonicalize_locale(locale)
        except ValueError as e:
            logger.warning("Skipping invalid locale %r: %s", locale, e)
            return TableLoadResult(domain=domain, locale=locale, status=LoadStatus.ERROR, error=e)

        source_path = self._loader.describe_path(domain, canonical)
        try:
            table = self._load(domain, canonical)
        except TableNotFoundError:
            return TableLoadResult(
                domain=domain,
                locale=canonical,
                status=LoadStatus.NOT_FOUND,
                source_path=source_path,
            )
        except (OSError, ValueError, DataIntegrityError) as e:
            # Permission errors, path traversal errors, schema defects
            logger.warning("Failed to load %s: %s", source_path, e)
            return TableLoadResult(
                domain=domain,
                locale=canonical,
                status=LoadStatus.ERROR,
                error=e,
                source_path=source_path,
            )
        return TableLoadResult(
            domain=domain,
            locale=canonical,
            status=LoadStatus.SUCCESS,
            source_path=source_path,
            entry_count=len(table),
        )

    @property
    def cache_size(self) -> int:
        """Number of cached tables."""
        with self._lock:
            return len(self._cache)

    def cache_info(self) -> dict[str, int | tuple[str, ...]]:
        """Get cache statistics.

        Returns:
            Dict with 'size', 'max_size' and 'tables' (cached file stems,
            least recently used first)
        """
        with self._lock:
            return {
                "size": len(self._cache),
                "max_size": self._config.cache_size,
                "tables": tuple(table.file_stem for table in self._cache.values()),
            }

    def clear_cache(self) -> None:
        """Drop every cached table. Later accesses reload from the loader."""
        with self._lock:
            self._cache.clear()
        logger.debug("Table cache cleared")


_default_registry: TableRegistry | None = None
_default_lock = RLock()


def get_default_registry() -> TableRegistry:
    """Return the process-wide registry over the bundled tables.

    Created on first call. Thread-safe.
    """
    global _default_registry  # noqa: PLW0603  # pylint: disable=global-statement
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = TableRegistry()
    return _default_registry
