"""TableRegistry Example - CLDR Locale Fallback Chains.

Demonstrates looking up display names in the bundled CLDR tables and in
tables of your own, with lookups that walk the CLDR parent chain.

Scenarios covered:
1. Exact lookups in the bundled tables
2. CLDR fallback chains (pt_PT -> pt -> root, en_CA -> en_001 -> en -> root)
3. Tables on disk with a root table as the last resort
4. Custom table loaders
5. Observing fallback events
6. Preloading and inspecting the cache

Python 3.13+.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from cldrtables import TableDomain, lookup, resolve
from cldrtables.introspection import get_currency_symbol, get_time_zone_names
from cldrtables.locale_utils import get_fallback_chain
from cldrtables.tables import (
    FallbackInfo,
    LocaleTable,
    PathTableLoader,
    RegistryConfig,
    TableRegistry,
    write_table,
)


def example_1_exact_lookup() -> None:
    """Example 1: Exact lookups in the bundled tables."""
    print("=" * 60)
    print("Example 1: Exact Lookups")
    print("=" * 60)

    # Currency symbols use uppercase keys, display names lowercase keys
    print(f"\n  ps AFN (symbol): {lookup(TableDomain.CURRENCY_NAMES, 'ps', 'AFN')}")
    print(f"  ps afn (name):   {lookup(TableDomain.CURRENCY_NAMES, 'ps', 'afn')}")

    halifax = get_time_zone_names("America/Halifax", "en_CA")
    print(f"\n  en_CA America/Halifax: {halifax}")
    if halifax is not None:
        print(f"    short daylight: {halifax.short_daylight}")
        print(f"    long standard:  {halifax.long_standard!r} (no override)")


def example_2_fallback_chains() -> None:
    """Example 2: CLDR fallback chains."""
    print("\n" + "=" * 60)
    print("Example 2: Fallback Chains")
    print("=" * 60)

    for locale in ("pt-PT", "en_CA", "zh_Hant_HK", "uz_Cyrl", "es_419"):
        print(f"  {locale}: {' -> '.join(get_fallback_chain(locale))}")

    print("\nResolving ps_AF through its parent:")
    resolved = resolve(TableDomain.CURRENCY_NAMES, "ps_AF", "AFN")
    if resolved is not None:
        print(f"  AFN = {resolved.value} (from {resolved.locale}, fallback={resolved.is_fallback})")
    print(f"  get_currency_symbol('AFN', 'ps_AF') = {get_currency_symbol('AFN', 'ps_AF')}")

    print("\nResolving through the bundled ancestors:")
    for domain, locale, key in (
        (TableDomain.TIME_ZONE_NAMES, "en_CA", "Europe/London"),
        (TableDomain.TIME_ZONE_NAMES, "en_GB", "America/Halifax"),
        (TableDomain.FORMAT_DATA, "az_Cyrl", "field.hour"),
    ):
        resolved = resolve(domain, locale, key)
        if resolved is not None:
            print(f"  {locale} {key}: {resolved.value} (from {resolved.locale})")


def _write_sample_tables(directory: Path) -> None:
    domain = TableDomain.LOCALE_NAMES
    write_table(
        LocaleTable(domain, "root", (("SN", "SN"), ("fr", "fr"), ("de", "de"))), directory
    )
    write_table(LocaleTable(domain, "pt", (("SN", "Senegal"), ("fr", "francês"))), directory)
    write_table(LocaleTable(domain, "pt_PT", (("SN", "Senegal"),)), directory)


def example_3_disk_tables(tmp_path: Path) -> None:
    """Example 3: Tables on disk with PathTableLoader."""
    print("\n" + "=" * 60)
    print("Example 3: Disk-Based Tables")
    print("=" * 60)

    _write_sample_tables(tmp_path)
    registry = TableRegistry(PathTableLoader(tmp_path))

    print(f"\nLocales on disk: {registry.available_locales(TableDomain.LOCALE_NAMES)}")
    for key in ("SN", "fr", "de", "xx"):
        resolved = registry.resolve(TableDomain.LOCALE_NAMES, "pt_PT", key)
        if resolved is None:
            print(f"  {key}: [WARN] Not found anywhere on the chain")
        else:
            print(f"  {key}: {resolved.value} (from {resolved.locale})")


class InMemoryLoader:
    """Table loader over tables held in memory."""

    def __init__(self, *tables: LocaleTable) -> None:
        self._tables = {(table.domain, table.locale): table for table in tables}

    def load(self, domain: TableDomain, locale: str) -> LocaleTable:
        try:
            return self._tables[domain, locale]
        except KeyError:
            msg = f"{domain}_{locale}"
            raise FileNotFoundError(msg) from None

    def available_locales(self, domain: TableDomain) -> tuple[str, ...]:
        return tuple(sorted(locale for d, locale in self._tables if d is domain))

    def describe_path(self, domain: TableDomain, locale: str) -> str:
        return f"memory:{domain}_{locale}"


def example_4_custom_loader() -> None:
    """Example 4: Custom loader (any object with load/available_locales/describe_path)."""
    print("\n" + "=" * 60)
    print("Example 4: Custom Loader")
    print("=" * 60)

    loader = InMemoryLoader(
        LocaleTable(TableDomain.CURRENCY_NAMES, "en_001", (("GBP", "£"),)),
        LocaleTable(TableDomain.CURRENCY_NAMES, "en", (("USD", "$"), ("GBP", "GBP"))),
    )
    registry = TableRegistry(loader)

    # en_CA -> en_001 -> en -> root
    for key in ("GBP", "USD"):
        resolved = registry.resolve(TableDomain.CURRENCY_NAMES, "en_CA", key)
        if resolved is not None:
            print(f"  en_CA {key}: {resolved.value} (from {resolved.locale})")


def example_5_fallback_events(tmp_path: Path) -> None:
    """Example 5: Observing fallback with on_fallback."""
    print("\n" + "=" * 60)
    print("Example 5: Fallback Events")
    print("=" * 60)

    events: list[FallbackInfo] = []
    _write_sample_tables(tmp_path)
    registry = TableRegistry(PathTableLoader(tmp_path), on_fallback=events.append)

    for key in ("SN", "fr", "de"):
        registry.lookup_with_fallback(TableDomain.LOCALE_NAMES, "pt_PT", key)

    print(f"\n{len(events)} fallback event(s):")
    for info in events:
        print(f"  {info.key}: requested {info.requested_locale}, got {info.resolved_locale}")


def example_6_preload() -> None:
    """Example 6: Preloading the bundled tables."""
    print("\n" + "=" * 60)
    print("Example 6: Preload and Cache")
    print("=" * 60)

    registry = TableRegistry(config=RegistryConfig(cache_size=64))
    summary = registry.preload()
    print(f"\n  {summary!r}")
    for result in summary.get_by_domain(TableDomain.TIME_ZONE_NAMES):
        print(f"  {result.source_path}: {result.entry_count} entries")
    if summary.has_errors:
        for result in summary.get_errors():
            print(f"  [ERROR] {result.source_path}: {result.error}")

    info = registry.cache_info()
    print(f"\n  cached {info['size']} of at most {info['max_size']} tables")


if __name__ == "__main__":
    example_1_exact_lookup()
    example_2_fallback_chains()

    with tempfile.TemporaryDirectory() as tmp_dir_main:
        example_3_disk_tables(Path(tmp_dir_main))

    example_4_custom_loader()

    with tempfile.TemporaryDirectory() as tmp_dir_main:
        example_5_fallback_events(Path(tmp_dir_main))

    example_6_preload()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
