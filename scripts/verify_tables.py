#!/usr/bin/env python3
"""Verify bundled locale tables against Babel CLDR data.

Loads every bundled table and compares the display names it overrides
with the names Babel's CLDR data carries for the same locale. Reports
tables that fail to load and names that differ from Babel.

This script is informational: differences are expected because the
bundled tables are overrides generated from a specific CLDR release,
while Babel ships whichever release it was built against.

Checks:
    1. Structural: Bundled table fails to load or validate.
    2. Unknown locales: Table locale not known to Babel.
    3. Differences: Currency symbols and names, territory and language
       names, exemplar cities that differ from Babel. Listed only with
       --verbose.
    4. Parent locales: Bundled parentLocales entries that Babel's
       parent_exceptions maps differently. Informational.

Exit codes:
    0: All tables load (differences are warnings, not failures).
    1: Structural errors (unloadable tables, import failures).

Usage:
    verify_tables.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

    from cldrtables.tables import LocaleTable, TableRegistry


def _check_structure(registry: TableRegistry) -> tuple[list[str], int]:
    """Load every bundled table; return errors and the number attempted."""
    summary = registry.preload()
    errors = [f"  {r.source_path}: {r.error}" for r in summary.get_errors()]
    return errors, summary.total_attempted


def _babel_locale(locale: str) -> Locale | None:
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    try:
        return Locale.parse(locale)
    except (UnknownLocaleError, ValueError):
        return None


def _differences(table: LocaleTable, babel_locale: Locale) -> list[str]:
    """Compare the string entries of one table with Babel's names."""
    from cldrtables.constants import EXEMPLAR_CITY_PREFIX  # noqa: PLC0415
    from cldrtables.enums import TableDomain  # noqa: PLC0415

    result: list[str] = []

    def compare(key: str, ours: object, theirs: object) -> None:
        if theirs is not None and ours != theirs:
            result.append(f"  {table.file_stem} {key}: ours={ours!r}, Babel={theirs!r}")

    for key, value in table:
        match table.domain:
            case TableDomain.CURRENCY_NAMES if key.isupper():
                compare(key, value, babel_locale.currency_symbols.get(key))
            case TableDomain.CURRENCY_NAMES:
                compare(key, value, babel_locale.currencies.get(key.upper()))
            case TableDomain.LOCALE_NAMES if key.isupper() and len(key) == 2:
                compare(key, value, babel_locale.territories.get(key))
            case TableDomain.LOCALE_NAMES if key.islower() and key.isalpha():
                compare(key, value, babel_locale.languages.get(key))
            case TableDomain.TIME_ZONE_NAMES if key.startswith(EXEMPLAR_CITY_PREFIX):
                zone = key.removeprefix(EXEMPLAR_CITY_PREFIX)
                compare(key, value, babel_locale.time_zones.get(zone, {}).get("city"))
            case _:
                pass
    return result


def _check_differences(registry: TableRegistry) -> tuple[list[str], list[str]]:
    """Compare every bundled table with Babel.

    Returns:
        Tuple of (unknown locales, differences).
    """
    from cldrtables.enums import TableDomain  # noqa: PLC0415

    unknown: list[str] = []
    differences: list[str] = []
    for domain in TableDomain:
        for locale in registry.available_locales(domain):
            babel_locale = _babel_locale(locale)
            if babel_locale is None:
                unknown.append(f"  {domain}_{locale}: locale not known to Babel")
                continue
            differences.extend(_differences(registry.get_table(domain, locale), babel_locale))
    return unknown, differences


def _check_parents() -> list[str]:
    """Compare the bundled parentLocales map with Babel's parent_exceptions."""
    from babel.core import get_global  # noqa: PLC0415

    from cldrtables.locale_utils import get_parent_locales  # noqa: PLC0415

    theirs = get_global("parent_exceptions")
    return [
        f"  {child}: ours={parent}, Babel={theirs.get(child, '<truncation>')}"
        for child, parent in sorted(get_parent_locales().items())
        if theirs.get(child) != parent
    ]


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify bundled locale tables against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List every name that differs from Babel.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run table verification checks."""
    args = _parse_args(argv)

    try:
        import babel  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install babel")
        return 1

    from cldrtables.tables import TableRegistry  # noqa: PLC0415

    registry = TableRegistry()
    errors, attempted = _check_structure(registry)

    print("Bundled Table Verification")
    print("=" * 50)
    print(f"Tables loaded:  {attempted - len(errors)}/{attempted}")
    print(f"Babel version:  {babel.__version__}")
    print()

    _print_section(
        "[ERROR] Structural errors",
        "Bundled table failed to load or validate",
        errors,
    )
    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    unknown, differences = _check_differences(registry)
    _print_section(
        "[WARN] Unknown locales",
        "Babel has no data for these locales; names not compared",
        unknown,
    )
    if differences:
        if args.verbose:
            _print_section(
                "[INFO] Differences from Babel",
                "Bundled names are authoritative; Babel's CLDR release may differ",
                differences,
            )
        else:
            print(f"[INFO] {len(differences)} name(s) differ from Babel. Use --verbose to list.")
            print()

    parents = _check_parents()
    _print_section(
        "[INFO] Parent locales differing from Babel",
        "Fallback uses the bundled map; Babel follows its own CLDR release",
        parents,
    )

    print(f"[PASS] {len(unknown)} unknown locale(s), {len(differences)} difference(s).")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
