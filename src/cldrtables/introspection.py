"""Display-name accessors over the bundled CLDR tables.

Convenience functions for the common questions asked of the tables: the
localized name or symbol of a currency, the name of a territory or
language, the overridden labels of a time zone. Every accessor resolves
through the CLDR fallback chain of the locale, so a pt_PT request may be
answered by the pt table.

Keys follow the stored conventions: currency display names live under the
lowercase ISO 4217 code, symbols under the uppercase code.

Python 3.13+.
"""

from __future__ import annotations

from cldrtables.constants import EXEMPLAR_CITY_PREFIX
from cldrtables.enums import TableDomain
from cldrtables.locale_utils import get_system_locale
from cldrtables.tables.model import TimeZoneNames
from cldrtables.tables.registry import get_default_registry

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Currencies
    "get_currency_name",
    "get_currency_symbol",
    # Locale names
    "get_territory_name",
    "get_language_name",
    # Time zones
    "get_time_zone_names",
    "get_exemplar_city",
]


def _lookup_text(domain: TableDomain, locale: str | None, key: str) -> str | None:
    resolved_locale = locale if locale is not None else get_system_locale()
    value = get_default_registry().lookup_with_fallback(domain, resolved_locale, key)
    return value if isinstance(value, str) else None


def get_currency_name(code: str, locale: str | None = None) -> str | None:
    """Get the localized display name of a currency.

    Args:
        code: ISO 4217 currency code (case-insensitive, e.g. 'AFN')
        locale: Locale for the name (default: system locale)

    Returns:
        Display name, or None if no table on the chain carries one

    Example:
        >>> get_currency_name("AFN", "ps")
        'افغانۍ'
    """
    return _lookup_text(TableDomain.CURRENCY_NAMES, locale, code.lower())


def get_currency_symbol(code: str, locale: str | None = None) -> str | None:
    """Get the localized symbol of a currency.

    Example:
        >>> get_currency_symbol("afn", "ps")
        '؋'
    """
    return _lookup_text(TableDomain.CURRENCY_NAMES, locale, code.upper())


def get_territory_name(code: str, locale: str | None = None) -> str | None:
    """Get the localized name of an ISO 3166 region (e.g. 'SN')."""
    return _lookup_text(TableDomain.LOCALE_NAMES, locale, code.upper())


def get_language_name(code: str, locale: str | None = None) -> str | None:
    """Get the localized name of a language subtag (e.g. 'dyo')."""
    return _lookup_text(TableDomain.LOCALE_NAMES, locale, code.lower())


def get_time_zone_names(zone_id: str, locale: str | None = None) -> TimeZoneNames | None:
    """Get the overridden names of an Olson time zone.

    Fields holding "" carry no override; the caller computes its own label
    for them.

    Args:
        zone_id: Olson identifier, matched case-sensitively
            (e.g. 'America/Halifax')
        locale: Locale for the names (default: system locale)

    Returns:
        TimeZoneNames, or None if no table on the chain has the zone
    """
    resolved_locale = locale if locale is not None else get_system_locale()
    value = get_default_registry().lookup_with_fallback(
        TableDomain.TIME_ZONE_NAMES, resolved_locale, zone_id
    )
    return value if isinstance(value, TimeZoneNames) else None


def get_exemplar_city(zone_id: str, locale: str | None = None) -> str | None:
    """Get the localized exemplar city of a time zone (e.g. 'Asia/Kolkata')."""
    return _lookup_text(TableDomain.TIME_ZONE_NAMES, locale, f"{EXEMPLAR_CITY_PREFIX}{zone_id}")
