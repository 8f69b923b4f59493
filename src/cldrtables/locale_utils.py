"""Locale identifier handling and CLDR parent-locale resolution.

Centralizes locale normalization so table file names, cache keys and
fallback chains all agree on one canonical spelling ("zh_Hant_HK").
Parent resolution follows the CLDR parentLocales map bundled with the
tables, then Babel's likely subtags for script-specific locales, then
subtag truncation.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import functools
import json
import os
from importlib.resources import files
from types import MappingProxyType
from typing import TYPE_CHECKING

from babel.core import get_global, parse_locale

from cldrtables.constants import (
    DATA_PACKAGE,
    DEFAULT_LOCALE,
    MAX_FALLBACK_CHAIN_CACHE_SIZE,
    PARENT_LOCALES_FILE,
    ROOT_LOCALE,
)
from cldrtables.errors import InvalidLocaleError

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "canonicalize_locale",
    "clear_locale_cache",
    "get_fallback_chain",
    "get_parent_locale",
    "get_parent_locales",
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 separators to POSIX separators.

    Args:
        locale_code: BCP-47 locale code (e.g., "pt-PT", "zh-Hant-HK")

    Returns:
        POSIX-formatted locale code (e.g., "pt_PT", "zh_Hant_HK")

    Example:
        >>> normalize_locale("pt-PT")
        'pt_PT'
        >>> normalize_locale("bas")
        'bas'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_FALLBACK_CHAIN_CACHE_SIZE)
def canonicalize_locale(locale_code: str) -> str:
    """Return the canonical CLDR spelling of a locale identifier.

    Separators become underscores and subtags get CLDR casing: lowercase
    language, titlecase script, uppercase region. "root" is accepted as is.

    Args:
        locale_code: Locale identifier in BCP-47 or POSIX form

    Returns:
        Canonical identifier used for table file names and cache keys

    Raises:
        InvalidLocaleError: If the identifier is empty, contains path or
            encoding syntax, or is not a well-formed locale identifier

    Example:
        >>> canonicalize_locale("zh-hant-hk")
        'zh_Hant_HK'
        >>> canonicalize_locale("es-419")
        'es_419'
    """
    if not isinstance(locale_code, str) or not locale_code:
        msg = f"Locale identifier must be a non-empty string, got {locale_code!r}"
        raise InvalidLocaleError(msg)
    if any(ch in locale_code for ch in "/\\.@"):
        msg = f"Locale identifier contains forbidden characters: {locale_code!r}"
        raise InvalidLocaleError(msg)

    normalized = normalize_locale(locale_code)
    if normalized.lower() == ROOT_LOCALE:
        return ROOT_LOCALE

    try:
        language, territory, script, variant = parse_locale(normalized)[:4]
    except ValueError as e:
        msg = f"Invalid locale identifier {locale_code!r}: {e}"
        raise InvalidLocaleError(msg) from e
    return "_".join(part for part in (language, script, territory, variant) if part)


def _has_unlikely_script(locale_code: str) -> bool:
    """Check for a language_Script locale whose script is not the default one.

    CLDR parents such locales ("zh_Hant", "uz_Cyrl") directly to root, since
    inheriting from "zh" or "uz" would mix scripts.
    """
    language, territory, script, variant = parse_locale(locale_code)[:4]
    if not script or territory or variant:
        return False
    likely = get_global("likely_subtags").get(language)
    if not likely:
        return False
    return parse_locale(likely)[2] != script


@functools.lru_cache(maxsize=1)
def get_parent_locales() -> Mapping[str, str]:
    """Return the bundled CLDR parentLocales map as child -> parent.

    Read once from the data package; the file lists each parent with its
    children, all in canonical spelling.

    Example:
        >>> get_parent_locales()["en_CA"]
        'en_001'
        >>> get_parent_locales()["zh_Hant"]
        'root'
    """
    resource = files(DATA_PACKAGE).joinpath(PARENT_LOCALES_FILE)
    document = json.loads(resource.read_text(encoding="utf-8"))
    parents: dict[str, str] = {}
    for parent, children in document["parents"].items():
        for child in children:
            parents[child] = parent
    return MappingProxyType(parents)


@functools.lru_cache(maxsize=MAX_FALLBACK_CHAIN_CACHE_SIZE)
def get_parent_locale(locale_code: str) -> str | None:
    """Get the CLDR parent of a locale.

    Resolution order:
    1. root has no parent
    2. Explicit entry in the bundled parentLocales map (en_CA -> en_001)
    3. language_Script with a non-default script -> root
    4. Drop the last subtag (pt_PT -> pt); a bare language -> root

    Args:
        locale_code: Locale identifier (any accepted spelling)

    Returns:
        Canonical parent identifier, or None for root

    Raises:
        InvalidLocaleError: If the identifier is malformed
    """
    canonical = canonicalize_locale(locale_code)
    if canonical == ROOT_LOCALE:
        return None

    explicit = get_parent_locales().get(canonical)
    if explicit is not None:
        return explicit

    if _has_unlikely_script(canonical):
        return ROOT_LOCALE

    head, sep, _ = canonical.rpartition("_")
    return head if sep else ROOT_LOCALE


@functools.lru_cache(maxsize=MAX_FALLBACK_CHAIN_CACHE_SIZE)
def get_fallback_chain(locale_code: str) -> tuple[str, ...]:
    """Get the locale and its ancestors, most specific first.

    The chain always ends with "root".

    Args:
        locale_code: Locale identifier (any accepted spelling)

    Returns:
        Tuple of canonical identifiers

    Raises:
        InvalidLocaleError: If the identifier is malformed

    Example:
        >>> get_fallback_chain("pt-PT")
        ('pt_PT', 'pt', 'root')
        >>> get_fallback_chain("zh_Hant_HK")
        ('zh_Hant_HK', 'zh_Hant', 'root')
    """
    chain = [canonicalize_locale(locale_code)]
    while chain[-1] != ROOT_LOCALE:
        parent = get_parent_locale(chain[-1])
        if parent is None or parent in chain:
            # Cyclic parent data; terminate at root
            parent = ROOT_LOCALE
        chain.append(parent)
    return tuple(chain)


def clear_locale_cache() -> None:
    """Clear cached canonical forms, parents and fallback chains."""
    canonicalize_locale.cache_clear()
    get_parent_locale.cache_clear()
    get_fallback_chain.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and values that are not
    valid locale identifiers.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in canonical form.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    candidates: list[str] = []
    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale:
            candidates.append(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            candidates.append(value)

    for candidate in candidates:
        # Strip encoding suffix (e.g., ".UTF-8") and modifier (e.g., "@euro")
        code = candidate.split(".")[0].split("@")[0]
        if code in ("C", "POSIX", ""):
            continue
        try:
            return canonicalize_locale(code)
        except InvalidLocaleError:
            continue

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE
