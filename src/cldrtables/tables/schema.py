"""Schema validation for decoded table documents.

A table document is the JSON object stored in one ``<Domain>_<locale>.json``
file. build_table() checks its shape against the domain's value rules and
returns a LocaleTable, or raises TableSchemaError naming the offending
member. Nothing is coerced: a wrong shape is a generation defect.

Value rules by domain:
    CurrencyNames, LocaleNames: str
    TimeZoneNames: "timezone.*" keys -> str; other keys -> 6-string name set,
                   given inline as a list or as {"ref": <name_sets member>}
    FormatData: str or non-empty list of str

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cldrtables.constants import TIME_ZONE_METADATA_PREFIX
from cldrtables.enums import TableDomain
from cldrtables.integrity import IntegrityContext, TableSchemaError
from cldrtables.tables.model import LocaleTable, TimeZoneNames
from cldrtables.tables.types import TableEntry, TableKey, TableValue

__all__ = [
    "DOCUMENT_MEMBERS",
    "REF_MEMBER",
    "build_table",
]

DOCUMENT_MEMBERS: frozenset[str] = frozenset(("domain", "locale", "name_sets", "entries"))

REF_MEMBER: str = "ref"


def _fail(
    message: str,
    *,
    key: str | None = None,
    expected: str | None = None,
    actual: object = None,
) -> TableSchemaError:
    return TableSchemaError(
        message,
        IntegrityContext(
            component="schema",
            operation="validate",
            key=key,
            expected=expected,
            actual=None if actual is None else type(actual).__name__,
        ),
    )


def _parse_domain(raw: object) -> TableDomain:
    if not isinstance(raw, str):
        raise _fail("Member 'domain' must be a string", key="domain", expected="str", actual=raw)
    try:
        return TableDomain(raw)
    except ValueError:
        msg = f"Unknown table domain '{raw}'"
        raise _fail(msg, key="domain", expected="TableDomain") from None


def _parse_name_sets(raw: object, domain: TableDomain) -> dict[str, TimeZoneNames]:
    if raw is None:
        return {}
    if domain is not TableDomain.TIME_ZONE_NAMES:
        msg = f"Member 'name_sets' is only allowed in {TableDomain.TIME_ZONE_NAMES} tables"
        raise _fail(msg, key="name_sets")
    if not isinstance(raw, Mapping):
        raise _fail("Member 'name_sets' must be an object", key="name_sets", actual=raw)

    name_sets: dict[str, TimeZoneNames] = {}
    for name, values in raw.items():
        if not isinstance(values, list):
            msg = f"Name set '{name}' must be a list"
            raise _fail(msg, key=name, expected="list", actual=values)
        try:
            name_sets[name] = TimeZoneNames.from_sequence(values)
        except TableSchemaError as e:
            msg = f"Name set '{name}': {e}"
            raise _fail(msg, key=name) from e
    return name_sets


def _parse_string_array(key: TableKey, raw: list[Any]) -> tuple[str, ...]:
    if not raw:
        msg = f"Entry '{key}' holds an empty array"
        raise _fail(msg, key=key, expected="non-empty list")
    for item in raw:
        if not isinstance(item, str):
            msg = f"Entry '{key}' array elements must be strings"
            raise _fail(msg, key=key, expected="str", actual=item)
    return tuple(raw)


def _parse_time_zone_value(
    key: TableKey,
    raw: object,
    name_sets: Mapping[str, TimeZoneNames],
    references: dict[TableKey, str],
) -> TableValue:
    if key.startswith(TIME_ZONE_METADATA_PREFIX):
        if not isinstance(raw, str):
            msg = f"Metadata entry '{key}' must be a string"
            raise _fail(msg, key=key, expected="str", actual=raw)
        return raw

    match raw:
        case list():
            try:
                return TimeZoneNames.from_sequence(raw)
            except TableSchemaError as e:
                msg = f"Entry '{key}': {e}"
                raise _fail(msg, key=key) from e
        case {"ref": str(set_name)} if len(raw) == 1:
            if set_name not in name_sets:
                msg = f"Entry '{key}' references unknown name set '{set_name}'"
                raise _fail(msg, key=key, expected="name_sets member")
            references[key] = set_name
            return name_sets[set_name]
        case _:
            msg = f"Entry '{key}' must be a name set list or a {{'ref': name}} object"
            raise _fail(msg, key=key, expected="list | ref", actual=raw)


def _parse_value(
    domain: TableDomain,
    key: TableKey,
    raw: object,
    name_sets: Mapping[str, TimeZoneNames],
    references: dict[TableKey, str],
) -> TableValue:
    match domain:
        case TableDomain.TIME_ZONE_NAMES:
            return _parse_time_zone_value(key, raw, name_sets, references)
        case TableDomain.FORMAT_DATA:
            if isinstance(raw, str):
                return raw
            if isinstance(raw, list):
                return _parse_string_array(key, raw)
            msg = f"Entry '{key}' must be a string or a list of strings"
            raise _fail(msg, key=key, expected="str | list", actual=raw)
        case _:
            if not isinstance(raw, str):
                msg = f"Entry '{key}' must be a string in {domain} tables"
                raise _fail(msg, key=key, expected="str", actual=raw)
            return raw


def _parse_entries(
    raw: object,
    domain: TableDomain,
    name_sets: Mapping[str, TimeZoneNames],
    references: dict[TableKey, str],
) -> tuple[TableEntry, ...]:
    if not isinstance(raw, list):
        raise _fail("Member 'entries' must be a list", key="entries", expected="list", actual=raw)

    entries: list[TableEntry] = []
    for position, item in enumerate(raw):
        if not isinstance(item, list) or len(item) != 2:
            msg = f"Entry #{position} must be a [key, value] pair"
            raise _fail(msg, key=str(position), expected="[key, value]", actual=item)
        key, value = item
        if not isinstance(key, str) or not key:
            msg = f"Entry #{position} key must be a non-empty string"
            raise _fail(msg, key=str(position), expected="str", actual=key)
        entries.append((key, _parse_value(domain, key, value, name_sets, references)))
    return tuple(entries)


def build_table(
    document: object,
    *,
    expected_domain: TableDomain | None = None,
    expected_locale: str | None = None,
) -> LocaleTable:
    """Validate a decoded table document and build a LocaleTable.

    Args:
        document: Decoded JSON value (expected to be an object)
        expected_domain: Domain implied by the file name, if known
        expected_locale: Locale implied by the file name, if known

    Returns:
        Validated, immutable LocaleTable

    Raises:
        TableSchemaError: If the document does not match the schema
        DuplicateKeyError: If a key occurs more than once
    """
    if not isinstance(document, Mapping):
        raise _fail("Table document must be an object", expected="object", actual=document)

    unknown = set(document) - DOCUMENT_MEMBERS
    if unknown:
        msg = f"Unknown table members: {', '.join(sorted(map(str, unknown)))}"
        raise _fail(msg, key=",".join(sorted(map(str, unknown))))
    for member in ("domain", "locale", "entries"):
        if member not in document:
            msg = f"Missing required member '{member}'"
            raise _fail(msg, key=member)

    domain = _parse_domain(document["domain"])
    if expected_domain is not None and domain is not expected_domain:
        msg = f"Table domain '{domain}' does not match expected '{expected_domain}'"
        raise _fail(msg, key="domain", expected=str(expected_domain))

    locale = document["locale"]
    if not isinstance(locale, str) or not locale:
        raise _fail("Member 'locale' must be a non-empty string", key="locale", actual=locale)
    if expected_locale is not None and locale != expected_locale:
        msg = f"Table locale '{locale}' does not match expected '{expected_locale}'"
        raise _fail(msg, key="locale", expected=expected_locale)

    name_sets = _parse_name_sets(document.get("name_sets"), domain)
    references: dict[TableKey, str] = {}
    entries = _parse_entries(document["entries"], domain, name_sets, references)

    return LocaleTable(
        domain=domain,
        locale=locale,
        entries=entries,
        name_sets=name_sets,
        references=references,
    )
