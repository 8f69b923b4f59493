"""Immutable in-memory representation of locale tables.

LocaleTable holds one locale's data for one domain as an ordered tuple of
(key, value) pairs plus a read-only key index. TimeZoneNames is the fixed
6-field value shape of timezone tables.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NamedTuple, overload

from cldrtables.constants import TIME_ZONE_NAME_FIELD_COUNT
from cldrtables.enums import TableDomain, TimeZoneNameField
from cldrtables.integrity import DuplicateKeyError, IntegrityContext, TableSchemaError
from cldrtables.tables.types import LocaleCode, TableEntry, TableKey, TableValue

__all__ = ["LocaleTable", "TimeZoneNames"]


class TimeZoneNames(NamedTuple):
    """Display names of one timezone (or metazone) in one locale.

    An empty string means the table has no override for that form; the
    consumer computes its own label.

    Compares equal to a plain 6-tuple of the same strings.
    """

    long_standard: str
    short_standard: str
    long_daylight: str
    short_daylight: str
    long_generic: str
    short_generic: str

    @classmethod
    def from_sequence(cls, values: Sequence[object]) -> TimeZoneNames:
        """Build from a 6-element sequence of strings.

        Raises:
            TableSchemaError: If values is not exactly six strings
        """
        if isinstance(values, str) or len(values) != TIME_ZONE_NAME_FIELD_COUNT:
            size = "str" if isinstance(values, str) else str(len(values))
            msg = f"Timezone name set must have {TIME_ZONE_NAME_FIELD_COUNT} elements"
            raise TableSchemaError(
                msg,
                IntegrityContext(
                    component="model",
                    operation="validate",
                    expected=str(TIME_ZONE_NAME_FIELD_COUNT),
                    actual=size,
                ),
            )
        for item in values:
            if not isinstance(item, str):
                msg = f"Timezone name set elements must be strings, got {type(item).__name__}"
                raise TableSchemaError(
                    msg,
                    IntegrityContext(
                        component="model",
                        operation="validate",
                        expected="str",
                        actual=type(item).__name__,
                    ),
                )
        return cls(*values)  # type: ignore[arg-type]

    def get_field(self, name_field: TimeZoneNameField) -> str:
        """Return the name stored at a field position."""
        return self[name_field]

    def missing_fields(self) -> tuple[TimeZoneNameField, ...]:
        """Return the fields with no override (empty string)."""
        return tuple(f for f in TimeZoneNameField if not self[f])


def _frozen_mapping[K, V](source: Mapping[K, V]) -> Mapping[K, V]:
    return MappingProxyType(dict(source))


@dataclass(frozen=True, slots=True)
class LocaleTable:
    """One locale's table for one domain.

    Immutable after construction. Keys are unique and matched by exact,
    case-sensitive equality; entry order is preserved but carries no meaning.

    Attributes:
        domain: Table domain
        locale: Owning locale (canonical identifier)
        entries: Ordered (key, value) pairs
        name_sets: Shared timezone name sets by name (timezone tables only)
        references: Entry key -> name of the shared set its value came from

    Example:
        >>> table = LocaleTable(TableDomain.LOCALE_NAMES, "dyo", (("dyo", "joola"),))
        >>> table.get("dyo")
        'joola'
        >>> "DYO" in table
        False
    """

    domain: TableDomain
    locale: LocaleCode
    entries: tuple[TableEntry, ...]
    name_sets: Mapping[str, TimeZoneNames] = field(
        default_factory=lambda: MappingProxyType({})
    )
    references: Mapping[TableKey, str] = field(default_factory=lambda: MappingProxyType({}))
    _index: Mapping[TableKey, TableValue] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Freeze containers and build the key index.

        Raises:
            DuplicateKeyError: If a key occurs more than once
            TableSchemaError: If references point at unknown keys or name sets
        """
        entries = tuple((key, value) for key, value in self.entries)
        index: dict[TableKey, TableValue] = {}
        for key, value in entries:
            if key in index:
                msg = f"Duplicate key '{key}' in {self.domain}_{self.locale}"
                raise DuplicateKeyError(
                    msg,
                    IntegrityContext(component="model", operation="index", key=key),
                )
            index[key] = value

        for key, set_name in self.references.items():
            if set_name not in self.name_sets:
                msg = f"Entry '{key}' references unknown name set '{set_name}'"
                raise TableSchemaError(
                    msg,
                    IntegrityContext(
                        component="model", operation="index", key=key, actual=set_name
                    ),
                )
            if index.get(key) != self.name_sets[set_name]:
                msg = f"Entry '{key}' does not hold the value of name set '{set_name}'"
                raise TableSchemaError(
                    msg,
                    IntegrityContext(component="model", operation="index", key=key),
                )

        object.__setattr__(self, "entries", entries)
        object.__setattr__(self, "name_sets", _frozen_mapping(self.name_sets))
        object.__setattr__(self, "references", _frozen_mapping(self.references))
        object.__setattr__(self, "_index", MappingProxyType(index))

    def __hash__(self) -> int:
        return hash((self.domain, self.locale, self.entries))

    @property
    def file_stem(self) -> str:
        """Persisted file name without suffix (e.g., 'TimeZoneNames_en_CA')."""
        return f"{self.domain}_{self.locale}"

    @overload
    def get(self, key: TableKey) -> TableValue | None: ...

    @overload
    def get[D](self, key: TableKey, default: D) -> TableValue | D: ...

    def get(self, key: TableKey, default: object = None) -> object:
        """Look up a key by exact match; return default when absent."""
        return self._index.get(key, default)

    def __getitem__(self, key: TableKey) -> TableValue:
        return self._index[key]

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TableEntry]:
        return iter(self.entries)

    def keys(self) -> tuple[TableKey, ...]:
        """Return keys in entry order."""
        return tuple(key for key, _ in self.entries)

    def as_dict(self) -> dict[TableKey, TableValue]:
        """Return a mutable copy of the table as a dict."""
        return dict(self._index)

    def name_set_of(self, key: TableKey) -> str | None:
        """Return the shared name set a timezone entry came from, if any."""
        return self.references.get(key)
