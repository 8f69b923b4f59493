"""Tests for LocaleTable and TimeZoneNames.

Python 3.13+.
"""

from dataclasses import FrozenInstanceError

import pytest
from hypothesis import given

from cldrtables.enums import TableDomain, TimeZoneNameField
from cldrtables.integrity import DuplicateKeyError, TableSchemaError
from cldrtables.tables import LocaleTable, TimeZoneNames
from tests.strategies import locale_tables

ATLANTIC = TimeZoneNames("", "AST", "", "ADT", "", "AT")


class TestTimeZoneNames:
    """Test the six-field name set value type."""

    def test_equals_plain_tuple(self) -> None:
        assert ATLANTIC == ("", "AST", "", "ADT", "", "AT")

    def test_named_fields(self) -> None:
        assert ATLANTIC.short_standard == "AST"
        assert ATLANTIC.short_generic == "AT"
        assert ATLANTIC.long_standard == ""

    def test_get_field(self) -> None:
        assert ATLANTIC.get_field(TimeZoneNameField.SHORT_DAYLIGHT) == "ADT"

    def test_missing_fields(self) -> None:
        assert ATLANTIC.missing_fields() == (
            TimeZoneNameField.LONG_STANDARD,
            TimeZoneNameField.LONG_DAYLIGHT,
            TimeZoneNameField.LONG_GENERIC,
        )

    def test_from_sequence(self) -> None:
        names = TimeZoneNames.from_sequence(["a", "b", "c", "d", "e", "f"])
        assert names.long_generic == "e"

    @pytest.mark.parametrize("size", [0, 5, 7])
    def test_from_sequence_wrong_length(self, size: int) -> None:
        with pytest.raises(TableSchemaError, match="6 elements") as exc_info:
            TimeZoneNames.from_sequence(["x"] * size)
        assert exc_info.value.context is not None
        assert exc_info.value.context.actual == str(size)

    def test_from_sequence_rejects_string(self) -> None:
        """A six-character string is not a name set."""
        with pytest.raises(TableSchemaError):
            TimeZoneNames.from_sequence("abcdef")

    def test_from_sequence_rejects_non_string_element(self) -> None:
        with pytest.raises(TableSchemaError, match="must be strings"):
            TimeZoneNames.from_sequence(["a", "b", "c", "d", "e", None])


class TestLocaleTableConstruction:
    """Test LocaleTable validation at construction."""

    def test_duplicate_key_rejected(self) -> None:
        with pytest.raises(DuplicateKeyError, match="Duplicate key 'SN'"):
            LocaleTable(
                TableDomain.LOCALE_NAMES, "dyo", (("SN", "Senegal"), ("SN", "Sénégal"))
            )

    def test_case_variants_are_distinct_keys(self) -> None:
        table = LocaleTable(
            TableDomain.CURRENCY_NAMES, "ps", (("AFN", "؋"), ("afn", "افغانۍ"))
        )
        assert len(table) == 2
        assert table.get("AFN") == "؋"
        assert table.get("afn") == "افغانۍ"

    def test_reference_to_unknown_set_rejected(self) -> None:
        with pytest.raises(TableSchemaError, match="unknown name set"):
            LocaleTable(
                TableDomain.TIME_ZONE_NAMES,
                "en_CA",
                (("America/Halifax", ATLANTIC),),
                references={"America/Halifax": "Atlantic"},
            )

    def test_reference_with_mismatched_value_rejected(self) -> None:
        with pytest.raises(TableSchemaError, match="does not hold the value"):
            LocaleTable(
                TableDomain.TIME_ZONE_NAMES,
                "en_CA",
                (("America/Halifax", TimeZoneNames("", "", "", "", "", "")),),
                name_sets={"Atlantic": ATLANTIC},
                references={"America/Halifax": "Atlantic"},
            )

    def test_list_entries_frozen_to_tuple(self) -> None:
        table = LocaleTable(
            TableDomain.LOCALE_NAMES,
            "dyo",
            [("SN", "Senegal")],  # type: ignore[arg-type]
        )
        assert table.entries == (("SN", "Senegal"),)


class TestLocaleTableAccess:
    """Test read access on LocaleTable."""

    @pytest.fixture
    def table(self) -> LocaleTable:
        return LocaleTable(
            TableDomain.TIME_ZONE_NAMES,
            "en_CA",
            (
                ("America/Halifax", ATLANTIC),
                ("timezone.excity.America/Halifax", "Halifax"),
            ),
            name_sets={"Atlantic": ATLANTIC},
            references={"America/Halifax": "Atlantic"},
        )

    def test_get_and_default(self, table: LocaleTable) -> None:
        assert table.get("America/Halifax") == ATLANTIC
        assert table.get("America/Toronto") is None
        assert table.get("America/Toronto", "fallback") == "fallback"

    def test_getitem_missing_raises_key_error(self, table: LocaleTable) -> None:
        with pytest.raises(KeyError):
            table["america/halifax"]

    def test_keys_preserve_order(self, table: LocaleTable) -> None:
        assert table.keys() == ("America/Halifax", "timezone.excity.America/Halifax")

    def test_iteration_yields_entries(self, table: LocaleTable) -> None:
        assert tuple(table) == table.entries

    def test_name_set_of(self, table: LocaleTable) -> None:
        assert table.name_set_of("America/Halifax") == "Atlantic"
        assert table.name_set_of("timezone.excity.America/Halifax") is None

    def test_file_stem(self, table: LocaleTable) -> None:
        assert table.file_stem == "TimeZoneNames_en_CA"

    def test_as_dict_is_a_copy(self, table: LocaleTable) -> None:
        copy = table.as_dict()
        copy["America/Halifax"] = "changed"  # type: ignore[assignment]
        assert table.get("America/Halifax") == ATLANTIC


class TestLocaleTableImmutability:
    """LocaleTable cannot be changed after construction."""

    @pytest.fixture
    def table(self) -> LocaleTable:
        return LocaleTable(
            TableDomain.TIME_ZONE_NAMES,
            "en_CA",
            (("America/Halifax", ATLANTIC),),
            name_sets={"Atlantic": ATLANTIC},
            references={"America/Halifax": "Atlantic"},
        )

    def test_attribute_assignment_rejected(self, table: LocaleTable) -> None:
        with pytest.raises(FrozenInstanceError):
            table.locale = "fr"  # type: ignore[misc]

    def test_name_sets_read_only(self, table: LocaleTable) -> None:
        with pytest.raises(TypeError):
            table.name_sets["Pacific"] = ATLANTIC  # type: ignore[index]

    def test_references_read_only(self, table: LocaleTable) -> None:
        with pytest.raises(TypeError):
            table.references["America/Halifax"] = "Pacific"  # type: ignore[index]

    def test_source_mapping_mutation_has_no_effect(self) -> None:
        name_sets = {"Atlantic": ATLANTIC}
        table = LocaleTable(
            TableDomain.TIME_ZONE_NAMES, "en_CA", (), name_sets=name_sets
        )
        name_sets["Other"] = ATLANTIC
        assert "Other" not in table.name_sets

    def test_hashable(self, table: LocaleTable) -> None:
        assert hash(table) == hash(
            LocaleTable(
                TableDomain.TIME_ZONE_NAMES,
                "en_CA",
                (("America/Halifax", ATLANTIC),),
                name_sets={"Atlantic": ATLANTIC},
                references={"America/Halifax": "Atlantic"},
            )
        )


class TestLocaleTableProperties:
    """Property-based tests over generated tables."""

    @given(table=locale_tables())
    def test_index_matches_entries(self, table: LocaleTable) -> None:
        assert len(table) == len(table.entries)
        for key, value in table.entries:
            assert key in table
            assert table[key] == value

    @given(table=locale_tables())
    def test_as_dict_matches_entries(self, table: LocaleTable) -> None:
        assert table.as_dict() == dict(table.entries)
