"""Tests over every bundled table.

Checks each shipped file against the schema and the documented examples
(ps currency symbols, en_CA Atlantic time, pt_PT name overrides), then
walks fallback chains through the shipped ancestor tables.

Python 3.13+.
"""

import pytest
from hypothesis import given

from cldrtables import (
    TableDomain,
    TableNotFoundError,
    TimeZoneNames,
    available_locales,
    get_entries,
    get_table,
    lookup,
    lookup_with_fallback,
    resolve,
)
from cldrtables.locale_utils import get_fallback_chain
from cldrtables.tables import (
    LocaleTable,
    PackageTableLoader,
    TableRegistry,
    dumps_table,
    loads_table,
)
from tests.strategies import bundled_locales

_LOADER = PackageTableLoader()

BUNDLED = [
    (domain, locale) for domain in TableDomain for locale in _LOADER.available_locales(domain)
]


def _bundled_id(item: tuple[TableDomain, str]) -> str:
    return f"{item[0]}_{item[1]}"


class TestBundledInventory:
    """Which tables ship."""

    def test_expected_locales(self) -> None:
        assert available_locales(TableDomain.CURRENCY_NAMES) == ("gsw", "mzn", "ps")
        assert "dyo" in available_locales(TableDomain.LOCALE_NAMES)
        assert "zh_Hant" in available_locales(TableDomain.FORMAT_DATA)
        assert available_locales(TableDomain.TIME_ZONE_NAMES) == (
            "dsb",
            "dz",
            "en",
            "en_001",
            "en_CA",
            "es_419",
            "es_MX",
            "es_US",
            "fr_CA",
            "fy",
            "gsw",
            "hsb",
            "kea",
            "ksh",
            "lb",
            "os",
            "pt_PT",
            "rm",
            "sah",
            "se_FI",
            "ug",
            "ur_IN",
            "uz_Cyrl",
            "wae",
            "wo",
            "zh_Hant_HK",
        )

    def test_table_count(self) -> None:
        assert len(BUNDLED) == 132

    def test_root_table_is_format_data(self) -> None:
        roots = [domain for domain in TableDomain if "root" in available_locales(domain)]
        assert roots == [TableDomain.FORMAT_DATA]

    def test_ancestors_of_en_ca_ship(self) -> None:
        chain = get_fallback_chain("en_CA")
        shipped = [
            locale
            for locale in chain
            if locale in available_locales(TableDomain.TIME_ZONE_NAMES)
        ]
        assert shipped == ["en_CA", "en_001", "en"]

    def test_parent_map_is_not_a_table(self) -> None:
        for domain in TableDomain:
            assert not any("parent" in locale for locale in available_locales(domain))


@pytest.mark.parametrize("item", BUNDLED, ids=_bundled_id)
class TestEveryBundledTable:
    """Schema-level guarantees for each shipped file."""

    def test_loads(self, item: tuple[TableDomain, str], bundled: TableRegistry) -> None:
        domain, locale = item
        table = bundled.get_table(domain, locale)
        assert table.domain is domain
        assert table.locale == locale
        assert len(table) > 0

    def test_keys_unique(self, item: tuple[TableDomain, str]) -> None:
        entries = _LOADER.load(*item).entries
        keys = [key for key, _ in entries]
        assert len(keys) == len(set(keys))

    def test_timezone_values(self, item: tuple[TableDomain, str]) -> None:
        domain, locale = item
        if domain is not TableDomain.TIME_ZONE_NAMES:
            pytest.skip("timezone tables only")
        for key, value in _LOADER.load(domain, locale):
            if key.startswith("timezone."):
                assert isinstance(value, str)
            else:
                assert isinstance(value, TimeZoneNames)
                assert len(value) == 6

    def test_roundtrip(self, item: tuple[TableDomain, str]) -> None:
        table = _LOADER.load(*item)
        assert loads_table(dumps_table(table)) == table


class TestDocumentedExamples:
    """Values the table contract is described with."""

    def test_ps_currency_symbol_and_name(self) -> None:
        assert lookup(TableDomain.CURRENCY_NAMES, "ps", "AFN") == "؋"
        assert lookup(TableDomain.CURRENCY_NAMES, "ps", "afn") == "افغانۍ"

    def test_en_ca_halifax_shared_set(self) -> None:
        value = lookup(TableDomain.TIME_ZONE_NAMES, "en_CA", "America/Halifax")
        assert value == ("", "AST", "", "ADT", "", "AT")
        table = get_table(TableDomain.TIME_ZONE_NAMES, "en_CA")
        assert table.name_set_of("America/Halifax") == "Atlantic"

    def test_pt_pt_london_inline_set(self) -> None:
        value = lookup(TableDomain.TIME_ZONE_NAMES, "pt_PT", "Europe/London")
        assert value == TimeZoneNames(
            "Hora de Greenwich", "", "Hora de verão Britânica", "", "", ""
        )

    def test_pt_pt_numbering_system_name(self) -> None:
        assert (
            lookup(TableDomain.LOCALE_NAMES, "pt_PT", "type.nu.greklow")
            == "Numeração grega minúscula"
        )

    def test_dyo_autonym(self) -> None:
        assert get_entries(TableDomain.LOCALE_NAMES, "dyo") == (("dyo", "joola"),)

    def test_format_data_arrays(self) -> None:
        months = lookup(TableDomain.FORMAT_DATA, "ja", "MonthNames")
        assert isinstance(months, tuple)
        assert months[0] == "1月"
        assert months[-1] == ""

    def test_case_sensitive_keys(self) -> None:
        assert lookup(TableDomain.CURRENCY_NAMES, "ps", "Afn") is None

    def test_missing_table(self) -> None:
        assert lookup(TableDomain.CURRENCY_NAMES, "fr", "EUR") is None
        with pytest.raises(TableNotFoundError):
            get_entries(TableDomain.CURRENCY_NAMES, "fr")


class TestBundledFallback:
    """Fallback through the shipped ancestor tables."""

    def test_region_falls_back_to_language(self) -> None:
        resolved = resolve(TableDomain.CURRENCY_NAMES, "ps-AF", "AFN")
        assert resolved is not None
        assert resolved.value == "؋"
        assert resolved.locale == "ps"
        assert resolved.is_fallback

    def test_en_ca_key_from_en(self) -> None:
        """Keys en_CA and en_001 lack come from en."""
        assert lookup(TableDomain.TIME_ZONE_NAMES, "en_CA", "Europe/London") is None
        assert lookup(TableDomain.TIME_ZONE_NAMES, "en_001", "Europe/London") is None
        resolved = resolve(TableDomain.TIME_ZONE_NAMES, "en_CA", "Europe/London")
        assert resolved is not None
        assert resolved.locale == "en"
        assert resolved.value == TimeZoneNames(
            "Greenwich Mean Time", "GMT", "British Summer Time", "BST", "British Time", "BT"
        )

    def test_en_gb_key_from_en_001(self) -> None:
        """en_GB has no table; en_001 is its CLDR parent."""
        resolved = resolve(TableDomain.TIME_ZONE_NAMES, "en_GB", "America/Halifax")
        assert resolved is not None
        assert resolved.locale == "en_001"
        assert resolved.value == TimeZoneNames(
            "Atlantic Standard Time",
            "∅∅∅",
            "Atlantic Daylight Time",
            "∅∅∅",
            "Atlantic Time",
            "∅∅∅",
        )

    def test_en_ca_overrides_en_001(self) -> None:
        resolved = resolve(TableDomain.TIME_ZONE_NAMES, "en_CA", "America/Halifax")
        assert resolved is not None
        assert resolved.locale == "en_CA"
        assert not resolved.is_fallback

    def test_es_mx_key_from_es_419(self) -> None:
        resolved = resolve(TableDomain.TIME_ZONE_NAMES, "es_MX", "Europe/Paris")
        assert resolved is not None
        assert resolved.locale == "es_419"

    def test_format_data_key_from_root(self) -> None:
        assert lookup(TableDomain.FORMAT_DATA, "ja", "DateTimePatternChars") is None
        resolved = resolve(TableDomain.FORMAT_DATA, "ja_JP", "DateTimePatternChars")
        assert resolved is not None
        assert resolved.locale == "root"
        assert resolved.value == "GyMdkHmsSEDFwWahKzZ"

    def test_locale_without_tables_reaches_root(self) -> None:
        assert lookup_with_fallback(TableDomain.FORMAT_DATA, "de_AT", "field.hour") == "Hour"

    def test_unknown_locale_yields_none(self) -> None:
        assert lookup_with_fallback(TableDomain.LOCALE_NAMES, "fr", "SN") is None

    def test_unlikely_script_skips_language(self) -> None:
        """az_Cyrl parents to root, so the Latin-script az strings are not used."""
        assert lookup(TableDomain.FORMAT_DATA, "az", "field.hour") == "Saat"
        resolved = resolve(TableDomain.FORMAT_DATA, "az_Cyrl", "field.hour")
        assert resolved is not None
        assert resolved.locale == "root"
        assert resolved.value == "Hour"

    def test_unlikely_script_without_root_table(self) -> None:
        assert lookup(TableDomain.LOCALE_NAMES, "vai", "AQ") is not None
        assert lookup_with_fallback(TableDomain.LOCALE_NAMES, "vai_Latn", "AQ") is None

    @given(locale=bundled_locales)
    def test_deterministic(self, locale: str) -> None:
        for domain in TableDomain:
            try:
                first = get_entries(domain, locale)
            except TableNotFoundError:
                continue
            assert get_entries(domain, locale) == first


def test_table_type_exported() -> None:
    assert isinstance(get_table(TableDomain.LOCALE_NAMES, "dyo"), LocaleTable)
