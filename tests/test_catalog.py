"""Tests for catalog records, DomainCatalog conversion and CatalogStore."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

import pytest

from gettextengine.diagnostics import DiagnosticCode
from gettextengine.runtime.catalog import (
    CatalogStore,
    Comments,
    DomainCatalog,
    TranslationRecord,
)


class TestComments:
    """Comments record."""

    def test_empty_by_default(self) -> None:
        """Comments() has no fields set."""
        assert Comments().is_empty
        assert Comments().as_dict() == {}

    def test_from_mapping_ignores_unknown_and_non_string(self) -> None:
        """Only the five known string fields are kept."""
        comments = Comments.from_mapping({"translator": "hi", "flag": 3, "other": "x"})
        assert comments == Comments(translator="hi")


class TestTranslationRecord:
    """TranslationRecord conversion and slot access."""

    def test_string_msgstr_becomes_single_form(self) -> None:
        """A bare string msgstr is one form."""
        record = TranslationRecord.from_mapping("a", "", {"msgstr": "b"})
        assert record is not None
        assert record.msgstr == ("b",)

    def test_missing_msgstr_is_rejected(self) -> None:
        """An entry without msgstr cannot be converted."""
        assert TranslationRecord.from_mapping("a", "", {"msgid": "a"}) is None

    def test_non_string_forms_are_rejected(self) -> None:
        """msgstr lists must contain only strings."""
        assert TranslationRecord.from_mapping("a", "", {"msgstr": ["x", 1]}) is None

    def test_table_key_used_when_msgid_missing(self) -> None:
        """The table key stands in for a missing msgid."""
        record = TranslationRecord.from_mapping("key", "ctx", {"msgstr": ["v"]})
        assert record is not None
        assert record.msgid == "key"
        assert record.context == "ctx"

    def test_get_form_treats_empty_and_missing_as_absent(self) -> None:
        """Out-of-range and empty slots both return None."""
        record = TranslationRecord(msgid="a", msgstr=("one", ""))
        assert record.get_form(0) == "one"
        assert record.get_form(1) is None
        assert record.get_form(2) is None
        assert record.get_form(-1) is None


class TestDomainCatalog:
    """DomainCatalog immutability and conversion."""

    def test_from_mapping_reads_fixture(self, latin13: dict[str, Any]) -> None:
        """The gettext-parser fixture converts without problems."""
        catalog, problems = DomainCatalog.from_mapping(latin13)
        assert problems == ()
        assert catalog.charset == "iso-8859-13"
        assert catalog.plural_forms == "nplurals=2; plural=(n!=1);"
        record = catalog.get("c2", "co2-1")
        assert record is not None
        assert record.msgstr == ("ct2-1", "ct2-2")
        assert record.msgid_plural == "co2-2"

    def test_header_lookup_is_case_insensitive(self) -> None:
        """plural-forms and Plural-Forms name the same header."""
        catalog = DomainCatalog(headers={"plural-forms": "nplurals=1; plural=0;"})
        assert catalog.plural_forms == "nplurals=1; plural=0;"

    def test_mappings_are_read_only(self) -> None:
        """Headers and translations are frozen after construction."""
        catalog = DomainCatalog(headers={"A": "b"}, translations={"": {}})
        assert isinstance(catalog.headers, MappingProxyType)
        assert isinstance(catalog.translations, MappingProxyType)
        with pytest.raises(TypeError):
            catalog.headers["A"] = "c"  # type: ignore[index]

    def test_source_mapping_changes_do_not_leak(self) -> None:
        """Mutating the input dict after construction does not change the catalog."""
        table = {"a": TranslationRecord(msgid="a", msgstr=("b",))}
        catalog = DomainCatalog(translations={"": table})
        table["c"] = TranslationRecord(msgid="c", msgstr=("d",))
        assert catalog.get("", "c") is None

    @pytest.mark.parametrize(
        "data",
        [None, [], "catalog", {"charset": "utf-8"}, {"translations": ["not", "a", "mapping"]}],
    )
    def test_malformed_input_becomes_empty_catalog(self, data: object) -> None:
        """Anything without a usable translations table yields an empty catalog."""
        catalog, problems = DomainCatalog.from_mapping(data)
        assert len(catalog) == 0
        assert problems

    def test_bad_entries_are_dropped_individually(self) -> None:
        """One broken entry does not discard the rest of its context."""
        catalog, problems = DomainCatalog.from_mapping(
            {"translations": {"": {"ok": {"msgstr": ["fine"]}, "bad": {"msgstr": 5}}}}
        )
        assert catalog.get("", "ok") is not None
        assert catalog.get("", "bad") is None
        assert len(problems) == 1


class TestCatalogStore:
    """CatalogStore add/query operations."""

    def test_add_and_lookup(self, latin13: dict[str, Any]) -> None:
        """Added catalogs are found by (locale, domain, context, msgid)."""
        store = CatalogStore()
        assert store.add_translations("et-EE", "messages", latin13) == ()
        record = store.lookup("et-EE", "messages", "", "o2-1")
        assert record is not None
        assert record.msgstr == ("t2-1", "t2-2")

    def test_lookup_misses_return_none(self, latin13: dict[str, Any]) -> None:
        """Unknown locale, domain, context or msgid all miss."""
        store = CatalogStore()
        store.add_translations("et-EE", "messages", latin13)
        assert store.lookup("de", "messages", "", "o2-1") is None
        assert store.lookup("et-EE", "other", "", "o2-1") is None
        assert store.lookup("et-EE", "messages", "c9", "o2-1") is None
        assert store.lookup("et-EE", "messages", "", "nope") is None

    def test_custom_domain(self, latin13: dict[str, Any]) -> None:
        """Domains are independent partitions of a locale."""
        store = CatalogStore()
        store.add_translations("et-EE", "mydomain", latin13)
        catalog = store.get_catalog("et-EE", "mydomain")
        assert catalog is not None
        assert catalog.charset == "iso-8859-13"
        assert store.get_domains("et-EE") == frozenset({"mydomain"})

    def test_add_replaces_instead_of_merging(self) -> None:
        """Adding the same (locale, domain) twice keeps only the second catalog."""
        store = CatalogStore()
        store.add_translations("de", "messages", {"translations": {"": {"a": {"msgstr": ["A"]}}}})
        store.add_translations("de", "messages", {"translations": {"": {"b": {"msgstr": ["B"]}}}})
        assert store.lookup("de", "messages", "", "a") is None
        assert store.lookup("de", "messages", "", "b") is not None

    def test_get_locales(self) -> None:
        """get_locales lists every locale with a domain."""
        store = CatalogStore()
        store.add_translations("et-EE", "messages", DomainCatalog())
        store.add_translations("uk", "errors", DomainCatalog())
        assert store.get_locales() == frozenset({"et-EE", "uk"})
        assert "uk" in store
        assert "de" not in store

    def test_malformed_catalog_reports_diagnostic(self) -> None:
        """A mapping without translations is stored empty and reported."""
        store = CatalogStore()
        diagnostics = store.add_translations("de", "messages", {"charset": "utf-8"})
        assert [d.code for d in diagnostics] == [DiagnosticCode.MALFORMED_CATALOG]
        assert diagnostics[0].locale == "de"
        assert store.lookup("de", "messages", "", "anything") is None
        assert "de" in store

    def test_earlier_catalog_object_unaffected_by_replacement(self) -> None:
        """Readers holding a catalog keep a consistent snapshot after a write."""
        store = CatalogStore()
        first = DomainCatalog(
            translations={"": {"a": TranslationRecord(msgid="a", msgstr=("A",))}}
        )
        store.add_translations("de", "messages", first)
        held = store.get_catalog("de", "messages")
        store.add_translations("de", "messages", DomainCatalog())
        assert held is first
        assert held.get("", "a") is not None
