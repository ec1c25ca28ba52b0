"""Tests for PO/MO loading through Babel.

Catalogs are built with babel.messages.Catalog and written with Babel's
own writers, so these tests exercise the same files translation tools
produce.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from babel.messages.catalog import Catalog
from babel.messages.mofile import write_mo
from babel.messages.pofile import write_po

from gettextengine import Gettext, GettextConfig
from gettextengine.enums import LoadStatus
from gettextengine.loading import (
    bindtextdomain,
    catalog_from_babel,
    load_catalog,
    load_translations,
)


def _uk_catalog() -> Catalog:
    catalog = Catalog(locale="uk", domain="messages")
    catalog.add(
        "Hello",
        "Привіт",
        locations=[("app.py", 3)],
        user_comments=["Greeting on the start page"],
        auto_comments=["Shown once per session"],
    )
    catalog.add(("file", "files"), ("файл", "файли", "файлів"))
    catalog.add("Open", "Відкрити файл", context="menu")
    catalog.add("Draft", "Чернетка", flags=("fuzzy",))
    return catalog


def _write_po(path: Path, catalog: Catalog) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as fileobj:
        write_po(fileobj, catalog)
    return path


def _write_mo(path: Path, catalog: Catalog) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as fileobj:
        write_mo(fileobj, catalog)
    return path


class TestCatalogFromBabel:
    """Conversion of in-memory Babel catalogs."""

    def test_header_entry_is_not_a_translation(self) -> None:
        """The msgid "" header becomes headers, not a record."""
        catalog = catalog_from_babel(_uk_catalog())
        assert catalog.get("", "") is None
        assert catalog.get_header("Language") == "uk"
        assert catalog.plural_forms is not None

    def test_plural_record(self) -> None:
        """Tuple ids and strings become msgid_plural and forms."""
        record = catalog_from_babel(_uk_catalog()).get("", "file")
        assert record is not None
        assert record.msgid_plural == "files"
        assert record.msgstr == ("файл", "файли", "файлів")

    def test_comments(self) -> None:
        """Babel comment fields map onto Comments."""
        record = catalog_from_babel(_uk_catalog()).get("", "Hello")
        assert record is not None
        assert record.comments is not None
        assert record.comments.translator == "Greeting on the start page"
        assert record.comments.extracted == "Shown once per session"
        assert record.comments.reference == "app.py:3"

    def test_fuzzy_entries_skipped_by_default(self) -> None:
        """Fuzzy entries are dropped unless use_fuzzy is set."""
        assert catalog_from_babel(_uk_catalog()).get("", "Draft") is None
        record = catalog_from_babel(_uk_catalog(), use_fuzzy=True).get("", "Draft")
        assert record is not None
        assert record.comments is not None
        assert record.comments.flag == "fuzzy"


class TestLoadCatalog:
    """Single-file loading."""

    def test_po_file(self, tmp_path: Path) -> None:
        """A PO file written by Babel loads with contexts and plurals."""
        path = _write_po(tmp_path / "uk.po", _uk_catalog())
        result = load_catalog(path, "uk")
        assert result.is_success
        assert result.catalog is not None
        record = result.catalog.get("menu", "Open")
        assert record is not None
        assert record.msgstr == ("Відкрити файл",)

    def test_mo_file(self, tmp_path: Path) -> None:
        """An MO file loads with decoded contexts."""
        path = _write_mo(tmp_path / "uk.mo", _uk_catalog())
        result = load_catalog(path, "uk")
        assert result.status == LoadStatus.SUCCESS
        assert result.catalog is not None
        assert result.catalog.get("menu", "Open") is not None
        assert result.catalog.get("", "Draft") is None

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing path is NOT_FOUND, not an error."""
        result = load_catalog(tmp_path / "nope.po", "uk")
        assert result.is_not_found
        assert result.catalog is None

    def test_corrupt_po(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Unparsable PO files are reported as ERROR and logged."""
        path = tmp_path / "bad.po"
        path.write_text("this is not a po file\n", encoding="utf-8")
        result = load_catalog(path, "uk")
        assert result.is_error
        assert result.error is not None
        assert "Skipping unreadable catalog" in caplog.text

    def test_corrupt_mo(self, tmp_path: Path) -> None:
        """A file with a bad MO magic number is an ERROR."""
        path = tmp_path / "bad.mo"
        path.write_bytes(b"definitely not an mo file")
        assert load_catalog(path, "uk").is_error


class TestDirectoryLayouts:
    """load_translations() and bindtextdomain()."""

    def test_load_translations(self, tmp_path: Path) -> None:
        """Every <locale>.po lands in the default domain."""
        _write_po(tmp_path / "uk.po", _uk_catalog())
        _write_po(tmp_path / "de.po", Catalog(locale="de"))
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
        translations = load_translations(tmp_path)
        assert sorted(translations) == ["de", "uk"]
        assert set(translations["uk"]) == {"messages"}

    def test_load_translations_skips_broken_files(self, tmp_path: Path) -> None:
        """A broken file does not prevent the others from loading."""
        _write_po(tmp_path / "uk.po", _uk_catalog())
        (tmp_path / "xx.po").write_text("garbage\n", encoding="utf-8")
        assert list(load_translations(tmp_path)) == ["uk"]

    def test_load_translations_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory yields no catalogs."""
        assert load_translations(tmp_path / "missing") == {}

    def test_bindtextdomain(self, tmp_path: Path) -> None:
        """MO files are found in <dir>/<locale>/LC_MESSAGES/<domain>.mo."""
        _write_mo(tmp_path / "uk" / "LC_MESSAGES" / "shop.mo", _uk_catalog())
        _write_mo(tmp_path / "de" / "LC_MESSAGES" / "other.mo", Catalog(locale="de"))
        translations = bindtextdomain("shop", tmp_path)
        assert list(translations) == ["uk"]
        assert set(translations["uk"]) == {"shop"}

    def test_bindtextdomain_later_directory_wins(self, tmp_path: Path) -> None:
        """A locale in a later directory replaces the earlier one."""
        override = Catalog(locale="uk")
        override.add("Hello", "Вітаю")
        _write_mo(tmp_path / "base" / "uk" / "LC_MESSAGES" / "messages.mo", _uk_catalog())
        _write_mo(tmp_path / "site" / "uk" / "LC_MESSAGES" / "messages.mo", override)
        translations = bindtextdomain(
            "messages", tmp_path / "base", tmp_path / "missing", tmp_path / "site"
        )
        record = translations["uk"]["messages"].get("", "Hello")
        assert record is not None
        assert record.msgstr == ("Вітаю",)

    def test_loaded_catalogs_drive_a_session(self, tmp_path: Path) -> None:
        """Loaded catalogs plug into GettextConfig and use their Plural-Forms."""
        _write_po(tmp_path / "uk.po", _uk_catalog())
        gt = Gettext(GettextConfig(translations=load_translations(tmp_path)))
        gt.set_locale("uk")
        assert gt.gettext("Hello") == "Привіт"
        assert gt.ngettext("file", "files", 3) == "файли"
        assert gt.ngettext("file", "files", 11) == "файлів"
        assert gt.pgettext("menu", "Open") == "Відкрити файл"
