"""Tests for diagnostic codes, templates, formatting and exceptions."""

from __future__ import annotations

import json

import pytest

from gettextengine.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    DiagnosticTemplate,
    GettextError,
    OutputFormat,
    TranslationIntegrityError,
)


class TestDiagnosticCode:
    """Code ranges."""

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (DiagnosticCode.NO_TRANSLATION, "lookup"),
            (DiagnosticCode.EMPTY_ARGUMENT, "configuration"),
            (DiagnosticCode.MALFORMED_CATALOG, "data-quality"),
        ],
    )
    def test_category(self, code: DiagnosticCode, category: str) -> None:
        """The thousands digit decides the category."""
        assert code.category == category


class TestTemplates:
    """Template fields."""

    def test_no_translation_fields(self) -> None:
        """Lookup coordinates are recorded on the diagnostic."""
        diagnostic = DiagnosticTemplate.no_translation("et-EE", "messages", "c2", "Hi")
        assert diagnostic.code is DiagnosticCode.NO_TRANSLATION
        assert (diagnostic.locale, diagnostic.domain, diagnostic.context, diagnostic.msgid) == (
            "et-EE",
            "messages",
            "c2",
            "Hi",
        )
        assert str(diagnostic) == diagnostic.message
        assert diagnostic.severity == "warning"

    def test_invalid_argument_records_type(self) -> None:
        """The received type name and expected type appear in the message."""
        diagnostic = DiagnosticTemplate.invalid_argument("set_locale", "locale", 3)
        assert diagnostic.received_type == "int"
        assert "expected str" in diagnostic.message

    def test_no_matching_locale_lists_preferences(self) -> None:
        """The preference list is part of the message."""
        diagnostic = DiagnosticTemplate.no_matching_locale(["fr", "de"])
        assert "fr" in diagnostic.message
        assert "de" in diagnostic.message


class TestDiagnosticFormatter:
    """Output styles."""

    @pytest.fixture
    def diagnostic(self) -> Diagnostic:
        return DiagnosticTemplate.no_translation("et-EE", "messages", "", "Hi")

    def test_rust_style(self, diagnostic: Diagnostic) -> None:
        """Default output has a header, location and help line."""
        output = DiagnosticFormatter().format(diagnostic)
        lines = output.splitlines()
        assert lines[0].startswith("warning[NO_TRANSLATION]: ")
        assert lines[1] == "  --> locale: et-EE, domain: messages"
        assert lines[-1].startswith("  = help: ")
        assert diagnostic.format_error() == output

    def test_simple_style(self, diagnostic: Diagnostic) -> None:
        """Simple output is one line."""
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic)
        assert output == f"NO_TRANSLATION: {diagnostic.message}"

    def test_json_style(self, diagnostic: Diagnostic) -> None:
        """JSON output carries code, category and lookup fields."""
        data = json.loads(DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic))
        assert data["code"] == "NO_TRANSLATION"
        assert data["code_value"] == 1001
        assert data["category"] == "lookup"
        assert data["msgid"] == "Hi"
        assert "argument" not in data

    def test_control_characters_are_escaped(self) -> None:
        """A msgid with a newline cannot forge a second log line."""
        diagnostic = DiagnosticTemplate.no_translation("et", "messages", "", "a\nwarning[FAKE]")
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic)
        assert "\n" not in output
        assert "\\x0a" in output

    def test_sanitize_truncates(self) -> None:
        """sanitize limits message length."""
        diagnostic = DiagnosticTemplate.no_translation("et", "messages", "", "x" * 500)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=40
        )
        assert formatter.format(diagnostic).endswith("...")

    def test_format_all(self, diagnostic: Diagnostic) -> None:
        """Multiple diagnostics are separated by a blank line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format_all([diagnostic, diagnostic]).count("\n\n") == 1


class TestExceptions:
    """Exception hierarchy."""

    def test_gettext_error_from_string(self) -> None:
        """A plain message has no diagnostic."""
        error = GettextError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_integrity_error_single(self) -> None:
        """One diagnostic is rendered in full."""
        diagnostic = DiagnosticTemplate.locale_not_loaded("uk")
        error = TranslationIntegrityError([diagnostic])
        assert error.diagnostic is diagnostic
        assert "LOCALE_NOT_LOADED" in str(error)

    def test_integrity_error_many(self) -> None:
        """Several diagnostics are summarized."""
        first = DiagnosticTemplate.locale_not_loaded("uk")
        second = DiagnosticTemplate.locale_not_loaded("de")
        error = TranslationIntegrityError([first, second])
        assert str(error).startswith("2 translation diagnostics")
        assert error.diagnostic is first
        assert isinstance(error, GettextError)
