"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode

__all__ = ["DiagnosticTemplate"]


class DiagnosticTemplate:
    """Centralized diagnostic templates.

    All warning text is created here so that tests can assert on codes and
    fields instead of on ad hoc strings.
    """

    @staticmethod
    def no_translation(locale: str, domain: str, context: str, msgid: str) -> Diagnostic:
        """No catalog entry for a message.

        Args:
            locale: Locale that was searched
            domain: Domain that was searched
            context: Context that was searched ("" for none)
            msgid: The message identifier that was not found

        Returns:
            Diagnostic for NO_TRANSLATION
        """
        msg = (
            f'No translation found for msgid "{msgid}" in msgctxt "{context}" '
            f'and domain "{domain}"'
        )
        return Diagnostic(
            code=DiagnosticCode.NO_TRANSLATION,
            message=msg,
            locale=locale,
            domain=domain,
            context=context,
            msgid=msgid,
            hint="Add the message to the catalog or check the msgid spelling",
        )

    @staticmethod
    def invalid_argument(
        function: str, argument: str, value: object, expected: str = "str"
    ) -> Diagnostic:
        """Setter or option received a value of the wrong type.

        Args:
            function: Name of the called method or option owner
            argument: Name of the argument
            value: The rejected value
            expected: Description of the accepted type

        Returns:
            Diagnostic for INVALID_ARGUMENT
        """
        received = type(value).__name__
        msg = f"{function}() called with {argument} of type {received}; expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARGUMENT,
            message=msg,
            argument=argument,
            received_type=received,
            hint="The previous value was kept",
        )

    @staticmethod
    def empty_argument(function: str, argument: str) -> Diagnostic:
        """Setter received an empty or whitespace-only string.

        Returns:
            Diagnostic for EMPTY_ARGUMENT
        """
        msg = f"{function}() called with an empty {argument}"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_ARGUMENT,
            message=msg,
            argument=argument,
            received_type="str",
        )

    @staticmethod
    def locale_not_loaded(locale: str) -> Diagnostic:
        """Locale selected that has no catalogs and is not the source locale.

        Returns:
            Diagnostic for LOCALE_NOT_LOADED
        """
        msg = f'Locale "{locale}" does not have translations in the catalogs'
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_LOADED,
            message=msg,
            locale=locale,
            hint="Call add_translations() for this locale or set it as source_locale",
        )

    @staticmethod
    def no_matching_locale(preferences: Sequence[str]) -> Diagnostic:
        """None of the preferred locales has catalogs.

        Args:
            preferences: The preference list that was scanned

        Returns:
            Diagnostic for NO_MATCHING_LOCALE
        """
        listed = ", ".join(preferences) if preferences else "<empty>"
        msg = f"None of the locales have translations in the catalogs: {listed}"
        return Diagnostic(
            code=DiagnosticCode.NO_MATCHING_LOCALE,
            message=msg,
        )

    @staticmethod
    def unknown_plural_forms(locale: str, domain: str | None, header: str) -> Diagnostic:
        """Catalog declares a Plural-Forms header missing from the header table.

        Returns:
            Diagnostic for UNKNOWN_PLURAL_FORMS
        """
        msg = f'Unknown Plural-Forms header "{header}"; falling back to locale rules'
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_PLURAL_FORMS,
            message=msg,
            locale=locale,
            domain=domain,
            hint="Use the canonical Plural-Forms expression for the language",
        )

    @staticmethod
    def plural_fallback_default(locale: str, domain: str | None) -> Diagnostic:
        """No locale table entry; the two-form default selector is used.

        Returns:
            Diagnostic for PLURAL_FALLBACK_DEFAULT
        """
        msg = (
            f'No plural rules found for locale "{locale}"; '
            "using default plurals (nplurals=2; plural=(n != 1))"
        )
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FALLBACK_DEFAULT,
            message=msg,
            locale=locale,
            domain=domain,
        )

    @staticmethod
    def plural_index_out_of_range(
        locale: str, domain: str, index: int, plural_count: int
    ) -> Diagnostic:
        """Plural selector produced an index outside its declared range.

        Returns:
            Diagnostic for PLURAL_INDEX_OUT_OF_RANGE
        """
        msg = (
            f"Plural selector returned index {index} but nplurals={plural_count}; "
            f"clamped to {min(max(index, 0), plural_count - 1)}"
        )
        return Diagnostic(
            code=DiagnosticCode.PLURAL_INDEX_OUT_OF_RANGE,
            message=msg,
            locale=locale,
            domain=domain,
        )

    @staticmethod
    def malformed_catalog(locale: str, domain: str, reason: str) -> Diagnostic:
        """Catalog input does not have the expected shape.

        Returns:
            Diagnostic for MALFORMED_CATALOG
        """
        msg = f'Catalog for locale "{locale}" and domain "{domain}" is malformed: {reason}'
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_CATALOG,
            message=msg,
            locale=locale,
            domain=domain,
            hint="The domain will behave as if it had no translations",
        )
