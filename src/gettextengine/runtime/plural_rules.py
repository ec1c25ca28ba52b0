"""Plural-forms resolution for a locale and an optional catalog header.

Resolution order:
    1. The catalog's declared ``Plural-Forms`` header, if the header table
       recognizes it.
    2. The locale table: exact locale, then hyphen-to-underscore
       normalization, then the 2-3 character language prefix.
    3. The default two-form selector, ``nplurals=2; plural=(n != 1)``.

Resolution never raises. Unrecognized headers and the default fallback are
reported as diagnostics in the returned tuple; the caller decides where they
go (the engine forwards them to the warning sink).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging

from gettextengine.diagnostics import Diagnostic, DiagnosticTemplate
from gettextengine.locale_utils import get_language_code, normalize_locale
from gettextengine.runtime.plural_data import (
    DEFAULT_PLURAL_SELECTOR,
    LOCALE_PLURAL_TABLE,
    PLURAL_FORMS_TABLE,
    PluralSelector,
    compact_plural_forms,
)
from gettextengine.types import LocaleCode

__all__ = [
    "DEFAULT_PLURAL_SELECTOR",
    "PluralSelector",
    "lookup_locale_plurals",
    "lookup_plural_forms",
    "resolve_plural_selector",
]

logger = logging.getLogger(__name__)


def lookup_plural_forms(header: str) -> PluralSelector | None:
    """Look up a Plural-Forms header in the header table.

    Whitespace and a missing trailing semicolon are ignored.

    Args:
        header: Header value, e.g. ``"nplurals=2; plural=(n != 1);"``

    Returns:
        Matching selector, or None if the expression is not in the table

    Example:
        >>> lookup_plural_forms("nplurals=1; plural=0;").plural_count
        1
        >>> lookup_plural_forms("nplurals=2; plural=n%7;") is None
        True
    """
    return PLURAL_FORMS_TABLE.get(compact_plural_forms(header))


def lookup_locale_plurals(locale: LocaleCode) -> PluralSelector | None:
    """Look up a locale in the locale table.

    Tries, in order: the locale as given, the locale with hyphens replaced by
    underscores, and the language-only prefix.

    Args:
        locale: Locale code in either separator convention

    Returns:
        Matching selector, or None if no tier matched

    Example:
        >>> lookup_locale_plurals("pt-BR").name
        'two-forms-greater-than-one'
        >>> lookup_locale_plurals("uk-UA").name
        'east-slavic'
        >>> lookup_locale_plurals("xx-YY") is None
        True
    """
    if selector := LOCALE_PLURAL_TABLE.get(locale):
        return selector
    if selector := LOCALE_PLURAL_TABLE.get(normalize_locale(locale)):
        return selector
    return LOCALE_PLURAL_TABLE.get(get_language_code(locale))


def resolve_plural_selector(
    locale: LocaleCode,
    header: str | None = None,
    *,
    domain: str | None = None,
) -> tuple[PluralSelector, tuple[Diagnostic, ...]]:
    """Resolve the plural selector to use for a locale/catalog pair.

    Args:
        locale: Locale whose catalog is being read
        header: The catalog's ``Plural-Forms`` header, if it declares one
        domain: Domain name, only used to enrich diagnostics

    Returns:
        Tuple of (selector, diagnostics). Diagnostics is empty when the header
        or the locale table matched; it holds UNKNOWN_PLURAL_FORMS when a
        declared header was not recognized and PLURAL_FALLBACK_DEFAULT when
        the default selector was used.

    Example:
        >>> selector, diagnostics = resolve_plural_selector("et", "nplurals=2; plural=(n != 1);")
        >>> selector.plural_count, diagnostics
        (2, ())
        >>> selector, diagnostics = resolve_plural_selector("tlh")
        >>> diagnostics[0].code.name
        'PLURAL_FALLBACK_DEFAULT'
    """
    diagnostics: list[Diagnostic] = []

    if header:
        if selector := lookup_plural_forms(header):
            return selector, ()
        logger.warning("Unknown Plural-Forms header for locale '%s': %r", locale, header)
        diagnostics.append(DiagnosticTemplate.unknown_plural_forms(locale, domain, header))

    if selector := lookup_locale_plurals(locale):
        return selector, tuple(diagnostics)

    logger.warning(
        "No fallback plurals found for locale '%s'. Using default plurals (Germanic)", locale
    )
    diagnostics.append(DiagnosticTemplate.plural_fallback_default(locale, domain))
    return DEFAULT_PLURAL_SELECTOR, tuple(diagnostics)
