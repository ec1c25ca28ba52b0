"""Stateful gettext session.

Gettext holds a current locale and domain that the gettext call family
reads at call time, plus the catalogs and listeners shared with every
translator bound from it. Use bind_locale() for per-request or per-thread
translation; a BoundTranslator does not see later set_locale() calls.

Invalid arguments to the setters never raise. They are reported through
the warning sink and the previous state is kept.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from gettextengine.config import GettextConfig
from gettextengine.constants import DEFAULT_DOMAIN, NO_CONTEXT
from gettextengine.diagnostics import Diagnostic, DiagnosticTemplate
from gettextengine.runtime.binder import BoundTranslator
from gettextengine.runtime.catalog import Comments, DomainCatalog
from gettextengine.runtime.engine import TranslationEngine
from gettextengine.runtime.events import EventHandler, EventKey, WarningSink
from gettextengine.types import Context, Domain, LocaleCode, MessageId

__all__ = ["Gettext"]

logger = logging.getLogger(__name__)


class Gettext:
    """Gettext translation session.

    Example:
        >>> gt = Gettext(GettextConfig(source_locale="en"))
        >>> gt.add_translations("et-EE", "messages", catalog)
        ()
        >>> gt.set_locale("et-EE")
        >>> gt.ngettext("o2-1", "o2-2", 2)
        't2-2'

    Thread Safety:
        Lookups only read shared state. The setters and add_translations()
        mutate the session and must not run concurrently with other calls
        on the same instance. For concurrent multi-locale serving, load once
        and hand out BoundTranslator instances.
    """

    __slots__ = ("_domain", "_engine", "_locale", "_sink")

    def __init__(self, config: GettextConfig | Mapping[str, object] | None = None) -> None:
        """Initialize session.

        Args:
            config: GettextConfig, a loose option mapping (validated with
                GettextConfig.from_options, invalid values are warned about
                and replaced by defaults), or None for defaults
        """
        diagnostics: tuple[Diagnostic, ...] = ()
        if not isinstance(config, GettextConfig):
            config, diagnostics = GettextConfig.from_options(config)

        self._sink = WarningSink(debug=config.debug)
        self._engine = TranslationEngine(sink=self._sink, source_locale=config.source_locale)
        self._locale: LocaleCode = ""
        self._domain: Domain = DEFAULT_DOMAIN
        self._sink.emit_all(diagnostics)

        if config.translations:
            self._load_translations(config.translations)

        logger.info(
            "Gettext initialized: source_locale=%r, debug=%s, locales=%d",
            config.source_locale,
            config.debug,
            len(self._engine.store.get_locales()),
        )

    def _load_translations(self, translations: Mapping[LocaleCode, object]) -> None:
        for locale, domains in translations.items():
            if not isinstance(domains, Mapping):
                reason = f"expected a mapping of domains, got {type(domains).__name__}"
                self._sink.emit(DiagnosticTemplate.malformed_catalog(str(locale), "*", reason))
                continue
            for domain, catalog in domains.items():
                self._engine.add_translations(locale, domain, catalog)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def locale(self) -> LocaleCode:
        """Current locale ("" until set)."""
        return self._locale

    @property
    def domain(self) -> Domain:
        """Current default domain."""
        return self._domain

    @property
    def source_locale(self) -> LocaleCode:
        """Locale the msgids are written in ("" for none)."""
        return self._engine.source_locale

    @property
    def debug(self) -> bool:
        """Whether diagnostics are mirrored to the logger at WARNING."""
        return self._sink.debug

    @debug.setter
    def debug(self, value: bool) -> None:
        self._sink.debug = bool(value)

    @property
    def engine(self) -> TranslationEngine:
        """The translation engine shared with bound translators."""
        return self._engine

    def set_locale(self, locale: object) -> None:
        """Set the current locale.

        A non-string or empty locale is rejected with a warning and the
        current locale is kept. A locale that has no catalogs (and is not
        the source locale) is accepted with a LOCALE_NOT_LOADED warning.
        """
        value = self._validated_string("set_locale", "locale", locale)
        if value is None:
            return
        if not self._engine.is_source_locale(value) and value not in self._engine.store:
            self._sink.emit(DiagnosticTemplate.locale_not_loaded(value))
        self._locale = value

    setlocale = set_locale

    def set_text_domain(self, domain: object) -> None:
        """Set the current default domain. Invalid input is warned about and ignored."""
        value = self._validated_string("set_text_domain", "domain", domain)
        if value is not None:
            self._domain = value

    textdomain = set_text_domain

    def set_first_available_locale(self, locales: Iterable[LocaleCode] | LocaleCode) -> None:
        """Set the first locale of a preference list that has catalogs.

        Args:
            locales: Preference list, highest priority first. A single
                string is treated as a one-element list. Non-string entries
                are skipped.

        Leaves the current locale unchanged and warns NO_MATCHING_LOCALE
        when no entry has catalogs.
        """
        if isinstance(locales, str):
            locales = (locales,)
        elif not isinstance(locales, Iterable):
            self._sink.emit(
                DiagnosticTemplate.invalid_argument(
                    "set_first_available_locale", "locales", locales, "iterable of str"
                )
            )
            return

        preferences = tuple(locales)
        if (found := self._first_loaded(preferences)) is not None:
            self._locale = found
            return
        self._sink.emit(
            DiagnosticTemplate.no_matching_locale([str(item) for item in preferences])
        )

    def _first_loaded(self, preferences: Iterable[object]) -> LocaleCode | None:
        store = self._engine.store
        for candidate in preferences:
            if isinstance(candidate, str) and candidate in store:
                return candidate
        return None

    def _validated_string(self, function: str, argument: str, value: object) -> str | None:
        if not isinstance(value, str):
            self._sink.emit(DiagnosticTemplate.invalid_argument(function, argument, value))
            return None
        if not value.strip():
            self._sink.emit(DiagnosticTemplate.empty_argument(function, argument))
            return None
        return value

    # ------------------------------------------------------------------
    # Catalogs
    # ------------------------------------------------------------------

    def add_translations(
        self,
        locale: LocaleCode,
        domain: Domain,
        catalog: DomainCatalog | Mapping[str, object],
    ) -> tuple[Diagnostic, ...]:
        """Add or replace the catalog for (locale, domain).

        Args:
            locale: Locale code, stored as given
            domain: Domain name
            catalog: DomainCatalog or a gettext-parser-shaped mapping

        Returns:
            MALFORMED_CATALOG diagnostics (also emitted through the sink)
        """
        return self._engine.add_translations(locale, domain, catalog)

    def get_locales(self) -> frozenset[LocaleCode]:
        """Locales that have at least one catalog."""
        return self._engine.store.get_locales()

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def on(self, event: EventKey, handler: EventHandler) -> None:
        """Register a listener for a diagnostic code, "*"/"error", or a custom event."""
        self._sink.on(event, handler)

    def off(self, event: EventKey, handler: EventHandler) -> int:
        """Remove a listener. Returns the number of registrations removed."""
        return self._sink.off(event, handler)

    def emit(self, event: EventKey, data: object = None) -> int:
        """Emit a custom event to its listeners. Returns the number of listeners called."""
        return self._sink.emit(event, data)

    def warn(self, diagnostic: Diagnostic) -> int:
        """Report a diagnostic through the warning sink."""
        return self._sink.emit(diagnostic)

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def bind_locale(
        self,
        locales: Iterable[LocaleCode] | LocaleCode | None,
        domain: Domain = DEFAULT_DOMAIN,
    ) -> BoundTranslator:
        """Return translation functions fixed to one locale and domain.

        Args:
            locales: A locale, a preference list resolved to the first locale
                with catalogs, or None for the untranslated ("") locale
            domain: Default domain of the returned translator

        Returns:
            BoundTranslator that ignores later set_locale()/set_text_domain()

        Warnings:
            NO_MATCHING_LOCALE when no preference has catalogs (the
            untranslated locale is bound), INVALID_ARGUMENT for a locales
            value that is neither None, a str nor an iterable (also bound to
            ""), EMPTY_ARGUMENT for a blank domain, LOCALE_NOT_LOADED for a
            str locale without catalogs that is not the source locale (the
            empty string included).
        """
        explicit = isinstance(locales, str)
        if locales is None:
            locale: LocaleCode = ""
        elif isinstance(locales, str):
            locale = locales
        elif not isinstance(locales, Iterable):
            self._sink.emit(
                DiagnosticTemplate.invalid_argument(
                    "bind_locale", "locales", locales, "str, iterable of str or None"
                )
            )
            locale = ""
        else:
            preferences = tuple(locales)
            found = self._first_loaded(preferences)
            if found is None:
                self._sink.emit(
                    DiagnosticTemplate.no_matching_locale([str(item) for item in preferences])
                )
                found = ""
            locale = found

        if not isinstance(domain, str):
            self._sink.emit(DiagnosticTemplate.invalid_argument("bind_locale", "domain", domain))
            domain = DEFAULT_DOMAIN
        elif not domain.strip():
            self._sink.emit(DiagnosticTemplate.empty_argument("bind_locale", "domain"))

        if (
            explicit
            and not self._engine.is_source_locale(locale)
            and locale not in self._engine.store
        ):
            self._sink.emit(DiagnosticTemplate.locale_not_loaded(locale))

        return BoundTranslator(engine=self._engine, locale=locale, domain=domain)

    with_locale = bind_locale

    # ------------------------------------------------------------------
    # Translation (current locale)
    # ------------------------------------------------------------------

    def gettext(self, msgid: MessageId) -> str:
        """Translate a string in the current domain."""
        return self._engine.resolve(self._locale, self._domain, NO_CONTEXT, msgid)

    _ = gettext

    def dgettext(self, domain: Domain, msgid: MessageId) -> str:
        """Translate a string in an explicit domain."""
        return self._engine.resolve(self._locale, domain, NO_CONTEXT, msgid)

    def ngettext(self, msgid: MessageId, msgid_plural: str, count: object) -> str:
        """Translate a plural string in the current domain."""
        return self._engine.resolve(
            self._locale, self._domain, NO_CONTEXT, msgid, msgid_plural, count
        )

    def dngettext(
        self, domain: Domain, msgid: MessageId, msgid_plural: str, count: object
    ) -> str:
        """Translate a plural string in an explicit domain."""
        return self._engine.resolve(self._locale, domain, NO_CONTEXT, msgid, msgid_plural, count)

    def pgettext(self, context: Context | None, msgid: MessageId) -> str:
        """Translate a string with a context in the current domain."""
        return self._engine.resolve(self._locale, self._domain, context, msgid)

    def dpgettext(self, domain: Domain, context: Context | None, msgid: MessageId) -> str:
        """Translate a string with a context in an explicit domain."""
        return self._engine.resolve(self._locale, domain, context, msgid)

    def npgettext(
        self, context: Context | None, msgid: MessageId, msgid_plural: str, count: object
    ) -> str:
        """Translate a plural string with a context in the current domain."""
        return self._engine.resolve(
            self._locale, self._domain, context, msgid, msgid_plural, count
        )

    def dnpgettext(
        self,
        domain: Domain,
        context: Context | None,
        msgid: MessageId,
        msgid_plural: str | None = None,
        count: object = None,
    ) -> str:
        """Translate a possibly plural string with a context in an explicit domain.

        Args:
            domain: Domain to look in
            context: Message context (None or "" for none)
            msgid: Singular source string
            msgid_plural: Plural source string, used when untranslated
            count: Number selecting the plural form

        Returns:
            Translation, or msgid/msgid_plural when none exists
        """
        return self._engine.resolve(self._locale, domain, context, msgid, msgid_plural, count)

    def get_comment(self, domain: Domain, context: Context | None, msgid: MessageId) -> Comments:
        """Return the comments of a message in the current locale. Never warns."""
        return self._engine.get_comment(self._locale, domain, context, msgid)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"Gettext(locale={self._locale!r}, domain={self._domain!r}, "
            f"source_locale={self.source_locale!r})"
        )
