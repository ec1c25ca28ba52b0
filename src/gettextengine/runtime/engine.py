"""Translation engine: the gettext lookup algorithm.

Both façades (the stateful Gettext session and BoundTranslator) delegate
here with an explicit locale and domain; the engine itself holds no
"current locale" state.

Lookup for (locale, domain, context, msgid, msgid_plural, count):
    1. A missing context means the empty context.
    2. defaultResult is msgid_plural (or msgid when it is empty) for a valid
       count other than 1, msgid otherwise.
    3. No record: warn NO_TRANSLATION unless locale is the source locale,
       return defaultResult.
    4. Record found: index 0 without a valid count, otherwise the plural
       selector for (locale, domain). An empty or missing msgstr slot falls
       back to defaultResult.

A count is valid when it is a real number (numbers.Real or Decimal, bool
excluded) and is not NaN. Zero takes the normal plural path.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from numbers import Integral, Real

from gettextengine.constants import LOG_TRUNCATE, NO_CONTEXT
from gettextengine.diagnostics import Diagnostic, DiagnosticTemplate
from gettextengine.runtime.cache import PluralSelectorCache
from gettextengine.runtime.catalog import CatalogStore, Comments, DomainCatalog
from gettextengine.runtime.events import WarningSink
from gettextengine.runtime.plural_data import PluralSelector
from gettextengine.runtime.plural_rules import resolve_plural_selector
from gettextengine.types import Context, Count, Domain, LocaleCode, MessageId

__all__ = ["TranslationEngine", "coerce_count"]

logger = logging.getLogger(__name__)

_EMPTY_COMMENTS = Comments()


def coerce_count(count: object) -> Count | None:
    """Return count as a selector-ready number, or None if it is not a valid count.

    bool, non-numbers and NaN are "no count". Other integral types (numpy
    integers, integral Decimals) become int and other real types (Fraction,
    numpy floats, finite Decimals) become float, so that family selectors
    only ever see int or float.

    Example:
        >>> coerce_count(3), coerce_count(True), coerce_count(float("nan"))
        (3, None, None)
        >>> coerce_count(Decimal("2.00"))
        2
    """
    match count:
        case bool():
            return None
        case int():
            return count
        case float():
            return None if math.isnan(count) else count
        case Integral():
            return int(count)
        case Decimal():
            if count.is_nan():
                return None
            if not count.is_finite():
                return math.inf if count > 0 else -math.inf
            if count == count.to_integral_value():
                return int(count)
            return float(count)
        case Real():
            number = float(count)
            return None if math.isnan(number) else number
        case _:
            return None


class TranslationEngine:
    """Resolves messages against a catalog store.

    Owns the catalog store, the warning sink and the plural selector cache.
    Plural selectors are cached per (locale, domain) and invalidated for
    that pair whenever add_translations() replaces its catalog.

    Thread Safety:
        resolve() and get_comment() only read shared state and are safe to
        call concurrently. add_translations() must be serialized by the
        caller (see CatalogStore).
    """

    __slots__ = ("_cache", "_sink", "_store", "source_locale")

    def __init__(
        self,
        store: CatalogStore | None = None,
        sink: WarningSink | None = None,
        *,
        source_locale: LocaleCode = "",
        cache: PluralSelectorCache | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            store: Catalog store (default: new empty store)
            sink: Warning sink (default: new sink without debug mirroring)
            source_locale: Locale whose lookups never warn on a miss
            cache: Plural selector cache (default: new cache)
        """
        self._store = store if store is not None else CatalogStore()
        self._sink = sink if sink is not None else WarningSink()
        self._cache = cache if cache is not None else PluralSelectorCache()
        self.source_locale = source_locale

    @property
    def store(self) -> CatalogStore:
        """The catalog store."""
        return self._store

    @property
    def sink(self) -> WarningSink:
        """The warning sink."""
        return self._sink

    @property
    def cache(self) -> PluralSelectorCache:
        """The plural selector cache."""
        return self._cache

    def is_source_locale(self, locale: LocaleCode) -> bool:
        """True when a source locale is configured and equals locale."""
        return bool(self.source_locale) and locale == self.source_locale

    def add_translations(
        self,
        locale: LocaleCode,
        domain: Domain,
        catalog: DomainCatalog | Mapping[str, object],
    ) -> tuple[Diagnostic, ...]:
        """Insert or replace a catalog and drop its cached plural selector.

        Conversion diagnostics are emitted through the sink and returned.
        """
        diagnostics = self._store.add_translations(locale, domain, catalog)
        self._cache.invalidate(locale, domain)
        self._sink.emit_all(diagnostics)
        return diagnostics

    def get_plural_selector(self, locale: LocaleCode, domain: Domain) -> PluralSelector:
        """Return the plural selector for (locale, domain).

        Resolution diagnostics (unknown header, default fallback) are
        emitted on every call, cached or not, so repeated lookups produce
        identical warning sequences.
        """
        resolved = self._cache.get(locale, domain)
        if resolved is None:
            catalog = self._store.get_catalog(locale, domain)
            header = catalog.plural_forms if catalog is not None else None
            resolved = resolve_plural_selector(locale, header, domain=domain)
            self._cache.put(locale, domain, resolved)
            logger.debug(
                "Resolved plural selector '%s' for locale '%s', domain '%s'",
                resolved[0].name,
                locale,
                domain,
            )

        selector, diagnostics = resolved
        self._sink.emit_all(diagnostics)
        return selector

    def resolve(
        self,
        locale: LocaleCode,
        domain: Domain,
        context: Context | None,
        msgid: MessageId,
        msgid_plural: str | None = None,
        count: object = None,
    ) -> str:
        """Resolve a message to its translation or fallback string.

        Args:
            locale: Locale to look in
            domain: Domain to look in
            context: Message context; None and "" both mean no context
            msgid: Singular source string
            msgid_plural: Plural source string, returned untranslated when
                no translation exists and count is not 1
            count: Number selecting the plural form; anything that is not a
                valid count selects the singular path

        Returns:
            Translated string, or the untranslated fallback. Never raises for
            missing or malformed translation data.
        """
        context = context or NO_CONTEXT
        number = coerce_count(count)

        default = msgid
        if number is not None and number != 1:
            default = msgid_plural or msgid

        record = self._store.lookup(locale, domain, context, msgid)
        if record is None:
            if not self.is_source_locale(locale):
                self._sink.emit(DiagnosticTemplate.no_translation(locale, domain, context, msgid))
            else:
                logger.debug(
                    "Source locale '%s' lookup for '%s' returns the msgid",
                    locale,
                    msgid[:LOG_TRUNCATE],
                )
            return default

        index = 0
        if number is not None:
            selector = self.get_plural_selector(locale, domain)
            index = selector.index(number)
            if not 0 <= index < selector.plural_count:
                self._sink.emit(
                    DiagnosticTemplate.plural_index_out_of_range(
                        locale, domain, index, selector.plural_count
                    )
                )
                index = min(max(index, 0), selector.plural_count - 1)

        return record.get_form(index) or default

    def get_comment(
        self,
        locale: LocaleCode,
        domain: Domain,
        context: Context | None,
        msgid: MessageId,
    ) -> Comments:
        """Return the comments attached to a message.

        Never emits a diagnostic. Unknown messages and messages without
        comments both yield an empty Comments instance.
        """
        record = self._store.lookup(locale, domain, context or NO_CONTEXT, msgid)
        if record is None or record.comments is None:
            return _EMPTY_COMMENTS
        return record.comments

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"TranslationEngine(source_locale={self.source_locale!r}, "
            f"locales={sorted(self._store.get_locales())!r})"
        )
