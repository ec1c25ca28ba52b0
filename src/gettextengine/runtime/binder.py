"""Locale-scoped translator.

A BoundTranslator captures a locale and a default domain once and exposes
the gettext call family without further arguments. It never reads mutable
session state, so one instance can be shared across threads and its
methods can be detached (``ngettext = bound.ngettext``).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from gettextengine.constants import DEFAULT_DOMAIN, NO_CONTEXT
from gettextengine.runtime.catalog import Comments
from gettextengine.runtime.engine import TranslationEngine
from gettextengine.types import Context, Domain, LocaleCode, MessageId

__all__ = ["BoundTranslator"]


@dataclass(frozen=True, slots=True)
class BoundTranslator:
    """Translation functions fixed to one locale and default domain.

    Usually created through ``Gettext.bind_locale()``, which resolves a
    preference list to a loaded locale first.

    Attributes:
        engine: Engine that performs lookups
        locale: Locale every lookup uses ("" means "always untranslated")
        domain: Domain used by the non-``d`` functions

    Example:
        >>> bound = gt.bind_locale("et-EE")
        >>> bound.ngettext("o2-1", "o2-2", 2)
        't2-2'
        >>> gt.set_locale("uk")
        >>> bound.gettext("o2-1")
        't2-1'
    """

    engine: TranslationEngine
    locale: LocaleCode
    domain: Domain = DEFAULT_DOMAIN

    def gettext(self, msgid: MessageId) -> str:
        """Translate a string in the bound domain."""
        return self.engine.resolve(self.locale, self.domain, NO_CONTEXT, msgid)

    def _(self, msgid: MessageId) -> str:
        """Alias for gettext()."""
        return self.engine.resolve(self.locale, self.domain, NO_CONTEXT, msgid)

    def dgettext(self, domain: Domain, msgid: MessageId) -> str:
        """Translate a string in an explicit domain."""
        return self.engine.resolve(self.locale, domain, NO_CONTEXT, msgid)

    def ngettext(self, msgid: MessageId, msgid_plural: str, count: object) -> str:
        """Translate a plural string in the bound domain."""
        return self.engine.resolve(self.locale, self.domain, NO_CONTEXT, msgid, msgid_plural, count)

    def dngettext(
        self, domain: Domain, msgid: MessageId, msgid_plural: str, count: object
    ) -> str:
        """Translate a plural string in an explicit domain."""
        return self.engine.resolve(self.locale, domain, NO_CONTEXT, msgid, msgid_plural, count)

    def pgettext(self, context: Context | None, msgid: MessageId) -> str:
        """Translate a string with a context in the bound domain."""
        return self.engine.resolve(self.locale, self.domain, context, msgid)

    def dpgettext(self, domain: Domain, context: Context | None, msgid: MessageId) -> str:
        """Translate a string with a context in an explicit domain."""
        return self.engine.resolve(self.locale, domain, context, msgid)

    def npgettext(
        self, context: Context | None, msgid: MessageId, msgid_plural: str, count: object
    ) -> str:
        """Translate a plural string with a context in the bound domain."""
        return self.engine.resolve(self.locale, self.domain, context, msgid, msgid_plural, count)

    def dnpgettext(
        self,
        domain: Domain,
        context: Context | None,
        msgid: MessageId,
        msgid_plural: str | None = None,
        count: object = None,
    ) -> str:
        """Translate a possibly plural string with context in an explicit domain.

        This is the most general form; the other functions are shorthands.

        Args:
            domain: Domain to look in
            context: Message context (None or "" for none)
            msgid: Singular source string
            msgid_plural: Plural source string, used when untranslated
            count: Number selecting the plural form

        Returns:
            Translation, or the untranslated fallback
        """
        return self.engine.resolve(self.locale, domain, context, msgid, msgid_plural, count)

    def get_comment(self, domain: Domain, context: Context | None, msgid: MessageId) -> Comments:
        """Return the comments of a message (empty Comments if unknown). Never warns."""
        return self.engine.get_comment(self.locale, domain, context, msgid)
