"""Catalog data structures and the per-locale catalog store.

Data model:
    CatalogStore: locale -> domain -> DomainCatalog
    DomainCatalog: charset, headers, translations
    translations: context -> msgid -> TranslationRecord

Catalogs come from external loaders (see gettextengine.loading) or from
gettext-parser-shaped mappings, which are converted once when added.
Everything stored is immutable, and the store replaces whole entries on
write (copy-on-write), so concurrent readers always see a consistent
snapshot. Writers must still be serialized by the caller.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from gettextengine.constants import NO_CONTEXT, PLURAL_FORMS_HEADER
from gettextengine.diagnostics import Diagnostic, DiagnosticTemplate
from gettextengine.types import Context, Domain, LocaleCode, MessageId

__all__ = [
    "CatalogStore",
    "Comments",
    "DomainCatalog",
    "TranslationRecord",
]

logger = logging.getLogger(__name__)

_COMMENT_FIELDS: tuple[str, ...] = ("translator", "extracted", "reference", "flag", "previous")


@dataclass(frozen=True, slots=True)
class Comments:
    """Comments attached to a catalog entry.

    All fields are None when the entry has no comment of that kind. An
    instance with every field None is the "empty structure" returned for
    unknown messages.

    Attributes:
        translator: ``# ...`` translator comments
        extracted: ``#. ...`` comments extracted from source code
        reference: ``#: file:line`` source references
        flag: ``#, ...`` flags such as ``fuzzy``
        previous: ``#| ...`` previous msgid
    """

    translator: str | None = None
    extracted: str | None = None
    reference: str | None = None
    flag: str | None = None
    previous: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Comments:
        """Build from a gettext-parser ``comments`` mapping, ignoring unknown keys."""
        values = {
            key: value for key in _COMMENT_FIELDS if isinstance(value := data.get(key), str)
        }
        return cls(**values)

    @property
    def is_empty(self) -> bool:
        """True when no comment field is set."""
        return all(getattr(self, key) is None for key in _COMMENT_FIELDS)

    def as_dict(self) -> dict[str, str]:
        """Return the set fields as a plain dict (empty dict when is_empty)."""
        return {
            key: value for key in _COMMENT_FIELDS if (value := getattr(self, key)) is not None
        }


@dataclass(frozen=True, slots=True)
class TranslationRecord:
    """One message's data for one locale/domain/context.

    Attributes:
        msgid: Singular source id (lookup key)
        msgstr: Translations indexed by plural form; index 0 is the singular
        msgid_plural: Plural source id, or None for non-plural entries
        context: Message context ("" for none)
        comments: Attached comments, or None
    """

    msgid: MessageId
    msgstr: tuple[str, ...]
    msgid_plural: str | None = None
    context: Context = NO_CONTEXT
    comments: Comments | None = None

    def get_form(self, index: int) -> str | None:
        """Return the translation at a plural index, or None if absent or empty."""
        if 0 <= index < len(self.msgstr):
            return self.msgstr[index] or None
        return None

    @classmethod
    def from_mapping(
        cls, msgid: MessageId, context: Context, data: Mapping[str, object]
    ) -> TranslationRecord | None:
        """Build from a gettext-parser entry mapping.

        Args:
            msgid: Table key for the entry (used when the entry has no msgid)
            context: Context key the entry was found under
            data: Entry mapping with ``msgstr`` and optional ``msgid``,
                ``msgid_plural`` and ``comments`` keys

        Returns:
            The record, or None if ``msgstr`` is missing or not strings
        """
        raw_msgstr = data.get("msgstr")
        if isinstance(raw_msgstr, str):
            msgstr: tuple[str, ...] = (raw_msgstr,)
        elif isinstance(raw_msgstr, (list, tuple)) and all(
            isinstance(item, str) for item in raw_msgstr
        ):
            msgstr = tuple(raw_msgstr)
        else:
            return None

        raw_msgid = data.get("msgid")
        raw_plural = data.get("msgid_plural")
        raw_comments = data.get("comments")
        return cls(
            msgid=raw_msgid if isinstance(raw_msgid, str) else msgid,
            msgstr=msgstr,
            msgid_plural=raw_plural if isinstance(raw_plural, str) and raw_plural else None,
            context=context,
            comments=(
                Comments.from_mapping(raw_comments) if isinstance(raw_comments, Mapping) else None
            ),
        )


type ContextTable = Mapping[Context, Mapping[MessageId, TranslationRecord]]


@dataclass(frozen=True, slots=True)
class DomainCatalog:
    """A named bundle of translations for one locale.

    Attributes:
        charset: Declared charset of the source file (informational only)
        headers: Catalog headers (``Plural-Forms``, ``Language``, ...)
        translations: context -> msgid -> TranslationRecord
    """

    charset: str = "utf-8"
    headers: Mapping[str, str] = field(default_factory=dict)
    translations: ContextTable = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the header and translation mappings."""
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
        object.__setattr__(
            self,
            "translations",
            MappingProxyType(
                {ctx: MappingProxyType(dict(table)) for ctx, table in self.translations.items()}
            ),
        )

    def get(self, context: Context, msgid: MessageId) -> TranslationRecord | None:
        """Return the record for (context, msgid), or None."""
        table = self.translations.get(context)
        if table is None:
            return None
        return table.get(msgid)

    def get_header(self, name: str) -> str | None:
        """Return a header value, matching the name case-insensitively."""
        if name in self.headers:
            return self.headers[name]
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

    @property
    def plural_forms(self) -> str | None:
        """The declared ``Plural-Forms`` header, if any."""
        return self.get_header(PLURAL_FORMS_HEADER)

    def __len__(self) -> int:
        """Number of records across all contexts."""
        return sum(len(table) for table in self.translations.values())

    @classmethod
    def from_mapping(cls, data: object) -> tuple[DomainCatalog, tuple[str, ...]]:
        """Convert a gettext-parser-shaped mapping into a DomainCatalog.

        Expected shape::

            {"charset": "utf-8",
             "headers": {"Plural-Forms": "..."},
             "translations": {"": {"msgid": {"msgid": ..., "msgstr": [...]}}}}

        Malformed parts are dropped instead of raising; a mapping without a
        usable ``translations`` table becomes an empty catalog.

        Args:
            data: Parsed catalog (usually the output of a PO/MO parser or JSON)

        Returns:
            Tuple of (catalog, problems). Problems is a tuple of human-readable
            descriptions of everything that was dropped.
        """
        problems: list[str] = []
        if not isinstance(data, Mapping):
            problems.append(f"expected a mapping, got {type(data).__name__}")
            return cls(), tuple(problems)

        charset = data.get("charset")
        if not isinstance(charset, str) or not charset:
            charset = "utf-8"

        raw_headers = data.get("headers", {})
        headers: dict[str, str] = {}
        if isinstance(raw_headers, Mapping):
            headers = {
                key: value
                for key, value in raw_headers.items()
                if isinstance(key, str) and isinstance(value, str)
            }
        else:
            problems.append("'headers' is not a mapping")

        raw_translations = data.get("translations")
        if not isinstance(raw_translations, Mapping):
            problems.append("missing 'translations' table")
            return cls(charset=charset, headers=headers), tuple(problems)

        translations: dict[Context, dict[MessageId, TranslationRecord]] = {}
        for context, entries in raw_translations.items():
            if not isinstance(context, str) or not isinstance(entries, Mapping):
                problems.append(f"context {context!r} is not a mapping of entries")
                continue
            table: dict[MessageId, TranslationRecord] = {}
            for msgid, entry in entries.items():
                record = (
                    TranslationRecord.from_mapping(msgid, context, entry)
                    if isinstance(msgid, str) and isinstance(entry, Mapping)
                    else None
                )
                if record is None:
                    problems.append(f"entry {msgid!r} in context {context!r} has no valid msgstr")
                    continue
                table[msgid] = record
            translations[context] = table

        return cls(charset=charset, headers=headers, translations=translations), tuple(problems)


class CatalogStore:
    """Per-locale, per-domain catalog container.

    Thread Safety:
        Reads are safe from any number of threads. add_translations() swaps
        in a new per-locale dict rather than mutating the one readers may be
        iterating, but concurrent writers must be serialized by the caller.

    Example:
        >>> store = CatalogStore()
        >>> store.add_translations("et", "messages", {"translations": {"": {}}})
        ()
        >>> sorted(store.get_locales())
        ['et']
    """

    __slots__ = ("_catalogs",)

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._catalogs: dict[LocaleCode, Mapping[Domain, DomainCatalog]] = {}

    def add_translations(
        self,
        locale: LocaleCode,
        domain: Domain,
        catalog: DomainCatalog | Mapping[str, object],
    ) -> tuple[Diagnostic, ...]:
        """Insert or replace the catalog at (locale, domain).

        Args:
            locale: Locale code, stored as given
            domain: Domain name
            catalog: DomainCatalog, or a gettext-parser-shaped mapping

        Returns:
            MALFORMED_CATALOG diagnostics for anything dropped during
            conversion. Empty tuple for a clean add.
        """
        diagnostics: tuple[Diagnostic, ...] = ()
        if not isinstance(catalog, DomainCatalog):
            catalog, problems = DomainCatalog.from_mapping(catalog)
            diagnostics = tuple(
                DiagnosticTemplate.malformed_catalog(locale, domain, problem)
                for problem in problems
            )

        domains = dict(self._catalogs.get(locale, {}))
        domains[domain] = catalog
        self._catalogs[locale] = MappingProxyType(domains)
        logger.debug(
            "Added catalog for locale '%s', domain '%s' (%d entries)", locale, domain, len(catalog)
        )
        return diagnostics

    def get_locales(self) -> frozenset[LocaleCode]:
        """All locales with at least one domain."""
        return frozenset(locale for locale, domains in self._catalogs.items() if domains)

    def has_locale(self, locale: LocaleCode) -> bool:
        """Check whether any domain has been added for locale."""
        return bool(self._catalogs.get(locale))

    def get_domains(self, locale: LocaleCode) -> frozenset[Domain]:
        """Domains loaded for locale (empty if the locale is unknown)."""
        return frozenset(self._catalogs.get(locale, {}))

    def get_catalog(self, locale: LocaleCode, domain: Domain) -> DomainCatalog | None:
        """Return the catalog at (locale, domain), or None."""
        return self._catalogs.get(locale, {}).get(domain)

    def lookup(
        self,
        locale: LocaleCode,
        domain: Domain,
        context: Context,
        msgid: MessageId,
    ) -> TranslationRecord | None:
        """Return the record for (locale, domain, context, msgid), or None."""
        catalog = self.get_catalog(locale, domain)
        if catalog is None:
            return None
        return catalog.get(context, msgid)

    def __contains__(self, locale: object) -> bool:
        """Support ``locale in store``."""
        return isinstance(locale, str) and self.has_locale(locale)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"CatalogStore(locales={sorted(self.get_locales())!r})"
