"""Catalog loading from PO/MO files via Babel.

Converts Babel ``Catalog`` objects into DomainCatalog instances and walks
the two common directory layouts:

    load_translations(dir)          <dir>/<locale>.po
    bindtextdomain(domain, *dirs)   <dir>/<locale>/LC_MESSAGES/<domain>.mo

Both return ``{locale: {domain: DomainCatalog}}``, ready for
``GettextConfig(translations=...)`` or ``Gettext.add_translations``.
Missing directories and files are skipped; unreadable or unparsable files
are logged at WARNING and skipped. Use load_catalog() to inspect the
outcome of a single file.

Requires Babel installation:
    pip install gettextengine[babel]

Without Babel, loading functions raise BabelImportError with installation
guidance.

Python 3.13+. Babel is optional dependency.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from gettextengine.constants import DEFAULT_DOMAIN, LC_MESSAGES_DIR
from gettextengine.enums import LoadStatus
from gettextengine.runtime.catalog import Comments, DomainCatalog, TranslationRecord
from gettextengine.types import Context, Domain, LocaleCode, MessageId

if TYPE_CHECKING:
    from babel.messages.catalog import Catalog, Message

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Conversion
    "catalog_from_babel",
    # Single files
    "load_catalog",
    "CatalogLoadResult",
    # Directory layouts
    "load_translations",
    "bindtextdomain",
    # Exceptions
    "BabelImportError",
]

logger = logging.getLogger(__name__)

type TranslationTable = dict[LocaleCode, dict[Domain, DomainCatalog]]


# ============================================================================
# EXCEPTIONS
# ============================================================================


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides installation guidance to users.
    """

    def __init__(self) -> None:
        super().__init__(
            "Babel is required for loading PO/MO catalogs. "
            "Install with: pip install gettextengine[babel]"
        )


# ============================================================================
# BABEL CONVERSION
# ============================================================================


def _message_comments(message: Message) -> Comments | None:
    references = "\n".join(
        f"{filename}:{lineno}" if lineno else filename for filename, lineno in message.locations
    )
    comments = Comments(
        translator="\n".join(message.user_comments) or None,
        extracted="\n".join(message.auto_comments) or None,
        reference=references or None,
        flag=", ".join(sorted(message.flags)) or None,
        previous="\n".join(message.previous_id) or None,
    )
    return None if comments.is_empty else comments


def _text(value: str | bytes | None, charset: str) -> str:
    # read_mo leaves msgctxt as undecoded bytes
    if isinstance(value, bytes):
        return value.decode(charset)
    return value or ""


def _message_record(message: Message, charset: str) -> TranslationRecord:
    if isinstance(message.id, (list, tuple)):
        msgid, msgid_plural = message.id[0], message.id[1]
    else:
        msgid, msgid_plural = message.id, None

    if isinstance(message.string, (list, tuple)):
        msgstr = tuple(form or "" for form in message.string)
    else:
        msgstr = (message.string or "",)

    return TranslationRecord(
        msgid=msgid,
        msgstr=msgstr,
        msgid_plural=msgid_plural or None,
        context=_text(message.context, charset),
        comments=_message_comments(message),
    )


def catalog_from_babel(catalog: Catalog, *, use_fuzzy: bool = False) -> DomainCatalog:
    """Convert a Babel Catalog into a DomainCatalog.

    The header entry (msgid "") is turned into ``headers``; Babel only
    reports ``Plural-Forms`` when the catalog has a Language. Fuzzy entries
    are skipped unless use_fuzzy is set, matching ``babel.messages.mofile.write_mo``.

    Args:
        catalog: Catalog from ``read_po``/``read_mo`` or built in code
        use_fuzzy: Keep entries flagged fuzzy

    Returns:
        Equivalent DomainCatalog
    """
    translations: dict[Context, dict[MessageId, TranslationRecord]] = {}
    for message in catalog:
        if not message.id:
            continue
        if message.fuzzy and not use_fuzzy:
            continue
        record = _message_record(message, catalog.charset)
        translations.setdefault(record.context, {})[record.msgid] = record

    return DomainCatalog(
        charset=catalog.charset,
        headers=dict(catalog.mime_headers),
        translations=translations,
    )


# ============================================================================
# SINGLE FILES
# ============================================================================


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    """Result of loading one PO/MO file.

    Attributes:
        locale: Locale the file was loaded for
        domain: Domain the file was loaded for
        status: Load status (success, not_found, error)
        path: Path of the file
        catalog: Converted catalog if status is SUCCESS, None otherwise
        error: Exception if status is ERROR, None otherwise
    """

    locale: LocaleCode
    domain: Domain
    status: LoadStatus
    path: Path
    catalog: DomainCatalog | None = None
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the file loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the file was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the file could not be read or parsed."""
        return self.status == LoadStatus.ERROR


def load_catalog(
    path: str | Path,
    locale: LocaleCode,
    domain: Domain = DEFAULT_DOMAIN,
    *,
    use_fuzzy: bool = False,
) -> CatalogLoadResult:
    """Load a single PO or MO file.

    The format is chosen by suffix: ``.mo`` is read with
    ``babel.messages.mofile.read_mo``, anything else with
    ``babel.messages.pofile.read_po``.

    Args:
        path: File to load
        locale: Locale to report the file under
        domain: Domain to report the file under
        use_fuzzy: Keep fuzzy PO entries

    Returns:
        CatalogLoadResult. Never raises for missing or broken files.

    Raises:
        BabelImportError: If Babel is not installed
    """
    try:
        from babel.messages.mofile import read_mo  # noqa: PLC0415
        from babel.messages.pofile import PoFileError, read_po  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError from e

    path = Path(path)
    if not path.is_file():
        return CatalogLoadResult(locale, domain, LoadStatus.NOT_FOUND, path)

    try:
        with path.open("rb") as fileobj:
            if path.suffix == ".mo":
                babel_catalog = read_mo(fileobj)
            else:
                babel_catalog = read_po(fileobj, ignore_obsolete=True, abort_invalid=True)
    except (OSError, PoFileError, UnicodeDecodeError, ValueError, struct.error) as e:
        logger.warning("Skipping unreadable catalog %s: %s", path, e)
        return CatalogLoadResult(locale, domain, LoadStatus.ERROR, path, error=e)

    catalog = catalog_from_babel(babel_catalog, use_fuzzy=use_fuzzy)
    logger.debug(
        "Loaded %s for locale '%s', domain '%s' (%d entries)", path, locale, domain, len(catalog)
    )
    return CatalogLoadResult(locale, domain, LoadStatus.SUCCESS, path, catalog=catalog)


# ============================================================================
# DIRECTORY LAYOUTS
# ============================================================================


def load_translations(directory: str | Path, *, use_fuzzy: bool = False) -> TranslationTable:
    """Load ``<directory>/<locale>.po`` files into the default domain.

    Args:
        directory: Directory holding one PO file per locale
        use_fuzzy: Keep fuzzy entries

    Returns:
        ``{locale: {"messages": DomainCatalog}}``; empty if the directory
        does not exist

    Example:
        >>> translations = load_translations("locale")
        >>> gt = Gettext(GettextConfig(translations=translations))
    """
    root = Path(directory)
    if not root.is_dir():
        logger.warning("Translation directory %s does not exist", root)
        return {}

    catalogs: TranslationTable = {}
    for path in sorted(root.glob("*.po")):
        result = load_catalog(path, path.stem, DEFAULT_DOMAIN, use_fuzzy=use_fuzzy)
        if result.catalog is not None:
            catalogs[path.stem] = {DEFAULT_DOMAIN: result.catalog}
    return catalogs


def bindtextdomain(domain: Domain, *directories: str | Path) -> TranslationTable:
    """Load ``<dir>/<locale>/LC_MESSAGES/<domain>.mo`` from POSIX locale trees.

    Directories are read in order; a locale found in a later directory
    replaces the same locale from an earlier one.

    Args:
        domain: Domain whose MO files are loaded
        *directories: Locale trees, e.g. ``/usr/share/locale``

    Returns:
        ``{locale: {domain: DomainCatalog}}``
    """
    catalogs: TranslationTable = {}
    for directory in directories:
        root = Path(directory)
        if not root.is_dir():
            logger.debug("Skipping missing locale directory %s", root)
            continue
        for locale_dir in sorted(root.iterdir()):
            if not locale_dir.is_dir():
                continue
            mo_path = locale_dir / LC_MESSAGES_DIR / f"{domain}.mo"
            result = load_catalog(mo_path, locale_dir.name, domain)
            if result.catalog is not None:
                catalogs[locale_dir.name] = {domain: result.catalog}
    return catalogs
