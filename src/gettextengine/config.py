"""Configuration for Gettext sessions.

Provides a single frozen dataclass enumerating the recognized options and
a lenient constructor for loose option mappings (e.g. parsed from JSON or
passed through from an application's settings).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from gettextengine.diagnostics import Diagnostic, DiagnosticTemplate
from gettextengine.runtime.catalog import DomainCatalog
from gettextengine.types import Domain, LocaleCode

__all__ = ["GettextConfig", "TranslationsMapping"]

logger = logging.getLogger(__name__)

type TranslationsMapping = Mapping[
    LocaleCode, Mapping[Domain, DomainCatalog | Mapping[str, object]]
]

_KNOWN_OPTIONS = frozenset({"source_locale", "debug", "translations"})


@dataclass(frozen=True, slots=True)
class GettextConfig:
    """Immutable configuration for a Gettext session.

    All fields have defaults; ``GettextConfig()`` is a usable configuration
    with no source locale, no debug mirroring and no preloaded catalogs.

    Attributes:
        source_locale: Locale the msgids are written in. Lookups in this
            locale never warn about missing translations.
        debug: Mirror every diagnostic to the logger at WARNING level.
        translations: Catalogs to load at construction, keyed by locale then
            domain. Values are DomainCatalog instances or gettext-parser-shaped
            mappings.

    Example:
        >>> config = GettextConfig(source_locale="en", debug=True)
        >>> gt = Gettext(config)
        >>> gt.source_locale
        'en'
    """

    source_locale: LocaleCode = ""
    debug: bool = False
    translations: TranslationsMapping | None = None

    def __post_init__(self) -> None:
        """Validate field types at construction time.

        Raises:
            TypeError: If a field has the wrong type. Use from_options() to
                get warnings instead of exceptions.
        """
        if not isinstance(self.source_locale, str):
            msg = f"source_locale must be str, got {type(self.source_locale).__name__}"
            raise TypeError(msg)
        if not isinstance(self.debug, bool):
            msg = f"debug must be bool, got {type(self.debug).__name__}"
            raise TypeError(msg)
        if self.translations is not None and not isinstance(self.translations, Mapping):
            msg = f"translations must be a mapping, got {type(self.translations).__name__}"
            raise TypeError(msg)

    @classmethod
    def from_options(
        cls, options: Mapping[str, object] | object
    ) -> tuple[GettextConfig, tuple[Diagnostic, ...]]:
        """Build a config from a loose options mapping.

        Unknown keys are ignored. A value of the wrong type is replaced by the
        field default and reported as INVALID_ARGUMENT; None counts as unset.
        An options value that is not a mapping at all yields the default
        config and a single INVALID_ARGUMENT.

        Args:
            options: Option mapping, or None for all defaults

        Returns:
            Tuple of (config, diagnostics)

        Example:
            >>> config, diagnostics = GettextConfig.from_options({"source_locale": 123})
            >>> config.source_locale, diagnostics[0].code.name
            ('', 'INVALID_ARGUMENT')
        """
        if options is None:
            return cls(), ()
        if not isinstance(options, Mapping):
            diagnostic = DiagnosticTemplate.invalid_argument(
                "Gettext", "options", options, "GettextConfig, mapping or None"
            )
            return cls(), (diagnostic,)
        if not options:
            return cls(), ()

        diagnostics: list[Diagnostic] = []

        unknown = sorted(str(key) for key in options if key not in _KNOWN_OPTIONS)
        if unknown:
            logger.debug("Ignoring unknown Gettext options: %s", ", ".join(unknown))

        source_locale = options.get("source_locale")
        if source_locale is not None and not isinstance(source_locale, str):
            diagnostics.append(
                DiagnosticTemplate.invalid_argument("Gettext", "source_locale", source_locale)
            )
            source_locale = None

        debug = options.get("debug")
        if debug is not None and not isinstance(debug, bool):
            diagnostics.append(
                DiagnosticTemplate.invalid_argument("Gettext", "debug", debug, "bool")
            )
            debug = None

        translations = options.get("translations")
        if translations is not None and not isinstance(translations, Mapping):
            diagnostics.append(
                DiagnosticTemplate.invalid_argument(
                    "Gettext", "translations", translations, "mapping"
                )
            )
            translations = None

        config = cls(
            source_locale=source_locale or "",
            debug=bool(debug),
            translations=translations,
        )
        return config, tuple(diagnostics)
