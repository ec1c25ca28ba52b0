"""Gettext runtime package.

Provides catalog storage, plural selection, the warning sink, the
translation engine and the locale-scoped BoundTranslator.

Python 3.13+.
"""

from .binder import BoundTranslator
from .cache import PluralSelectorCache
from .catalog import CatalogStore, Comments, DomainCatalog, TranslationRecord
from .engine import TranslationEngine
from .events import DiagnosticCollector, WarningSink
from .plural_rules import PluralSelector, resolve_plural_selector

__all__ = [
    "BoundTranslator",
    "CatalogStore",
    "Comments",
    "DiagnosticCollector",
    "DomainCatalog",
    "PluralSelector",
    "PluralSelectorCache",
    "TranslationEngine",
    "TranslationRecord",
    "WarningSink",
    "resolve_plural_selector",
]
