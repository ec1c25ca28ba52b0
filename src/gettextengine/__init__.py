"""gettextengine - gettext-style translation resolution.

Resolves message identifiers to locale-specific strings with plural,
context and domain lookup, and falls back to the untranslated string
with an observable warning instead of raising.

Public API:
    Gettext - Stateful session (current locale and domain)
    BoundTranslator - Translation functions fixed to one locale
    GettextConfig - Session configuration
    DomainCatalog - One domain's translations for one locale
    DiagnosticCollector - Listener that escalates warnings on demand
    guess_env_locale - Locale preference list from an environment mapping

Exceptions:
    GettextError - Base exception class
    TranslationIntegrityError - Raised by DiagnosticCollector on request

Submodules:
    gettextengine.loading - PO/MO loaders (requires Babel)
    gettextengine.diagnostics - Diagnostic codes, templates and formatting
    gettextengine.runtime - Catalog store, plural rules and engine
"""

# Essential Public API - Minimal exports for clean namespace
from .config import GettextConfig
from .diagnostics import (
    Diagnostic,
    DiagnosticCode,
    GettextError,
    TranslationIntegrityError,
)
from .locale_utils import guess_env_locale
from .runtime import BoundTranslator, Comments, DiagnosticCollector, DomainCatalog
from .session import Gettext

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("gettextengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BoundTranslator",
    "Comments",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticCollector",
    "DomainCatalog",
    "Gettext",
    "GettextConfig",
    "GettextError",
    "TranslationIntegrityError",
    "__version__",
    "guess_env_locale",
]
