"""Shared constants for gettextengine.

Centralizes names and limits used across the runtime, session and loader
modules. Placing them here avoids circular imports.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Catalog conventions
    "DEFAULT_DOMAIN",
    "NO_CONTEXT",
    "PLURAL_FORMS_HEADER",
    "LC_MESSAGES_DIR",
    # Event names
    "ANY_DIAGNOSTIC",
    "LEGACY_ERROR_EVENT",
    # Cache limits
    "DEFAULT_PLURAL_CACHE_SIZE",
    # Logging
    "LOG_TRUNCATE",
]

# ============================================================================
# CATALOG CONVENTIONS
# ============================================================================

# Domain used when none is given. Matches GNU gettext and gettext-parser.
DEFAULT_DOMAIN: str = "messages"

# The empty string is the "no context" key in a context table.
NO_CONTEXT: str = ""

# Header carrying the per-domain plural declaration.
PLURAL_FORMS_HEADER: str = "Plural-Forms"

# Directory name in POSIX locale trees: <dir>/<locale>/LC_MESSAGES/<domain>.mo
LC_MESSAGES_DIR: str = "LC_MESSAGES"

# ============================================================================
# EVENT NAMES
# ============================================================================

# Subscribing to this name receives every diagnostic regardless of its code.
ANY_DIAGNOSTIC: str = "*"

# Older callers listen for "error"; treated as an alias for ANY_DIAGNOSTIC.
LEGACY_ERROR_EVENT: str = "error"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached plural selectors, one per (locale, domain) pair.
# 256 covers applications with many locales and a handful of domains each.
DEFAULT_PLURAL_CACHE_SIZE: int = 256

# ============================================================================
# LOGGING
# ============================================================================

# msgids longer than this are truncated in log lines.
LOG_TRUNCATE: int = 80
