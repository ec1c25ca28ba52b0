"""Type aliases for the translation domain.

Semantic aliases used throughout the package and by user code when
annotating call sites.

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

__all__ = [
    "Context",
    "Count",
    "Domain",
    "LocaleCode",
    "MessageId",
]

type LocaleCode = str
"""Locale code as used for catalog keys (e.g., 'et-EE', 'pt_BR', 'uk')."""

type Domain = str
"""Gettext domain name (e.g., 'messages', 'errors')."""

type Context = str
"""Disambiguation context (msgctxt). The empty string means no context."""

type MessageId = str
"""Source-language message identifier (msgid)."""

type Count = int | float | Decimal
"""Number used to select a plural form."""
