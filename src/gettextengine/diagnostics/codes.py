"""Diagnostic codes and data structures.

Defines the codes and the immutable diagnostic record carried by every
warning event.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup misses (no translation for a message)
        2000-2999: Configuration warnings (invalid setter arguments, unknown locales)
        3000-3999: Data-quality issues (plural forms, malformed catalogs)
    """

    # Lookup misses (1000-1999)
    NO_TRANSLATION = 1001

    # Configuration warnings (2000-2999)
    INVALID_ARGUMENT = 2001
    EMPTY_ARGUMENT = 2002
    LOCALE_NOT_LOADED = 2003
    NO_MATCHING_LOCALE = 2004

    # Data-quality issues (3000-3999)
    UNKNOWN_PLURAL_FORMS = 3001
    PLURAL_FALLBACK_DEFAULT = 3002
    PLURAL_INDEX_OUT_OF_RANGE = 3003
    MALFORMED_CATALOG = 3004

    @property
    def category(self) -> str:
        """Category name derived from the code range."""
        match self.value // 1000:
            case 1:
                return "lookup"
            case 2:
                return "configuration"
            case _:
                return "data-quality"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured, non-fatal diagnostic.

    Every field besides ``code`` and ``message`` is optional context. Lookup
    misses fill in locale/domain/context/msgid; configuration warnings
    usually carry only ``argument`` and ``received_type``.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        locale: Locale in effect when the diagnostic was produced
        domain: Gettext domain involved
        context: Message context (msgctxt) involved
        msgid: Message identifier involved
        argument: Name of the offending argument (configuration warnings)
        received_type: Type name of the offending value (configuration warnings)
        hint: Suggestion for fixing the cause
        severity: Always "warning" for emitted events; "error" only when a
            caller escalates
    """

    code: DiagnosticCode
    message: str
    locale: str | None = None
    domain: str | None = None
    context: str | None = None
    msgid: str | None = None
    argument: str | None = None
    received_type: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "warning"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the multi-line compiler style.

        Example output:
            warning[NO_TRANSLATION]: No translation found for msgid "Hello" ...
              --> locale: et-EE, domain: messages
              = help: Add the message to the catalog or check the msgid spelling

        Returns:
            Formatted diagnostic
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
