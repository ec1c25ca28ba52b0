"""Exception hierarchy with structured diagnostics.

The engine never raises these for missing or malformed translation data;
all such conditions are reported through the warning sink. Exceptions exist
for callers that opt into strict behavior (see DiagnosticCollector).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic

__all__ = [
    "GettextError",
    "TranslationIntegrityError",
]


class GettextError(Exception):
    """Base exception for all gettextengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GettextError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TranslationIntegrityError(GettextError):
    """Diagnostics were collected where the caller demanded none.

    Raised by DiagnosticCollector.raise_for_diagnostics(), typically in CI
    to fail a build on missing translations.

    Attributes:
        diagnostics: All collected diagnostics, in emission order
    """

    def __init__(self, diagnostics: Sequence[Diagnostic]) -> None:
        """Initialize TranslationIntegrityError.

        Args:
            diagnostics: Collected diagnostics (must be non-empty)
        """
        self.diagnostics: tuple[Diagnostic, ...] = tuple(diagnostics)
        first = self.diagnostics[0]
        if len(self.diagnostics) == 1:
            super().__init__(first)
        else:
            msg = f"{len(self.diagnostics)} translation diagnostics, first: {first.message}"
            super().__init__(msg)
            self.diagnostic = first
