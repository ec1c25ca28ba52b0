"""Diagnostic system for translation warnings.

Provides structured diagnostics with codes, context fields and hints, plus
the exception types used when a caller escalates warnings.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import GettextError, TranslationIntegrityError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import DiagnosticTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DiagnosticTemplate",
    "GettextError",
    "OutputFormat",
    "TranslationIntegrityError",
]
