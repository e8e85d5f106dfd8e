"""Diagnostic system for stringparser errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    InputTooLargeError,
    InvalidEscapeCharacterError,
    InvalidLeadingCharactersError,
    InvalidTrailingCharactersError,
    QuotedStringError,
    StringParserError,
    UnknownStateError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InputTooLargeError",
    "InvalidEscapeCharacterError",
    "InvalidLeadingCharactersError",
    "InvalidTrailingCharactersError",
    "OutputFormat",
    "QuotedStringError",
    "SourceSpan",
    "StringParserError",
    "UnknownStateError",
]
