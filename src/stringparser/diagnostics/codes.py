"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1-99: Grammar errors raised by the quoted-string handlers
        1000-1999: Engine errors raised by StringParser itself

    The grammar codes keep the numeric values callers of earlier releases
    matched on (1, 2, 3).
    """

    # Grammar errors (1-99)
    INVALID_LEADING_CHARACTERS = 1
    INVALID_TRAILING_CHARACTERS = 2
    INVALID_ESCAPE_CHARACTER = 3

    # Engine errors (1000-1999)
    UNKNOWN_STATE = 1001
    INPUT_TOO_LARGE = 1002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Input location for error reporting.

    Note:
        Offsets count characters (Unicode code points), not bytes. For
        multi-byte UTF-8 characters, character offset differs from byte
        offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Input location (None when the error has no position)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[INVALID_ESCAPE_CHARACTER]: Invalid escape character at position 5
              --> line 1, column 6
              = help: Only a quote character may follow the escape character

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
