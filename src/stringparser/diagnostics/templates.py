"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Message wording is part of the public contract: callers match on it.
    """

    @staticmethod
    def unknown_state(state: int) -> Diagnostic:
        """No handler registered for the current state.

        Args:
            state: The state value that had no handler

        Returns:
            Diagnostic for UNKNOWN_STATE
        """
        msg = f"Unknown state: {int(state)}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_STATE,
            message=msg,
            span=None,
            hint="Register a handler for this state in the handler table",
        )

    @staticmethod
    def input_too_large(length: int, limit: int) -> Diagnostic:
        """Input exceeds the configured maximum length.

        Args:
            length: Input length in characters
            limit: Configured maximum

        Returns:
            Diagnostic for INPUT_TOO_LARGE
        """
        msg = f"Input length {length} exceeds maximum of {limit} characters"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LARGE,
            message=msg,
            span=None,
            hint="Raise ParserConfig.max_input_length or pass None to disable the limit",
        )

    @staticmethod
    def invalid_leading_characters() -> Diagnostic:
        """Input does not open with a quote character.

        Returns:
            Diagnostic for INVALID_LEADING_CHARACTERS
        """
        msg = "Invalid leading characters before first quote character"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LEADING_CHARACTERS,
            message=msg,
            span=None,
            hint='Quoted strings must start with "',
        )

    @staticmethod
    def invalid_trailing_characters(position: int, span: SourceSpan | None = None) -> Diagnostic:
        """Characters found after the closing quote character.

        Args:
            position: Cursor position when the trailing characters were noticed
            span: Input location, if known

        Returns:
            Diagnostic for INVALID_TRAILING_CHARACTERS
        """
        msg = f"Invalid trailing characters after last quote character at position {position}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TRAILING_CHARACTERS,
            message=msg,
            span=span,
            hint='Nothing may follow the closing "; escape inner quotes as \\"',
        )

    @staticmethod
    def invalid_escape_character(position: int, span: SourceSpan | None = None) -> Diagnostic:
        """Escape character not followed by a quote character.

        Args:
            position: Cursor position of the escape character
            span: Input location, if known

        Returns:
            Diagnostic for INVALID_ESCAPE_CHARACTER
        """
        msg = f"Invalid escape character at position {position}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ESCAPE_CHARACTER,
            message=msg,
            span=span,
            hint="Only a quote character may follow the escape character",
        )
