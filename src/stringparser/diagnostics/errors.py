"""Exception hierarchy with structured diagnostics.

Engine-level errors are raised by StringParser itself; grammar-level errors
are raised by handlers. All exceptions can store a Diagnostic object for
rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InputTooLargeError",
    "InvalidEscapeCharacterError",
    "InvalidLeadingCharactersError",
    "InvalidTrailingCharactersError",
    "QuotedStringError",
    "StringParserError",
    "UnknownStateError",
]


class StringParserError(Exception):
    """Base exception for all stringparser errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize StringParserError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> int | None:
        """Numeric diagnostic code, or None for plain-message errors."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.code.value


class UnknownStateError(StringParserError):
    """The current state has no registered handler.

    Always fatal to the parse in progress.

    Attributes:
        state: The state value that had no handler
    """

    def __init__(self, message: str | Diagnostic, *, state: int) -> None:
        super().__init__(message)
        self.state = state


class InputTooLargeError(StringParserError):
    """Input exceeds ParserConfig.max_input_length.

    Attributes:
        length: Input length in characters
        limit: Configured maximum
    """

    def __init__(self, message: str | Diagnostic, *, length: int, limit: int) -> None:
        super().__init__(message)
        self.length = length
        self.limit = limit


class QuotedStringError(StringParserError):
    """Input is not a single well-formed quoted string.

    Attributes:
        position: Cursor position when the problem was noticed (None when
            the error has no position)
    """

    def __init__(self, message: str | Diagnostic, *, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class InvalidLeadingCharactersError(QuotedStringError):
    """Input does not start with a quote character."""


class InvalidTrailingCharactersError(QuotedStringError):
    """Characters follow the closing quote character.

    The position is the cursor value at detection time, which is one past
    the first trailing character when more than one follows the quote.
    """


class InvalidEscapeCharacterError(QuotedStringError):
    """An escape character is not followed by a quote character."""
