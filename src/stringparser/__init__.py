"""stringparser - Character-by-character parsing as explicit state machines.

The engine walks an input text one character at a time and lets a table of
per-state handlers decide whether to emit output, advance the pointer, or
change state. Parsing ends when the pointer reaches the end of input.

Public API:
    StringParser - The engine; construct with a {state: handler} table
    Handler - Type alias for handler callables
    STATE_UNKNOWN - Initial state of every parse
    QuotedStringParser - Reference parser: unescape a double-quoted string
    PassThroughParser - Identity parser
    TruncationParser - First-N-characters parser
    ParserConfig - Engine limits

Exceptions:
    StringParserError - Base exception class
    UnknownStateError - No handler for the current state
    InputTooLargeError - Input exceeds ParserConfig.max_input_length
    QuotedStringError - Base for quoted-string grammar errors

Submodules:
    stringparser.diagnostics - Error types, codes and formatting
    stringparser.cursor - Decoded character sequence
    stringparser.parsers - Bundled parsers
"""

from .config import ParserConfig
from .constants import STATE_UNKNOWN
from .diagnostics import (
    InputTooLargeError,
    InvalidEscapeCharacterError,
    InvalidLeadingCharactersError,
    InvalidTrailingCharactersError,
    QuotedStringError,
    StringParserError,
    UnknownStateError,
)
from .engine import Handler, StringParser
from .parsers import PassThroughParser, QuotedStringParser, QuotedStringState, TruncationParser

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("stringparser")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "STATE_UNKNOWN",
    "Handler",
    "InputTooLargeError",
    "InvalidEscapeCharacterError",
    "InvalidLeadingCharactersError",
    "InvalidTrailingCharactersError",
    "ParserConfig",
    "PassThroughParser",
    "QuotedStringError",
    "QuotedStringParser",
    "QuotedStringState",
    "StringParser",
    "StringParserError",
    "TruncationParser",
    "UnknownStateError",
    "__version__",
]
