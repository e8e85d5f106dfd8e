"""Quoted-string parser.

Strips the surrounding quote characters from a string, resolves ``\\"``
escapes and rejects anything else:

    >>> QuotedStringParser().parse('"foo \\\\"bar\\\\" foobar"')
    'foo "bar" foobar'

Escapes are resolved with a one-character lookbehind/lookahead window
instead of a dedicated "saw an escape character" state.

Error positions are the pointer value at the moment the problem is
noticed. For trailing characters that is one past the first character
after the closing quote (``"foo" bar`` reports 6); for an escape it is
the position of the escape character (``"foo \\bar"`` reports 5).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NoReturn

from stringparser.config import ParserConfig
from stringparser.constants import ESCAPE_CHARACTER, QUOTE_DELIMITER, STATE_UNKNOWN
from stringparser.diagnostics import (
    ErrorTemplate,
    InvalidEscapeCharacterError,
    InvalidLeadingCharactersError,
    InvalidTrailingCharactersError,
)
from stringparser.engine import Handler, StringParser

__all__ = ["QuotedStringParser", "QuotedStringState"]


class QuotedStringState(IntEnum):
    """States of the quoted-string machine.

    Values are stable; UNKNOWN matches the engine's initial state.
    """

    UNKNOWN = STATE_UNKNOWN
    IN_QUOTED_STRING = 1
    LEFT_QUOTED_STRING = 2
    INVALID_LEADING_CHARACTERS = 3
    INVALID_TRAILING_CHARACTERS = 4
    ENTERING_QUOTED_STRING = 5
    INVALID_ESCAPE_CHARACTER = 6


def _handle_unknown(parser: StringParser) -> None:
    if parser.current_character() == QUOTE_DELIMITER:
        parser.set_state(QuotedStringState.ENTERING_QUOTED_STRING)
    else:
        parser.set_state(QuotedStringState.INVALID_LEADING_CHARACTERS)


def _handle_entering_quoted_string(parser: StringParser) -> None:
    # Skip the opening quote
    parser.advance()
    parser.set_state(QuotedStringState.IN_QUOTED_STRING)


def _handle_in_quoted_string(parser: StringParser) -> None:
    match parser.current_character():
        case "\"":
            if parser.previous_character() == ESCAPE_CHARACTER:
                parser.append_current_character()
            else:
                parser.set_state(QuotedStringState.LEFT_QUOTED_STRING)
            parser.advance()
        case "\\":
            if parser.next_character() == QUOTE_DELIMITER:
                # The quote itself is emitted on the next call
                parser.advance()
            else:
                parser.set_state(QuotedStringState.INVALID_ESCAPE_CHARACTER)
        case _:
            parser.append_current_character()
            parser.advance()


def _handle_left_quoted_string(parser: StringParser) -> None:
    parser.set_state(QuotedStringState.INVALID_TRAILING_CHARACTERS)
    if not parser.is_last_character():
        parser.advance()


def _raise_invalid_leading_characters(parser: StringParser) -> NoReturn:
    raise InvalidLeadingCharactersError(ErrorTemplate.invalid_leading_characters())


def _raise_invalid_trailing_characters(parser: StringParser) -> NoReturn:
    position = parser.pointer
    raise InvalidTrailingCharactersError(
        ErrorTemplate.invalid_trailing_characters(position, parser.span_at(position)),
        position=position,
    )


def _raise_invalid_escape_character(parser: StringParser) -> NoReturn:
    position = parser.pointer
    raise InvalidEscapeCharacterError(
        ErrorTemplate.invalid_escape_character(position, parser.span_at(position)),
        position=position,
    )


_HANDLERS: dict[int, Handler] = {
    QuotedStringState.UNKNOWN: _handle_unknown,
    QuotedStringState.ENTERING_QUOTED_STRING: _handle_entering_quoted_string,
    QuotedStringState.IN_QUOTED_STRING: _handle_in_quoted_string,
    QuotedStringState.LEFT_QUOTED_STRING: _handle_left_quoted_string,
    QuotedStringState.INVALID_LEADING_CHARACTERS: _raise_invalid_leading_characters,
    QuotedStringState.INVALID_TRAILING_CHARACTERS: _raise_invalid_trailing_characters,
    QuotedStringState.INVALID_ESCAPE_CHARACTER: _raise_invalid_escape_character,
}


class QuotedStringParser:
    """Unescape a single double-quoted string.

    Raises:
        InvalidLeadingCharactersError: Input does not start with a quote
        InvalidTrailingCharactersError: Characters follow the closing quote
        InvalidEscapeCharacterError: Escape character not followed by a quote

    Note:
        An unterminated string (``"foo``) is accepted and returns its
        content; the machine has no terminal state and stops at end of input.
    """

    def __init__(self, *, config: ParserConfig | None = None) -> None:
        self._parser = StringParser(_HANDLERS, config=config)

    @property
    def config(self) -> ParserConfig:
        return self._parser.config

    def parse(self, text: str) -> str:
        return self._parser.parse(text)
