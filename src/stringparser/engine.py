"""Character-by-character parsing engine.

Implemented as an integer-based state machine starting at state zero
(STATE_UNKNOWN).

What to do as the input is parsed is decided by a table of handlers passed
to the constructor. Each handler is a callable that receives the live
StringParser, so it can examine the current/previous/next character and the
pointer, and set the state.

Commonly a handler will decide whether parsing should continue and then:
    - append the current character to the output
    - advance the pointer to move on to the next character
    - set the state to invoke a different handler for the following characters

The engine does not guarantee progress. A handler that neither advances the
pointer nor moves to a state that eventually does will loop forever.

See stringparser.parsers for reference implementations.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TypeAlias

from stringparser.config import ParserConfig
from stringparser.constants import STATE_UNKNOWN
from stringparser.cursor import CharacterSequence
from stringparser.diagnostics import (
    ErrorTemplate,
    InputTooLargeError,
    SourceSpan,
    UnknownStateError,
)

__all__ = ["Handler", "StringParser"]

logger = logging.getLogger(__name__)

Handler: TypeAlias = Callable[["StringParser"], None]


class StringParser:
    """Parse a string one character at a time through a handler table.

    The handler table is fixed at construction. Every ``parse`` call resets
    the pointer, state and output, so one instance can parse many inputs,
    one at a time. Instances are not thread-safe.

    Example:
        >>> IN_VALUE = 1
        >>> def start(parser: StringParser) -> None:
        ...     parser.set_state(IN_VALUE)
        >>> def copy(parser: StringParser) -> None:
        ...     parser.append_current_character()
        ...     parser.advance()
        >>> StringParser({STATE_UNKNOWN: start, IN_VALUE: copy}).parse("héllo")
        'héllo'
    """

    __slots__ = ("_characters", "_config", "_handlers", "_output", "_pointer", "_state")

    def __init__(
        self,
        handlers: Mapping[int, Handler],
        *,
        config: ParserConfig | None = None,
    ) -> None:
        """Initialize StringParser.

        Args:
            handlers: Mapping of state to handler. Copied; later changes to
                the caller's mapping have no effect.
            config: Engine limits (defaults to ParserConfig())
        """
        self._handlers: Mapping[int, Handler] = MappingProxyType(dict(handlers))
        self._config = config if config is not None else ParserConfig()
        self._characters = CharacterSequence()
        self._output: list[str] = []
        self._pointer = 0
        self._state = STATE_UNKNOWN

    @property
    def handlers(self) -> Mapping[int, Handler]:
        """Read-only view of the handler table."""
        return self._handlers

    @property
    def config(self) -> ParserConfig:
        """Engine configuration."""
        return self._config

    def parse(self, text: str) -> str:
        """Run the handler table over text.

        Args:
            text: Input text

        Returns:
            Output appended by handlers

        Raises:
            UnknownStateError: If the current state has no handler
            InputTooLargeError: If text exceeds config.max_input_length
            Exception: Any error raised by a handler, unmodified
        """
        self._reset()

        limit = self._config.max_input_length
        if limit is not None and len(text) > limit:
            logger.debug("Rejecting input of %d characters (limit %d)", len(text), limit)
            raise InputTooLargeError(
                ErrorTemplate.input_too_large(len(text), limit),
                length=len(text),
                limit=limit,
            )

        self._characters = CharacterSequence.from_text(text)
        length = len(self._characters)
        logger.debug("Parsing %d characters with %d handlers", length, len(self._handlers))

        while self._pointer < length:
            handler = self._handlers.get(self._state)
            if handler is None:
                logger.debug(
                    "No handler for state %d at position %d", self._state, self._pointer
                )
                raise UnknownStateError(
                    ErrorTemplate.unknown_state(self._state), state=self._state
                )
            handler(self)

        output = "".join(self._output)
        logger.debug("Parse finished in state %d, %d output characters", self._state, len(output))
        return output

    # ------------------------------------------------------------------
    # Handler API
    # ------------------------------------------------------------------

    @property
    def pointer(self) -> int:
        """Index of the character under examination."""
        return self._pointer

    @property
    def state(self) -> int:
        """Current state."""
        return self._state

    @state.setter
    def state(self, state: int) -> None:
        self._state = state

    def get_state(self) -> int:
        return self._state

    def set_state(self, state: int) -> None:
        self._state = state

    @property
    def input(self) -> str:
        """Text of the current (or most recent) parse."""
        return self._characters.text()

    @property
    def output(self) -> str:
        """Output accumulated so far in the current parse."""
        return "".join(self._output)

    def current_character(self) -> str | None:
        return self._characters.at(self._pointer)

    def previous_character(self) -> str | None:
        return self._characters.at(self._pointer - 1)

    def next_character(self) -> str | None:
        return self._characters.at(self._pointer + 1)

    def is_first_character(self) -> bool:
        """True at position 0 of a non-empty input."""
        return self._pointer == 0 and self.current_character() is not None

    def is_last_character(self) -> bool:
        """True when there is no next character."""
        return self.next_character() is None

    def advance(self) -> None:
        """Move the pointer on by exactly one character."""
        self._pointer += 1

    def stop(self) -> None:
        """Jump to the end of input; the loop ends after this handler returns."""
        self._pointer = len(self._characters)

    def append_current_character(self) -> None:
        """Append the current character to the output (no-op at end of input)."""
        character = self.current_character()
        if character is not None:
            self._output.append(character)

    def clear_output(self) -> None:
        self._output.clear()

    def span_at(self, position: int) -> SourceSpan:
        """SourceSpan of the character at position, for error reporting."""
        return self._characters.span_at(position)

    def _reset(self) -> None:
        self._characters = CharacterSequence()
        self._output = []
        self._pointer = 0
        self._state = STATE_UNKNOWN
