"""Pass-through parser.

A minimal parser that returns exactly what it has been given. It is the
smallest useful handler table: one state to leave STATE_UNKNOWN, one to copy.
"""

from __future__ import annotations

from stringparser.config import ParserConfig
from stringparser.constants import STATE_UNKNOWN
from stringparser.engine import StringParser

__all__ = ["PassThroughParser"]

STATE_IN_VALUE = 1


def _handle_unknown(parser: StringParser) -> None:
    parser.set_state(STATE_IN_VALUE)


def _handle_in_value(parser: StringParser) -> None:
    parser.append_current_character()
    parser.advance()


class PassThroughParser:
    """Identity transform over the engine."""

    def __init__(self, *, config: ParserConfig | None = None) -> None:
        self._parser = StringParser(
            {STATE_UNKNOWN: _handle_unknown, STATE_IN_VALUE: _handle_in_value},
            config=config,
        )

    def parse(self, text: str) -> str:
        return self._parser.parse(text)
