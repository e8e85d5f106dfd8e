"""Truncation parser.

Returns what it has been given up to a chosen character limit. Limits count
characters, not bytes, so multi-byte text is never split mid-character.

The running count lives in an explicit TruncationContext rather than inside
the engine. The engine resets its own pointer, state and output on every
parse; the context is reset by TruncationParser.parse before delegating.
"""

from __future__ import annotations

from dataclasses import dataclass

from stringparser.config import ParserConfig
from stringparser.constants import DEFAULT_TRUNCATION_LIMIT, STATE_UNKNOWN
from stringparser.engine import StringParser

__all__ = ["TruncationContext", "TruncationParser"]

STATE_IN_VALUE = 1


@dataclass(slots=True)
class TruncationContext:
    """Mutable counter shared by the truncation handlers.

    Attributes:
        limit: Maximum number of characters to emit
        count: Characters seen so far in the current parse
    """

    limit: int
    count: int = 0

    def reset(self) -> None:
        self.count = 0


class TruncationParser:
    """Emit at most ``limit`` characters of the input.

    Example:
        >>> TruncationParser(3).parse("我隻氣墊船裝滿晒鱔")
        '我隻氣'
    """

    def __init__(
        self,
        limit: int = DEFAULT_TRUNCATION_LIMIT,
        *,
        config: ParserConfig | None = None,
    ) -> None:
        """Initialize TruncationParser.

        Args:
            limit: Maximum number of characters to return (>= 0)
            config: Engine limits

        Raises:
            ValueError: If limit is negative
        """
        if limit < 0:
            msg = f"limit must be >= 0, got {limit}"
            raise ValueError(msg)
        self._context = TruncationContext(limit=limit)
        self._parser = StringParser(
            {STATE_UNKNOWN: self._handle_unknown, STATE_IN_VALUE: self._handle_in_value},
            config=config,
        )

    @property
    def limit(self) -> int:
        return self._context.limit

    @property
    def context(self) -> TruncationContext:
        return self._context

    def parse(self, text: str) -> str:
        self._context.reset()
        return self._parser.parse(text)

    def _handle_unknown(self, parser: StringParser) -> None:
        parser.set_state(STATE_IN_VALUE)

    def _handle_in_value(self, parser: StringParser) -> None:
        self._context.count += 1
        if self._context.count <= self._context.limit:
            parser.append_current_character()
        parser.advance()
