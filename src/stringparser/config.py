"""Parser configuration.

Provides a single frozen dataclass that encapsulates engine limits, shared
by StringParser and every bundled parser.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from stringparser.constants import MAX_INPUT_LENGTH

__all__ = ["ParserConfig"]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for StringParser.

    Constructing ``ParserConfig()`` with no arguments produces the default
    configuration used when a parser is given ``config=None``.

    Attributes:
        max_input_length: Maximum input length in characters (default:
            10,000,000). ``None`` disables the check.

    Example:
        >>> from stringparser import QuotedStringParser
        >>> from stringparser.config import ParserConfig
        >>> parser = QuotedStringParser(config=ParserConfig(max_input_length=64))
        >>> parser.config.max_input_length
        64
    """

    max_input_length: int | None = MAX_INPUT_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_input_length is given and not positive.
        """
        if self.max_input_length is not None and self.max_input_length < 1:
            msg = f"max_input_length must be positive or None, got {self.max_input_length}"
            raise ValueError(msg)
