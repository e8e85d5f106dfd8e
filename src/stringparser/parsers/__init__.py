"""Parsers built on the StringParser engine.

Each parser is a handler table plus a thin ``parse`` wrapper:

    QuotedStringParser - Unescape a double-quoted string
    PassThroughParser - Return the input unchanged
    TruncationParser - Return the first N characters of the input

Python 3.13+.
"""

from .passthrough import PassThroughParser
from .quoted import QuotedStringParser, QuotedStringState
from .truncation import TruncationContext, TruncationParser

__all__ = [
    "PassThroughParser",
    "QuotedStringParser",
    "QuotedStringState",
    "TruncationContext",
    "TruncationParser",
]
