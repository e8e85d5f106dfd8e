"""Hypothesis strategies for stringparser property-based testing.

Usage:
    from tests.strategies import any_text, escaped_segments
"""

from .text import (
    any_text,
    escaped_segments,
    invalid_escape_inputs,
    leading_garbage_inputs,
    limits,
    unquoted_content,
    wide_text,
)

__all__ = [
    "any_text",
    "escaped_segments",
    "invalid_escape_inputs",
    "leading_garbage_inputs",
    "limits",
    "unquoted_content",
    "wide_text",
]
