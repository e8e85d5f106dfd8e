"""Quickstart - Building parsers on the StringParser engine.

Demonstrates:

1. The bundled quoted-string parser and its errors
2. Formatting error diagnostics
3. Writing a custom handler table

Python 3.13+.
"""

from __future__ import annotations

import logging


def example_1_quoted_strings() -> None:
    """Unescape quoted strings and inspect failures."""
    from stringparser import QuotedStringError, QuotedStringParser

    print("=" * 60)
    print("Example 1: Quoted strings")
    print("=" * 60)

    parser = QuotedStringParser()
    for text in ['"foo"', '"foo \\"bar\\" foobar"', '"我隻氣墊船裝滿晒鱔"']:
        print(f"{text!r:30} -> {parser.parse(text)!r}")

    for text in ["foo", '"foo" bar', '"foo \\bar"']:
        try:
            parser.parse(text)
        except QuotedStringError as e:
            print(f"{text!r:30} -> {type(e).__name__} (position={e.position}, code={e.code})")


def example_2_diagnostics() -> None:
    """Render a diagnostic in each output format."""
    from stringparser import QuotedStringError, QuotedStringParser
    from stringparser.diagnostics import DiagnosticFormatter, OutputFormat

    print("=" * 60)
    print("Example 2: Diagnostics")
    print("=" * 60)

    try:
        QuotedStringParser().parse('"foo \\bar"')
    except QuotedStringError as e:
        assert e.diagnostic is not None
        for output_format in OutputFormat:
            print(DiagnosticFormatter(output_format=output_format).format(e.diagnostic))
            print()


def example_3_custom_table() -> None:
    """Collapse runs of whitespace with a two-state table."""
    from stringparser import STATE_UNKNOWN, StringParser

    print("=" * 60)
    print("Example 3: Custom handler table")
    print("=" * 60)

    in_space = 1

    def in_text(parser: StringParser) -> None:
        if parser.current_character().isspace():  # type: ignore[union-attr]
            parser.set_state(in_space)
        else:
            parser.append_current_character()
            parser.advance()

    def in_whitespace(parser: StringParser) -> None:
        parser.append_current_character()
        while (char := parser.current_character()) is not None and char.isspace():
            parser.advance()
        parser.set_state(STATE_UNKNOWN)

    collapse = StringParser({STATE_UNKNOWN: in_text, in_space: in_whitespace})
    print(repr(collapse.parse("one   two\t\tthree")))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    example_1_quoted_strings()
    example_2_diagnostics()
    example_3_custom_table()
