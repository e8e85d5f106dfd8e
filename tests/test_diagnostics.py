"""Tests for diagnostics: codes, spans, templates, errors and formatting."""

from __future__ import annotations

import json

import pytest

from stringparser.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    InvalidEscapeCharacterError,
    OutputFormat,
    SourceSpan,
    StringParserError,
    UnknownStateError,
)


class TestDiagnosticCode:
    """Test code values."""

    def test_codes_are_unique(self) -> None:
        """Every code has a distinct value."""
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))

    def test_grammar_codes(self) -> None:
        """Grammar codes keep their numeric values."""
        assert DiagnosticCode.INVALID_LEADING_CHARACTERS.value == 1
        assert DiagnosticCode.INVALID_TRAILING_CHARACTERS.value == 2
        assert DiagnosticCode.INVALID_ESCAPE_CHARACTER.value == 3


class TestSourceSpan:
    """Test SourceSpan validation."""

    @pytest.mark.parametrize(
        ("start", "end", "line", "column"),
        [(-1, 0, 1, 1), (3, 2, 1, 1), (0, 0, 0, 1), (0, 0, 1, 0)],
    )
    def test_invalid_spans_rejected(self, start: int, end: int, line: int, column: int) -> None:
        """Negative starts, reversed ranges and zero lines/columns are rejected."""
        with pytest.raises(ValueError, match="SourceSpan"):
            SourceSpan(start=start, end=end, line=line, column=column)


class TestErrorTemplate:
    """Test message wording."""

    def test_unknown_state(self) -> None:
        """Unknown state message names the state."""
        assert ErrorTemplate.unknown_state(3).message == "Unknown state: 3"

    def test_trailing_characters(self) -> None:
        """Trailing message names the position."""
        diagnostic = ErrorTemplate.invalid_trailing_characters(6)

        assert diagnostic.message == (
            "Invalid trailing characters after last quote character at position 6"
        )
        assert diagnostic.code is DiagnosticCode.INVALID_TRAILING_CHARACTERS

    def test_input_too_large(self) -> None:
        """Input limit message names both sizes."""
        message = ErrorTemplate.input_too_large(11, 10).message

        assert "11" in message
        assert "10" in message


class TestErrors:
    """Test exception construction."""

    def test_plain_message(self) -> None:
        """A plain string message has no diagnostic or code."""
        error = StringParserError("plain")

        assert str(error) == "plain"
        assert error.diagnostic is None
        assert error.code is None

    def test_diagnostic_message(self) -> None:
        """A Diagnostic is stored and formatted into the exception text."""
        error = UnknownStateError(ErrorTemplate.unknown_state(9), state=9)

        assert error.state == 9
        assert error.code == 1001
        assert str(error).startswith("error[UNKNOWN_STATE]: Unknown state: 9")

    def test_position_attribute(self) -> None:
        """Grammar errors carry the detection position."""
        error = InvalidEscapeCharacterError(
            ErrorTemplate.invalid_escape_character(5), position=5
        )

        assert error.position == 5


class TestDiagnosticFormatter:
    """Test output formats."""

    _DIAGNOSTIC = Diagnostic(
        code=DiagnosticCode.INVALID_ESCAPE_CHARACTER,
        message="Invalid escape character at position 5",
        span=SourceSpan(start=5, end=6, line=1, column=6),
        hint="Only a quote character may follow the escape character",
    )

    def test_rust_format(self) -> None:
        """Default format is multi-line with location and help."""
        output = DiagnosticFormatter().format(self._DIAGNOSTIC)

        assert output.splitlines() == [
            "error[INVALID_ESCAPE_CHARACTER]: Invalid escape character at position 5",
            "  --> line 1, column 6",
            "  = help: Only a quote character may follow the escape character",
        ]

    def test_simple_format(self) -> None:
        """Simple format is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(self._DIAGNOSTIC) == (
            "INVALID_ESCAPE_CHARACTER: Invalid escape character at position 5"
        )

    def test_json_format(self) -> None:
        """JSON format includes code, value and span."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self._DIAGNOSTIC))

        assert data["code"] == "INVALID_ESCAPE_CHARACTER"
        assert data["code_value"] == 3
        assert data["start"] == 5
        assert data["column"] == 6

    def test_color(self) -> None:
        """Color wraps the severity in ANSI codes."""
        output = DiagnosticFormatter(color=True).format(self._DIAGNOSTIC)

        assert output.startswith("\033[1;31merror\033[0m")

    def test_sanitize_truncates(self) -> None:
        """Sanitize truncates long messages."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )

        assert formatter.format(self._DIAGNOSTIC) == "INVALID_ESCAPE_CHARACTER: Invalid es..."

    def test_format_all(self) -> None:
        """format_all separates diagnostics with blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all([self._DIAGNOSTIC, ErrorTemplate.unknown_state(0)])

        assert output.split("\n\n") == [
            "INVALID_ESCAPE_CHARACTER: Invalid escape character at position 5",
            "UNKNOWN_STATE: Unknown state: 0",
        ]
