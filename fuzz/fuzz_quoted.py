#!/usr/bin/env python3
"""Quoted-String Parser Fuzzer (Atheris).

Targets: stringparser.parsers.quoted.QuotedStringParser
Checks that every input either parses or raises a QuotedStringError, that
reported positions lie inside the input, and that well-formed inputs built
from the fuzz data round-trip.
"""

from __future__ import annotations

import atexit
import json
import logging
import sys
from typing import TypeAlias

# --- PEP 695 Type Aliases ---
FuzzStats: TypeAlias = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}


def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("stringparser").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["stringparser"]):
    from stringparser import QuotedStringError, QuotedStringParser

_PARSER = QuotedStringParser()


def _finding(msg: str) -> None:
    _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
    raise RuntimeError(msg)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: arbitrary text, then a constructed valid string."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)
    source = fdp.ConsumeUnicodeNoSurrogates(512)

    # 1. Arbitrary input: parse or grammar error, never anything else
    try:
        output = _PARSER.parse(source)
    except QuotedStringError as e:
        if e.position is not None and not 0 <= e.position <= len(source):
            _finding(f"Position {e.position} outside input of length {len(source)}")
    else:
        if len(output) > len(source):
            _finding(f"Output longer than input: {len(output)} > {len(source)}")

    # 2. Constructed input: content with escaped quotes must round-trip
    content = source.replace("\\", "").replace('"', "")
    segments = content.split(" ")
    quoted = '"' + '\\"'.join(segments) + '"'
    expected = '"'.join(segments)
    result = _PARSER.parse(quoted)
    if result != expected:
        _finding(f"Round trip mismatch: {result!r} != {expected!r}")


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
