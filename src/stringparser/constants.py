"""Shared constants for stringparser.

Centralized values used by the engine and the bundled parsers. Placing
them here avoids circular imports between the engine, configuration and
parser packages.

Constants are grouped by domain:
- States: Values with a meaning shared by every handler table
- Input limits: DoS prevention via size constraints
- Quoted strings: Delimiters recognised by the quoted-string parser

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # States
    "STATE_UNKNOWN",
    # Input limits
    "MAX_INPUT_LENGTH",
    # Quoted strings
    "QUOTE_DELIMITER",
    "ESCAPE_CHARACTER",
    # Collaborator parsers
    "DEFAULT_TRUNCATION_LIMIT",
]

# ============================================================================
# STATES
# ============================================================================

# Every parse starts in this state. Handler tables must register it unless
# they are meant to fail on any non-empty input.
STATE_UNKNOWN: int = 0

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum input length in characters (code points), not bytes.
# The whole input is decoded into a tuple before the first handler runs,
# so this bounds memory per parse call. Disable via ParserConfig(max_input_length=None).
MAX_INPUT_LENGTH: int = 10_000_000

# ============================================================================
# QUOTED STRINGS
# ============================================================================

QUOTE_DELIMITER: str = '"'
ESCAPE_CHARACTER: str = "\\"

# ============================================================================
# COLLABORATOR PARSERS
# ============================================================================

DEFAULT_TRUNCATION_LIMIT: int = 10
