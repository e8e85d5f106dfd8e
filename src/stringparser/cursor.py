"""Character sequence infrastructure for state-machine parsing.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - The input is decoded ONCE per parse into an immutable tuple
    - Index i always names the same character, whatever its UTF-8 width
    - Out-of-range reads return None instead of raising
    - Line:column computed on-demand (O(n) only for errors)

Character Units:
    Characters are Unicode code points, as produced by iterating a Python
    str. Multi-byte characters such as CJK ideographs are one unit each.
    Combining sequences (e.g. "e" + U+0301) count as one unit per code point.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter)
    - CR-only (Classic Mac, \\r): NOT supported
"""

from dataclasses import dataclass

from stringparser.diagnostics import SourceSpan

__all__ = ["CharacterSequence"]


@dataclass(frozen=True, slots=True)
class CharacterSequence:
    """Immutable, indexable sequence of decoded input characters.

    Example:
        >>> chars = CharacterSequence.from_text("我隻氣")
        >>> len(chars)
        3
        >>> chars.at(1)
        '隻'
        >>> chars.at(3) is None
        True
        >>> chars.at(-1) is None
        True
    """

    characters: tuple[str, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> "CharacterSequence":
        """Split text on code point boundaries.

        Args:
            text: Input text (an empty string yields an empty sequence)

        Returns:
            New CharacterSequence
        """
        return cls(tuple(text))

    def __len__(self) -> int:
        return len(self.characters)

    def at(self, index: int) -> str | None:
        """Get the character at index.

        Returns:
            Character at index, or None if index is negative or beyond the end

        Note:
            Negative indexes never wrap around; ``at(-1)`` is None, which is
            what previous-character lookups at position 0 rely on.
        """
        if 0 <= index < len(self.characters):
            return self.characters[index]
        return None

    def text(self) -> str:
        """Rebuild the original text."""
        return "".join(self.characters)

    def compute_line_col(self, position: int) -> tuple[int, int]:
        """Compute line and column for a character position.

        Args:
            position: Character offset (clamped to the sequence length)

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = position. Only call for error reporting.

        Example:
            >>> chars = CharacterSequence.from_text("ab\\ncd")
            >>> chars.compute_line_col(0)
            (1, 1)
            >>> chars.compute_line_col(4)
            (2, 2)
        """
        position = max(0, min(position, len(self.characters)))
        line = 1
        line_start = 0
        for index in range(position):
            if self.characters[index] == "\n":
                line += 1
                line_start = index + 1
        return line, position - line_start + 1

    def span_at(self, position: int) -> SourceSpan:
        """Build a one-character SourceSpan for error reporting.

        Positions at or beyond the end produce an empty span at the end.
        """
        position = max(0, min(position, len(self.characters)))
        line, column = self.compute_line_col(position)
        end = position + 1 if position < len(self.characters) else position
        return SourceSpan(start=position, end=end, line=line, column=column)
