"""Immutable cursor infrastructure for combinator parsing.

Implements the immutable cursor pattern: every parser receives a Cursor
and, on success, hands back a NEW Cursor alongside its value.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - peek() never fails, it clips at end of input
    - Every advance() returns NEW cursor, so backtracking is just
      "keep using the old one"
    - Line:column computed on-demand (O(n), only for misuse diagnostics)

Pattern Reference:
    - Haskell Parsec
    - Rust nom parser combinator library
"""

from dataclasses import dataclass

from pcomb.diagnostics import SourceSpan

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (one cursor per matched step)
        3. Simple position - Just an integer offset
        4. EOF is a property - Not a return value

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.peek(3)
        'hel'
        >>> new_cursor = cursor.advance(2)
        >>> new_cursor.peek(10)
        'llo'
        >>> cursor.pos  # Original unchanged (immutability)
        0
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    def __post_init__(self) -> None:
        """Validate 0 <= pos <= len(source).

        Raises:
            ValueError: If pos lies outside the source
        """
        if not 0 <= self.pos <= len(self.source):
            msg = f"Cursor position {self.pos} outside source of length {len(self.source)}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Note: This is the preferred way to check for EOF.
              Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos == len(self.source)

    @property
    def remaining(self) -> int:
        """Number of characters not yet consumed."""
        return len(self.source) - self.pos

    def peek(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Args:
            n: Number of characters to get

        Returns:
            String of up to n characters starting at current position.
            Fewer (possibly none) if near EOF; empty for n <= 0.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.peek(3)
            'hel'
            >>> cursor.peek(10)  # More than available
            'hello'
            >>> Cursor("hello", 5).peek(1)
            ''
        """
        if n <= 0:
            return ""
        return self.source[self.pos : self.pos + n]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged).
            The position is clamped to the end of the source.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor2 = cursor.advance()
            >>> cursor.pos  # Original unchanged
            0
            >>> cursor2.pos  # New cursor advanced
            1
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal parsing!

        Example:
            >>> source = "line1\\nline2"
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def to_span(self) -> SourceSpan:
        """Zero-width SourceSpan at the current position."""
        line, col = self.compute_line_col()
        return SourceSpan(start=self.pos, end=self.pos, line=line, column=col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser has signature:
            def parser(cursor: Cursor) -> ParseResult[T] | None:
                ...
                return ParseResult(value, new_cursor)

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
