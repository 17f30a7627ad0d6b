"""Immutable cursor for template parsing.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (only for errors)
"""

from dataclasses import dataclass

from icumessage.diagnostics import SourceSpan

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns None only when peeking beyond EOF.
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def startswith(self, prefix: str) -> bool:
        """Check whether the remaining input starts with prefix."""
        return self.source.startswith(prefix, self.pos)

    def skip_whitespace(self) -> "Cursor":
        """Return cursor positioned after any whitespace."""
        cursor = self
        while not cursor.is_eof and cursor.current.isspace():
            cursor = cursor.advance()
        return cursor

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute 1-indexed line and column of the current position.

        O(n) in the position; call only when building error reports.
        """
        consumed = self.source[: self.pos]
        line = consumed.count("\n") + 1
        column = self.pos - (consumed.rfind("\n") + 1) + 1
        return line, column

    def span(self, end: int | None = None) -> SourceSpan:
        """Build a SourceSpan from the current position to end (default: pos)."""
        line, column = self.compute_line_col()
        return SourceSpan(
            start=self.pos,
            end=self.pos if end is None else max(end, self.pos),
            line=line,
            column=column,
        )
