"""Cursor infrastructure for in-place parsing.

Implements the arena + index pattern: an immutable source string paired
with a mutable integer position. A single Cursor is created per top-level
parse and threaded through every parser call, which advances it in place.

Design Philosophy:
    - Source is never copied or resliced; only pos changes
    - Backtracking is an integer save/restore (mark = cursor.pos)
    - At every call boundary source[pos:] is exactly the unconsumed input

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(slots=True)
class Cursor:
    """Mutable position over an immutable source string.

    Parsers consume by advancing pos in place. A failing parser that
    promises restoration saves pos on entry and hands it back to restore().

    Ownership:
        A cursor belongs to one parse invocation. Do not share it between
        concurrent parses; create one per call instead.

    Example:
        >>> cursor = Cursor("hello")
        >>> cursor.current
        'h'
        >>> mark = cursor.pos
        >>> cursor.advance(3)
        >>> cursor.remaining
        'lo'
        >>> cursor.restore(mark)
        >>> cursor.remaining
        'hello'
    """

    source: str
    pos: int = 0

    def __post_init__(self) -> None:
        """Reject positions outside the source."""
        if not 0 <= self.pos <= len(self.source):
            msg = f"Cursor position {self.pos} outside source of length {len(self.source)}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """True once every character has been consumed."""
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

    @property
    def remaining(self) -> str:
        """The unconsumed remainder of the input."""
        return self.source[self.pos :]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if that lies outside
            the source (past EOF or before the start)
        """
        target_pos = self.pos + offset
        if not 0 <= target_pos < len(self.source):
            return None
        return self.source[target_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        May return fewer characters if near EOF.

        Example:
            >>> cursor = Cursor("hello")
            >>> cursor.slice_ahead(3)
            'hel'
            >>> cursor.slice_ahead(10)
            'hello'
        """
        return self.source[self.pos : self.pos + n]

    def advance(self, count: int = 1) -> None:
        """Advance in place by count positions, clamped at EOF."""
        self.pos = min(self.pos + count, len(self.source))

    def restore(self, pos: int) -> None:
        """Move back (or forward) to a previously saved position.

        Args:
            pos: Position obtained from an earlier ``cursor.pos``

        Raises:
            ValueError: If pos lies outside the source
        """
        if not 0 <= pos <= len(self.source):
            msg = f"Cannot restore cursor to {pos}: source length is {len(self.source)}"
            raise ValueError(msg)
        self.pos = pos
