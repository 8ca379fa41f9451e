"""Character-class scanners.

Scanners never fail: they consume the maximal prefix matching a predicate
(possibly empty) and return it. The cursor advances by exactly the length
of the returned string.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

from parsekit.constants import ASCII_DIGITS
from parsekit.cursor import Cursor

__all__ = ["is_ascii_digit", "is_whitespace", "take_until", "take_while"]


def is_whitespace(ch: str) -> bool:
    """Whitespace per str.isspace (space, tab, newlines, and Unicode spaces)."""
    return ch.isspace()


def is_ascii_digit(ch: str) -> bool:
    """ASCII 0-9 only. Superscripts and other Unicode digits do not count."""
    return ch in ASCII_DIGITS


def take_while(cursor: Cursor, predicate: Callable[[str], bool]) -> str:
    """Consume the maximal prefix whose characters satisfy predicate.

    Args:
        cursor: Cursor to consume from (advanced in place)
        predicate: Called once per character, left to right, until it
            returns False or input ends

    Returns:
        The consumed prefix (empty string if the first character fails)

    Example:
        >>> cursor = Cursor("123abc")
        >>> take_while(cursor, is_ascii_digit)
        '123'
        >>> cursor.remaining
        'abc'
    """
    source = cursor.source
    start = cursor.pos
    end = start
    while end < len(source) and predicate(source[end]):
        end += 1
    cursor.pos = end
    return source[start:end]


def take_until(cursor: Cursor, predicate: Callable[[str], bool]) -> str:
    """Consume the maximal prefix whose characters do NOT satisfy predicate."""
    return take_while(cursor, lambda ch: not predicate(ch))
