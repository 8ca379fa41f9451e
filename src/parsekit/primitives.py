"""Primitive parsers: tokens, whitespace, unsigned integers, fixed-width text.

Each primitive documents what happens to the cursor when it fails:

    token         never fails
    whitespace    never fails
    uint          restored to the starting position
    fixed_length  restored to the starting position
    literal       restored to the starting position

Every failure is Failure(ErrorKind.BACKTRACK), so after any failed primitive
the caller can try an alternative at the same position.

Python 3.13+. Zero external dependencies.
"""

from parsekit.constants import U64_MAX, U64_MAX_DIGITS
from parsekit.cursor import Cursor
from parsekit.protocol import FnParser, Parser
from parsekit.result import BACKTRACK, Failure, Result, Success
from parsekit.scanners import is_ascii_digit, is_whitespace, take_until, take_while

__all__ = ["fixed_length", "literal", "token", "uint", "whitespace"]


def token(cursor: Cursor) -> Result[str]:
    """Parse the maximal run of non-whitespace characters.

    Never fails. At whitespace or EOF the token is the empty string.

    Example:
        >>> cursor = Cursor("abc def")
        >>> token(cursor).value
        'abc'
        >>> cursor.remaining
        ' def'
    """
    return Success(take_until(cursor, is_whitespace))


def whitespace(cursor: Cursor) -> Result[None]:
    """Skip the maximal run of whitespace characters. Never fails."""
    take_while(cursor, is_whitespace)
    return Success(None)


def uint(cursor: Cursor) -> Result[int]:
    """Parse a run of ASCII digits as an unsigned 64-bit integer.

    Leading zeros are accepted. No sign, no separators.

    Returns:
        Success(value) with the cursor past the digits, or BACKTRACK if
        there are no digits or the value exceeds 2**64 - 1. On failure the
        cursor is left where it started.

    Example:
        >>> uint(Cursor("18446744073709551615")).value
        18446744073709551615
        >>> uint(Cursor("18446744073709551616"))
        Failure(kind=<ErrorKind.BACKTRACK: 'backtrack'>)
    """
    start = cursor.pos
    digits = take_while(cursor, is_ascii_digit)
    if not digits:
        return BACKTRACK

    # Length check first: int() on an unbounded digit run can raise
    # ValueError (sys.get_int_max_str_digits) before we ever compare.
    significant = digits.lstrip("0") or "0"
    if len(significant) > U64_MAX_DIGITS or (value := int(significant)) > U64_MAX:
        cursor.restore(start)
        return BACKTRACK

    return Success(value)


def fixed_length(n: int) -> Parser[str]:
    """Build a parser for exactly n non-whitespace characters.

    The parser scans character by character and stops after n characters or
    at the first whitespace character, whichever comes first. Obtaining fewer
    than n characters is a failure, and the cursor is restored.

    Args:
        n: Number of characters to read (0 always succeeds with "")

    Returns:
        Parser yielding the n-character string

    Raises:
        ValueError: If n is negative

    Example:
        >>> cursor = Cursor("123456")
        >>> fixed_length(4).parse_next(cursor).value
        '1234'
        >>> cursor.remaining
        '56'
    """
    if n < 0:
        msg = f"fixed_length requires n >= 0, got {n}"
        raise ValueError(msg)

    def parse_fixed(cursor: Cursor) -> Result[str]:
        start = cursor.pos
        taken = 0

        def within_width(ch: str) -> bool:
            nonlocal taken
            taken += 1
            return taken <= n and not is_whitespace(ch)

        text = take_while(cursor, within_width)
        if len(text) < n:
            cursor.restore(start)
            return BACKTRACK
        return Success(text)

    return FnParser(parse_fixed)


def literal(text: str) -> Parser[str]:
    """Build a parser matching exactly text.

    Reads len(text) characters with fixed_length and compares. Because
    fixed_length stops at whitespace, a text containing whitespace can
    never match.

    Both failure paths (too few characters, different characters) restore
    the cursor to where the parser started.

    Example:
        >>> cursor = Cursor("hello world")
        >>> literal("hello").parse_next(cursor).value
        'hello'
        >>> cursor.remaining
        ' world'
    """
    word = fixed_length(len(text))

    def parse_literal(cursor: Cursor) -> Result[str]:
        start = cursor.pos
        outcome = word.parse_next(cursor)
        if isinstance(outcome, Failure):
            return outcome
        if outcome.value != text:
            cursor.restore(start)
            return BACKTRACK
        return outcome

    return FnParser(parse_literal)
