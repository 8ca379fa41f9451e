"""Generic combinators built on the Parser calling convention.

Combinators accept any ParserLike value and never roll back a failed inner
attempt themselves. Correct composition therefore depends on the inner
parsers' own failure contracts: every built-in primitive that can fail
leaves the cursor where it started.

Termination:
    repeat and interleaved run until an inner parser fails. A parser may
    succeed without consuming input (a stateful closure counting down, say)
    and the loop keeps going. Only after MAX_STALLED_ITERATIONS consecutive
    iterations that leave the cursor in place do the combinators give up
    and raise NoProgressError. That signals a composition that can never
    end (for example repeat over token at whitespace), never malformed input.

Python 3.13+. Zero external dependencies.
"""

import logging

from parsekit.constants import MAX_STALLED_ITERATIONS
from parsekit.cursor import Cursor
from parsekit.errors import ErrorTemplate, NoProgressError
from parsekit.primitives import uint, whitespace
from parsekit.protocol import ParserLike, as_parser
from parsekit.result import Failure

__all__ = ["interleaved", "numbers", "repeat"]

logger = logging.getLogger(__name__)


def _count_stall(combinator: str, before: int, cursor: Cursor, stalled: int) -> int:
    """Return the updated run of iterations that left the cursor at before.

    Raises:
        NoProgressError: When the run reaches MAX_STALLED_ITERATIONS
    """
    if cursor.pos != before:
        return 0
    stalled += 1
    if stalled >= MAX_STALLED_ITERATIONS:
        message = ErrorTemplate.no_progress(combinator, before, stalled)
        logger.error("%s", message)
        raise NoProgressError(message)
    return stalled


def repeat[T](cursor: Cursor, parser: ParserLike[T]) -> list[T]:
    """Apply parser until it fails, collecting every success in order.

    Never fails; returns an empty list if the first attempt fails. The
    terminating failed attempt is not rolled back here.

    Raises:
        NoProgressError: If parser keeps succeeding without consuming input

    Example:
        >>> from parsekit import fixed_length
        >>> repeat(Cursor("abcdefg"), fixed_length(2))
        ['ab', 'cd', 'ef']
    """
    p = as_parser(parser)
    values: list[T] = []
    stalled = 0
    while True:
        before = cursor.pos
        outcome = p.parse_next(cursor)
        if isinstance(outcome, Failure):
            return values
        values.append(outcome.value)
        stalled = _count_stall("repeat", before, cursor, stalled)


def interleaved[T](
    cursor: Cursor, item: ParserLike[T], sep: ParserLike[object]
) -> list[T]:
    """Parse item (sep item)*, collecting the items.

    Loop: parse an item; on failure stop. Then parse a separator; on failure
    stop. Items parsed so far are always kept. Neither the failed item nor
    the failed separator is rolled back here, so a separator that succeeded
    before a failing item stays consumed.

    Raises:
        NoProgressError: If item + separator rounds keep consuming nothing

    Example:
        >>> from parsekit import literal, uint
        >>> interleaved(Cursor("1,2,3"), uint, literal(","))
        [1, 2, 3]
    """
    item_parser = as_parser(item)
    sep_parser = as_parser(sep)
    values: list[T] = []
    stalled = 0
    while True:
        before = cursor.pos
        outcome = item_parser.parse_next(cursor)
        if isinstance(outcome, Failure):
            return values
        values.append(outcome.value)
        if isinstance(sep_parser.parse_next(cursor), Failure):
            return values
        stalled = _count_stall("interleaved", before, cursor, stalled)


def numbers(cursor: Cursor) -> list[int]:
    """Parse whitespace-separated unsigned integers.

    Stops at the first non-number or end of input. Never fails.

    Example:
        >>> numbers(Cursor("123 456 789 0"))
        [123, 456, 789, 0]
    """
    return interleaved(cursor, uint, whitespace)
