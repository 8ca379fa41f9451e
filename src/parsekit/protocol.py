"""Parser capability: the single calling convention every parser shares.

A parser is anything with ``parse_next(cursor) -> Result[T]``. Plain
functions and closures with the signature ``(cursor) -> Result[T]`` qualify
through the FnParser adapter, which combinators apply automatically via
as_parser(). No common base class is required.

Defining parsers:
    def digit(cursor: Cursor) -> Result[str]:
        if not cursor.is_eof and cursor.current in ASCII_DIGITS:
            ch = cursor.current
            cursor.advance()
            return Success(ch)
        return BACKTRACK

    repeat(cursor, digit)               # plain function
    repeat(cursor, fixed_length(2))     # Parser object

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from parsekit.cursor import Cursor
from parsekit.result import Result

__all__ = ["FnParser", "Parser", "ParserLike", "as_parser", "parse_next"]


@runtime_checkable
class Parser[T](Protocol):
    """Protocol for values that can parse from a cursor.

    On success the cursor has advanced past the consumed prefix. On failure
    the cursor position is whatever the implementation documents.
    """

    def parse_next(self, cursor: Cursor) -> Result[T]: ...


type ParserLike[T] = Parser[T] | Callable[[Cursor], Result[T]]


@dataclass(frozen=True, slots=True)
class FnParser[T]:
    """Adapter giving a plain function or closure the Parser interface.

    Also callable, so an adapted parser can be used wherever a function is
    expected.

    Example:
        >>> from parsekit import Cursor, token
        >>> p = FnParser(token)
        >>> p.parse_next(Cursor("abc def")).value
        'abc'
    """

    func: Callable[[Cursor], Result[T]]

    def parse_next(self, cursor: Cursor) -> Result[T]:
        return self.func(cursor)

    def __call__(self, cursor: Cursor) -> Result[T]:
        return self.func(cursor)


def as_parser[T](parser: ParserLike[T]) -> Parser[T]:
    """Normalize a parser-like value to the Parser interface.

    Args:
        parser: A Parser, or a callable ``(cursor) -> Result[T]``

    Returns:
        The parser itself if it already has parse_next, otherwise an FnParser

    Raises:
        TypeError: If parser is neither a Parser nor callable
    """
    if isinstance(parser, Parser):
        return parser
    if callable(parser):
        return FnParser(parser)
    msg = f"Expected a parser or callable, got {type(parser).__name__}"
    raise TypeError(msg)


def parse_next[T](parser: ParserLike[T], cursor: Cursor) -> Result[T]:
    """Invoke any parser-like value on cursor."""
    if isinstance(parser, Parser):
        return parser.parse_next(cursor)
    return parser(cursor)
