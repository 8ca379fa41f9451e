"""parsekit - minimal parser-combinator runtime over string input.

Every parser shares one calling convention: it takes a Cursor, advances it
in place on success, and returns Success(value) or Failure(kind). Plain
functions, closures, and objects with a parse_next method all compose
without a common base class.

Public API:
    Cursor - Source string plus mutable position
    Success, Failure, Result - Tagged parse outcome
    ErrorKind - Failure kinds (BACKTRACK, EOF)
    Parser, FnParser, as_parser, parse_next - Parser capability
    take_while, take_until - Character-class scanners
    token, whitespace, uint, fixed_length, literal - Primitive parsers
    repeat, interleaved, numbers - Combinators
    parse, ParseConfig - Top-level entry point and its options

Exceptions:
    ParseKitError - Base exception class
    ParseFailedError - Failure unwrapped or top-level parse failed
    IncompleteParseError - Input left over with require_eof
    NoProgressError - Combinator loop would never terminate
    SourceTooLargeError - Input exceeds max_source_size

Example:
    >>> from parsekit import Cursor, literal, numbers, whitespace
    >>> cursor = Cursor("sum 1 2 3")
    >>> literal("sum").parse_next(cursor).value
    'sum'
    >>> _ = whitespace(cursor)
    >>> numbers(cursor)
    [1, 2, 3]
"""

from .combinators import interleaved, numbers, repeat
from .config import ParseConfig
from .cursor import Cursor
from .enums import ErrorKind
from .errors import (
    IncompleteParseError,
    NoProgressError,
    ParseFailedError,
    ParseKitError,
    SourceTooLargeError,
)
from .primitives import fixed_length, literal, token, uint, whitespace
from .protocol import FnParser, Parser, ParserLike, as_parser, parse_next
from .result import BACKTRACK, Failure, Result, Success
from .runner import parse
from .scanners import take_until, take_while

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("parsekit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BACKTRACK",
    "Cursor",
    "ErrorKind",
    "Failure",
    "FnParser",
    "IncompleteParseError",
    "NoProgressError",
    "ParseConfig",
    "ParseFailedError",
    "ParseKitError",
    "Parser",
    "ParserLike",
    "Result",
    "SourceTooLargeError",
    "Success",
    "__version__",
    "as_parser",
    "fixed_length",
    "interleaved",
    "literal",
    "numbers",
    "parse",
    "parse_next",
    "repeat",
    "take_until",
    "take_while",
    "token",
    "uint",
    "whitespace",
]
