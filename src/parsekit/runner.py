"""Top-level parse entry point.

Creates the cursor for one parse, applies ParseConfig limits, runs the
parser and turns a Failure into an exception. Use this when a caller
wants a value or an error rather than a Result.
"""

import logging

from parsekit.config import ParseConfig
from parsekit.cursor import Cursor
from parsekit.errors import IncompleteParseError, SourceTooLargeError
from parsekit.protocol import ParserLike, parse_next

__all__ = ["parse"]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ParseConfig()


def parse[T](
    parser: ParserLike[T], source: str, *, config: ParseConfig | None = None
) -> T:
    """Run parser over source and return the parsed value.

    Args:
        parser: Any Parser or ``(cursor) -> Result[T]`` callable
        source: Input text
        config: Limits and completeness options (default: ParseConfig())

    Returns:
        The value produced by parser

    Raises:
        SourceTooLargeError: If source exceeds config.max_source_size
        ParseFailedError: If parser returned a Failure
        IncompleteParseError: If config.require_eof and input is left over

    Example:
        >>> from parsekit import literal
        >>> parse(literal("hello"), "hello world")
        'hello'
    """
    cfg = config if config is not None else _DEFAULT_CONFIG

    if cfg.max_source_size > 0 and len(source) > cfg.max_source_size:
        raise SourceTooLargeError(len(source), cfg.max_source_size)

    logger.debug("Parsing %d characters with %r", len(source), parser)
    cursor = Cursor(source)
    outcome = parse_next(parser, cursor)

    value = outcome.unwrap()

    if cfg.require_eof and not cursor.is_eof:
        remaining = len(source) - cursor.pos
        raise IncompleteParseError(remaining)

    logger.debug("Parse consumed %d of %d characters", cursor.pos, len(source))
    return value
