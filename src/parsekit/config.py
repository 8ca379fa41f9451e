"""Configuration for top-level parsing.

Provides a single frozen dataclass that encapsulates the options accepted
by parsekit.runner.parse. Parsers and combinators themselves take no
configuration; they operate on whatever cursor they are handed.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from parsekit.constants import MAX_SOURCE_SIZE

__all__ = ["ParseConfig"]


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable configuration for parsekit.runner.parse.

    All fields have sensible defaults; ``ParseConfig()`` with no arguments
    produces a usable configuration.

    Attributes:
        max_source_size: Maximum source length in characters (default: 10 MiB).
            Set to 0 to disable the limit (not recommended for untrusted input).
        require_eof: If True, a successful parse that leaves input unconsumed
            raises IncompleteParseError (default: False).

    Example:
        >>> from parsekit import ParseConfig, parse, uint
        >>> parse(uint, "123", config=ParseConfig(require_eof=True))
        123
    """

    max_source_size: int = MAX_SOURCE_SIZE
    require_eof: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_source_size is negative
        """
        if self.max_source_size < 0:
            msg = "max_source_size must be non-negative"
            raise ValueError(msg)
