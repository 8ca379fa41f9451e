"""Exception hierarchy for non-recoverable parsing conditions.

Expected parse failures are never raised: parsers return a Failure value
(see parsekit.result). The exceptions here cover the cases where a caller
has to stop: unwrapping a failure, leftover input at a top-level parse,
oversized input, and combinator loops that cannot terminate.

Python 3.13+. Zero external dependencies.
"""

from parsekit.enums import ErrorKind

__all__ = [
    "ErrorTemplate",
    "IncompleteParseError",
    "NoProgressError",
    "ParseFailedError",
    "ParseKitError",
    "SourceTooLargeError",
]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and consistent across the package.
    """

    @staticmethod
    def parse_failed(kind: ErrorKind) -> str:
        """Parser returned a Failure where a value was required."""
        return f"Parse failed ({kind})"

    @staticmethod
    def incomplete(remaining: int) -> str:
        """Top-level parse succeeded but input was left over."""
        return f"Parser did not consume the whole input ({remaining:,} characters left)"

    @staticmethod
    def source_too_large(size: int, limit: int) -> str:
        """Source exceeds the configured size limit."""
        return (
            f"Source size ({size:,} characters) exceeds maximum ({limit:,} characters). "
            "Configure ParseConfig.max_source_size to increase limit."
        )

    @staticmethod
    def no_progress(combinator: str, pos: int, iterations: int) -> str:
        """Combinator kept succeeding without consuming input."""
        return (
            f"{combinator}: parser succeeded {iterations:,} times in a row without "
            f"consuming input at position {pos}; the loop would never terminate"
        )


class ParseKitError(Exception):
    """Base exception for all parsekit errors."""


class ParseFailedError(ParseKitError):
    """A Failure was unwrapped, or the top-level parser failed.

    Attributes:
        kind: The ErrorKind carried by the failure
    """

    def __init__(self, kind: ErrorKind) -> None:
        """Initialize ParseFailedError.

        Args:
            kind: Failure kind reported by the parser
        """
        super().__init__(ErrorTemplate.parse_failed(kind))
        self.kind = kind


class IncompleteParseError(ParseKitError):
    """Top-level parse succeeded but did not reach end of input.

    Attributes:
        remaining: Number of unconsumed characters
    """

    def __init__(self, remaining: int) -> None:
        super().__init__(ErrorTemplate.incomplete(remaining))
        self.remaining = remaining


class NoProgressError(ParseKitError):
    """A repetition combinator stalled: its parser keeps succeeding in place.

    Indicates a composition bug (e.g. repeat over a parser that matches the
    empty string), never malformed input.
    """


class SourceTooLargeError(ParseKitError, ValueError):
    """Source exceeds ParseConfig.max_source_size (DoS prevention)."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(ErrorTemplate.source_too_large(size, limit))
        self.size = size
        self.limit = limit
