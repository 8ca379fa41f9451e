"""Enumerations for parsekit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Kind of a recoverable parse failure.

    StrEnum provides automatic string conversion: str(ErrorKind.BACKTRACK) == "backtrack"
    """

    EOF = "eof"
    """End of input reached. Reserved: no built-in parser reports it."""

    BACKTRACK = "backtrack"
    """Input did not match here; the caller may try an alternative."""


__all__ = [
    "ErrorKind",
]
