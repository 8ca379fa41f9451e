"""Tagged parse outcome: Success(value) or Failure(kind).

Every parser returns one of the two. On Success the cursor has already been
advanced past the consumed prefix; on Failure the cursor position is whatever
the individual parser documents. Partial successes are never observable.

Branching:
    >>> from parsekit import Cursor, uint
    >>> outcome = uint(Cursor("42"))
    >>> if outcome:
    ...     outcome.value
    42

Pattern matching works as well:
    match outcome:
        case Success(value):
            ...
        case Failure(kind):
            ...

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Literal, NoReturn

from parsekit.enums import ErrorKind
from parsekit.errors import ParseFailedError

__all__ = ["BACKTRACK", "Failure", "Result", "Success"]


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Successful parse carrying the produced value.

    Type Parameters:
        T: The type of the parsed value
    """

    value: T

    def __bool__(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        """Return the parsed value."""
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed parse. Carries only the failure kind, never a position."""

    kind: ErrorKind = ErrorKind.BACKTRACK

    def __bool__(self) -> Literal[False]:
        return False

    def unwrap(self) -> NoReturn:
        """Raise ParseFailedError for this failure.

        Raises:
            ParseFailedError: Always
        """
        raise ParseFailedError(self.kind)


type Result[T] = Success[T] | Failure

# Shared instance: Failure is immutable and carries no position.
BACKTRACK: Failure = Failure(ErrorKind.BACKTRACK)