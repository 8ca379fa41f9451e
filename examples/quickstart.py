"""Quickstart - composing parsers over a shared cursor.

Demonstrates:

1. Primitive parsers and the Success/Failure result
2. Backtracking: trying alternatives at the same position
3. repeat and interleaved with built-in and hand-written parsers
4. The top-level parse() entry point and ParseConfig

Python 3.13+.
"""

from __future__ import annotations

from parsekit import (
    Cursor,
    Failure,
    ParseConfig,
    ParseKitError,
    Result,
    Success,
    interleaved,
    literal,
    numbers,
    parse,
    repeat,
    token,
    uint,
    whitespace,
)
from parsekit.result import BACKTRACK


def example_1_primitives() -> None:
    """Run primitives on one cursor."""
    print("=" * 60)
    print("Example 1: Primitives")
    print("=" * 60)

    cursor = Cursor("move 12 steps")
    print(f"token:      {token(cursor)}")
    whitespace(cursor)
    print(f"uint:       {uint(cursor)}")
    whitespace(cursor)
    print(f"uint again: {uint(cursor)}  (cursor still at {cursor.remaining!r})")
    print()


def example_2_alternatives() -> None:
    """Failed literals restore the cursor, so alternatives can be tried."""
    print("=" * 60)
    print("Example 2: Alternatives")
    print("=" * 60)

    def command(cursor: Cursor) -> Result[str]:
        for keyword in ("push", "pop", "peek"):
            outcome = literal(keyword).parse_next(cursor)
            if outcome:
                return outcome
        return BACKTRACK

    for source in ("push 1", "peek", "drop"):
        match command(Cursor(source)):
            case Success(value):
                print(f"{source!r:10} -> command {value!r}")
            case Failure(kind):
                print(f"{source!r:10} -> {kind}")
    print()


def example_3_combinators() -> None:
    """repeat and interleaved."""
    print("=" * 60)
    print("Example 3: Combinators")
    print("=" * 60)

    print(f"numbers:     {numbers(Cursor('123 456 789 0'))}")
    print(f"interleaved: {interleaved(Cursor('1,2,3'), uint, literal(','))}")

    def hex_pair(cursor: Cursor) -> Result[int]:
        text = cursor.slice_ahead(2)
        if len(text) == 2 and all(ch in "0123456789abcdef" for ch in text):
            cursor.advance(2)
            return Success(int(text, 16))
        return BACKTRACK

    print(f"repeat:      {repeat(Cursor('ff00a0zz'), hex_pair)}")
    print()


def example_4_entry_point() -> None:
    """parse() raises instead of returning Failure."""
    print("=" * 60)
    print("Example 4: parse() and ParseConfig")
    print("=" * 60)

    strict = ParseConfig(require_eof=True)
    for source in ("42", "42 tail", "x"):
        try:
            print(f"{source!r:10} -> {parse(uint, source, config=strict)}")
        except ParseKitError as e:
            print(f"{source!r:10} -> {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    example_1_primitives()
    example_2_alternatives()
    example_3_combinators()
    example_4_entry_point()
