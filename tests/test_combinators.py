"""Tests for repeat, interleaved and numbers."""

from __future__ import annotations

import logging

import pytest
from hypothesis import given

from parsekit import (
    Cursor,
    NoProgressError,
    fixed_length,
    interleaved,
    literal,
    numbers,
    repeat,
    token,
    uint,
    whitespace,
)
from parsekit.constants import MAX_STALLED_ITERATIONS
from parsekit.result import BACKTRACK, Result, Success
from tests.strategies import number_lists

# ============================================================================
# REPEAT
# ============================================================================


class TestRepeat:
    """repeat: apply until failure."""

    def test_collects_matches_in_order(self) -> None:
        """All successes are returned in input order."""
        cursor = Cursor("abcdefg")

        assert repeat(cursor, fixed_length(2)) == ["ab", "cd", "ef"]
        assert cursor.remaining == "g"

    def test_empty_when_first_attempt_fails(self) -> None:
        """No match at all yields an empty list."""
        cursor = Cursor("a")

        assert repeat(cursor, fixed_length(2)) == []
        assert cursor.pos == 0

    def test_stops_at_whitespace(self) -> None:
        """fixed_length cannot cross whitespace, so repeat stops there."""
        cursor = Cursor("aabb cc")

        assert repeat(cursor, fixed_length(2)) == ["aa", "bb"]
        assert cursor.remaining == " cc"

    def test_accepts_plain_function(self) -> None:
        """Plain functions are adapted automatically."""

        def digit(cursor: Cursor) -> Result[int]:
            if not cursor.is_eof and cursor.current.isdigit():
                value = int(cursor.current)
                cursor.advance()
                return Success(value)
            return BACKTRACK

        assert repeat(Cursor("123x"), digit) == [1, 2, 3]

    def test_accepts_literal(self) -> None:
        """Repeated literal matches."""
        cursor = Cursor("abababx")

        assert repeat(cursor, literal("ab")) == ["ab", "ab", "ab"]
        assert cursor.remaining == "x"

    def test_does_not_roll_back_terminating_failure(self) -> None:
        """A parser that consumes on failure keeps that consumption."""

        def greedy(cursor: Cursor) -> Result[str]:
            if cursor.is_eof:
                return BACKTRACK
            ch = cursor.current
            cursor.advance()
            return Success(ch) if ch != "!" else BACKTRACK

        cursor = Cursor("ab!cd")

        assert repeat(cursor, greedy) == ["a", "b"]
        assert cursor.remaining == "cd"

    def test_zero_width_successes_that_end(self) -> None:
        """A stateful parser may succeed in place a few times, then fail."""
        remaining = [2, 1, 0]

        def countdown(cursor: Cursor) -> Result[int]:
            if not remaining:
                return BACKTRACK
            return Success(remaining.pop(0))

        cursor = Cursor("x")

        assert repeat(cursor, countdown) == [2, 1, 0]
        assert cursor.pos == 0

    def test_stall_count_resets_after_progress(self) -> None:
        """Only consecutive in-place successes count toward the limit."""
        calls = 0

        def mostly_in_place(cursor: Cursor) -> Result[int]:
            nonlocal calls
            calls += 1
            if calls > 2 * MAX_STALLED_ITERATIONS:
                return BACKTRACK
            if calls % MAX_STALLED_ITERATIONS == 0:
                cursor.advance()
            return Success(calls)

        cursor = Cursor("abc")

        assert len(repeat(cursor, mostly_in_place)) == 2 * MAX_STALLED_ITERATIONS
        assert cursor.remaining == "c"

    def test_no_progress_raises(self, caplog: pytest.LogCaptureFixture) -> None:
        """A parser that never stops succeeding in place is cut off."""
        cursor = Cursor("  x")

        with caplog.at_level(logging.ERROR, logger="parsekit.combinators"):
            with pytest.raises(NoProgressError, match="repeat"):
                repeat(cursor, token)

        assert "would never terminate" in caplog.text
        assert f"{MAX_STALLED_ITERATIONS:,} times" in caplog.text

    def test_zero_width_parser_raises(self) -> None:
        """fixed_length(0) always succeeds empty; repeat rejects it."""
        with pytest.raises(NoProgressError):
            repeat(Cursor("abc"), fixed_length(0))


# ============================================================================
# INTERLEAVED
# ============================================================================


class TestInterleaved:
    """interleaved: item (sep item)*."""

    def test_first_item_fails(self) -> None:
        """Returns [] without moving the cursor."""
        cursor = Cursor("abc")

        assert interleaved(cursor, uint, whitespace) == []
        assert cursor.pos == 0

    def test_separator_failure_keeps_items(self) -> None:
        """A failing separator stops the loop and keeps parsed items."""
        cursor = Cursor("1,2;3")

        assert interleaved(cursor, uint, literal(",")) == [1, 2]
        assert cursor.remaining == ";3"

    def test_single_item_at_eof(self) -> None:
        """One item and no separator."""
        cursor = Cursor("42")

        assert interleaved(cursor, uint, literal(",")) == [42]
        assert cursor.is_eof

    def test_trailing_separator_stays_consumed(self) -> None:
        """A separator followed by a failing item is not rolled back."""
        cursor = Cursor("1,2,x")

        assert interleaved(cursor, uint, literal(",")) == [1, 2]
        assert cursor.remaining == "x"

    def test_words(self) -> None:
        """Works with any item type."""
        cursor = Cursor("ab-cd-ef")

        assert interleaved(cursor, fixed_length(2), literal("-")) == ["ab", "cd", "ef"]

    def test_zero_width_rounds_that_end(self) -> None:
        """Rounds that consume nothing are fine as long as the item fails eventually."""
        remaining = ["a", "b"]

        def pending(cursor: Cursor) -> Result[str]:
            if not remaining:
                return BACKTRACK
            return Success(remaining.pop(0))

        cursor = Cursor("1 2")

        assert interleaved(cursor, pending, whitespace) == ["a", "b"]
        assert cursor.pos == 0

    def test_no_progress_raises(self) -> None:
        """Item and separator that match empty forever are cut off."""
        with pytest.raises(NoProgressError, match="interleaved"):
            interleaved(Cursor(""), token, whitespace)


# ============================================================================
# NUMBERS
# ============================================================================


class TestNumbers:
    """numbers: whitespace-separated unsigned integers."""

    def test_basic(self) -> None:
        """Parses a space-separated run."""
        assert numbers(Cursor("123 456 789 0")) == [123, 456, 789, 0]

    def test_empty_input(self) -> None:
        """Empty input yields an empty list."""
        assert numbers(Cursor("")) == []

    def test_stops_at_non_number(self) -> None:
        """Stops at the first token that is not a number."""
        cursor = Cursor("1 2 three 4")

        assert numbers(cursor) == [1, 2]
        assert cursor.remaining == "three 4"

    def test_mixed_whitespace(self) -> None:
        """Tabs and newlines separate numbers too."""
        assert numbers(Cursor("1\t2\n3  4")) == [1, 2, 3, 4]

    def test_digits_glued_to_text(self) -> None:
        """A number followed directly by text ends the run."""
        cursor = Cursor("12abc 3")

        assert numbers(cursor) == [12]
        assert cursor.remaining == "abc 3"

    def test_overflow_ends_run(self) -> None:
        """An out-of-range number ends the run at its first digit."""
        cursor = Cursor("1 18446744073709551616 2")

        assert numbers(cursor) == [1]
        assert cursor.remaining == "18446744073709551616 2"

    @given(data=number_lists())
    def test_property_roundtrip(self, data: tuple[list[int], str]) -> None:
        """PROPERTY: rendering u64 values with whitespace parses back."""
        values, text = data
        cursor = Cursor(text)

        assert numbers(cursor) == values
        assert cursor.is_eof

