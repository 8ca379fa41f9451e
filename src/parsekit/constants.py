"""Shared constants for parsekit.

Centralized character classes and limits used by the scanners, primitives,
and the top-level runner. Placing constants here avoids circular imports
and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Character classes
    "ASCII_DIGITS",
    # Numeric limits
    "U64_MAX",
    "U64_MAX_DIGITS",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Combinator limits
    "MAX_STALLED_ITERATIONS",
]

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# ASCII digits only - 0-9, not Unicode digits like ² or ³.
# str.isdigit() returns True for Unicode digits which causes int() to fail.
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

# ============================================================================
# NUMERIC LIMITS
# ============================================================================

# Largest value representable as an unsigned 64-bit integer.
U64_MAX: int = 2**64 - 1

# Decimal digit count of U64_MAX (18446744073709551615).
# Digit runs with more significant digits are rejected without calling int(),
# which would otherwise trip sys.get_int_max_str_digits() on huge inputs.
U64_MAX_DIGITS: int = len(str(U64_MAX))

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source size accepted by parsekit.runner.parse (characters).
# 10 MiB is far beyond any reasonable input for a hand-composed parser.
# Set ParseConfig.max_source_size=0 to disable the check.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# COMBINATOR LIMITS
# ============================================================================

# Consecutive iterations a repetition combinator tolerates without the cursor
# moving before it raises NoProgressError. Finite zero-width runs (stateful
# parsers that succeed a few times in place, then fail) stay well below this.
MAX_STALLED_ITERATIONS: int = 10_000
