"""Signed 64-bit arithmetic that raises instead of wrapping."""

from isodur.errors import DurationOverflowError

MAX_INT64 = (1 << 63) - 1
MIN_INT64 = -(1 << 63)


def check(value: int) -> int:
    """Return value unchanged if it fits in int64."""
    if value > MAX_INT64 or value < MIN_INT64:
        raise DurationOverflowError(value)
    return value


def add(base: int, v: int) -> int:
    return check(base + v)


def multiply(base: int, v: int) -> int:
    return check(base * v)


def truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero, like C and Go."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient
