"""Cursor over duration text that consumes signs and decimal digit runs."""

from typing import NamedTuple

from isodur.errors import DurationOverflowError
from isodur.int64 import MAX_INT64


class IntegerPart(NamedTuple):
    value: int
    digits: int


class FractionPart(NamedTuple):
    """Digits after a decimal point, worth `value / scale`."""

    value: int
    scale: int
    digits: int


def _is_digit(c: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits
    return "0" <= c <= "9"


class Scanner:
    """Left-to-right cursor over a string.

    Each consume method advances past what it read and leaves the cursor on
    the first character it did not accept.
    """

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def remaining(self) -> str:
        return self.text[self.pos :]

    def peek(self) -> str | None:
        if self.at_end:
            return None
        return self.text[self.pos]

    def advance(self) -> str:
        c = self.text[self.pos]
        self.pos += 1
        return c

    def consume_sign(self) -> bool:
        """Consume an optional `+` or `-`, returning True for `-`."""
        c = self.peek()
        if c == "-" or c == "+":
            self.pos += 1
            return c == "-"
        return False

    def consume_integer(self) -> IntegerPart:
        """Consume the leading [0-9]* as a non-negative int64.

        Raises DurationOverflowError as soon as the next digit would take the
        value past the int64 maximum. Zero digits consumed is reported via
        `digits == 0` rather than as an error.
        """
        value = 0
        start = self.pos
        while not self.at_end and _is_digit(self.text[self.pos]):
            digit = ord(self.text[self.pos]) - ord("0")
            if value > (MAX_INT64 - digit) // 10:
                raise DurationOverflowError()
            value = value * 10 + digit
            self.pos += 1
        return IntegerPart(value, self.pos - start)

    def consume_fraction(self) -> FractionPart:
        """Consume the leading [0-9]* following a decimal point.

        Never fails: once another digit would overflow int64 the value and
        scale stop advancing and the remaining digits are skipped.
        """
        value = 0
        scale = 1
        start = self.pos
        overflow = False
        while not self.at_end and _is_digit(self.text[self.pos]):
            digit = ord(self.text[self.pos]) - ord("0")
            self.pos += 1
            if overflow:
                continue
            if value > (MAX_INT64 - digit) // 10:
                overflow = True
                continue
            value = value * 10 + digit
            scale *= 10
        return FractionPart(value, scale, self.pos - start)
