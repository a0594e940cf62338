"""Tests for the decimal scanner."""

import pytest

from isodur.errors import DurationOverflowError
from isodur.int64 import MAX_INT64
from isodur.scanner import FractionPart, IntegerPart, Scanner


class TestConsumeSign:
    """Test optional sign handling."""

    def test_minus(self):
        """Test a minus sign."""
        scanner = Scanner("-5")
        assert scanner.consume_sign() is True
        assert scanner.remaining == "5"

    def test_plus(self):
        """Test a plus sign."""
        scanner = Scanner("+5")
        assert scanner.consume_sign() is False
        assert scanner.remaining == "5"

    def test_no_sign(self):
        """Without a sign nothing is consumed."""
        scanner = Scanner("5")
        assert scanner.consume_sign() is False
        assert scanner.pos == 0

    def test_empty(self):
        """Test empty input."""
        scanner = Scanner("")
        assert scanner.consume_sign() is False
        assert scanner.at_end


class TestConsumeInteger:
    """Test integer digit runs."""

    def test_stops_at_non_digit(self):
        """Test that scanning stops at the first non-digit."""
        scanner = Scanner("123abc")
        assert scanner.consume_integer() == IntegerPart(123, 3)
        assert scanner.remaining == "abc"

    def test_no_digits(self):
        """Zero digits is reported, not raised."""
        scanner = Scanner("D")
        assert scanner.consume_integer() == IntegerPart(0, 0)
        assert scanner.pos == 0

    def test_zero_is_distinct_from_no_digits(self):
        """Test that 0 is reported with one digit."""
        assert Scanner("0D").consume_integer() == IntegerPart(0, 1)
        assert Scanner("007").consume_integer() == IntegerPart(7, 3)

    def test_max_int64(self):
        """Test the largest int64."""
        scanner = Scanner(str(MAX_INT64))
        assert scanner.consume_integer().value == MAX_INT64
        assert scanner.at_end

    def test_overflow(self):
        """Test values past int64."""
        with pytest.raises(DurationOverflowError):
            Scanner(str(MAX_INT64 + 1)).consume_integer()
        with pytest.raises(DurationOverflowError):
            Scanner("99999999999999999999Y").consume_integer()

    def test_ascii_digits_only(self):
        """Non-ASCII digits are not part of a number."""
        assert Scanner("٣").consume_integer() == IntegerPart(0, 0)


class TestConsumeFraction:
    """Test fractional digit runs."""

    def test_simple(self):
        """Test a single fraction digit."""
        scanner = Scanner("5S")
        assert scanner.consume_fraction() == FractionPart(5, 10, 1)
        assert scanner.remaining == "S"

    def test_keeps_leading_zeros_in_scale(self):
        """Test that leading zeros count toward the scale."""
        assert Scanner("005").consume_fraction() == FractionPart(5, 1000, 3)

    def test_no_digits(self):
        """Test a fraction with no digits."""
        assert Scanner("S").consume_fraction() == FractionPart(0, 1, 0)

    def test_truncates_instead_of_overflowing(self):
        """Digits past int64 precision are skipped, not an error."""
        scanner = Scanner("12345678901234567890123S")
        fraction = scanner.consume_fraction()
        assert fraction.value == 1234567890123456789
        assert fraction.scale == 10**19
        assert fraction.digits == 23
        assert scanner.remaining == "S"
