"""ISO 8601 calendar duration with nanosecond precision."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, Field

from isodur import int64
from isodur.int64 import MAX_INT64, MIN_INT64

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
SECOND = 1_000_000_000 * NANOSECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
# 400 Gregorian years have 146097 days. Month and year are averages, not
# calendar lengths.
MONTH = DAY * 146097 // 4800
YEAR = 12 * MONTH


def _int64_field(description: str):
    return Field(default=0, ge=MIN_INT64, le=MAX_INT64, strict=True, description=description)


class Duration(BaseModel):
    """Calendar duration as written in ISO 8601 (`P1Y2M3W4DT5H6M7.5S`).

    Each unit is kept separately because years, months, weeks and days have
    no fixed length. `negative` is the sign of the whole value.
    """

    model_config = {"frozen": True}

    years: int = _int64_field("Years")
    months: int = _int64_field("Months")
    weeks: int = _int64_field("Weeks")
    days: int = _int64_field("Days")
    hours: int = _int64_field("Hours")
    minutes: int = _int64_field("Minutes")
    seconds: int = _int64_field("Seconds")
    nanoseconds: int = Field(
        default=0,
        ge=-(SECOND - 1),
        le=SECOND - 1,
        strict=True,
        description="Sub-second part, always less than one second",
    )
    negative: bool = Field(
        default=False, strict=True, description="Sign of the whole duration"
    )

    @classmethod
    def from_fixed_length_nanoseconds(cls, nanoseconds: int) -> Duration:
        """Create duration from elapsed nanoseconds.

        Only hours and smaller units are filled in, since a day is not a
        fixed length (e.g. DST).
        """
        int64.check(nanoseconds)
        negative = nanoseconds < 0
        rest = abs(nanoseconds)
        hours, rest = divmod(rest, HOUR)
        minutes, rest = divmod(rest, MINUTE)
        seconds, rest = divmod(rest, SECOND)
        return cls(
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            nanoseconds=rest,
            negative=negative,
        )

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        """Create duration from a timedelta, using hours and smaller units."""
        micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        return cls.from_fixed_length_nanoseconds(micros * MICROSECOND)

    @classmethod
    def zero(cls) -> Duration:
        """Create zero duration."""
        return cls()

    def to_fixed_length_nanoseconds(self) -> int:
        """Approximate this duration as elapsed nanoseconds.

        Lossy: days are 24 hours, months are 1/12 of an average Gregorian
        year. Do not use this to do date arithmetic.

        Raises:
            DurationOverflowError: If any unit or the total leaves int64.
        """
        # The sign is applied per unit so a total of exactly -2**63 still fits
        sign = -1 if self.negative else 1
        total = 0
        for count, unit in (
            (self.years, YEAR),
            (self.months, MONTH),
            (self.weeks, WEEK),
            (self.days, DAY),
            (self.hours, HOUR),
            (self.minutes, MINUTE),
            (self.seconds, SECOND),
            (self.nanoseconds, NANOSECOND),
        ):
            total = int64.add(total, int64.multiply(count, sign * unit))
        return total

    def to_timedelta(self) -> timedelta:
        """Approximate this duration as a timedelta, truncated to microseconds.

        Raises:
            DurationOverflowError: If the fixed-length total leaves int64.
        """
        nanos = self.to_fixed_length_nanoseconds()
        return timedelta(microseconds=int64.truncating_div(nanos, MICROSECOND))

    def to_text(self) -> str:
        """Render as canonical ISO 8601 text."""
        from isodur.formatter import format_duration

        return format_duration(self)

    def is_zero(self) -> bool:
        """Check if every unit is zero, regardless of sign."""
        return not any(
            (
                self.years,
                self.months,
                self.weeks,
                self.days,
                self.hours,
                self.minutes,
                self.seconds,
                self.nanoseconds,
            )
        )

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Duration({self.to_text()!r})"
