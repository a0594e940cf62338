"""Render durations as canonical ISO 8601 text."""

from isodur.duration import SECOND, Duration

FRACTION_DIGITS = 9


def _format_seconds(seconds: int, nanoseconds: int) -> str:
    """Render seconds and nanoseconds as one signed decimal, e.g. `-0.5`.

    The two are summed first, so mismatched signs borrow from the seconds.
    """
    total = seconds * SECOND + nanoseconds
    sign = "-" if total < 0 else ""
    whole, frac = divmod(abs(total), SECOND)
    text = f"{sign}{whole}"
    if frac:
        text += "." + f"{frac:0{FRACTION_DIGITS}d}".rstrip("0")
    return text


def format_duration(duration: Duration) -> str:
    """Format a duration as text, e.g. `-P1Y2M3DT4H5M6.5S`.

    Zero units are left out. A duration with no nonzero units renders as
    `P0D` (or `-P0D` when negative).
    """
    parts = []
    for value, letter in (
        (duration.years, "Y"),
        (duration.months, "M"),
        (duration.weeks, "W"),
        (duration.days, "D"),
    ):
        if value:
            parts.append(f"{value}{letter}")

    has_seconds = bool(duration.seconds or duration.nanoseconds)
    if duration.hours or duration.minutes or has_seconds:
        parts.append("T")
        if duration.hours:
            parts.append(f"{duration.hours}H")
        if duration.minutes:
            parts.append(f"{duration.minutes}M")
        if has_seconds:
            parts.append(_format_seconds(duration.seconds, duration.nanoseconds) + "S")

    if not parts:
        parts.append("0D")

    prefix = "-P" if duration.negative else "P"
    return prefix + "".join(parts)


def fixed_length_to_text(nanoseconds: int) -> str:
    """Format elapsed nanoseconds, e.g. 5400 seconds as `PT1H30M`.

    Hours are the largest unit used. Zero renders as `P0D`.

    Raises:
        DurationOverflowError: If nanoseconds is outside int64.
    """
    return format_duration(Duration.from_fixed_length_nanoseconds(nanoseconds))
