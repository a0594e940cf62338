"""Parser for ISO 8601 duration text."""

import logging

from isodur import int64
from isodur.config import Config, get_config
from isodur.duration import (
    DAY,
    HOUR,
    MINUTE,
    MONTH,
    NANOSECOND,
    SECOND,
    WEEK,
    YEAR,
    Duration,
)
from isodur.errors import InvalidDurationError
from isodur.scanner import FractionPart, Scanner

logger = logging.getLogger(__name__)

# (unit letter) -> (field, field receiving the fraction, finer units per unit)
_DATE_UNITS = {
    "Y": ("years", "months", YEAR // MONTH),
    "M": ("months", "weeks", MONTH // WEEK),
    "W": ("weeks", "days", WEEK // DAY),
    "D": ("days", "hours", DAY // HOUR),
}
_TIME_UNITS = {
    "H": ("hours", "minutes", HOUR // MINUTE),
    "M": ("minutes", "seconds", MINUTE // SECOND),
    "S": ("seconds", "nanoseconds", SECOND // NANOSECOND),
}


def _reject(text: str, reason: str) -> InvalidDurationError:
    logger.debug(f"Rejected duration {text!r}: {reason}")
    return InvalidDurationError(text)


def parse_duration(text: str, config: Config | None = None) -> Duration:
    """Parse ISO 8601 duration text such as `P3Y6M4DT12H30M5S`.

    The whole value may carry a leading sign, and so may each component
    (`-P1D`, `P-1D`). The last component may have a fraction, which is
    carried into the next finer unit: `P1.5D` is one day and twelve hours.
    `P` and `PT` parse as the zero duration.

    Args:
        text: Duration text.
        config: Parser settings, defaults to `get_config()`.

    Returns:
        The parsed duration.

    Raises:
        InvalidDurationError: If the text is not a valid duration.
        DurationOverflowError: If a number or field total leaves int64.
    """
    config = config or get_config()
    if config.max_input_length is not None and len(text) > config.max_input_length:
        raise _reject(text, f"longer than {config.max_input_length} characters")

    scanner = Scanner(text)
    negative = scanner.consume_sign()
    if scanner.peek() != "P":
        raise _reject(text, "missing 'P' designator")
    scanner.advance()

    fields = {
        "years": 0,
        "months": 0,
        "weeks": 0,
        "days": 0,
        "hours": 0,
        "minutes": 0,
        "seconds": 0,
        "nanoseconds": 0,
    }
    units = _DATE_UNITS
    while not scanner.at_end:
        if scanner.peek() == "T":
            scanner.advance()
            units = _TIME_UNITS
            continue

        component_negative = scanner.consume_sign()
        integer = scanner.consume_integer()
        fraction = FractionPart(0, 1, 0)
        if scanner.peek() == ".":
            scanner.advance()
            fraction = scanner.consume_fraction()
        if integer.digits == 0 and fraction.digits == 0:
            raise _reject(text, f"no digits at offset {scanner.pos}")

        value, fraction_value = integer.value, fraction.value
        if component_negative:
            value, fraction_value = -value, -fraction_value

        if scanner.at_end:
            raise _reject(text, "missing unit after number")
        letter = scanner.advance()
        if letter not in units:
            raise _reject(text, f"unit {letter!r} not allowed here")
        field, finer_field, ratio = units[letter]

        fields[field] = int64.add(fields[field], value)
        if fraction.digits:
            # |fraction_value| < scale, so the carry is always smaller than ratio
            carried = int64.truncating_div(fraction_value * ratio, fraction.scale)
            fields[finer_field] = int64.add(fields[finer_field], carried)
            if not scanner.at_end:
                raise _reject(text, "fraction on a component that is not last")

    return Duration(negative=negative, **fields)
