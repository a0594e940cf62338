"""isodur - ISO 8601 duration parsing and formatting."""

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
from isodur.errors import DurationError, DurationOverflowError, InvalidDurationError
from isodur.formatter import fixed_length_to_text, format_duration
from isodur.parser import parse_duration
from isodur.types import IsoDuration

__all__ = [
    # Core
    "Duration",
    "parse_duration",
    "format_duration",
    "fixed_length_to_text",
    # Fixed-length units in nanoseconds
    "NANOSECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
    # Errors
    "DurationError",
    "DurationOverflowError",
    "InvalidDurationError",
    # Pydantic integration
    "IsoDuration",
    # Configuration
    "Config",
    "get_config",
]
