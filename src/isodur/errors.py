"""Exceptions raised by the duration codec."""


class DurationError(ValueError):
    """Base class for all duration parsing and conversion errors."""


class DurationOverflowError(DurationError, OverflowError):
    """A value left the signed 64-bit range."""

    def __init__(self, value: int | None = None):
        self.value = value
        if value is None:
            super().__init__("duration overflow")
        else:
            super().__init__(f"duration overflow: {value} does not fit in int64")


class InvalidDurationError(DurationError):
    """Text is not an ISO 8601 duration.

    The original input is kept verbatim on `text` for diagnostics.
    """

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid duration {text!r}")
