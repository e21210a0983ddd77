"""pyduration - Parse, format and convert compact duration strings."""

from __future__ import annotations

from datetime import timedelta
from importlib.metadata import PackageNotFoundError, version

from pyduration._duration import Duration
from pyduration._errors import (
    DeserializationError,
    DurationError,
    InvalidMagnitudeError,
    MaxInputLengthExceededError,
    ScanError,
    TrailingMagnitudeError,
    UnexpectedInputError,
    UnsupportedSourceTypeError,
)
from pyduration._parser import parse_duration

try:
    __version__ = version("pyduration")
except PackageNotFoundError:  # source checkout without installed metadata
    __version__ = "0.0.0.dev0"

__all__ = [
    "parse",
    "format_span",
    "Duration",
    "DurationError",
    "DeserializationError",
    "InvalidMagnitudeError",
    "MaxInputLengthExceededError",
    "ScanError",
    "TrailingMagnitudeError",
    "UnexpectedInputError",
    "UnsupportedSourceTypeError",
]


def parse(
    text: str,
    *,
    strict: bool = False,
    max_length: int | None = None,
) -> Duration:
    """Parse duration text into a :class:`Duration`.

    Args:
        text: Duration text, e.g. ``"3Y6M4D12H30m5.5S"`` or ``"-5m"``.
        strict: If True, raise TrailingMagnitudeError when the text ends
            with digits that no designator closes (``"5Y3"``). By default
            such digits are dropped.
        max_length: Maximum text length. Defaults to 256.

    Returns:
        The parsed Duration. Empty text yields a zero Duration.

    Raises:
        UnexpectedInputError: If a character is not a digit, '.', or designator.
        InvalidMagnitudeError: If a designator follows an empty or malformed number.
        TrailingMagnitudeError: If strict and the text ends with a bare number.
        MaxInputLengthExceededError: If the text is longer than max_length.
    """
    return parse_duration(text, strict=strict, max_length=max_length)


def format_span(span: int | timedelta) -> str:
    """Format a time-span as canonical duration text.

    Args:
        span: Signed nanosecond count, or a timedelta.

    Returns:
        Canonical text such as ``"1h34m"``; ``"0s"`` for a zero span.
    """
    if isinstance(span, timedelta):
        return str(Duration.from_timedelta(span))
    return str(Duration.from_nanoseconds(span))
