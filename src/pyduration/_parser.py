"""Scanner for designator-suffixed duration text."""

from __future__ import annotations

import math

from pyduration._constants import DEFAULT_MAX_INPUT_LENGTH, NUMERIC_CHARS
from pyduration._duration import Duration
from pyduration._errors import (
    ERR_MSG_INPUT_TOO_LONG,
    ERR_MSG_INVALID_MAGNITUDE,
    ERR_MSG_TRAILING_MAGNITUDE,
    ERR_MSG_UNEXPECTED_INPUT,
    InvalidMagnitudeError,
    MaxInputLengthExceededError,
    TrailingMagnitudeError,
    UnexpectedInputError,
)
from pyduration._units import PARSE_DESIGNATORS


def parse_duration(
    text: str,
    *,
    strict: bool = False,
    max_length: int | None = None,
) -> Duration:
    """Parse duration text such as ``"3Y6M4D12H30m5.5S"`` into a Duration.

    Magnitudes are buffered until a designator commits them to a field.
    Designators may repeat (the last one wins) and may appear in any order.
    Digits left over at the end of the text are dropped unless ``strict``.
    """
    if max_length is None:
        max_length = DEFAULT_MAX_INPUT_LENGTH
    if len(text) > max_length:
        raise MaxInputLengthExceededError(
            ERR_MSG_INPUT_TOO_LONG,
            f"duration text has {len(text)} characters, limit is {max_length}",
        )

    duration = Duration()
    offset = 0
    if text.startswith("-"):
        text = text[1:]
        if not text:
            return duration
        duration.negative = True
        offset = 1

    num = ""
    for pos, char in enumerate(text, start=offset):
        field = PARSE_DESIGNATORS.get(char)
        if field is None:
            if char in NUMERIC_CHARS:
                num += char
                continue
            raise UnexpectedInputError(
                ERR_MSG_UNEXPECTED_INPUT,
                f"unexpected character {char!r} at position {pos}",
            )

        try:
            value = float(num)
        except ValueError as e:
            raise InvalidMagnitudeError(
                ERR_MSG_INVALID_MAGNITUDE,
                f"cannot convert {num!r} before designator {char!r} to a number",
                wrapped=e,
            ) from e
        if not math.isfinite(value):
            raise InvalidMagnitudeError(
                ERR_MSG_INVALID_MAGNITUDE,
                f"magnitude {num!r} before designator {char!r} is out of range",
            )
        setattr(duration, field, value)
        num = ""

    if num and strict:
        raise TrailingMagnitudeError(
            ERR_MSG_TRAILING_MAGNITUDE,
            f"magnitude {num!r} at end of text has no designator",
        )

    return duration
