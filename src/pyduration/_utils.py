"""Numeric rendering and rounding helpers."""

from __future__ import annotations

import math
from decimal import Decimal

from pyduration._units import NS_PER_SECOND


def format_magnitude(value: float) -> str:
    """Render a float as its shortest exact decimal, without an exponent.

    ``repr`` already yields the shortest string that round-trips; going through
    ``Decimal`` only expands any exponent into positional digits.
    """
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    magnitude = abs(value)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return -rounded if value < 0 else rounded


def span_seconds(ns: int) -> float:
    """Whole seconds plus the fractional remainder of a non-negative span."""
    seconds, rem = divmod(ns, NS_PER_SECOND)
    return seconds + rem / NS_PER_SECOND
