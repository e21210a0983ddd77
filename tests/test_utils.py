"""Utility function tests."""

import pytest

from pyduration._units import NS_PER_SECOND
from pyduration._utils import (
    format_magnitude,
    round_half_away,
    span_seconds,
)


class TestFormatMagnitude:
    def test_integer_value(self):
        assert format_magnitude(5.0) == "5"

    def test_fraction(self):
        assert format_magnitude(33.3333) == "33.3333"

    def test_tiny_value_is_positional(self):
        assert format_magnitude(1e-13) == "0.0000000000001"

    def test_huge_value_is_positional(self):
        assert format_magnitude(1e21) == "1000000000000000000000"

    def test_shortest_repr(self):
        assert format_magnitude(0.1) == "0.1"

    def test_trailing_zeros_stripped(self):
        assert format_magnitude(2.50) == "2.5"


class TestRoundHalfAway:
    @pytest.mark.parametrize("value,expected", [
        (0.0, 0),
        (0.4, 0),
        (0.5, 1),
        (1.49, 1),
        (2.5, 3),
        (-2.5, -3),
        (-0.4, 0),
        (33300000000.000004, 33300000000),
    ])
    def test_rounding(self, value, expected):
        assert round_half_away(value) == expected

    def test_returns_int(self):
        assert isinstance(round_half_away(1.7), int)


class TestSpanReaders:
    def test_seconds(self):
        assert span_seconds(1_500_000_000) == 1.5

    def test_just_below_one_second(self):
        assert span_seconds(NS_PER_SECOND - 1) == 0.999999999
