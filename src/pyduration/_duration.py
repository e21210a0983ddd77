"""The Duration value type and its time-span conversions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import timedelta

from pyduration._units import FIELD_ORDER, NS_PER_FIELD, ZERO_TEXT
from pyduration._utils import format_magnitude, round_half_away, span_seconds


@dataclass
class Duration:
    """Per-unit record of a duration.

    Fields hold unnormalized, non-negative magnitudes (90 minutes stays 90
    minutes); the sign applies to the whole value through ``negative``.
    """

    years: float = 0.0
    months: float = 0.0
    weeks: float = 0.0
    days: float = 0.0
    hours: float = 0.0
    minutes: float = 0.0
    seconds: float = 0.0
    negative: bool = False

    @classmethod
    def parse(
        cls,
        text: str,
        *,
        strict: bool = False,
        max_length: int | None = None,
    ) -> Duration:
        from pyduration._parser import parse_duration

        return parse_duration(text, strict=strict, max_length=max_length)

    @classmethod
    def from_nanoseconds(cls, ns: int) -> Duration:
        """Decompose a signed nanosecond count, largest unit first.

        Months and years use the fixed 730 and 8760 hour ratios, so the
        result is only an approximation of any calendar span.
        """
        duration = cls()
        if ns == 0:
            return duration

        if ns < 0:
            ns = -ns
            duration.negative = True

        # integer floor division, remainder carries to the next unit
        for name, _ in FIELD_ORDER[:-1]:
            count, rem = divmod(ns, NS_PER_FIELD[name])
            if count >= 1:
                setattr(duration, name, float(count))
                ns = rem
        duration.seconds = span_seconds(ns)

        return duration

    @classmethod
    def from_timedelta(cls, td: timedelta) -> Duration:
        return cls.from_nanoseconds(_timedelta_to_ns(td))

    def to_nanoseconds(self) -> int:
        """Weighted sum of every field, each rounded to whole nanoseconds.

        This is not the inverse of :meth:`from_nanoseconds` once months or
        years are involved.
        """
        total = 0
        for name, _ in FIELD_ORDER:
            value = getattr(self, name)
            # zero fields are skipped, e.g. "5m" only multiplies minutes
            if value != 0:
                total += round_half_away(value * NS_PER_FIELD[name])
        if self.negative:
            total = -total
        return total

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating below microseconds toward zero."""
        ns = self.to_nanoseconds()
        micros = abs(ns) // 1000
        return timedelta(microseconds=-micros if ns < 0 else micros)

    def is_zero(self) -> bool:
        return all(getattr(self, name) == 0 for name, _ in FIELD_ORDER)

    def format(self) -> str:
        parts = [
            format_magnitude(getattr(self, name)) + designator
            for name, designator in FIELD_ORDER
            if getattr(self, name) != 0
        ]
        text = "".join(parts) or ZERO_TEXT
        if self.negative:
            return "-" + text
        return text

    def __str__(self) -> str:
        return self.format()

    def __neg__(self) -> Duration:
        return replace(self, negative=not self.negative)


def _timedelta_to_ns(td: timedelta) -> int:
    return ((td.days * 86_400 + td.seconds) * 1_000_000 + td.microseconds) * 1000
