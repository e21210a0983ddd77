"""Fixed unit ratios for duration conversion.

Months and years are average-length approximations: a year is always 365
days and a month is a twelfth of that (730 hours). Converting a duration that
holds months or years to nanoseconds, or back, is therefore lossy with respect
to any real calendar.
"""

from __future__ import annotations

import enum

HOURS_PER_DAY = 24
HOURS_PER_WEEK = HOURS_PER_DAY * 7
HOURS_PER_YEAR = HOURS_PER_DAY * 365
HOURS_PER_MONTH = HOURS_PER_YEAR // 12

NS_PER_SECOND = 1_000_000_000
NS_PER_MINUTE = NS_PER_SECOND * 60
NS_PER_HOUR = NS_PER_MINUTE * 60
NS_PER_DAY = NS_PER_HOUR * HOURS_PER_DAY
NS_PER_WEEK = NS_PER_HOUR * HOURS_PER_WEEK
NS_PER_MONTH = NS_PER_HOUR * HOURS_PER_MONTH
NS_PER_YEAR = NS_PER_HOUR * HOURS_PER_YEAR


class Designator(enum.StrEnum):
    """Canonical (formatter) designator for each field."""

    YEARS = "y"
    MONTHS = "M"
    WEEKS = "w"
    DAYS = "d"
    HOURS = "h"
    MINUTES = "m"
    SECONDS = "s"


FIELD_ORDER: tuple[tuple[str, Designator], ...] = (
    ("years", Designator.YEARS),
    ("months", Designator.MONTHS),
    ("weeks", Designator.WEEKS),
    ("days", Designator.DAYS),
    ("hours", Designator.HOURS),
    ("minutes", Designator.MINUTES),
    ("seconds", Designator.SECONDS),
)
"""Field name and designator pairs in formatting order."""

NS_PER_FIELD: dict[str, int] = {
    "years": NS_PER_YEAR,
    "months": NS_PER_MONTH,
    "weeks": NS_PER_WEEK,
    "days": NS_PER_DAY,
    "hours": NS_PER_HOUR,
    "minutes": NS_PER_MINUTE,
    "seconds": NS_PER_SECOND,
}

# M is months and m is minutes; every other designator ignores case.
PARSE_DESIGNATORS: dict[str, str] = {
    "Y": "years",
    "y": "years",
    "M": "months",
    "m": "minutes",
    "W": "weeks",
    "w": "weeks",
    "D": "days",
    "d": "days",
    "H": "hours",
    "h": "hours",
    "S": "seconds",
    "s": "seconds",
}

ZERO_TEXT = "0s"
