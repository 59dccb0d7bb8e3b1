"""
Human readable relative time ("5 minutes ago").

    Difference                 |  Result
    ---------------------------+-------------------------------
     0 to 45 seconds           |  a few seconds ago
    45 to 90 seconds           |  a minute ago
    90 seconds to 45 minutes   |  2 minutes ago ... 45 minutes ago
    45 to 90 minutes           |  an hour ago
    90 minutes to 22 hours     |  2 hours ago ... 22 hours ago
    22 to 36 hours             |  a day ago
    36 hours to 25 days        |  2 days ago ... 25 days ago
    25 to 45 days              |  a month ago
    45 to 345 days             |  2 months ago ... 11 months ago
    345 to 545 days (1.5 years)|  a year ago
    546 days+                  |  2 years ago ... 20 years ago

Upper bounds are inclusive. Counts round to the nearest unit with
halves rounding down (2.5 minutes reads "2 minutes ago").
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
MONTH = timedelta(days=30)
YEAR = timedelta(days=365)

# (inclusive upper bound, fixed phrase or None, unit for counted phrases)
_THRESHOLDS: List[Tuple[Optional[timedelta], Optional[str], Optional[Tuple[timedelta, str]]]] = [
    (45 * SECOND, "a few seconds ago", None),
    (90 * SECOND, "a minute ago", None),
    (45 * MINUTE, None, (MINUTE, "minutes")),
    (90 * MINUTE, "an hour ago", None),
    (22 * HOUR, None, (HOUR, "hours")),
    (36 * HOUR, "a day ago", None),
    (25 * DAY, None, (DAY, "days")),
    (45 * DAY, "a month ago", None),
    (345 * DAY, None, (MONTH, "months")),
    (545 * DAY, "a year ago", None),
    (None, None, (YEAR, "years")),
]


def _count(difference: timedelta, unit: timedelta) -> int:
    # Counted buckets always start above 1.5 units, so never report fewer than 2.
    return max(2, math.ceil(difference / unit - 0.5))


def timespan_to_human_string(start: datetime, end: datetime) -> str:
    """
    Describe how long before `end` the moment `start` was.

    Raises:
        ValueError: if end is earlier than start
    """
    difference = end - start
    if difference < timedelta(0):
        raise ValueError(f"End {end} is earlier than start {start}")

    for upper, phrase, counted in _THRESHOLDS:
        if upper is not None and difference > upper:
            continue
        if phrase is not None:
            return phrase
        unit, label = counted
        return f"{_count(difference, unit)} {label} ago"

    raise AssertionError("unreachable: last threshold is unbounded")
