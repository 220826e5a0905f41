"""
Time-of-day recognition.

Finds the first time or time range in a text span, e.g. "2:30pm",
"10:30am - 12:20pm", "4:30-6:20 pm", "9am", and normalizes it to 24-hour
"HH:MM" strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# Bare numbers ("Week 8", "Sep 6-7", "2023-10-25") must not be read as times,
# so a candidate needs minutes or an am/pm marker somewhere in the range.
TIME_RE = re.compile(
    r"(?<![\d:/])(\d{1,2})(?::(\d{2}))?(?!\d)(?:\s*(am|pm)\b)?"
    r"(?:\s*[-–]\s*(\d{1,2})(?::(\d{2}))?(?!\d)(?:\s*(am|pm)\b)?)?",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class TimeSpan:
    start_time: str
    end_time: Optional[str] = None


def _to_24h(hour_s: str, minute_s: Optional[str], period: Optional[str]) -> str:
    """
    Convert hour/minute/meridiem parts to 'HH:MM'.
    Raises ValueError for out-of-range values.
    """
    hour = int(hour_s)
    minute = int(minute_s) if minute_s else 0
    period = (period or "").lower()

    if period == "pm" and hour != 12:
        hour += 12
    elif period == "am" and hour == 12:
        hour = 0

    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"Invalid time value: {hour_s}:{minute_s}")
    return f"{hour:02d}:{minute:02d}"


def find_time_span(text: str) -> Optional[TimeSpan]:
    """
    Return the first time (range) in `text`, or None.

    Without an am/pm marker the hour is taken as written.
    """
    if not text:
        return None

    pos = 0
    while True:
        m = TIME_RE.search(text, pos)
        if m is None:
            return None
        pos = m.end()

        h1, m1, p1, h2, m2, p2 = m.groups()
        if not (m1 or p1 or m2 or p2):
            continue
        try:
            start = _to_24h(h1, m1, p1)
        except ValueError:
            # "Oct 25 - 3pm": the end of the range may still be a time
            if h2:
                pos = m.start(4)
            continue
        try:
            end = _to_24h(h2, m2, p2) if h2 else None
        except ValueError:
            continue
        return TimeSpan(start_time=start, end_time=end)
