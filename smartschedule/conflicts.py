"""
Conflict detection.

Given extracted events, detect overlaps on the same date.
Overlap rule:
    start < other_end AND end > other_start

All-day events (no start or end time) never conflict.
"""

from __future__ import annotations

from typing import List, Tuple

from smartschedule.model import ExtractedEvent


def _time_to_minutes(hhmm: str) -> int:
    """
    Convert 'HH:MM' to minutes since midnight.
    Raises ValueError for invalid formats.
    """
    parts = hhmm.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time format: {hhmm!r}")
    h = int(parts[0])
    m = int(parts[1])
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise ValueError(f"Invalid time value: {hhmm!r}")
    return h * 60 + m


def find_conflicts(events: List[ExtractedEvent]) -> List[Tuple[ExtractedEvent, ExtractedEvent]]:
    """
    Find overlapping event pairs (A,B), each pair appears once, A before B
    in input order.
    """
    parsed: List[Tuple[str, int, int, ExtractedEvent]] = []
    for ev in events:
        if not (ev.date and ev.start_time and ev.end_time):
            continue
        try:
            start = _time_to_minutes(ev.start_time)
            end = _time_to_minutes(ev.end_time)
        except ValueError:
            continue
        # end <= start is not a usable interval
        if end <= start:
            continue
        parsed.append((ev.date, start, end, ev))

    conflicts: List[Tuple[ExtractedEvent, ExtractedEvent]] = []
    for i in range(len(parsed)):
        d1, s1, e1, ev1 = parsed[i]
        for j in range(i + 1, len(parsed)):
            d2, s2, e2, ev2 = parsed[j]
            if d1 == d2 and s1 < e2 and e1 > s2:
                conflicts.append((ev1, ev2))

    return conflicts
