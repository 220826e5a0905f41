"""
Line scan extraction (document text -> events).

- Walks the document text line by line
- Dates are taken from the line itself, never from its neighbours
- Category, time and title come from a 3-line context window
  (previous line, the line, next line)
- Emits one event per (date, category); the first occurrence wins

This is the low-confidence fallback pass. Structured syllabus tables are
handled by smartschedule.syllabus.
"""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

from smartschedule.classify import IMPORTANT_TYPES, classify
from smartschedule.dates import find_dates
from smartschedule.model import SOURCE_LINE_SCAN, ExtractedEvent, IdFactory, sequential_ids, sort_by_date
from smartschedule.times import find_time_span
from smartschedule.titles import DEFAULT_COURSE, synthesize_title


LINE_SCAN_CONFIDENCE = 0.85
DEFAULT_START = "09:00"
DEFAULT_END = "10:00"
DESCRIPTION_LIMIT = 200


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _context_window(lines: List[str], i: int) -> str:
    """
    Join lines i-1..i+1 (clamped to the document) into one string.
    """
    window = lines[max(0, i - 1) : min(len(lines), i + 2)]
    return " ".join(part.strip() for part in window if part.strip())


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def extract_events_from_text(
    text: str,
    year: int,
    course_name: str = DEFAULT_COURSE,
    id_factory: Optional[IdFactory] = None,
) -> List[ExtractedEvent]:
    """
    Extract events from free-form document text, sorted by date.
    """
    if not text:
        return []

    next_id = id_factory or sequential_ids("event")
    lines = text.splitlines()

    events: List[ExtractedEvent] = []
    seen: Set[Tuple[str, str]] = set()

    for i, line in enumerate(lines):
        tokens = find_dates(line, year)
        if not tokens:
            continue

        context = _context_window(lines, i)
        category = classify(context)
        span = find_time_span(context)
        if span:
            start_time, end_time = span.start_time, span.end_time
        else:
            start_time, end_time = DEFAULT_START, DEFAULT_END

        for token in tokens:
            key = (token.date, category)
            if key in seen:
                continue
            seen.add(key)

            events.append(
                ExtractedEvent(
                    id=next_id(),
                    title=synthesize_title(category, context, course_name),
                    date=token.date,
                    type=category,
                    start_time=start_time,
                    end_time=end_time,
                    description=context[:DESCRIPTION_LIMIT],
                    source=SOURCE_LINE_SCAN,
                    confidence=LINE_SCAN_CONFIDENCE,
                    selected=category in IMPORTANT_TYPES,
                )
            )

    return sort_by_date(events)
