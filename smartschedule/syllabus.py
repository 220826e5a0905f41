"""
Syllabus table extraction.

Course outlines usually carry a schedule table, one row per week:

    Week 8 | 25 Oct 2023 | Mid-term Exam (Topics in weeks 1 to 5) | No tutorials

Rows like this produce high-confidence events directly. Only the first
three cells matter: week number, date phrase, topic. Further cells
("| Chap 3") are annotations and are dropped.

A "Final Exam: To be announced (December)" note produces a single
placeholder exam on December 15th. No other month triggers a placeholder.
"""

from __future__ import annotations

import re
from typing import List, Optional

from smartschedule.dates import find_dates
from smartschedule.model import SOURCE_SYLLABUS, ExtractedEvent, IdFactory, sequential_ids, sort_by_date
from smartschedule.times import TimeSpan, find_time_span
from smartschedule.titles import DEFAULT_COURSE


TABLE_CONFIDENCE = 0.95
PLACEHOLDER_CONFIDENCE = 0.7
PLACEHOLDER_FINAL_DAY = "12-15"

WEEK_ROW_RE = re.compile(r"^\s*(?:Wk|Week)\s*(\d+)\s*\|([^|]*)(?:\|([^|]*))?", re.IGNORECASE)
ROW_YEAR_RE = re.compile(r"\b((?:19|20)\d{2})\b")
EXAM_TOPIC_RE = re.compile(r"exam|mid-?term", re.IGNORECASE)
FINAL_EXAM_RE = re.compile(r"final\s+exam\b([^\n]*)", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _session_time(text: str) -> Optional[TimeSpan]:
    """
    Regular session time of the course, taken from the first 'Lecture' line
    that carries a time, e.g. 'Lecture: Thursday 10:30am - 12:20pm'.
    """
    for line in text.splitlines():
        if "lecture" not in line.lower():
            continue
        span = find_time_span(line)
        if span:
            return span
    return None


def _row_date(row: str, date_phrase: str, year: int) -> Optional[str]:
    """
    Resolve the row's date. A year written anywhere in the row wins over
    the default year; the academic-year rule is not applied here.
    """
    tokens = find_dates(date_phrase, year, rollover=False, named_only=True)
    if not tokens:
        return None
    token = tokens[0]
    if token.explicit_year:
        return token.date

    m = ROW_YEAR_RE.search(row)
    if m:
        return f"{m.group(1)}{token.date[4:]}"
    return token.date


def _final_exam_placeholder(
    text: str, course_name: str, year: int, next_id: IdFactory
) -> Optional[ExtractedEvent]:
    m = FINAL_EXAM_RE.search(text)
    if not m or "december" not in m.group(1).lower():
        return None

    return ExtractedEvent(
        id=next_id(),
        title=f"{course_name} Final Exam",
        date=f"{year}-{PLACEHOLDER_FINAL_DAY}",
        type="exam",
        description="Final exam in December, exact date to be announced",
        source=SOURCE_SYLLABUS,
        confidence=PLACEHOLDER_CONFIDENCE,
        selected=True,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_syllabus(
    text: str,
    year: int,
    course_name: str = DEFAULT_COURSE,
    semester: Optional[str] = None,
    id_factory: Optional[IdFactory] = None,
) -> List[ExtractedEvent]:
    """
    Extract events from the weekly schedule table of a course syllabus.

    `semester` is accepted for callers passing document metadata through;
    the table dates themselves decide the calendar placement.
    """
    if not text:
        return []

    course = course_name or DEFAULT_COURSE
    next_id = id_factory or sequential_ids("syllabus")
    session = _session_time(text)

    events: List[ExtractedEvent] = []

    for line in text.splitlines():
        m = WEEK_ROW_RE.match(line)
        if not m:
            continue

        week = m.group(1)
        date_iso = _row_date(line, m.group(2), year)
        if date_iso is None:
            continue

        topic = (m.group(3) or "").strip() or f"Week {week}"
        is_exam = bool(EXAM_TOPIC_RE.search(topic))
        title = f"{course} - {topic}" if is_exam else f"{course} Lecture: {topic}"
        span = find_time_span(line) or session

        events.append(
            ExtractedEvent(
                id=next_id(),
                title=title,
                date=date_iso,
                type="exam" if is_exam else "lecture",
                start_time=span.start_time if span else None,
                end_time=span.end_time if span else None,
                description=f"Week {week}: {topic}",
                source=SOURCE_SYLLABUS,
                confidence=TABLE_CONFIDENCE,
                selected=is_exam,
            )
        )

    placeholder = _final_exam_placeholder(text, course, year, next_id)
    if placeholder:
        events.append(placeholder)

    return sort_by_date(events)
