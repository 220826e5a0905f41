"""
Document -> calendar events.

Runs the two extraction passes over the same text and reconciles them:

- the syllabus table pass is primary (structured rows, high confidence)
- the line scan pass only fills in dates the table does not cover

process_pdf_for_calendar() is the entry point used by the CLI. It never
raises: failures come back as ProcessResult(success=False, error=...).
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Set

from smartschedule.model import ExtractedEvent, IdFactory, ProcessResult, TextResult, sequential_ids, sort_by_date
from smartschedule.parse import extract_events_from_text
from smartschedule.pdf_text import DocumentHandle, extract_text
from smartschedule.syllabus import parse_syllabus
from smartschedule.titles import DEFAULT_COURSE

logger = logging.getLogger(__name__)

TextSource = Callable[[DocumentHandle], TextResult]

COURSE_CODE_RE = re.compile(r"\b(?!(?:FALL|AUTUMN|SPRING|SUMMER|WINTER)\b)([A-Z]{2,5})\s?(\d{3,4}[A-Z]?)\b")
TERM_RE = re.compile(r"\b(Fall|Autumn|Spring|Summer|Winter)\b[\s,-]*((?:19|20)\d{2})?", re.IGNORECASE)
YEAR_RE = re.compile(r"\b((?:19|20)\d{2})\b")
HEADER_LINES = 10
JANUARY_TERMS = ("Spring", "Winter")


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------


def merge_events(primary: List[ExtractedEvent], secondary: List[ExtractedEvent]) -> List[ExtractedEvent]:
    """
    Keep every primary event; add a secondary event only on dates the
    primary list does not cover (whatever the event types are).
    """
    taken: Set[str] = {ev.date for ev in primary}
    merged = list(primary)
    for ev in secondary:
        if ev.date not in taken:
            merged.append(ev)
    return sort_by_date(merged)


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


def infer_metadata(text: str) -> Dict[str, Any]:
    """
    Guess course code, semester and year from the top of the document,
    e.g. 'BUS254 Managerial Accounting - Fall 2023'.
    Missing values are None.
    """
    header = "\n".join([ln for ln in (text or "").splitlines() if ln.strip()][:HEADER_LINES])

    course = COURSE_CODE_RE.search(header)
    term = TERM_RE.search(header)

    year: Optional[int] = None
    if term and term.group(2):
        year = int(term.group(2))
    else:
        m = YEAR_RE.search(header)
        if m:
            year = int(m.group(1))

    return {
        "courseName": f"{course.group(1)}{course.group(2)}" if course else None,
        "semester": term.group(1).capitalize() if term else None,
        "year": year,
    }


def academic_start_year(semester: Optional[str], year: int) -> int:
    """
    Year the academic year starts in. 'Spring 2024' and 'Winter 2024' run
    from January, so they belong to the academic year starting in 2023.
    """
    if semester in JANUARY_TERMS:
        return year - 1
    return year


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def extract_calendar_events(
    text: str,
    year: int,
    course_name: str = DEFAULT_COURSE,
    semester: Optional[str] = None,
    id_factory: Optional[IdFactory] = None,
    scan_year: Optional[int] = None,
) -> List[ExtractedEvent]:
    """
    Run both passes over `text` and merge them. IDs are unique across both.

    `year` places table rows without a year. `scan_year` is the academic
    start year for the line scan (defaults to `year`).
    """
    next_id = id_factory or sequential_ids("event")
    table = parse_syllabus(text, year=year, course_name=course_name, semester=semester, id_factory=next_id)
    scanned = extract_events_from_text(
        text, year=scan_year or year, course_name=course_name, id_factory=next_id
    )
    logger.debug("Syllabus table: %d events, line scan: %d events", len(table), len(scanned))
    return merge_events(table, scanned)


def process_pdf_for_calendar(
    document: DocumentHandle,
    year: Optional[int] = None,
    course_name: Optional[str] = None,
    text_source: TextSource = extract_text,
    id_factory: Optional[IdFactory] = None,
) -> ProcessResult:
    """
    Full pipeline: obtain text, infer metadata, extract, merge.

    Explicit `year` / `course_name` win over what is found in the document.
    """
    try:
        result = text_source(document)
        if not result.success:
            return ProcessResult(success=False, error=result.error or "Failed to extract text from document")

        text = result.text or ""
        found = infer_metadata(text)
        metadata = {
            "courseName": course_name or found["courseName"] or DEFAULT_COURSE,
            "semester": found["semester"],
            "year": year or found["year"] or date.today().year,
        }

        events = extract_calendar_events(
            text,
            year=metadata["year"],
            course_name=metadata["courseName"],
            semester=metadata["semester"],
            id_factory=id_factory,
            scan_year=year or academic_start_year(metadata["semester"], metadata["year"]),
        )
        logger.info("Found %d events in %s", len(events), document)
        return ProcessResult(success=True, events=events, metadata=metadata)
    except Exception as exc:
        logger.exception("Processing %s failed", document)
        return ProcessResult(success=False, error=str(exc) or "An error occurred while processing the document")
