"""
Central data model definitions used across the project.

This module defines the canonical structure of extracted events so that:
- both extractors produce exactly the same field names
- the CLI, the ICS exporter and conflict detection read one shape
- JSON output keeps the camelCase keys the app front-end expects
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

EVENT_TYPES = ("exam", "deadline", "lecture", "holiday", "event")

SOURCE_SYLLABUS = "syllabus_table"
SOURCE_LINE_SCAN = "line_scan"

IdFactory = Callable[[], str]


def sequential_ids(prefix: str = "event") -> IdFactory:
    """
    Return an ID factory producing "prefix-1", "prefix-2", ...

    One factory is created per extraction run, so IDs are unique within the
    run and identical between two runs on the same input.
    """
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


@dataclass
class ExtractedEvent:
    """
    One calendar event found in a document.

    `date` is always a resolved ISO date. Times are 24-hour "HH:MM" or None.
    """

    id: str
    title: str
    date: str
    type: str
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    description: str = ""
    source: str = SOURCE_LINE_SCAN
    confidence: float = 0.85
    selected: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "type": self.type,
            "description": self.description,
            "source": self.source,
            "confidence": self.confidence,
            "selected": self.selected,
        }


@dataclass
class TextResult:
    """
    Outcome of turning a document into raw text.
    """

    success: bool
    text: Optional[str] = None
    error: Optional[str] = None


@dataclass
class ProcessResult:
    """
    Outcome of the full document -> events pipeline.

    success=True with an empty event list means "nothing found", not failure.
    """

    success: bool
    events: List[ExtractedEvent] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def total_found(self) -> int:
        return len(self.events)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"success": self.success}
        if self.success:
            out["events"] = [ev.to_dict() for ev in self.events]
            out["metadata"] = dict(self.metadata)
            out["totalFound"] = self.total_found
        else:
            out["error"] = self.error
        return out


def sort_by_date(events: List[ExtractedEvent]) -> List[ExtractedEvent]:
    # sorted() is stable: ties keep discovery order
    return sorted(events, key=lambda ev: ev.date)
