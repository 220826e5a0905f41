"""
Display titles for extracted events.
"""

from __future__ import annotations

import re
from typing import Optional

DEFAULT_COURSE = "Course"

ASSIGNMENT_RE = re.compile(r"(?:assignment|homework|hw|project|essay|report)\s*#?\s*(\d+)?", re.IGNORECASE)
CHAPTER_TOPIC_RE = re.compile(r"(?:topic|chapter|chap|ch\.?)[:\s]+([^,\n]+)", re.IGNORECASE)
GENERIC_TOPIC_RE = re.compile(r"[:–-]\s*([A-Z][^|,\n]{5,50})")


def _lecture_topic(context: str) -> Optional[str]:
    # chapter/topic labels first, then any "Label: Capitalized text"
    for pattern in (CHAPTER_TOPIC_RE, GENERIC_TOPIC_RE):
        m = pattern.search(context)
        if m:
            topic = m.group(1).strip()
            if topic:
                return topic
    return None


def synthesize_title(category: str, context: str, course_name: str = DEFAULT_COURSE) -> str:
    """
    Build a human-readable title from the category, course name and context.
    """
    course = course_name or DEFAULT_COURSE
    context = context or ""
    lowered = context.lower()

    if category == "exam":
        if "midterm" in lowered or "mid-term" in lowered:
            return f"{course} Midterm Exam"
        if "final" in lowered:
            return f"{course} Final Exam"
        if "quiz" in lowered:
            return f"{course} Quiz"
        return f"{course} Exam"

    if category == "deadline":
        m = ASSIGNMENT_RE.search(context)
        if m:
            num = f" {m.group(1)}" if m.group(1) else ""
            return f"{course} Assignment{num} Due"
        return f"{course} Deadline"

    if category == "lecture":
        topic = _lecture_topic(context)
        if topic:
            return f"{course}: {topic}"
        return f"{course} Lecture"

    if category == "holiday":
        return "No Class - Holiday"

    return f"{course} Event"
