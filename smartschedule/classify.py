"""
Keyword-based event classification.

The keyword table is an ordered tuple: categories are checked top to bottom
and the first category with a matching keyword wins. Matching is plain
case-insensitive substring containment, so "examine" counts as "exam".
"""

from __future__ import annotations

from typing import Tuple

CATEGORY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("exam", ("exam", "midterm", "mid-term", "final", "test", "quiz")),
    ("deadline", ("due", "deadline", "submit", "submission", "assignment")),
    ("lecture", ("lecture", "class", "tutorial", "seminar", "lab")),
    ("holiday", ("holiday", "break", "no class", "cancelled", "reading week")),
)

IMPORTANT_TYPES = frozenset({"exam", "deadline"})


def classify(context: str, default: str = "event") -> str:
    """
    Map a context window to exactly one event category.
    """
    lowered = (context or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return default
