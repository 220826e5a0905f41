"""
Date token recognition.

Finds calendar dates inside a piece of text and normalizes each one to an
ISO "YYYY-MM-DD" string. Supported surface forms, highest priority first:

1. Month Day[, Year]   "Sep 6", "September 6th, 2023", "Oct. 25"
2. Day Month[, Year]   "6 Sep 2023", "25th October"
3. ISO                 "2023-10-25"
4. US                  "10/25/2023", "9/6/23"

When two forms match overlapping text, the higher priority form wins.

Dates without an explicit year follow the academic-year rule: the reference
year is the year the academic year starts in, so January to April belong to
the following calendar year.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple


# ---------------------------------------------------------------------------
# Month names
# ---------------------------------------------------------------------------

MONTHS = {
    "jan": 1, "january": 1,
    "feb": 2, "february": 2,
    "mar": 3, "march": 3,
    "apr": 4, "april": 4,
    "may": 5,
    "jun": 6, "june": 6,
    "jul": 7, "july": 7,
    "aug": 8, "august": 8,
    "sep": 9, "sept": 9, "september": 9,
    "oct": 10, "october": 10,
    "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}

_MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?"
    r"|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
_ORDINAL = r"(?:st|nd|rd|th)?"
_YEAR = r"(?:,?\s+(\d{4})\b)?"

# In "12 Dec 9:00am" the 9 is an hour, not a day: the Day Month reading applies
MONTH_DAY_RE = re.compile(
    rf"\b({_MONTH})\b\.?\s+(\d{{1,2}}){_ORDINAL}\b(?!:\d|\s*(?:am|pm)\b){_YEAR}",
    re.IGNORECASE,
)
DAY_MONTH_RE = re.compile(
    rf"\b(\d{{1,2}}){_ORDINAL}\s+({_MONTH})\b\.?{_YEAR}",
    re.IGNORECASE,
)
ISO_RE = re.compile(r"\b(\d{4})-(\d{2})-(\d{2})\b")
US_RE = re.compile(r"\b(\d{1,2})/(\d{1,2})/(\d{2,4})\b")


@dataclass(frozen=True)
class DateToken:
    """
    One recognized date. `span` is the (start, end) offset in the scanned text.
    """

    date: str
    span: Tuple[int, int]
    explicit_year: bool


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def resolve_month(name: str) -> int:
    """
    Convert a month name or abbreviation to 1..12.
    Raises ValueError for unknown names.
    """
    key = name.strip().lower().replace(".", "")
    if key in MONTHS:
        return MONTHS[key]
    month = MONTHS.get(key[:3])
    if month is None:
        raise ValueError(f"Unknown month: {name!r}")
    return month


def academic_year(month: int, year: int) -> int:
    # Jan..Apr is the spring term of the academic year starting in `year`
    return year + 1 if 1 <= month <= 4 else year


def _iso(year: int, month: int, day: int) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    if not 1 <= day <= 31:
        raise ValueError(f"Invalid day: {day}")
    return f"{year:04d}-{month:02d}-{day:02d}"


def _named_date(
    month_name: str, day_s: str, year_s: Optional[str], year: int, rollover: bool
) -> Tuple[str, bool]:
    month = resolve_month(month_name)
    day = int(day_s)
    if year_s:
        return _iso(int(year_s), month, day), True
    resolved = academic_year(month, year) if rollover else year
    return _iso(resolved, month, day), False


def _us_year(year_s: str) -> int:
    if len(year_s) == 2:
        return 2000 + int(year_s)
    if len(year_s) == 4:
        return int(year_s)
    raise ValueError(f"Invalid year: {year_s!r}")


def _overlaps(span: Tuple[int, int], taken: List[Tuple[int, int]]) -> bool:
    return any(span[0] < end and span[1] > start for start, end in taken)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def find_dates(text: str, year: int, rollover: bool = True, named_only: bool = False) -> List[DateToken]:
    """
    Find all date tokens in `text`, ordered by position.

    `year` is used for dates without an explicit year: with `rollover` the
    academic-year rule applies, otherwise `year` is used as is.
    `named_only` restricts recognition to the two month-name forms.

    Malformed candidates (day outside 1..31, month outside 1..12, unknown
    month name) are skipped.
    """
    if not text:
        return []

    tokens: List[DateToken] = []
    taken: List[Tuple[int, int]] = []

    def accept(span: Tuple[int, int], build) -> None:
        if _overlaps(span, taken):
            return
        try:
            date_iso, explicit = build()
        except ValueError:
            return
        taken.append(span)
        tokens.append(DateToken(date=date_iso, span=span, explicit_year=explicit))

    for m in MONTH_DAY_RE.finditer(text):
        accept(m.span(), lambda m=m: _named_date(m.group(1), m.group(2), m.group(3), year, rollover))

    for m in DAY_MONTH_RE.finditer(text):
        accept(m.span(), lambda m=m: _named_date(m.group(2), m.group(1), m.group(3), year, rollover))

    if not named_only:
        for m in ISO_RE.finditer(text):
            accept(m.span(), lambda m=m: (_iso(int(m.group(1)), int(m.group(2)), int(m.group(3))), True))

        for m in US_RE.finditer(text):
            accept(m.span(), lambda m=m: (_iso(_us_year(m.group(3)), int(m.group(1)), int(m.group(2))), True))

    tokens.sort(key=lambda t: t.span[0])
    return tokens
