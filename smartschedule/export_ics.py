"""
iCalendar (.ics) export.

Writes extracted events into a calendar file that can be imported into
Google Calendar, Outlook or Apple Calendar. Events without a time range are
written as all-day events.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterable

from smartschedule.model import ExtractedEvent


def _ics_escape(text: str) -> str:
    """
    Escape text for ICS fields (very small subset, sufficient for our use).
    """
    return (
        text.replace("\\", "\\\\").replace("\r\n", "\\n").replace("\n", "\\n").replace(";", "\\;").replace(",", "\\,")
    )


def _dt_local(date_yyyy_mm_dd: str, time_hh_mm: str) -> str:
    """
    Convert date + time to ICS local datetime string 'YYYYMMDDTHHMM00'.
    """
    dt = datetime.strptime(f"{date_yyyy_mm_dd} {time_hh_mm}", "%Y-%m-%d %H:%M")
    return dt.strftime("%Y%m%dT%H%M00")


def _all_day(date_yyyy_mm_dd: str) -> tuple[str, str]:
    """
    Return (DTSTART, DTEND) values for a one-day all-day event.
    Raises ValueError for dates like '2024-02-31'.
    """
    day = datetime.strptime(date_yyyy_mm_dd, "%Y-%m-%d")
    return day.strftime("%Y%m%d"), (day + timedelta(days=1)).strftime("%Y%m%d")


def export_events_to_ics(
    events: Iterable[ExtractedEvent], out_path: str | Path, selected_only: bool = False
) -> int:
    """
    Export events to an .ics file. Returns number of exported events.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    lines: list[str] = []
    lines.append("BEGIN:VCALENDAR")
    lines.append("VERSION:2.0")
    lines.append("PRODID:-//SmartSchedule//EN")
    lines.append("CALSCALE:GREGORIAN")

    dtstamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    count = 0
    for ev in events:
        if selected_only and not ev.selected:
            continue

        try:
            if ev.start_time and ev.end_time:
                start_line = f"DTSTART:{_dt_local(ev.date, ev.start_time)}"
                end_line = f"DTEND:{_dt_local(ev.date, ev.end_time)}"
            else:
                start, end = _all_day(ev.date)
                start_line = f"DTSTART;VALUE=DATE:{start}"
                end_line = f"DTEND;VALUE=DATE:{end}"
        except ValueError:
            # raw tokens such as 'Feb 31' survive extraction but are not real days
            continue

        lines.append("BEGIN:VEVENT")
        lines.append(f"UID:{_ics_escape(ev.id or ev.date)}@smartschedule")
        lines.append(f"DTSTAMP:{dtstamp}")
        lines.append(start_line)
        lines.append(end_line)
        lines.append(f"SUMMARY:{_ics_escape(ev.title or 'SmartSchedule Event')}")
        if ev.description.strip():
            lines.append(f"DESCRIPTION:{_ics_escape(ev.description.strip())}")
        lines.append(f"CATEGORIES:{_ics_escape(ev.type)}")
        lines.append("END:VEVENT")
        count += 1

    lines.append("END:VCALENDAR")

    # ICS standard uses CRLF
    out.write_text("\r\n".join(lines) + "\r\n", encoding="utf-8")
    return count
