"""
CLI (Command Line Interface).

Quick terminal commands around the extraction pipeline, e.g.:

    smartschedule extract syllabus.pdf
    smartschedule extract outline.txt --year 2023 --course BUS254 --json
    smartschedule export syllabus.pdf calendar.ics
    smartschedule conflicts syllabus.pdf

A document is a file path (.pdf, .html, text), an http(s) URL, or "-" for stdin.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from smartschedule.conflicts import find_conflicts
from smartschedule.export_ics import export_events_to_ics
from smartschedule.model import ExtractedEvent, ProcessResult
from smartschedule.pipeline import process_pdf_for_calendar

console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _run(args: argparse.Namespace) -> ProcessResult | None:
    """
    Run the pipeline for args.document. Prints the error and returns None
    when the document cannot be processed.
    """
    result = process_pdf_for_calendar(args.document, year=args.year, course_name=args.course)
    if not result.success:
        console.print(f"[red]Error:[/red] {result.error}")
        return None
    return result


def _events_table(events: list[ExtractedEvent]) -> Table:
    table = Table(box=box.SIMPLE_HEAVY)
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Type")
    table.add_column("Title")
    table.add_column("Conf.", justify="right")
    table.add_column("Sel.")

    for ev in events:
        if ev.start_time and ev.end_time:
            when = f"{ev.start_time}-{ev.end_time}"
        else:
            when = ev.start_time or "all day"
        table.add_row(
            ev.date,
            when,
            ev.type,
            escape(ev.title),
            f"{ev.confidence:.2f}",
            "x" if ev.selected else "",
        )
    return table


def _cmd_extract(args: argparse.Namespace) -> int:
    """
    Print all events found in the document.
    """
    result = _run(args)
    if result is None:
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 0

    meta: dict[str, Any] = result.metadata
    console.print(f"{meta.get('courseName')} | {meta.get('semester') or '-'} | {meta.get('year')}")
    if not result.events:
        console.print("No events found.")
        return 0

    console.print(_events_table(result.events))
    console.print(f"{result.total_found} events found")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    """
    Export the pre-selected events (or all with --all) into an .ics file.
    """
    out_path = (args.out or "").strip()
    if not out_path:
        console.print("Please provide output .ics path.")
        return 1

    result = _run(args)
    if result is None:
        return 1

    if not result.events:
        console.print("No events to export.")
        return 0

    n = export_events_to_ics(result.events, out_path, selected_only=not args.all)
    console.print(f"Exported {n} events to: {out_path}")
    return 0


def _cmd_conflicts(args: argparse.Namespace) -> int:
    """
    Print timed events that overlap on the same day.
    """
    result = _run(args)
    if result is None:
        return 1

    confs = find_conflicts(result.events)
    if not confs:
        console.print("No conflicts found.")
        return 0

    console.print(f"Conflicts found: {len(confs)}")
    for a, b in confs:
        console.print(
            f"- {a.date} {a.start_time}-{a.end_time} {a.title}  <->  {b.start_time}-{b.end_time} {b.title}",
            markup=False,
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="smartschedule", description="Extract calendar events from documents")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_document_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("document", type=str, help="PDF/HTML/text file, URL, or - for stdin")
        p.add_argument("--year", type=int, default=None, help="Academic year start (default: from document)")
        p.add_argument("--course", type=str, default=None, help="Course name used in titles (e.g. BUS254)")

    p_extract = sub.add_parser("extract", help="List events found in a document")
    add_document_args(p_extract)
    p_extract.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    p_export = sub.add_parser("export", help="Export events to .ics")
    add_document_args(p_export)
    p_export.add_argument("out", type=str, help="Output file path (e.g. out.ics)")
    p_export.add_argument("--all", action="store_true", help="Export all events, not only pre-selected ones")

    p_conflicts = sub.add_parser("conflicts", help="Show overlapping events")
    add_document_args(p_conflicts)

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.command == "extract":
        raise SystemExit(_cmd_extract(args))
    if args.command == "export":
        raise SystemExit(_cmd_export(args))
    if args.command == "conflicts":
        raise SystemExit(_cmd_conflicts(args))

    raise SystemExit(2)
