"""
Unit tests for the syllabus table extractor.

Row format: 'Week N | date phrase | topic | annotations...'
"""

import unittest

from smartschedule.syllabus import parse_syllabus
from tests.fixtures import BUS254_SYLLABUS, MIDTERM_ROW


class TestParseSyllabus(unittest.TestCase):
    def test_midterm_row(self) -> None:
        events = parse_syllabus(MIDTERM_ROW, year=2023, course_name="BUS254")

        self.assertEqual(len(events), 1)
        ev = events[0]
        self.assertEqual(ev.date, "2023-10-25")
        self.assertEqual(ev.type, "exam")
        self.assertEqual(ev.title, "BUS254 - Mid-term Exam (Topics in weeks 1 to 5)")
        self.assertTrue(ev.selected)
        self.assertEqual(ev.confidence, 0.95)
        self.assertEqual(ev.source, "syllabus_table")
        self.assertEqual(ev.description, "Week 8: Mid-term Exam (Topics in weeks 1 to 5)")

    def test_full_syllabus(self) -> None:
        events = parse_syllabus(BUS254_SYLLABUS, year=2023, course_name="BUS254")

        # 13 weekly rows + December final exam placeholder
        self.assertEqual(len(events), 14)
        self.assertEqual(events[0].date, "2023-09-06")
        self.assertEqual(events[0].title, "BUS254 Lecture: Intro to course, Basic cost concepts")
        self.assertEqual(events[0].type, "lecture")
        self.assertFalse(events[0].selected)
        self.assertEqual(events[-1].date, "2023-12-15")

        exams = [e for e in events if e.type == "exam"]
        self.assertEqual([e.date for e in exams], ["2023-10-25", "2023-12-15"])

    def test_rows_use_the_course_session_time(self) -> None:
        events = parse_syllabus(BUS254_SYLLABUS, year=2023, course_name="BUS254")
        self.assertEqual((events[0].start_time, events[0].end_time), ("10:30", "12:20"))

    def test_time_in_row_wins(self) -> None:
        (ev,) = parse_syllabus("Week 2 | Sep 13 | Lab session 2:00pm-4:00pm", year=2023)
        self.assertEqual((ev.start_time, ev.end_time), ("14:00", "16:00"))

    def test_row_without_time_or_session_has_no_times(self) -> None:
        (ev,) = parse_syllabus(MIDTERM_ROW, year=2023)
        self.assertIsNone(ev.start_time)
        self.assertIsNone(ev.end_time)

    def test_final_exam_placeholder(self) -> None:
        (ev,) = parse_syllabus("Final Exam: To be announced (December)", year=2023, course_name="BUS254")

        self.assertEqual(ev.date, "2023-12-15")
        self.assertEqual(ev.type, "exam")
        self.assertEqual(ev.title, "BUS254 Final Exam")
        self.assertEqual(ev.confidence, 0.7)
        self.assertTrue(ev.selected)
        self.assertIn("to be announced", ev.description)

    def test_placeholder_only_for_december(self) -> None:
        self.assertEqual(parse_syllabus("Final Exam: To be announced (November)", year=2023), [])
        self.assertEqual(parse_syllabus("Final Exam: 58%", year=2023), [])

    def test_year_in_row_wins_without_rollover(self) -> None:
        (ev,) = parse_syllabus("Week 15 | Jan 10 | Spring 2024 kickoff", year=2023)
        self.assertEqual(ev.date, "2024-01-10")

        (ev,) = parse_syllabus("Week 15 | Jan 10 | Kickoff", year=2023)
        self.assertEqual(ev.date, "2023-01-10")

    def test_missing_topic(self) -> None:
        (ev,) = parse_syllabus("Week 3 | Sep 20", year=2023)
        self.assertEqual(ev.title, "Course Lecture: Week 3")

    def test_row_without_date_is_skipped(self) -> None:
        self.assertEqual(parse_syllabus("Week 4 | TBA | Review", year=2023), [])

    def test_sorted_by_date(self) -> None:
        text = "Week 2 | Oct 4 | B\nWeek 1 | Sep 6 | A"
        events = parse_syllabus(text, year=2023)
        self.assertEqual([e.date for e in events], ["2023-09-06", "2023-10-04"])

    def test_empty(self) -> None:
        self.assertEqual(parse_syllabus("", year=2023), [])


if __name__ == "__main__":
    unittest.main()
