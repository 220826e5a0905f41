import unittest

from smartschedule.times import TimeSpan, find_time_span


class TestFindTimeSpan(unittest.TestCase):
    def test_pm_time(self) -> None:
        self.assertEqual(find_time_span("Math hw due! Jan 8th @ 2:30pm"), TimeSpan("14:30", None))

    def test_range_with_meridiem(self) -> None:
        self.assertEqual(find_time_span("Lecture: Thursday 10:30am - 12:20pm"), TimeSpan("10:30", "12:20"))

    def test_range_without_start_meridiem_is_not_corrected(self) -> None:
        self.assertEqual(find_time_span("Wednesday 4:30-6:20 pm"), TimeSpan("04:30", "18:20"))

    def test_twelve_o_clock(self) -> None:
        self.assertEqual(find_time_span("12am"), TimeSpan("00:00"))
        self.assertEqual(find_time_span("12pm"), TimeSpan("12:00"))
        self.assertEqual(find_time_span("9am"), TimeSpan("09:00"))

    def test_24_hour_time(self) -> None:
        self.assertEqual(find_time_span("Exam 14:00-16:00"), TimeSpan("14:00", "16:00"))

    def test_only_first_match_is_used(self) -> None:
        self.assertEqual(find_time_span("First 9am then 3pm"), TimeSpan("09:00"))

    def test_bare_numbers_are_not_times(self) -> None:
        self.assertIsNone(find_time_span("Week 8 | 25 Oct 2023 | Sep 6-7"))
        self.assertIsNone(find_time_span("2023-10-25"))

    def test_out_of_range_is_skipped(self) -> None:
        self.assertEqual(find_time_span("at 25:00 or 3pm"), TimeSpan("15:00"))

    def test_invalid_range_start_falls_back_to_end(self) -> None:
        self.assertEqual(find_time_span("Quiz Oct 25 - 3pm"), TimeSpan("15:00"))

    def test_empty(self) -> None:
        self.assertIsNone(find_time_span(""))


if __name__ == "__main__":
    unittest.main()
