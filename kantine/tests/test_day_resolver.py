import unittest
from datetime import datetime

from kantine.logic.days.resolver import find_day, resolve_day_name, today_name


class TestResolveDayName(unittest.TestCase):
    def test_english_names_map_to_norwegian(self):
        self.assertEqual(resolve_day_name("monday"), "mandag")
        self.assertEqual(resolve_day_name("Saturday"), "lørdag")
        self.assertEqual(resolve_day_name("  SUNDAY "), "søndag")

    def test_unknown_name_passes_through(self):
        self.assertEqual(resolve_day_name("mandag"), "mandag")
        self.assertEqual(resolve_day_name(" Fridag "), "fridag")
        self.assertEqual(resolve_day_name(""), "")

    def test_today_name_uses_weekday(self):
        # 2026-10-19 is a Monday, 2026-10-17 a Saturday
        self.assertEqual(today_name(datetime(2026, 10, 19, 11, 0)), "mandag")
        self.assertEqual(today_name(datetime(2026, 10, 17, 11, 0)), "lørdag")


class TestFindDay(unittest.TestCase):
    def test_substring_and_case_insensitive(self):
        menu = {"Tirsdag": ["Suppe"], "Mandag (10/2)": ["Fisk"]}
        self.assertEqual(find_day(menu, "mandag"), "Mandag (10/2)")
        self.assertEqual(find_day(menu, "TIRSDAG"), "Tirsdag")

    def test_no_match_returns_none(self):
        self.assertIsNone(find_day({"Mandag": ["Fisk"]}, "fredag"))
        self.assertIsNone(find_day({}, "mandag"))

    def test_first_match_in_iteration_order_wins(self):
        menu = {"Mandag": ["Fisk"], "Mandag neste uke": ["Pølse"]}
        self.assertEqual(find_day(menu, "mandag"), "Mandag")


if __name__ == '__main__':
    unittest.main()
