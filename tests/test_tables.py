import unittest

from plainlatin.classify import find_overlaps
from plainlatin.tables import CATEGORY_TABLES, NON_GLYPH, PLAIN_ASCII
from plainlatin.types import Category

_REPERTOIRE = {chr(cp) for cp in range(0x20, 0x7F)} | {"\n", "·", "÷"}


class TableTests(unittest.TestCase):
    def test_tables_are_listed_in_precedence_order(self) -> None:
        categories = [category for category, _ in CATEGORY_TABLES]
        expected = [category for category in Category if category is not Category.UNKNOWN]
        self.assertEqual(categories, expected)

    def test_no_code_point_belongs_to_two_categories(self) -> None:
        self.assertEqual(find_overlaps(CATEGORY_TABLES), {})

    def test_no_duplicates_within_a_table(self) -> None:
        for category, table in CATEGORY_TABLES:
            with self.subTest(category=category.name):
                code_points = [cp for cps in table.values() for cp in cps]
                self.assertEqual(len(code_points), len(set(code_points)))

    def test_low_control_code_points_are_dropped(self) -> None:
        dropped = set(NON_GLYPH[""])
        for code_point in (1, 2, 3, 4):
            self.assertIn(code_point, dropped)

    def test_plain_ascii_is_not_curated(self) -> None:
        for _, table in CATEGORY_TABLES:
            for code_points in table.values():
                self.assertFalse(PLAIN_ASCII.intersection(code_points))

    def test_grave_accent_is_not_plain(self) -> None:
        self.assertNotIn(0x60, PLAIN_ASCII)
        self.assertIn(0x20, PLAIN_ASCII)
        self.assertIn(0x7E, PLAIN_ASCII)
        self.assertNotIn(0x7F, PLAIN_ASCII)

    def test_replacements_stay_within_repertoire(self) -> None:
        for category, table in CATEGORY_TABLES:
            for replacement in table:
                with self.subTest(category=category.name, replacement=replacement):
                    self.assertLessEqual(len(replacement), 4)
                    self.assertTrue(set(replacement) <= _REPERTOIRE)

    def test_diacritics_fold_to_a_single_letter(self) -> None:
        for category, table in CATEGORY_TABLES:
            if category is not Category.DIACRITIC:
                continue
            for replacement in table:
                self.assertEqual(len(replacement), 1)
                self.assertTrue(replacement.isalpha())

    def test_middle_dot_is_not_curated(self) -> None:
        for _, table in CATEGORY_TABLES:
            for code_points in table.values():
                self.assertNotIn(0x00B7, code_points)
