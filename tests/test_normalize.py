import unittest

from plainlatin.classify import translate
from plainlatin.normalize import (
    SCRATCH_SIZE,
    ContractError,
    invariant_contains,
    invariant_equals,
    is_invariant,
    iter_code_points,
    normalize,
    normalize_into,
    scan,
)
from plainlatin.types import Axis


class NormalizeTests(unittest.TestCase):
    def test_folds_diacritic(self) -> None:
        self.assertEqual(normalize(Axis.NONE, "açe"), "ace")

    def test_expands_ligatures(self) -> None:
        self.assertEqual(normalize(Axis.NONE, "straße"), "strasse")
        self.assertEqual(normalize(Axis.NONE, "ﬀ"), "ff")
        self.assertEqual(normalize(Axis.NONE, "ﬃ"), "ffi")
        self.assertEqual(normalize(Axis.NONE, "Ærøskøbing"), "AEroskobing")

    def test_uppercase_axis(self) -> None:
        self.assertEqual(normalize(Axis.UPPERCASE, "café"), "CAFE")
        self.assertEqual(normalize(Axis.UPPERCASE, "hello"), "HELLO")

    def test_lowercase_axis(self) -> None:
        self.assertEqual(normalize(Axis.LOWERCASE, "Crème BRÛLÉE"), "creme brulee")

    def test_unchanged_text_is_returned_as_is(self) -> None:
        for text in ("plain lowercase ascii", "\u00bd", "", "\u00b7"):
            with self.subTest(text=text):
                self.assertIs(normalize(Axis.NONE, text), text)
        lowered = "already lower"
        self.assertIs(normalize(Axis.LOWERCASE, lowered), lowered)

    def test_unknown_is_copied_when_neighbours_change(self) -> None:
        self.assertEqual(normalize(Axis.NONE, "é½"), "e½")

    def test_drops_non_glyphs(self) -> None:
        self.assertEqual(normalize(Axis.NONE, "a\x01\x02\x03\x04b"), "ab")
        self.assertEqual(normalize(Axis.NONE, "\ufeffhello"), "hello")
        for code_point in list(range(0x00, 0x09)) + list(range(0x0E, 0x20)):
            self.assertEqual(normalize(Axis.NONE, chr(code_point)), "")
        for code_point in range(0x7F, 0xA0):
            if code_point == 0x85:
                continue
            self.assertEqual(normalize(Axis.NONE, chr(code_point)), "")

    def test_spacing(self) -> None:
        self.assertEqual(normalize(Axis.NONE, "a\r\nb"), "a\nb")
        self.assertEqual(normalize(Axis.NONE, "a\u2028b\u0085c"), "a\nb\nc")
        self.assertEqual(normalize(Axis.NONE, "a\u00a0b\tc\u3000d"), "a b c d")
        self.assertEqual(normalize(Axis.NONE, "zero\u200bwidth"), "zerowidth")

    def test_line_feed_counts_as_modified(self) -> None:
        buffer = []
        self.assertTrue(normalize_into(buffer, [""] * SCRATCH_SIZE, Axis.NONE, "a\nb"))
        self.assertEqual("".join(buffer), "a\nb")

    def test_punctuation(self) -> None:
        self.assertEqual(normalize(Axis.NONE, "¿Qué?"), "Que?")
        self.assertEqual(normalize(Axis.NONE, "¡Hola!"), "Hola!")
        self.assertEqual(normalize(Axis.NONE, "what‽"), "what?!")
        self.assertEqual(normalize(Axis.NONE, "“quoted”"), '"quoted"')
        self.assertEqual(normalize(Axis.NONE, "wait…"), "wait...")
        self.assertEqual(normalize(Axis.NONE, "it’s `x`"), "it's 'x'")
        self.assertEqual(normalize(Axis.NONE, "• item"), "· item")
        self.assertEqual(normalize(Axis.NONE, "a — b"), "a - b")

    def test_numeric_itemized_and_alignment(self) -> None:
        self.assertEqual(normalize(Axis.NONE, "①② ⑳"), "12 20")
        self.assertEqual(normalize(Axis.NONE, "x²"), "x2")
        self.assertEqual(normalize(Axis.NONE, "Ⓐⓐ"), "Aa")
        self.assertEqual(normalize(Axis.NONE, "\uff21\uff42\uff43"), "Abc")

    def test_round_trip_is_a_fixed_point(self) -> None:
        samples = [
            "Ærøskøbing",
            "ﬃ ‽ “x”",
            "straße",
            "①•…",
            "ŉ Ŋ Þ ǅemal",
            "plain",
            "\u00bd and \u00b7",
        ]
        for axis in Axis:
            for sample in samples:
                with self.subTest(axis=axis.name, sample=sample):
                    once = normalize(axis, sample)
                    self.assertEqual(normalize(axis, once), once)

    def test_every_code_point_folds_to_a_fixed_point(self) -> None:
        for axis in Axis:
            unstable = []
            for code_point in range(0x110000):
                if 0xD800 <= code_point <= 0xDFFF:
                    continue
                if not translate(axis, code_point).modified:
                    continue
                once = normalize(axis, chr(code_point))
                if normalize(axis, once) != once:
                    unstable.append(hex(code_point))
            with self.subTest(axis=axis.name):
                self.assertEqual(unstable, [])

    def test_case_fold_onto_curated_letter_is_stable(self) -> None:
        self.assertEqual(normalize(Axis.UPPERCASE, "\u0253"), "B")
        self.assertEqual(normalize(Axis.LOWERCASE, "\ua7c4"), "c")
        self.assertEqual(normalize(Axis.LOWERCASE, "\u212b"), "a")

    def test_sub_range_only_reads_range(self) -> None:
        text = "é abc ü"
        self.assertIs(normalize(Axis.NONE, text, 2, 5), text)
        self.assertEqual(normalize(Axis.NONE, text, 0, 3), "e a")
        self.assertEqual(normalize(Axis.UPPERCASE, text, 2, 5), "ABC")
        self.assertIs(normalize(Axis.NONE, text, 3, 3), text)

    def test_character_sequence_input(self) -> None:
        self.assertEqual(normalize(Axis.NONE, list("café")), "cafe")
        self.assertIsNone(normalize(Axis.NONE, list("cafe")))
        self.assertEqual(normalize(Axis.NONE, tuple("ßx"), 0, 1), "ss")

    def test_surrogate_pairs_are_joined(self) -> None:
        self.assertEqual(normalize(Axis.NONE, "\U0001f130"), "A")
        self.assertEqual(normalize(Axis.NONE, "\ud83c\udd30"), "A")
        self.assertEqual(list(iter_code_points("\ud83c\udd30")), [0x1F130])

    def test_surrogate_pair_is_not_split_across_range_end(self) -> None:
        text = "\ud83c\udd30"
        self.assertEqual(list(iter_code_points(text, 0, 1)), [0xD83C])
        self.assertIs(normalize(Axis.NONE, text, 0, 1), text)


class NormalizeIntoTests(unittest.TestCase):
    def test_appends_to_caller_buffer(self) -> None:
        buffer = ["x"]
        scratch = [""] * SCRATCH_SIZE
        self.assertTrue(normalize_into(buffer, scratch, Axis.NONE, "ß"))
        self.assertEqual(buffer, ["x", "s", "s"])
        self.assertTrue(normalize_into(buffer, scratch, Axis.UPPERCASE, "ﬃ"))
        self.assertEqual("".join(buffer), "xssFFI")

    def test_reports_unchanged(self) -> None:
        buffer = []
        self.assertFalse(normalize_into(buffer, [""] * SCRATCH_SIZE, Axis.NONE, "abc ½"))

    def test_rejects_small_scratch(self) -> None:
        with self.assertRaises(ContractError):
            normalize_into([], [""] * 3, Axis.NONE, "abc")

    def test_rejects_missing_buffers(self) -> None:
        with self.assertRaises(ContractError):
            normalize_into(None, [""] * SCRATCH_SIZE, Axis.NONE, "abc")
        with self.assertRaises(ContractError):
            normalize_into([], None, Axis.NONE, "abc")

    def test_rejects_invalid_range(self) -> None:
        scratch = [""] * SCRATCH_SIZE
        with self.assertRaises(ContractError):
            normalize_into([], scratch, Axis.NONE, "abc", 2, 1)
        with self.assertRaises(ContractError):
            normalize_into([], scratch, Axis.NONE, "abc", 0, 4)
        with self.assertRaises(ContractError):
            normalize(Axis.NONE, "abc", -1, 2)


class ScanTests(unittest.TestCase):
    def test_tallies_categories(self) -> None:
        result = scan(Axis.NONE, "a\u00e7e\u00a0")
        self.assertEqual(result.text, "ace ")
        self.assertTrue(result.modified)
        self.assertEqual(result.categories, {"unknown": 2, "diacritic": 1, "spacing": 1})

    def test_unchanged_scan(self) -> None:
        result = scan(Axis.NONE, "abc")
        self.assertEqual(result.text, "abc")
        self.assertFalse(result.modified)
        self.assertEqual(result.categories, {"unknown": 3})


class ComparisonTests(unittest.TestCase):
    def test_is_invariant(self) -> None:
        self.assertTrue(is_invariant("plain text, 42!"))
        self.assertTrue(is_invariant("½·"))
        self.assertFalse(is_invariant("café"))
        self.assertFalse(is_invariant("tab\there"))

    def test_invariant_equals(self) -> None:
        self.assertTrue(invariant_equals("STRASSE", "straße"))
        self.assertFalse(invariant_equals("strasse", "strase"))
        self.assertTrue(invariant_equals("\uff26\uff55\uff4c\uff4c", "full"))

    def test_invariant_contains(self) -> None:
        self.assertTrue(invariant_contains("Crème Brûlée recipe", "creme brulee"))
        self.assertTrue(invariant_contains("a\u00a0b", "a b"))
        self.assertFalse(invariant_contains("açe", "ace!"))
