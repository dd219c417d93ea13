import unittest

from src.combinatorics.cursor_conf import CursorConfig
from src.combinatorics.errors import CursorError, InvalidInput


class TestCursorConfig(unittest.TestCase):
    def test_valid(self):
        CursorConfig(base="abcd").validate()
        CursorConfig(base="AbCd", start_length=4).validate()
        CursorConfig(base="abcd", start_length=2, end_length=4).validate()

    def test_invalid_base(self):
        for base in (None, "", "ab@cd", "ab1cd", "ab cd", "äbc", 123, ["a", "b"]):
            with self.subTest(base=base):
                with self.assertRaises(InvalidInput):
                    CursorConfig(base=base).validate()

    def test_invalid_start_length(self):
        for start in (0, -1, 5, 2.0, True, None):
            with self.subTest(start=start):
                with self.assertRaises(InvalidInput):
                    CursorConfig(base="abcd", start_length=start).validate()

    def test_invalid_end_length(self):
        for end in (1, 5, 3.0):
            with self.subTest(end=end):
                with self.assertRaises(InvalidInput):
                    CursorConfig(base="abcd", start_length=2, end_length=end).validate()

    def test_error_hierarchy(self):
        with self.assertRaises(ValueError):
            CursorConfig(base="").validate()
        self.assertTrue(issubclass(InvalidInput, CursorError))

    def test_resolved_end_length(self):
        self.assertEqual(CursorConfig(base="abcd").resolved_end_length(), 4)
        self.assertEqual(CursorConfig(base="abcd", start_length=2).resolved_end_length(), 2)
        self.assertEqual(CursorConfig(base="abcd", start_length=2, end_length=3).resolved_end_length(), 3)


if __name__ == "__main__":
    unittest.main(verbosity=2)
