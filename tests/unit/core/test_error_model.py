"""
Test cases for the error model.

Tests focus on reason rendering, path formatting and error merging.
"""

import unittest

from jsonexplicit.core.constants import JsonKind, NumericType
from jsonexplicit.core.error_handling import (
    MissingProperty,
    PathedError,
    UnexpectedType,
    UserError,
    ValueOutOfRange,
    format_errors,
    format_path,
    merge_errors,
)


class TestFormatPath(unittest.TestCase):
    """Test JSONPath-style rendering of paths."""

    def test_root(self) -> None:
        self.assertEqual(format_path(()), "$")

    def test_mixed_segments(self) -> None:
        """Test names and indices together."""
        self.assertEqual(format_path(("valueB", "value", 1)), "$.valueB.value[1]")

    def test_quoted_names(self) -> None:
        """Names that are not identifiers are quoted."""
        self.assertEqual(format_path(("a b",)), '$["a b"]')
        self.assertEqual(format_path(("1st",)), '$["1st"]')
        self.assertEqual(format_path(("",)), '$[""]')

    def test_unicode_identifier(self) -> None:
        self.assertEqual(format_path(("größe",)), "$.größe")


class TestReasons(unittest.TestCase):
    """Test rendering of error reasons."""

    def test_reason_messages(self) -> None:
        cases = [
            (MissingProperty("type"), 'missing property "type"'),
            (UnexpectedType(JsonKind.NUMBER, JsonKind.BOOL), "expected number, got bool"),
            (
                UnexpectedType(JsonKind.ARRAY, JsonKind.ARRAY, "expected 2 elements, found 3"),
                "expected array, got array (expected 2 elements, found 3)",
            ),
            (
                ValueOutOfRange(NumericType.INT32, "2147483648"),
                "value 2147483648 is out of range for int32",
            ),
            (UserError("bad tag"), "bad tag"),
        ]
        for reason, expected in cases:
            with self.subTest(reason=reason):
                self.assertEqual(str(reason), expected)

    def test_reasons_are_values(self) -> None:
        """Equal reasons compare equal."""
        self.assertEqual(MissingProperty("a"), MissingProperty("a"))
        self.assertNotEqual(MissingProperty("a"), MissingProperty("b"))


class TestPathedError(unittest.TestCase):
    """Test path-tagged errors."""

    def test_str(self) -> None:
        error = PathedError(("items", 0), UnexpectedType(JsonKind.STRING, JsonKind.NULL))
        self.assertEqual(str(error), "$.items[0]: expected string, got null")

    def test_merge_keeps_order_and_duplicates(self) -> None:
        """Merging concatenates without deduplication."""
        a = PathedError((), MissingProperty("a"))
        b = PathedError((), MissingProperty("b"))
        merged = merge_errors((a,), (b, a), ())
        self.assertEqual(merged, (a, b, a))

    def test_format_errors(self) -> None:
        errors = [
            PathedError((), MissingProperty("a")),
            PathedError(("b",), UserError("nope")),
        ]
        self.assertEqual(format_errors(errors), '$: missing property "a"\n$.b: nope')


if __name__ == "__main__":
    unittest.main()
