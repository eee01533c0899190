"""
Test cases for the node model.

Tests focus on kind detection, path extension and read-only traversal.
"""

import unittest
from decimal import Decimal

from jsonexplicit.core.constants import JsonKind
from jsonexplicit.core.nodes import JsonNumber, ParserContext, kind_of, number_text


class TestKindOf(unittest.TestCase):
    """Test JSON kind detection for tree nodes."""

    def test_scalar_kinds(self) -> None:
        """Test kinds of scalar nodes."""
        cases = [
            (None, JsonKind.NULL),
            (True, JsonKind.BOOL),
            (False, JsonKind.BOOL),
            (JsonNumber("1.5"), JsonKind.NUMBER),
            (42, JsonKind.NUMBER),
            (4.2, JsonKind.NUMBER),
            (Decimal("1.0"), JsonKind.NUMBER),
            ("text", JsonKind.STRING),
        ]
        for node, expected in cases:
            with self.subTest(node=node):
                self.assertEqual(kind_of(node), expected)

    def test_container_kinds(self) -> None:
        """Test kinds of arrays and objects."""
        self.assertEqual(kind_of([]), JsonKind.ARRAY)
        self.assertEqual(kind_of((1, 2)), JsonKind.ARRAY)
        self.assertEqual(kind_of({}), JsonKind.OBJECT)

    def test_non_json_value_raises(self) -> None:
        """Values that cannot occur in a JSON tree are a programming error."""
        with self.assertRaises(TypeError):
            kind_of(object())

    def test_number_text(self) -> None:
        """Test raw text of number nodes."""
        self.assertEqual(number_text(JsonNumber("1e10")), "1e10")
        self.assertEqual(number_text(7), "7")
        self.assertEqual(number_text(0.1), "0.1")


class TestParserContext(unittest.TestCase):
    """Test ParserContext traversal."""

    def setUp(self) -> None:
        self.root = ParserContext({"name": "a", "items": [1, 2]})

    def test_root_path_is_empty(self) -> None:
        """A fresh context starts at the root."""
        self.assertEqual(self.root.path, ())
        self.assertEqual(self.root.kind, JsonKind.OBJECT)

    def test_property_extends_path(self) -> None:
        """Property lookup appends the name segment."""
        child = self.root.property("items")
        self.assertIsNotNone(child)
        self.assertEqual(child.path, ("items",))
        self.assertEqual(child.node, [1, 2])

    def test_property_missing_or_not_object(self) -> None:
        """Missing keys and non-objects both yield None."""
        self.assertIsNone(self.root.property("absent"))
        self.assertIsNone(ParserContext([1]).property("name"))
        self.assertIsNone(ParserContext("text").property("name"))

    def test_elements_of_array(self) -> None:
        """Array elements get index segments."""
        items = self.root.property("items")
        elements = items.elements()
        self.assertEqual([e.path for e in elements], [("items", 0), ("items", 1)])
        self.assertEqual([e.node for e in elements], [1, 2])

    def test_elements_of_object(self) -> None:
        """Object children keep document order and name segments."""
        paths = [e.path for e in self.root.elements()]
        self.assertEqual(paths, [("name",), ("items",)])

    def test_elements_of_scalar(self) -> None:
        """Scalars have no children."""
        self.assertEqual(ParserContext(None).elements(), [])

    def test_descent_leaves_parent_untouched(self) -> None:
        """Descending twice from the same parent gives independent paths."""
        first = self.root.property("name")
        second = self.root.property("items")
        self.assertEqual(self.root.path, ())
        self.assertEqual(first.path, ("name",))
        self.assertEqual(second.path, ("items",))


if __name__ == "__main__":
    unittest.main()
