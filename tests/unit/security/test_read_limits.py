"""
Test cases for read limits validation.

Tests focus on preventing resource exhaustion before parsing starts.
"""

import unittest

from jsonexplicit.security.exceptions import SecurityError
from jsonexplicit.security.limits import LimitValidator
from jsonexplicit.utils.config import ReadLimits


class TestLimitValidator(unittest.TestCase):
    """Test LimitValidator functionality for security constraints."""

    def setUp(self):
        """Set up test validator with custom limits."""
        self.validator = LimitValidator(
            ReadLimits(max_input_size=1000, max_nesting_depth=3, max_number_length=20)
        )

    def test_input_size_validation_pass(self):
        self.validator.validate_input_size("x" * 1000)

    def test_input_size_validation_fail(self):
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_input_size("x" * 1001)
        self.assertIn("Input size 1001 exceeds limit 1000", str(cm.exception))

    def test_number_length_validation(self):
        self.validator.validate_number_length("1" * 20)
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_number_length("1" * 21)
        self.assertIn("Number length 21 exceeds limit 20", str(cm.exception))

    def test_nesting_depth_within_limit(self):
        self.validator.validate_nesting_depth({"a": [[1]]})
        self.validator.validate_nesting_depth("scalar")

    def test_nesting_depth_exceeded(self):
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_nesting_depth({"a": [[[1]]]})
        self.assertIn("Nesting depth 4 exceeds limit 3", str(cm.exception))

    def test_nesting_depth_deep_tree_does_not_recurse(self):
        """A tree deeper than the recursion limit is checked iteratively."""
        tree: list = []
        for _ in range(5000):
            tree = [tree]
        with self.assertRaises(SecurityError):
            self.validator.validate_nesting_depth(tree)


if __name__ == "__main__":
    unittest.main()
