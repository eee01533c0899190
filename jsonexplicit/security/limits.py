"""
Security limits and validation for jsonexplicit.
This module provides read-time validation to prevent resource exhaustion.
"""

from typing import Any

from ..utils.config import ReadLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates read limits to prevent resource exhaustion attacks."""

    def __init__(self, limits: ReadLimits):
        self.limits = limits

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )

    def validate_number_length(self, number_str: str) -> None:
        """Validate that number literal length is within limits."""
        if len(number_str) > self.limits.max_number_length:
            raise SecurityError(
                f"Number length {len(number_str)} exceeds limit "
                f"{self.limits.max_number_length}"
            )

    def validate_nesting_depth(self, tree: Any) -> None:
        """Validate that no array or object is nested deeper than allowed."""
        # Iterative walk so the check itself cannot hit the recursion limit
        stack = [(tree, 0)]
        while stack:
            node, depth = stack.pop()
            if isinstance(node, dict):
                children = list(node.values())
            elif isinstance(node, (list, tuple)):
                children = list(node)
            else:
                continue
            depth += 1
            if depth > self.limits.max_nesting_depth:
                raise SecurityError(
                    f"Nesting depth {depth} exceeds limit "
                    f"{self.limits.max_nesting_depth}"
                )
            stack.extend((child, depth) for child in children)
