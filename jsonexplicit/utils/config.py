"""
Configuration and limits for reading JSON documents.

This module defines the limits applied while turning raw text into a tree and
the options that travel with a parse.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ReadLimits:
    """Security limits for reading documents to prevent abuse."""

    max_input_size: int = 10 * 1024 * 1024
    max_nesting_depth: int = 100
    max_number_length: int = 100

    def __post_init__(self) -> None:
        if self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")
        if self.max_number_length <= 0:
            raise ValueError("max_number_length must be positive")


@dataclass
class ReadConfig:
    """Configuration options for jsonexplicit reads and parses."""

    limits: ReadLimits = field(default_factory=ReadLimits)
    enforce_limits: bool = True
    logger: Optional[logging.Logger] = None

    @classmethod
    def unlimited(cls) -> "ReadConfig":
        """Create a configuration that applies no read limits."""
        return cls(enforce_limits=False)
