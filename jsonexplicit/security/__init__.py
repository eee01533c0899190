"""
jsonexplicit Security and Exception System.

This module provides read limits and the exception hierarchy.
"""

from .exceptions import DocumentError, JsonExplicitError, ParseFailure, SecurityError
from .limits import LimitValidator

__all__ = [
    "JsonExplicitError",
    "DocumentError",
    "SecurityError",
    "ParseFailure",
    "LimitValidator",
]
