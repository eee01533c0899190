"""
jsonexplicit Core Extraction Engine.

This module provides the node model, the error model, the composition core
and the primitive and composite parsers.
"""

from .composites import document, list_of, prop, tuple2, tuple3
from .nodes import JsonNumber, ParserContext
from .result import Err, Ok, bind, combine, lift_error, map_result

__all__ = [
    "document", "prop", "list_of", "tuple2", "tuple3",
    "JsonNumber", "ParserContext",
    "Ok", "Err", "bind", "combine", "lift_error", "map_result",
]
