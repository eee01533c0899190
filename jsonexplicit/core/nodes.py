"""
Node model for typed extraction.

A ParserContext pairs a node of an already-read JSON tree with the path taken
from the document root to reach it. Contexts are immutable: descending into a
property or an element produces a new context and leaves the parent usable
for sibling lookups.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from .constants import JsonKind

if TYPE_CHECKING:
    from .result import ParseResult

PathSegment = Union[str, int]
Path = tuple[PathSegment, ...]

ROOT_PATH: Path = ()


@dataclass(frozen=True)
class JsonNumber:
    """Raw numeric literal exactly as it appeared in the source text."""

    text: str

    def __str__(self) -> str:
        return self.text


def kind_of(node: Any) -> JsonKind:
    """Get the JSON kind of a tree node."""
    if node is None:
        return JsonKind.NULL
    # bool before int: bool is an int subclass
    if isinstance(node, bool):
        return JsonKind.BOOL
    if isinstance(node, (JsonNumber, int, float, Decimal)):
        return JsonKind.NUMBER
    if isinstance(node, str):
        return JsonKind.STRING
    if isinstance(node, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(node, dict):
        return JsonKind.OBJECT
    raise TypeError(f"{type(node).__name__} is not a JSON tree node")


def number_text(node: Any) -> str:
    """Get the source text of a Number node."""
    if isinstance(node, JsonNumber):
        return node.text
    if isinstance(node, float):
        return repr(node)
    return str(node)


@dataclass(frozen=True)
class ParserContext:
    """A node of the document together with its path from the root."""

    node: Any
    path: Path = ROOT_PATH

    @property
    def kind(self) -> JsonKind:
        """JSON kind of the current node."""
        return kind_of(self.node)

    def child(self, segment: PathSegment, node: Any) -> "ParserContext":
        """Descend one step, extending the path with `segment`."""
        return ParserContext(node, self.path + (segment,))

    def property(self, name: str) -> Optional["ParserContext"]:
        """
        Get the context of a named property.

        Returns None both when the node is not an object and when the key is
        absent; callers decide how to report either case.
        """
        if not isinstance(self.node, dict) or name not in self.node:
            return None
        return self.child(name, self.node[name])

    def elements(self) -> list["ParserContext"]:
        """Get the contexts of the children of an array or object."""
        if isinstance(self.node, (list, tuple)):
            return [self.child(index, item) for index, item in enumerate(self.node)]
        if isinstance(self.node, dict):
            return [self.child(name, value) for name, value in self.node.items()]
        return []

    def prop(
        self, name: str, parser: Callable[["ParserContext"], "ParseResult[Any]"]
    ) -> "ParseResult[Any]":
        """Parse a required property of this object."""
        from .composites import prop  # pylint: disable=import-outside-toplevel

        return prop(self, name, parser)

    def optional_prop(
        self, name: str, parser: Callable[["ParserContext"], "ParseResult[Any]"]
    ) -> "ParseResult[Any]":
        """Parse a property that may be absent or null."""
        from .composites import optional_prop  # pylint: disable=import-outside-toplevel

        return optional_prop(self, name, parser)
