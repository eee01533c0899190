"""
Composite parsers and the document entry point.

Composite parsers descend into objects and arrays, building child contexts
whose paths extend the parent's, and fold the children's results back through
the composition core. Independent children (list elements, tuple positions,
map values) are always all parsed so their errors accumulate.
"""

import logging
from typing import IO, Any, Callable, Mapping, Optional

from ..utils.config import ReadConfig
from .constants import JsonKind
from .error_handling import MissingProperty, UnexpectedType, UserError
from .nodes import ParserContext
from .primitives import expect_kind, string
from .reader import load_document, read_document
from .result import Ok, ParseResult, Parser, T, bind, combine_all, lift_error, map_result

logger = logging.getLogger(__name__)


def prop(ctx: ParserContext, name: str, parser: Parser[T]) -> ParseResult[T]:
    """
    Parse a required property with `parser`.

    A node that is not an object and an object without `name` both fail with
    MissingProperty at the current path, since the child never existed.
    Failures of `parser` itself carry the child path.
    """
    child = ctx.property(name)
    if child is None:
        return lift_error(ctx, MissingProperty(name))
    return parser(child)


def optional_prop(
    ctx: ParserContext, name: str, parser: Parser[T]
) -> ParseResult[Optional[T]]:
    """Parse a property, yielding None when it is absent or null."""
    child = ctx.property(name)
    if child is None or child.kind is JsonKind.NULL:
        return Ok(None)
    return parser(child)


def parse_list(parser: Parser[T], ctx: ParserContext) -> ParseResult[list[T]]:
    """Parse every element of an array, accumulating all element errors."""
    failure = expect_kind(ctx, JsonKind.ARRAY)
    if failure:
        return failure
    return combine_all(parser(element) for element in ctx.elements())


def list_of(parser: Parser[T]) -> Parser[list[T]]:
    """Build a parser for homogeneous arrays."""

    def parse_elements(ctx: ParserContext) -> ParseResult[list[T]]:
        return parse_list(parser, ctx)

    return parse_elements


def dict_of(parser: Parser[T]) -> Parser[dict[str, T]]:
    """Build a parser for objects used as string-keyed maps."""

    def parse_values(ctx: ParserContext) -> ParseResult[dict[str, T]]:
        failure = expect_kind(ctx, JsonKind.OBJECT)
        if failure:
            return failure
        names = list(ctx.node)
        return map_result(
            combine_all(parser(child) for child in ctx.elements()),
            lambda values: dict(zip(names, values)),
        )

    return parse_values


def tuple_of(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """
    Build a parser for fixed-arity arrays.

    An array of the wrong length fails with a single UnexpectedType at the
    array's own path and no position is parsed. Otherwise every position is
    parsed and all of their errors are reported together.
    """
    arity = len(parsers)

    def parse_positions(ctx: ParserContext) -> ParseResult[tuple[Any, ...]]:
        failure = expect_kind(ctx, JsonKind.ARRAY)
        if failure:
            return failure
        elements = ctx.elements()
        if len(elements) != arity:
            detail = f"expected {arity} elements, found {len(elements)}"
            return lift_error(ctx, UnexpectedType(JsonKind.ARRAY, JsonKind.ARRAY, detail))
        results = [parser(element) for parser, element in zip(parsers, elements)]
        return map_result(combine_all(results), tuple)

    return parse_positions


def tuple2(first: Parser[Any], second: Parser[Any]) -> Parser[tuple[Any, Any]]:
    """Build a parser for two-element arrays."""
    return tuple_of(first, second)  # type: ignore[return-value]


def tuple3(
    first: Parser[Any], second: Parser[Any], third: Parser[Any]
) -> Parser[tuple[Any, Any, Any]]:
    """Build a parser for three-element arrays."""
    return tuple_of(first, second, third)  # type: ignore[return-value]


def one_of_tag(
    ctx: ParserContext,
    tag_property: str,
    handlers: Mapping[str, Callable[[ParserContext], ParseResult[T]]],
) -> ParseResult[T]:
    """
    Parse a tagged object by dispatching on a string property.

    The tag is read first and the matching handler only runs once the tag is
    known; an unregistered tag fails with UserError at the object's path.
    """

    def dispatch(tag: str) -> ParseResult[T]:
        handler = handlers.get(tag)
        if handler is None:
            return lift_error(ctx, UserError(f"unrecognized {tag_property} {tag!r}"))
        return handler(ctx)

    return bind(prop(ctx, tag_property, string), dispatch)


def document(
    parser: Parser[T], root: Any, config: Optional[ReadConfig] = None
) -> ParseResult[T]:
    """
    Parse an already-read JSON tree.

    This is the only place a root context is created; the path starts empty.
    """
    log = (config.logger if config else None) or logger
    result = parser(ParserContext(root))
    if result.is_ok:
        log.debug("Parsed document successfully")
    else:
        log.debug(f"Parsed document with {len(result.errors)} error(s)")  # type: ignore[union-attr]
    return result


def parse_text(
    parser: Parser[T], text: str, config: Optional[ReadConfig] = None
) -> ParseResult[T]:
    """
    Read JSON text and parse it.

    Raises:
        DocumentError: If the text is not valid JSON
        SecurityError: If read limits are exceeded
    """
    return document(parser, read_document(text, config), config)


def parse_file(
    parser: Parser[T], fp: IO[str], config: Optional[ReadConfig] = None
) -> ParseResult[T]:
    """Read JSON from a file-like object and parse it."""
    return document(parser, load_document(fp, config), config)
