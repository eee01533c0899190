"""
Primitive parsers for leaf values.

Each parser takes a ParserContext and returns a ParseResult. They are pure
functions of the node and its path.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional

from .constants import (
    INTEGER_LITERAL,
    INTEGER_RANGES,
    MAX_INTEGER_DIGITS,
    JsonKind,
    NumericType,
)
from .error_handling import UnexpectedType, ValueOutOfRange
from .nodes import ParserContext, number_text
from .result import Ok, ParseResult, Parser, T, lift_error


def expect_kind(ctx: ParserContext, expected: JsonKind) -> Optional[ParseResult[Any]]:
    """Get an UnexpectedType failure if the node is not of the expected kind."""
    actual = ctx.kind
    if actual is expected:
        return None
    return lift_error(ctx, UnexpectedType(expected, actual))


def unit(ctx: ParserContext) -> ParseResult[None]:
    """Parse `null`."""
    return expect_kind(ctx, JsonKind.NULL) or Ok(None)


def boolean(ctx: ParserContext) -> ParseResult[bool]:
    """Parse `true` or `false`."""
    return expect_kind(ctx, JsonKind.BOOL) or Ok(ctx.node)


def string(ctx: ParserContext) -> ParseResult[str]:
    """Parse a string value."""
    return expect_kind(ctx, JsonKind.STRING) or Ok(ctx.node)


def _integer(ctx: ParserContext, target: NumericType) -> ParseResult[int]:
    failure = expect_kind(ctx, JsonKind.NUMBER)
    if failure:
        return failure

    text = number_text(ctx.node)
    # Length check first: int() refuses very long digit strings outright
    if len(text) > MAX_INTEGER_DIGITS or not INTEGER_LITERAL.fullmatch(text):
        return lift_error(ctx, ValueOutOfRange(target, text))

    value = int(text)
    low, high = INTEGER_RANGES[target]
    if not low <= value <= high:
        return lift_error(ctx, ValueOutOfRange(target, text))
    return Ok(value)


def int32(ctx: ParserContext) -> ParseResult[int]:
    """Parse an integral Number within the signed 32-bit range."""
    return _integer(ctx, NumericType.INT32)


def int64(ctx: ParserContext) -> ParseResult[int]:
    """Parse an integral Number within the signed 64-bit range."""
    return _integer(ctx, NumericType.INT64)


integer = int32


def decimal(ctx: ParserContext) -> ParseResult[Decimal]:
    """
    Parse a Number into a Decimal.

    The value is built from the literal's source text, so every significant
    digit is kept.
    """
    failure = expect_kind(ctx, JsonKind.NUMBER)
    if failure:
        return failure

    text = number_text(ctx.node)
    try:
        value = Decimal(text)
    except InvalidOperation:
        return lift_error(ctx, ValueOutOfRange(NumericType.DECIMAL, text))
    if not value.is_finite():
        return lift_error(ctx, ValueOutOfRange(NumericType.DECIMAL, text))
    return Ok(value)


def number(ctx: ParserContext) -> ParseResult[float]:
    """Parse a Number into a float; literals beyond float range fail."""
    failure = expect_kind(ctx, JsonKind.NUMBER)
    if failure:
        return failure

    text = number_text(ctx.node)
    value = float(text)
    if math.isinf(value) or math.isnan(value):
        return lift_error(ctx, ValueOutOfRange(NumericType.FLOAT, text))
    return Ok(value)


def option(parser: Parser[T]) -> Callable[[ParserContext], ParseResult[Optional[T]]]:
    """Wrap a parser so that `null` parses as None."""

    def parse_option(ctx: ParserContext) -> ParseResult[Optional[T]]:
        if ctx.kind is JsonKind.NULL:
            return Ok(None)
        return parser(ctx)

    return parse_option
