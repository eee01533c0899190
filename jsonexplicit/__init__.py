"""
jsonexplicit - explicit, error-accumulating extraction of typed values from JSON.

jsonexplicit turns an already-read JSON document into typed Python values with
small composable parsers. Instead of stopping at the first problem, a parse
reports every missing property and type mismatch it can find, each tagged with
the exact path where it happened.

Key Features:
- Primitive parsers: unit, boolean, int32, int64, decimal, number, string
- Composite parsers: prop, optional_prop, list_of, dict_of, tuple2, tuple3
- Two composition modes: `bind` short-circuits dependent steps, `combine`
  accumulates errors of independent ones
- Lossless numbers: Decimal values keep every digit of the source literal
- Read limits to prevent resource exhaustion

Quick Start:
    from jsonexplicit import apply, int32, parse_text, string

    def person(ctx):
        return apply(
            lambda name, age: {"name": name, "age": age},
            ctx.prop("name", string),
            ctx.prop("age", int32),
        )

    result = parse_text(person, '{"age": "old"}')
    # Err: $: missing property "name", $.age: expected number, got string
"""

from .core.composites import (
    dict_of,
    document,
    list_of,
    one_of_tag,
    optional_prop,
    parse_file,
    parse_list,
    parse_text,
    prop,
    tuple2,
    tuple3,
    tuple_of,
)
from .core.constants import JsonKind, NumericType
from .core.error_handling import (
    JsonParserErrorReason,
    MissingProperty,
    PathedError,
    UnexpectedType,
    UserError,
    ValueOutOfRange,
    format_errors,
    format_path,
)
from .core.nodes import JsonNumber, ParserContext, kind_of
from .core.primitives import (
    boolean,
    decimal,
    int32,
    int64,
    integer,
    number,
    option,
    string,
    unit,
)
from .core.reader import load_document, read_document
from .core.result import (
    Err,
    Ok,
    ParseResult,
    Parser,
    apply,
    bind,
    combine,
    combine3,
    combine_all,
    lift_error,
    map_result,
)
from .security.exceptions import DocumentError, JsonExplicitError, ParseFailure, SecurityError
from .utils.config import ReadConfig, ReadLimits

__version__ = "0.1.0"
__author__ = "jsonexplicit contributors"

__all__ = [
    # Entry points
    "document", "parse_text", "parse_file", "read_document", "load_document",
    # Node model
    "ParserContext", "JsonNumber", "JsonKind", "kind_of",
    # Error model
    "PathedError", "JsonParserErrorReason", "MissingProperty", "UnexpectedType",
    "ValueOutOfRange", "UserError", "NumericType", "format_path", "format_errors",
    # Composition core
    "Ok", "Err", "ParseResult", "Parser", "map_result", "bind", "combine",
    "combine3", "combine_all", "apply", "lift_error",
    # Primitive parsers
    "unit", "boolean", "int32", "int64", "integer", "decimal", "number", "string",
    "option",
    # Composite parsers
    "prop", "optional_prop", "parse_list", "list_of", "dict_of", "tuple_of",
    "tuple2", "tuple3", "one_of_tag",
    # Configuration classes
    "ReadConfig", "ReadLimits",
    # Exception classes
    "JsonExplicitError", "DocumentError", "SecurityError", "ParseFailure",
]
