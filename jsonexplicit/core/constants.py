"""
Common constants used across the jsonexplicit library.
"""

from enum import Enum

import regex  # type: ignore[import-untyped]


class JsonKind(Enum):
    """Runtime shape of a JSON node."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class NumericType(Enum):
    """Target types a Number node can be converted into."""

    INT32 = "int32"
    INT64 = "int64"
    DECIMAL = "decimal"
    FLOAT = "float"


INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Longest integer literal worth converting before the range check: 19 digits
# plus sign covers int64.
MAX_INTEGER_DIGITS = 20

# JSON integer grammar (RFC 8259, section 6)
INTEGER_LITERAL = regex.compile(r"-?(?:0|[1-9][0-9]*)")

# Property names that render as `.name` in a path; anything else is quoted
IDENTIFIER = regex.compile(r"[\p{L}_][\p{L}\p{N}_]*")

INTEGER_RANGES = {
    NumericType.INT32: (INT32_MIN, INT32_MAX),
    NumericType.INT64: (INT64_MIN, INT64_MAX),
}
