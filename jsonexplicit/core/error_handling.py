"""
Error model for typed extraction.

Every failure is described by one of a closed set of reasons and tagged with
the path where it was detected. Errors are plain values collected in discovery
order; nothing here raises.
"""

import json
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .constants import IDENTIFIER, JsonKind, NumericType
from .nodes import Path


@dataclass(frozen=True)
class MissingProperty:
    """A required object key is absent, or the node is not an object at all."""

    name: str

    def __str__(self) -> str:
        return f"missing property {json.dumps(self.name)}"


@dataclass(frozen=True)
class UnexpectedType:
    """The node has a different JSON kind than the parser expects."""

    expected: JsonKind
    actual: JsonKind
    detail: Optional[str] = None

    def __str__(self) -> str:
        message = f"expected {self.expected.value}, got {self.actual.value}"
        if self.detail:
            message += f" ({self.detail})"
        return message


@dataclass(frozen=True)
class ValueOutOfRange:
    """A Number that cannot be represented in the target numeric type."""

    target_type: NumericType
    raw_text: str

    def __str__(self) -> str:
        return f"value {self.raw_text} is out of range for {self.target_type.value}"


@dataclass(frozen=True)
class UserError:
    """Caller-defined validation failure."""

    message: str

    def __str__(self) -> str:
        return self.message


JsonParserErrorReason = Union[MissingProperty, UnexpectedType, ValueOutOfRange, UserError]


def format_path(path: Path) -> str:
    """
    Render a path in JSONPath style.

    The root is `$`, identifier-like names render as `.name`, other names as
    `["some name"]` and indices as `[0]`.
    """
    parts = ["$"]
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif IDENTIFIER.fullmatch(segment):
            parts.append(f".{segment}")
        else:
            parts.append(f"[{json.dumps(segment)}]")
    return "".join(parts)


@dataclass(frozen=True)
class PathedError:
    """A failure reason tagged with the path where it was detected."""

    path: Path
    reason: JsonParserErrorReason

    def __str__(self) -> str:
        return f"{format_path(self.path)}: {self.reason}"


def merge_errors(*groups: Iterable[PathedError]) -> tuple[PathedError, ...]:
    """Concatenate error groups in argument order, keeping duplicates."""
    merged: list[PathedError] = []
    for group in groups:
        merged.extend(group)
    return tuple(merged)


def format_errors(errors: Iterable[PathedError]) -> str:
    """Render errors one per line."""
    return "\n".join(str(error) for error in errors)
