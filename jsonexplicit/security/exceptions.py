"""
Exceptions for conditions that are not accumulated as parse errors.

Mistyped or missing data is reported through `Err` values. The exceptions here
cover the rest: raw text the reader cannot read, input that exceeds the
configured limits, and explicit unwrapping of a failed result.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.error_handling import PathedError


class JsonExplicitError(Exception):
    """Base class for jsonexplicit exceptions."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DocumentError(JsonExplicitError):
    """Raised when raw text is not a readable JSON document."""

    def __init__(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ):
        self.line = line
        self.column = column
        full_message = message
        if line is not None and column is not None:
            full_message = f"{message} at line {line}, column {column}"
        super().__init__(full_message)


class SecurityError(JsonExplicitError):
    """Raised when a document exceeds the configured read limits."""


class ParseFailure(JsonExplicitError):
    """Raised by `Err.unwrap()`; carries every collected error."""

    def __init__(self, errors: "tuple[PathedError, ...]"):
        self.errors = errors
        count = len(errors)
        lines = "\n".join(f"  {error}" for error in errors)
        super().__init__(f"{count} parse error{'s' if count != 1 else ''}:\n{lines}")
