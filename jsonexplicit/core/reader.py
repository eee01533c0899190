"""
Reader adapter: raw JSON text to a navigable tree.

Tokenizing is delegated to the standard library json module. Numbers are kept
as JsonNumber literals so the primitive parsers can choose the target type
without losing precision. Non-standard constants (NaN, Infinity) are rejected.
"""

import json
import logging
from typing import IO, Any, NoReturn, Optional

from ..security.exceptions import DocumentError, SecurityError
from ..security.limits import LimitValidator
from ..utils.config import ReadConfig
from .nodes import JsonNumber

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> NoReturn:
    raise DocumentError(f"Non-standard JSON constant {name}")


def read_document(text: str, config: Optional[ReadConfig] = None) -> Any:
    """
    Read JSON text into a tree of dicts, lists, strings, bools, None and
    JsonNumber literals.

    Raises:
        DocumentError: If the text is not valid JSON
        SecurityError: If read limits are exceeded
    """
    config = config or ReadConfig()
    log = config.logger or logger
    validator = LimitValidator(config.limits) if config.enforce_limits else None

    if validator:
        validator.validate_input_size(text)

    def read_number(literal: str) -> JsonNumber:
        if validator:
            validator.validate_number_length(literal)
        return JsonNumber(literal)

    try:
        tree = json.loads(
            text,
            parse_int=read_number,
            parse_float=read_number,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as e:
        raise DocumentError(e.msg, e.lineno, e.colno) from e
    except RecursionError as e:
        raise SecurityError("Document nesting exceeds the interpreter recursion limit") from e

    if validator:
        validator.validate_nesting_depth(tree)

    log.debug(f"Read JSON document ({len(text)} chars)")
    return tree


def load_document(fp: IO[str], config: Optional[ReadConfig] = None) -> Any:
    """Read a JSON document from a file-like object."""
    return read_document(fp.read(), config)
