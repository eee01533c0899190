"""
Composition core: parse results and the combinators that route them.

Two ways of composing parse steps are provided and they must not be confused:

- `bind` sequences dependent steps. The continuation only runs when the
  previous step succeeded, so the first failure short-circuits.
- `combine` (and `combine3`, `combine_all`, `apply`) joins independent steps.
  Every branch has already been evaluated and all of their errors are kept,
  left branch first.

Use `bind` only when the choice of the next parser, or the value it validates
against, depends on an earlier result. Everything else should be combined so
that a single parse attempt reports as many errors as possible.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar, Union

from ..security.exceptions import ParseFailure
from .error_handling import JsonParserErrorReason, PathedError, merge_errors
from .nodes import ParserContext

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successfully parsed value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> "ParseResult[U]":
        return Ok(func(self.value))

    def bind(self, func: Callable[[T], "ParseResult[U]"]) -> "ParseResult[U]":
        return func(self.value)

    def and_(self, other: "ParseResult[U]") -> "ParseResult[tuple[T, U]]":
        return combine(self, other)

    def unwrap(self) -> T:
        return self.value

    def value_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed parse with its errors in discovery order."""

    errors: tuple[PathedError, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Err requires at least one error")
        # Accept any sequence but store a tuple so results stay hashable
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def is_ok(self) -> bool:
        return False

    def map(self, func: Callable[[Any], Any]) -> "Err":
        return self

    def bind(self, func: Callable[[Any], "ParseResult[Any]"]) -> "Err":
        return self

    def and_(self, other: "ParseResult[Any]") -> "Err":
        return combine(self, other)  # type: ignore[return-value]

    def unwrap(self) -> Any:
        """Raise ParseFailure with every collected error."""
        raise ParseFailure(self.errors)

    def value_or(self, default: Any) -> Any:
        return default


ParseResult = Union[Ok[T], Err]
Parser = Callable[[ParserContext], ParseResult[T]]


def lift_error(ctx: ParserContext, reason: JsonParserErrorReason) -> Err:
    """Fail with `reason` at the path of `ctx`."""
    return Err((PathedError(ctx.path, reason),))


def map_result(result: ParseResult[T], func: Callable[[T], U]) -> ParseResult[U]:
    """Transform a successful value, passing errors through unchanged."""
    return result.map(func)


def bind(result: ParseResult[T], func: Callable[[T], ParseResult[U]]) -> ParseResult[U]:
    """Run `func` on the value of a successful result; never on a failure."""
    return result.bind(func)


def combine(first: ParseResult[A], second: ParseResult[B]) -> ParseResult[tuple[A, B]]:
    """Pair two independent results, accumulating the errors of both."""
    if isinstance(first, Ok) and isinstance(second, Ok):
        return Ok((first.value, second.value))
    return Err(merge_errors(_errors_of(first), _errors_of(second)))


def combine3(
    first: ParseResult[A], second: ParseResult[B], third: ParseResult[C]
) -> ParseResult[tuple[A, B, C]]:
    """Combine three independent results."""
    return map_result(combine_all([first, second, third]), tuple)  # type: ignore[arg-type]


def combine_all(results: Iterable[ParseResult[T]]) -> ParseResult[list[T]]:
    """
    Combine any number of independent results.

    Succeeds with the values in order, or fails with the errors of every
    failing result in order.
    """
    values: list[T] = []
    errors: list[PathedError] = []
    for result in results:
        if isinstance(result, Ok):
            values.append(result.value)
        else:
            errors.extend(result.errors)
    if errors:
        return Err(tuple(errors))
    return Ok(values)


def apply(func: Callable[..., U], *results: ParseResult[Any]) -> ParseResult[U]:
    """Combine independent results and call `func` with their values."""
    return map_result(combine_all(results), lambda values: func(*values))


def _errors_of(result: ParseResult[Any]) -> tuple[PathedError, ...]:
    if isinstance(result, Err):
        return result.errors
    return ()
