"""
Result types for fractal parsers.

A parser is a function that takes an input and produces a Result: a Success
wrapping the parsed value, or a Failure carrying the input that could not be
parsed and the reason why.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeGuard, TypeVar, Union

I = TypeVar("I")
O = TypeVar("O")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True, slots=True)
class Success(Generic[O]):
    """Parsed result containing the typed value."""

    value: O

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Failure(Generic[I]):
    """
    Value that could not be parsed.

    `value` is the original input, never a partially parsed one. `reason` is
    the human-readable explanation.
    """

    value: I
    reason: str

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


# Type aliases
Result = Union[Failure[I], Success[O]]
Parser = Callable[[Any], Union[Failure[Any], Success[O]]]


def success(value: O) -> Success[O]:
    """Build a Success with the value."""
    return Success(value)


def failure(value: I, reason: str) -> Failure[I]:
    """Build a Failure for the value with a reason."""
    return Failure(value, reason)


def value(result: Success[O]) -> O:
    """Unwrap the value of a Success."""
    return result.value


def is_success(result: Result[I, O]) -> TypeGuard[Success[O]]:
    """Guard that refines a Result to Success."""
    return isinstance(result, Success)


def is_failure(result: Result[I, O]) -> TypeGuard[Failure[I]]:
    """Guard that refines a Result to Failure."""
    return isinstance(result, Failure)


def map_success(result: Result[I, A], fn: Callable[[A], B]) -> B | Failure[I]:
    """
    When the result is a Success, return `fn(result.value)`; otherwise
    return the Failure unchanged.

        greeting = map_success(parse_string("Ripley"), lambda s: f"Hello {s}")
    """
    return fn(result.value) if is_success(result) else result


def map_failure(result: Result[I, A], fn: Callable[[Failure[I]], B]) -> B | Success[A]:
    """
    When the result is a Failure, return `fn(failure)`; otherwise return the
    Success unchanged.

        # Success("1") or whatever parse_number(1) gives
        result = map_failure(parse_string(1), lambda _: parse_number(1))
    """
    return fn(result) if is_failure(result) else result


def map_result(
    result: Result[I, A],
    on_success: Callable[[A], B],
    on_failure: Callable[[Failure[I]], C],
) -> B | C:
    """
    Branch over both variants of a Result.

        response = map_result(
            parse_string(1),
            lambda text: {"type": "success", "body": text},
            lambda failed: {"type": "failure", "body": failed.reason},
        )
    """
    return on_success(result.value) if is_success(result) else on_failure(result)
