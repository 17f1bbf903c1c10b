"""
Core parser classes for fractal.

Composed parsers are immutable dataclass nodes with a __call__, so they can be
shared freely and inspected (e.g., by to_pydantic). Build them through the
factory functions in fractal.parsers and fractal.combinators.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from .lib.failure_helpers import fail_type_of, keyed_failure, reframe
from .lib.values import display, type_tag
from .result import Failure, Parser, Result, Success, failure, is_failure, success
from .undefined import UNDEFINED


@dataclass(frozen=True, slots=True)
class OptionalOf:
    """Parser that accepts None before delegating to `parser`."""

    parser: Parser[Any]

    def __call__(self, value: Any) -> Result[Any, Any]:
        return success(None) if value is None else self.parser(value)


@dataclass(frozen=True, slots=True)
class VoidableOf:
    """Parser that accepts UNDEFINED before delegating to `parser`."""

    parser: Parser[Any]

    def __call__(self, value: Any) -> Result[Any, Any]:
        return success(UNDEFINED) if value is UNDEFINED else self.parser(value)


@dataclass(frozen=True, slots=True, eq=False)
class ObjectOf:
    """Parser for a record with a fixed set of fields."""

    fields: Mapping[str, Parser[Any]]

    def __call__(self, value: Any) -> Result[Any, dict[str, Any]]:
        source = value if type_tag(value) == "object" else {}
        parsed: dict[str, Any] = {}

        for key, parser in self.fields.items():
            result = parser(source.get(key, UNDEFINED))
            if is_failure(result):
                return keyed_failure(value, key, result)
            parsed[key] = result.value

        return success(parsed)


@dataclass(frozen=True, slots=True)
class ArrayOf:
    """Parser for a sequence whose members all pass `items`."""

    items: Parser[Any]

    def __call__(self, value: Any) -> Result[Any, list[Any]]:
        if type_tag(value) != "array":
            return fail_type_of(value)

        parsed: list[Any] = []

        for index, member in enumerate(value):
            result = self.items(member)
            if is_failure(result):
                return keyed_failure(value, index, result)
            parsed.append(result.value)

        return success(parsed)


@dataclass(frozen=True, slots=True)
class IndexedObjectOf:
    """Parser for a mapping whose values all pass `items`, whatever the keys."""

    items: Parser[Any]

    def __call__(self, value: Any) -> Result[Any, dict[Any, Any]]:
        if value is None or value is UNDEFINED:
            return failure(value, "value is null or undefined")
        if type_tag(value) != "object":
            return fail_type_of(value)

        parsed: dict[Any, Any] = {}

        for key, member in value.items():
            result = self.items(member)
            if is_failure(result):
                return keyed_failure(value, key, result)
            parsed[key] = result.value

        return success(parsed)


@dataclass(frozen=True, slots=True)
class Exactly:
    """Parser that only accepts a single scalar literal."""

    option: str | int | float | bool

    def __call__(self, value: Any) -> Result[Any, Any]:
        # Tags are compared first so that True does not match 1
        if type_tag(value) == type_tag(self.option) and value == self.option:
            return success(self.option)
        return failure(value, f"is not {display(self.option)}")


@dataclass(frozen=True, slots=True)
class OneOf:
    """Parser that succeeds with the first of `parsers` to succeed."""

    parsers: tuple[Parser[Any], ...]

    def __call__(self, value: Any) -> Result[Any, Any]:
        for parser in self.parsers:
            result = parser(value)
            if not is_failure(result):
                return result

        return failure(
            value,
            f"'{display(value)}' did not match any of {len(self.parsers)} validators",
        )


@dataclass(frozen=True, slots=True)
class Mapped:
    """
    Parser that feeds the value parsed by `parser` into `fn`.

    Failures from either step report the input given to this parser.
    """

    parser: Parser[Any]
    fn: Callable[[Any], Result[Any, Any]]

    def __call__(self, value: Any) -> Result[Any, Any]:
        result = self.parser(value)
        if is_failure(result):
            return reframe(value, result)

        mapped = self.fn(result.value)
        if not isinstance(mapped, (Success, Failure)):
            raise TypeError(
                f"map_parser function must return a Result, got {type(mapped).__name__}"
            )
        if isinstance(mapped, Failure):
            return reframe(value, mapped)
        return mapped
