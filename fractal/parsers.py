"""
Scalar parsers for fractal.

Each parser accepts any value and succeeds only when the value's category
matches exactly; nothing is coerced.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .core import OptionalOf, VoidableOf
from .lib.failure_helpers import fail_type_of
from .lib.values import type_tag
from .result import Parser, Result, Success, success
from .undefined import UNDEFINED, _Undefined


def parse_string(value: Any) -> Result[Any, str]:
    """
    Parse a string.

        result = parse_string("a")
        if is_success(result):
            text: str = result.value
        else:
            raise ValueError(result.reason)
    """
    return success(value) if type_tag(value) == "string" else fail_type_of(value)


def parse_number(value: Any) -> Result[Any, int | float]:
    """Parse an int or float. Booleans are not numbers; NaN and infinities are."""
    return success(value) if type_tag(value) == "number" else fail_type_of(value)


def parse_boolean(value: Any) -> Result[Any, bool]:
    """Parse True or False."""
    return success(value) if type_tag(value) == "boolean" else fail_type_of(value)


def parse_undefined(value: Any) -> Result[Any, _Undefined]:
    """
    Parse the UNDEFINED sentinel. None is not undefined.

        parse_undefined(UNDEFINED)   # Success(UNDEFINED)
        parse_undefined(None)        # Failure(None, "typeof value is null")
    """
    return success(UNDEFINED) if value is UNDEFINED else fail_type_of(value)


def parse_any_value(value: Any) -> Success[Any]:
    """
    Accept any value as is. For fields that are not clearly documented.

        parse = parse_object_of({"something": parse_any_value})
    """
    return success(value)


def parse_object(value: Any) -> Result[Any, Mapping[Any, Any]]:
    """Parse any mapping. None is rejected."""
    return success(value) if type_tag(value) == "object" else fail_type_of(value)


def parse_array(value: Any) -> Result[Any, Sequence[Any]]:
    """Parse a list or tuple. Strings are not arrays."""
    return success(value) if type_tag(value) == "array" else fail_type_of(value)


def optional(parser: Parser[Any]) -> OptionalOf:
    """
    Allow None as a successful value for any parser.

        parse = optional(parse_string)

        is_success(parse("hello"))    # True
        is_success(parse(None))       # True
        is_success(parse(5))          # False
        is_success(parse(UNDEFINED))  # False, parse_string decides
    """
    return OptionalOf(check_parser(parser))


def voidable(parser: Parser[Any]) -> VoidableOf:
    """
    Allow UNDEFINED as a successful value for any parser.

        parse = voidable(parse_number)

        is_success(parse(1))          # True
        is_success(parse("1"))        # False
        is_success(parse(UNDEFINED))  # True
        is_success(parse(None))       # False, parse_number decides
    """
    return VoidableOf(check_parser(parser))


def check_parser(parser: Any) -> Parser[Any]:
    """Reject anything that cannot be called as a parser."""
    if not callable(parser):
        raise TypeError(f"Expected a parser, got {type(parser).__name__}")
    return parser
