"""
Pydantic interop for fractal parsers.

Provides parse_model() and to_pydantic().
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal
from typing import Optional as TypingOptional
from typing import Union as TypingUnion

from pydantic import BaseModel, ValidationError, create_model

from .core import ArrayOf, Exactly, IndexedObjectOf, ObjectOf, OneOf, OptionalOf, VoidableOf
from .lib.failure_helpers import fail_type_of
from .parsers import (
    parse_any_value,
    parse_array,
    parse_boolean,
    parse_number,
    parse_object,
    parse_string,
)
from .result import Parser, Result, failure, success

_SCALAR_TYPES: dict[Any, Any] = {
    parse_string: str,
    parse_number: TypingUnion[int, float],
    parse_boolean: bool,
    parse_any_value: Any,
    parse_object: dict[str, Any],
    parse_array: list[Any],
}


def parse_model(model: type[BaseModel]) -> Parser[BaseModel]:
    """
    Parse a mapping into an instance of a Pydantic model.

    Validation runs in strict mode so that, like every other parser, values
    are never coerced. Only the first Pydantic error is reported:

        class Person(BaseModel):
            name: str

        parse_model(Person)({"name": 5})
        # Failure({"name": 5}, "Failed at 'name': Input should be a valid string")
    """
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        raise TypeError(f"parse_model expects a BaseModel subclass, got {model!r}")

    def parse(value: Any) -> Result[Any, BaseModel]:
        if not isinstance(value, Mapping):
            return fail_type_of(value)
        try:
            return success(model.model_validate(dict(value), strict=True))
        except ValidationError as e:
            return failure(value, _first_error_reason(e))

    return parse


def _first_error_reason(error: ValidationError) -> str:
    """Render the first Pydantic error with one path prefix per location."""
    first = error.errors()[0]
    reason = first["msg"]
    for key in reversed(first["loc"]):
        reason = f"Failed at '{key}': {reason}"
    return reason


def to_pydantic(name: str, parsers: Mapping[str, Parser[Any]] | ObjectOf) -> type:
    """
    Compile a record parser to a Pydantic model.

    Args:
        name: Name of the generated model class
        parsers: A parse_object_of() parser or the mapping given to it

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        Person = to_pydantic("Person", {
            "name": parse_string,
            "nickname": optional(parse_string),
        })
        person = Person(name="Ellen Ripley", nickname=None)
    """
    fields_map = parsers.fields if isinstance(parsers, ObjectOf) else parsers
    if not isinstance(fields_map, Mapping):
        raise TypeError("to_pydantic expects a mapping of parsers")

    fields: dict[str, Any] = {}

    for key, parser in fields_map.items():
        fields[key] = _extract_pydantic_field(parser, key)

    return create_model(name, **fields)


def _extract_pydantic_field(parser: Any, key: str) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a parser."""
    match parser:
        case OptionalOf(parser=inner) | VoidableOf(parser=inner):
            inner_type, _ = _extract_pydantic_field(inner, key)
            return (TypingOptional[inner_type], None)
        case ObjectOf():
            return (to_pydantic(key.title().replace("_", ""), parser), ...)
        case ArrayOf(items=items):
            item_type, _ = _extract_pydantic_field(items, key)
            return (list[item_type], ...)  # type: ignore[valid-type]
        case IndexedObjectOf(items=items):
            item_type, _ = _extract_pydantic_field(items, key)
            return (dict[str, item_type], ...)  # type: ignore[valid-type]
        case Exactly(option=option):
            return (Literal[option], ...)
        case OneOf(parsers=options):
            types = tuple(_extract_pydantic_field(p, key)[0] for p in options)
            if Any in types:
                return (Any, ...)
            return (TypingUnion[types], ...)

    return (_scalar_type(parser), ...)


def _scalar_type(parser: Any) -> Any:
    for scalar, hint in _SCALAR_TYPES.items():
        if parser is scalar:
            return hint
    return Any
