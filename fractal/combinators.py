"""
Structural combinators for fractal.

Provides factory functions that build parsers out of other parsers. Failures
inside a structure are reported for the whole structure, with the path to the
failing member prefixed to the reason.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable

from .core import ArrayOf, Exactly, IndexedObjectOf, Mapped, ObjectOf, OneOf
from .parsers import check_parser
from .result import Parser, Result


def parse_object_of(parsers: Mapping[str, Parser[Any]]) -> ObjectOf:
    """
    Parse a record with the fields and value parsers provided.

    Missing keys are handed to their parser as UNDEFINED, so wrap a parser
    in voidable() to make its field optional. Keys not listed are dropped.

        parse = parse_object_of({"name": parse_string, "age": parse_number})

        parse({"name": "Ellen Ripley", "age": 25})
        # Success({"name": "Ellen Ripley", "age": 25})

        parse({"name": "Ellen Ripley"})
        # Failure({"name": "Ellen Ripley"}, "Failed at 'age': typeof value is undefined")
    """
    if not isinstance(parsers, Mapping):
        raise TypeError(
            f"parse_object_of expects a mapping of parsers, got {type(parsers).__name__}"
        )
    return ObjectOf(
        MappingProxyType({key: check_parser(parser) for key, parser in parsers.items()})
    )


def parse_array_of(parser: Parser[Any]) -> ArrayOf:
    """
    Parse a list or tuple whose members each pass the parser.

        parse = parse_array_of(parse_object_of({"name": parse_string}))

        result = parse(json.loads('[{"name": "Ellen Ripley"}]'))
        names = [person["name"] for person in value(result)]
    """
    return ArrayOf(check_parser(parser))


def parse_indexed_object_of(parser: Parser[Any]) -> IndexedObjectOf:
    """
    Parse a mapping whose values each pass the parser, keeping every key.

        parse = parse_indexed_object_of(parse_object_of({"name": parse_string}))
        result = parse({"a": {"name": "Ellen Ripley"}})
    """
    return IndexedObjectOf(check_parser(parser))


def parse_exactly(option: str | int | float | bool) -> Exactly:
    """
    Parse a value exactly equal to `option`. Useful for enumerations:

        parse_role = parse_one_of(parse_exactly("admin"), parse_exactly("user"))
    """
    if not isinstance(option, (str, int, float, bool)):
        raise TypeError(
            f"parse_exactly expects a str, int, float or bool, got {type(option).__name__}"
        )
    return Exactly(option)


def parse_one_of(parser: Parser[Any], *parsers: Parser[Any]) -> Parser[Any]:
    """
    Parse with the first parser that succeeds, tried in order.

        parse = parse_one_of(parse_number, parse_exactly("Infinity"))
        parse(1)            # Success(1)
        parse("Infinity")   # Success("Infinity")
        parse(None)         # Failure(None, "'null' did not match any of 2 validators")

    With a single parser, that parser is returned as is.
    """
    check_parser(parser)
    if not parsers:
        return parser
    return OneOf((parser, *(check_parser(p) for p in parsers)))


def map_parser(parser: Parser[Any], fn: Callable[[Any], Result[Any, Any]]) -> Mapped:
    """
    Chain a parser into a function that returns a new Result.

    For example, a parser that requires a positive number:

        parse = map_parser(
            parse_number,
            lambda num: success(num) if num > 0 else failure(num, f"{num} is not positive"),
        )

        parse(0)   # Failure(0, "0 is not positive")
        parse(1)   # Success(1)

    Any failure, from `parser` or from `fn`, carries the value given to the
    mapped parser.
    """
    if not callable(fn):
        raise TypeError(f"map_parser expects a callable, got {type(fn).__name__}")
    return Mapped(check_parser(parser), fn)
