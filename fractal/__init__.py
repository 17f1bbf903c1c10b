"""
Fractal - composable parsers that turn decoded data into typed values.

Usage:
    from fractal import parse_object_of, parse_string, parse_number, is_success

    parse_person = parse_object_of({
        "name": parse_string,
        "age": parse_number,
    })

    result = parse_person(json.loads(body))
    if is_success(result):
        person = result.value
    else:
        print(result.reason)
"""

from .combinators import (
    map_parser,
    parse_array_of,
    parse_exactly,
    parse_indexed_object_of,
    parse_object_of,
    parse_one_of,
)
from .context import get_display_limit, parsing_context
from .errors import ParseError, expect
from .lib.values import display, type_tag
from .models import parse_model, to_pydantic
from .parsers import (
    optional,
    parse_any_value,
    parse_array,
    parse_boolean,
    parse_number,
    parse_object,
    parse_string,
    parse_undefined,
    voidable,
)
from .result import (
    Failure,
    Parser,
    Result,
    Success,
    failure,
    is_failure,
    is_success,
    map_failure,
    map_result,
    map_success,
    success,
    value,
)
from .undefined import UNDEFINED

__all__ = [
    # Result types
    "Success",
    "Failure",
    "Result",
    "Parser",
    "success",
    "failure",
    "value",
    "is_success",
    "is_failure",
    "map_success",
    "map_failure",
    "map_result",
    # Scalars
    "UNDEFINED",
    "parse_string",
    "parse_number",
    "parse_boolean",
    "parse_undefined",
    "parse_any_value",
    "parse_object",
    "parse_array",
    "optional",
    "voidable",
    # Combinators
    "parse_object_of",
    "parse_array_of",
    "parse_indexed_object_of",
    "parse_exactly",
    "parse_one_of",
    "map_parser",
    # Values
    "type_tag",
    "display",
    # Errors
    "ParseError",
    "expect",
    # Config
    "parsing_context",
    "get_display_limit",
    # Pydantic
    "parse_model",
    "to_pydantic",
]
