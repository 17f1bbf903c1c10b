"""
Helpers that classify and render runtime values for failure reasons.
"""

import json
import math
from collections.abc import Mapping
from typing import Any

from ..context import get_display_limit
from ..undefined import UNDEFINED


def type_tag(value: Any) -> str:
    """
    Return the category tag of a decoded value.

    Tags: "undefined", "null", "boolean", "number", "string", "array",
    "object". Values outside these categories are tagged with their class name.
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    # bool is checked before number since bool subclasses int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def display(value: Any) -> str:
    """
    Render a value for use inside a failure reason.

    Examples:
        display(None)        # "null"
        display(True)        # "true"
        display(10.0)        # "10"
        display("abc")       # "abc"
        display([1, "a"])    # '[1,"a"]'
    """
    text = _render(value)
    limit = get_display_limit()
    if limit is not None and len(text) > limit:
        return text[:limit] + "..."
    return text


def _render(value: Any) -> str:
    tag = type_tag(value)

    if tag in ("undefined", "null"):
        return tag
    if tag == "boolean":
        return "true" if value else "false"
    if tag == "number":
        return _render_number(value)
    if tag == "string":
        return value
    if tag in ("array", "object"):
        try:
            return json.dumps(value, separators=(",", ":"), default=repr)
        except (TypeError, ValueError):
            return repr(value)
    return repr(value)


def _render_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
