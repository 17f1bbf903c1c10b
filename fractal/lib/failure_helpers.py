"""
Helper functions for building failures and tracking their paths.
"""

from typing import Any

from ..result import Failure, failure
from .values import type_tag


def fail_type_of(value: Any) -> Failure[Any]:
    """Failure for a value whose category does not match the parser."""
    return failure(value, "typeof value is " + type_tag(value))


def keyed_failure(value: Any, key: str | int, child: Failure[Any]) -> Failure[Any]:
    """
    Re-frame a child failure at the level of its container.

    The new failure carries the container `value` and prefixes the child
    reason with the key or index it was found at, so nested failures read
    outermost first:

        Failed at 'child': Failed at 'id': typeof value is string
    """
    return failure(value, f"Failed at '{key}': {child.reason}")


def reframe(value: Any, child: Failure[Any]) -> Failure[Any]:
    """Keep the child reason but report the outer input as the value."""
    return failure(value, child.reason)
