"""
Exception boundary for callers that prefer raising over branching on results.
"""

import logging
from typing import Any

from .result import Result, is_success

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised by expect() when a result is a Failure."""

    def __init__(self, value: Any, reason: str):
        super().__init__(reason)
        self.value = value
        self.reason = reason

    def __repr__(self) -> str:
        return f"ParseError({self.reason!r})"

    def __reduce__(self):
        return (type(self), (self.value, self.reason))


def expect(result: Result[Any, Any]) -> Any:
    """
    Return the value of a Success, or raise ParseError for a Failure.

        person = expect(parse_person(json.loads(body)))
    """
    if is_success(result):
        return result.value

    logger.debug("Parse failed: %s", result.reason)
    raise ParseError(result.value, result.reason)
