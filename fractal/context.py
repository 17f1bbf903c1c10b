"""
Context manager for parsing configuration (e.g., reason text length).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for the cap on rendered values in failure reasons
_display_limit: ContextVar[int | None] = ContextVar("display_limit", default=None)


def get_display_limit() -> int | None:
    """Return the current cap on rendered value length, or None."""
    return _display_limit.get()


@contextmanager
def parsing_context(*, display_limit: int | None = None):
    """
    Context manager for parsing configuration.

    Args:
        display_limit: Maximum number of characters used to render a value
                       inside a failure reason. Longer renderings are cut and
                       end with "...". None (default) leaves them whole.

    Example:
        from fractal import parse_one_of, parse_number, parsing_context

        parse = parse_one_of(parse_number, parse_boolean)

        # Normal: the whole value is rendered
        parse("a very long string ...")

        # Limited: the reason stays short
        with parsing_context(display_limit=10):
            parse("a very long string ...")
    """
    if display_limit is not None and display_limit < 1:
        raise ValueError(f"display_limit must be positive, got {display_limit}")

    token = _display_limit.set(display_limit)
    try:
        yield
    finally:
        _display_limit.reset(token)
