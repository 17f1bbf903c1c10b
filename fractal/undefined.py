"""
UNDEFINED sentinel for missing or uninitialized values.
"""

from typing import Any


class _Undefined:
    """
    Marker for a value that is absent, as opposed to present and None.

    A single instance exists; compare with ``is``:

        parse_object_of({"age": voidable(parse_number)})({})
        # Success({"age": UNDEFINED})
    """

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: Any) -> "_Undefined":
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()
