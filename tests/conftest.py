from typing import Any

import pytest


@pytest.fixture(scope="function")
def album() -> dict[str, Any]:
    return {
        "artist": "The Beatles",
        "name": "Revolver",
        "yearReleased": 1966,
    }


@pytest.fixture(scope="function")
def nested_record() -> dict[str, Any]:
    return {
        "name": "Valid",
        "child": {"id": 1},
    }
