"""Fixed defaults for header-dump."""

from __future__ import annotations


def default_values() -> dict:
    """Return the literal field values the header is populated with."""
    return {
        "value1": "foo",
        "value2": -2593,
        "value3": 29384,
    }


def default_format() -> str:
    """Return the rendering used when none is requested."""
    return "debug"
