"""Textual renderings of a header record.

Every renderer returns a single line without a trailing newline:
- debug - Python repr of the record
- go    - Go-syntax representation, as printed by the %#v verb
- json  - compact JSON object
- yaml  - YAML flow mapping
"""

from __future__ import annotations

import json
from dataclasses import fields

import yaml

from .models import HeaderVersionOne


def render_debug(record: HeaderVersionOne) -> str:
    return repr(record)


def _go_value(value, unsigned: bool) -> str:
    if isinstance(value, str):
        return json.dumps(value)
    if unsigned:
        return hex(value)
    return str(value)


def render_go(record: HeaderVersionOne) -> str:
    """Render like Go's %#v on a struct pointer: &main.header{value1:"foo", ...}."""
    name = type(record).__name__
    type_name = name[0].lower() + name[1:]
    parts = [
        f"{f.name}:{_go_value(getattr(record, f.name), f.metadata.get('unsigned', False))}"
        for f in fields(record)
    ]
    return f"&main.{type_name}{{{', '.join(parts)}}}"


def render_json(record: HeaderVersionOne) -> str:
    return json.dumps(record.to_dict())


def render_yaml(record: HeaderVersionOne) -> str:
    dumped = yaml.safe_dump(
        record.to_dict(),
        default_flow_style=True,
        sort_keys=False,
        width=float("inf"),
    )
    return dumped.strip()


RENDERERS = {
    "debug": render_debug,
    "go": render_go,
    "json": render_json,
    "yaml": render_yaml,
}


def render(record: HeaderVersionOne, fmt: str = "debug") -> str:
    """Render a record in the named format."""
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise ValueError(
            f"Unknown format '{fmt}'. Expected one of: {', '.join(RENDERERS)}"
        ) from None
    return renderer(record)
