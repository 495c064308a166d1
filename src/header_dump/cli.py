"""header-dump CLI - print a debug representation of a header record."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Sequence

import typer

from . import __version__
from .config import default_format
from .models import default_header
from .render import render


class OutputFormat(str, Enum):
    debug = "debug"
    go = "go"
    json = "json"
    yaml = "yaml"


app = typer.Typer(help="Print a debug representation of a header record.")


def version_callback(v: bool) -> None:
    if v:
        typer.echo(f"v{__version__}")
        raise typer.Exit()


@app.command()
def show(
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Rendering of the header"),
    ] = OutputFormat(default_format()),
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Describe the rendering on stderr"),
    ] = False,
    version: bool = typer.Option(
        False, "-v", "--version", is_eager=True, callback=version_callback
    ),
) -> None:
    """Build the header from its literal values and print it."""
    header = default_header()
    if verbose:
        typer.echo(f"Rendering {type(header).__name__} as {fmt.value}", err=True)
    typer.echo(render(header, fmt.value))


def main(argv: Sequence[str] | None = None) -> int:
    return app(
        args=list(argv) if argv is not None else None,
        standalone_mode=False,
    )
