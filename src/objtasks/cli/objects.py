"""CLI commands: objtasks rectangle / objtasks json."""

from __future__ import annotations

import sys

import click

from objtasks.config import JsonConfig
from objtasks.errors import SerializationError
from objtasks.rectangle import Rectangle
from objtasks.serialization import from_json, get_json


class _Document:
    """Plain attribute bag used to round-trip JSON objects."""


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def rectangle(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(f"{Rectangle(width, height).get_area():g}")


@click.command("json")
@click.option("--indent", type=int, default=None, help="Indent nested values")
@click.option("--sort-keys", is_flag=True, help="Sort object keys")
@click.argument("text")
def json_cmd(text: str, indent: int | None, sort_keys: bool) -> None:
    """Reformat a JSON object."""
    config = JsonConfig(indent=indent, sort_keys=sort_keys)
    try:
        click.echo(get_json(from_json(_Document, text), config))
    except SerializationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
