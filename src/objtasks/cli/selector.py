"""CLI commands: objtasks selector / objtasks combine."""

from __future__ import annotations

import sys

import click

from objtasks.errors import SelectorError
from objtasks.selector import SelectorBuilder

# CLI spelling -> builder method
_FRAGMENTS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


class _Literal:
    def __init__(self, text: str) -> None:
        self.text = text

    def stringify(self) -> str:
        return self.text


def _split_fragment(raw: str) -> tuple[str, str]:
    kind, sep, value = raw.partition("=")
    if not sep or kind not in _FRAGMENTS:
        raise click.BadParameter(
            f"{raw!r} is not KIND=VALUE with KIND one of: {', '.join(_FRAGMENTS)}",
            param_hint="FRAGMENTS",
        )
    return kind, value


@click.command()
@click.argument("fragments", nargs=-1, required=True)
def selector(fragments: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE fragments, applied in the given order.

    Example: objtasks selector element=a 'attr=href$=".png"' pseudo-class=focus
    """
    parts = [_split_fragment(raw) for raw in fragments]
    builder = SelectorBuilder()
    try:
        for kind, value in parts:
            getattr(builder, _FRAGMENTS[kind])(value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(builder.stringify())


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two rendered selectors with a combinator (' ', '+', '~', '>')."""
    click.echo(SelectorBuilder().combine(_Literal(left), combinator, _Literal(right)).stringify())
