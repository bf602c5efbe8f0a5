"""Normalize command - print the canonical form of an SVG file."""

from __future__ import annotations

from typing import TextIO

import click
from rich.console import Console

from icon_swapper.svg.normalizer import SVGNormalizer
from icon_swapper.svg.parser import is_valid_svg, wrap_icon

console = Console(stderr=True)


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--wrap", is_flag=True, help="Wrap output in <svg viewBox=\"0 0 100 100\">")
@click.option("-p", "--precision", type=int, help="Decimal places for coordinates")
@click.pass_context
def normalize(ctx: click.Context, source: TextIO, wrap: bool, precision: int | None) -> None:
    """Normalize the SVG in SOURCE ('-' for stdin) and print it."""
    config = ctx.obj["config"]
    svg = source.read().strip()

    if not is_valid_svg(svg):
        console.print("[red]Error:[/red] Input is not an SVG document")
        raise SystemExit(1)

    normalizer = SVGNormalizer(precision=config.precision if precision is None else precision)
    result = normalizer.normalize(svg)
    if result is None:
        console.print("[red]Error:[/red] Could not parse SVG")
        raise SystemExit(1)

    click.echo(wrap_icon(result) if wrap else result)
