"""Icon commands - list, show, set and revert icons."""

from __future__ import annotations

import asyncio
from typing import TextIO

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from icon_swapper.catalog import ICON_NAMES
from icon_swapper.cli.session import open_session
from icon_swapper.svg.parser import is_valid_svg, wrap_icon

console = Console()


@click.command("list")
@click.option("--customized", is_flag=True, help="Only show customized icons")
@click.pass_context
def list_icons(ctx: click.Context, customized: bool) -> None:
    """List known icons and whether they are customized."""
    session = asyncio.run(open_session(ctx.obj["config"]))
    manager = session.manager

    names = list(ICON_NAMES)
    names += [n for n in session.registry.names() if n not in names]
    names += [n for n in manager.icons if n not in names]

    table = Table(title="Icons")
    table.add_column("Name", style="cyan")
    table.add_column("Status", style="green")

    count = 0
    for name in names:
        overridden = manager.is_overridden(name)
        if customized and not overridden:
            continue
        table.add_row(name, "customized" if overridden else "default")
        count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} icons, {len(manager.icons)} customized")


@click.command()
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, name: str) -> None:
    """Print the markup NAME currently renders with."""
    session = asyncio.run(open_session(ctx.obj["config"]))

    markup = session.registry.lookup(name)
    if markup is None:
        console.print(f"[red]Error:[/red] Unknown icon: {escape(name)}")
        raise SystemExit(1)

    click.echo(wrap_icon(markup))


@click.command("set")
@click.argument("name")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_context
def set_icon(ctx: click.Context, name: str, source: TextIO) -> None:
    """Replace icon NAME with the SVG in SOURCE ('-' for stdin).

    Input that is not SVG markup restores the default icon.
    """
    svg = source.read().strip()

    async def run() -> str | None:
        session = await open_session(ctx.obj["config"])
        if svg and is_valid_svg(svg):
            return await session.manager.set_icon(name, svg)
        await session.manager.revert_icon(name)
        return ""

    result = asyncio.run(run())

    if result is None:
        console.print(f"[red]Error:[/red] Could not parse SVG, {escape(name)} left unchanged")
        raise SystemExit(1)
    if result == "":
        console.print(f"[yellow]Not an SVG:[/yellow] {escape(name)} restored to default")
        return
    console.print(f"[green]Icon set:[/green] {escape(name)}")


@click.command()
@click.argument("name", required=False)
@click.option("--all", "revert_all", is_flag=True, help="Restore every customized icon")
@click.pass_context
def revert(ctx: click.Context, name: str | None, revert_all: bool) -> None:
    """Restore icon NAME (or all icons) to the default."""
    if not name and not revert_all:
        console.print("[red]Error:[/red] Give an icon name or --all")
        raise SystemExit(1)

    async def run() -> int:
        session = await open_session(ctx.obj["config"])
        manager = session.manager
        if revert_all:
            count = len(manager.icons)
            await manager.revert_all()
            return count
        was_overridden = manager.is_overridden(name)
        await manager.revert_icon(name)
        return int(was_overridden)

    count = asyncio.run(run())
    console.print(f"[green]Restored:[/green] {count} icons")
