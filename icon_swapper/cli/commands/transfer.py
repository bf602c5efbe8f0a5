"""Export and import commands - share icon configurations."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TextIO

import click
from rich.console import Console
from rich.markup import escape

from icon_swapper.cli.session import open_session
from icon_swapper.exceptions import IconSwapperError
from icon_swapper.transfer import EXPORT_SUFFIX, export_icons, import_icons

console = Console(stderr=True)


@click.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Write to a file instead of stdout ({EXPORT_SUFFIX} suffix added if missing)",
)
@click.pass_context
def export(ctx: click.Context, output: Path | None) -> None:
    """Export the icon configuration as YAML."""
    session = asyncio.run(open_session(ctx.obj["config"]))
    document = export_icons(session.manager)

    if output is None:
        click.echo(document, nl=False)
        return

    if not output.suffix:
        output = output.with_suffix(EXPORT_SUFFIX)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, encoding="utf-8")
    console.print(
        f"[green]Exported[/green] {len(session.manager.icons)} icons to {escape(str(output))}"
    )


@click.command("import")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_context
def import_(ctx: click.Context, source: TextIO) -> None:
    """Import an icon configuration from SOURCE ('-' for stdin).

    Warning: this replaces any existing icon configuration.
    """
    text = source.read()

    async def run() -> int:
        session = await open_session(ctx.obj["config"])
        await import_icons(session.manager, text)
        return len(session.manager.icons)

    try:
        count = asyncio.run(run())
    except (IconSwapperError, OSError) as e:
        console.print(f"[red]Error importing icon settings:[/red] {escape(str(e))}")
        raise SystemExit(1) from e

    console.print(f"[green]Imported[/green] {count} icons")
