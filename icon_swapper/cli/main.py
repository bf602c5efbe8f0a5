"""icon-swapper command line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from icon_swapper import __version__
from icon_swapper.cli.commands import (
    export,
    import_,
    list_icons,
    normalize,
    revert,
    set_icon,
    show,
)
from icon_swapper.config import LOG_LEVELS, Config
from icon_swapper.exceptions import ConfigError

console = Console(stderr=True)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="JSON file holding the customized icons",
)
@click.option(
    "--icons-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory of built-in icon SVG files",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity",
)
@click.version_option(__version__, prog_name="icon-swapper")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    data_file: Path | None,
    icons_dir: Path | None,
    log_level: str | None,
) -> None:
    """Replace named icons with custom SVG glyphs."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1) from e

    if data_file:
        config.data_file = data_file
    if icons_dir:
        config.icons_dir = icons_dir
    if log_level:
        config.log_level = log_level.upper()

    setup_logging(config.log_level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


cli.add_command(list_icons)
cli.add_command(show)
cli.add_command(set_icon)
cli.add_command(revert)
cli.add_command(normalize)
cli.add_command(export)
cli.add_command(import_)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
