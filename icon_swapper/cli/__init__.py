"""Command line interface for icon-swapper."""

from icon_swapper.cli.main import cli, main

__all__ = ["cli", "main"]
