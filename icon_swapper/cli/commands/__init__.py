"""CLI commands for icon-swapper."""

from icon_swapper.cli.commands.icons import list_icons, revert, set_icon, show
from icon_swapper.cli.commands.normalize import normalize
from icon_swapper.cli.commands.transfer import export, import_

__all__ = ["list_icons", "show", "set_icon", "revert", "normalize", "export", "import_"]
