"""icon-swapper: Replace named icons with custom SVG glyphs.

This library provides:
- Safe normalization of untrusted SVG markup into path-only, 0-100 scaled,
  ``currentColor`` icon markup
- An icon registry that live-patches rendered icons on install
- An async icon manager with persistence, bulk revert, import and export

Example:
    >>> from icon_swapper import IconManager, IconRegistry, JsonIconStore
    >>> store = JsonIconStore(Path("icons.json"))
    >>> manager = IconManager(IconRegistry(), store.save, store.load)
    >>> await manager.set_icon("gear", '<svg viewBox="0 0 24 24">...</svg>')
"""

from icon_swapper.catalog import ICON_NAMES, load_icon_set
from icon_swapper.config import Config
from icon_swapper.exceptions import (
    ConfigError,
    IconSwapperError,
    ImportDocumentError,
    NormalizationError,
    StorageError,
    SVGParseError,
)
from icon_swapper.manager import IconManager
from icon_swapper.registry import IconRegistry, IconSink, RenderedIcon
from icon_swapper.storage import JsonIconStore
from icon_swapper.svg import SVGNormalizer, is_valid_svg, normalize_markup, wrap_icon
from icon_swapper.transfer import export_icons, import_icons, parse_icon_document

__version__ = "0.1.0"

__all__ = [
    # Main API
    "IconManager",
    "IconRegistry",
    "IconSink",
    "RenderedIcon",
    "JsonIconStore",
    "Config",
    # SVG handling
    "SVGNormalizer",
    "normalize_markup",
    "is_valid_svg",
    "wrap_icon",
    # Catalog and transfer
    "ICON_NAMES",
    "load_icon_set",
    "export_icons",
    "import_icons",
    "parse_icon_document",
    # Exceptions
    "IconSwapperError",
    "SVGParseError",
    "NormalizationError",
    "ImportDocumentError",
    "StorageError",
    "ConfigError",
    # Metadata
    "__version__",
]
