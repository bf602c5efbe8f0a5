"""SVG parsing and normalization for icon-swapper.

This subpackage provides:
- Safe SVG parsing (defusedxml) and serialization
- viewBox resolution and shape-to-path conversion
- The normalizer producing canonical 0-100 icon markup
"""

from icon_swapper.svg.normalizer import SVGNormalizer, normalize_markup
from icon_swapper.svg.parser import (
    CANVAS_SIZE,
    is_valid_svg,
    parse_svg_string,
    serialize,
    wrap_icon,
)
from icon_swapper.svg.viewbox import get_max_viewbox

__all__ = [
    "CANVAS_SIZE",
    "SVGNormalizer",
    "get_max_viewbox",
    "is_valid_svg",
    "normalize_markup",
    "parse_svg_string",
    "serialize",
    "wrap_icon",
]
