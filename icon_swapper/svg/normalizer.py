"""Normalization of untrusted SVG markup into canonical icon markup.

Every supported shape becomes a single ``<path>`` scaled onto the 0-100
canvas, painted with ``currentColor`` and stripped of anything that is not a
presentation attribute. The ``<svg>`` wrapper itself is not emitted: the
result is the inner markup stored for an icon.
"""

from __future__ import annotations

import logging
from xml.etree.ElementTree import Element

from icon_swapper.svg.parser import CANVAS_SIZE, local_name, parse_svg_string, serialize
from icon_swapper.svg.pathdata import DEFAULT_PRECISION, format_number, scale_path_data
from icon_swapper.svg.shapes import ShapeKind, classify, shape_to_path
from icon_swapper.svg.viewbox import get_max_viewbox

logger = logging.getLogger(__name__)

CURRENT_COLOR = "currentColor"

# Attributes that survive normalization, besides the rebuilt "d".
PRESENTATION_ATTRIBUTES = (
    "fill",
    "stroke",
    "opacity",
    "stroke-width",
    "fill-opacity",
    "stroke-opacity",
    "fill-rule",
    "clip-rule",
    "stroke-linecap",
    "stroke-linejoin",
    "stroke-miterlimit",
)

COLOR_ATTRIBUTES = ("fill", "stroke")

# Elements removed together with their subtree.
UNSAFE_TAGS = frozenset({"script", "style", "foreignObject"})


class SVGNormalizer:
    """Rewrites SVG trees into scaled, path-only icon markup.

    Args:
        precision: Decimal places kept for coordinates and stroke widths.
    """

    def __init__(self, precision: int = DEFAULT_PRECISION) -> None:
        self.precision = precision

    def normalize(self, markup: str) -> str | None:
        """Parse and normalize ``markup``.

        Returns:
            Normalized inner markup, or None when the markup cannot be
            parsed or normalized (the error is logged, never raised).
        """
        try:
            return self.normalize_tree(parse_svg_string(markup))
        except Exception as e:
            logger.error("Error parsing SVG: %s", e)
            return None

    def normalize_tree(self, root: Element) -> str:
        """Normalize the children of a parsed ``<svg>`` root."""
        max_viewbox = get_max_viewbox(root)
        if max_viewbox:
            factor = CANVAS_SIZE / max_viewbox
        else:
            logger.warning("SVG has no usable viewBox, coordinates left unscaled")
            factor = 1.0

        parts = []
        for child in root:
            node = self.normalize_node(child, factor)
            if node is not None:
                parts.append(serialize(node))
        return "".join(parts)

    def normalize_node(self, element: Element, factor: float) -> Element | None:
        """Return a normalized copy of ``element``, or None to drop it."""
        tag = local_name(element.tag)
        kind = classify(element)

        if kind.is_shape:
            return self._normalize_shape(element, kind, factor)

        if tag in UNSAFE_TAGS:
            logger.warning("Dropping <%s> element", tag)
            return None

        if not tag:
            return None

        if kind is ShapeKind.OTHER:
            logger.info("Unsupported element <%s> passed through unscaled", tag)

        node = Element(tag, self._filter_attributes(element, factor))
        for child in element:
            normalized = self.normalize_node(child, factor)
            if normalized is not None:
                node.append(normalized)
        return node

    def _normalize_shape(self, element: Element, kind: ShapeKind, factor: float) -> Element | None:
        d = shape_to_path(element, kind)
        if d:
            d = scale_path_data(d, factor, self.precision)
        if not d:
            logger.debug("Dropping <%s> without drawable geometry", kind.value)
            return None

        attrs = {"d": d}
        attrs.update(self._filter_attributes(element, factor))
        if "fill" not in attrs:
            attrs["fill"] = CURRENT_COLOR
        if "stroke-width" in attrs and "stroke" not in attrs:
            attrs["stroke"] = CURRENT_COLOR
        return Element("path", attrs)

    def _filter_attributes(self, element: Element, factor: float) -> dict[str, str]:
        attrs: dict[str, str] = {}
        for name, value in element.attrib.items():
            if name not in PRESENTATION_ATTRIBUTES:
                continue
            if name in COLOR_ATTRIBUTES:
                value = CURRENT_COLOR
            elif name == "stroke-width":
                value = self._scale_length(value, factor)
            attrs[name] = value
        return attrs

    def _scale_length(self, value: str, factor: float) -> str:
        try:
            return format_number(float(value) * factor, self.precision)
        except ValueError:
            return value


_default = SVGNormalizer()


def normalize_markup(markup: str) -> str | None:
    """Normalize ``markup`` with the default precision; None on failure."""
    return _default.normalize(markup)
