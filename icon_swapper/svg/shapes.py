"""Shape classification and shape-to-path geometry.

Each primitive SVG shape is rewritten as equivalent path data in its own
(unscaled) coordinates. Rects, circles and ellipses are outlined by
svgelements; point lists and lines are written directly. Scaling happens
afterwards on the path data, so every shape kind goes through the same number
handling.
"""

from __future__ import annotations

import re
from enum import Enum
from xml.etree.ElementTree import Element

import svgelements

from icon_swapper.svg.parser import local_name

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


class ShapeKind(Enum):
    """Closed set of element kinds the normalizer distinguishes."""

    RECT = "rect"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    LINE = "line"
    PATH = "path"
    GROUP = "g"
    OTHER = "other"

    @property
    def is_shape(self) -> bool:
        return self not in (ShapeKind.GROUP, ShapeKind.OTHER)


_BY_TAG = {kind.value: kind for kind in ShapeKind if kind is not ShapeKind.OTHER}


def classify(element: Element) -> ShapeKind:
    return _BY_TAG.get(local_name(element.tag), ShapeKind.OTHER)


def parse_length(value: str | None, default: float = 0.0) -> float:
    """Read the leading number of a length (``"12px"`` -> 12.0)."""
    if value is None:
        return default
    match = _NUMBER_RE.match(value.strip())
    if not match:
        return default
    return float(match.group(0))


def parse_points(value: str | None) -> list[tuple[float, float]]:
    """Parse a ``points`` list into pairs; an unpaired trailing number is ignored."""
    if not value:
        return []
    nums = [float(n) for n in _NUMBER_RE.findall(value)]
    return [(nums[i], nums[i + 1]) for i in range(0, len(nums) - 1, 2)]


def _n(value: float) -> str:
    return repr(float(value))


def _svg_path(segments) -> str:
    return str(svgelements.Path(segments))


def rect_to_path(el: Element) -> str:
    x = parse_length(el.get("x"))
    y = parse_length(el.get("y"))
    w = parse_length(el.get("width"))
    h = parse_length(el.get("height"))
    if w <= 0 or h <= 0:
        return ""

    rx_attr, ry_attr = el.get("rx"), el.get("ry")
    rx = parse_length(rx_attr) if rx_attr is not None else None
    ry = parse_length(ry_attr) if ry_attr is not None else None
    if rx is None:
        rx = ry
    if ry is None:
        ry = rx

    if not rx or not ry or rx <= 0 or ry <= 0:
        rx = ry = 0.0
    else:
        rx = min(rx, w / 2)
        ry = min(ry, h / 2)

    return _svg_path(svgelements.Rect(x, y, w, h, rx, ry).segments())


def circle_to_path(el: Element) -> str:
    r = parse_length(el.get("r"))
    if r <= 0:
        return ""
    cx, cy = parse_length(el.get("cx")), parse_length(el.get("cy"))
    return _svg_path(svgelements.Circle(cx, cy, r).segments())


def ellipse_to_path(el: Element) -> str:
    rx = parse_length(el.get("rx"))
    ry = parse_length(el.get("ry"))
    if rx <= 0 or ry <= 0:
        return ""
    cx, cy = parse_length(el.get("cx")), parse_length(el.get("cy"))
    return _svg_path(svgelements.Ellipse(cx, cy, rx, ry).segments())


def _points_path(el: Element, close: bool) -> str:
    points = parse_points(el.get("points"))
    if not points:
        return ""
    (x0, y0), rest = points[0], points[1:]
    parts = [f"M{_n(x0)} {_n(y0)}"]
    parts.extend(f"L{_n(x)} {_n(y)}" for x, y in rest)
    if close:
        parts.append("Z")
    return " ".join(parts)


def polygon_to_path(el: Element) -> str:
    return _points_path(el, close=True)


def polyline_to_path(el: Element) -> str:
    return _points_path(el, close=False)


def line_to_path(el: Element) -> str:
    x1 = parse_length(el.get("x1"))
    y1 = parse_length(el.get("y1"))
    x2 = parse_length(el.get("x2"))
    y2 = parse_length(el.get("y2"))
    return f"M{_n(x1)} {_n(y1)} L{_n(x2)} {_n(y2)}"


def path_to_path(el: Element) -> str:
    return (el.get("d") or "").strip()


_CONVERTERS = {
    ShapeKind.RECT: rect_to_path,
    ShapeKind.CIRCLE: circle_to_path,
    ShapeKind.ELLIPSE: ellipse_to_path,
    ShapeKind.POLYGON: polygon_to_path,
    ShapeKind.POLYLINE: polyline_to_path,
    ShapeKind.LINE: line_to_path,
    ShapeKind.PATH: path_to_path,
}


def shape_to_path(el: Element, kind: ShapeKind | None = None) -> str:
    """Return unscaled path data for a shape element; ``""`` if nothing to draw."""
    kind = kind or classify(el)
    if not kind.is_shape:
        raise ValueError(f"Not a shape element: {local_name(el.tag)}")
    return _CONVERTERS[kind](el)
