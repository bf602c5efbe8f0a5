"""Coordinate-space resolution from the ``viewBox`` attribute."""

from __future__ import annotations

import math
import re
from xml.etree.ElementTree import Element

_SEPARATORS = re.compile(r"[\s,]+")


def parse_viewbox(value: str | None) -> tuple[float, float, float, float] | None:
    """Parse ``"min-x min-y width height"``; None unless exactly four numbers."""
    if not value:
        return None

    parts = [p for p in _SEPARATORS.split(value.strip()) if p]
    if len(parts) != 4:
        return None

    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError:
        return None
    if not all(math.isfinite(v) for v in (x, y, w, h)):
        return None
    return (x, y, w, h)


def get_max_viewbox(root: Element) -> float:
    """Return the largest viewBox component of ``root``, or 0 if unusable.

    Icons are authored in arbitrary square coordinate systems (``0 0 24 24``,
    ``0 0 512 512``...); ``100 / get_max_viewbox(root)`` brings them onto the
    0-100 canvas.
    """
    box = parse_viewbox(root.get("viewBox"))
    if box is None:
        return 0.0
    return max(0.0, *box)
