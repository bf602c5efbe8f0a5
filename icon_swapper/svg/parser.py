"""SVG parsing and serialization.

Untrusted markup is parsed with defusedxml so entity expansion and external
DTD tricks are rejected before any tree is built.
"""

from __future__ import annotations

import re
from xml.etree.ElementTree import Element, tostring

import defusedxml
import defusedxml.ElementTree as ET

from icon_swapper.exceptions import SVGParseError

SVG_NS = "http://www.w3.org/2000/svg"

# Canvas every normalized icon is scaled into.
CANVAS_SIZE = 100

# Cheap textual precheck: opening svg tag, some content, a closing svg tag.
VALID_SVG_RE = re.compile(r"^<svg\b[^>]*>[\w\W]+?</?svg>?", re.IGNORECASE)


def is_valid_svg(markup: str) -> bool:
    """Return True if ``markup`` looks like an ``<svg>...</svg>`` document."""
    return bool(VALID_SVG_RE.match(markup))


def local_name(tag: object) -> str:
    """Strip the ``{namespace}`` prefix from an element tag."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def parse_svg_string(markup: str) -> Element:
    """Parse SVG markup and return the root ``<svg>`` element.

    Raises:
        SVGParseError: If the markup is not well-formed, uses forbidden
            XML features, or its root is not an ``svg`` element.
    """
    try:
        root = ET.fromstring(markup)
    except ET.ParseError as e:
        raise SVGParseError(f"Failed to parse SVG: {e}") from e
    except defusedxml.DefusedXmlException as e:
        raise SVGParseError(f"Forbidden XML construct in SVG: {e}") from e

    if local_name(root.tag) != "svg":
        raise SVGParseError(
            "Root element is not <svg>", details={"root": local_name(root.tag)}
        )
    return root


def serialize(element: Element) -> str:
    """Serialize one element (without its tail text) to markup."""
    tail, element.tail = element.tail, None
    try:
        return tostring(element, encoding="unicode")
    finally:
        element.tail = tail


def wrap_icon(inner: str, **attrs: str) -> str:
    """Wrap normalized inner markup in an ``<svg>`` with the 0-100 viewBox."""
    # class_ -> class, stroke_width -> stroke-width
    extra = "".join(
        f' {name.rstrip("_").replace("_", "-")}="{value}"' for name, value in attrs.items()
    )
    return f'<svg viewBox="0 0 {CANVAS_SIZE} {CANVAS_SIZE}"{extra}>{inner}</svg>'
