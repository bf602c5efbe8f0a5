"""Catalog of recognized icon names and loading of host icon sets."""

from __future__ import annotations

import logging
from pathlib import Path

from icon_swapper.svg.normalizer import SVGNormalizer

logger = logging.getLogger(__name__)

ICON_NAMES: tuple[str, ...] = (
    "any-key",
    "audio-file",
    "blocks",
    "bold-glyph",
    "bracket-glyph",
    "broken-link",
    "bullet-list",
    "bullet-list-glyph",
    "calendar-with-checkmark",
    "check-in-circle",
    "check-small",
    "checkbox-glyph",
    "checkmark",
    "clock",
    "cloud",
    "code-glyph",
    "create-new",
    "cross",
    "cross-in-box",
    "crossed-star",
    "csv",
    "deleteColumn",
    "deleteRow",
    "dice",
    "document",
    "documents",
    "dot-network",
    "double-down-arrow-glyph",
    "double-up-arrow-glyph",
    "down-arrow-with-tail",
    "down-chevron-glyph",
    "enter",
    "exit-fullscreen",
    "expand-vertically",
    "filled-pin",
    "folder",
    "formula",
    "forward-arrow",
    "fullscreen",
    "gear",
    "go-to-file",
    "hashtag",
    "heading-glyph",
    "help",
    "highlight-glyph",
    "horizontal-split",
    "image-file",
    "image-glyph",
    "indent-glyph",
    "info",
    "insertColumn",
    "insertRow",
    "install",
    "italic-glyph",
    "keyboard-glyph",
    "languages",
    "left-arrow",
    "left-arrow-with-tail",
    "left-chevron-glyph",
    "lines-of-text",
    "link",
    "link-glyph",
    "logo-crystal",
    "magnifying-glass",
    "microphone",
    "microphone-filled",
    "minus-with-circle",
    "moveColumnLeft",
    "moveColumnRight",
    "moveRowDown",
    "moveRowUp",
    "note-glyph",
    "number-list-glyph",
    "open-vault",
    "pane-layout",
    "paper-plane",
    "paused",
    "pdf-file",
    "pencil",
    "percent-sign-glyph",
    "pin",
    "plus-with-circle",
    "popup-open",
    "presentation",
    "price-tag-glyph",
    "quote-glyph",
    "redo-glyph",
    "reset",
    "right-arrow",
    "right-arrow-with-tail",
    "right-chevron-glyph",
    "right-triangle",
    "run-command",
    "search",
    "sheets-in-box",
    "sortAsc",
    "sortDesc",
    "spreadsheet",
    "stacked-levels",
    "star",
    "star-list",
    "strikethrough-glyph",
    "switch",
    "sync",
    "sync-small",
    "tag-glyph",
    "three-horizontal-bars",
    "trash",
    "undo-glyph",
    "unindent-glyph",
    "up-and-down-arrows",
    "up-arrow-with-tail",
    "up-chevron-glyph",
    "uppercase-lowercase-a",
    "vault",
    "vertical-split",
    "vertical-three-dots",
    "wrench-screwdriver-glyph",
)


def load_icon_set(directory: Path, normalizer: SVGNormalizer | None = None) -> dict[str, str]:
    """Load a host icon set from ``*.svg`` files (icon name = file stem).

    Files are normalized like user input; files that fail are skipped.
    """
    normalizer = normalizer or SVGNormalizer()
    icons: dict[str, str] = {}

    for svg_file in sorted(directory.glob("*.svg")):
        try:
            markup = svg_file.read_text(encoding="utf-8").strip()
        except OSError as e:
            logger.warning("Cannot read %s: %s", svg_file, e)
            continue

        normalized = normalizer.normalize(markup)
        if normalized is None:
            logger.warning("Skipping %s: not a usable SVG", svg_file.name)
            continue
        icons[svg_file.stem] = normalized

    return icons
