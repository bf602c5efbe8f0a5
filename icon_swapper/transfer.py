"""Export and import of icon configurations as YAML documents.

An exported document maps icon names to standalone SVG markup::

    gear: <svg viewBox="0 0 100 100"><path d="..." fill="currentColor" /></svg>
"""

from __future__ import annotations

from typing import Any

import yaml

from icon_swapper.exceptions import ImportDocumentError
from icon_swapper.manager import IconManager

EXPORT_SUFFIX = ".icons"


def export_icons(manager: IconManager) -> str:
    """Serialize the manager's overridden icons to a YAML document."""
    return yaml.safe_dump(
        manager.export(), sort_keys=False, allow_unicode=True, default_flow_style=False
    )


def parse_icon_document(text: str) -> dict[str, Any]:
    """Parse an exported document.

    Raises:
        ImportDocumentError: If the text is empty, is not YAML, or is not
            a mapping of icon names.
    """
    text = text.strip()
    if not text:
        raise ImportDocumentError("config is empty")

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ImportDocumentError(str(e)) from e

    if not isinstance(document, dict):
        raise ImportDocumentError(
            "config must map icon names to SVG markup",
            details={"type": type(document).__name__},
        )
    return document


async def import_icons(manager: IconManager, text: str) -> None:
    """Replace the current icon configuration with the one in ``text``.

    Nothing is reverted if the document itself cannot be parsed. Entries
    that are empty or not SVG markup are skipped.
    """
    document = parse_icon_document(text)

    await manager.revert_all()
    await manager.set_all(document)
