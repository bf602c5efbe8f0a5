"""Icon registry: the global name -> markup table icons are rendered from.

Rendered icons stay attached to the registry, so installing new markup for a
name updates every instance already on screen.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from icon_swapper.svg.parser import wrap_icon

logger = logging.getLogger(__name__)


class IconSink(Protocol):
    """What the icon manager needs from the host icon table."""

    def install(self, name: str, markup: str) -> None:
        """Make ``markup`` the source for ``name`` and patch rendered instances."""
        ...

    def capture_default(self, name: str) -> str:
        """Return the markup ``name`` currently renders with."""
        ...


@dataclass(eq=False)
class RenderedIcon:
    """One on-screen instance of an icon."""

    name: str
    content: str
    size: int = 24

    def to_svg(self) -> str:
        return wrap_icon(
            self.content,
            width=str(self.size),
            height=str(self.size),
            class_=f"svg-icon {self.name}",
        )


class IconRegistry:
    """In-memory icon table implementing :class:`IconSink`.

    Args:
        builtin: The host's own icon set (name -> inner markup).
    """

    def __init__(self, builtin: Mapping[str, str] | None = None) -> None:
        self._table: dict[str, str] = dict(builtin or {})
        self._rendered: dict[str, weakref.WeakSet[RenderedIcon]] = {}

    def names(self) -> list[str]:
        return list(self._table)

    def lookup(self, name: str) -> str | None:
        return self._table.get(name)

    def render(self, name: str, size: int = 24) -> RenderedIcon:
        """Render ``name`` into a live instance that follows later installs."""
        icon = RenderedIcon(name, self._table.get(name, ""), size)
        self._rendered.setdefault(name, weakref.WeakSet()).add(icon)
        return icon

    def rendered(self, name: str) -> list[RenderedIcon]:
        return list(self._rendered.get(name, ()))

    def install(self, name: str, markup: str) -> None:
        self._table[name] = markup

        patched = 0
        for icon in self._rendered.get(name, ()):
            icon.content = markup
            patched += 1
        logger.debug("Installed icon %r (%d rendered instances patched)", name, patched)

    def capture_default(self, name: str) -> str:
        # Detached instance: never tracked, discarded after reading.
        container = RenderedIcon(name, self._table.get(name, ""))
        return container.content
