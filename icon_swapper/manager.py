"""Icon manager: overrides, reverts and persistence of custom icons.

An icon is either at its default (no entry in :attr:`IconManager.icons`) or
overridden (entry present, default markup captured in
:attr:`IconManager.defaults`). Defaults are captured right before the first
override of a name and kept for the lifetime of the manager; they are never
persisted.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from icon_swapper.registry import IconSink
from icon_swapper.storage import Icons, LoadFn, SaveFn
from icon_swapper.svg.normalizer import SVGNormalizer
from icon_swapper.svg.parser import is_valid_svg, wrap_icon

logger = logging.getLogger(__name__)


class IconManager:
    """Applies, reverts and persists custom icon markup.

    Operations are coroutines and are serialized by an internal lock: they
    read-modify-write the shared maps and must not interleave.

    Args:
        sink: Icon table the markup is installed into.
        save: Persists the whole icons map.
        load: Returns the persisted icons map.
        normalizer: Used for untrusted markup.
    """

    def __init__(
        self,
        sink: IconSink,
        save: SaveFn,
        load: LoadFn,
        normalizer: SVGNormalizer | None = None,
    ) -> None:
        self.sink = sink
        self.save = save
        self.load = load
        self.normalizer = normalizer or SVGNormalizer()

        self.icons: Icons = {}
        self.defaults: Icons = {}
        self._lock = asyncio.Lock()

    def is_overridden(self, name: str) -> bool:
        return name in self.icons

    def export(self) -> Icons:
        """Return the overridden icons wrapped as standalone SVG documents."""
        return {name: wrap_icon(markup) for name, markup in self.icons.items()}

    async def load_icons(self) -> None:
        """Replay the persisted icons; they were normalized when first set."""
        async with self._lock:
            try:
                stored = await self.load()
            except Exception:
                logger.exception("Failed to load saved icons, starting with defaults")
                return

            for name, markup in (stored or {}).items():
                if not isinstance(markup, str):
                    logger.warning("Ignoring saved icon %r: not a string", name)
                    continue
                self._install(str(name), markup)

    async def set_icon(self, name: str, raw_markup: str, *, save: bool = True) -> str | None:
        """Normalize untrusted ``raw_markup`` and install it for ``name``.

        Returns:
            The installed markup, or None if normalization failed, in which
            case nothing changes.
        """
        async with self._lock:
            return await self._set_icon(name, raw_markup, save=save)

    async def apply_trusted(self, name: str, markup: str, *, save: bool = True) -> str:
        """Install already normalized ``markup`` for ``name`` as-is."""
        async with self._lock:
            self._install(name, markup)
            if save:
                await self._save()
            return markup

    async def revert_icon(self, name: str, *, save: bool = True) -> None:
        async with self._lock:
            self._revert(name)
            if save:
                await self._save()

    async def set_all(self, icons: Mapping[str, Any]) -> None:
        """Set many icons, skipping empty or non-SVG entries, then save once."""
        async with self._lock:
            for name, value in icons.items():
                if not isinstance(value, str):
                    continue
                svg = value.strip()
                if not svg or not is_valid_svg(svg):
                    continue
                await self._set_icon(str(name), svg, save=False)

            await self._save()

    async def revert_all(self, *, save: bool = True) -> None:
        async with self._lock:
            for name in list(self.icons):
                self._revert(name)

            if save:
                await self._save()

    async def _set_icon(self, name: str, raw_markup: str, *, save: bool) -> str | None:
        markup = self.normalizer.normalize(raw_markup)
        if markup is None:
            return None

        self._install(name, markup)
        if save:
            await self._save()
        return markup

    def _install(self, name: str, markup: str) -> None:
        if name not in self.defaults:
            self.defaults[name] = self.sink.capture_default(name)

        self.sink.install(name, markup)
        self.icons[name] = markup

    def _revert(self, name: str) -> None:
        if name in self.icons:
            self.sink.install(name, self.defaults[name])
            del self.icons[name]

    async def _save(self) -> None:
        await self.save(dict(self.icons))
