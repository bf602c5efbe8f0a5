"""Wiring of registry, store and manager for CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

from icon_swapper.catalog import load_icon_set
from icon_swapper.config import Config
from icon_swapper.manager import IconManager
from icon_swapper.registry import IconRegistry
from icon_swapper.storage import JsonIconStore
from icon_swapper.svg.normalizer import SVGNormalizer


@dataclass
class Session:
    config: Config
    registry: IconRegistry
    store: JsonIconStore
    manager: IconManager


async def open_session(config: Config) -> Session:
    """Build the manager for ``config`` and replay the saved icons into it."""
    normalizer = SVGNormalizer(precision=config.precision)

    builtin = load_icon_set(config.icons_dir, normalizer) if config.icons_dir else {}
    registry = IconRegistry(builtin)
    store = JsonIconStore(config.data_file)
    manager = IconManager(registry, store.save, store.load, normalizer)

    await manager.load_icons()
    return Session(config, registry, store, manager)
