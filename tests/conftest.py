"""Pytest configuration and shared fixtures for icon-swapper tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from icon_swapper.manager import IconManager
from icon_swapper.registry import IconRegistry

GEAR_SVG = '<svg viewBox="0 0 24 24"><rect x="0" y="0" width="24" height="24"/></svg>'
GEAR_NORMALIZED = '<path d="M0 0 L100 0 L100 100 L0 100 Z" fill="currentColor" />'

BUILTIN_ICONS = {
    "gear": '<circle cx="50" cy="50" r="40" fill="currentColor" />',
    "star": '<path d="M50 0 L61 35 L98 35 L68 57 L79 91 L50 70 Z" fill="currentColor" />',
    "trash": '<path d="M20 20 L80 20 L70 95 L30 95 Z" fill="currentColor" />',
}


class RecordingStore:
    """In-memory persistence double recording every save."""

    def __init__(self, initial: dict | None = None, fail_load: bool = False) -> None:
        self.data = dict(initial or {})
        self.saved: list[dict[str, str]] = []
        self.fail_load = fail_load

    async def save(self, icons: dict[str, str]) -> None:
        self.saved.append(dict(icons))
        self.data = dict(icons)

    async def load(self) -> dict:
        if self.fail_load:
            raise OSError("storage unavailable")
        return dict(self.data)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the user's real config and data files."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for var in ("ICON_SWAPPER_CONFIG", "ICON_SWAPPER_DATA", "ICON_SWAPPER_ICONS_DIR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def gear_svg() -> str:
    return GEAR_SVG


@pytest.fixture
def circle_svg() -> str:
    """Outline circle with a stroke, authored on a 24 unit grid."""
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
        '<circle id="ring" cx="12" cy="12" r="10" fill="none" stroke="#000" stroke-width="2"/>'
        "</svg>"
    )


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def registry() -> IconRegistry:
    return IconRegistry(BUILTIN_ICONS)


@pytest.fixture
def manager(registry: IconRegistry, store: RecordingStore) -> IconManager:
    return IconManager(registry, store.save, store.load)


@pytest.fixture
def gear_file(tmp_path: Path) -> Path:
    svg_path = tmp_path / "gear.svg"
    svg_path.write_text(GEAR_SVG, encoding="utf-8")
    return svg_path


@pytest.fixture
def gear_normalized() -> str:
    return GEAR_NORMALIZED


@pytest.fixture
def builtin_icons() -> dict[str, str]:
    return dict(BUILTIN_ICONS)
