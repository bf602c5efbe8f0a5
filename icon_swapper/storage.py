"""Persistence of the customized icon map as a JSON file."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Awaitable, Callable

from icon_swapper.exceptions import StorageError

Icons = dict[str, str]
SaveFn = Callable[[Icons], Awaitable[None]]
LoadFn = Callable[[], Awaitable[Icons]]


class JsonIconStore:
    """Stores ``{icon name: normalized markup}`` in a JSON document.

    ``load`` and ``save`` match the persistence functions the icon manager
    expects and can be passed to it directly.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    async def load(self) -> Icons:
        return await asyncio.to_thread(self._read)

    async def save(self, icons: Icons) -> None:
        await asyncio.to_thread(self._write, dict(icons))

    def _read(self) -> Icons:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupted icon data in {self.path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise StorageError(
                "Icon data must be a JSON object",
                details={"path": str(self.path), "type": type(data).__name__},
            )
        return data

    def _write(self, icons: Icons) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(icons, indent=2, ensure_ascii=False), encoding="utf-8")
