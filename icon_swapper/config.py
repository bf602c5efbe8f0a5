"""Configuration loading for icon-swapper.

Settings come from an optional YAML file, then environment overrides:

    data_file: ~/.local/share/icon-swapper/icons.json
    icons_dir: ~/my-icon-set
    precision: 3
    log_level: WARNING
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from icon_swapper.exceptions import ConfigError

CONFIG_ENV = "ICON_SWAPPER_CONFIG"
DATA_ENV = "ICON_SWAPPER_DATA"
ICONS_DIR_ENV = "ICON_SWAPPER_ICONS_DIR"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_config_path() -> Path:
    return Path.home() / ".config" / "icon-swapper" / "config.yaml"


def default_data_file() -> Path:
    return Path.home() / ".local" / "share" / "icon-swapper" / "icons.json"


@dataclass
class Config:
    """Runtime settings shared by the CLI commands."""

    data_file: Path = field(default_factory=default_data_file)
    icons_dir: Path | None = None
    precision: int = 3
    log_level: str = "WARNING"

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from YAML plus environment overrides.

        Args:
            path: Explicit config file. When omitted, ``$ICON_SWAPPER_CONFIG``
                is used, then the default location if that file exists.

        Raises:
            ConfigError: If the file is missing (explicit path only), is not
                valid YAML, or holds invalid values.
        """
        data: dict[str, Any] = {}

        if path is None and os.environ.get(CONFIG_ENV):
            path = Path(os.environ[CONFIG_ENV])

        if path is not None:
            if not path.exists():
                raise ConfigError(f"Config file not found: {path}")
            data = _read_yaml(path)
        elif default_config_path().exists():
            data = _read_yaml(default_config_path())

        if os.environ.get(DATA_ENV):
            data["data_file"] = os.environ[DATA_ENV]
        if os.environ.get(ICONS_DIR_ENV):
            data["icons_dir"] = os.environ[ICONS_DIR_ENV]

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError("Unknown config keys", details={"keys": unknown})

        config = cls()

        if data.get("data_file"):
            config.data_file = Path(str(data["data_file"])).expanduser()
        if data.get("icons_dir"):
            config.icons_dir = Path(str(data["icons_dir"])).expanduser()

        if "precision" in data:
            precision = data["precision"]
            if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
                raise ConfigError(
                    "precision must be a non-negative integer",
                    details={"precision": precision},
                )
            config.precision = precision

        if "log_level" in data:
            level = str(data["log_level"]).upper()
            if level not in LOG_LEVELS:
                raise ConfigError("Unknown log level", details={"log_level": data["log_level"]})
            config.log_level = level

        return config


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    return data
