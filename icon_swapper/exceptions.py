"""Exception hierarchy for icon-swapper."""

from __future__ import annotations

from typing import Any


class IconSwapperError(Exception):
    """Base class for all icon-swapper errors.

    Args:
        message: Human readable description.
        details: Optional extra context (offending value, underlying error...).
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            extra = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({extra})"
        return self.message


class SVGParseError(IconSwapperError):
    """Markup could not be parsed into an SVG tree."""


class NormalizationError(IconSwapperError):
    """A parsed tree could not be rewritten into normalized path markup."""


class ImportDocumentError(IconSwapperError):
    """An imported icon configuration document is empty or malformed."""


class StorageError(IconSwapperError):
    """Persisted icon data is unreadable or has the wrong shape."""


class ConfigError(IconSwapperError):
    """Configuration file or values are invalid."""
