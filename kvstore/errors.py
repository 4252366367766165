"""Error taxonomy for kvstore."""

from __future__ import annotations

from typing import Any


class StoreError(Exception):
    """Base exception for store errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class StoreIOError(StoreError, OSError):
    """The backing file could not be opened, read, created or written."""


class StoreDecodeError(StoreError, ValueError):
    """The backing file is not a JSON document with a top-level object."""


class StoreEncodeError(StoreError, ValueError):
    """A stored value cannot be represented as JSON."""


class StoreValueError(StoreError, ValueError):
    """A stored value could not be converted to the requested type."""


class ConfigError(StoreError):
    """Invalid configuration."""
