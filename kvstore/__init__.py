from __future__ import annotations

from .errors import (
    ConfigError,
    StoreDecodeError,
    StoreEncodeError,
    StoreError,
    StoreIOError,
    StoreValueError,
)
from .interfaces import KeyValueStore
from .settings import StoreSettings, get_settings
from .store import Store
from .values import JsonValue, convert

__all__ = [
    "Store",
    "KeyValueStore",
    "StoreSettings",
    "get_settings",
    "JsonValue",
    "convert",
    "StoreError",
    "StoreIOError",
    "StoreDecodeError",
    "StoreEncodeError",
    "StoreValueError",
    "ConfigError",
]
