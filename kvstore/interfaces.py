from __future__ import annotations

from typing import Any, Protocol

from .values import JsonValue


class KeyValueStore(Protocol):
    """
    A string-keyed mapping of JSON values persisted as a single document.
    """

    def load(self) -> None:
        """Replace the in-memory mapping with the persisted document."""
        ...

    def save(self) -> None:
        """Persist the full mapping, overwriting the previous document."""
        ...

    def get(self, key: str, default: Any = None) -> JsonValue | Any: ...
    def set(self, key: str, value: Any) -> None: ...
    def delete(self, key: str) -> None: ...
    def has(self, key: str) -> bool: ...

    def keys(self) -> list[str]: ...
    def values(self) -> list[JsonValue]: ...
    def clear(self) -> None: ...

    def size(self) -> int: ...
    def is_empty(self) -> bool: ...
    def is_loaded(self) -> bool: ...
