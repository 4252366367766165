from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Iterator, TypeVar

from .interfaces import KeyValueStore
from .json_store import atomic_write_json, encode_json, read_json_mapping, write_json
from .settings import StoreSettings, get_settings
from .values import JsonValue, convert

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Store(KeyValueStore):
    """
    In-memory key-value mapping backed by a single JSON document on disk.

    Nothing touches the file until load() or save() is called:

        store = Store("settings.json")
        store.load()
        store.set("theme", "dark")
        store.save()

    - load() replaces the whole mapping with the file contents.
    - save() overwrites the whole file with the mapping.
    - keys()/values() come back in no particular order.

    Not thread-safe; guard a shared instance with your own lock.

    Without explicit ``settings`` the KVSTORE_* environment is read on the first
    load() or save(), so a bad variable surfaces there as ConfigError.
    """

    def __init__(self, path: str | os.PathLike[str], *, settings: StoreSettings | None = None):
        self._path = Path(path)
        self._settings = settings
        self._data: dict[str, Any] = {}
        self._loaded = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    @property
    def settings(self) -> StoreSettings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def load(self) -> None:
        # Decode fully before assigning so a failed load leaves the mapping intact.
        data = read_json_mapping(self._path, encoding=self.settings.encoding)
        self._data = data
        self._loaded = True
        logger.debug("loaded %d keys from %s", len(data), self._path)

    def save(self) -> None:
        s = self.settings
        payload = encode_json(
            self._data,
            indent=s.indent,
            sort_keys=s.sort_keys,
            ensure_ascii=s.ensure_ascii,
            encoding=s.encoding,
        )
        if s.atomic_writes:
            atomic_write_json(self._path, payload)
        else:
            write_json(self._path, payload)
        logger.debug("saved %d keys to %s", len(self._data), self._path)

    def get(self, key: str, default: Any = None) -> JsonValue | Any:
        return self._data.get(key, default)

    def get_as(self, key: str, type_: type[T] | Any, default: Any = None) -> T | Any:
        """
        Return the value of ``key`` converted to ``type_``, or ``default`` if absent.

        Raises StoreValueError if the stored value does not fit ``type_``.
        """
        if key not in self._data:
            return default
        return convert(self._data[key], type_)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def has(self, key: str) -> bool:
        return key in self._data

    def keys(self) -> list[str]:
        return list(self._data.keys())

    def values(self) -> list[JsonValue]:
        return list(self._data.values())

    def items(self) -> list[tuple[str, JsonValue]]:
        return list(self._data.items())

    def clear(self) -> None:
        self._data = {}

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def is_loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __getitem__(self, key: str) -> JsonValue:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self._path)!r}, size={len(self._data)}, loaded={self._loaded})"
