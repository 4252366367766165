from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import ConfigError


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_indent(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    if raw == "" or raw.lower() == "none":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer or 'none', got {raw!r}", details={"name": name}) from exc


@dataclass(frozen=True)
class StoreSettings:
    # Document encoding
    encoding: str = "utf-8"
    indent: int | None = 2
    sort_keys: bool = True
    ensure_ascii: bool = False

    # Write strategy (default: plain truncate-and-write)
    atomic_writes: bool = False


def get_settings(env_file: str | os.PathLike[str] | None = None) -> StoreSettings:
    if env_file is not None:
        load_dotenv(env_file)

    encoding = os.getenv("KVSTORE_ENCODING", "utf-8").strip() or "utf-8"
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigError(f"KVSTORE_ENCODING names an unknown codec: {encoding!r}", details={"name": "KVSTORE_ENCODING"}) from exc
    indent = _env_indent("KVSTORE_INDENT", 2)
    sort_keys = _env_bool("KVSTORE_SORT_KEYS", True)
    ensure_ascii = _env_bool("KVSTORE_ENSURE_ASCII", False)
    atomic_writes = _env_bool("KVSTORE_ATOMIC_WRITES", False)

    return StoreSettings(
        encoding=encoding,
        indent=indent,
        sort_keys=sort_keys,
        ensure_ascii=ensure_ascii,
        atomic_writes=atomic_writes,
    )
