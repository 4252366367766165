from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import StoreDecodeError, StoreEncodeError, StoreIOError
from .values import DOCUMENT_ADAPTER, JsonValue

logger = logging.getLogger(__name__)


def read_json_mapping(path: Path, *, encoding: str = "utf-8") -> dict[str, JsonValue]:
    """
    Read a JSON document from disk and return its top-level object.

    Raises StoreIOError when the file cannot be read and StoreDecodeError when the
    content is not valid JSON or its top level is not an object.
    """
    try:
        with path.open("rb") as f:
            raw = f.read()
    except OSError as exc:
        raise StoreIOError(f"cannot read {path}: {exc}", details={"path": str(path)}) from exc

    try:
        text = raw.decode(encoding)
    except LookupError as exc:
        raise StoreDecodeError(f"unknown encoding {encoding!r}", details={"path": str(path)}) from exc
    except UnicodeDecodeError as exc:
        raise StoreDecodeError(f"{path} is not valid {encoding}", details={"path": str(path)}) from exc

    try:
        return DOCUMENT_ADAPTER.validate_json(text)
    except ValidationError as exc:
        raise StoreDecodeError(
            f"{path} is not a JSON object document",
            details={"path": str(path), "errors": exc.errors(include_url=False)},
        ) from exc


def encode_json(
    payload: Any,
    *,
    indent: int | None = 2,
    sort_keys: bool = True,
    ensure_ascii: bool = False,
    encoding: str = "utf-8",
) -> bytes:
    """
    Encode ``payload`` as a newline-terminated JSON document.

    NaN and infinities are rejected since JSON has no representation for them.
    Object keys must be strings; json.dumps would otherwise coerce them.
    """
    _check_keys(payload, set())
    try:
        text = json.dumps(payload, indent=indent, sort_keys=sort_keys, ensure_ascii=ensure_ascii, allow_nan=False)
        return (text + "\n").encode(encoding)
    except (LookupError, TypeError, ValueError) as exc:
        raise StoreEncodeError(f"cannot encode document: {exc}") from exc


def _check_keys(value: Any, ancestors: set[int]) -> None:
    if not isinstance(value, (dict, list, tuple)):
        return
    if id(value) in ancestors:
        raise StoreEncodeError("cannot encode document: circular reference detected")
    ancestors.add(id(value))
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise StoreEncodeError(
                    f"cannot encode document: object key {k!r} is not a string",
                    details={"key": repr(k)},
                )
            _check_keys(v, ancestors)
    else:
        for v in value:
            _check_keys(v, ancestors)
    ancestors.discard(id(value))


def write_json(path: Path, payload: bytes) -> None:
    """Truncate ``path`` and write the encoded document to it."""
    try:
        with path.open("wb") as f:
            f.write(payload)
    except OSError as exc:
        raise StoreIOError(f"cannot write {path}: {exc}", details={"path": str(path)}) from exc


def atomic_write_json(path: Path, payload: bytes) -> None:
    """
    Atomically write the encoded document by writing to a temp file then replacing.
    """
    tmp_path = path.parent / (path.name + ".tmp")
    try:
        with tmp_path.open("wb") as f:
            f.write(payload)
        tmp_path.replace(path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise StoreIOError(f"cannot write {path}: {exc}", details={"path": str(path)}) from exc
    logger.debug("replaced %s via %s", path, tmp_path.name)
