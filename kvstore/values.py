from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import JsonValue, TypeAdapter, ValidationError

from .errors import StoreValueError

T = TypeVar("T")

# Top-level document shape: a JSON object mapping string keys to JSON values.
DOCUMENT_ADAPTER: TypeAdapter[dict[str, JsonValue]] = TypeAdapter(dict[str, JsonValue])


@lru_cache(maxsize=None)
def _adapter_for(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def convert(value: Any, type_: type[T] | Any) -> T:
    """
    Convert a stored value to ``type_``.

    Uses pydantic's lax validation, so ``"8080"`` converts to ``8080`` for ``int``
    and a list of dicts converts to a list of models.
    """
    try:
        return _adapter_for(type_).validate_python(value)
    except ValidationError as exc:
        raise StoreValueError(
            f"cannot convert value to {getattr(type_, '__name__', type_)!s}",
            details={"errors": exc.errors(include_url=False)},
        ) from exc


__all__ = ["DOCUMENT_ADAPTER", "JsonValue", "convert"]
