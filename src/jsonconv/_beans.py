"""Bean mapping backed by pydantic validation."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from jsonconv._errors import ERR_MSG_BEAN_MAPPING_FAILED, MappingError
from jsonconv.container import JSONArray, JSONObject, _plain

T = TypeVar("T")


@lru_cache(maxsize=256)
def _adapter(bean_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(bean_type)


def _validate(data: Any, bean_type: type[T]) -> T:
    try:
        return _adapter(bean_type).validate_python(data)
    except ValidationError as e:
        raise MappingError(
            ERR_MSG_BEAN_MAPPING_FAILED,
            f"cannot map to {getattr(bean_type, '__name__', bean_type)}: {e}",
            wrapped=e,
        ) from e


def to_bean(container: JSONObject, bean_type: type[T]) -> T:
    """Map an object container onto ``bean_type``.

    ``bean_type`` may be anything pydantic can validate: a ``BaseModel``,
    a dataclass, a ``TypedDict`` and so on.

    Raises:
        MappingError: If the container's shape does not fit ``bean_type``.
    """
    return _validate(container.to_plain(), bean_type)


def to_bean_list(array: JSONArray, bean_type: type[T]) -> list[T]:
    """Map each element of an array container onto ``bean_type``."""
    return [_validate(_plain(item), bean_type) for item in array]
