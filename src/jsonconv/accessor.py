"""Typed getters over JSON containers.

Anything exposing a ``config`` and a ``get_raw(key)`` satisfies
:class:`JSONGetter`; every getter here is a free function on top of that
contract. Defaults apply only when the stored value is null or absent,
never when conversion fails.
"""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Protocol, TypeVar

from jsonconv._beans import to_bean, to_bean_list
from jsonconv._errors import UnconvertibleSourceError
from jsonconv._types import Absent, TargetType, is_null as _is_null_value
from jsonconv._utils import escape, format_datetime
from jsonconv.container import JSONArray, JSONConfig, JSONObject

K = TypeVar("K", contravariant=True)
T = TypeVar("T")

__all__ = [
    "JSONGetter",
    "get",
    "get_bean",
    "get_bean_list",
    "get_bool",
    "get_bytes",
    "get_date",
    "get_decimal",
    "get_float",
    "get_int",
    "get_json_array",
    "get_json_object",
    "get_local_datetime",
    "get_obj",
    "get_str",
    "get_str_escaped",
    "has_value",
    "is_null",
]


class JSONGetter(Protocol[K]):
    """Required core of a keyed JSON container."""

    @property
    def config(self) -> JSONConfig: ...

    def get_raw(self, key: K) -> Any | Absent: ...


def is_null(src: JSONGetter[K], key: K) -> bool:
    """True when ``key`` is absent or holds null."""
    return _is_null_value(src.get_raw(key))


def has_value(src: JSONGetter[K], key: K) -> bool:
    """True when ``key`` is present and not null."""
    return not is_null(src, key)


def get_obj(src: JSONGetter[K], key: K, default: Any = None) -> Any:
    value = src.get_raw(key)
    return default if _is_null_value(value) else value


def get(src: JSONGetter[K], key: K, target: str) -> Any:
    """Fetch ``key`` and convert it to ``target`` with the container's registry.

    Returns:
        The converted value, or None when the stored value is null/absent.

    Raises:
        UnsupportedTargetTypeError: If no converter matches ``target``.
        UnconvertibleSourceError: If the stored value cannot be converted.
    """
    value = src.get_raw(key)
    if _is_null_value(value):
        return None
    return src.config.converter.convert(target, value)


def _get_or_default(src: JSONGetter[K], key: K, target: str, default: Any) -> Any:
    result = get(src, key, target)
    return default if result is None else result


def get_str(src: JSONGetter[K], key: K, default: str | None = None) -> str | None:
    """String view of ``key``; date/time values honour ``config.date_format``."""
    value = src.get_raw(key)
    if _is_null_value(value):
        return default
    pattern = src.config.date_format
    if pattern and isinstance(value, (datetime, date, time)):
        try:
            return format_datetime(value, pattern)
        except ValueError as e:
            raise UnconvertibleSourceError(TargetType.STR, value, str(e), wrapped=e) from e
    return src.config.converter.convert(TargetType.STR, value)


def get_str_escaped(src: JSONGetter[K], key: K, default: str | None = None) -> str | None:
    """Like ``get_str`` with control and invisible characters escaped."""
    return escape(get_str(src, key, default))


def get_int(src: JSONGetter[K], key: K, default: int | None = None) -> int | None:
    return _get_or_default(src, key, TargetType.INT, default)


def get_float(src: JSONGetter[K], key: K, default: float | None = None) -> float | None:
    return _get_or_default(src, key, TargetType.FLOAT, default)


def get_bool(src: JSONGetter[K], key: K, default: bool | None = None) -> bool | None:
    return _get_or_default(src, key, TargetType.BOOL, default)


def get_decimal(src: JSONGetter[K], key: K, default: Decimal | None = None) -> Decimal | None:
    return _get_or_default(src, key, TargetType.DECIMAL, default)


def get_date(src: JSONGetter[K], key: K, default: datetime | None = None) -> datetime | None:
    """Aware datetime in the registry's zone."""
    return _get_or_default(src, key, TargetType.DATETIME, default)


def get_local_datetime(
    src: JSONGetter[K], key: K, default: datetime | None = None
) -> datetime | None:
    """Naive wall-clock datetime."""
    return _get_or_default(src, key, TargetType.LOCAL_DATETIME, default)


def get_bytes(src: JSONGetter[K], key: K, default: bytes | None = None) -> bytes | None:
    return _get_or_default(src, key, TargetType.BYTES, default)


def get_json_array(src: JSONGetter[K], key: K) -> JSONArray | None:
    """Stored array container as-is, or the raw value wrapped with the parent's config.

    Raises:
        MappingError: If the raw value is not sequence shaped.
    """
    value = src.get_raw(key)
    if _is_null_value(value):
        return None
    if isinstance(value, JSONArray):
        return value
    return JSONArray(value, src.config)


def get_json_object(src: JSONGetter[K], key: K) -> JSONObject | None:
    """Stored object container as-is, or the raw value wrapped with the parent's config.

    Raises:
        MappingError: If the raw value is not key/value shaped.
    """
    value = src.get_raw(key)
    if _is_null_value(value):
        return None
    if isinstance(value, JSONObject):
        return value
    return JSONObject(value, src.config)


def get_bean(src: JSONGetter[K], key: K, bean_type: type[T]) -> T | None:
    obj = get_json_object(src, key)
    return None if obj is None else to_bean(obj, bean_type)


def get_bean_list(src: JSONGetter[K], key: K, bean_type: type[T]) -> list[T] | None:
    array = get_json_array(src, key)
    return None if array is None else to_bean_list(array, bean_type)
