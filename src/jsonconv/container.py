"""Minimal JSON containers backing the typed accessors.

Values are stored raw: nested dicts and lists stay as they were given and
are only wrapped into containers when a structural getter asks for them.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable, Iterator, Mapping, MutableMapping, MutableSequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import BaseModel

from jsonconv._errors import (
    ERR_MSG_INVALID_ARRAY_SOURCE,
    ERR_MSG_INVALID_OBJECT_SOURCE,
    MappingError,
)
from jsonconv._types import ABSENT, Absent, TargetType
from jsonconv.convert import ConverterRegistry, shared_registry

T = TypeVar("T")
_Kind = TypeVar("_Kind", dict, list)


@dataclass(frozen=True)
class JSONConfig:
    """Options shared by a container and every nested container it materializes."""

    converter: ConverterRegistry = field(default_factory=shared_registry)
    date_format: str | None = None
    ignore_null_value: bool = False
    ignore_case: bool = False


def _parse_text(source: str | bytes | bytearray, kind: type[_Kind], message: str) -> _Kind:
    try:
        parsed = json.loads(source)
    except ValueError as e:
        raise MappingError(message, f"invalid JSON text: {e}", wrapped=e) from e
    if not isinstance(parsed, kind):
        raise MappingError(
            message,
            f"JSON text holds {type(parsed).__name__}, expected {kind.__name__}",
        )
    return parsed


def _object_items(source: Any) -> Iterable[tuple[Any, Any]]:
    if source is None:
        return ()
    if isinstance(source, Mapping):
        return source.items()
    if isinstance(source, (str, bytes, bytearray)):
        return _parse_text(source, dict, ERR_MSG_INVALID_OBJECT_SOURCE).items()
    if isinstance(source, BaseModel):
        return source.model_dump().items()
    if dataclasses.is_dataclass(source) and not isinstance(source, type):
        return dataclasses.asdict(source).items()
    raise MappingError(
        ERR_MSG_INVALID_OBJECT_SOURCE,
        f"{type(source).__name__} value {source!r} is not key/value shaped",
    )


def _array_items(source: Any) -> Iterable[Any]:
    if source is None:
        return ()
    if isinstance(source, (str, bytes, bytearray)):
        return _parse_text(source, list, ERR_MSG_INVALID_ARRAY_SOURCE)
    if isinstance(source, Mapping) or not isinstance(source, Iterable):
        raise MappingError(
            ERR_MSG_INVALID_ARRAY_SOURCE,
            f"{type(source).__name__} value {source!r} is not a sequence",
        )
    return source


def _plain(value: Any) -> Any:
    if isinstance(value, (JSONObject, JSONArray)):
        return value.to_plain()
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def _resolve_config(source: Any, config: JSONConfig | None) -> JSONConfig:
    if config is not None:
        return config
    if isinstance(source, (JSONObject, JSONArray)):
        return source.config
    return JSONConfig()


class JSONObject(MutableMapping[str, Any]):
    """Ordered key/value container.

    Args:
        source: None, a mapping, JSON object text, a dataclass instance or
            a pydantic model.
        config: Shared options; defaults to the source container's config
            or a fresh ``JSONConfig``.

    Raises:
        MappingError: If ``source`` is not key/value shaped.
    """

    def __init__(self, source: Any = None, config: JSONConfig | None = None) -> None:
        self._config = _resolve_config(source, config)
        self._data: dict[str, Any] = {}
        for key, value in _object_items(source):
            self[key] = value

    @property
    def config(self) -> JSONConfig:
        return self._config

    def get_raw(self, key: str) -> Any | Absent:
        """Return the stored value, ``None`` for a stored null, or ``ABSENT``."""
        key = str(key)
        if key in self._data:
            return self._data[key]
        if self._config.ignore_case:
            folded = key.casefold()
            for k, v in self._data.items():
                if k.casefold() == folded:
                    return v
        return ABSENT

    def __getitem__(self, key: str) -> Any:
        value = self.get_raw(key)
        if value is ABSENT:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        key = str(key)
        if value is None and self._config.ignore_null_value:
            self._data.pop(key, None)
            return
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[str(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"JSONObject({self._data!r})"

    def __str__(self) -> str:
        return self.to_json()

    def to_plain(self) -> dict[str, Any]:
        """Recursively unwrap into plain dicts and lists."""
        return {k: _plain(v) for k, v in self._data.items()}

    def to_json(self) -> str:
        return self._config.converter.convert(TargetType.STR, self)

    def to_bean(self, bean_type: type[T]) -> T:
        from jsonconv._beans import to_bean

        return to_bean(self, bean_type)


class JSONArray(MutableSequence[Any]):
    """Indexed container.

    Args:
        source: None, any non-string, non-mapping iterable, or JSON array text.
        config: Shared options; defaults to the source container's config
            or a fresh ``JSONConfig``.

    Raises:
        MappingError: If ``source`` is not a sequence.
    """

    def __init__(self, source: Any = None, config: JSONConfig | None = None) -> None:
        self._config = _resolve_config(source, config)
        self._items: list[Any] = []
        for value in _array_items(source):
            self.append(value)

    @property
    def config(self) -> JSONConfig:
        return self._config

    def get_raw(self, index: int) -> Any | Absent:
        """Return the stored value, ``None`` for a stored null, or ``ABSENT`` when out of range."""
        if not 0 <= index < len(self._items):
            return ABSENT
        return self._items[index]

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value

    def __delitem__(self, index) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: Any) -> None:
        if value is None and self._config.ignore_null_value:
            return
        self._items.insert(index, value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JSONArray):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JSONArray({self._items!r})"

    def __str__(self) -> str:
        return self.to_json()

    def to_plain(self) -> list[Any]:
        """Recursively unwrap into plain lists and dicts."""
        return [_plain(v) for v in self._items]

    def to_json(self) -> str:
        return self._config.converter.convert(TargetType.STR, self)

    def to_list(self, bean_type: type[T]) -> list[T]:
        from jsonconv._beans import to_bean_list

        return to_bean_list(self, bean_type)
