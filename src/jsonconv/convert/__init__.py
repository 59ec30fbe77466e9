"""Converter registry and built-in converters."""

from __future__ import annotations

from datetime import tzinfo
from functools import lru_cache

from jsonconv._types import TEMPORAL_TARGETS, TargetType
from jsonconv.convert._base import Converter, ConverterRegistry
from jsonconv.convert.primitive import (
    IntConverter,
    convert_bool,
    convert_bytes,
    convert_decimal,
    convert_float,
    convert_object,
    convert_str,
)
from jsonconv.convert.temporal import TemporalConverter, from_epoch_millis, to_epoch_millis

__all__ = [
    "Converter",
    "ConverterRegistry",
    "IntConverter",
    "TemporalConverter",
    "default_registry",
    "from_epoch_millis",
    "shared_registry",
    "to_epoch_millis",
]

_PRIMITIVES: dict[str, Converter] = {
    TargetType.STR: convert_str,
    TargetType.FLOAT: convert_float,
    TargetType.DECIMAL: convert_decimal,
    TargetType.BOOL: convert_bool,
    TargetType.BYTES: convert_bytes,
    TargetType.OBJECT: convert_object,
}


def default_registry(tz: tzinfo | None = None) -> ConverterRegistry:
    """Build a registry holding every built-in converter.

    Args:
        tz: Zone for wall-clock date representations and for reading naive
            datetimes as epoch milliseconds. Defaults to the system local zone.

    Returns:
        A new ConverterRegistry; callers may register further converters on it.
    """
    registry = ConverterRegistry(_PRIMITIVES)
    registry.register(TargetType.INT, IntConverter(tz))
    registry.register_all(TEMPORAL_TARGETS, TemporalConverter(tz))
    return registry


@lru_cache(maxsize=1)
def shared_registry() -> ConverterRegistry:
    """Process-wide ``default_registry()`` built on first use.

    Used when no registry is passed to ``jsonconv.convert`` or ``JSONConfig``.
    Converters registered on it are visible to every such caller; build a
    separate ``default_registry()`` for isolated registrations.
    """
    return default_registry()
