"""jsonconv - Type-conversion registry and typed JSON value accessors."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jsonconv")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from typing import Any

from jsonconv import accessor
from jsonconv._errors import (
    ConversionError,
    ConversionErrorReason,
    MappingError,
    UnconvertibleSourceError,
    UnsupportedTargetTypeError,
)
from jsonconv._types import ABSENT, TargetType
from jsonconv._utils import escape, format_datetime
from jsonconv.container import JSONArray, JSONConfig, JSONObject
from jsonconv.convert import (
    ConverterRegistry,
    TemporalConverter,
    default_registry,
    shared_registry,
)

__all__ = [
    "ABSENT",
    "accessor",
    "convert",
    "default_registry",
    "escape",
    "format_datetime",
    "shared_registry",
    "ConversionError",
    "ConversionErrorReason",
    "ConverterRegistry",
    "JSONArray",
    "JSONConfig",
    "JSONObject",
    "MappingError",
    "TargetType",
    "TemporalConverter",
    "UnconvertibleSourceError",
    "UnsupportedTargetTypeError",
]


def convert(
    target: str,
    value: Any,
    *,
    registry: ConverterRegistry | None = None,
) -> Any:
    """Convert a value to the representation named by ``target``.

    Args:
        target: Target tag, usually a ``TargetType`` member.
        value: Raw value. None propagates as None.
        registry: Registry to use. Defaults to ``shared_registry()``, built
            once in the system local zone.

    Returns:
        The converted value, or None for a null input.

    Raises:
        UnsupportedTargetTypeError: If no converter matches ``target``.
        UnconvertibleSourceError: If the value cannot be converted.
    """
    if registry is None:
        registry = shared_registry()
    return registry.convert(target, value)
