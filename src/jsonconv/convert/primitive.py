"""Primitive and object coercions."""

from __future__ import annotations

import base64
import binascii
import json
import math
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime, time, tzinfo
from decimal import Decimal
from typing import Any

from jsonconv._errors import UnconvertibleSourceError
from jsonconv.convert.temporal import to_epoch_millis

TRUE_WORDS = frozenset({"true", "yes", "y", "t", "ok", "1", "on"})
FALSE_WORDS = frozenset({"false", "no", "n", "f", "0", "off"})


def _json_default(value: Any) -> Any:
    """``json.dumps`` fallback for containers, dates, decimals and bytes."""
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, (Sequence, set, frozenset)):
        return list(value)
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def to_json_text(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=_json_default)


def convert_str(target: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (Mapping, Sequence)):
        return to_json_text(value)
    return str(value)


class IntConverter:
    """Integer coercion; datetimes become epoch milliseconds with naive values read in ``tz``."""

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz

    def __repr__(self) -> str:
        return f"IntConverter(tz={self._tz!r})"

    def __call__(self, target: str, value: Any) -> int:
        if isinstance(value, datetime):
            return to_epoch_millis(value, self._tz)
        return convert_int(target, value)


def convert_int(target: str, value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise UnconvertibleSourceError(target, value, "non-finite float")
        return int(value)
    if isinstance(value, Decimal):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return int(Decimal(text))
    raise UnconvertibleSourceError(target, value)


def convert_float(target: str, value: Any) -> float:
    if isinstance(value, (bool, int, float, Decimal)):
        return float(value)
    if isinstance(value, str):
        return float(value.strip())
    raise UnconvertibleSourceError(target, value)


def convert_decimal(target: str, value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, str):
        return Decimal(value.strip())
    raise UnconvertibleSourceError(target, value)


def convert_bool(target: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    if isinstance(value, str):
        word = value.strip().lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
    raise UnconvertibleSourceError(target, value)


def convert_bytes(target: str, value: Any) -> bytes:
    """Copy byte-like values, Base64-decode or UTF-8 encode strings, pack int sequences."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error:
            return value.encode("utf-8")
    if isinstance(value, Iterable) and not isinstance(value, Mapping):
        items = list(value)
        if all(isinstance(i, int) and not isinstance(i, bool) for i in items):
            return bytes(items)
    raise UnconvertibleSourceError(target, value)


def convert_object(target: str, value: Any) -> Any:
    return value
