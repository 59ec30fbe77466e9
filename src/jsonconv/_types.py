"""Target type tags and the absent-value sentinel."""

from __future__ import annotations

import enum
from collections.abc import Iterator


class TargetType(enum.StrEnum):
    """Built-in target tags.

    Tags are dotted and hierarchical: a tag with no registered converter
    resolves to its nearest registered parent (``"datetime.local.x"`` ->
    ``"datetime.local"`` -> ``"datetime"``).
    """

    DATETIME = "datetime"
    LOCAL_DATETIME = "datetime.local"
    INSTANT = "datetime.utc"
    DATE = "date"
    TIME = "time"
    STR = "str"
    INT = "int"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOL = "bool"
    BYTES = "bytes"
    OBJECT = "object"


TEMPORAL_TARGETS: tuple[TargetType, ...] = (
    TargetType.DATETIME,
    TargetType.LOCAL_DATETIME,
    TargetType.INSTANT,
    TargetType.DATE,
    TargetType.TIME,
)


def lineage(target: str) -> Iterator[str]:
    """Yield ``target`` followed by each of its dotted parents."""
    tag = str(target)
    while tag:
        yield tag
        tag, _, _ = tag.rpartition(".")


class _Absent(enum.Enum):
    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent.ABSENT
"""Marker returned by ``get_raw`` for a missing key or index (distinct from ``None``)."""

Absent = _Absent


def is_null(value: object) -> bool:
    """True for a stored JSON null (``None``) or a missing value."""
    return value is None or value is ABSENT
