"""Date-family converter.

Sources are normalized by runtime shape first (epoch milliseconds, date
strings, existing date/time values) and then represented as the nearest
temporal target tag.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from decimal import Decimal
from typing import Any

from jsonconv._constants import EPOCH
from jsonconv._errors import UnconvertibleSourceError
from jsonconv._timestamps import parse_timestamp
from jsonconv._types import TEMPORAL_TARGETS, TargetType, lineage

_Temporal = datetime | date | time


def from_epoch_millis(millis: int | float | Decimal) -> datetime:
    """Return the UTC instant ``millis`` milliseconds after the epoch.

    The sign and magnitude are not special-cased: ``-1497600000`` lands on
    1969-12-14T16:00:00Z.
    """
    if isinstance(millis, Decimal):
        millis = float(millis)
    return EPOCH + timedelta(milliseconds=millis)


def localize(value: datetime | date, tz: tzinfo | None) -> datetime:
    """Read naive values as wall-clock time in ``tz`` (None: system local) and convert into it."""
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    if value.tzinfo is None:
        if tz is None:
            # naive astimezone() reads the value as system local time
            return value.astimezone()
        value = value.replace(tzinfo=tz)
    return value.astimezone(tz)


def to_epoch_millis(value: datetime | date, tz: tzinfo | None = None) -> int:
    """Whole milliseconds from the epoch to ``value``, naive values read in ``tz``."""
    return (localize(value, tz) - EPOCH) // timedelta(milliseconds=1)


class TemporalConverter:
    """Converts epoch numbers, date strings and date/time values.

    Args:
        tz: Zone used for wall-clock representations and for reading naive
            sources. None means the system local zone.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz

    def __repr__(self) -> str:
        return f"TemporalConverter(tz={self._tz!r})"

    def __call__(self, target: str, value: Any) -> _Temporal:
        source = self._normalize(target, value)
        kind = self._resolve(target, value)

        if isinstance(source, time):
            if kind is TargetType.TIME:
                return source
            raise UnconvertibleSourceError(target, value, "time of day has no date")

        moment = localize(source, self._tz)
        if kind is TargetType.DATETIME:
            return moment
        if kind is TargetType.INSTANT:
            return moment.astimezone(timezone.utc)
        wall = moment.replace(tzinfo=None)
        if kind is TargetType.LOCAL_DATETIME:
            return wall
        if kind is TargetType.DATE:
            return wall.date()
        return wall.time()

    def _normalize(self, target: str, value: Any) -> _Temporal:
        if isinstance(value, bool):
            raise UnconvertibleSourceError(target, value, "boolean is not a date")
        if isinstance(value, (int, float, Decimal)):
            return from_epoch_millis(value)
        if isinstance(value, str):
            return parse_timestamp(value)
        if isinstance(value, (datetime, date, time)):
            return value
        raise UnconvertibleSourceError(target, value)

    def _resolve(self, target: str, value: Any) -> TargetType:
        for tag in lineage(target):
            if tag in _KINDS:
                return _KINDS[tag]
        raise UnconvertibleSourceError(target, value, "not a temporal target")


_KINDS: dict[str, TargetType] = {str(t): t for t in TEMPORAL_TARGETS}
