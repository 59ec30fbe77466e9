"""Date string recognition.

A small LALR grammar covers the recognized date string forms:

- ``yyyy-MM-dd`` and ``yyyy/MM/dd``
- ``yyyy-MM-dd HH:mm[:ss[.S...]]``
- ISO-8601 ``yyyy-MM-ddTHH:mm[:ss[.S...]][Z|+HH[:MM]|-HH[:MM]]``
- bare ``HH:mm[:ss[.S...]]``

The fraction of a second is kept verbatim up to microsecond precision, so
``12:12:12.0`` parses to a zero fraction rather than being rejected or
padded into milliseconds.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo

from lark import Lark, Transformer, v_args
from lark.exceptions import LarkError

from jsonconv._constants import MAX_FRACTION_DIGITS

_GRAMMAR = r"""
start: date_time | date | time

date_time: date ("T" | " ") time zone?

date: INT "-" INT "-" INT
    | INT "/" INT "/" INT

time: INT ":" INT (":" INT ("." INT)?)?

zone: "Z"                  -> utc
    | "+" INT (":" INT)?   -> east
    | "-" INT (":" INT)?   -> west

INT: /[0-9]+/
"""


def _fraction_to_micros(digits: str) -> int:
    return int(digits[:MAX_FRACTION_DIGITS].ljust(MAX_FRACTION_DIGITS, "0"))


def _offset(sign: int, hours: str, minutes: str | None) -> tzinfo:
    if minutes is None and len(hours) == 4:
        hours, minutes = hours[:2], hours[2:]
    if len(hours) > 2 or (minutes is not None and len(minutes) != 2):
        raise ValueError(f"malformed UTC offset {hours}:{minutes}")
    delta = timedelta(hours=int(hours), minutes=int(minutes or 0))
    return timezone(sign * delta)


@v_args(inline=True)
class _TimestampBuilder(Transformer):
    """Builds ``date``/``time``/``datetime`` values from the parse tree."""

    def start(self, value):
        return value

    def date(self, year, month, day):
        if len(year) != 4:
            raise ValueError(f"year must have four digits, got {year!r}")
        return date(int(year), int(month), int(day))

    def time(self, hour, minute, second=None, fraction=None):
        micros = _fraction_to_micros(str(fraction)) if fraction is not None else 0
        return time(int(hour), int(minute), int(second or 0), micros)

    def date_time(self, day, clock, zone=None):
        return datetime.combine(day, clock, tzinfo=zone)

    def utc(self):
        return timezone.utc

    def east(self, hours, minutes=None):
        return _offset(1, str(hours), minutes and str(minutes))

    def west(self, hours, minutes=None):
        return _offset(-1, str(hours), minutes and str(minutes))


_parser = Lark(_GRAMMAR, parser="lalr", transformer=_TimestampBuilder())


def parse_timestamp(text: str) -> datetime | date | time:
    """Parse a recognized date string.

    Returns a ``datetime`` (aware when the string carries a zone), a
    ``date`` for date-only strings, or a ``time`` for time-only strings.

    Raises:
        ValueError: If the string matches no recognized form or names an
            out-of-range field.
    """
    try:
        return _parser.parse(text.strip())
    except LarkError as e:
        raise ValueError(f"unrecognized date string {text!r}") from e
