"""Date pattern formatting and string escaping utilities."""

from __future__ import annotations

import re
from datetime import date, datetime, time

# Pattern letters: runs of the same letter, quoted literals, or any single char
_PATTERN_TOKEN_RE = re.compile(r"([a-zA-Z])\1*|'(?:[^']|'')*'|.", re.DOTALL)

_DATE_LETTERS = frozenset("yMd")
_TIME_LETTERS = frozenset("HhmsSa")

_SHORT_ESCAPES: dict[str, str] = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _format_field(value: date | time, token: str) -> str:
    letter, width = token[0], len(token)
    if letter in _DATE_LETTERS and not isinstance(value, date):
        raise ValueError(f"pattern letter {letter!r} requires a date value")
    if letter in _TIME_LETTERS and not isinstance(value, (datetime, time)):
        raise ValueError(f"pattern letter {letter!r} requires a time value")

    if letter == "y":
        if width == 2:
            return f"{value.year % 100:02d}"
        return f"{value.year:0{width}d}"
    if letter == "M":
        return f"{value.month:0{width}d}"
    if letter == "d":
        return f"{value.day:0{width}d}"
    if letter == "H":
        return f"{value.hour:0{width}d}"
    if letter == "h":
        return f"{(value.hour % 12) or 12:0{width}d}"
    if letter == "m":
        return f"{value.minute:0{width}d}"
    if letter == "s":
        return f"{value.second:0{width}d}"
    if letter == "S":
        return f"{value.microsecond:06d}"[:width].ljust(width, "0")
    if letter == "a":
        return "AM" if value.hour < 12 else "PM"
    if letter == "X":
        offset = value.utcoffset() if isinstance(value, (datetime, time)) else None
        if offset is None:
            raise ValueError("pattern letter 'X' requires an aware value")
        total = int(offset.total_seconds()) // 60
        if total == 0:
            return "Z"
        sign = "+" if total > 0 else "-"
        hours, minutes = divmod(abs(total), 60)
        if width == 1:
            return f"{sign}{hours:02d}" + (f"{minutes:02d}" if minutes else "")
        if width == 2:
            return f"{sign}{hours:02d}{minutes:02d}"
        return f"{sign}{hours:02d}:{minutes:02d}"
    raise ValueError(f"unsupported pattern letter {letter!r}")


def format_datetime(value: date | time, pattern: str) -> str:
    """Format a date/time value with a Java-style pattern such as ``yyyy-MM-dd HH:mm:ss.S``.

    ``S`` renders the leading fraction-of-second digits (truncated, not
    rounded); text in single quotes is copied verbatim and ``''`` is a
    literal quote.
    """
    out: list[str] = []
    for match in _PATTERN_TOKEN_RE.finditer(pattern):
        token = match.group(0)
        if token.startswith("'"):
            out.append("'" if token == "''" else token[1:-1].replace("''", "'"))
        elif token[0].isascii() and token[0].isalpha():
            out.append(_format_field(value, token))
        else:
            out.append(token)
    return "".join(out)


def _needs_unicode_escape(ch: str) -> bool:
    code = ord(ch)
    return (
        code < 0x20
        or 0x80 <= code <= 0xA0
        or 0x2000 <= code <= 0x2010
        or 0x2028 <= code <= 0x2029
        or code in (0x2060, 0xFEFF)
    )


def escape(value: str | None) -> str | None:
    """Escape invisible and control characters, e.g. a newline becomes ``\\n``."""
    if not value:
        return value
    out: list[str] = []
    for ch in value:
        if ch in _SHORT_ESCAPES:
            out.append(_SHORT_ESCAPES[ch])
        elif _needs_unicode_escape(ch):
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)
