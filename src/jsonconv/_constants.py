"""Canonical date patterns and time constants."""

from datetime import datetime, timezone

NORM_DATE_PATTERN = "yyyy-MM-dd"
"""Date-only pattern, e.g. ``2017-05-06``."""

NORM_TIME_PATTERN = "HH:mm:ss"
"""Time-only pattern, e.g. ``08:30:00``."""

NORM_DATETIME_PATTERN = "yyyy-MM-dd HH:mm:ss"
"""Date-time pattern without fraction, e.g. ``2017-05-06 08:30:00``."""

NORM_DATETIME_MS_PATTERN = "yyyy-MM-dd HH:mm:ss.SSS"
"""Date-time pattern with milliseconds."""

UTC_PATTERN = "yyyy-MM-dd'T'HH:mm:ss'Z'"
"""ISO-8601 UTC pattern."""

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
"""Origin for epoch-millisecond interpretation of numeric sources."""

MAX_FRACTION_DIGITS = 6
"""Fraction-of-second precision kept when parsing (microseconds)."""
