"""Formatting and escaping utility tests."""

from datetime import date, datetime, time, timedelta, timezone

import pytest

from jsonconv._constants import (
    NORM_DATE_PATTERN,
    NORM_DATETIME_MS_PATTERN,
    NORM_DATETIME_PATTERN,
    NORM_TIME_PATTERN,
    UTC_PATTERN,
)
from jsonconv._utils import escape, format_datetime

MOMENT = datetime(2020, 12, 12, 12, 12, 12, 345678)


class TestFormatDatetime:
    def test_date_pattern(self):
        assert format_datetime(date(2017, 5, 6), NORM_DATE_PATTERN) == "2017-05-06"

    def test_datetime_pattern(self):
        assert format_datetime(MOMENT, NORM_DATETIME_PATTERN) == "2020-12-12 12:12:12"

    def test_millisecond_pattern(self):
        assert format_datetime(MOMENT, NORM_DATETIME_MS_PATTERN) == "2020-12-12 12:12:12.345"

    def test_single_fraction_digit(self):
        value = datetime(2020, 12, 12, 12, 12, 12)
        assert format_datetime(value, "yyyy-MM-dd HH:mm:ss.S") == "2020-12-12 12:12:12.0"

    def test_fraction_truncates(self):
        assert format_datetime(MOMENT, "ss.SS") == "12.34"

    def test_time_pattern(self):
        assert format_datetime(time(8, 5, 3), NORM_TIME_PATTERN) == "08:05:03"

    def test_quoted_literal(self):
        value = datetime(2021, 9, 1, 18, tzinfo=timezone.utc)
        assert format_datetime(value, UTC_PATTERN) == "2021-09-01T18:00:00Z"

    def test_escaped_quote(self):
        assert format_datetime(date(2017, 5, 6), "yyyy''MM") == "2017'05"

    def test_two_digit_year(self):
        assert format_datetime(date(2017, 5, 6), "yy/M/d") == "17/5/6"

    def test_twelve_hour_clock(self):
        assert format_datetime(time(0, 30), "hh:mm a") == "12:30 AM"
        assert format_datetime(time(13, 30), "h:mm a") == "1:30 PM"

    def test_offset(self):
        value = datetime(2021, 9, 1, 18, tzinfo=timezone(timedelta(hours=8)))
        assert format_datetime(value, "HH:mmXXX") == "18:00+08:00"

    def test_unsupported_letter(self):
        with pytest.raises(ValueError, match="unsupported pattern letter"):
            format_datetime(MOMENT, "yyyy QQ")

    def test_time_letter_on_date(self):
        with pytest.raises(ValueError, match="requires a time value"):
            format_datetime(date(2017, 5, 6), "HH")

    def test_date_letter_on_time(self):
        with pytest.raises(ValueError, match="requires a date value"):
            format_datetime(time(8, 0), "yyyy")

    def test_offset_on_naive(self):
        with pytest.raises(ValueError, match="aware"):
            format_datetime(MOMENT, "X")


class TestEscape:
    def test_plain_text_unchanged(self):
        assert escape("hello, world") == "hello, world"

    def test_none_passes_through(self):
        assert escape(None) is None

    def test_empty_passes_through(self):
        assert escape("") == ""

    @pytest.mark.parametrize(
        "raw, escaped",
        [
            ("a\nb", "a\\nb"),
            ("a\tb", "a\\tb"),
            ("a\rb", "a\\rb"),
            ("a\bb", "a\\bb"),
            ("a\fb", "a\\fb"),
        ],
    )
    def test_short_escapes(self, raw, escaped):
        assert escape(raw) == escaped

    @pytest.mark.parametrize(
        "raw, escaped",
        [
            ("\x01", "\\u0001"),
            ("\x85", "\\u0085"),
            ("\u2028", "\\u2028"),
            ("\ufeff", "\\ufeff"),
        ],
    )
    def test_unicode_escapes(self, raw, escaped):
        assert escape(raw) == escaped

    def test_quotes_are_not_escaped(self):
        assert escape('say "hi"') == 'say "hi"'

    def test_non_ascii_text_kept(self):
        assert escape("héllo 日本") == "héllo 日本"
