"""Date-family conversion tests."""

from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from jsonconv import TargetType
from jsonconv._constants import EPOCH, NORM_DATE_PATTERN
from jsonconv._errors import UnconvertibleSourceError
from jsonconv._utils import format_datetime
from jsonconv.convert import default_registry, from_epoch_millis, to_epoch_millis


CST = timezone(timedelta(hours=8))
UTC_REGISTRY = default_registry(timezone.utc)
CST_REGISTRY = default_registry(CST)

# Epoch milliseconds covering the whole datetime range (years 1..9999)
MIN_MILLIS = -62_135_596_800_000
MAX_MILLIS = 253_402_300_799_999
DAY_MILLIS = 86_400_000


class TestEpochMillis:
    def test_long_millis(self, utc_registry):
        result = utc_registry.convert(TargetType.DATETIME, 1_494_059_400_000)
        assert result == datetime(2017, 5, 6, 8, 30, tzinfo=timezone.utc)

    def test_negative_int_lands_in_december_1969(self, utc_registry):
        result = utc_registry.convert(TargetType.DATETIME, -1497600000)
        assert result == EPOCH - timedelta(milliseconds=1497600000)
        assert (result.year, result.month) == (1969, 12)

    def test_negative_int_in_utc_plus_8(self, cst_registry):
        result = cst_registry.convert(TargetType.DATETIME, -1497600000)
        assert result == datetime(1969, 12, 15, tzinfo=CST)
        assert result.utcoffset() == timedelta(hours=8)

    def test_negative_int_narrowed_to_date(self, cst_registry):
        assert cst_registry.convert(TargetType.DATE, -1497600000) == date(1969, 12, 15)

    def test_narrowed_date_depends_on_zone(self, utc_registry):
        assert utc_registry.convert(TargetType.DATE, -1497600000) == date(1969, 12, 14)

    def test_float_millis(self, utc_registry):
        result = utc_registry.convert(TargetType.INSTANT, 1500.0)
        assert result == EPOCH + timedelta(milliseconds=1500)

    def test_decimal_millis(self, utc_registry):
        assert utc_registry.convert(TargetType.INSTANT, Decimal("1000")) == EPOCH + timedelta(seconds=1)

    def test_out_of_range_millis(self, utc_registry):
        with pytest.raises(UnconvertibleSourceError):
            utc_registry.convert(TargetType.DATETIME, 10**20)

    def test_bool_is_not_epoch(self, utc_registry):
        with pytest.raises(UnconvertibleSourceError):
            utc_registry.convert(TargetType.DATETIME, True)

    def test_from_epoch_millis(self):
        assert from_epoch_millis(0) == EPOCH

    @given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
    def test_32_bit_values(self, millis):
        result = UTC_REGISTRY.convert(TargetType.DATETIME, millis)
        assert result - EPOCH == timedelta(milliseconds=millis)

    @given(st.integers(min_value=MIN_MILLIS, max_value=MAX_MILLIS))
    def test_64_bit_values(self, millis):
        result = UTC_REGISTRY.convert(TargetType.DATETIME, millis)
        assert result - EPOCH == timedelta(milliseconds=millis)

    def test_to_epoch_millis_is_exact(self):
        value = datetime(2017, 5, 6, 8, 30, 0, 123000, tzinfo=timezone.utc)
        assert to_epoch_millis(value) == 1494059400123

    def test_to_epoch_millis_reads_naive_in_zone(self):
        assert to_epoch_millis(datetime(1970, 1, 1, 8), CST) == 0
        assert to_epoch_millis(date(1970, 1, 2), CST) == 57_600_000

    def test_local_datetime_back_to_millis(self, cst_registry):
        local = cst_registry.convert(TargetType.LOCAL_DATETIME, 0)
        assert local == datetime(1970, 1, 1, 8)
        assert cst_registry.convert(TargetType.INT, local) == 0

    @given(st.integers(min_value=MIN_MILLIS + DAY_MILLIS, max_value=MAX_MILLIS - DAY_MILLIS))
    def test_local_datetime_round_trip_outside_utc(self, millis):
        local = CST_REGISTRY.convert(TargetType.LOCAL_DATETIME, millis)
        assert CST_REGISTRY.convert(TargetType.INT, local) == millis


class TestStrings:
    def test_date_round_trip(self, utc_registry):
        value = utc_registry.convert(TargetType.DATETIME, "2017-05-06")
        assert format_datetime(value, NORM_DATE_PATTERN) == "2017-05-06"

    def test_date_to_date(self, utc_registry):
        assert utc_registry.convert(TargetType.DATE, "2017-05-06") == date(2017, 5, 6)

    def test_single_fraction_digit_preserved(self, utc_registry):
        value = utc_registry.convert(TargetType.LOCAL_DATETIME, "2020-12-12 12:12:12.0")
        assert value == datetime(2020, 12, 12, 12, 12, 12)
        assert format_datetime(value, "yyyy-MM-dd HH:mm:ss.S") == "2020-12-12 12:12:12.0"

    def test_naive_string_read_in_configured_zone(self, cst_registry):
        value = cst_registry.convert(TargetType.INSTANT, "2017-05-06 08:00:00")
        assert value == datetime(2017, 5, 6, 0, tzinfo=timezone.utc)

    def test_zoned_string_to_local_datetime(self, cst_registry):
        value = cst_registry.convert(TargetType.LOCAL_DATETIME, "2021-09-01T18:00:00Z")
        assert value == datetime(2021, 9, 2, 2, 0)
        assert value.tzinfo is None

    def test_iso_to_date(self, utc_registry):
        assert utc_registry.convert(TargetType.DATE, "2017-05-06T08:30:00") == date(2017, 5, 6)

    def test_time_string(self, utc_registry):
        assert utc_registry.convert(TargetType.TIME, "08:30:15") == time(8, 30, 15)

    def test_time_string_has_no_date(self, utc_registry):
        with pytest.raises(UnconvertibleSourceError):
            utc_registry.convert(TargetType.DATETIME, "08:30:15")

    @pytest.mark.parametrize("text", ["not a date", "2017-13-01", "", "2017-05"])
    def test_unrecognized_string(self, utc_registry, text):
        with pytest.raises(UnconvertibleSourceError) as exc_info:
            utc_registry.convert(TargetType.DATETIME, text)
        assert isinstance(exc_info.value.wrapped, ValueError)
        assert exc_info.value.raw_value == text

    @given(st.dates(min_value=date(1000, 1, 1)))
    def test_date_pattern_round_trip(self, day):
        text = f"{day.year:04d}-{day.month:02d}-{day.day:02d}"
        value = UTC_REGISTRY.convert(TargetType.DATETIME, text)
        assert format_datetime(value, NORM_DATE_PATTERN) == text


class TestExistingValues:
    def test_local_datetime_to_date(self, utc_registry):
        value = datetime(2017, 5, 6, 8, 30)
        assert utc_registry.convert(TargetType.DATE, value) == date(2017, 5, 6)

    def test_local_datetime_to_datetime(self, cst_registry):
        value = cst_registry.convert(TargetType.DATETIME, datetime(2017, 5, 6, 8, 30))
        assert value == datetime(2017, 5, 6, 8, 30, tzinfo=CST)

    def test_aware_to_local_datetime(self, cst_registry):
        value = datetime(2017, 5, 6, 0, 30, tzinfo=timezone.utc)
        assert cst_registry.convert(TargetType.LOCAL_DATETIME, value) == datetime(2017, 5, 6, 8, 30)

    def test_aware_keeps_instant(self, cst_registry):
        value = datetime(2017, 5, 6, 0, 30, tzinfo=timezone.utc)
        assert cst_registry.convert(TargetType.DATETIME, value) == value

    def test_date_to_local_datetime(self, utc_registry):
        assert utc_registry.convert(TargetType.LOCAL_DATETIME, date(2017, 5, 6)) == datetime(2017, 5, 6)

    def test_datetime_to_time(self, utc_registry):
        assert utc_registry.convert(TargetType.TIME, datetime(2017, 5, 6, 8, 30, 1)) == time(8, 30, 1)

    def test_time_identity(self, utc_registry):
        assert utc_registry.convert(TargetType.TIME, time(8, 30)) == time(8, 30)

    def test_time_to_date_fails(self, utc_registry):
        with pytest.raises(UnconvertibleSourceError):
            utc_registry.convert(TargetType.DATE, time(8, 30))

    def test_system_local_zone(self):
        value = default_registry().convert(TargetType.DATETIME, 0)
        assert value.tzinfo is not None
        assert value == EPOCH


class TestUnrecognizedShapes:
    @pytest.mark.parametrize("value", [object(), [2017, 5, 6], {"year": 2017}, b"2017-05-06"])
    def test_fails(self, utc_registry, value):
        with pytest.raises(UnconvertibleSourceError):
            utc_registry.convert(TargetType.DATETIME, value)


class TestFamilySubtypes:
    def test_unknown_datetime_child(self, utc_registry):
        value = utc_registry.convert("datetime.local.custom", "2017-05-06 08:30:00")
        assert value == datetime(2017, 5, 6, 8, 30)

    def test_unknown_date_child(self, utc_registry):
        assert utc_registry.convert("date.sql", 0) == date(1970, 1, 1)
