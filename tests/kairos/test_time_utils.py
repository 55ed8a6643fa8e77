from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from kairos.constants import GENESIS_MS
from kairos.errors import KairosInputError
from kairos.time_utils import (
    civil_from_days,
    datetime_to_epoch_ms,
    days_from_civil,
    days_in_month,
    epoch_ms_to_iso,
    ensure_utc,
    is_leap_year,
    parse_signed_iso_to_epoch_ms,
)

UTC = timezone.utc


def test_genesis_instant():
    assert datetime_to_epoch_ms(datetime(2024, 5, 10, 6, 45, 41, 888000, tzinfo=UTC)) == GENESIS_MS
    assert epoch_ms_to_iso(GENESIS_MS) == "2024-05-10T06:45:41.888Z"


def test_ensure_utc():
    naive = datetime(2024, 1, 1)
    assert ensure_utc(naive).tzinfo is UTC
    plus2 = datetime(2024, 1, 1, 2, tzinfo=timezone(timedelta(hours=2)))
    assert ensure_utc(plus2) == datetime(2024, 1, 1, tzinfo=UTC)


def test_sub_millisecond_is_floored():
    assert datetime_to_epoch_ms(datetime(1970, 1, 1, 0, 0, 0, 999, tzinfo=UTC)) == 0
    assert datetime_to_epoch_ms(datetime(1969, 12, 31, 23, 59, 59, 999999, tzinfo=UTC)) == -1


@pytest.mark.parametrize(
    "dt",
    [
        datetime(1970, 1, 1, tzinfo=UTC),
        datetime(2000, 2, 29, 12, 34, 56, 789000, tzinfo=UTC),
        datetime(1900, 3, 1, tzinfo=UTC),
        datetime(1, 1, 1, tzinfo=UTC),
        datetime(9999, 12, 31, 23, 59, 59, tzinfo=UTC),
    ],
)
def test_parser_agrees_with_datetime(dt):
    text = (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}T"
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{dt.microsecond // 1000:03d}Z"
    )
    assert parse_signed_iso_to_epoch_ms(text) == datetime_to_epoch_ms(dt)


def test_civil_days_round_trip():
    for days in range(-800_000, 800_000, 997):
        assert days_from_civil(*civil_from_days(days)) == days
    assert days_from_civil(1970, 1, 1) == 0
    # Year 0 is a leap year in the proleptic calendar
    assert days_from_civil(1, 1, 1) - days_from_civil(0, 1, 1) == 366


def test_signed_and_extended_years():
    assert parse_signed_iso_to_epoch_ms("-0001-12-31T00:00:00Z") == (
        (days_from_civil(0, 1, 1) - 1) * 86_400_000
    )
    ms = parse_signed_iso_to_epoch_ms("+12345-01-01T00:00:00Z")
    assert epoch_ms_to_iso(ms) == "+012345-01-01T00:00:00.000Z"
    assert epoch_ms_to_iso(parse_signed_iso_to_epoch_ms("-0044-03-15T12:00Z")).startswith("-000044-03-15T12:00")


def test_offsets_and_fractions():
    assert parse_signed_iso_to_epoch_ms("2024-01-01T02:00:00+02:00") == parse_signed_iso_to_epoch_ms(
        "2024-01-01T00:00:00Z"
    )
    assert parse_signed_iso_to_epoch_ms("1970-01-01T00:00:00.0005Z") == 1
    assert parse_signed_iso_to_epoch_ms("1970-01-01T00:00:00.0004Z") == 0


def test_no_offset_is_utc():
    assert parse_signed_iso_to_epoch_ms("1970-01-01T00:00:01") == 1000


@pytest.mark.parametrize("text", ["nonsense", "2024-13-01T00:00:00Z", "2024-01-01T25:00:00Z", ""])
def test_invalid_iso_raises(text):
    with pytest.raises(KairosInputError):
        parse_signed_iso_to_epoch_ms(text)


def test_non_string_raises():
    with pytest.raises(KairosInputError):
        parse_signed_iso_to_epoch_ms(12)



@pytest.mark.parametrize("year, month, days", [(2024, 2, 29), (2025, 2, 28), (2000, 2, 29), (1900, 2, 28), (0, 2, 29), (2025, 4, 30), (2025, 12, 31)])
def test_days_in_month(year, month, days):
    assert days_in_month(year, month) == days


def test_leap_day_only_in_leap_years():
    assert parse_signed_iso_to_epoch_ms("2024-02-29T00:00:00Z") == parse_signed_iso_to_epoch_ms(
        "2024-03-01T00:00:00Z"
    ) - 86_400_000
    assert parse_signed_iso_to_epoch_ms("2000-02-29T00:00:00Z") == datetime_to_epoch_ms(datetime(2000, 2, 29, tzinfo=UTC))
    assert is_leap_year(-4)
    assert not is_leap_year(-100)


@pytest.mark.parametrize(
    "text",
    [
        "2025-02-29T00:00:00Z",
        "1900-02-29T00:00:00Z",
        "2025-02-31T00:00:00Z",
        "2025-04-31T00:00:00Z",
        "2025-06-00T00:00:00Z",
        "2025-01-01T00:00:00+24:00",
        "2025-01-01T00:00:00+01:60",
        "+1234567-01-01T00:00:00Z",
    ],
)
def test_impossible_dates_are_rejected(text):
    with pytest.raises(KairosInputError):
        parse_signed_iso_to_epoch_ms(text)
