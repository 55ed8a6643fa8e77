#!/usr/bin/env python3
"""
Time utilities for epoch conversions.

Provides UTC validation, datetime <-> epoch-ms helpers and a signed ISO-8601
parser that is not limited to the datetime year range.
"""

from __future__ import annotations

import re

from datetime import datetime, timedelta, timezone

from kairos.errors import KairosInputError
from kairos.numerics import euclid_div, euclid_divmod

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

MS_PER_DAY = 86_400_000
MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000

# Signed years of up to six digits, optional seconds and fraction, Z or +hh:mm/-hh:mm
SIGNED_ISO = re.compile(
    r"^([+-]?\d{4,6})-(\d{2})-(\d{2})T(\d{2}):(\d{2})"
    r"(?::(\d{2})(?:\.(\d{1,9}))?)?(Z|[+-]\d{2}:\d{2})$"
)


def ensure_utc(dt: datetime) -> datetime:
    """Ensure a datetime is timezone-aware and in UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def datetime_to_epoch_ms(dt: datetime) -> int:
    """Convert a datetime to Unix milliseconds (naive means UTC).

    Sub-millisecond precision is floored, matching millisecond clocks.
    """
    return (ensure_utc(dt) - UNIX_EPOCH) // timedelta(milliseconds=1)


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date (any year)."""
    y = year - 1 if month <= 2 else year
    m = month + 12 if month <= 2 else month
    era = euclid_div(y, 400)
    yoe = y - era * 400
    doy = (153 * (m - 3) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146_097 + doe - 719_468


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`days_from_civil`: (year, month, day)."""
    z = days + 719_468
    era, doe = euclid_divmod(z, 146_097)
    yoe = (doe - doe // 1460 + doe // 36_524 - doe // 146_096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap year (year 0 is a leap year)."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def parse_signed_iso_to_epoch_ms(iso: str) -> int:
    """Parse an ISO-8601 instant into Unix milliseconds.

    Accepts signed and extended years (``-0044-03-15T12:00Z``,
    ``+12345-01-01T00:00:00Z``) and an explicit offset. Fractions finer than a
    millisecond round half-up. Strings without an offset fall back to
    ``datetime.fromisoformat`` and are read as UTC.
    """
    if not isinstance(iso, str):
        raise KairosInputError(f"ISO timestamp must be a string, got {type(iso).__name__}")
    text = iso.strip()
    match = SIGNED_ISO.match(text)
    if not match:
        try:
            return datetime_to_epoch_ms(datetime.fromisoformat(text))
        except ValueError as e:
            raise KairosInputError(f"Invalid ISO datetime: {iso!r}") from e

    y, mo, d, hh, mm, ss, frac, tz = match.groups()
    year, month, day = int(y), int(mo), int(d)
    hour, minute, second = int(hh), int(mm), int(ss or 0)
    if not (
        1 <= month <= 12
        and 1 <= day <= days_in_month(year, month)
        and hour <= 23
        and minute <= 59
        and second <= 60
    ):
        raise KairosInputError(f"Invalid ISO datetime: {iso!r}")

    ms = 0
    if frac:
        nanos = int((frac + "000000000")[:9])
        ms = (nanos + 500_000) // 1_000_000

    offset_min = 0
    if tz != "Z":
        sign = -1 if tz[0] == "-" else 1
        tzh, tzm = (int(part) for part in tz[1:].split(":"))
        if tzh > 23 or tzm > 59:
            raise KairosInputError(f"Invalid UTC offset in {iso!r}")
        offset_min = sign * (tzh * 60 + tzm)

    local_ms = (
        days_from_civil(year, month, day) * MS_PER_DAY
        + hour * MS_PER_HOUR
        + minute * MS_PER_MINUTE
        + second * MS_PER_SECOND
        + ms
    )
    return local_ms - offset_min * MS_PER_MINUTE


def epoch_ms_to_iso(ms: int) -> str:
    """Format Unix ms as ``YYYY-MM-DDTHH:MM:SS.sssZ`` for any year.

    Years outside 0000..9999 carry an explicit sign and at least six digits.
    """
    days, tod = euclid_divmod(ms, MS_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, rem = divmod(tod, MS_PER_HOUR)
    minute, rem = divmod(rem, MS_PER_MINUTE)
    second, milli = divmod(rem, MS_PER_SECOND)
    if 0 <= year <= 9999:
        ytxt = f"{year:04d}"
    else:
        ytxt = f"{'-' if year < 0 else '+'}{abs(year):06d}"
    return f"{ytxt}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}.{milli:03d}Z"
