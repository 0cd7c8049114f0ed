"""Conversions between Python values and Oracle values and types.

Python's ``datetime`` types hold microseconds, so nanoseconds coming from
an Oracle value are truncated toward zero when converted.
"""

from __future__ import annotations

import datetime as _dt

from oratypes.errors import OutOfRangeError
from oratypes.interval_ds import IntervalDS
from oratypes.interval_ym import IntervalYM
from oratypes.oracle_type import OracleType, OracleTypeKind
from oratypes.timestamp import Timestamp

_NUMBER = OracleType(OracleTypeKind.NUMBER, precision=0, scale=0)
_BOOLEAN = OracleType(OracleTypeKind.BOOLEAN)
_TIMESTAMP_TZ_9 = OracleType(OracleTypeKind.TIMESTAMP_TZ, fsprec=9)
_TIMESTAMP_TZ_0 = OracleType(OracleTypeKind.TIMESTAMP_TZ, fsprec=0)
_TIMESTAMP_9 = OracleType(OracleTypeKind.TIMESTAMP, fsprec=9)
_TIMESTAMP_0 = OracleType(OracleTypeKind.TIMESTAMP, fsprec=0)
_INTERVAL_DS = OracleType(OracleTypeKind.INTERVAL_DS, precision=9, fsprec=9)
_INTERVAL_YM = OracleType(OracleTypeKind.INTERVAL_YM, precision=9)

_NULL_TYPES = {
    bool: _BOOLEAN,
    int: _NUMBER,
    float: _NUMBER,
    str: OracleType(OracleTypeKind.NVARCHAR2, size=0),
    bytes: OracleType(OracleTypeKind.RAW, size=0),
    bytearray: OracleType(OracleTypeKind.RAW, size=0),
    memoryview: OracleType(OracleTypeKind.RAW, size=0),
    Timestamp: _TIMESTAMP_TZ_9,
    IntervalDS: _INTERVAL_DS,
    IntervalYM: _INTERVAL_YM,
    _dt.datetime: _TIMESTAMP_TZ_9,
    _dt.date: _TIMESTAMP_0,
    _dt.timedelta: _INTERVAL_DS,
}


def _fixed_offset(ts):
    offset = ts.tz_offset()
    try:
        return _dt.timezone(_dt.timedelta(seconds=offset))
    except ValueError:
        raise OutOfRangeError(f"invalid time zone offset: {offset}") from None


def _date_or_raise(ts, message):
    try:
        return _dt.date(ts.year, ts.month, ts.day)
    except (ValueError, OverflowError):
        raise OutOfRangeError(message) from None


def _time_or_raise(ts, tzinfo):
    try:
        return _dt.time(
            ts.hour, ts.minute, ts.second, ts.nanosecond // 1000, tzinfo=tzinfo
        )
    except (ValueError, OverflowError):
        raise OutOfRangeError(
            f"invalid year-month-day: {ts.year}-{ts.month}-{ts.day} "
            f"{ts.hour}:{ts.minute}:{ts.second}.{ts.nanosecond:09d}"
        ) from None


def datetime_from_timestamp(ts, tz=None):
    """Return an aware datetime for ``ts``.

    With ``tz`` given, the timestamp's fields are read as wall time in that
    zone; otherwise the timestamp's own offset is used.
    """
    tzinfo = _fixed_offset(ts) if tz is None else tz
    day = _date_or_raise(
        ts, f"invalid month and/or day: {ts.year}-{ts.month}-{ts.day}"
    )
    return _dt.datetime.combine(day, _time_or_raise(ts, tzinfo))


def date_from_timestamp(ts):
    """Return the date part of ``ts``."""
    return _date_or_raise(
        ts, f"invalid year-month-day: {ts.year}-{ts.month}-{ts.day}"
    )


def naive_datetime_from_timestamp(ts):
    """Return a naive datetime with the fields of ``ts``, ignoring its offset."""
    day = date_from_timestamp(ts)
    return _dt.datetime.combine(day, _time_or_raise(ts, None))


def timestamp_from_datetime(value):
    """Return a Timestamp for a datetime; aware values keep their offset."""
    ts = Timestamp(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond * 1000,
    )
    offset = value.utcoffset()
    if offset is not None:
        ts = ts.and_tz_offset(int(offset.total_seconds()))
    return ts


def timestamp_from_date(value):
    """Return a Timestamp at midnight of the given date."""
    return Timestamp(value.year, value.month, value.day, 0, 0, 0, 0)


def timedelta_from_interval(interval):
    """Return a timedelta equal to an IntervalDS."""
    nanos = interval.nanoseconds
    micros = abs(nanos) // 1000
    if nanos < 0:
        micros = -micros
    try:
        return _dt.timedelta(
            days=interval.days,
            hours=interval.hours,
            minutes=interval.minutes,
            seconds=interval.seconds,
            microseconds=micros,
        )
    except OverflowError:
        raise OutOfRangeError(f"Duration overflow: {interval}") from None


def interval_from_timedelta(value):
    """Return an IntervalDS equal to a timedelta, all parts sharing one sign."""
    total_us = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
    sign = -1 if total_us < 0 else 1
    secs, micros = divmod(abs(total_us), 1_000_000)
    days, secs = divmod(secs, 86400)
    hours, secs = divmod(secs, 3600)
    minutes, secs = divmod(secs, 60)
    if days >= 1_000_000_000:
        raise OutOfRangeError(f"too large days: {value}")
    return IntervalDS(
        sign * days,
        sign * hours,
        sign * minutes,
        sign * secs,
        sign * micros * 1000,
    )


def oracle_type_for(value):
    """Return the Oracle type a value is bound as."""
    if isinstance(value, OracleType):
        return value
    if (
        isinstance(value, tuple)
        and len(value) == 2
        and isinstance(value[1], OracleType)
    ):
        return value[1]
    if isinstance(value, bool):
        return _BOOLEAN
    if isinstance(value, (int, float)):
        return _NUMBER
    if isinstance(value, str):
        return OracleType(OracleTypeKind.NVARCHAR2, size=len(value.encode("utf-8")))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return OracleType(OracleTypeKind.RAW, size=len(bytes(value)))
    if isinstance(value, Timestamp):
        return _TIMESTAMP_TZ_9
    if isinstance(value, IntervalDS):
        return _INTERVAL_DS
    if isinstance(value, IntervalYM):
        return _INTERVAL_YM
    if isinstance(value, _dt.datetime):
        return _TIMESTAMP_9 if value.utcoffset() is None else _TIMESTAMP_TZ_9
    if isinstance(value, _dt.date):
        return _TIMESTAMP_0
    if isinstance(value, _dt.timedelta):
        return _INTERVAL_DS
    raise TypeError(f"cannot bind a value of type {type(value).__name__}")


def oracle_type_for_null(pytype):
    """Return the Oracle type used to bind a null of the given Python type."""
    for cls in getattr(pytype, "__mro__", ()):
        if cls in _NULL_TYPES:
            return _NULL_TYPES[cls]
    raise TypeError(f"no Oracle type for null values of {pytype!r}")