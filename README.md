# oratypes

Oracle SQL data types modelled as plain Python values, with no runtime
dependencies.

- `oratypes.timestamp.Timestamp` covers DATE and TIMESTAMP values, with or
  without a time zone offset.
- `oratypes.interval_ds.IntervalDS` is INTERVAL DAY TO SECOND.
- `oratypes.interval_ym.IntervalYM` is INTERVAL YEAR TO MONTH.
- `oratypes.oracle_type.OracleType` describes column and bind types, such as
  `NUMBER(10,2)` or `TIMESTAMP(3) WITH TIME ZONE`.
- `oratypes.collection` has iterators that walk sparse collections forwards
  and backwards.
- `oratypes.conversions` links these types to `datetime`, `date` and
  `timedelta`, and picks the Oracle type used to bind a Python value.

The value types are frozen dataclasses. Each prints in Oracle's text form
with `str()` and reads that form back with the `parse` class method. The
precision fields only change the text form: two values compare equal (and
hash alike) when their date, time, interval and offset fields match, whatever
their precisions. For `Timestamp` the `with_tz` flag is ignored in
comparisons as well.

## Installation

```
pip install oratypes
```

## Timestamps

```python
from oratypes.timestamp import Timestamp

ts = Timestamp.parse("2017-08-09 11:22:33.500 -08:00")
print(ts)                 # 2017-08-09 11:22:33.500 -08:00
print(ts.precision)       # 3
print(ts.tz_offset())     # -28800
print(ts.and_prec(0))     # 2017-08-09 11:22:33 -08:00

ts = Timestamp(2017, 8, 9, 11, 22, 33, 500000000)
print(ts)                         # 2017-08-09 11:22:33.500000000
print(ts.and_tz_hm_offset(8, 45)) # 2017-08-09 11:22:33.500000000 +08:45
print(ts.and_tz_offset(-5400))    # 2017-08-09 11:22:33.500000000 -01:30
```

`Timestamp.parse` accepts a year alone (`2012`), `YYYYMMDD` and
`YYYY-MM-DD` dates, a time after `T` or a space as `HH:MM:SS` or `HHMMSS`,
up to nine fractional digits (more are truncated), and a zone of `Z`,
`+HH:MM`, `+HHMM`, `-HH:MM` or `-HHMM`, optionally after a space. A leading
`-` gives a negative year. The precision is the number of fractional digits
given.

## Intervals

```python
from oratypes.interval_ds import IntervalDS
from oratypes.interval_ym import IntervalYM

ds = IntervalDS(1, 2, 3, 4, 500000000)
print(ds)                 # +000000001 02:03:04.500000000
print(ds.and_prec(2, 3))  # +01 02:03:04.500

ds = IntervalDS.parse("+1 02:03:04.50")
print(ds.lfprec, ds.fsprec)  # 1 2

ym = IntervalYM.parse("+002-3")
print(ym)                 # +002-03
print(IntervalYM(-2, -3)) # -000000002-03
```

All components of a negative interval are zero or negative. Leading field
precisions from 2 to 9 zero-pad the days or years; other values print them
unpadded.

## Type descriptors

`OracleType` is a frozen dataclass holding an `OracleTypeKind` and the
parameters that kind uses (`size`, `precision`, `scale`, `fsprec`,
`object_type`). It prints in SQL syntax:

```python
from oratypes.oracle_type import OracleType, OracleTypeKind

print(OracleType(OracleTypeKind.NUMBER, precision=10, scale=2))  # NUMBER(10,2)
print(OracleType(OracleTypeKind.INTERVAL_DS, precision=2, fsprec=6))
# INTERVAL DAY TO SECOND
```

`OracleType.native_type()` returns the `NativeType` used to carry a value of
that type; it raises `InternalError` for kinds without one (JSON). An OBJECT
type needs an `object_type` with `schema` and `name` attributes and prints as
`SCHEMA.NAME`.

## Collections

`CollectionIndices`, `CollectionValues` and `CollectionItems` wrap any object
with `first_index()`, `last_index()`, `next_index(i)`, `prev_index(i)` and
`get(i)`, whose index methods raise `NoDataFoundError` when there is no such
index. They yield indices, values or `(index, value)` pairs, skipping holes.
`next()` walks forward and `next_back()` walks backward; both raise
`StopIteration` at the ends.

## Conversions

The functions in `oratypes.conversions` convert values to and from Python's
date and time types:

- `datetime_from_timestamp(ts, tz=None)` gives an aware datetime, using the
  timestamp's own offset unless `tz` is given.
- `naive_datetime_from_timestamp(ts)` and `date_from_timestamp(ts)` ignore the
  offset.
- `timestamp_from_datetime(value)` keeps the offset of an aware datetime;
  `timestamp_from_date(value)` gives midnight.
- `timedelta_from_interval(interval)` and `interval_from_timedelta(value)`
  convert INTERVAL DAY TO SECOND values.

Python's date and time types hold microseconds, so nanoseconds are truncated
toward zero on the way to them. Impossible dates, bad offsets and intervals
of a billion days or more raise `OutOfRangeError`.

Two functions choose the Oracle type for binding:

- `oracle_type_for(value)` gives the type used to bind a value: `NUMBER` for
  numbers, `BOOLEAN` for `bool`, `NVARCHAR2(n)` for strings (n is the UTF-8
  length), `RAW(n)` for bytes, `TIMESTAMP(9) WITH TIME ZONE` for `Timestamp`
  and aware datetimes, `TIMESTAMP(9)` for naive datetimes, `TIMESTAMP(0)` for
  dates, and `INTERVAL DAY(9) TO SECOND(9)` or `INTERVAL YEAR(9) TO MONTH` for
  intervals. An `OracleType`, or a `(value, OracleType)` pair, gives that type.
- `oracle_type_for_null(pytype)` gives the type used to bind a null of a
  Python type.

Both raise `TypeError` for types they do not know.

## Errors

All errors derive from `oratypes.errors.OracleTypeError`:

- `ParseOracleTypeError` (also a `ValueError`) for malformed text.
- `OutOfRangeError` (also a `ValueError`) for values that cannot be
  represented.
- `NoDataFoundError` (also a `LookupError`), which collection objects raise
  when an index does not exist.
- `InvalidOperationError` for operations that are not allowed.
- `InternalError` (also a `RuntimeError`) for types that are not supported.

## What this package does not do

It only models values and types. It does not connect to a database, run
statements or fetch rows, and it has no LOB, object or ref-cursor handles.
The collection iterators work over whatever collection object you supply.

## Running the tests

```
pip install -e ".[test]"
pytest
```