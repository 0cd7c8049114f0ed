import pytest

from oratypes.errors import (
    InternalError,
    InvalidOperationError,
    NoDataFoundError,
    OracleTypeError,
    OutOfRangeError,
    ParseOracleTypeError,
)


def test_parse_error_keeps_typename():
    err = ParseOracleTypeError("IntervalYM")
    assert err.typename == "IntervalYM"
    assert "IntervalYM" in str(err)


@pytest.mark.parametrize("typename", ["Timestamp", "IntervalDS", "IntervalYM"])
def test_parse_error_message_names_type(typename):
    assert typename in str(ParseOracleTypeError(typename))


def test_parse_error_caught_as_value_error():
    err = ParseOracleTypeError("Timestamp")
    assert isinstance(err, ValueError)
    try:
        raise err
    except ValueError as caught:
        assert caught is err
        assert caught.typename == "Timestamp"


@pytest.mark.parametrize(
    "factory",
    [
        lambda: ParseOracleTypeError("Timestamp"),
        lambda: OutOfRangeError("out of range"),
        lambda: NoDataFoundError(),
        lambda: InvalidOperationError("invalid operation"),
        lambda: InternalError("internal"),
    ],
)
def test_all_errors_share_base(factory):
    err = factory()
    assert isinstance(err, OracleTypeError)
    try:
        raise err
    except OracleTypeError as caught:
        assert caught is err


def test_out_of_range_message_kept():
    err = OutOfRangeError("invalid time zone offset: 90000")
    assert str(err) == "invalid time zone offset: 90000"
    assert isinstance(err, ValueError)


def test_no_data_found_is_lookup_error():
    err = NoDataFoundError()
    assert isinstance(err, LookupError)
    try:
        raise err
    except LookupError as caught:
        assert caught is err


def test_internal_error_is_runtime_error():
    err = InternalError("Unknown oracle type number: 9999")
    assert isinstance(err, RuntimeError)
    assert "9999" in str(err)


def test_invalid_operation_not_value_error():
    err = InvalidOperationError("Cannot bind RefCursor as an IN parameter")
    assert not isinstance(err, ValueError)
    assert str(err) == "Cannot bind RefCursor as an IN parameter"