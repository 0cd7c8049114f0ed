import types

import pytest

from oratypes.errors import InternalError, OracleTypeError
from oratypes.oracle_type import NativeType, OracleType, OracleTypeKind

K = OracleTypeKind


@pytest.mark.parametrize(
    "oratype, text",
    [
        (OracleType(K.ROWID), "ROWID"),
        (OracleType(K.BINARY_FLOAT), "BINARY_FLOAT"),
        (OracleType(K.BINARY_DOUBLE), "BINARY_DOUBLE"),
        (OracleType(K.DATE), "DATE"),
        (OracleType(K.CLOB), "CLOB"),
        (OracleType(K.NCLOB), "NCLOB"),
        (OracleType(K.BLOB), "BLOB"),
        (OracleType(K.BFILE), "BFILE"),
        (OracleType(K.REF_CURSOR), "REF CURSOR"),
        (OracleType(K.BOOLEAN), "BOOLEAN"),
        (OracleType(K.LONG), "LONG"),
        (OracleType(K.LONG_RAW), "LONG RAW"),
        (OracleType(K.JSON), "JSON"),
        (OracleType(K.INT64), "INT64 used internally"),
        (OracleType(K.UINT64), "UINT64 used internally"),
        (OracleType(K.NUMBER, precision=0, scale=0), "NUMBER"),
        (OracleType(K.FLOAT, precision=126), "FLOAT"),
        (OracleType(K.TIMESTAMP, fsprec=6), "TIMESTAMP"),
        (OracleType(K.TIMESTAMP_TZ, fsprec=6), "TIMESTAMP WITH TIME ZONE"),
        (OracleType(K.TIMESTAMP_LTZ, fsprec=6), "TIMESTAMP WITH LOCAL TIME ZONE"),
        (OracleType(K.INTERVAL_DS, precision=2, fsprec=6), "INTERVAL DAY TO SECOND"),
        (OracleType(K.INTERVAL_YM, precision=2), "INTERVAL YEAR TO MONTH"),
    ],
)
def test_fixed_names(oratype, text):
    assert str(oratype) == text


@pytest.mark.parametrize(
    "kind, name",
    [
        (K.VARCHAR2, "VARCHAR2"),
        (K.NVARCHAR2, "NVARCHAR2"),
        (K.CHAR, "CHAR"),
        (K.NCHAR, "NCHAR"),
        (K.RAW, "RAW"),
    ],
)
@pytest.mark.parametrize("size", [0, 1, 4000])
def test_sized_names(kind, name, size):
    assert str(OracleType(kind, size=size)) == f"{name}({size})"


@pytest.mark.parametrize("precision", [1, 10, 38])
def test_number_with_precision_only(precision):
    assert str(OracleType(K.NUMBER, precision=precision)) == f"NUMBER({precision})"


@pytest.mark.parametrize("precision, scale", [(10, 2), (5, -3), (38, 127)])
def test_number_with_scale(precision, scale):
    text = str(OracleType(K.NUMBER, precision=precision, scale=scale))
    assert text == f"NUMBER({precision},{scale})"


@pytest.mark.parametrize("scale", [-87, 5])
def test_number_default_precision_ignores_scale(scale):
    assert str(OracleType(K.NUMBER, precision=0, scale=scale)) == "NUMBER"


@pytest.mark.parametrize("precision", [1, 63, 125])
def test_float_with_precision(precision):
    assert str(OracleType(K.FLOAT, precision=precision)) == f"FLOAT({precision})"


@pytest.mark.parametrize("fsprec", [0, 3, 9])
def test_timestamp_precisions(fsprec):
    assert str(OracleType(K.TIMESTAMP, fsprec=fsprec)) == f"TIMESTAMP({fsprec})"
    assert (
        str(OracleType(K.TIMESTAMP_TZ, fsprec=fsprec))
        == f"TIMESTAMP({fsprec}) WITH TIME ZONE"
    )
    assert (
        str(OracleType(K.TIMESTAMP_LTZ, fsprec=fsprec))
        == f"TIMESTAMP({fsprec}) WITH LOCAL TIME ZONE"
    )


@pytest.mark.parametrize("lfprec, fsprec", [(9, 9), (2, 3), (6, 6), (0, 0)])
def test_interval_ds_with_precisions(lfprec, fsprec):
    text = str(OracleType(K.INTERVAL_DS, precision=lfprec, fsprec=fsprec))
    assert text == f"INTERVAL DAY({lfprec}) TO SECOND({fsprec})"


@pytest.mark.parametrize("lfprec", [0, 4, 9])
def test_interval_ym_with_precision(lfprec):
    text = str(OracleType(K.INTERVAL_YM, precision=lfprec))
    assert text == f"INTERVAL YEAR({lfprec}) TO MONTH"


def test_object_name():
    objtype = types.SimpleNamespace(schema="MDSYS", name="SDO_GEOMETRY")
    assert str(OracleType(K.OBJECT, object_type=objtype)) == "MDSYS.SDO_GEOMETRY"


def test_object_requires_object_type():
    with pytest.raises(ValueError):
        OracleType(K.OBJECT)


@pytest.mark.parametrize(
    "kind, native",
    [
        (K.VARCHAR2, NativeType.CHAR),
        (K.NVARCHAR2, NativeType.CHAR),
        (K.CHAR, NativeType.CHAR),
        (K.NCHAR, NativeType.CHAR),
        (K.ROWID, NativeType.ROWID),
        (K.RAW, NativeType.RAW),
        (K.BINARY_FLOAT, NativeType.FLOAT),
        (K.BINARY_DOUBLE, NativeType.DOUBLE),
        (K.NUMBER, NativeType.NUMBER),
        (K.FLOAT, NativeType.NUMBER),
        (K.DATE, NativeType.TIMESTAMP),
        (K.TIMESTAMP, NativeType.TIMESTAMP),
        (K.TIMESTAMP_TZ, NativeType.TIMESTAMP),
        (K.TIMESTAMP_LTZ, NativeType.TIMESTAMP),
        (K.INTERVAL_DS, NativeType.INTERVAL_DS),
        (K.INTERVAL_YM, NativeType.INTERVAL_YM),
        (K.CLOB, NativeType.CLOB),
        (K.NCLOB, NativeType.CLOB),
        (K.BLOB, NativeType.BLOB),
        (K.BFILE, NativeType.BLOB),
        (K.REF_CURSOR, NativeType.STMT),
        (K.BOOLEAN, NativeType.BOOLEAN),
        (K.LONG, NativeType.CHAR),
        (K.LONG_RAW, NativeType.RAW),
        (K.INT64, NativeType.INT64),
        (K.UINT64, NativeType.UINT64),
    ],
)
def test_native_type(kind, native):
    assert OracleType(kind).native_type() is native


def test_native_type_of_object():
    objtype = types.SimpleNamespace(schema="MDSYS", name="SDO_POINT_TYPE")
    assert OracleType(K.OBJECT, object_type=objtype).native_type() is NativeType.OBJECT


def test_native_type_unsupported_json():
    with pytest.raises(InternalError) as excinfo:
        OracleType(K.JSON).native_type()
    assert str(excinfo.value) == "Unsupported Oracle type JSON"
    assert isinstance(excinfo.value, OracleTypeError)


def test_equality_uses_parameters():
    assert OracleType(K.NUMBER, precision=10, scale=2) == OracleType(
        K.NUMBER, precision=10, scale=2
    )
    assert not (
        OracleType(K.VARCHAR2, size=10) == OracleType(K.NVARCHAR2, size=10)
    )
    assert not (OracleType(K.RAW, size=1) == OracleType(K.RAW, size=2))


def test_every_kind_except_json_has_native_type():
    objtype = types.SimpleNamespace(schema="S", name="T")
    for kind in OracleTypeKind:
        oratype = OracleType(kind, object_type=objtype)
        if kind is K.JSON:
            with pytest.raises(InternalError):
                oratype.native_type()
        else:
            assert isinstance(oratype.native_type(), NativeType)
            assert str(oratype)