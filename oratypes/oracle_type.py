"""Oracle data type descriptions and their native value representations."""

from __future__ import annotations

import dataclasses
import enum

from oratypes.errors import InternalError


class NativeType(enum.Enum):
    """How a value of an Oracle type is held on the client side."""

    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT = "float"
    DOUBLE = "double"
    CHAR = "char"
    NUMBER = "number"
    RAW = "raw"
    TIMESTAMP = "timestamp"
    INTERVAL_DS = "interval_ds"
    INTERVAL_YM = "interval_ym"
    CLOB = "clob"
    BLOB = "blob"
    OBJECT = "object"
    STMT = "stmt"
    BOOLEAN = "boolean"
    ROWID = "rowid"


class OracleTypeKind(enum.Enum):
    """The family of an Oracle data type."""

    VARCHAR2 = "varchar2"
    NVARCHAR2 = "nvarchar2"
    CHAR = "char"
    NCHAR = "nchar"
    ROWID = "rowid"
    RAW = "raw"
    BINARY_FLOAT = "binary_float"
    BINARY_DOUBLE = "binary_double"
    NUMBER = "number"
    FLOAT = "float"
    DATE = "date"
    TIMESTAMP = "timestamp"
    TIMESTAMP_TZ = "timestamp_tz"
    TIMESTAMP_LTZ = "timestamp_ltz"
    INTERVAL_DS = "interval_ds"
    INTERVAL_YM = "interval_ym"
    CLOB = "clob"
    NCLOB = "nclob"
    BLOB = "blob"
    BFILE = "bfile"
    REF_CURSOR = "ref_cursor"
    BOOLEAN = "boolean"
    OBJECT = "object"
    LONG = "long"
    LONG_RAW = "long_raw"
    JSON = "json"
    INT64 = "int64"
    UINT64 = "uint64"


_NATIVE_TYPES = {
    OracleTypeKind.VARCHAR2: NativeType.CHAR,
    OracleTypeKind.NVARCHAR2: NativeType.CHAR,
    OracleTypeKind.CHAR: NativeType.CHAR,
    OracleTypeKind.NCHAR: NativeType.CHAR,
    OracleTypeKind.ROWID: NativeType.ROWID,
    OracleTypeKind.RAW: NativeType.RAW,
    OracleTypeKind.BINARY_FLOAT: NativeType.FLOAT,
    OracleTypeKind.BINARY_DOUBLE: NativeType.DOUBLE,
    OracleTypeKind.NUMBER: NativeType.NUMBER,
    OracleTypeKind.FLOAT: NativeType.NUMBER,
    OracleTypeKind.DATE: NativeType.TIMESTAMP,
    OracleTypeKind.TIMESTAMP: NativeType.TIMESTAMP,
    OracleTypeKind.TIMESTAMP_TZ: NativeType.TIMESTAMP,
    OracleTypeKind.TIMESTAMP_LTZ: NativeType.TIMESTAMP,
    OracleTypeKind.INTERVAL_DS: NativeType.INTERVAL_DS,
    OracleTypeKind.INTERVAL_YM: NativeType.INTERVAL_YM,
    OracleTypeKind.CLOB: NativeType.CLOB,
    OracleTypeKind.NCLOB: NativeType.CLOB,
    OracleTypeKind.BLOB: NativeType.BLOB,
    OracleTypeKind.BFILE: NativeType.BLOB,
    OracleTypeKind.REF_CURSOR: NativeType.STMT,
    OracleTypeKind.BOOLEAN: NativeType.BOOLEAN,
    OracleTypeKind.OBJECT: NativeType.OBJECT,
    OracleTypeKind.LONG: NativeType.CHAR,
    OracleTypeKind.LONG_RAW: NativeType.RAW,
    OracleTypeKind.INT64: NativeType.INT64,
    OracleTypeKind.UINT64: NativeType.UINT64,
}

_PLAIN_NAMES = {
    OracleTypeKind.ROWID: "ROWID",
    OracleTypeKind.BINARY_FLOAT: "BINARY_FLOAT",
    OracleTypeKind.BINARY_DOUBLE: "BINARY_DOUBLE",
    OracleTypeKind.DATE: "DATE",
    OracleTypeKind.CLOB: "CLOB",
    OracleTypeKind.NCLOB: "NCLOB",
    OracleTypeKind.BLOB: "BLOB",
    OracleTypeKind.BFILE: "BFILE",
    OracleTypeKind.REF_CURSOR: "REF CURSOR",
    OracleTypeKind.BOOLEAN: "BOOLEAN",
    OracleTypeKind.LONG: "LONG",
    OracleTypeKind.LONG_RAW: "LONG RAW",
    OracleTypeKind.JSON: "JSON",
    OracleTypeKind.INT64: "INT64 used internally",
    OracleTypeKind.UINT64: "UINT64 used internally",
}

_SIZED_NAMES = {
    OracleTypeKind.VARCHAR2: "VARCHAR2",
    OracleTypeKind.NVARCHAR2: "NVARCHAR2",
    OracleTypeKind.CHAR: "CHAR",
    OracleTypeKind.NCHAR: "NCHAR",
    OracleTypeKind.RAW: "RAW",
}

_TIMESTAMP_SUFFIXES = {
    OracleTypeKind.TIMESTAMP: "",
    OracleTypeKind.TIMESTAMP_TZ: " WITH TIME ZONE",
    OracleTypeKind.TIMESTAMP_LTZ: " WITH LOCAL TIME ZONE",
}


@dataclasses.dataclass(frozen=True)
class OracleType:
    """An Oracle data type with its parameters.

    Which fields matter depends on ``kind``:

    * ``size`` for VARCHAR2, NVARCHAR2, CHAR, NCHAR and RAW;
    * ``precision`` and ``scale`` for NUMBER (precision 0 means the
      default of 38 and is shown without parameters);
    * ``precision`` for FLOAT (126 is shown without parameters);
    * ``fsprec`` for the TIMESTAMP kinds (6 is shown without parameters);
    * ``precision`` (leading field) and ``fsprec`` for INTERVAL DAY TO
      SECOND, ``precision`` for INTERVAL YEAR TO MONTH;
    * ``object_type`` for OBJECT: anything with ``schema`` and ``name``.
    """

    kind: OracleTypeKind
    size: int = 0
    precision: int = 0
    scale: int = 0
    fsprec: int = 0
    object_type: object = None

    def __post_init__(self):
        if self.kind is OracleTypeKind.OBJECT and self.object_type is None:
            raise ValueError("an OBJECT type needs its object_type")

    def native_type(self):
        """Return the client-side representation used for values of this type."""
        try:
            return _NATIVE_TYPES[self.kind]
        except KeyError:
            raise InternalError(f"Unsupported Oracle type {self}") from None

    def __str__(self):
        kind = self.kind
        if kind in _PLAIN_NAMES:
            return _PLAIN_NAMES[kind]
        if kind in _SIZED_NAMES:
            return f"{_SIZED_NAMES[kind]}({self.size})"
        if kind is OracleTypeKind.NUMBER:
            if self.precision == 0:
                return "NUMBER"
            if self.scale == 0:
                return f"NUMBER({self.precision})"
            return f"NUMBER({self.precision},{self.scale})"
        if kind is OracleTypeKind.FLOAT:
            if self.precision == 126:
                return "FLOAT"
            return f"FLOAT({self.precision})"
        if kind in _TIMESTAMP_SUFFIXES:
            suffix = _TIMESTAMP_SUFFIXES[kind]
            if self.fsprec == 6:
                return f"TIMESTAMP{suffix}"
            return f"TIMESTAMP({self.fsprec}){suffix}"
        if kind is OracleTypeKind.INTERVAL_DS:
            if self.precision == 2 and self.fsprec == 6:
                return "INTERVAL DAY TO SECOND"
            return f"INTERVAL DAY({self.precision}) TO SECOND({self.fsprec})"
        if kind is OracleTypeKind.INTERVAL_YM:
            if self.precision == 2:
                return "INTERVAL YEAR TO MONTH"
            return f"INTERVAL YEAR({self.precision}) TO MONTH"
        # Only OBJECT remains.
        return f"{self.object_type.schema}.{self.object_type.name}"