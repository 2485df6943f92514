"""ODBC type codes, the mapping between value and parameter types, and enums."""

from __future__ import annotations

from enum import Enum, IntEnum, auto
from typing import NamedTuple

from .decimals import SqlDecimal
from .errors import OdbcError
from .temporal import SqlDate, SqlTime, SqlTimestamp


class CType(IntEnum):
    """ODBC C data type identifiers used for parameter and column buffers."""

    CHAR = 1
    WCHAR = -8
    SSHORT = -15
    USHORT = -17
    SLONG = -16
    ULONG = -18
    FLOAT = 7
    DOUBLE = 8
    BIT = -7
    STINYINT = -26
    UTINYINT = -28
    SBIGINT = -25
    UBIGINT = -27
    BINARY = -2
    TYPE_DATE = 91
    TYPE_TIME = 92
    TYPE_TIMESTAMP = 93
    NUMERIC = 2


class SqlType(IntEnum):
    """ODBC SQL data type identifiers."""

    UNKNOWN = 0
    CHAR = 1
    NUMERIC = 2
    DECIMAL = 3
    INTEGER = 4
    SMALLINT = 5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    VARCHAR = 12
    LONGVARCHAR = -1
    BINARY = -2
    VARBINARY = -3
    LONGVARBINARY = -4
    BIGINT = -5
    TINYINT = -6
    BIT = -7
    WCHAR = -8
    WVARCHAR = -9
    WLONGVARCHAR = -10
    GUID = -11
    TYPE_DATE = 91
    TYPE_TIME = 92
    TYPE_TIMESTAMP = 93


class SQLDataTypes:
    """Constants that identify ODBC SQL data types.

    Several names share a code, so this is a plain namespace rather than an enum.
    """

    BigInt = -5
    Binary = -2
    Bit = -7
    Boolean = 16
    Char = 1
    Date = 9
    DateTime = 9
    Decimal = 3
    Double = 8
    Float = 6
    Guid = -11
    Integer = 4
    Interval = 10
    LongVarBinary = -4
    LongVarChar = -1
    Numeric = 2
    Real = 7
    SmallInt = 5
    Time = 10
    Timestamp = 11
    TinyInt = -6
    TypeDate = 91
    TypeTime = 92
    TypeTimestamp = 93
    Unknown = 0
    VarBinary = -3
    VarChar = 12
    WChar = -8
    WLongVarChar = -10
    WVarChar = -9

    def __init__(self) -> None:
        raise TypeError("SQLDataTypes cannot be instantiated")


class DSNType(Enum):
    """Which data source names to list."""

    ALL = auto()
    SYSTEM = auto()
    USER = auto()


class IndexType(Enum):
    """Which indexes to return."""

    ALL = auto()
    UNIQUE = auto()


class StatisticsAccuracy(Enum):
    """How accurate table statistics must be."""

    ENSURE = auto()
    QUICK = auto()


class ColumnNullableValue(Enum):
    """Whether a column allows NULL values."""

    NO_NULLS = auto()
    NULLABLE = auto()


class RowIdentifierType(Enum):
    """The kind of unique row identifier requested."""

    BEST_ROWID = auto()
    ROWVER = auto()


class RowIdentifierScope(Enum):
    """How long a row identifier must stay valid."""

    CURRENT_ROW = auto()
    SESSION = auto()
    TRANSACTION = auto()


class TransactionIsolationLevel(Enum):
    """Transaction isolation levels."""

    READ_UNCOMMITTED = auto()
    READ_COMMITTED = auto()
    REPEATABLE_READ = auto()
    SERIALIZABLE = auto()
    NONE = auto()


class OdbcTypes(NamedTuple):
    """The C value type and SQL parameter type used for one kind of value."""

    value_type: CType
    param_type: SqlType


# Sizes of the ODBC date, time, timestamp and numeric structures.
_DATE_STRUCT_SIZE = 6
_TIME_STRUCT_SIZE = 6
_TIMESTAMP_STRUCT_SIZE = 16
_NUMERIC_STRUCT_SIZE = 19

_PARAM_TYPES: dict[CType, SqlType] = {
    CType.CHAR: SqlType.LONGVARCHAR,
    CType.WCHAR: SqlType.WLONGVARCHAR,
    CType.SSHORT: SqlType.SMALLINT,
    CType.USHORT: SqlType.SMALLINT,
    CType.SLONG: SqlType.INTEGER,
    CType.ULONG: SqlType.INTEGER,
    CType.FLOAT: SqlType.REAL,
    CType.DOUBLE: SqlType.DOUBLE,
    CType.BIT: SqlType.BIT,
    CType.STINYINT: SqlType.TINYINT,
    CType.UTINYINT: SqlType.TINYINT,
    CType.SBIGINT: SqlType.BIGINT,
    CType.UBIGINT: SqlType.BIGINT,
    CType.BINARY: SqlType.LONGVARBINARY,
    CType.TYPE_DATE: SqlType.TYPE_DATE,
    CType.TYPE_TIME: SqlType.TYPE_TIME,
    CType.TYPE_TIMESTAMP: SqlType.TYPE_TIMESTAMP,
    CType.NUMERIC: SqlType.DECIMAL,
}

_TYPE_NAMES: dict[CType, str] = {
    CType.CHAR: "CLOB",
    CType.WCHAR: "NCLOB",
    CType.SSHORT: "SHORT",
    CType.USHORT: "SHORT",
    CType.SLONG: "INTEGER",
    CType.ULONG: "INTEGER",
    CType.FLOAT: "REAL",
    CType.DOUBLE: "DOUBLE",
    CType.BIT: "BOOLEAN",
    CType.STINYINT: "TINYINT",
    CType.UTINYINT: "TINYINT",
    CType.SBIGINT: "BIGINT",
    CType.UBIGINT: "BIGINT",
    CType.BINARY: "BLOB",
    CType.TYPE_DATE: "DATE",
    CType.TYPE_TIME: "TIME",
    CType.TYPE_TIMESTAMP: "TIMESTAMP",
    CType.NUMERIC: "DECIMAL",
}

_VALUE_SIZES: dict[CType, int] = {
    CType.CHAR: 0,
    CType.WCHAR: 0,
    CType.BINARY: 0,
    CType.BIT: 1,
    CType.STINYINT: 1,
    CType.UTINYINT: 1,
    CType.SSHORT: 2,
    CType.USHORT: 2,
    CType.SLONG: 4,
    CType.ULONG: 4,
    CType.FLOAT: 4,
    CType.SBIGINT: 8,
    CType.UBIGINT: 8,
    CType.DOUBLE: 8,
    CType.TYPE_DATE: _DATE_STRUCT_SIZE,
    CType.TYPE_TIME: _TIME_STRUCT_SIZE,
    CType.TYPE_TIMESTAMP: _TIMESTAMP_STRUCT_SIZE,
    CType.NUMERIC: _NUMERIC_STRUCT_SIZE,
}

_KINDS: dict[str, OdbcTypes] = {
    "bool": OdbcTypes(CType.BIT, SqlType.BIT),
    "uint8": OdbcTypes(CType.UTINYINT, SqlType.TINYINT),
    "int8": OdbcTypes(CType.STINYINT, SqlType.TINYINT),
    "uint16": OdbcTypes(CType.USHORT, SqlType.SMALLINT),
    "int16": OdbcTypes(CType.SSHORT, SqlType.SMALLINT),
    "uint32": OdbcTypes(CType.ULONG, SqlType.INTEGER),
    "int32": OdbcTypes(CType.SLONG, SqlType.INTEGER),
    "uint64": OdbcTypes(CType.UBIGINT, SqlType.BIGINT),
    "int64": OdbcTypes(CType.SBIGINT, SqlType.BIGINT),
    "float": OdbcTypes(CType.FLOAT, SqlType.REAL),
    "double": OdbcTypes(CType.DOUBLE, SqlType.DOUBLE),
    "date": OdbcTypes(CType.TYPE_DATE, SqlType.TYPE_DATE),
    "time": OdbcTypes(CType.TYPE_TIME, SqlType.TYPE_TIME),
    "timestamp": OdbcTypes(CType.TYPE_TIMESTAMP, SqlType.TYPE_TIMESTAMP),
    "decimal": OdbcTypes(CType.NUMERIC, SqlType.DECIMAL),
}

_PYTHON_KINDS: dict[type, str] = {
    bool: "bool",
    int: "int64",
    float: "double",
    SqlDate: "date",
    SqlTime: "time",
    SqlTimestamp: "timestamp",
    SqlDecimal: "decimal",
}


def _lookup(table: dict[CType, object], value_type: int):
    try:
        return table[CType(value_type)]
    except ValueError:
        raise OdbcError(f"Unknown value type ({value_type})") from None


def param_type_for(value_type: int) -> SqlType:
    """Return the SQL parameter type used to bind a value of a C type."""
    return _lookup(_PARAM_TYPES, value_type)


def value_type_name(value_type: int) -> str:
    """Return a human-readable name for a C value type."""
    return _lookup(_TYPE_NAMES, value_type)


def value_size(value_type: int) -> int:
    """Return the fixed size in bytes of a C value type, or 0 if it varies."""
    return _lookup(_VALUE_SIZES, value_type)


def odbc_types_for(kind: str | type) -> OdbcTypes:
    """Return the C value type and SQL parameter type for a kind of value.

    ``kind`` is a name such as ``"int32"`` or ``"decimal"``, or one of the
    Python types ``bool``, ``int``, ``float``, ``SqlDate``, ``SqlTime``,
    ``SqlTimestamp`` and ``SqlDecimal``.
    """
    if isinstance(kind, type):
        name = _PYTHON_KINDS.get(kind)
        if name is None:
            raise OdbcError(f"No ODBC type for {kind.__name__}")
        return _KINDS[name]
    try:
        return _KINDS[kind]
    except KeyError:
        raise OdbcError(f"No ODBC type for {kind!r}") from None