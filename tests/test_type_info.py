import pytest

from odbckit.decimals import SqlDecimal
from odbckit.errors import OdbcError
from odbckit.temporal import SqlDate, SqlTime, SqlTimestamp
from odbckit.type_info import (
    CType,
    SQLDataTypes,
    SqlType,
    odbc_types_for,
    param_type_for,
    value_size,
    value_type_name,
)


@pytest.mark.parametrize(
    "value_type, expected",
    [
        (CType.CHAR, SqlType.LONGVARCHAR),
        (CType.WCHAR, SqlType.WLONGVARCHAR),
        (CType.SSHORT, SqlType.SMALLINT),
        (CType.ULONG, SqlType.INTEGER),
        (CType.FLOAT, SqlType.REAL),
        (CType.BINARY, SqlType.LONGVARBINARY),
        (CType.NUMERIC, SqlType.DECIMAL),
        (CType.TYPE_TIMESTAMP, SqlType.TYPE_TIMESTAMP),
    ],
)
def test_param_type_for(value_type, expected):
    assert param_type_for(value_type) == expected


@pytest.mark.parametrize(
    "value_type, name",
    [
        (CType.CHAR, "CLOB"),
        (CType.WCHAR, "NCLOB"),
        (CType.USHORT, "SHORT"),
        (CType.BIT, "BOOLEAN"),
        (CType.UTINYINT, "TINYINT"),
        (CType.BINARY, "BLOB"),
        (CType.NUMERIC, "DECIMAL"),
        (CType.TYPE_DATE, "DATE"),
    ],
)
def test_value_type_name(value_type, name):
    assert value_type_name(value_type) == name


@pytest.mark.parametrize("value_type", [CType.CHAR, CType.WCHAR, CType.BINARY])
def test_variable_size_types_have_size_zero(value_type):
    assert value_size(value_type) == 0


@pytest.mark.parametrize(
    "value_type, size",
    [
        (CType.BIT, 1),
        (CType.STINYINT, 1),
        (CType.SSHORT, 2),
        (CType.SLONG, 4),
        (CType.FLOAT, 4),
        (CType.SBIGINT, 8),
        (CType.DOUBLE, 8),
    ],
)
def test_fixed_sizes(value_type, size):
    assert value_size(value_type) == size


def test_struct_sizes_are_positive():
    for value_type in (CType.TYPE_DATE, CType.TYPE_TIME, CType.TYPE_TIMESTAMP, CType.NUMERIC):
        assert value_size(value_type) > 0
    assert value_size(CType.TYPE_TIMESTAMP) > value_size(CType.TYPE_DATE)


def test_every_ctype_is_mapped():
    for value_type in CType:
        assert isinstance(param_type_for(value_type), SqlType)
        assert value_type_name(value_type).isupper()
        assert value_size(value_type) >= 0


def test_plain_int_is_accepted():
    assert param_type_for(int(CType.DOUBLE)) == SqlType.DOUBLE


@pytest.mark.parametrize("func", [param_type_for, value_type_name, value_size])
def test_unknown_value_type_raises(func):
    with pytest.raises(OdbcError):
        func(12345)


@pytest.mark.parametrize(
    "kind, value_type, param_type",
    [
        ("bool", CType.BIT, SqlType.BIT),
        ("uint8", CType.UTINYINT, SqlType.TINYINT),
        ("int16", CType.SSHORT, SqlType.SMALLINT),
        ("uint32", CType.ULONG, SqlType.INTEGER),
        ("int64", CType.SBIGINT, SqlType.BIGINT),
        ("float", CType.FLOAT, SqlType.REAL),
        ("double", CType.DOUBLE, SqlType.DOUBLE),
        ("decimal", CType.NUMERIC, SqlType.DECIMAL),
    ],
)
def test_odbc_types_for_names(kind, value_type, param_type):
    types = odbc_types_for(kind)
    assert types.value_type == value_type
    assert types.param_type == param_type


def test_odbc_types_for_kinds_agree_with_param_type_for():
    for kind in ("bool", "uint8", "int8", "uint16", "int16", "uint32",
                 "int32", "uint64", "int64", "float", "double", "date",
                 "time", "timestamp", "decimal"):
        types = odbc_types_for(kind)
        assert param_type_for(types.value_type) == types.param_type


@pytest.mark.parametrize(
    "kind, value_type",
    [
        (bool, CType.BIT),
        (float, CType.DOUBLE),
        (SqlDate, CType.TYPE_DATE),
        (SqlTime, CType.TYPE_TIME),
        (SqlTimestamp, CType.TYPE_TIMESTAMP),
        (SqlDecimal, CType.NUMERIC),
    ],
)
def test_odbc_types_for_python_types(kind, value_type):
    assert odbc_types_for(kind).value_type == value_type


def test_odbc_types_for_unknown():
    with pytest.raises(OdbcError):
        odbc_types_for("complex")
    with pytest.raises(OdbcError):
        odbc_types_for(complex)


@pytest.mark.parametrize(
    "value_type, expected",
    [
        (CType.SBIGINT, SQLDataTypes.BigInt),
        (CType.DOUBLE, SQLDataTypes.Double),
        (CType.WCHAR, SQLDataTypes.WLongVarChar),
        (CType.TYPE_TIMESTAMP, SQLDataTypes.TypeTimestamp),
        (CType.SSHORT, SQLDataTypes.SmallInt),
    ],
)
def test_param_types_match_sql_data_types(value_type, expected):
    assert param_type_for(value_type) == expected


def test_sql_data_types_not_instantiable():
    with pytest.raises(TypeError):
        SQLDataTypes()