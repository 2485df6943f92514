# odbckit

Building blocks for handling values the way ODBC database access needs them,
written in plain Python with no dependencies beyond the standard library.

- `odbckit.decimals.SqlDecimal`: an exact decimal made of an unscaled digit
  string, a precision (1 to 38) and a scale. Values compare by their numeric
  value, whatever their precision and scale.
- `odbckit.temporal`: `SqlDate`, `SqlTime` and `SqlTimestamp`, frozen and
  ordered dataclasses with range checks, and `days_in_month(year, month)`.
- `odbckit.nullable.Nullable`: a wrapper that adds a NULL state to any value.
  NULL sorts after every non-NULL value and prints as `<NULL>`.
  `format_nstring` and `format_binary` render wide strings and binary data.
- `odbckit.string_converter`: `utf8_to_utf16(data, length=None)` turns UTF-8
  bytes into a string of UTF-16 code units (characters outside the basic
  plane become two surrogates) and reports the byte offset of the first bad
  sequence; `utf16_length(data)` counts the code units needed.
- `odbckit.charset`: the low-level UTF-8 sequence and UTF-16 surrogate
  helpers behind the converter.
- `odbckit.util`: `quote(identifier)` and `quote_qualified(schema, table)`
  for double-quoted SQL identifiers.
- `odbckit.type_info`: the `CType` and `SqlType` codes, the `SQLDataTypes`
  constants, the enums `DSNType`, `IndexType`, `StatisticsAccuracy`,
  `ColumnNullableValue`, `RowIdentifierType`, `RowIdentifierScope` and
  `TransactionIsolationLevel`, and the lookups `param_type_for`,
  `value_type_name`, `value_size` and `odbc_types_for`.
- `odbckit.numeric`: `NumericStruct` (the ODBC numeric structure, with
  `to_bytes` and `from_bytes`), `decimal_to_numeric` and `numeric_to_string`.
- `odbckit.parameter_data.ParameterData`: holds the C type and raw bytes of
  one parameter value, or NULL. Values of up to 32 bytes are kept in place,
  larger ones in a heap buffer that is reused while it stays at least 75 %
  full; ownership of that buffer can be released and restored.

## Installation

```
pip install odbckit
```

To run the tests:

```
pip install "odbckit[test]"
pytest
```

## Examples

```python
from odbckit.decimals import SqlDecimal
from odbckit.temporal import SqlDate, SqlTimestamp
from odbckit.nullable import Nullable
from odbckit.util import quote, quote_qualified
from odbckit.string_converter import utf8_to_utf16
from odbckit.numeric import decimal_to_numeric, numeric_to_string
from odbckit.type_info import CType, param_type_for, value_type_name

d = SqlDecimal("-12345", 10, 2)
str(d)                                     # '-123.45'
d == SqlDecimal("-1234500", 10, 4)         # True

str(SqlDate(2024, 2, 29))                  # '2024-02-29'
str(SqlTimestamp(2024, 1, 2, 3, 4, 5, 6))  # '2024-01-02 03:04:05.006'

Nullable(None) > Nullable(5)               # True: NULL sorts last
str(Nullable(None))                        # '<NULL>'

quote('a"b')                               # '"a""b"'
quote_qualified("main", "users")           # '"main"."users"'

utf8_to_utf16("h\u00e9".encode())          # 'hé'

numeric_to_string(decimal_to_numeric(d))   # '-12345'

value_type_name(CType.SLONG)               # 'INTEGER'
param_type_for(CType.CHAR)                 # SqlType.LONGVARCHAR
```

Invalid input raises `odbckit.errors.OdbcError` with a message saying what
was wrong: a decimal with too many digits, a 30 February, malformed UTF-8,
an unknown value type.

## What it does not do

odbckit does not connect to a database. It has no environment, connection,
statement, prepared statement or result set objects, does not load an ODBC
driver manager, and does not execute SQL or batch parameter rows. It provides
the values, tables and buffers such code works with, and no command-line
program.