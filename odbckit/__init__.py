"""SQL value types, text helpers, ODBC type tables and parameter buffers."""

__version__ = "0.1.0"