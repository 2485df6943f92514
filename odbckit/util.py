"""Quoting of SQL identifiers."""


def _escape(text: str) -> str:
    nul = text.find("\0")
    if nul != -1:
        text = text[:nul]
    return text.replace('"', '""')


def quote(identifier: str) -> str:
    """Wrap an identifier in double quotes, doubling any embedded quote."""
    return f'"{_escape(identifier)}"'


def quote_qualified(schema: str, table: str) -> str:
    """Quote a schema and a table name and join them with a dot."""
    return f"{quote(schema)}.{quote(table)}"