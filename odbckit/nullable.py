"""A wrapper that adds a NULL state to values of any type."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")

NULL_TEXT = "<NULL>"
_HEX_DIGITS = "0123456789ABCDEF"
_NULL_HASH = hash(("odbckit.Nullable", None))


class Nullable(Generic[T]):
    """A value that may be NULL.

    ``Nullable()`` and ``Nullable(None)`` are NULL. In orderings a NULL value
    sorts after every non-NULL value, and two NULL values are equal.
    """

    __slots__ = ("_value", "_is_null")

    def __init__(self, value: T | None = None) -> None:
        self._value = value
        self._is_null = value is None

    @property
    def is_null(self) -> bool:
        """Whether this value is NULL."""
        return self._is_null

    @property
    def value(self) -> T | None:
        """The wrapped value, or None if this value is NULL."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nullable):
            return NotImplemented
        if self._is_null:
            return other._is_null
        if other._is_null:
            return False
        return self._value == other._value

    def __lt__(self, other: Nullable[T]) -> bool:
        if not isinstance(other, Nullable):
            return NotImplemented
        if self._is_null:
            return False
        if other._is_null:
            return True
        return self._value < other._value

    def __gt__(self, other: Nullable[T]) -> bool:
        if not isinstance(other, Nullable):
            return NotImplemented
        if self._is_null:
            return not other._is_null
        if other._is_null:
            return False
        return self._value > other._value

    def __le__(self, other: Nullable[T]) -> bool:
        if not isinstance(other, Nullable):
            return NotImplemented
        return not self.__gt__(other)

    def __ge__(self, other: Nullable[T]) -> bool:
        if not isinstance(other, Nullable):
            return NotImplemented
        return not self.__lt__(other)

    def __hash__(self) -> int:
        return _NULL_HASH if self._is_null else hash(self._value)

    def __str__(self) -> str:
        if self._is_null:
            return NULL_TEXT
        if isinstance(self._value, (bytes, bytearray, memoryview)):
            return format_binary(self._value)
        return str(self._value)

    def __repr__(self) -> str:
        return "Nullable()" if self._is_null else f"Nullable({self._value!r})"


def _unwrap(value: Any) -> Any:
    return value.value if isinstance(value, Nullable) else value


def format_nstring(value: str | Nullable[str] | None) -> str:
    """Render a wide string, replacing every character above '~' with '?'."""
    text = _unwrap(value)
    if text is None:
        return NULL_TEXT
    return "".join(ch if ch <= "~" else "?" for ch in text)


def format_binary(value: bytes | Nullable[bytes] | None) -> str:
    """Render binary data as hex, 16 bytes per line and a gap after 8."""
    data = _unwrap(value)
    if data is None:
        return NULL_TEXT
    parts = []
    for i, byte in enumerate(bytes(data)):
        if i % 16 == 0:
            parts.append("\n")
        elif (i + 8) % 16 == 0:
            parts.append("  ")
        else:
            parts.append(" ")
        parts.append(_HEX_DIGITS[byte >> 4])
        parts.append(_HEX_DIGITS[byte & 0xF])
    return "".join(parts)