"""Storage for the type and value of a statement parameter."""

from __future__ import annotations

from enum import Enum, auto

from .errors import OdbcError

INPLACE_BYTES = 32
"""Values of at most this many bytes are kept in the inplace buffer."""

LOAD_FACTOR = 0.75
"""A heap buffer is reused for a new value only if it stays at least this full."""

NULL_DATA = -1
"""Length indicator of a NULL value."""


class ParameterState(Enum):
    """Where the value of a parameter lives."""

    UNINITIALIZED = auto()
    IS_NULL = auto()
    NORMAL_INPLACE = auto()
    NORMAL_HEAP_OWNING = auto()
    NORMAL_HEAP_NOT_OWNING = auto()


_HEAP_STATES = frozenset(
    {ParameterState.NORMAL_HEAP_OWNING, ParameterState.NORMAL_HEAP_NOT_OWNING}
)


class ParameterData:
    """The type and value of a parameter, which may be NULL.

    Values of at most ``INPLACE_BYTES`` bytes are kept inplace; larger values
    go to a heap buffer. Ownership of the heap buffer can be handed to a batch
    and taken back, while the data stays readable.
    """

    __slots__ = (
        "_state",
        "_value_type",
        "column_size",
        "decimal_digits",
        "_size",
        "_inplace",
        "_heap",
        "_capacity",
    )

    def __init__(self) -> None:
        self._state = ParameterState.UNINITIALIZED
        self._value_type = 0
        self.column_size = 0
        self.decimal_digits = 0
        self._size = 0
        self._inplace = b""
        self._heap: bytearray | None = None
        self._capacity = 0

    def __repr__(self) -> str:
        return (
            f"ParameterData(state={self._state.name}, value_type={self._value_type}, "
            f"size={self._size})"
        )

    @property
    def state(self) -> ParameterState:
        """The current storage state."""
        return self._state

    @property
    def value_type(self) -> int:
        """The ODBC C type of the value."""
        return self._value_type

    def set_value(self, value_type: int, value: bytes) -> None:
        """Set the type and the raw bytes of the value.

        Column size and decimal digits are reset to 0.
        """
        raw = bytes(value)
        if len(raw) <= INPLACE_BYTES:
            self._set_inplace(raw)
        else:
            self._set_on_heap(raw)
        self._value_type = value_type
        self.column_size = 0
        self.decimal_digits = 0

    def set_null(self, value_type: int) -> None:
        """Set the type and make the value NULL."""
        self._drop_owned_heap()
        self._value_type = value_type
        self._state = ParameterState.IS_NULL
        self._size = NULL_DATA

    def clear(self) -> None:
        """Make the parameter uninitialized."""
        self._drop_owned_heap()
        self._state = ParameterState.UNINITIALIZED

    def take_from(self, other: ParameterData) -> None:
        """Move the contents of another parameter here; it becomes uninitialized."""
        if other is self:
            return
        self._drop_owned_heap()
        self._state = other._state
        self._value_type = other._value_type
        self.column_size = other.column_size
        self.decimal_digits = other.decimal_digits
        self._size = other._size
        if self._state is ParameterState.NORMAL_INPLACE:
            self._inplace = other._inplace
        elif self._state in _HEAP_STATES:
            self._capacity = other._capacity
            self._heap = other._heap
        other._state = ParameterState.UNINITIALIZED
        other._heap = None
        other._capacity = 0

    @property
    def is_initialized(self) -> bool:
        """Whether a value or NULL has been set."""
        return self._state is not ParameterState.UNINITIALIZED

    @property
    def is_null(self) -> bool:
        """Whether the value is NULL."""
        return self._state is ParameterState.IS_NULL

    @property
    def data(self) -> bytes:
        """The bytes of the value."""
        if self._state is ParameterState.NORMAL_INPLACE:
            return self._inplace
        if self._state in _HEAP_STATES:
            return bytes(self._heap[: self._size])
        raise OdbcError(f"Parameter has no data in state {self._state.name}.")

    @property
    def size(self) -> int:
        """The size of the value in bytes, or ``NULL_DATA`` for NULL."""
        return self._size

    @property
    def uses_heap_buffer(self) -> bool:
        """Whether the value lives in a heap buffer."""
        return self._state in _HEAP_STATES

    @property
    def owns_heap_buffer(self) -> bool:
        """Whether this parameter owns its heap buffer."""
        return self._state is ParameterState.NORMAL_HEAP_OWNING

    @property
    def heap_buffer_capacity(self) -> int:
        """The capacity of the heap buffer."""
        if not self.uses_heap_buffer:
            raise OdbcError("Parameter does not use a heap buffer.")
        return self._capacity

    def release_heap_buffer_ownership(self) -> None:
        """Hand ownership of the heap buffer to the caller."""
        if self._state is not ParameterState.NORMAL_HEAP_OWNING:
            raise OdbcError("Parameter does not own a heap buffer.")
        self._state = ParameterState.NORMAL_HEAP_NOT_OWNING

    def restore_heap_buffer_ownership(self) -> None:
        """Take back ownership of a heap buffer handed out before."""
        if self._state is not ParameterState.NORMAL_HEAP_NOT_OWNING:
            raise OdbcError("Parameter has not released a heap buffer.")
        self._state = ParameterState.NORMAL_HEAP_OWNING

    def _drop_owned_heap(self) -> None:
        if self._state is ParameterState.NORMAL_HEAP_OWNING:
            self._heap = None
            self._capacity = 0

    def _set_inplace(self, raw: bytes) -> None:
        self._drop_owned_heap()
        self._state = ParameterState.NORMAL_INPLACE
        self._size = len(raw)
        self._inplace = raw

    def _set_on_heap(self, raw: bytes) -> None:
        size = len(raw)
        if self._state is ParameterState.NORMAL_HEAP_OWNING:
            realloc_if_less = int(LOAD_FACTOR * self._capacity)
            if realloc_if_less <= size <= self._capacity:
                self._heap[:size] = raw
                self._size = size
                return
        self._heap = bytearray(raw)
        self._capacity = size
        self._state = ParameterState.NORMAL_HEAP_OWNING
        self._size = size