"""Conversion of UTF-8 byte strings into UTF-16 code unit strings."""

from collections.abc import Iterator

from .charset import (
    decode,
    encode_surrogate_pair,
    is_representable,
    is_valid_sequence,
    needs_surrogate_pair,
    sequence_length,
)
from .errors import OdbcError


def _code_points(data: bytes) -> Iterator[int]:
    pos = 0
    end = len(data)
    while pos < end:
        length = sequence_length(data[pos])
        if length == 1:
            yield data[pos]
            pos += 1
            continue
        if length == -1:
            raise OdbcError(
                f"The string contains an invalid UTF-8 byte sequence at position {pos}."
            )
        if pos + length > end:
            raise OdbcError(
                f"The string contains an incomplete UTF-8 byte sequence at position {pos}."
            )
        sequence = data[pos:pos + length]
        if not is_valid_sequence(sequence):
            raise OdbcError(
                f"The string contains an invalid UTF-8 byte sequence at position {pos}."
            )
        code_point = decode(sequence)
        if not is_representable(code_point):
            raise OdbcError(
                f"The UTF-8 string contains codepoint U+{code_point:x}, "
                "which cannot be represented in UTF-16."
            )
        yield code_point
        pos += length


def _code_units(data: bytes) -> Iterator[int]:
    for code_point in _code_points(data):
        if needs_surrogate_pair(code_point):
            yield from encode_surrogate_pair(code_point)
        else:
            yield code_point


def utf8_to_utf16(data: bytes | None, length: int | None = None) -> str:
    """Convert UTF-8 bytes into a string of UTF-16 code units.

    Characters outside the basic multilingual plane appear as two surrogate
    characters, so ``len()`` of the result is the number of UTF-16 code units.
    Without ``length`` the input ends at its first NUL byte.
    """
    if data is None:
        raise OdbcError("Input string must not be None.")
    raw = bytes(data)
    if length is None:
        nul = raw.find(b"\x00")
        if nul != -1:
            raw = raw[:nul]
    else:
        if length < 0 or length > len(raw):
            raise OdbcError(
                f"Length {length} lies outside the input of {len(raw)} bytes."
            )
        raw = raw[:length]
    return "".join(map(chr, _code_units(raw)))


def utf16_length(data: bytes) -> int:
    """Return the number of UTF-16 code units needed for the UTF-8 bytes."""
    if data is None:
        raise OdbcError("Input string must not be None.")
    return sum(
        2 if needs_surrogate_pair(cp) else 1 for cp in _code_points(bytes(data))
    )