import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from odbckit.charset import (
    decode,
    encode_surrogate_pair,
    is_representable,
    is_valid_sequence,
    needs_surrogate_pair,
    sequence_length,
)

SAMPLE_CHARS = ["A", "\x7f", "\u00e9", "\u07ff", "\u20ac", "\uffff", "\U00010000", "\U0010ffff"]

valid_chars = st.characters(blacklist_categories=("Cs",))


@pytest.mark.parametrize("char", SAMPLE_CHARS)
def test_sequence_length_matches_encoded_length(char):
    encoded = char.encode("utf-8")
    assert sequence_length(encoded[0]) == len(encoded)


@pytest.mark.parametrize("byte", [0x80, 0xBF, 0xF8, 0xFF])
def test_sequence_length_rejects_non_lead_bytes(byte):
    assert sequence_length(byte) == -1


@given(valid_chars)
def test_decode_round_trip(char):
    encoded = char.encode("utf-8")
    assert is_valid_sequence(encoded)
    assert decode(encoded) == ord(char)


def test_broken_continuation_is_invalid():
    encoded = bytearray("\u20ac".encode("utf-8"))
    encoded[2] = 0x28
    assert not is_valid_sequence(bytes(encoded))
    with pytest.raises(ValueError):
        decode(bytes(encoded))


def test_lead_byte_of_wrong_length_is_invalid():
    assert not is_valid_sequence("\u00e9".encode("utf-8") + b"\x80")


@pytest.mark.parametrize("sequence", [b"", b"\xf0\x80\x80\x80\x80"])
def test_bad_sequence_length_raises(sequence):
    with pytest.raises(ValueError):
        is_valid_sequence(sequence)


@pytest.mark.parametrize(
    "code_point, expected",
    [(0x10FFFF, True), (0x110000, False), (0xD800, False), (0xDFFF, False), (0xD7FF, True)],
)
def test_is_representable(code_point, expected):
    assert is_representable(code_point) is expected


def test_needs_surrogate_pair_boundary():
    assert needs_surrogate_pair(0x10000) is True
    assert needs_surrogate_pair(0xFFFF) is False


def test_surrogate_pair_of_first_supplementary_code_point():
    assert encode_surrogate_pair(0x10000) == (0xD800, 0xDC00)


@given(st.integers(min_value=0x10000, max_value=0x10FFFF))
def test_surrogate_pair_matches_utf16_codec(code_point):
    units = struct.unpack("<2H", chr(code_point).encode("utf-16-le"))
    assert encode_surrogate_pair(code_point) == units


@pytest.mark.parametrize("code_point", [0xFFFF, 0x110000])
def test_surrogate_pair_outside_range_raises(code_point):
    with pytest.raises(ValueError):
        encode_surrogate_pair(code_point)