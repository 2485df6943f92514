"""Low-level helpers for UTF-8 sequences and UTF-16 surrogate pairs."""

_CONTINUATION_MASK = 0xC0
_CONTINUATION_BITS = 0x80

# (mask, expected bits, payload mask) for the lead byte of each length.
_LEAD_BYTES = {
    1: (0x80, 0x00, 0x7F),
    2: (0xE0, 0xC0, 0x1F),
    3: (0xF0, 0xE0, 0x0F),
    4: (0xF8, 0xF0, 0x07),
}


def sequence_length(first_byte: int) -> int:
    """Return the UTF-8 sequence length announced by a lead byte, or -1."""
    for length, (mask, bits, _) in _LEAD_BYTES.items():
        if first_byte & mask == bits:
            return length
    return -1


def _check_length(sequence: bytes) -> int:
    length = len(sequence)
    if length not in _LEAD_BYTES:
        raise ValueError(f"UTF-8 sequence length must lie within [1,4], got {length}")
    return length


def is_valid_sequence(sequence: bytes) -> bool:
    """Check whether the bytes form a well-shaped UTF-8 sequence of their length."""
    length = _check_length(sequence)
    mask, bits, _ = _LEAD_BYTES[length]
    if sequence[0] & mask != bits:
        return False
    return all(b & _CONTINUATION_MASK == _CONTINUATION_BITS for b in sequence[1:])


def decode(sequence: bytes) -> int:
    """Decode one valid UTF-8 sequence (1 to 4 bytes) into a code point."""
    length = _check_length(sequence)
    if not is_valid_sequence(sequence):
        raise ValueError("Not a valid UTF-8 sequence")
    _, _, payload = _LEAD_BYTES[length]
    code_point = sequence[0] & payload
    for b in sequence[1:]:
        code_point = (code_point << 6) | (b & 0x3F)
    return code_point


def is_representable(code_point: int) -> bool:
    """Check that a code point is at most U+10FFFF and not a surrogate."""
    return code_point <= 0x10FFFF and not 0xD800 <= code_point <= 0xDFFF


def needs_surrogate_pair(code_point: int) -> bool:
    """Check whether a code point needs a surrogate pair in UTF-16."""
    return code_point >= 0x10000


def encode_surrogate_pair(code_point: int) -> tuple[int, int]:
    """Return the (high, low) surrogates for a supplementary-plane code point."""
    if not 0x10000 <= code_point <= 0x10FFFF:
        raise ValueError(f"Code point U+{code_point:X} is not in the supplementary planes")
    offset = code_point - 0x10000
    return 0xD800 | (offset >> 10), 0xDC00 | (offset & 0x3FF)