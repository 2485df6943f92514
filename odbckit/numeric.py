"""Conversion between decimals and the ODBC numeric structure."""

from __future__ import annotations

from dataclasses import dataclass, field

from .decimals import SqlDecimal
from .errors import OdbcError

MAX_NUMERIC_LEN = 16


@dataclass
class NumericStruct:
    """An ODBC numeric value: precision, scale, sign and a little-endian magnitude.

    ``sign`` is 1 for positive values and 0 for negative ones.
    """

    precision: int = 0
    scale: int = 0
    sign: int = 1
    val: bytes = field(default=bytes(MAX_NUMERIC_LEN))

    def __post_init__(self) -> None:
        self.val = bytes(self.val)
        if len(self.val) != MAX_NUMERIC_LEN:
            raise OdbcError(
                f"Numeric value must be {MAX_NUMERIC_LEN} bytes, got {len(self.val)}"
            )

    def to_bytes(self) -> bytes:
        """Pack the structure in its wire layout."""
        return (
            bytes([self.precision & 0xFF, self.scale & 0xFF, self.sign & 0xFF])
            + self.val
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> NumericStruct:
        """Unpack a structure from its wire layout."""
        if len(data) != MAX_NUMERIC_LEN + 3:
            raise OdbcError(
                f"Numeric structure must be {MAX_NUMERIC_LEN + 3} bytes, got {len(data)}"
            )
        scale = data[1] - 256 if data[1] >= 128 else data[1]
        return cls(data[0], scale, data[2], bytes(data[3:]))


def numeric_to_string(num: NumericStruct) -> str:
    """Return the unscaled value of a numeric structure as a decimal string."""
    magnitude = int.from_bytes(num.val, "little")
    if magnitude == 0:
        return "0"
    return f"-{magnitude}" if num.sign == 0 else str(magnitude)


def decimal_to_numeric(dec: SqlDecimal) -> NumericStruct:
    """Build the numeric structure for a decimal."""
    magnitude = abs(int(dec.unscaled_value)) & ((1 << (8 * MAX_NUMERIC_LEN)) - 1)
    return NumericStruct(
        precision=dec.precision,
        scale=dec.scale,
        sign=0 if dec.signum == -1 else 1,
        val=magnitude.to_bytes(MAX_NUMERIC_LEN, "little"),
    )