"""Fixed-point decimal numbers with an explicit precision and scale."""

from __future__ import annotations

from fractions import Fraction

from .errors import OdbcError

MAX_PRECISION = 38


class SqlDecimal:
    """A decimal number made of an unscaled digit string, a precision and a scale.

    The precision is the maximum number of significant digits, the scale the
    number of digits after the decimal point. The value is the unscaled value
    divided by ``10 ** scale``, so ``SqlDecimal(12, 2, 1)`` stands for 1.2.
    Without arguments the decimal is 0 with precision 1 and scale 1.
    """

    __slots__ = ("_value", "_precision", "_scale")

    def __init__(
        self,
        value: int | str | None = None,
        precision: int | None = None,
        scale: int | None = None,
    ) -> None:
        if value is None:
            if precision is not None or scale is not None:
                raise TypeError("precision and scale require a value")
            self._value = "0"
            self._precision = 1
            self._scale = 1
            return

        if precision is None:
            raise TypeError("a precision is required when a value is given")
        if scale is None:
            scale = 0
        if not 1 <= precision <= MAX_PRECISION:
            raise OdbcError(f"precision value must lie within [1,{MAX_PRECISION}]")
        if not 0 <= scale <= precision:
            raise OdbcError("scale value must lie within [0,precision]")

        self._precision = precision
        self._scale = scale
        self._value = self._parse(value, precision)

    @staticmethod
    def _parse(value: int | str, precision: int) -> str:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError(
                f"value must be an int or a str, not {type(value).__name__}"
            )
        text = str(value)

        start = 0
        negative = False
        if text[:1] == "+":
            start = 1
        elif text[:1] == "-":
            negative = True
            start = 1

        digits = text[start:]
        for offset, ch in enumerate(digits):
            if not "0" <= ch <= "9":
                raise OdbcError(
                    f"Decimal contains an invalid digit at position {start + offset}"
                )
        if not digits:
            raise OdbcError("Decimal does not contain any digits")

        significant = digits.lstrip("0")
        if not significant:
            return "0"
        if len(significant) > precision:
            raise OdbcError(
                f"Decimal cannot have more than {precision} digits, "
                f"but has {len(significant)}"
            )
        return f"-{significant}" if negative else significant

    @property
    def precision(self) -> int:
        """The precision of this number."""
        return self._precision

    @property
    def scale(self) -> int:
        """The number of digits after the decimal point."""
        return self._scale

    @property
    def signum(self) -> int:
        """-1 for a negative number, 0 for zero, 1 for a positive number."""
        first = self._value[0]
        if first == "-":
            return -1
        if first == "0":
            return 0
        return 1

    @property
    def unscaled_value(self) -> str:
        """The digits of the number with sign but without a decimal point."""
        return self._value

    def _as_fraction(self) -> Fraction:
        return Fraction(int(self._value), 10 ** self._scale)

    def __str__(self) -> str:
        value = self._value
        scale = self._scale
        if scale == 0:
            return value
        negative = value.startswith("-")
        digits = value[1:] if negative else value
        if scale < len(digits):
            split = len(value) - scale
            return f"{value[:split]}.{value[split:]}"
        sign = "-" if negative else ""
        return f"{sign}0.{'0' * (scale - len(digits))}{digits}"

    def __repr__(self) -> str:
        return (
            f"SqlDecimal({self._value!r}, precision={self._precision}, "
            f"scale={self._scale})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SqlDecimal):
            return NotImplemented
        return self._as_fraction() == other._as_fraction()

    def __lt__(self, other: SqlDecimal) -> bool:
        if not isinstance(other, SqlDecimal):
            return NotImplemented
        return self._as_fraction() < other._as_fraction()

    def __le__(self, other: SqlDecimal) -> bool:
        if not isinstance(other, SqlDecimal):
            return NotImplemented
        return self._as_fraction() <= other._as_fraction()

    def __gt__(self, other: SqlDecimal) -> bool:
        if not isinstance(other, SqlDecimal):
            return NotImplemented
        return self._as_fraction() > other._as_fraction()

    def __ge__(self, other: SqlDecimal) -> bool:
        if not isinstance(other, SqlDecimal):
            return NotImplemented
        return self._as_fraction() >= other._as_fraction()

    def __hash__(self) -> int:
        return hash(self._as_fraction())