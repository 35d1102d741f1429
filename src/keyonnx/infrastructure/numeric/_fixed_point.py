"""
Sign-magnitude fixed-point numbers.

`FixedPoint` is an immutable value ``{mag, sign, config}`` whose value is
``(-1 if sign else 1) * mag / 2**config.frac_bits``. Arithmetic follows
sign-magnitude rules rather than two's complement:

- add: same signs add magnitudes; different signs subtract the smaller
  magnitude from the larger and take the sign of the larger
- mul: ``(a.mag * b.mag) >> frac_bits``, sign = XOR
- div: ``(a.mag << frac_bits) // b.mag``, sign = XOR

Zero always carries ``sign=False``. Operands must share a configuration;
results whose magnitude does not fit the configuration raise
`NumericOverflowError` (no saturation, no wrapping).
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Union

from ...domain._errors import (
    DivisionByZeroError,
    DTypeMismatchError,
    NumericOverflowError,
)
from ._fixed_config import FixedConfig

HostNumber = Union[int, float, str, Fraction]


def _result(mag: int, sign: bool, config: FixedConfig, op: str) -> "FixedPoint":
    max_mag = config.max_mag
    if max_mag is not None and mag > max_mag:
        raise NumericOverflowError(op, config.name)
    return FixedPoint(mag, sign and mag != 0, config)


@dataclass(frozen=True)
class FixedPoint:
    """
    Immutable sign-magnitude fixed-point number.

    Parameters
    ----------
    mag : int
        Non-negative magnitude in units of ``2**-frac_bits``.
    sign : bool
        True for negative values. Normalized to False when ``mag == 0``.
    config : FixedConfig
        Binary-point configuration.

    Raises
    ------
    ValueError
        If `mag` is negative or not an integer.
    NumericOverflowError
        If `mag` exceeds the configuration's magnitude range.
    """

    mag: int
    sign: bool
    config: FixedConfig

    def __post_init__(self) -> None:
        if isinstance(self.mag, bool) or not isinstance(self.mag, int) or self.mag < 0:
            raise ValueError(f"magnitude must be a non-negative int, got {self.mag!r}")
        max_mag = self.config.max_mag
        if max_mag is not None and self.mag > max_mag:
            raise NumericOverflowError("new", self.config.name)
        if self.mag == 0 and self.sign:
            object.__setattr__(self, "sign", False)
        elif not isinstance(self.sign, bool):
            object.__setattr__(self, "sign", bool(self.sign))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def new(cls, mag: int, sign: bool, config: FixedConfig) -> "FixedPoint":
        return cls(mag, sign, config)

    @classmethod
    def zero(cls, config: FixedConfig) -> "FixedPoint":
        return cls(0, False, config)

    @classmethod
    def one(cls, config: FixedConfig) -> "FixedPoint":
        return cls(config.one, False, config)

    @classmethod
    def from_int(cls, value: int, config: FixedConfig) -> "FixedPoint":
        """Encode an integer exactly (``mag = |value| << frac_bits``)."""
        return _result(abs(value) << config.frac_bits, value < 0, config, "from_int")

    @classmethod
    def from_decimal(cls, text: str, config: FixedConfig) -> "FixedPoint":
        """Encode a decimal literal, rounding half up in magnitude."""
        mag, sign = config.decimal_to_mag(text)
        return _result(mag, sign, config, "from_decimal")

    @classmethod
    def from_fraction(cls, value: Fraction, config: FixedConfig) -> "FixedPoint":
        """Encode an exact rational, rounding half away from zero."""
        num = abs(value.numerator) * config.one
        den = value.denominator
        mag = (2 * num + den) // (2 * den)
        return _result(mag, value < 0, config, "from_fraction")

    @classmethod
    def from_float(cls, value: float, config: FixedConfig) -> "FixedPoint":
        """
        Encode a host float through its exact binary value.

        Raises
        ------
        ValueError
            If `value` is NaN or infinite.
        """
        try:
            exact = Fraction(value)
        except (OverflowError, ValueError):
            raise ValueError(f"cannot encode non-finite value {value!r}") from None
        return cls.from_fraction(exact, config)

    @classmethod
    def encode(cls, value: Any, config: FixedConfig) -> "FixedPoint":
        """
        Encode a host value (int, float, decimal string, Fraction, FixedPoint).

        Raises
        ------
        DTypeMismatchError
            If `value` is a `FixedPoint` of another configuration. Use
            :meth:`rescale` to convert between configurations explicitly.
        """
        if isinstance(value, FixedPoint):
            if value.config != config:
                raise DTypeMismatchError("encode", config.name, value.config.name)
            return value
        if isinstance(value, bool):
            return cls.from_int(int(value), config)
        if isinstance(value, int):
            return cls.from_int(value, config)
        if isinstance(value, Fraction):
            return cls.from_fraction(value, config)
        if isinstance(value, str):
            return cls.from_decimal(value, config)
        if isinstance(value, float):
            return cls.from_float(value, config)
        # NumPy scalars and other numerics
        try:
            return cls.from_float(float(value), config)
        except (TypeError, ValueError):
            raise TypeError(
                f"cannot encode {type(value).__name__} as {config.name}"
            ) from None

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def to_fraction(self) -> Fraction:
        """Exact rational value."""
        v = Fraction(self.mag, self.config.one)
        return -v if self.sign else v

    def __float__(self) -> float:
        return float(self.to_fraction())

    def __int__(self) -> int:
        """Integer part, truncated toward zero."""
        i = self.mag >> self.config.frac_bits
        return -i if self.sign else i

    def signed_mag(self) -> int:
        """Magnitude with the sign applied (two's-complement view, unbounded)."""
        return -self.mag if self.sign else self.mag

    def rescale(self, config: FixedConfig) -> "FixedPoint":
        """
        Convert to another configuration.

        Narrowing rounds half away from zero.

        Raises
        ------
        NumericOverflowError
            If the value does not fit `config`.
        """
        shift = self.config.frac_bits - config.frac_bits
        if shift > 0:
            mag = (self.mag + (1 << (shift - 1))) >> shift
        else:
            mag = self.mag << -shift
        return _result(mag, self.sign, config, "rescale")

    def __repr__(self) -> str:
        return f"FixedPoint({float(self)!r}, {self.config.name})"

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------
    def is_zero(self) -> bool:
        return self.mag == 0

    def is_negative(self) -> bool:
        return self.sign

    def _check(self, other: "FixedPoint", op: str) -> None:
        if other.config != self.config:
            raise DTypeMismatchError(op, self.config.name, other.config.name)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add(self, other: "FixedPoint") -> "FixedPoint":
        self._check(other, "add")
        if self.sign == other.sign:
            return _result(self.mag + other.mag, self.sign, self.config, "add")
        if self.mag >= other.mag:
            return _result(self.mag - other.mag, self.sign, self.config, "add")
        return _result(other.mag - self.mag, other.sign, self.config, "add")

    def sub(self, other: "FixedPoint") -> "FixedPoint":
        self._check(other, "sub")
        return self.add(other.neg())

    def mul(self, other: "FixedPoint") -> "FixedPoint":
        self._check(other, "mul")
        mag = (self.mag * other.mag) >> self.config.frac_bits
        return _result(mag, self.sign != other.sign, self.config, "mul")

    def div(self, other: "FixedPoint") -> "FixedPoint":
        self._check(other, "div")
        if other.mag == 0:
            raise DivisionByZeroError("div")
        mag = (self.mag << self.config.frac_bits) // other.mag
        return _result(mag, self.sign != other.sign, self.config, "div")

    def neg(self) -> "FixedPoint":
        return FixedPoint(self.mag, not self.sign, self.config)

    def abs(self) -> "FixedPoint":
        return FixedPoint(self.mag, False, self.config)

    def compare(self, other: "FixedPoint") -> int:
        """
        Three-way comparison.

        Negative values order below positive ones; within the same sign,
        magnitudes order ascending for positives and descending for negatives.
        """
        self._check(other, "compare")
        if self.sign != other.sign:
            return -1 if self.sign else 1
        if self.mag == other.mag:
            return 0
        smaller = self.mag < other.mag
        if self.sign:
            smaller = not smaller
        return -1 if smaller else 1

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __neg__ = neg
    __abs__ = abs

    def __lt__(self, other: "FixedPoint") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "FixedPoint") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "FixedPoint") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "FixedPoint") -> bool:
        return self.compare(other) >= 0

    # ------------------------------------------------------------------
    # Rounding
    # ------------------------------------------------------------------
    def floor(self) -> "FixedPoint":
        one = self.config.one
        frac = self.mag % one
        if frac == 0:
            return self
        if self.sign:
            return _result(self.mag - frac + one, True, self.config, "floor")
        return FixedPoint(self.mag - frac, False, self.config)

    def ceil(self) -> "FixedPoint":
        one = self.config.one
        frac = self.mag % one
        if frac == 0:
            return self
        if self.sign:
            return FixedPoint(self.mag - frac, True, self.config)
        return _result(self.mag - frac + one, False, self.config, "ceil")

    def round(self) -> "FixedPoint":
        """Round to the nearest integer, halves away from zero."""
        one = self.config.one
        mag = (self.mag + self.config.half) // one * one
        return _result(mag, self.sign, self.config, "round")

    def signum(self) -> "FixedPoint":
        """-1, 0 or 1 in this configuration."""
        if self.mag == 0:
            return self
        return FixedPoint(self.config.one, self.sign, self.config)
