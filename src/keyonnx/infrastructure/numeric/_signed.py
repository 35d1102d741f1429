"""
Sign-magnitude signed integers.

`SignedInteger` is the signed-integer primitive consumed by the tensor
algorithms for ``i8``/``i32`` tensors. It stores a magnitude and a sign flag,
like `FixedPoint`, and follows the same sign rules:

- add/sub use sign-magnitude addition
- mul/div combine magnitudes, sign = XOR
- div truncates toward zero (magnitude floor division)

The representable range is ``-2**(bits-1) .. 2**(bits-1) - 1``. Results
outside of it raise `NumericOverflowError`; nothing wraps or saturates.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...domain._errors import (
    DivisionByZeroError,
    DTypeMismatchError,
    NumericOverflowError,
)


def _fits(mag: int, sign: bool, bits: int) -> bool:
    limit = 1 << (bits - 1)
    return mag <= (limit if sign else limit - 1)


def _result(mag: int, sign: bool, bits: int, op: str) -> "SignedInteger":
    sign = sign and mag != 0
    if not _fits(mag, sign, bits):
        raise NumericOverflowError(op, f"i{bits}")
    return SignedInteger(mag, sign, bits)


@dataclass(frozen=True)
class SignedInteger:
    """
    Immutable sign-magnitude integer of a fixed bit width.

    Parameters
    ----------
    mag : int
        Non-negative magnitude.
    sign : bool
        True for negative values. Normalized to False when ``mag == 0``.
    bits : int
        Bit width (8 or 32 for the supported dtypes).
    """

    mag: int
    sign: bool
    bits: int

    def __post_init__(self) -> None:
        if isinstance(self.mag, bool) or not isinstance(self.mag, int) or self.mag < 0:
            raise ValueError(f"magnitude must be a non-negative int, got {self.mag!r}")
        if self.mag == 0 and self.sign:
            object.__setattr__(self, "sign", False)
        if not _fits(self.mag, self.sign, self.bits):
            raise NumericOverflowError("new", f"i{self.bits}")

    @classmethod
    def from_int(cls, value: int, bits: int) -> "SignedInteger":
        return _result(abs(int(value)), value < 0, bits, "from_int")

    def __int__(self) -> int:
        return -self.mag if self.sign else self.mag

    def __index__(self) -> int:
        return int(self)

    def __repr__(self) -> str:
        return f"SignedInteger({int(self)}, i{self.bits})"

    def _check(self, other: "SignedInteger", op: str) -> None:
        if other.bits != self.bits:
            raise DTypeMismatchError(op, f"i{self.bits}", f"i{other.bits}")

    def add(self, other: "SignedInteger") -> "SignedInteger":
        self._check(other, "add")
        if self.sign == other.sign:
            return _result(self.mag + other.mag, self.sign, self.bits, "add")
        if self.mag >= other.mag:
            return _result(self.mag - other.mag, self.sign, self.bits, "add")
        return _result(other.mag - self.mag, other.sign, self.bits, "add")

    def sub(self, other: "SignedInteger") -> "SignedInteger":
        self._check(other, "sub")
        if self.sign != other.sign:
            return _result(self.mag + other.mag, self.sign, self.bits, "sub")
        if self.mag >= other.mag:
            return _result(self.mag - other.mag, self.sign, self.bits, "sub")
        return _result(other.mag - self.mag, not self.sign, self.bits, "sub")

    def mul(self, other: "SignedInteger") -> "SignedInteger":
        self._check(other, "mul")
        return _result(self.mag * other.mag, self.sign != other.sign, self.bits, "mul")

    def div(self, other: "SignedInteger") -> "SignedInteger":
        self._check(other, "div")
        if other.mag == 0:
            raise DivisionByZeroError("div")
        return _result(self.mag // other.mag, self.sign != other.sign, self.bits, "div")

    def neg(self) -> "SignedInteger":
        return _result(self.mag, not self.sign, self.bits, "neg")

    def abs(self) -> "SignedInteger":
        return _result(self.mag, False, self.bits, "abs")

    def compare(self, other: "SignedInteger") -> int:
        self._check(other, "compare")
        a, b = int(self), int(other)
        return (a > b) - (a < b)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __floordiv__ = div
    __neg__ = neg
    __abs__ = abs

    def __lt__(self, other: "SignedInteger") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "SignedInteger") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "SignedInteger") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "SignedInteger") -> bool:
        return self.compare(other) >= 0
