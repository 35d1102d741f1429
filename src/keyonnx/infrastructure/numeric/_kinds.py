"""
Concrete numeric kinds.

Each class here implements the `INumericKind` capability set for one element
family. Tensor algorithms only ever manipulate elements through these objects,
so a single algorithm body serves every dtype while the per-kind arithmetic
(range checks, sign-magnitude rules, fixed-point rescaling) stays exact.

- `UnsignedKind`: Python ints in ``[0, 2**bits)``; subtraction below zero and
  results above the range raise `NumericOverflowError`.
- `SignedKind`: `SignedInteger` elements.
- `FixedKind`: `FixedPoint` elements of one configuration.

Use :func:`kind_for` to obtain the shared kind instance of a dtype.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any

from ...domain._errors import (
    DivisionByZeroError,
    DTypeMismatchError,
    NumericOverflowError,
    UnsupportedDTypeError,
)
from ...domain._numeric_kind import INumericKind
from ...domain.dtype._dtype import DType, DTypeFamily
from ._fixed_config import FixedConfig, config_for
from ._fixed_point import FixedPoint
from ._signed import SignedInteger


def _reject_foreign_element(value: Any, dtype: DType) -> None:
    """
    Raises
    ------
    DTypeMismatchError
        If `value` is an element of another kind (another width or scale).
    """
    if isinstance(value, SignedInteger):
        raise DTypeMismatchError("encode", str(dtype), f"i{value.bits}")
    if isinstance(value, FixedPoint):
        raise DTypeMismatchError("encode", str(dtype), value.config.name)


def _as_int(value: Any, dtype: DType) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, Fraction):
        if value.denominator != 1:
            raise ValueError(f"{value!r} is not an integer ({dtype})")
        return value.numerator
    if isinstance(value, str):
        return int(value.strip())
    # NumPy integer scalars and integral floats
    if hasattr(value, "__index__"):
        return int(value.__index__())
    if isinstance(value, float) or hasattr(value, "is_integer"):
        if not float(value).is_integer():
            raise ValueError(f"{value!r} is not an integer ({dtype})")
        return int(value)
    raise TypeError(f"cannot encode {type(value).__name__} as {dtype}")


class UnsignedKind:
    """Unsigned integers with checked arithmetic."""

    def __init__(self, dtype: DType) -> None:
        self._dtype = dtype
        self._max = (1 << dtype.bits) - 1

    def __repr__(self) -> str:
        return f"UnsignedKind({self._dtype})"

    @property
    def dtype(self) -> DType:
        return self._dtype

    def _checked(self, value: int, op: str) -> int:
        if value < 0 or value > self._max:
            raise NumericOverflowError(op, str(self._dtype))
        return value

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def max_value(self) -> int:
        return self._max

    def min_value(self) -> int:
        return 0

    def add(self, a: int, b: int) -> int:
        return self._checked(a + b, "add")

    def sub(self, a: int, b: int) -> int:
        return self._checked(a - b, "sub")

    def mul(self, a: int, b: int) -> int:
        return self._checked(a * b, "mul")

    def div(self, a: int, b: int) -> int:
        if b == 0:
            raise DivisionByZeroError("div")
        return a // b

    def neg(self, a: int) -> int:
        raise UnsupportedDTypeError("neg", str(self._dtype))

    def abs(self, a: int) -> int:
        return a

    def compare(self, a: int, b: int) -> int:
        return (a > b) - (a < b)

    def from_int(self, value: int) -> int:
        return self._checked(int(value), "from_int")

    def encode(self, value: Any) -> int:
        _reject_foreign_element(value, self._dtype)
        return self._checked(_as_int(value, self._dtype), "encode")

    def decode(self, element: int) -> int:
        return element

    def is_element(self, value: Any) -> bool:
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and 0 <= value <= self._max
        )


class SignedKind:
    """Sign-magnitude signed integers (`SignedInteger` elements)."""

    def __init__(self, dtype: DType) -> None:
        self._dtype = dtype
        self._bits = dtype.bits

    def __repr__(self) -> str:
        return f"SignedKind({self._dtype})"

    @property
    def dtype(self) -> DType:
        return self._dtype

    def zero(self) -> SignedInteger:
        return SignedInteger(0, False, self._bits)

    def one(self) -> SignedInteger:
        return SignedInteger(1, False, self._bits)

    def max_value(self) -> SignedInteger:
        return SignedInteger((1 << (self._bits - 1)) - 1, False, self._bits)

    def min_value(self) -> SignedInteger:
        return SignedInteger(1 << (self._bits - 1), True, self._bits)

    def add(self, a: SignedInteger, b: SignedInteger) -> SignedInteger:
        return a.add(b)

    def sub(self, a: SignedInteger, b: SignedInteger) -> SignedInteger:
        return a.sub(b)

    def mul(self, a: SignedInteger, b: SignedInteger) -> SignedInteger:
        return a.mul(b)

    def div(self, a: SignedInteger, b: SignedInteger) -> SignedInteger:
        return a.div(b)

    def neg(self, a: SignedInteger) -> SignedInteger:
        return a.neg()

    def abs(self, a: SignedInteger) -> SignedInteger:
        return a.abs()

    def compare(self, a: SignedInteger, b: SignedInteger) -> int:
        return a.compare(b)

    def from_int(self, value: int) -> SignedInteger:
        return SignedInteger.from_int(int(value), self._bits)

    def encode(self, value: Any) -> SignedInteger:
        if self.is_element(value):
            return value
        _reject_foreign_element(value, self._dtype)
        return SignedInteger.from_int(_as_int(value, self._dtype), self._bits)

    def decode(self, element: SignedInteger) -> int:
        return int(element)

    def is_element(self, value: Any) -> bool:
        return isinstance(value, SignedInteger) and value.bits == self._bits


class FixedKind:
    """Sign-magnitude fixed-point numbers of one configuration."""

    def __init__(self, dtype: DType) -> None:
        self._dtype = dtype
        self._config = config_for(dtype)

    def __repr__(self) -> str:
        return f"FixedKind({self._dtype})"

    @property
    def dtype(self) -> DType:
        return self._dtype

    @property
    def config(self) -> FixedConfig:
        return self._config

    def zero(self) -> FixedPoint:
        return FixedPoint.zero(self._config)

    def one(self) -> FixedPoint:
        return FixedPoint.one(self._config)

    def max_value(self) -> FixedPoint:
        return FixedPoint(self._config.max_mag, False, self._config)

    def min_value(self) -> FixedPoint:
        return FixedPoint(self._config.max_mag, True, self._config)

    def add(self, a: FixedPoint, b: FixedPoint) -> FixedPoint:
        return a.add(b)

    def sub(self, a: FixedPoint, b: FixedPoint) -> FixedPoint:
        return a.sub(b)

    def mul(self, a: FixedPoint, b: FixedPoint) -> FixedPoint:
        return a.mul(b)

    def div(self, a: FixedPoint, b: FixedPoint) -> FixedPoint:
        return a.div(b)

    def neg(self, a: FixedPoint) -> FixedPoint:
        return a.neg()

    def abs(self, a: FixedPoint) -> FixedPoint:
        return a.abs()

    def compare(self, a: FixedPoint, b: FixedPoint) -> int:
        return a.compare(b)

    def from_int(self, value: int) -> FixedPoint:
        return FixedPoint.from_int(int(value), self._config)

    def encode(self, value: Any) -> FixedPoint:
        if self.is_element(value):
            return value
        _reject_foreign_element(value, self._dtype)
        return FixedPoint.encode(value, self._config)

    def decode(self, element: FixedPoint) -> float:
        return float(element)

    def is_element(self, value: Any) -> bool:
        return isinstance(value, FixedPoint) and value.config == self._config


_KIND_CLASSES = {
    DTypeFamily.UNSIGNED: UnsignedKind,
    DTypeFamily.SIGNED: SignedKind,
    DTypeFamily.FIXED: FixedKind,
}

_KINDS: dict[DType, INumericKind] = {
    dtype: _KIND_CLASSES[dtype.family](dtype) for dtype in DType
}


def kind_for(dtype: "DType | str") -> INumericKind:
    """
    Return the shared numeric kind of a dtype.

    Parameters
    ----------
    dtype : DType or str
        Element kind or its canonical name.

    Returns
    -------
    INumericKind
        The kind instance. Kinds are stateless and shared.
    """
    return _KINDS[DType.parse(dtype)]


def infer_dtype(element: Any) -> DType:
    """
    Infer the dtype of an already-encoded element.

    `FixedPoint` elements map to their configuration's dtype, `SignedInteger`
    elements to ``i8``/``i32`` by width, and non-negative Python ints to ``u32``.

    Raises
    ------
    TypeError
        If the element kind cannot be inferred.
    """
    if isinstance(element, FixedPoint):
        dtype = element.config.dtype
        if dtype is not None:
            return dtype
    elif isinstance(element, SignedInteger):
        for dtype in (DType.I8, DType.I32):
            if dtype.bits == element.bits:
                return dtype
    elif isinstance(element, int) and not isinstance(element, bool) and element >= 0:
        return DType.U32
    raise TypeError(f"cannot infer a dtype from element {element!r}")
