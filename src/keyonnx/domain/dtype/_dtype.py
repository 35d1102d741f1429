"""
Element-type (dtype) descriptors.

This module defines lightweight, backend-agnostic descriptors for the element
kinds a tensor can hold:

- `DTypeFamily`: the arithmetic family of an element kind (unsigned integer,
  sign-magnitude signed integer, sign-magnitude fixed point)
- `DType`: the concrete element kinds supported by the engine, together with
  the bit-level parameters of each kind

The concrete arithmetic for each kind lives in the infrastructure layer; this
module only names the kinds so that every layer can refer to them.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class DTypeFamily(Enum):
    """
    Arithmetic family of an element kind.

    Attributes
    ----------
    UNSIGNED : DTypeFamily
        Non-negative integers with checked (non-wrapping) arithmetic.
    SIGNED : DTypeFamily
        Sign-magnitude integers with checked arithmetic.
    FIXED : DTypeFamily
        Sign-magnitude fixed-point fractional numbers.
    """

    UNSIGNED = "unsigned"
    SIGNED = "signed"
    FIXED = "fixed"


class DType(Enum):
    """
    Concrete element kinds.

    Each member's value is its canonical lowercase name. The bit layout of a
    member is available through :attr:`family`, :attr:`bits`,
    :attr:`int_bits` and :attr:`frac_bits`.

    Notes
    -----
    - Integer kinds report ``frac_bits == 0``.
    - Fixed-point kinds store a magnitude of ``int_bits + frac_bits`` bits plus
      a separate sign flag.
    """

    U32 = "u32"
    I8 = "i8"
    I32 = "i32"
    FP8X23 = "fp8x23"
    FP16X16 = "fp16x16"
    FP32X32 = "fp32x32"
    FP64X64 = "fp64x64"

    @property
    def family(self) -> DTypeFamily:
        """Arithmetic family of this element kind."""
        return _LAYOUT[self][0]

    @property
    def int_bits(self) -> int:
        """Number of integer magnitude bits (value bits for integer kinds)."""
        return _LAYOUT[self][1]

    @property
    def frac_bits(self) -> int:
        """Number of fractional bits (0 for integer kinds)."""
        return _LAYOUT[self][2]

    @property
    def bits(self) -> int:
        """Total storage width in bits."""
        return self.int_bits + self.frac_bits

    def is_fixed(self) -> bool:
        """Return True if this is a fixed-point kind."""
        return self.family is DTypeFamily.FIXED

    def is_integer(self) -> bool:
        """Return True if this is a signed or unsigned integer kind."""
        return self.family is not DTypeFamily.FIXED

    @classmethod
    def parse(cls, name: "str | DType") -> "DType":
        """
        Resolve a dtype from its canonical name (case-insensitive).

        Parameters
        ----------
        name : str or DType
            A dtype name such as ``"fp16x16"`` or ``"FP16x16"``, or a `DType`.

        Returns
        -------
        DType
            The matching element kind.

        Raises
        ------
        ValueError
            If the name does not denote a supported kind.
        """
        if isinstance(name, DType):
            return name
        key: Optional[str] = name.strip().lower() if isinstance(name, str) else None
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(
            f"Invalid dtype {name!r}. Expected one of "
            f"{', '.join(m.value for m in cls)}"
        )

    def __str__(self) -> str:
        return self.value


# family, int bits, frac bits
_LAYOUT = {
    DType.U32: (DTypeFamily.UNSIGNED, 32, 0),
    DType.I8: (DTypeFamily.SIGNED, 8, 0),
    DType.I32: (DTypeFamily.SIGNED, 32, 0),
    DType.FP8X23: (DTypeFamily.FIXED, 8, 23),
    DType.FP16X16: (DTypeFamily.FIXED, 16, 16),
    DType.FP32X32: (DTypeFamily.FIXED, 32, 32),
    DType.FP64X64: (DTypeFamily.FIXED, 64, 64),
}
