"""
Arithmetic mixin defining elementwise Tensor operators.

This module declares :class:`TensorMixinArithmetic`, an abstract mixin that
specifies the public API and semantics of elementwise arithmetic on tensors.

The named methods (``add``, ``sub``, ``mul``, ``div``, ``pow``) are replaced by
control-path dispatchers when the implementation modules register their
family-specific paths. The Python operators defined here forward to them.
"""

from abc import ABC
from fractions import Fraction
from typing import Union

from .....domain._tensor import ITensor

Number = Union[int, float, str, Fraction]


class TensorMixinArithmetic(ABC):
    """
    Abstract mixin defining elementwise arithmetic operations for tensors.

    Notes
    -----
    - Operands must be broadcast-compatible. The output takes the shape of the
      operand with the longer flat data; ties go to the right operand.
    - Both operands must share the same dtype (`DTypeMismatchError`).
    - Scalars are encoded into the receiver's kind and filled to the receiver's
      shape before the operation.
    - Results that leave the kind's range raise `NumericOverflowError`.
    """

    def add(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise addition.

        Raises
        ------
        ShapeMismatchError
            If the shapes are not broadcast-compatible.
        """
        ...

    def sub(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise subtraction (``self - other``).

        Unsigned tensors raise `NumericOverflowError` when a result would be
        negative.
        """
        ...

    def mul(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise multiplication.

        Fixed-point products are truncated toward zero at the fractional
        precision of the kind.
        """
        ...

    def div(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise division (``self / other``).

        Integer kinds divide with truncation toward zero (floor for unsigned).

        Raises
        ------
        DivisionByZeroError
            If an element of `other` is zero.
        """
        ...

    def pow(self: ITensor, exponent: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise power ``self ** exponent`` (fixed-point tensors only).

        Integral exponents use exact repeated multiplication; other exponents
        are evaluated as ``exp(exponent * ln(self))``.

        Raises
        ------
        UnsupportedDTypeError
            If the tensor is not fixed-point.
        """
        ...

    # ----------------------------
    # Python operators
    # ----------------------------
    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        return self._as_tensor_like(other).add(self)

    def __sub__(self, other):
        return self.sub(other)

    def __rsub__(self, other):
        return self._as_tensor_like(other).sub(self)

    def __mul__(self, other):
        return self.mul(other)

    def __rmul__(self, other):
        return self._as_tensor_like(other).mul(self)

    def __truediv__(self, other):
        return self.div(other)

    def __rtruediv__(self, other):
        return self._as_tensor_like(other).div(self)

    def __pow__(self, exponent):
        return self.pow(exponent)
