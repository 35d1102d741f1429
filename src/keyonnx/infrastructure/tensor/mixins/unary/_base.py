"""
Unary operation mixin defining elementwise Tensor unary APIs.

This module declares :class:`TensorMixinUnary`, an abstract mixin that
specifies the public interface of elementwise unary operations:

- sign handling for every signed kind: ``neg``, ``abs``, ``sign``
- fixed-point transcendental functions and rounding

The fixed-point functions are only registered for the fixed-point family;
calling them on an integer tensor raises `UnsupportedDTypeError`.
"""

from abc import ABC

from .....domain._tensor import ITensor


class TensorMixinUnary(ABC):
    """
    Abstract mixin defining unary tensor operations.

    Notes
    -----
    - Output shape and dtype equal the input's.
    - Fixed-point functions are evaluated with guard bits and rounded half
      away from zero to the tensor's precision.
    - Domain errors (e.g. ``log`` of a non-positive element) raise
      `InvalidArgumentError` and abort the whole operation.
    """

    def neg(self: ITensor) -> "ITensor":
        """
        Elementwise negation.

        Raises
        ------
        UnsupportedDTypeError
            For unsigned tensors.
        """
        ...

    def abs(self: ITensor) -> "ITensor":
        """Elementwise absolute value."""
        ...

    def sign(self: ITensor) -> "ITensor":
        """
        Elementwise sign (-1, 0 or 1 in the tensor's kind).

        Raises
        ------
        UnsupportedDTypeError
            For unsigned tensors.
        """
        ...

    def exp(self: ITensor) -> "ITensor":
        """Elementwise ``e ** x``."""
        ...

    def exp2(self: ITensor) -> "ITensor":
        """Elementwise ``2 ** x``."""
        ...

    def log(self: ITensor) -> "ITensor":
        """
        Elementwise natural logarithm.

        Raises
        ------
        InvalidArgumentError
            If an element is not positive.
        """
        ...

    def log2(self: ITensor) -> "ITensor":
        """Elementwise base-2 logarithm."""
        ...

    def log10(self: ITensor) -> "ITensor":
        """Elementwise base-10 logarithm."""
        ...

    def sqrt(self: ITensor) -> "ITensor":
        """
        Elementwise square root.

        Raises
        ------
        InvalidArgumentError
            If an element is negative.
        """
        ...

    def sin(self: ITensor) -> "ITensor": ...

    def cos(self: ITensor) -> "ITensor": ...

    def tan(self: ITensor) -> "ITensor": ...

    def asin(self: ITensor) -> "ITensor":
        """Elementwise arcsine; elements must lie in ``[-1, 1]``."""
        ...

    def acos(self: ITensor) -> "ITensor":
        """Elementwise arccosine; elements must lie in ``[-1, 1]``."""
        ...

    def atan(self: ITensor) -> "ITensor": ...

    def sinh(self: ITensor) -> "ITensor": ...

    def cosh(self: ITensor) -> "ITensor": ...

    def tanh(self: ITensor) -> "ITensor": ...

    def asinh(self: ITensor) -> "ITensor": ...

    def acosh(self: ITensor) -> "ITensor":
        """Elementwise inverse hyperbolic cosine; elements must be ``>= 1``."""
        ...

    def atanh(self: ITensor) -> "ITensor":
        """Elementwise inverse hyperbolic tangent; elements must lie in ``(-1, 1)``."""
        ...

    def floor(self: ITensor) -> "ITensor": ...

    def ceil(self: ITensor) -> "ITensor": ...

    def round(self: ITensor) -> "ITensor":
        """Elementwise rounding to the nearest integer, halves away from zero."""
        ...

    def __neg__(self):
        return self.neg()

    def __abs__(self):
        return self.abs()
