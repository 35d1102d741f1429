"""
Comparison and logical mixin defining elementwise predicate APIs.

Every predicate follows the broadcasting rule of the arithmetic operators and
returns a ``u32`` tensor holding 0 (false) or 1 (true). Logical operators
treat any non-zero element as true.
"""

from abc import ABC
from typing import Union

from .....domain._tensor import ITensor


class TensorMixinComparison(ABC):
    """
    Abstract mixin defining elementwise comparisons and logical operations.

    Notes
    -----
    - Both operands must share the same dtype; scalars are lifted into the
      receiver's kind.
    - ``==`` on tensors is structural equality (see `Tensor`); use
      :meth:`equal` for the elementwise predicate.
    """

    def equal(self: ITensor, other: Union["ITensor", int, float]) -> "ITensor":
        """Elementwise ``self == other`` as a ``u32`` 0/1 tensor."""
        ...

    def greater(self: ITensor, other: Union["ITensor", int, float]) -> "ITensor":
        """Elementwise ``self > other`` as a ``u32`` 0/1 tensor."""
        ...

    def greater_equal(
        self: ITensor, other: Union["ITensor", int, float]
    ) -> "ITensor":
        """Elementwise ``self >= other`` as a ``u32`` 0/1 tensor."""
        ...

    def less(self: ITensor, other: Union["ITensor", int, float]) -> "ITensor":
        """Elementwise ``self < other`` as a ``u32`` 0/1 tensor."""
        ...

    def less_equal(self: ITensor, other: Union["ITensor", int, float]) -> "ITensor":
        """Elementwise ``self <= other`` as a ``u32`` 0/1 tensor."""
        ...

    def and_(self: ITensor, other: Union["ITensor", int, float]) -> "ITensor":
        """Elementwise logical AND (non-zero is true)."""
        ...

    def or_(self: ITensor, other: Union["ITensor", int, float]) -> "ITensor":
        """Elementwise logical OR (non-zero is true)."""
        ...

    def xor(self: ITensor, other: Union["ITensor", int, float]) -> "ITensor":
        """Elementwise logical XOR (non-zero is true)."""
        ...

    def not_(self: ITensor) -> "ITensor":
        """Elementwise logical NOT (non-zero is true)."""
        ...

    def __gt__(self, other):
        return self.greater(other)

    def __ge__(self, other):
        return self.greater_equal(other)

    def __lt__(self, other):
        return self.less(other)

    def __le__(self, other):
        return self.less_equal(other)

    def __and__(self, other):
        return self.and_(other)

    def __or__(self, other):
        return self.or_(other)

    def __xor__(self, other):
        return self.xor(other)
