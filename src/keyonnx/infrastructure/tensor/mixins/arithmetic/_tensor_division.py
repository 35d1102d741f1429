"""
Tensor division registered for every element family.

Division by a zero element raises `DivisionByZeroError` from the element kind
and aborts the whole operation.
"""

from ..._tensor_builder import register_families

from ._base import TensorMixinArithmetic as TMA


@register_families(TMA, TMA.div)
def tensor_div(self, other):
    """Elementwise ``self / other`` through the element kind."""
    return self._binary_elementwise(other, "div", self.kind.div)
