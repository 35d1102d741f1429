"""
Tensor subtraction registered for every element family.
"""

from ..._tensor_builder import register_families

from ._base import TensorMixinArithmetic as TMA


@register_families(TMA, TMA.sub)
def tensor_sub(self, other):
    """Elementwise ``self - other`` through the element kind."""
    return self._binary_elementwise(other, "sub", self.kind.sub)
