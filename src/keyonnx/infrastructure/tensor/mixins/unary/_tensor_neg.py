"""
Sign-related unary operations via control-path dispatch.

``abs`` is registered for every family; ``neg`` and ``sign`` only for the
signed families, so unsigned tensors raise `UnsupportedDTypeError`.
"""

from ..._tensor_builder import ALL_FAMILIES, SIGNED_FAMILIES, register_families

from ._base import TensorMixinUnary as TMU


@register_families(TMU, TMU.neg, SIGNED_FAMILIES)
def tensor_neg(self):
    return self._unary_map("neg", self.kind.neg)


@register_families(TMU, TMU.abs, ALL_FAMILIES)
def tensor_abs(self):
    return self._unary_map("abs", self.kind.abs)


@register_families(TMU, TMU.sign, SIGNED_FAMILIES)
def tensor_sign(self):
    kind = self.kind
    zero = kind.zero()
    return self._unary_map("sign", lambda x: kind.from_int(kind.compare(x, zero)))
