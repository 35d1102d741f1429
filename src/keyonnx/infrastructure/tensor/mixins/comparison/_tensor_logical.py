"""
Elementwise logical operators registered for every element family.
"""

from .....domain.dtype._dtype import DType
from ..._tensor_builder import register_families

from ._base import TensorMixinComparison as TMC


def _truth(self):
    kind = self.kind
    zero = kind.zero()
    return lambda x: kind.compare(x, zero) != 0


def _logical(self, other, op, combine):
    truth = _truth(self)
    return self._binary_elementwise(
        other, op, lambda a, b: int(combine(truth(a), truth(b))), out_dtype=DType.U32
    )


@register_families(TMC, TMC.and_)
def tensor_and(self, other):
    return _logical(self, other, "and", lambda a, b: a and b)


@register_families(TMC, TMC.or_)
def tensor_or(self, other):
    return _logical(self, other, "or", lambda a, b: a or b)


@register_families(TMC, TMC.xor)
def tensor_xor(self, other):
    return _logical(self, other, "xor", lambda a, b: a != b)


@register_families(TMC, TMC.not_)
def tensor_not(self):
    truth = _truth(self)
    return self._unary_map("not", lambda x: int(not truth(x)), out_dtype=DType.U32)
