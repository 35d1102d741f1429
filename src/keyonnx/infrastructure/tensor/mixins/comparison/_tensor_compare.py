"""
Elementwise comparison predicates registered for every element family.

Each predicate maps the kind's three-way `compare` result to 0/1 and returns a
``u32`` tensor.
"""

from .....domain.dtype._dtype import DType
from ..._tensor_builder import register_families

from ._base import TensorMixinComparison as TMC


def _predicate(self, other, op, accept):
    compare = self.kind.compare
    return self._binary_elementwise(
        other, op, lambda a, b: int(accept(compare(a, b))), out_dtype=DType.U32
    )


@register_families(TMC, TMC.equal)
def tensor_equal(self, other):
    return _predicate(self, other, "equal", lambda c: c == 0)


@register_families(TMC, TMC.greater)
def tensor_greater(self, other):
    return _predicate(self, other, "greater", lambda c: c > 0)


@register_families(TMC, TMC.greater_equal)
def tensor_greater_equal(self, other):
    return _predicate(self, other, "greater_equal", lambda c: c >= 0)


@register_families(TMC, TMC.less)
def tensor_less(self, other):
    return _predicate(self, other, "less", lambda c: c < 0)


@register_families(TMC, TMC.less_equal)
def tensor_less_equal(self, other):
    return _predicate(self, other, "less_equal", lambda c: c <= 0)
