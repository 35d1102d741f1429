"""
Extremum reductions (`max`, `min`, `argmax`, `argmin`) registered for every
element family.

Arg-reductions return ``u32`` index tensors.
"""

import logging

from .....domain.dtype._dtype import DType
from ....ops.reduce_cpu import arg_reduce_cpu, global_extreme_cpu, reduce_extreme_cpu
from ..._tensor_builder import register_families

from ._base import TensorMixinReduction as TMR

logger = logging.getLogger(__name__)


def _extreme(self, axis, keepdims, largest):
    Tensor = type(self)
    if axis is None:
        best = global_extreme_cpu(self.data, self.kind, largest=largest)
        shape = (1,) * self.rank if keepdims else ()
        return Tensor._from_storage(shape, (best,), self.dtype)
    shape, data = reduce_extreme_cpu(
        self.shape, self.data, self.kind, axis, keepdims, largest=largest
    )
    return Tensor._from_storage(shape, data, self.dtype)


def _arg(self, axis, keepdims, select_last_index, largest):
    shape, data = arg_reduce_cpu(
        self.shape,
        self.data,
        self.kind,
        axis,
        keepdims,
        largest=largest,
        select_last_index=select_last_index,
    )
    return type(self)._from_storage(shape, data, DType.U32)


@register_families(TMR, TMR.max)
def tensor_max(self, axis=None, keepdims=False):
    logger.debug("max: %s %s axis=%s", self.shape, self.dtype, axis)
    return _extreme(self, axis, keepdims, largest=True)


@register_families(TMR, TMR.min)
def tensor_min(self, axis=None, keepdims=False):
    logger.debug("min: %s %s axis=%s", self.shape, self.dtype, axis)
    return _extreme(self, axis, keepdims, largest=False)


@register_families(TMR, TMR.argmax)
def tensor_argmax(self, axis=0, keepdims=False, select_last_index=False):
    logger.debug("argmax: %s %s axis=%s", self.shape, self.dtype, axis)
    return _arg(self, axis, keepdims, select_last_index, largest=True)


@register_families(TMR, TMR.argmin)
def tensor_argmin(self, axis=0, keepdims=False, select_last_index=False):
    logger.debug("argmin: %s %s axis=%s", self.shape, self.dtype, axis)
    return _arg(self, axis, keepdims, select_last_index, largest=False)
