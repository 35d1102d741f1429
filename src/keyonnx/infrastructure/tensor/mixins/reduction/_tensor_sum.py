"""
Summation reductions (`reduce_sum`, `reduce_mean`, `cumsum`) registered for
every element family.
"""

import logging

from ....ops.reduce_cpu import cumsum_cpu, reduce_mean_cpu, reduce_sum_cpu
from ..._tensor_builder import register_families

from ._base import TensorMixinReduction as TMR

logger = logging.getLogger(__name__)


@register_families(TMR, TMR.reduce_sum)
def tensor_reduce_sum(self, axis=0, keepdims=False):
    logger.debug("reduce_sum: %s %s axis=%s", self.shape, self.dtype, axis)
    shape, data = reduce_sum_cpu(self.shape, self.data, self.kind, axis, keepdims)
    return type(self)._from_storage(shape, data, self.dtype)


@register_families(TMR, TMR.reduce_mean)
def tensor_reduce_mean(self, axis=0, keepdims=False):
    logger.debug("reduce_mean: %s %s axis=%s", self.shape, self.dtype, axis)
    shape, data = reduce_mean_cpu(self.shape, self.data, self.kind, axis, keepdims)
    return type(self)._from_storage(shape, data, self.dtype)


@register_families(TMR, TMR.cumsum)
def tensor_cumsum(self, axis=0, exclusive=False, reverse=False):
    logger.debug("cumsum: %s %s axis=%s", self.shape, self.dtype, axis)
    data = cumsum_cpu(
        self.shape, self.data, self.kind, axis, exclusive=exclusive, reverse=reverse
    )
    return type(self)._from_storage(self.shape, data, self.dtype)
