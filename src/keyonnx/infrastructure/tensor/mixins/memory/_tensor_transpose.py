"""
Tensor.transpose registered for every element family.
"""

import logging

from ....ops.transpose_cpu import transpose_cpu
from ..._tensor_builder import register_families

from ._base import TensorMixinMemory as TMM

logger = logging.getLogger(__name__)


@register_families(TMM, TMM.transpose)
def tensor_transpose(self, axes=None):
    logger.debug("transpose: %s axes=%s", self.shape, axes)
    shape, data = transpose_cpu(self.shape, self.data, axes)
    return type(self)._from_storage(shape, data, self.dtype)
