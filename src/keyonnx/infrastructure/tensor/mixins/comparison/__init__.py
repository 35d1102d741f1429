"""
Comparison and logical mixins for Tensor operations.

This package aggregates the elementwise predicates and their control-path
implementations:

- ``equal``, ``greater``, ``greater_equal``, ``less``, ``less_equal``
- ``and_``, ``or_``, ``xor``, ``not_``

All of them return ``u32`` tensors of 0/1.

Public API
----------
- ``TensorMixinComparison``
"""

from ._tensor_compare import *
from ._tensor_logical import *
from ._base import TensorMixinComparison

__all__ = [
    TensorMixinComparison.__name__,
]
