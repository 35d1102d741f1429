"""
Reduction mixins and family-specific implementations for Tensor operations.

This package aggregates reduction-related Tensor mixins and their concrete
control-path implementations, including:

- ``reduce_sum`` / ``reduce_mean`` / ``cumsum``
- ``max`` / ``min`` (global or along an axis)
- ``argmax`` / ``argmin``

The concrete implementations (``_tensor_sum``, ``_tensor_max``) are imported
for side effects so that their control paths are registered.

Public API
----------
- ``TensorMixinReduction``
"""

from ._tensor_max import *
from ._tensor_sum import *
from ._base import TensorMixinReduction

__all__ = [
    TensorMixinReduction.__name__,
]
