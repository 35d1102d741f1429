"""
Memory/layout mixins for Tensor operations.

This package aggregates layout operations and their control-path
implementations:

- ``transpose``
- ``reshape`` / ``flatten`` / ``squeeze`` / ``unsqueeze``
- ``concat`` (static)

Public API
----------
- ``TensorMixinMemory``
"""

from ._tensor_transpose import *
from ._tensor_reshape import *
from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
]
