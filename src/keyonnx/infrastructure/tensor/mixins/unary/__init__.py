"""
Unary mixins and family-specific implementations for Tensor operations.

This package aggregates unary Tensor operations and their concrete control-path
implementations, including:

- ``neg`` / ``abs`` / ``sign`` (``__neg__``, ``__abs__``)
- fixed-point ``exp``, ``exp2``, ``log``, ``log2``, ``log10``, ``sqrt``,
  trigonometric and hyperbolic functions with their inverses, ``floor``,
  ``ceil`` and ``round``

Concrete implementation modules are imported for their side effects:
registering control paths with the tensor control-path manager.

Public API
----------
- ``TensorMixinUnary``
"""

from ._tensor_neg import *
from ._tensor_fixed_math import *
from ._base import TensorMixinUnary

__all__ = [
    TensorMixinUnary.__name__,
]
