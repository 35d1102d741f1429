"""
Arithmetic mixins and family-specific implementations for Tensor operations.

This package aggregates arithmetic-related Tensor mixins and their concrete
control-path implementations, including:

- addition        (``add`` / ``__add__`` / ``__radd__``)
- subtraction     (``sub`` / ``__sub__`` / ``__rsub__``)
- multiplication  (``mul`` / ``__mul__`` / ``__rmul__``)
- division        (``div`` / ``__truediv__`` / ``__rtruediv__``)
- power           (``pow`` / ``__pow__``, fixed-point only)

Design notes
------------
- Concrete implementation modules are imported for their *side effects*:
  registering control paths with the tensor control-path manager.
- These implementation modules are not part of the public API.

Public API
----------
- ``TensorMixinArithmetic``
"""

from ._tensor_addition import *
from ._tensor_subtraction import *
from ._tensor_multiplication import *
from ._tensor_division import *
from ._tensor_pow import *
from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
