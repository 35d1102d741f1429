"""
Fixed-point Tensor power via control-path dispatch.

Only the fixed-point family registers a path; integer tensors reach the trap
and raise `UnsupportedDTypeError`.
"""

from .....domain.dtype._dtype import DTypeFamily
from ....numeric import _fixed_math
from ..._tensor_builder import tensor_control_path_manager, unsupported_family

from ._base import TensorMixinArithmetic as TMA


@tensor_control_path_manager(TMA, TMA.pow, DTypeFamily.FIXED, unsupported_family)
def tensor_pow_fixed(self, exponent):
    """Elementwise ``self ** exponent`` with the fixed-point kernel."""
    return self._binary_elementwise(exponent, "pow", _fixed_math.pow)
