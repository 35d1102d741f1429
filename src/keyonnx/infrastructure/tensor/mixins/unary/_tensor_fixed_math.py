"""
Fixed-point transcendental and rounding functions via control-path dispatch.

Every function here is registered for `DTypeFamily.FIXED` only. The element
work is done by the fixed-point kernel (``numeric._fixed_math``) or by the
rounding methods of `FixedPoint`.
"""

from .....domain.dtype._dtype import DTypeFamily
from ....numeric import _fixed_math
from ....numeric._fixed_point import FixedPoint
from ..._tensor_builder import tensor_control_path_manager, unsupported_family

from ._base import TensorMixinUnary as TMU

FIXED_FUNCTIONS = {
    "exp": _fixed_math.exp,
    "exp2": _fixed_math.exp2,
    "log": _fixed_math.ln,
    "log2": _fixed_math.log2,
    "log10": _fixed_math.log10,
    "sqrt": _fixed_math.sqrt,
    "sin": _fixed_math.sin,
    "cos": _fixed_math.cos,
    "tan": _fixed_math.tan,
    "asin": _fixed_math.asin,
    "acos": _fixed_math.acos,
    "atan": _fixed_math.atan,
    "sinh": _fixed_math.sinh,
    "cosh": _fixed_math.cosh,
    "tanh": _fixed_math.tanh,
    "asinh": _fixed_math.asinh,
    "acosh": _fixed_math.acosh,
    "atanh": _fixed_math.atanh,
    "floor": FixedPoint.floor,
    "ceil": FixedPoint.ceil,
    "round": FixedPoint.round,
}


def _register(name, fn):
    def impl(self):
        return self._unary_map(name, fn)

    impl.__name__ = f"tensor_{name}_fixed"
    impl.__qualname__ = impl.__name__
    tensor_control_path_manager(
        TMU, getattr(TMU, name), DTypeFamily.FIXED, unsupported_family
    )(impl)


for _name, _fn in FIXED_FUNCTIONS.items():
    _register(_name, _fn)
