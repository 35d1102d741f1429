"""
KeyONNX: an exact, deterministic tensor kernel for ONNX-style operators over
unsigned, signed and fixed-point element kinds.
"""

from .domain._errors import (
    AxisOutOfRangeError,
    BroadcastShapeWarning,
    DimensionMismatchError,
    DivisionByZeroError,
    DTypeMismatchError,
    EmptyTensorError,
    ErrorKind,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    InvalidPermutationError,
    InvalidShapeError,
    KeyOnnxError,
    NumericOverflowError,
    ResourceExhaustedError,
    ShapeMismatchError,
    UnsupportedDTypeError,
    UnsupportedRankError,
)
from .domain.dtype._dtype import DType, DTypeFamily
from .infrastructure._configuration import EngineConfig, get_config, set_config
from .infrastructure._logging import setup_logging
from .infrastructure.budget._budget import (
    StepBudget,
    UnlimitedBudget,
    budget_scope,
    check_budget,
)
from .infrastructure.numeric._fixed_config import (
    FP8x23,
    FP16x16,
    FP32x32,
    FP64x64,
    FixedConfig,
)
from .infrastructure.numeric._fixed_point import FixedPoint
from .infrastructure.numeric._signed import SignedInteger
from .infrastructure.numeric._kinds import kind_for
from .infrastructure.tensor._tensor import Tensor
from .infrastructure import _activations as activations

__version__ = "0.1.0a0"

__all__ = [
    "AxisOutOfRangeError",
    "BroadcastShapeWarning",
    "DimensionMismatchError",
    "DivisionByZeroError",
    "DTypeMismatchError",
    "EmptyTensorError",
    "ErrorKind",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "InvalidPermutationError",
    "InvalidShapeError",
    "KeyOnnxError",
    "NumericOverflowError",
    "ResourceExhaustedError",
    "ShapeMismatchError",
    "UnsupportedDTypeError",
    "UnsupportedRankError",
    "DType",
    "DTypeFamily",
    "EngineConfig",
    "get_config",
    "set_config",
    "setup_logging",
    "StepBudget",
    "UnlimitedBudget",
    "budget_scope",
    "check_budget",
    "FP8x23",
    "FP16x16",
    "FP32x32",
    "FP64x64",
    "FixedConfig",
    "FixedPoint",
    "SignedInteger",
    "kind_for",
    "Tensor",
    "activations",
]
