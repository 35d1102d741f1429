from ._fixed_config import (
    FIXED_CONFIGS,
    FP8x23,
    FP16x16,
    FP32x32,
    FP64x64,
    FixedConfig,
    config_for,
)
from ._fixed_point import FixedPoint
from ._signed import SignedInteger
from ._kinds import FixedKind, SignedKind, UnsignedKind, infer_dtype, kind_for

__all__ = [
    "FIXED_CONFIGS",
    "FP8x23",
    "FP16x16",
    "FP32x32",
    "FP64x64",
    "FixedConfig",
    "config_for",
    "FixedPoint",
    "SignedInteger",
    "FixedKind",
    "SignedKind",
    "UnsignedKind",
    "infer_dtype",
    "kind_for",
]
