"""
Activation operators built on the Tensor core and the fixed-point kernel.

Each function takes a `Tensor` and returns a new `Tensor` of the same dtype
(and, except where noted, the same shape):

- `relu` works for every element kind.
- All other activations require a fixed-point tensor and raise
  `UnsupportedDTypeError` otherwise.

Scalar hyperparameters (``alpha``, ``beta``) are host numbers; they are encoded
into the tensor's fixed-point kind before use.

Notes
-----
- `softmax` and `log_softmax` subtract the maximum along the axis before
  exponentiating, so ``exp`` never sees a positive argument.
- Element work reuses the kernel's own `add/mul/div/compare`; there is no
  native floating point anywhere on this path.
"""

from __future__ import annotations

import logging
from typing import Union

from ..domain._errors import UnsupportedDTypeError
from ..domain.dtype._dtype import DTypeFamily
from .numeric import _fixed_math
from .tensor._tensor import Tensor

logger = logging.getLogger(__name__)

Number = Union[int, float, str]


def _require_fixed(x: Tensor, op: str) -> None:
    if x.family is not DTypeFamily.FIXED:
        raise UnsupportedDTypeError(op, str(x.dtype))


def relu(x: Tensor) -> Tensor:
    """
    Rectified linear unit: ``max(x, 0)`` elementwise.

    Works for every element kind.
    """
    kind = x.kind
    zero = kind.zero()
    return x._unary_map("relu", lambda e: e if kind.compare(e, zero) > 0 else zero)


def leaky_relu(x: Tensor, alpha: Number = 0.01) -> Tensor:
    """
    Leaky ReLU: ``x`` for ``x >= 0``, ``alpha * x`` otherwise.

    Parameters
    ----------
    x : Tensor
        Fixed-point input.
    alpha : int, float or str, optional
        Negative slope. Defaults to 0.01.
    """
    _require_fixed(x, "leaky_relu")
    kind = x.kind
    zero = kind.zero()
    a = kind.encode(alpha)
    return x._unary_map(
        "leaky_relu", lambda e: e if kind.compare(e, zero) >= 0 else kind.mul(a, e)
    )


def thresholded_relu(x: Tensor, alpha: Number = 1) -> Tensor:
    """Thresholded ReLU: ``x`` where ``x > alpha``, 0 elsewhere."""
    _require_fixed(x, "thresholded_relu")
    kind = x.kind
    zero = kind.zero()
    a = kind.encode(alpha)
    return x._unary_map(
        "thresholded_relu", lambda e: e if kind.compare(e, a) > 0 else zero
    )


def sigmoid(x: Tensor) -> Tensor:
    """
    Logistic sigmoid ``1 / (1 + exp(-x))``.

    ``sigmoid(0)`` is exactly one half in every fixed-point configuration.
    """
    _require_fixed(x, "sigmoid")
    return x._unary_map("sigmoid", _fixed_math.sigmoid)


def hard_sigmoid(x: Tensor, alpha: Number = 0.2, beta: Number = 0.5) -> Tensor:
    """Piecewise-linear sigmoid ``clip(alpha * x + beta, 0, 1)``."""
    _require_fixed(x, "hard_sigmoid")
    kind = x.kind
    zero, one = kind.zero(), kind.one()
    a, b = kind.encode(alpha), kind.encode(beta)

    def _hard(e):
        y = kind.add(kind.mul(a, e), b)
        if kind.compare(y, zero) < 0:
            return zero
        if kind.compare(y, one) > 0:
            return one
        return y

    return x._unary_map("hard_sigmoid", _hard)


def softplus(x: Tensor) -> Tensor:
    """``ln(1 + exp(x))`` elementwise."""
    _require_fixed(x, "softplus")
    return x._unary_map("softplus", _fixed_math.softplus)


def softsign(x: Tensor) -> Tensor:
    """``x / (1 + |x|)`` elementwise."""
    _require_fixed(x, "softsign")
    return x / (x.abs() + 1)


def softmax(x: Tensor, axis: int = -1) -> Tensor:
    """
    Softmax along `axis`.

    Parameters
    ----------
    x : Tensor
        Fixed-point input.
    axis : int, optional
        Normalization axis. Defaults to the last axis.

    Returns
    -------
    Tensor
        Tensor of the input shape whose slices along `axis` sum to 1 (up to
        rounding in the last units of the fixed-point kind).

    Raises
    ------
    AxisOutOfRangeError
        If `axis` is out of range.
    EmptyTensorError
        If the axis has length 0.
    """
    _require_fixed(x, "softmax")
    logger.debug("softmax: %s %s axis=%s", x.shape, x.dtype, axis)
    shifted = x - x.max(axis=axis, keepdims=True)
    e = shifted.exp()
    return e / e.reduce_sum(axis=axis, keepdims=True)


def log_softmax(x: Tensor, axis: int = -1) -> Tensor:
    """
    Logarithm of `softmax`, computed as ``(x - max) - ln(sum(exp(x - max)))``.
    """
    _require_fixed(x, "log_softmax")
    logger.debug("log_softmax: %s %s axis=%s", x.shape, x.dtype, axis)
    shifted = x - x.max(axis=axis, keepdims=True)
    return shifted - shifted.exp().reduce_sum(axis=axis, keepdims=True).log()
