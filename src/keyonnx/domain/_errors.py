"""
Tensor-engine exceptions for KeyONNX.

This module defines the error kinds surfaced by the shape engine, the numeric
kernel and the tensor algorithms. Every failure aborts the current operation
immediately; no operation returns a partial result.

Each exception class:
- derives from :class:`KeyOnnxError`, so callers can catch every engine
  failure with a single clause,
- also derives from the closest builtin exception (``IndexError``,
  ``ZeroDivisionError``, ...), so generic Python error handling keeps working,
- carries an :class:`ErrorKind` member in ``.kind`` so operator libraries can
  translate failures into their own reporting format without isinstance chains.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence


class ErrorKind(Enum):
    """
    Enumeration of engine failure kinds.

    The enum values are the canonical, language-neutral names of each kind.
    """

    DIMENSION_MISMATCH = "DimensionMismatch"
    SHAPE_MISMATCH = "ShapeMismatch"
    AXIS_OUT_OF_RANGE = "AxisOutOfRange"
    INVALID_PERMUTATION = "InvalidPermutation"
    INDEX_OUT_OF_BOUNDS = "IndexOutOfBounds"
    DIVISION_BY_ZERO = "DivisionByZero"
    INVALID_ARGUMENT = "InvalidArgument"
    UNSUPPORTED_RANK = "UnsupportedRank"
    EMPTY_TENSOR = "EmptyTensor"
    RESOURCE_EXHAUSTED = "ResourceExhausted"
    INVALID_SHAPE = "InvalidShape"
    NUMERIC_OVERFLOW = "NumericOverflow"
    DTYPE_MISMATCH = "DTypeMismatch"
    UNSUPPORTED_DTYPE = "UnsupportedDType"


class KeyOnnxError(Exception):
    """
    Base class of every error raised by the tensor engine.

    Attributes
    ----------
    kind : ErrorKind
        The failure kind. Subclasses override this class attribute.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DimensionMismatchError(KeyOnnxError, ValueError):
    """Raised when two sequences that must have equal length do not."""

    kind = ErrorKind.DIMENSION_MISMATCH

    def __init__(self, op: str, expected: int, got: int) -> None:
        super().__init__(f"{op}: expected {expected} dimensions, got {got}.")
        self.op = op
        self.expected = expected
        self.got = got


class ShapeMismatchError(KeyOnnxError, ValueError):
    """
    Raised when shapes are not broadcast-compatible, or when a data sequence
    does not match the element count of its shape.
    """

    kind = ErrorKind.SHAPE_MISMATCH

    def __init__(
        self,
        op: str,
        shape_a: Sequence[int],
        shape_b: Optional[Sequence[int]] = None,
        detail: str = "",
    ) -> None:
        if shape_b is None:
            text = f"{op}: invalid shape {tuple(shape_a)}"
        else:
            text = f"{op}: incompatible shapes {tuple(shape_a)} and {tuple(shape_b)}"
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text + ".")
        self.op = op
        self.shape_a = tuple(shape_a)
        self.shape_b = None if shape_b is None else tuple(shape_b)


class AxisOutOfRangeError(KeyOnnxError, IndexError):
    """Raised when an axis does not address a dimension of the shape."""

    kind = ErrorKind.AXIS_OUT_OF_RANGE

    def __init__(self, axis: int, rank: int) -> None:
        super().__init__(f"axis {axis} is out of range for rank {rank}.")
        self.axis = axis
        self.rank = rank


class InvalidPermutationError(KeyOnnxError, ValueError):
    """Raised when a sequence of axes is not a bijection on ``0..rank``."""

    kind = ErrorKind.INVALID_PERMUTATION

    def __init__(self, axes: Sequence[int]) -> None:
        super().__init__(f"axes {tuple(axes)} is not a permutation.")
        self.axes = tuple(axes)


class IndexOutOfBoundsError(KeyOnnxError, IndexError):
    """Raised when a flat or per-axis index exceeds the addressed extent."""

    kind = ErrorKind.INDEX_OUT_OF_BOUNDS

    def __init__(self, index: object, bound: object) -> None:
        super().__init__(f"index {index!r} is out of bounds for {bound!r}.")
        self.index = index
        self.bound = bound


class DivisionByZeroError(KeyOnnxError, ZeroDivisionError):
    """Raised when a divisor element (or magnitude) is zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, op: str = "div") -> None:
        super().__init__(f"{op}: division by zero.")
        self.op = op


class InvalidArgumentError(KeyOnnxError, ValueError):
    """Raised when a numeric function is called outside of its domain."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, op: str, detail: str) -> None:
        super().__init__(f"{op}: {detail}.")
        self.op = op


class UnsupportedRankError(KeyOnnxError, ValueError):
    """Raised when an algorithm does not support the rank of an operand."""

    kind = ErrorKind.UNSUPPORTED_RANK

    def __init__(self, op: str, rank: int) -> None:
        super().__init__(f"{op} does not support rank {rank}.")
        self.op = op
        self.rank = rank


class EmptyTensorError(KeyOnnxError, ValueError):
    """Raised when an extremum is requested over zero elements."""

    kind = ErrorKind.EMPTY_TENSOR

    def __init__(self, op: str) -> None:
        super().__init__(f"{op} requires at least one element.")
        self.op = op


class ResourceExhaustedError(KeyOnnxError, RuntimeError):
    """Raised by a budget guard once its step budget has been spent."""

    kind = ErrorKind.RESOURCE_EXHAUSTED

    def __init__(self, budget: int) -> None:
        super().__init__(f"execution budget of {budget} steps exhausted.")
        self.budget = budget


class InvalidShapeError(KeyOnnxError, ValueError):
    """Raised when a shape descriptor is malformed for the requested query."""

    kind = ErrorKind.INVALID_SHAPE

    def __init__(self, shape: Sequence[int], detail: str) -> None:
        super().__init__(f"invalid shape {tuple(shape)}: {detail}.")
        self.shape = tuple(shape)


class NumericOverflowError(KeyOnnxError, OverflowError):
    """Raised when a result cannot be represented by its element kind."""

    kind = ErrorKind.NUMERIC_OVERFLOW

    def __init__(self, op: str, kind_name: str) -> None:
        super().__init__(f"{op}: result is not representable as {kind_name}.")
        self.op = op
        self.kind_name = kind_name


class DTypeMismatchError(KeyOnnxError, TypeError):
    """Raised when two operands of a binary operation have different kinds."""

    kind = ErrorKind.DTYPE_MISMATCH

    def __init__(self, op: str, left: str, right: str) -> None:
        super().__init__(f"{op}: dtype mismatch '{left}' vs '{right}'.")
        self.op = op
        self.left = left
        self.right = right


class UnsupportedDTypeError(KeyOnnxError, TypeError):
    """Raised when an operation is not defined for an element kind."""

    kind = ErrorKind.UNSUPPORTED_DTYPE

    def __init__(self, op: str, dtype: str) -> None:
        super().__init__(f"{op} is not implemented for dtype '{dtype}'.")
        self.op = op
        self.dtype = dtype


class BroadcastShapeWarning(UserWarning):
    """
    Emitted when the "bigger operand" output-shape rule of elementwise ops
    produces a shape that differs from the NumPy-style broadcast shape.

    The literal rule (output shape of the operand with the longer flat data,
    ties going to the second operand) is still applied; the warning only flags
    the divergence.
    """
