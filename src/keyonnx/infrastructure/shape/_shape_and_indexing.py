"""
Shape and index bookkeeping (pure functions).

This module implements the shape/index engine used by every tensor algorithm:

- `len_from_shape`: element count of a shape
- `stride`: row-major strides
- `ravel_index` / `unravel_index`: multi-index <-> flat position
- `normalize_axis`: axis validation (negative axes count from the end)
- `reduce_output_shape`: shape after reducing one axis (with/without keepdims)
- `permutation_output_shape` / `inverse_permutation`: transpose shapes
- `combine_indices`: rebuild an input coordinate from a reduced coordinate

Design notes
------------
- Shapes and indices are plain sequences of non-negative ints; every function
  returns fresh tuples and never mutates its inputs.
- Scalars (rank 0) have no stride. `ravel_index` and `unravel_index` special
  case them: the only coordinate ``()`` maps to flat position 0.
"""

from __future__ import annotations

from typing import Sequence

from ...domain._errors import (
    AxisOutOfRangeError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidPermutationError,
    InvalidShapeError,
)


def len_from_shape(shape: Sequence[int]) -> int:
    """
    Return the number of elements addressed by `shape`.

    The product of an empty shape is 1 (a scalar holds one element).
    """
    n = 1
    for dim in shape:
        n *= dim
    return n


def stride(shape: Sequence[int]) -> tuple[int, ...]:
    """
    Compute row-major strides.

    ``stride[i] = product(shape[i+1:])``; the last stride is 1.

    Raises
    ------
    InvalidShapeError
        If `shape` is empty (scalars have no stride).
    """
    if len(shape) == 0:
        raise InvalidShapeError(shape, "rank-0 shapes have no stride")
    strides = [1] * len(shape)
    acc = 1
    for i in range(len(shape) - 1, -1, -1):
        strides[i] = acc
        acc *= shape[i]
    return tuple(strides)


def ravel_index(shape: Sequence[int], indices: Sequence[int]) -> int:
    """
    Convert a multi-dimensional index into a flat row-major position.

    Parameters
    ----------
    shape : Sequence[int]
        Tensor shape.
    indices : Sequence[int]
        One index per dimension.

    Returns
    -------
    int
        ``sum(indices[i] * stride[i])``.

    Raises
    ------
    DimensionMismatchError
        If ``len(indices) != len(shape)``.
    IndexOutOfBoundsError
        If ``indices[i] >= shape[i]`` (or is negative) for some axis.
    """
    if len(indices) != len(shape):
        raise DimensionMismatchError("ravel_index", len(shape), len(indices))
    if len(shape) == 0:
        return 0
    flat = 0
    for idx, dim, step in zip(indices, shape, stride(shape)):
        if idx < 0 or idx >= dim:
            raise IndexOutOfBoundsError(tuple(indices), tuple(shape))
        flat += idx * step
    return flat


def unravel_index(flat_index: int, shape: Sequence[int]) -> tuple[int, ...]:
    """
    Convert a flat row-major position into a multi-dimensional index.

    Raises
    ------
    IndexOutOfBoundsError
        If ``flat_index >= len_from_shape(shape)`` or is negative.
    """
    if flat_index < 0 or flat_index >= len_from_shape(shape):
        raise IndexOutOfBoundsError(flat_index, tuple(shape))
    out = [0] * len(shape)
    cur = flat_index
    for i in range(len(shape) - 1, -1, -1):
        out[i] = cur % shape[i]
        cur //= shape[i]
    return tuple(out)


def normalize_axis(axis: int, rank: int) -> int:
    """
    Validate an axis and map negative values into ``[0, rank)``.

    Raises
    ------
    AxisOutOfRangeError
        If `axis` is outside ``[-rank, rank)``.
    """
    if axis < -rank or axis >= rank:
        raise AxisOutOfRangeError(axis, rank)
    return axis + rank if axis < 0 else axis


def reduce_output_shape(
    shape: Sequence[int], axis: int, keepdims: bool = False
) -> tuple[int, ...]:
    """
    Return the shape produced by reducing `axis`.

    Parameters
    ----------
    shape : Sequence[int]
        Input shape.
    axis : int
        Axis to reduce (negative axes count from the end).
    keepdims : bool, optional
        If True the reduced axis is kept with size 1, otherwise it is removed.

    Raises
    ------
    AxisOutOfRangeError
        If `axis` does not address a dimension of `shape`.
    """
    ax = normalize_axis(axis, len(shape))
    if keepdims:
        return tuple(1 if i == ax else d for i, d in enumerate(shape))
    return tuple(d for i, d in enumerate(shape) if i != ax)


def validate_permutation(axes: Sequence[int], rank: int) -> tuple[int, ...]:
    """
    Check that `axes` is a permutation of ``0..rank``.

    Raises
    ------
    DimensionMismatchError
        If ``len(axes) != rank``.
    InvalidPermutationError
        If `axes` is not a bijection on ``0..rank``.
    """
    if len(axes) != rank:
        raise DimensionMismatchError("permutation", rank, len(axes))
    if sorted(axes) != list(range(rank)):
        raise InvalidPermutationError(axes)
    return tuple(axes)


def permutation_output_shape(shape: Sequence[int], axes: Sequence[int]) -> tuple[int, ...]:
    """
    Return `shape` reindexed by the permutation `axes`.

    ``out[i] = shape[axes[i]]``.

    Raises
    ------
    DimensionMismatchError
        If ``len(axes) != len(shape)``.
    InvalidPermutationError
        If `axes` is not a permutation.
    """
    perm = validate_permutation(axes, len(shape))
    return tuple(shape[a] for a in perm)


def inverse_permutation(axes: Sequence[int]) -> tuple[int, ...]:
    """Return the permutation undoing `axes`."""
    perm = validate_permutation(axes, len(axes))
    inv = [0] * len(perm)
    for i, a in enumerate(perm):
        inv[a] = i
    return tuple(inv)


def combine_indices(
    output_indices: Sequence[int], axis_value: int, axis: int
) -> tuple[int, ...]:
    """
    Insert `axis_value` into `output_indices` at position `axis`.

    Used by axis reductions to rebuild a full-rank input coordinate from a
    reduced output coordinate and a position along the reduced axis.

    Raises
    ------
    AxisOutOfRangeError
        If `axis` is greater than ``len(output_indices)``.
    """
    if axis < 0 or axis > len(output_indices):
        raise AxisOutOfRangeError(axis, len(output_indices) + 1)
    return tuple(output_indices[:axis]) + (axis_value,) + tuple(output_indices[axis:])
