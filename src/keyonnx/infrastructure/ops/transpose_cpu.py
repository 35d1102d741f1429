"""
CPU reference implementation of axis permutation (transpose).

The output is built as a fresh flat sequence in output order: for every output
position the output coordinate is unraveled, mapped back to the input
coordinate through the inverse permutation, and the input element is copied.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from ..budget._budget import check_budget
from ..shape._shape_and_indexing import (
    inverse_permutation,
    permutation_output_shape,
    ravel_index,
    unravel_index,
)


def transpose_cpu(
    shape: Sequence[int],
    data: Sequence[Any],
    axes: Optional[Sequence[int]] = None,
) -> tuple[tuple[int, ...], tuple[Any, ...]]:
    """
    Permute the axes of a flat row-major tensor.

    Parameters
    ----------
    shape : Sequence[int]
        Input shape.
    data : Sequence[Any]
        Flat row-major input elements.
    axes : Sequence[int] or None, optional
        Permutation; ``out.shape[i] == shape[axes[i]]``. If None the axes are
        reversed.

    Returns
    -------
    tuple[tuple[int, ...], tuple[Any, ...]]
        Output shape and flat output elements.

    Raises
    ------
    DimensionMismatchError
        If ``len(axes) != len(shape)``.
    InvalidPermutationError
        If `axes` is not a permutation of ``0..rank``.
    """
    if axes is None:
        axes = tuple(range(len(shape) - 1, -1, -1))
    out_shape = permutation_output_shape(shape, axes)
    inv = inverse_permutation(axes)

    out = []
    for n in range(len(data)):
        check_budget()
        out_idx = unravel_index(n, out_shape)
        in_idx = [out_idx[inv[d]] for d in range(len(shape))]
        out.append(data[ravel_index(shape, in_idx)])
    return out_shape, tuple(out)
