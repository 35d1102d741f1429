"""
CPU reference implementation of concatenation along one axis.
"""

from __future__ import annotations

from typing import Any, Sequence

from ...domain._errors import InvalidArgumentError, ShapeMismatchError
from ..budget._budget import check_budget
from ..shape._shape_and_indexing import len_from_shape, normalize_axis


def concat_cpu(
    parts: Sequence[tuple[Sequence[int], Sequence[Any]]],
    axis: int,
) -> tuple[tuple[int, ...], tuple[Any, ...]]:
    """
    Concatenate flat row-major tensors along `axis`.

    Parameters
    ----------
    parts : Sequence[tuple[Sequence[int], Sequence[Any]]]
        ``(shape, data)`` pairs. All shapes must have the same rank and agree
        on every axis except `axis`.
    axis : int
        Concatenation axis (negative axes count from the end).

    Returns
    -------
    tuple[tuple[int, ...], tuple[Any, ...]]
        Output shape and flat output elements.

    Raises
    ------
    InvalidArgumentError
        If `parts` is empty or holds rank-0 tensors.
    AxisOutOfRangeError
        If `axis` is out of range.
    ShapeMismatchError
        If the shapes disagree off the concatenation axis.

    Notes
    -----
    Row-major layout means the output is the interleaving, for each index of
    the leading ``axis`` dimensions, of each part's contiguous block of
    ``shape[axis] * product(shape[axis+1:])`` elements.
    """
    if not parts:
        raise InvalidArgumentError("concat", "at least one tensor is required")
    first = tuple(parts[0][0])
    if len(first) == 0:
        raise InvalidArgumentError("concat", "rank-0 tensors cannot be concatenated")
    ax = normalize_axis(axis, len(first))

    for shape, _ in parts[1:]:
        shape = tuple(shape)
        if len(shape) != len(first) or any(
            d != f for i, (d, f) in enumerate(zip(shape, first)) if i != ax
        ):
            raise ShapeMismatchError("concat", first, shape)

    outer = len_from_shape(first[:ax])
    blocks = [shape[ax] * len_from_shape(shape[ax + 1 :]) for shape, _ in parts]

    out: list[Any] = []
    for o in range(outer):
        check_budget()
        for (_, data), block in zip(parts, blocks):
            out.extend(data[o * block : (o + 1) * block])

    out_shape = first[:ax] + (sum(shape[ax] for shape, _ in parts),) + first[ax + 1 :]
    return out_shape, tuple(out)
