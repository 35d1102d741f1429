"""
CPU reference implementations of reductions (flat row-major storage).

Implemented reductions
----------------------
- `reduce_sum_cpu`: sum along one axis
- `reduce_mean_cpu`: sum along one axis divided by the axis length
- `reduce_extreme_cpu`: min / max along one axis
- `arg_reduce_cpu`: argmin / argmax along one axis
- `global_extreme_cpu`: min / max over the whole flat data
- `cumsum_cpu`: running sum along one axis

Design notes
------------
- Every axis reduction walks the reduced output coordinates in flat order and,
  for each, visits the contributing input elements exactly once in increasing
  axis-index order (`combine_indices` + `ravel_index`).
- Arithmetic goes through the element kind (`INumericKind`), so one body
  serves every dtype.
- The budget guard is consulted once per output coordinate and once per
  element of every lane, so a single long axis is charged in full.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from ...domain._errors import EmptyTensorError
from ...domain._numeric_kind import INumericKind
from ..budget._budget import check_budget
from ..shape._shape_and_indexing import (
    combine_indices,
    len_from_shape,
    normalize_axis,
    ravel_index,
    reduce_output_shape,
    unravel_index,
)


def _axis_lanes(shape: Sequence[int], axis: int) -> Iterator[list[int]]:
    """
    Yield, per reduced output coordinate, the flat input positions along `axis`.

    `axis` must already be normalized.
    """
    reduced = reduce_output_shape(shape, axis, keepdims=False)
    for o in range(len_from_shape(reduced)):
        check_budget()
        out_idx = unravel_index(o, reduced)
        lane = []
        for k in range(shape[axis]):
            check_budget()
            lane.append(ravel_index(shape, combine_indices(out_idx, k, axis)))
        yield lane


def reduce_sum_cpu(
    shape: Sequence[int],
    data: Sequence[Any],
    kind: INumericKind,
    axis: int,
    keepdims: bool = False,
) -> tuple[tuple[int, ...], tuple[Any, ...]]:
    """
    Sum along `axis`.

    Returns
    -------
    tuple[tuple[int, ...], tuple[Any, ...]]
        Output shape and flat output elements. Lanes of length 0 sum to zero.

    Raises
    ------
    AxisOutOfRangeError
        If `axis` is out of range.
    """
    ax = normalize_axis(axis, len(shape))
    out_shape = reduce_output_shape(shape, ax, keepdims)
    out = []
    for lane in _axis_lanes(shape, ax):
        acc = kind.zero()
        for pos in lane:
            acc = kind.add(acc, data[pos])
        out.append(acc)
    return out_shape, tuple(out)


def reduce_mean_cpu(
    shape: Sequence[int],
    data: Sequence[Any],
    kind: INumericKind,
    axis: int,
    keepdims: bool = False,
) -> tuple[tuple[int, ...], tuple[Any, ...]]:
    """
    Arithmetic mean along `axis` (integer kinds truncate).

    Raises
    ------
    EmptyTensorError
        If the reduced axis has length 0.
    """
    ax = normalize_axis(axis, len(shape))
    if shape[ax] == 0:
        raise EmptyTensorError("reduce_mean")
    out_shape, sums = reduce_sum_cpu(shape, data, kind, ax, keepdims)
    count = kind.from_int(shape[ax])
    out = []
    for s in sums:
        check_budget()
        out.append(kind.div(s, count))
    return out_shape, tuple(out)


def reduce_extreme_cpu(
    shape: Sequence[int],
    data: Sequence[Any],
    kind: INumericKind,
    axis: int,
    keepdims: bool = False,
    *,
    largest: bool = True,
) -> tuple[tuple[int, ...], tuple[Any, ...]]:
    """
    Minimum (``largest=False``) or maximum (``largest=True``) along `axis`.

    Raises
    ------
    EmptyTensorError
        If the reduced axis has length 0 and the output is non-empty.
    """
    ax = normalize_axis(axis, len(shape))
    out_shape = reduce_output_shape(shape, ax, keepdims)
    op = "reduce_max" if largest else "reduce_min"
    out = []
    for lane in _axis_lanes(shape, ax):
        if not lane:
            raise EmptyTensorError(op)
        best = kind.min_value() if largest else kind.max_value()
        for pos in lane:
            c = kind.compare(data[pos], best)
            if (c > 0) if largest else (c < 0):
                best = data[pos]
        out.append(best)
    return out_shape, tuple(out)


def arg_reduce_cpu(
    shape: Sequence[int],
    data: Sequence[Any],
    kind: INumericKind,
    axis: int,
    keepdims: bool = False,
    *,
    largest: bool = True,
    select_last_index: bool = False,
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Index of the maximum (``largest=True``) or minimum along `axis`.

    Ties keep the first occurrence (lowest axis index) unless
    `select_last_index` is True.

    Returns
    -------
    tuple[tuple[int, ...], tuple[int, ...]]
        Output shape and flat axis indices (plain ints).

    Raises
    ------
    EmptyTensorError
        If the reduced axis has length 0 and the output is non-empty.
    """
    ax = normalize_axis(axis, len(shape))
    out_shape = reduce_output_shape(shape, ax, keepdims)
    op = "argmax" if largest else "argmin"
    out = []
    for lane in _axis_lanes(shape, ax):
        if not lane:
            raise EmptyTensorError(op)
        best = data[lane[0]]
        best_k = 0
        for k in range(1, len(lane)):
            c = kind.compare(data[lane[k]], best)
            if not largest:
                c = -c
            if c > 0 or (select_last_index and c == 0):
                best = data[lane[k]]
                best_k = k
        out.append(best_k)
    return out_shape, tuple(out)


def global_extreme_cpu(
    data: Sequence[Any], kind: INumericKind, *, largest: bool = True
) -> Any:
    """
    Minimum or maximum over the whole flat data, scanned once.

    The running best starts at the kind's smallest (for max) or largest (for
    min) representable value.

    Raises
    ------
    EmptyTensorError
        If `data` is empty.
    """
    if not data:
        raise EmptyTensorError("max" if largest else "min")
    best = kind.min_value() if largest else kind.max_value()
    for x in data:
        check_budget()
        c = kind.compare(x, best)
        if (c > 0) if largest else (c < 0):
            best = x
    return best


def cumsum_cpu(
    shape: Sequence[int],
    data: Sequence[Any],
    kind: INumericKind,
    axis: int,
    *,
    exclusive: bool = False,
    reverse: bool = False,
) -> tuple[Any, ...]:
    """
    Running sum along `axis`; output has the input shape.

    Parameters
    ----------
    exclusive : bool, optional
        If True, each output excludes its own input element (the first output
        of each lane is zero).
    reverse : bool, optional
        If True, accumulate from the end of each lane.
    """
    ax = normalize_axis(axis, len(shape))
    out: list[Any] = list(data)
    for lane in _axis_lanes(shape, ax):
        acc = kind.zero()
        for pos in reversed(lane) if reverse else lane:
            if exclusive:
                out[pos] = acc
                acc = kind.add(acc, data[pos])
            else:
                acc = kind.add(acc, data[pos])
                out[pos] = acc
    return tuple(out)
