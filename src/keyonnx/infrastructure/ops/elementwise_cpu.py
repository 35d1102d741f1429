"""
CPU reference implementations of elementwise tensor operations.

This module provides **naive, readable, and exact** implementations of the
elementwise algorithms operating on flat, row-major element sequences:

- `binary_elementwise_cpu`: broadcasting binary op driven by a combine function
- `unary_map_cpu`: element-by-element map

Output shape rule
-----------------
The iteration (and output) shape of a binary op is the shape of the operand
with the longer flat data; ties go to the second operand. When this differs
from the NumPy broadcast shape a `BroadcastShapeWarning` is emitted and the
literal rule is still applied.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Sequence

from ...domain._errors import BroadcastShapeWarning
from ..budget._budget import check_budget
from ..shape._broadcast import (
    broadcast_index_mapping,
    broadcast_shape,
    check_compatibility,
)
from ..shape._shape_and_indexing import unravel_index


def bigger_shape(
    a_shape: Sequence[int], a_len: int, b_shape: Sequence[int], b_len: int
) -> tuple[int, ...]:
    """
    Return the iteration shape of a binary op.

    The operand with the longer flat data wins; ties go to `b`.
    """
    return tuple(a_shape) if a_len > b_len else tuple(b_shape)


def binary_elementwise_cpu(
    a_shape: Sequence[int],
    a_data: Sequence[Any],
    b_shape: Sequence[int],
    b_data: Sequence[Any],
    combine: Callable[[Any, Any], Any],
    *,
    op: str = "elementwise",
    warn_on_divergence: bool = True,
) -> tuple[tuple[int, ...], tuple[Any, ...]]:
    """
    Broadcasting elementwise binary operation.

    Parameters
    ----------
    a_shape, b_shape : Sequence[int]
        Operand shapes. Must be broadcast-compatible.
    a_data, b_data : Sequence[Any]
        Flat row-major operand elements.
    combine : Callable[[Any, Any], Any]
        Element combiner, called as ``combine(a_elem, b_elem)``.
    op : str, optional
        Operation name used in warnings.
    warn_on_divergence : bool, optional
        Emit `BroadcastShapeWarning` when the output shape differs from the
        NumPy broadcast shape. Defaults to True.

    Returns
    -------
    tuple[tuple[int, ...], tuple[Any, ...]]
        Output shape and flat output elements.

    Raises
    ------
    ShapeMismatchError
        If the shapes are not broadcast-compatible.
    ResourceExhaustedError
        If the active budget guard is exhausted.
    """
    check_compatibility(a_shape, b_shape)
    if not a_data or not b_data:
        # a zero-size axis broadcasts to zero elements
        return broadcast_shape(a_shape, b_shape), ()

    out_shape = bigger_shape(a_shape, len(a_data), b_shape, len(b_data))

    if warn_on_divergence:
        expected = broadcast_shape(a_shape, b_shape)
        if expected != out_shape:
            warnings.warn(
                f"{op}: output shape {out_shape} differs from broadcast shape "
                f"{expected} for operands {tuple(a_shape)} and {tuple(b_shape)}",
                BroadcastShapeWarning,
                stacklevel=3,
            )

    out = []
    for n in range(max(len(a_data), len(b_data))):
        check_budget()
        indices = unravel_index(n, out_shape)
        ia = broadcast_index_mapping(a_shape, indices)
        ib = broadcast_index_mapping(b_shape, indices)
        out.append(combine(a_data[ia], b_data[ib]))
    return out_shape, tuple(out)


def unary_map_cpu(data: Sequence[Any], fn: Callable[[Any], Any]) -> tuple[Any, ...]:
    """
    Apply `fn` to every element, in flat order.

    Raises
    ------
    ResourceExhaustedError
        If the active budget guard is exhausted.
    """
    out = []
    for x in data:
        check_budget()
        out.append(fn(x))
    return tuple(out)
