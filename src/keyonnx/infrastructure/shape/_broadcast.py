"""
Broadcasting rules.

Two shapes are broadcast-compatible iff, aligning from the trailing
dimension, each pair of sizes is equal or one of them is 1; a missing leading
dimension counts as 1.

`broadcast_index_mapping` maps a global multi-index (of the iteration shape)
to a flat position inside one operand: size-1 axes of the operand are clamped
to 0 and, when the operand has a lower rank, only the trailing global indices
are used.
"""

from __future__ import annotations

from typing import Sequence

from ...domain._errors import ShapeMismatchError
from ._shape_and_indexing import ravel_index


def is_broadcast_compatible(shape_a: Sequence[int], shape_b: Sequence[int]) -> bool:
    for da, db in zip(reversed(shape_a), reversed(shape_b)):
        if da != db and da != 1 and db != 1:
            return False
    return True


def check_compatibility(shape_a: Sequence[int], shape_b: Sequence[int]) -> None:
    """
    Raises
    ------
    ShapeMismatchError
        If the shapes are not broadcast-compatible.
    """
    if not is_broadcast_compatible(shape_a, shape_b):
        raise ShapeMismatchError("broadcast", shape_a, shape_b)


def broadcast_shape(shape_a: Sequence[int], shape_b: Sequence[int]) -> tuple[int, ...]:
    """
    Return the NumPy-style broadcast result shape.

    Raises
    ------
    ShapeMismatchError
        If the shapes are not broadcast-compatible.
    """
    check_compatibility(shape_a, shape_b)
    rank = max(len(shape_a), len(shape_b))
    a = (1,) * (rank - len(shape_a)) + tuple(shape_a)
    b = (1,) * (rank - len(shape_b)) + tuple(shape_b)
    return tuple(db if da == 1 else da for da, db in zip(a, b))


def broadcast_index_mapping(shape: Sequence[int], global_indices: Sequence[int]) -> int:
    """
    Map a global multi-index into a flat position of an operand of `shape`.

    Parameters
    ----------
    shape : Sequence[int]
        The operand's own shape.
    global_indices : Sequence[int]
        Multi-index in the iteration shape. Must have at least ``len(shape)``
        entries; surplus leading entries are ignored.

    Returns
    -------
    int
        Flat position inside the operand.
    """
    offset = len(global_indices) - len(shape)
    if offset < 0:
        # Operand has more axes than the iteration shape: its extra leading axes
        # are size 1 whenever the pair is compatible.
        local = [0] * -offset + list(global_indices)
    else:
        local = list(global_indices[offset:])
    for axis, dim in enumerate(shape):
        if dim == 1:
            local[axis] = 0
    return ravel_index(shape, local)
