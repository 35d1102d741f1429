"""
CPU reference implementation of matrix multiplication for rank-1/rank-2 operands.

Supported cases
---------------
- ``(n,) @ (n,)``        -> ``(1,)`` dot product
- ``(m, n) @ (n, p)``    -> ``(m, p)``
- ``(n,) @ (n, p)``      -> ``(p,)``  (left vector padded to ``(1, n)``)
- ``(m, n) @ (n,)``      -> ``(m,)``  (right vector padded to ``(n, 1)``)

The padded dimension is dropped from the result. Accumulation over the inner
dimension runs in increasing index order through the element kind, and the
budget guard is consulted once per output element and once per
multiply-accumulate step.
"""

from __future__ import annotations

from typing import Any, Sequence

from ...domain._errors import DimensionMismatchError, UnsupportedRankError
from ...domain._numeric_kind import INumericKind
from ..budget._budget import check_budget


def _dot(
    a_data: Sequence[Any],
    a_start: int,
    a_step: int,
    b_data: Sequence[Any],
    b_start: int,
    b_step: int,
    n: int,
    kind: INumericKind,
) -> Any:
    acc = kind.zero()
    for k in range(n):
        check_budget()
        acc = kind.add(
            acc, kind.mul(a_data[a_start + k * a_step], b_data[b_start + k * b_step])
        )
    return acc


def matmul_cpu(
    a_shape: Sequence[int],
    a_data: Sequence[Any],
    b_shape: Sequence[int],
    b_data: Sequence[Any],
    kind: INumericKind,
) -> tuple[tuple[int, ...], tuple[Any, ...]]:
    """
    Multiply two rank-1/rank-2 tensors.

    Parameters
    ----------
    a_shape, b_shape : Sequence[int]
        Operand shapes (rank 1 or 2).
    a_data, b_data : Sequence[Any]
        Flat row-major operand elements.
    kind : INumericKind
        Element kind shared by both operands.

    Returns
    -------
    tuple[tuple[int, ...], tuple[Any, ...]]
        Output shape and flat output elements.

    Raises
    ------
    UnsupportedRankError
        If an operand is not rank 1 or 2.
    DimensionMismatchError
        If the inner dimensions differ.
    """
    for shape in (a_shape, b_shape):
        if len(shape) not in (1, 2):
            raise UnsupportedRankError("matmul", len(shape))

    if len(a_shape) == 1 and len(b_shape) == 1:
        if a_shape[0] != b_shape[0]:
            raise DimensionMismatchError("matmul", a_shape[0], b_shape[0])
        return (1,), (_dot(a_data, 0, 1, b_data, 0, 1, a_shape[0], kind),)

    a_vec = len(a_shape) == 1
    b_vec = len(b_shape) == 1
    m, n = (1, a_shape[0]) if a_vec else (a_shape[0], a_shape[1])
    n_b, p = (b_shape[0], 1) if b_vec else (b_shape[0], b_shape[1])
    if n != n_b:
        raise DimensionMismatchError("matmul", n, n_b)

    out = []
    for i in range(m):
        for j in range(p):
            check_budget()
            out.append(_dot(a_data, i * n, 1, b_data, j, p, n, kind))

    if a_vec:
        out_shape: tuple[int, ...] = (p,)
    elif b_vec:
        out_shape = (m,)
    else:
        out_shape = (m, p)
    return out_shape, tuple(out)
