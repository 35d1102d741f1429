"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. The interface captures the backend-agnostic surface the
operator library relies on: shape and flat data, the element kind, element
access and host interop.

Notes
-----
Tensors are immutable values. Every operation declared here (and every
operation implemented by the concrete `Tensor`) returns a new tensor; none of
them mutate the receiver.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from .dtype._dtype import DType, DTypeFamily
from ._numeric_kind import INumericKind


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` is an immutable multi-dimensional array of elements of a
    single kind, stored as a flat row-major sequence.
    """

    # ---------------------------------------------------------------------
    # Core identity
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            The tensor's dimension sizes. ``()`` denotes a scalar.
        """
        ...

    @property
    def data(self) -> tuple[Any, ...]:
        """
        Return the flat, row-major element sequence.

        Returns
        -------
        tuple[Any, ...]
            Elements of this tensor's kind; ``len(data) == numel``.
        """
        ...

    @property
    def dtype(self) -> DType:
        """Return the element kind of the tensor."""
        ...

    @property
    def kind(self) -> INumericKind:
        """Return the numeric-kind capability object for the element kind."""
        ...

    @property
    def family(self) -> DTypeFamily:
        """Return the arithmetic family of the element kind."""
        ...

    @property
    def rank(self) -> int:
        """Return the number of dimensions."""
        ...

    def numel(self) -> int:
        """Return the number of elements (product of the shape)."""
        ...

    # ---------------------------------------------------------------------
    # Element access / host interop
    # ---------------------------------------------------------------------
    def at(self, indices: Sequence[int]) -> Any:
        """
        Return the element at a multi-dimensional index.

        Raises
        ------
        DimensionMismatchError
            If ``len(indices) != rank``.
        IndexOutOfBoundsError
            If any index exceeds its dimension.
        """
        ...

    def to_numpy(self) -> Any:
        """
        Decode the tensor into a host array.

        Returns
        -------
        Any
            Backend-native array (``np.ndarray``): ``float64`` for fixed-point
            kinds, ``int64`` for integer kinds.
        """
        ...
