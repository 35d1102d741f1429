"""
Reduction mixin defining the public Tensor reduction API.

This module declares :class:`TensorMixinReduction`, an abstract mixin that
specifies the interface and semantics of reductions (`reduce_sum`,
`reduce_mean`, `max`, `min`, `argmax`, `argmin`, `cumsum`) on tensors.

The mixin itself does not implement any numerical logic. Implementations are
registered per element family through the control-path manager.
"""

from typing import Optional
from abc import ABC

from .....domain._tensor import ITensor


class TensorMixinReduction(ABC):
    """
    Abstract mixin defining reduction operations for tensors.

    Notes
    -----
    - Axis reductions visit the elements of every output coordinate in
      increasing axis-index order.
    - Negative axes count from the end. Out-of-range axes raise
      `AxisOutOfRangeError`.
    """

    def reduce_sum(self: ITensor, axis: int = 0, keepdims: bool = False) -> "ITensor":
        """
        Sum the elements along `axis`.

        Parameters
        ----------
        axis : int, optional
            Axis to reduce. Defaults to 0.
        keepdims : bool, optional
            Whether to retain the reduced axis with size 1. Defaults to False.

        Returns
        -------
        ITensor
            Tensor of the same dtype as ``self``.
        """
        ...

    def reduce_mean(self: ITensor, axis: int = 0, keepdims: bool = False) -> "ITensor":
        """
        Arithmetic mean along `axis`.

        Integer kinds use truncating division.

        Raises
        ------
        EmptyTensorError
            If the reduced axis has length 0.
        """
        ...

    def max(
        self: ITensor, axis: Optional[int] = None, keepdims: bool = False
    ) -> "ITensor":
        """
        Maximum over all elements (``axis=None``, rank-0 result) or along `axis`.

        Raises
        ------
        EmptyTensorError
            If there is no element to compare.
        """
        ...

    def min(
        self: ITensor, axis: Optional[int] = None, keepdims: bool = False
    ) -> "ITensor":
        """
        Minimum over all elements (``axis=None``, rank-0 result) or along `axis`.

        Raises
        ------
        EmptyTensorError
            If there is no element to compare.
        """
        ...

    def argmax(
        self: ITensor,
        axis: int = 0,
        keepdims: bool = False,
        select_last_index: bool = False,
    ) -> "ITensor":
        """
        Index of the maximum along `axis`, as a ``u32`` tensor.

        Ties keep the first occurrence unless `select_last_index` is True.

        Raises
        ------
        EmptyTensorError
            If the reduced axis has length 0.
        """
        ...

    def argmin(
        self: ITensor,
        axis: int = 0,
        keepdims: bool = False,
        select_last_index: bool = False,
    ) -> "ITensor":
        """
        Index of the minimum along `axis`, as a ``u32`` tensor.

        Ties keep the first occurrence unless `select_last_index` is True.
        """
        ...

    def cumsum(
        self: ITensor, axis: int = 0, exclusive: bool = False, reverse: bool = False
    ) -> "ITensor":
        """
        Running sum along `axis`; the output has the input shape.

        Parameters
        ----------
        exclusive : bool, optional
            Exclude each element from its own partial sum.
        reverse : bool, optional
            Accumulate from the end of the axis.
        """
        ...
