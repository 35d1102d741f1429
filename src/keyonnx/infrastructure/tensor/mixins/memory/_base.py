"""
Memory/layout mixin defining shape-manipulation Tensor APIs.

Every operation here rearranges or reinterprets the flat row-major elements
without touching their values: `transpose`, `reshape`, `flatten`, `squeeze`,
`unsqueeze` and `concat`.
"""

from abc import ABC
from typing import Optional, Sequence

from .....domain._errors import DTypeMismatchError, InvalidArgumentError
from .....domain._tensor import ITensor
from ....ops.concat_cpu import concat_cpu


class TensorMixinMemory(ABC):
    """
    Abstract mixin defining layout operations for tensors.

    Notes
    -----
    - Results never alias the input; shapes and data are fresh tuples.
    - `concat` is a static method because it has no distinguished receiver.
    """

    def transpose(self: ITensor, axes: Optional[Sequence[int]] = None) -> "ITensor":
        """
        Permute the axes; ``out.shape[i] == self.shape[axes[i]]``.

        Parameters
        ----------
        axes : Sequence[int] or None, optional
            Permutation of ``0..rank``. If None the axes are reversed.

        Raises
        ------
        DimensionMismatchError
            If ``len(axes) != rank``.
        InvalidPermutationError
            If `axes` is not a permutation.
        """
        ...

    def reshape(self: ITensor, new_shape: Sequence[int]) -> "ITensor":
        """
        Reinterpret the elements under a new shape.

        A single ``-1`` entry is inferred from the element count.

        Raises
        ------
        ShapeMismatchError
            If the new shape holds a different number of elements.
        InvalidShapeError
            If `new_shape` has more than one ``-1`` or another negative entry.
        """
        ...

    def flatten(self: ITensor, axis: int = 1) -> "ITensor":
        """
        Collapse into a rank-2 tensor ``(prod(shape[:axis]), prod(shape[axis:]))``.

        `axis` may range over ``[-rank, rank]``.
        """
        ...

    def squeeze(self: ITensor, axes: Optional[Sequence[int]] = None) -> "ITensor":
        """
        Remove size-1 axes (all of them when `axes` is None).

        Raises
        ------
        InvalidArgumentError
            If a selected axis does not have size 1.
        """
        ...

    def unsqueeze(self: ITensor, axes: Sequence[int]) -> "ITensor":
        """
        Insert size-1 axes at the given positions of the output shape.

        Raises
        ------
        InvalidArgumentError
            If `axes` holds duplicates.
        """
        ...

    @staticmethod
    def concat(tensors: Sequence["ITensor"], axis: int = 0) -> "ITensor":
        """
        Concatenate tensors along an existing axis.

        Parameters
        ----------
        tensors : Sequence[ITensor]
            Tensors of one dtype and rank, agreeing on every other axis.
        axis : int, optional
            Concatenation axis. Defaults to 0.

        Raises
        ------
        InvalidArgumentError
            If `tensors` is empty.
        DTypeMismatchError
            If the tensors hold different kinds.
        ShapeMismatchError
            If the shapes disagree off `axis`.
        """
        tensors = list(tensors)
        if not tensors:
            raise InvalidArgumentError("concat", "at least one tensor is required")
        first = tensors[0]
        for t in tensors[1:]:
            if t.dtype != first.dtype:
                raise DTypeMismatchError("concat", str(first.dtype), str(t.dtype))
        shape, data = concat_cpu([(t.shape, t.data) for t in tensors], axis)
        return type(first)._from_storage(shape, data, first.dtype)
