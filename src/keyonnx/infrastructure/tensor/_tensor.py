"""
Concrete Tensor implementation (flat tuple storage, generic over element kind).

This module provides the concrete `Tensor` that satisfies the domain-level
`ITensor` protocol. A tensor is an immutable value made of:

- a shape (tuple of non-negative ints; ``()`` is a scalar holding one element),
- a flat row-major tuple of elements,
- a `DType` naming the element kind.

Every operation returns a new tensor. Element arithmetic is delegated to the
numeric kind of the dtype (`kind_for`), so the algorithms in ``ops`` are written
once for every element type.

Design notes
------------
- Operator families live in mixins (arithmetic, comparison, reduction, memory,
  unary). Their public methods are dispatched by the tensor control-path
  manager on ``self.family``; families without a path raise
  `UnsupportedDTypeError`.
- The constructor validates elements. Results produced by the engine itself
  skip validation through `_from_storage`.
- NumPy is only used at the host boundary (`from_numpy` / `to_numpy`).
"""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Any, Callable, Iterable, Optional, Sequence, Union

import numpy as np

from ...domain._errors import (
    DTypeMismatchError,
    InvalidArgumentError,
    ShapeMismatchError,
)
from ...domain._numeric_kind import INumericKind
from ...domain._tensor import ITensor
from ...domain.dtype._dtype import DType, DTypeFamily
from .._configuration import get_config
from ..numeric._fixed_point import FixedPoint
from ..numeric._kinds import infer_dtype, kind_for
from ..numeric._signed import SignedInteger
from ..ops.elementwise_cpu import binary_elementwise_cpu, unary_map_cpu
from ..ops.matmul_cpu import matmul_cpu
from ..shape._shape_and_indexing import len_from_shape, ravel_index
from .mixins.arithmetic import TensorMixinArithmetic
from .mixins.comparison import TensorMixinComparison
from .mixins.memory import TensorMixinMemory
from .mixins.reduction import TensorMixinReduction
from .mixins.unary import TensorMixinUnary

logger = logging.getLogger(__name__)

Number = Union[int, float, str, Fraction, FixedPoint, SignedInteger]


class Tensor(
    TensorMixinArithmetic,
    TensorMixinComparison,
    TensorMixinReduction,
    TensorMixinMemory,
    TensorMixinUnary,
    ITensor,
):
    """
    Concrete immutable tensor.

    Parameters
    ----------
    shape : Sequence[int]
        Tensor shape. Every dimension must be a non-negative int.
    data : Iterable[Any]
        Flat row-major elements. With `dtype`, host values (ints, floats,
        decimal strings, fractions) are encoded into the kind; already-encoded
        elements are kept as is.
    dtype : DType or str or None, optional
        Element kind. If None it is inferred from the first element.

    Raises
    ------
    ShapeMismatchError
        If ``len(data) != product(shape)``.
    InvalidArgumentError
        If a dimension is negative, or the dtype of an empty tensor cannot be
        inferred.
    TypeError
        If elements cannot be represented in the kind.

    Notes
    -----
    - ``==`` compares tensors structurally (shape, dtype and elements) and
      returns a bool. Use :meth:`equal` for the elementwise comparison.
    """

    def __init__(
        self,
        shape: Sequence[int],
        data: Iterable[Any],
        dtype: Optional[Union[DType, str]] = None,
    ) -> None:
        shape = tuple(int(d) for d in shape)
        if any(d < 0 for d in shape):
            raise InvalidArgumentError("Tensor", f"negative dimension in {shape}")
        data = tuple(data)
        if len(data) != len_from_shape(shape):
            raise ShapeMismatchError(
                "Tensor",
                shape,
                detail=f"{len(data)} elements for {len_from_shape(shape)} slots",
            )

        if dtype is None:
            if not data:
                raise InvalidArgumentError(
                    "Tensor", "dtype is required for an empty tensor"
                )
            dtype = infer_dtype(data[0])
        dtype = DType.parse(dtype)
        kind = kind_for(dtype)

        self._shape = shape
        self._data = tuple(x if kind.is_element(x) else kind.encode(x) for x in data)
        self._dtype = dtype

    @classmethod
    def _from_storage(
        cls, shape: Sequence[int], data: Sequence[Any], dtype: DType
    ) -> "Tensor":
        """
        Construct a tensor from engine-produced elements without validation.

        Notes
        -----
        The caller guarantees ``len(data) == product(shape)`` and that every
        element belongs to `dtype`. This constructor bypasses `__init__`.
        """
        obj = cls.__new__(cls)
        obj._shape = tuple(shape)
        obj._data = tuple(data)
        obj._dtype = dtype
        return obj

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def data(self) -> tuple[Any, ...]:
        return self._data

    @property
    def dtype(self) -> DType:
        return self._dtype

    @property
    def kind(self) -> INumericKind:
        return kind_for(self._dtype)

    @property
    def family(self) -> DTypeFamily:
        """Arithmetic family of the element kind (control-path state)."""
        return self._dtype.family

    @property
    def rank(self) -> int:
        return len(self._shape)

    def numel(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        values = [self.kind.decode(x) for x in self._data[:8]]
        more = ", ..." if len(self._data) > 8 else ""
        return (
            f"Tensor(shape={self._shape}, dtype={self._dtype}, "
            f"data=[{', '.join(str(v) for v in values)}{more}])"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return (
            self._shape == other._shape
            and self._dtype == other._dtype
            and self._data == other._data
        )

    def __hash__(self) -> int:
        return hash((self._shape, self._dtype, self._data))

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def at(self, indices: Sequence[int]) -> Any:
        """
        Return the element at a multi-index.

        Raises
        ------
        DimensionMismatchError
            If ``len(indices) != rank``.
        IndexOutOfBoundsError
            If an index exceeds its dimension.
        """
        return self._data[ravel_index(self._shape, indices)]

    def item(self) -> Any:
        """
        Return the decoded value of a single-element tensor.

        Fixed-point elements decode to float, integers to int.

        Raises
        ------
        InvalidArgumentError
            If the tensor does not hold exactly one element.
        """
        if len(self._data) != 1:
            raise InvalidArgumentError(
                "item", f"requires a single-element tensor, got shape {self._shape}"
            )
        return self.kind.decode(self._data[0])

    # ------------------------------------------------------------------
    # Factories and host boundary
    # ------------------------------------------------------------------
    @classmethod
    def from_values(
        cls, shape: Sequence[int], values: Iterable[Any], dtype: Union[DType, str]
    ) -> "Tensor":
        """
        Encode host values (ints, floats, decimal strings, fractions) as a tensor.

        Raises
        ------
        ShapeMismatchError
            If the number of values does not match `shape`.
        NumericOverflowError
            If a value does not fit the kind.
        """
        dtype = DType.parse(dtype)
        kind = kind_for(dtype)
        return cls(shape, [kind.encode(v) for v in values], dtype)

    @classmethod
    def full(
        cls, shape: Sequence[int], value: Any, dtype: Union[DType, str]
    ) -> "Tensor":
        dtype = DType.parse(dtype)
        element = kind_for(dtype).encode(value)
        return cls._from_storage(shape, (element,) * len_from_shape(shape), dtype)

    @classmethod
    def zeros(cls, shape: Sequence[int], dtype: Union[DType, str]) -> "Tensor":
        return cls.full(shape, 0, dtype)

    @classmethod
    def ones(cls, shape: Sequence[int], dtype: Union[DType, str]) -> "Tensor":
        return cls.full(shape, 1, dtype)

    @classmethod
    def from_numpy(
        cls, arr: Any, dtype: Optional[Union[DType, str]] = None
    ) -> "Tensor":
        """
        Construct a tensor from a NumPy array (or array-like).

        Parameters
        ----------
        arr : array-like
            Source values. The array's shape becomes the tensor shape.
        dtype : DType or str or None, optional
            Target kind. If None: floating arrays use the configured
            ``default_fixed_dtype``, unsigned and boolean arrays ``u32``, and
            other integer arrays ``i32``.

        Returns
        -------
        Tensor
            A newly created tensor; `arr` is copied.
        """
        arr = np.asarray(arr)
        if dtype is None:
            if np.issubdtype(arr.dtype, np.floating):
                dtype = get_config().fixed_dtype
            elif np.issubdtype(arr.dtype, np.unsignedinteger) or arr.dtype == np.bool_:
                dtype = DType.U32
            elif np.issubdtype(arr.dtype, np.integer):
                dtype = DType.I32
            else:
                raise TypeError(f"cannot infer a dtype from NumPy dtype {arr.dtype}")
        return cls.from_values(arr.shape, arr.reshape(-1).tolist(), dtype)

    def to_numpy(self) -> np.ndarray:
        """
        Decode the tensor into a NumPy array.

        Returns
        -------
        np.ndarray
            ``float64`` for fixed-point tensors, ``int64`` for integer tensors.
        """
        kind = self.kind
        np_dtype = np.float64 if self.family is DTypeFamily.FIXED else np.int64
        flat = np.array([kind.decode(x) for x in self._data], dtype=np_dtype)
        return flat.reshape(self._shape)

    def to_list(self) -> list[Any]:
        """Return the decoded elements as a flat list in row-major order."""
        kind = self.kind
        return [kind.decode(x) for x in self._data]

    # ------------------------------------------------------------------
    # Operator helpers
    # ------------------------------------------------------------------
    def _as_tensor_like(self, x: Union["Tensor", Number]) -> "Tensor":
        """
        Convert an operand into a Tensor compatible with this tensor.

        Tensors are returned as-is. Host scalars and single elements are
        encoded into this tensor's kind and filled to this tensor's shape.

        Raises
        ------
        TypeError
            If `x` is not a supported operand type.
        """
        if isinstance(x, Tensor):
            return x
        if isinstance(x, (int, float, str, Fraction, FixedPoint, SignedInteger)):
            element = self.kind.encode(x)
            return type(self)._from_storage(
                self._shape, (element,) * len(self._data), self._dtype
            )
        raise TypeError(f"Unsupported operand type: {type(x)!r}")

    def _check_same_dtype(self, other: "Tensor", op: str) -> None:
        """
        Raises
        ------
        DTypeMismatchError
            If `other` holds a different element kind.
        """
        if other._dtype != self._dtype:
            raise DTypeMismatchError(op, str(self._dtype), str(other._dtype))

    def _binary_elementwise(
        self,
        other: Union["Tensor", Number],
        op: str,
        combine: Callable[[Any, Any], Any],
        out_dtype: Optional[DType] = None,
    ) -> "Tensor":
        """
        Run a broadcasting elementwise binary op against `other`.

        Parameters
        ----------
        other : Tensor or scalar
            Right operand. Scalars are lifted with `_as_tensor_like`.
        op : str
            Operation name (logging, warnings and errors).
        combine : Callable[[Any, Any], Any]
            Element combiner.
        out_dtype : DType or None, optional
            Result kind. Defaults to this tensor's dtype.
        """
        rhs = self._as_tensor_like(other)
        self._check_same_dtype(rhs, op)
        logger.debug(
            "%s: %s %s with %s %s", op, self._shape, self._dtype, rhs._shape, rhs._dtype
        )
        shape, data = binary_elementwise_cpu(
            self._shape,
            self._data,
            rhs._shape,
            rhs._data,
            combine,
            op=op,
            warn_on_divergence=get_config().warn_on_broadcast_divergence,
        )
        return type(self)._from_storage(shape, data, out_dtype or self._dtype)

    def _unary_map(
        self,
        op: str,
        fn: Callable[[Any], Any],
        out_dtype: Optional[DType] = None,
    ) -> "Tensor":
        """Apply `fn` to every element; the shape is preserved."""
        logger.debug("%s: %s %s", op, self._shape, self._dtype)
        data = unary_map_cpu(self._data, fn)
        return type(self)._from_storage(self._shape, data, out_dtype or self._dtype)

    # ------------------------------------------------------------------
    # Linear algebra
    # ------------------------------------------------------------------
    def matmul(self, other: "Tensor") -> "Tensor":
        """
        Matrix product for rank-1/rank-2 operands.

        ``(n,) @ (n,)`` is a dot product returned with shape ``(1,)``. A rank-1
        operand mixed with a rank-2 one is treated as a row (left) or column
        (right) vector and the padded dimension is dropped from the result.

        Raises
        ------
        UnsupportedRankError
            If an operand is not rank 1 or 2.
        DimensionMismatchError
            If the inner dimensions differ.
        DTypeMismatchError
            If the operands hold different kinds.
        """
        if not isinstance(other, Tensor):
            raise TypeError(f"Unsupported operand type: {type(other)!r}")
        self._check_same_dtype(other, "matmul")
        logger.debug("matmul: %s @ %s (%s)", self._shape, other._shape, self._dtype)
        shape, data = matmul_cpu(
            self._shape, self._data, other._shape, other._data, self.kind
        )
        return type(self)._from_storage(shape, data, self._dtype)

    def __matmul__(self, other: "Tensor") -> "Tensor":
        return self.matmul(other)
