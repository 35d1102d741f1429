from ._shape_and_indexing import (
    combine_indices,
    inverse_permutation,
    len_from_shape,
    normalize_axis,
    permutation_output_shape,
    ravel_index,
    reduce_output_shape,
    stride,
    unravel_index,
    validate_permutation,
)
from ._broadcast import (
    broadcast_index_mapping,
    broadcast_shape,
    check_compatibility,
    is_broadcast_compatible,
)

__all__ = [
    "combine_indices",
    "inverse_permutation",
    "len_from_shape",
    "normalize_axis",
    "permutation_output_shape",
    "ravel_index",
    "reduce_output_shape",
    "stride",
    "unravel_index",
    "validate_permutation",
    "broadcast_index_mapping",
    "broadcast_shape",
    "check_compatibility",
    "is_broadcast_compatible",
]
