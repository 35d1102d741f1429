"""
Shape reinterpretation (`reshape`, `flatten`, `squeeze`, `unsqueeze`)
registered for every element family.

None of these touch the flat data; only the shape changes.
"""

from .....domain._errors import (
    AxisOutOfRangeError,
    InvalidArgumentError,
    InvalidShapeError,
    ShapeMismatchError,
)
from ....shape._shape_and_indexing import len_from_shape, normalize_axis
from ..._tensor_builder import register_families

from ._base import TensorMixinMemory as TMM


def _resolve_shape(shape, numel):
    shape = tuple(int(d) for d in shape)
    unknown = [i for i, d in enumerate(shape) if d == -1]
    if len(unknown) > 1:
        raise InvalidShapeError(shape, "only one dimension can be inferred")
    if any(d < -1 for d in shape):
        raise InvalidShapeError(shape, "negative dimension")
    if not unknown:
        return shape
    known = len_from_shape([d for d in shape if d != -1])
    if known == 0 or numel % known:
        raise ShapeMismatchError("reshape", shape, detail=f"cannot hold {numel} elements")
    i = unknown[0]
    return shape[:i] + (numel // known,) + shape[i + 1 :]


@register_families(TMM, TMM.reshape)
def tensor_reshape(self, new_shape):
    resolved = _resolve_shape(new_shape, self.numel())
    if len_from_shape(resolved) != self.numel():
        raise ShapeMismatchError("reshape", self.shape, resolved)
    return type(self)._from_storage(resolved, self.data, self.dtype)


@register_families(TMM, TMM.flatten)
def tensor_flatten(self, axis=1):
    if axis < -self.rank or axis > self.rank:
        raise AxisOutOfRangeError(axis, self.rank)
    if axis < 0:
        axis += self.rank
    shape = (len_from_shape(self.shape[:axis]), len_from_shape(self.shape[axis:]))
    return type(self)._from_storage(shape, self.data, self.dtype)


@register_families(TMM, TMM.squeeze)
def tensor_squeeze(self, axes=None):
    if axes is None:
        drop = {i for i, d in enumerate(self.shape) if d == 1}
    else:
        drop = {normalize_axis(a, self.rank) for a in axes}
        for a in drop:
            if self.shape[a] != 1:
                raise InvalidArgumentError(
                    "squeeze", f"axis {a} has size {self.shape[a]}, expected 1"
                )
    shape = tuple(d for i, d in enumerate(self.shape) if i not in drop)
    return type(self)._from_storage(shape, self.data, self.dtype)


@register_families(TMM, TMM.unsqueeze)
def tensor_unsqueeze(self, axes):
    out_rank = self.rank + len(axes)
    inserted = {normalize_axis(a, out_rank) for a in axes}
    if len(inserted) != len(axes):
        raise InvalidArgumentError("unsqueeze", f"duplicate axes in {tuple(axes)}")
    dims = iter(self.shape)
    shape = tuple(1 if i in inserted else next(dims) for i in range(out_rank))
    return type(self)._from_storage(shape, self.data, self.dtype)
