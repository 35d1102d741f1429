"""
Tensor control-path manager for element-family dispatch.

This module defines a shared control-path manager used to register and resolve
family-specific implementations of Tensor methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"family"``. As a result, method
dispatch is performed based on the runtime value of ``self.family`` (a
`DTypeFamily`) on Tensor objects.

Typical usage
-------------
Family-specific implementations register themselves using this manager:

    @tensor_control_path_manager(TensorMixin, TensorMixin.exp, DTypeFamily.FIXED,
                                 unsupported_family)
    def exp_fixed(self, ...): ...

Operations defined for several families register the same implementation once
per family with :func:`register_families`.

Notes
-----
- All control paths registered via this manager share a single internal
  registry.
- A family without a registered path reaches the trap, which raises
  `UnsupportedDTypeError`.
"""

from typing import Any, Callable, Iterable

from ...domain._errors import UnsupportedDTypeError
from ...domain.dtype._dtype import DTypeFamily
from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches Tensor methods based on `self.family`
tensor_control_path_manager = create_path_builder("family")

ALL_FAMILIES = tuple(DTypeFamily)
SIGNED_FAMILIES = (DTypeFamily.SIGNED, DTypeFamily.FIXED)
FIXED_ONLY = (DTypeFamily.FIXED,)


def unsupported_family(method: Callable[..., Any], family: DTypeFamily) -> None:
    """Trap for families without a registered control path."""
    raise UnsupportedDTypeError(method.__name__, family.value)


def register_families(
    cls: type,
    method: Callable[..., Any],
    families: Iterable[DTypeFamily] = ALL_FAMILIES,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Register one implementation as the control path of several families.

    Parameters
    ----------
    cls : type
        Mixin class owning the base method.
    method : Callable
        Base method being templated.
    families : Iterable[DTypeFamily], optional
        Families served by the implementation. Defaults to every family.
    """

    def decorator(impl: Callable[..., Any]) -> Callable[..., Any]:
        for family in families:
            tensor_control_path_manager(cls, method, family, unsupported_family)(impl)
        return impl

    return decorator
