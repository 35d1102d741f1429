"""
Numeric-kind capability contract.

This module defines `INumericKind`, the structural interface every element
kind exposes to the tensor algorithms. Elementwise, reduction and matmul
algorithms are written once against this capability set and instantiated per
concrete kind (unsigned integer, signed integer, fixed point), instead of
repeating near-identical algorithm bodies per kind.

Design notes
------------
- Uses `typing.Protocol` and `@runtime_checkable` so that kinds are matched
  structurally, without coupling algorithms to concrete classes.
- Elements are opaque to the algorithms: they are only ever combined through
  the methods of their kind.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .dtype._dtype import DType


@runtime_checkable
class INumericKind(Protocol):
    """
    Capability set of an element kind.

    Notes
    -----
    - ``compare`` returns a negative number, zero, or a positive number, like a
      classic three-way comparator, and defines a total order.
    - ``max_value``/``min_value`` are the largest/smallest representable
      elements; reductions use them as neutral running extrema.
    - Arithmetic never wraps: results outside the representable range raise
      `NumericOverflowError`, zero divisors raise `DivisionByZeroError`.
    """

    @property
    def dtype(self) -> DType: ...

    def zero(self) -> Any: ...
    def one(self) -> Any: ...
    def max_value(self) -> Any: ...
    def min_value(self) -> Any: ...

    def add(self, a: Any, b: Any) -> Any: ...
    def sub(self, a: Any, b: Any) -> Any: ...
    def mul(self, a: Any, b: Any) -> Any: ...
    def div(self, a: Any, b: Any) -> Any: ...
    def neg(self, a: Any) -> Any: ...
    def abs(self, a: Any) -> Any: ...
    def compare(self, a: Any, b: Any) -> int: ...

    def from_int(self, value: int) -> Any: ...
    def encode(self, value: Any) -> Any: ...
    def decode(self, element: Any) -> Any: ...
    def is_element(self, value: Any) -> bool: ...
