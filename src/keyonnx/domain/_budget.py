"""
Execution-budget guard contract.

Every unbounded loop of the tensor algorithms (broadcast iteration, reduction
accumulation, transpose coordinate walk, matmul accumulation) periodically
consults a budget guard. A guard is a zero-argument check that raises
`ResourceExhaustedError` once a caller-defined budget has been spent.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IBudgetGuard(Protocol):
    """
    Duck-typed execution-budget guard.

    Any object providing ``check()`` can be installed as the active guard.
    """

    def check(self) -> None:
        """
        Record one unit of work.

        Raises
        ------
        ResourceExhaustedError
            If the budget is exceeded.
        """
        ...
