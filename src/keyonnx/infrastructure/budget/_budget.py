"""
Execution-budget guards.

Tensor algorithms call :func:`check_budget` at least once per outer-loop
iteration. The call is forwarded to the *active* guard, which is held in a
`contextvars.ContextVar` so that independent callers (threads, asyncio tasks)
never share a step counter.

Typical usage
-------------
    with budget_scope(StepBudget(10_000)):
        y = a @ b            # raises ResourceExhaustedError past 10k steps

Outside of any scope the active guard is an `UnlimitedBudget`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from ...domain._budget import IBudgetGuard
from ...domain._errors import ResourceExhaustedError

logger = logging.getLogger(__name__)


class UnlimitedBudget:
    """Guard that never signals exhaustion."""

    def check(self) -> None:
        return None

    def __repr__(self) -> str:
        return "UnlimitedBudget()"


class StepBudget:
    """
    Guard that allows a fixed number of steps.

    Parameters
    ----------
    max_steps : int
        Number of `check()` calls allowed. The call that exceeds it raises.

    Raises
    ------
    ValueError
        If `max_steps` is negative.
    """

    __slots__ = ("max_steps", "steps")

    def __init__(self, max_steps: int) -> None:
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        self.max_steps = int(max_steps)
        self.steps = 0

    @property
    def remaining(self) -> int:
        return max(self.max_steps - self.steps, 0)

    def check(self) -> None:
        self.steps += 1
        if self.steps > self.max_steps:
            logger.warning(
                "execution budget exhausted after %d steps", self.max_steps
            )
            raise ResourceExhaustedError(self.max_steps)

    def reset(self) -> None:
        self.steps = 0

    def __repr__(self) -> str:
        return f"StepBudget(max_steps={self.max_steps}, steps={self.steps})"


_UNLIMITED = UnlimitedBudget()

_ACTIVE_GUARD: ContextVar[IBudgetGuard] = ContextVar(
    "keyonnx_budget_guard", default=_UNLIMITED
)


def active_budget() -> IBudgetGuard:
    """Return the guard active in the current context."""
    return _ACTIVE_GUARD.get()


def check_budget() -> None:
    """
    Record one unit of work against the active guard.

    Raises
    ------
    ResourceExhaustedError
        If the active guard's budget is exceeded.
    """
    _ACTIVE_GUARD.get().check()


@contextmanager
def budget_scope(guard: IBudgetGuard) -> Iterator[IBudgetGuard]:
    """
    Install `guard` as the active guard for the duration of a ``with`` block.

    Scopes nest; the previous guard is restored on exit, including on error.

    Raises
    ------
    TypeError
        If `guard` does not provide ``check()``.
    """
    if not isinstance(guard, IBudgetGuard):
        raise TypeError(f"{guard!r} does not implement IBudgetGuard")
    token = _ACTIVE_GUARD.set(guard)
    try:
        yield guard
    finally:
        _ACTIVE_GUARD.reset(token)
