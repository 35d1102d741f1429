from ._budget import (
    StepBudget,
    UnlimitedBudget,
    active_budget,
    budget_scope,
    check_budget,
)

__all__ = [
    StepBudget.__name__,
    UnlimitedBudget.__name__,
    active_budget.__name__,
    budget_scope.__name__,
    check_budget.__name__,
]
