"""Per-task derived fields: ROI and priority weight."""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from numbers import Real
from types import MappingProxyType
from typing import Any

from ..models.task import DerivedTask, Priority, Task

PRIORITY_WEIGHTS = MappingProxyType({
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
})

_CENTS = Decimal('0.01')


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def compute_roi(revenue: float, time_taken: float) -> float:
    """Revenue per unit of time, rounded half away from zero to 2 decimals.

    Returns 0 for non-finite inputs or a non-positive time_taken.
    """
    if not _is_finite_number(revenue) or not _is_finite_number(time_taken):
        return 0
    if time_taken <= 0:
        return 0

    ratio = revenue / time_taken
    if not math.isfinite(ratio):
        return 0

    # round the shortest decimal text of the quotient, not its binary value
    quotient = Decimal(repr(ratio))
    with localcontext() as ctx:
        # enough digits to hold the integer part plus two decimals
        ctx.prec = max(ctx.prec, quotient.adjusted() + 4)
        return float(quotient.quantize(_CENTS, rounding=ROUND_HALF_UP))


def compute_priority_weight(priority: Any) -> int:
    """High -> 3, Medium -> 2, anything else -> 1."""
    try:
        return PRIORITY_WEIGHTS.get(Priority(priority), 1)
    except ValueError:
        return 1


def with_derived(task: Task) -> DerivedTask:
    """Return a new derived task carrying roi and priority_weight."""
    return DerivedTask.from_task(
        task,
        roi=compute_roi(task.revenue, task.time_taken),
        priority_weight=compute_priority_weight(task.priority),
    )
