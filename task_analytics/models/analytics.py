"""Result shapes produced by the analytics functions."""

from dataclasses import dataclass
from enum import Enum

from .task import Priority


class PerformanceGrade(str, Enum):
    """Grade assigned from average ROI."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    NEEDS_IMPROVEMENT = "Needs Improvement"


@dataclass(frozen=True)
class FunnelCounts:
    """Todo -> In Progress -> Done counts and conversion ratios (0-1)."""

    todo: int
    in_progress: int
    done: int
    conversion_todo_to_in_progress: float
    conversion_in_progress_to_done: float


@dataclass(frozen=True)
class WeeklyBucket:
    """Completions counted for one week key, or one forecast step."""

    week: str
    count: int


@dataclass(frozen=True)
class CohortBucket:
    """Revenue of tasks created in the same week with the same priority."""

    week: str
    priority: Priority
    revenue: float


@dataclass(frozen=True)
class VelocityStat:
    """Days from creation to completion for one priority."""

    avg_days: float
    median_days: float
