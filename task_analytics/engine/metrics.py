"""Aggregate metrics over a task collection."""

import math
from typing import Sequence

from ..models.analytics import FunnelCounts, PerformanceGrade
from ..models.task import Status, Task
from .derivation import compute_roi

EXCELLENT_ROI_ABOVE = 500
GOOD_ROI_FROM = 200


def compute_total_revenue(tasks: Sequence[Task]) -> float:
    """Revenue realised by Done tasks."""
    return sum(t.revenue for t in tasks if t.status == Status.DONE)


def compute_total_time_taken(tasks: Sequence[Task]) -> float:
    """Time spent across all tasks, whatever their status."""
    return sum(t.time_taken for t in tasks)


def compute_time_efficiency(tasks: Sequence[Task]) -> float:
    """Percentage of tasks that are Done (0 for no tasks)."""
    if not tasks:
        return 0
    done = sum(1 for t in tasks if t.status == Status.DONE)
    return (done / len(tasks)) * 100


def compute_revenue_per_hour(tasks: Sequence[Task]) -> float:
    revenue = compute_total_revenue(tasks)
    time_taken = compute_total_time_taken(tasks)
    return revenue / time_taken if time_taken > 0 else 0


def compute_average_roi(tasks: Sequence[Task]) -> float:
    """Mean per-task ROI, ignoring non-finite values."""
    rois = [compute_roi(t.revenue, t.time_taken) for t in tasks]
    rois = [roi for roi in rois if math.isfinite(roi)]

    if not rois:
        return 0
    return sum(rois) / len(rois)


def compute_performance_grade(
    avg_roi: float,
    excellent_above: float = EXCELLENT_ROI_ABOVE,
    good_from: float = GOOD_ROI_FROM,
) -> PerformanceGrade:
    """Grade an average ROI: above 500 Excellent, from 200 Good."""
    if avg_roi > excellent_above:
        return PerformanceGrade.EXCELLENT
    if avg_roi >= good_from:
        return PerformanceGrade.GOOD
    return PerformanceGrade.NEEDS_IMPROVEMENT


def compute_funnel(tasks: Sequence[Task]) -> FunnelCounts:
    """Count tasks per status and the conversion ratios between stages.

    Unrecognised statuses count as Todo, so the three counts always add
    up to the number of tasks.
    """
    in_progress = sum(1 for t in tasks if t.status == Status.IN_PROGRESS)
    done = sum(1 for t in tasks if t.status == Status.DONE)
    todo = len(tasks) - in_progress - done

    total = todo + in_progress + done
    return FunnelCounts(
        todo=todo,
        in_progress=in_progress,
        done=done,
        conversion_todo_to_in_progress=(in_progress + done) / total if total else 0,
        conversion_in_progress_to_done=done / in_progress if in_progress else 0,
    )
