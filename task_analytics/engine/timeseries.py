"""Time-series analytics keyed by calendar week or priority."""

from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from ..models.analytics import CohortBucket, VelocityStat, WeeklyBucket
from ..models.task import Priority, Status, Task
from ..utils.datetime_utils import days_between, round_half_up, week_key

DEFAULT_HORIZON_WEEKS = 4

# Expected share of revenue realised at each pipeline stage
PIPELINE_WEIGHTS = MappingProxyType({
    Status.TODO: 0.1,
    Status.IN_PROGRESS: 0.5,
    Status.DONE: 1.0,
})


def compute_velocity_by_priority(tasks: Sequence[Task]) -> Dict[Priority, VelocityStat]:
    """Average and median days to completion per priority.

    Only completed tasks count. Every priority is present in the result.
    The median is the element at n // 2 of the sorted durations, i.e. the
    upper median for even counts, without interpolation.
    """
    groups: Dict[Priority, List[float]] = {priority: [] for priority in Priority}

    for task in tasks:
        if task.completed_at:
            priority = task.priority if task.priority in groups else Priority.LOW
            groups[priority].append(days_between(task.created_at, task.completed_at))

    velocity = {}
    for priority, durations in groups.items():
        durations = sorted(durations)
        avg = sum(durations) / len(durations) if durations else 0
        median = durations[len(durations) // 2] if durations else 0
        velocity[priority] = VelocityStat(avg_days=avg, median_days=median)

    return velocity


def compute_throughput_by_week(tasks: Iterable[Task]) -> List[WeeklyBucket]:
    """Completions per week key, in order of first appearance."""
    counts: Dict[str, int] = {}

    for task in tasks:
        if task.completed_at:
            key = week_key(task.completed_at)
            counts[key] = counts.get(key, 0) + 1

    return [WeeklyBucket(week=week, count=count) for week, count in counts.items()]


def compute_weighted_pipeline(tasks: Iterable[Task]) -> float:
    """Revenue weighted by how far each task has progressed."""
    return sum(t.revenue * PIPELINE_WEIGHTS.get(t.status, 0.0) for t in tasks)


def compute_forecast(
    weekly: Sequence[Any],
    horizon_weeks: int = DEFAULT_HORIZON_WEEKS,
) -> List[WeeklyBucket]:
    """Project the mean weekly count forward over the horizon.

    This is a constant-mean forecast, not a trend model: every future
    week gets the same rounded mean. Buckets may be WeeklyBucket
    instances or mappings with a 'count' key.
    """
    if not weekly:
        return []

    counts = [_bucket_count(bucket) for bucket in weekly]
    mean = sum(counts) / len(counts)
    projected = round_half_up(mean)

    return [
        WeeklyBucket(week=f"+{step}", count=projected)
        for step in range(1, horizon_weeks + 1)
    ]


def compute_cohort_revenue(tasks: Iterable[Task]) -> List[CohortBucket]:
    """Total revenue per (creation week, priority), in order of first appearance."""
    revenue: Dict[Tuple[str, Priority], float] = {}

    for task in tasks:
        key = (week_key(task.created_at), task.priority)
        revenue[key] = revenue.get(key, 0) + task.revenue

    return [
        CohortBucket(week=week, priority=priority, revenue=total)
        for (week, priority), total in revenue.items()
    ]


def _bucket_count(bucket: Any) -> float:
    if isinstance(bucket, Mapping):
        return bucket['count']
    return bucket.count
