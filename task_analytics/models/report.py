"""Analytics report model for export."""

from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from typing import Dict, List, Any

from .analytics import CohortBucket, FunnelCounts, VelocityStat, WeeklyBucket
from .task import DerivedTask, label


@dataclass
class AnalyticsReport:
    """Complete analytics snapshot of one task collection."""

    run_id: str
    generated_at: datetime
    config: Dict[str, Any]
    task_count: int
    ranked: List[DerivedTask]
    summary: Dict[str, Any]
    funnel: FunnelCounts
    velocity: Dict[str, VelocityStat]
    throughput: List[WeeklyBucket]
    forecast: List[WeeklyBucket]
    cohorts: List[CohortBucket]

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for JSON export."""
        data = asdict(self)
        data['ranked'] = [task.to_dict() for task in self.ranked]
        data['velocity'] = {str(_plain(key)): asdict(stat) for key, stat in self.velocity.items()}
        return _plain(data)

    def to_human_readable(self) -> str:
        """Generate human-readable log format."""
        lines = [
            f"=== Task Analytics Report: {self.run_id} ===",
            f"Generated: {self.generated_at}",
            f"Tasks analysed: {self.task_count}",
            "",
            "Summary:",
        ]

        for key, value in self.summary.items():
            if isinstance(value, float):
                lines.append(f"  {key}: {value:.2f}")
            else:
                lines.append(f"  {key}: {_plain(value)}")

        lines.extend([
            "",
            "Funnel:",
            f"  Todo: {self.funnel.todo}",
            f"  In Progress: {self.funnel.in_progress}",
            f"  Done: {self.funnel.done}",
            f"  Todo -> In Progress: {self.funnel.conversion_todo_to_in_progress:.1%}",
            f"  In Progress -> Done: {self.funnel.conversion_in_progress_to_done:.1%}",
            "",
            "Top Tasks by ROI:",
        ])

        for rank, task in enumerate(self.ranked, start=1):
            roi = f"{task.roi:.2f}" if task.roi is not None else "n/a"
            lines.append(f"  {rank}. {task.title} (ROI {roi}, {label(task.priority)}, {label(task.status)})")

        lines.extend([
            "",
            "Velocity by Priority (days):",
        ])

        for priority, stat in self.velocity.items():
            lines.append(f"  {_plain(priority)}: avg {stat.avg_days:.1f}, median {stat.median_days}")

        lines.extend([
            "",
            "Throughput by Week:",
        ])

        for bucket in self.throughput:
            lines.append(f"  {bucket.week}: {bucket.count}")

        lines.extend([
            "",
            "Forecast (constant mean):",
        ])

        for bucket in self.forecast:
            lines.append(f"  {bucket.week}: {bucket.count}")

        lines.extend([
            "",
            "Cohort Revenue:",
        ])

        for cohort in self.cohorts:
            lines.append(f"  {cohort.week} {label(cohort.priority)}: {cohort.revenue:.2f}")

        lines.append("=" * 50)

        return "\n".join(lines)


def _plain(value: Any) -> Any:
    """Replace enum members with their values for serialization."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {_plain(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value
