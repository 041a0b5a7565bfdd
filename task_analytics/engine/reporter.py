"""Builds a full analytics report from a task collection."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence

from ..models.report import AnalyticsReport
from ..models.task import Task, label
from ..utils.config import get_default_config
from .derivation import with_derived
from .metrics import (
    compute_average_roi,
    compute_funnel,
    compute_performance_grade,
    compute_revenue_per_hour,
    compute_time_efficiency,
    compute_total_revenue,
    compute_total_time_taken,
)
from .ranking import sort_tasks
from .timeseries import (
    DEFAULT_HORIZON_WEEKS,
    compute_cohort_revenue,
    compute_forecast,
    compute_throughput_by_week,
    compute_velocity_by_priority,
    compute_weighted_pipeline,
)

logger = logging.getLogger(__name__)


class ReportBuilder:
    """Runs every analytics computation over one task snapshot."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize builder with configuration."""
        self.config = config or get_default_config()
        self.horizon_weeks = self.config.get('forecast', {}).get('horizon_weeks', DEFAULT_HORIZON_WEEKS)
        self.grading = self.config.get('grading', {})
        self.top_n = self.config.get('ranking', {}).get('top_n')

    def build(self, tasks: Sequence[Task]) -> AnalyticsReport:
        """Compute the report. The tasks are only read."""
        run_id = str(uuid.uuid4())[:8]
        logger.debug("Building report %s over %d tasks", run_id, len(tasks))

        ranked = sort_tasks(with_derived(task) for task in tasks)
        if self.top_n is not None:
            ranked = ranked[:self.top_n]

        avg_roi = compute_average_roi(tasks)
        grade_kwargs = {}
        if 'excellent_above' in self.grading:
            grade_kwargs['excellent_above'] = self.grading['excellent_above']
        if 'good_from' in self.grading:
            grade_kwargs['good_from'] = self.grading['good_from']

        summary = {
            'total_revenue': compute_total_revenue(tasks),
            'total_time_taken': compute_total_time_taken(tasks),
            'time_efficiency_percent': compute_time_efficiency(tasks),
            'revenue_per_hour': compute_revenue_per_hour(tasks),
            'average_roi': avg_roi,
            'performance_grade': compute_performance_grade(avg_roi, **grade_kwargs),
            'weighted_pipeline': compute_weighted_pipeline(tasks),
        }

        throughput = compute_throughput_by_week(tasks)
        forecast = compute_forecast(throughput, self.horizon_weeks)

        report = AnalyticsReport(
            run_id=run_id,
            generated_at=datetime.now(timezone.utc),
            config={
                'horizon_weeks': self.horizon_weeks,
                'top_n': self.top_n,
                'grading': dict(self.grading),
            },
            task_count=len(tasks),
            ranked=ranked,
            summary=summary,
            funnel=compute_funnel(tasks),
            velocity=compute_velocity_by_priority(tasks),
            throughput=sorted(throughput, key=_week_sort_key),
            forecast=forecast,
            cohorts=sorted(compute_cohort_revenue(tasks), key=lambda c: (_week_sort_key(c), label(c.priority))),
        )

        logger.info(
            "Report %s: %d tasks, grade %s",
            run_id,
            len(tasks),
            summary['performance_grade'].value,
        )
        return report


def build_report(tasks: Sequence[Task], config: Optional[Dict[str, Any]] = None) -> AnalyticsReport:
    """Build an analytics report with the given (or default) configuration."""
    return ReportBuilder(config).build(tasks)


def _week_sort_key(bucket) -> tuple:
    """Chronological key for '<year>-W<week>' labels; unparseable keys sort last."""
    year, sep, week = bucket.week.partition('-W')
    if not sep or not year.isdigit() or not week.isdigit():
        return (1, 0, 0, bucket.week)
    return (0, int(year), int(week), bucket.week)
