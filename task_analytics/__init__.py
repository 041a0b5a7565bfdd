"""Task analytics: ROI, ranking, aggregate metrics and weekly time series."""

from .engine import (
    ReportBuilder,
    build_report,
    compute_average_roi,
    compute_cohort_revenue,
    compute_forecast,
    compute_funnel,
    compute_performance_grade,
    compute_priority_weight,
    compute_revenue_per_hour,
    compute_roi,
    compute_throughput_by_week,
    compute_time_efficiency,
    compute_total_revenue,
    compute_total_time_taken,
    compute_velocity_by_priority,
    compute_weighted_pipeline,
    sort_tasks,
    with_derived,
)
from .models import (
    AnalyticsReport,
    CohortBucket,
    DerivedTask,
    FunnelCounts,
    PerformanceGrade,
    Priority,
    Status,
    Task,
    TaskValidationError,
    VelocityStat,
    WeeklyBucket,
)
from .utils.datetime_utils import days_between, iso_week_number, week_key

__all__ = [
    'Task',
    'DerivedTask',
    'Priority',
    'Status',
    'TaskValidationError',
    'FunnelCounts',
    'WeeklyBucket',
    'CohortBucket',
    'VelocityStat',
    'PerformanceGrade',
    'AnalyticsReport',
    'compute_roi',
    'compute_priority_weight',
    'with_derived',
    'sort_tasks',
    'compute_total_revenue',
    'compute_total_time_taken',
    'compute_time_efficiency',
    'compute_revenue_per_hour',
    'compute_average_roi',
    'compute_performance_grade',
    'compute_funnel',
    'days_between',
    'iso_week_number',
    'week_key',
    'compute_velocity_by_priority',
    'compute_throughput_by_week',
    'compute_weighted_pipeline',
    'compute_forecast',
    'compute_cohort_revenue',
    'ReportBuilder',
    'build_report',
]
