"""Analytics computations over task collections."""

from .derivation import compute_priority_weight, compute_roi, with_derived
from .ranking import sort_tasks
from .metrics import (
    compute_average_roi,
    compute_funnel,
    compute_performance_grade,
    compute_revenue_per_hour,
    compute_time_efficiency,
    compute_total_revenue,
    compute_total_time_taken,
)
from .timeseries import (
    compute_cohort_revenue,
    compute_forecast,
    compute_throughput_by_week,
    compute_velocity_by_priority,
    compute_weighted_pipeline,
)
from .reporter import ReportBuilder, build_report

__all__ = [
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
    'compute_velocity_by_priority',
    'compute_throughput_by_week',
    'compute_weighted_pipeline',
    'compute_forecast',
    'compute_cohort_revenue',
    'ReportBuilder',
    'build_report',
]
