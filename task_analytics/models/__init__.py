"""Task and analytics data models."""

from .task import DerivedTask, Priority, Status, Task, TaskValidationError
from .analytics import CohortBucket, FunnelCounts, PerformanceGrade, VelocityStat, WeeklyBucket
from .report import AnalyticsReport

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
]
