"""Task and derived task data models."""

import logging
import math
from dataclasses import dataclass, fields
from datetime import date
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..utils.datetime_utils import parse_iso

logger = logging.getLogger(__name__)


class Priority(str, Enum):
    """Task priority."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Status(str, Enum):
    """Task lifecycle status."""

    TODO = "Todo"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


class TaskValidationError(ValueError):
    """Raised in strict mode when a raw task record is malformed."""

    def __init__(self, field_name: str, value: Any, reason: str):
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid task field '{field_name}' ({value!r}): {reason}")


# camelCase keys accepted from exported task files
_KEY_ALIASES = {
    'timeTaken': 'time_taken',
    'createdAt': 'created_at',
    'completedAt': 'completed_at',
    'id': 'task_id',
    'taskId': 'task_id',
}


@dataclass
class Task:
    """A task record as supplied by the caller."""

    title: str
    revenue: float
    time_taken: float
    priority: Priority
    status: Status
    created_at: str
    completed_at: Optional[str] = None
    task_id: Optional[str] = None

    def __post_init__(self):
        """Promote known priority and status labels to their enum members."""
        self.priority = _as_member(Priority, self.priority)
        self.status = _as_member(Status, self.status)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], strict: bool = False) -> "Task":
        """Build a task from a raw mapping.

        Lenient mode coerces unknown priorities to ``Low`` and unknown
        statuses to ``Todo``. Strict mode raises ``TaskValidationError``
        for those, for non-numeric revenue/time and for unparseable
        timestamps.
        """
        raw = {_KEY_ALIASES.get(key, key): value for key, value in data.items()}

        title = raw.get('title')
        if strict and not isinstance(title, str):
            raise TaskValidationError('title', title, "expected a string")

        revenue = _coerce_number('revenue', raw.get('revenue', 0), strict)
        time_taken = _coerce_number('time_taken', raw.get('time_taken', 0), strict)
        priority = _coerce_enum(Priority, 'priority', raw.get('priority'), Priority.LOW, strict)
        status = _coerce_enum(Status, 'status', raw.get('status'), Status.TODO, strict)

        created_at = _coerce_timestamp(raw.get('created_at'))
        completed_at = _coerce_timestamp(raw.get('completed_at')) or None
        if strict:
            if parse_iso(created_at) is None:
                raise TaskValidationError('created_at', created_at, "expected an ISO-8601 timestamp")
            if completed_at is not None and parse_iso(completed_at) is None:
                raise TaskValidationError('completed_at', completed_at, "expected an ISO-8601 timestamp")

        task_id = raw.get('task_id')
        return cls(
            title=str(title) if title is not None else "",
            revenue=revenue,
            time_taken=time_taken,
            priority=priority,
            status=status,
            created_at=created_at if created_at is not None else "",
            completed_at=completed_at,
            task_id=str(task_id) if task_id is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert task to the camelCase form used in task files."""
        data = {
            'title': self.title,
            'revenue': self.revenue,
            'timeTaken': self.time_taken,
            'priority': label(self.priority),
            'status': label(self.status),
            'createdAt': self.created_at,
        }
        if self.completed_at is not None:
            data['completedAt'] = self.completed_at
        if self.task_id is not None:
            data['id'] = self.task_id
        return data


@dataclass
class DerivedTask(Task):
    """Task extended with computed ROI and priority weight."""

    roi: Optional[float] = None
    priority_weight: int = 1

    @classmethod
    def from_task(cls, task: Task, roi: Optional[float], priority_weight: int) -> "DerivedTask":
        """Copy every task field into a new derived task."""
        values = {f.name: getattr(task, f.name) for f in fields(Task)}
        return cls(**values, roi=roi, priority_weight=priority_weight)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['roi'] = self.roi
        data['priorityWeight'] = self.priority_weight
        return data


def _coerce_number(field_name: str, value: Any, strict: bool) -> float:
    """Convert a raw numeric field, keeping non-finite values for callers to absorb."""
    if isinstance(value, bool):
        value = None
    try:
        number = float(value)
    except (TypeError, ValueError):
        if strict:
            raise TaskValidationError(field_name, value, "expected a number")
        logger.warning("Task field %s=%r is not numeric, using nan", field_name, value)
        return math.nan

    if strict and not math.isfinite(number):
        raise TaskValidationError(field_name, value, "expected a finite number")
    return number


def _coerce_enum(enum_cls, field_name: str, value: Any, default, strict: bool):
    try:
        return enum_cls(value)
    except ValueError:
        if strict:
            allowed = ", ".join(member.value for member in enum_cls)
            raise TaskValidationError(field_name, value, f"expected one of: {allowed}")
        logger.warning("Unknown %s %r, falling back to %s", field_name, value, default.value)
        return default


def _coerce_timestamp(value: Any) -> Any:
    # YAML loads unquoted timestamps as date/datetime objects
    if isinstance(value, date):
        return value.isoformat()
    return value


def _as_member(enum_cls, value: Any) -> Any:
    # unknown labels stay as given; analytics treat them as the lowest bucket
    try:
        return enum_cls(value)
    except ValueError:
        return value


def label(value: Any) -> str:
    """Display label for a priority or status, enum member or raw value."""
    if isinstance(value, Enum):
        return value.value
    return str(value)
