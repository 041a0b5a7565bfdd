import math

import pytest

from task_analytics.models import Priority, Status, Task, TaskValidationError


def test_from_dict_accepts_camel_case():
    task = Task.from_dict({
        'id': 7,
        'title': "Landing page",
        'revenue': 1200,
        'timeTaken': 6,
        'priority': "High",
        'status': "In Progress",
        'createdAt': "2024-03-01T09:00:00Z",
    })
    assert task.task_id == "7"
    assert task.time_taken == 6.0
    assert task.priority is Priority.HIGH
    assert task.status is Status.IN_PROGRESS
    assert task.completed_at is None


def test_from_dict_lenient_coerces_unknown_values():
    task = Task.from_dict({
        'title': "Odd",
        'revenue': "lots",
        'time_taken': 2,
        'priority': "Urgent",
        'status': "Blocked",
        'created_at': "yesterday",
    })
    assert task.priority is Priority.LOW
    assert task.status is Status.TODO
    assert math.isnan(task.revenue)
    assert task.created_at == "yesterday"


@pytest.mark.parametrize("field, value", [
    ('priority', "Urgent"),
    ('status', "Blocked"),
    ('revenue', "lots"),
    ('time_taken', float('inf')),
    ('created_at', "yesterday"),
    ('completed_at', "2024-13-45"),
])
def test_from_dict_strict_rejects_malformed(field, value):
    data = {
        'title': "Strict",
        'revenue': 10,
        'time_taken': 2,
        'priority': "Low",
        'status': "Done",
        'created_at': "2024-01-01",
        'completed_at': "2024-01-05",
    }
    data[field] = value

    with pytest.raises(TaskValidationError) as excinfo:
        Task.from_dict(data, strict=True)
    assert excinfo.value.field_name == field
    assert isinstance(excinfo.value, ValueError)


def test_to_dict_round_trips_through_from_dict():
    task = Task(
        title="Audit",
        revenue=300.0,
        time_taken=3.0,
        priority=Priority.MEDIUM,
        status=Status.DONE,
        created_at="2024-01-01",
        completed_at="2024-01-04",
        task_id="task_001",
    )
    data = task.to_dict()
    assert data['timeTaken'] == 3.0
    assert data['status'] == "Done"
    assert Task.from_dict(data, strict=True) == task


def test_plain_string_labels_promoted_to_enums():
    task = Task(title="T", revenue=1, time_taken=1, priority="High", status="Done", created_at="2024-01-01")
    assert task.priority is Priority.HIGH
    assert task.status is Status.DONE


def test_unknown_labels_kept_and_serialised():
    task = Task(title="T", revenue=1, time_taken=1, priority="Urgent", status="Blocked", created_at="2024-01-01")
    assert task.priority == "Urgent"
    assert task.to_dict()['status'] == "Blocked"
