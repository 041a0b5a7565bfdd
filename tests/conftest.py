import pytest

from task_analytics.models import Priority, Status, Task


@pytest.fixture
def make_task():
    def _make(
        title="Task",
        revenue=100.0,
        time_taken=4.0,
        priority=Priority.MEDIUM,
        status=Status.TODO,
        created_at="2024-01-01T09:00:00Z",
        completed_at=None,
    ):
        return Task(
            title=title,
            revenue=revenue,
            time_taken=time_taken,
            priority=priority,
            status=status,
            created_at=created_at,
            completed_at=completed_at,
        )

    return _make
