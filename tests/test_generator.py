from datetime import datetime, timezone

from task_analytics.evaluation.generator import TaskGenerator
from task_analytics.models import Status
from task_analytics.utils.datetime_utils import parse_iso


def test_generator_is_deterministic():
    first = TaskGenerator(seed=7).generate_tasks(count=20)
    second = TaskGenerator(seed=7).generate_tasks(count=20)
    assert first == second


def test_generated_tasks_are_consistent():
    start = datetime(2024, 3, 4, tzinfo=timezone.utc)
    tasks = TaskGenerator(seed=1).generate_tasks(count=40, start_date=start)

    assert len(tasks) == 40
    for task in tasks:
        assert task.time_taken > 0
        assert parse_iso(task.created_at) >= start
        if task.status == Status.DONE:
            assert parse_iso(task.completed_at) >= parse_iso(task.created_at)
        else:
            assert task.completed_at is None


def test_generator_reads_count_from_config():
    generator = TaskGenerator(config={'sample': {'task_count': 5}})
    assert len(generator.generate_tasks()) == 5
