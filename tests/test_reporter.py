import json

from task_analytics.engine.reporter import ReportBuilder, build_report
from task_analytics.models import PerformanceGrade, Priority, Status, WeeklyBucket
from task_analytics.utils.config import get_default_config, merge_config


def sample_tasks(make_task):
    return [
        make_task(title="Retainer", revenue=3000, time_taken=5, priority=Priority.HIGH,
                  status=Status.DONE, created_at="2024-01-02", completed_at="2024-01-16"),
        make_task(title="Audit", revenue=900, time_taken=3, priority=Priority.MEDIUM,
                  status=Status.DONE, created_at="2024-01-01", completed_at="2024-01-04"),
        make_task(title="Pitch", revenue=400, time_taken=2, priority=Priority.LOW,
                  status=Status.IN_PROGRESS, created_at="2024-01-09"),
        make_task(title="Backlog", revenue=0, time_taken=0, priority=Priority.LOW,
                  status=Status.TODO, created_at="2024-01-10"),
    ]


def test_report_composes_all_analytics(make_task):
    tasks = sample_tasks(make_task)
    report = build_report(tasks)

    assert report.task_count == 4
    assert [t.title for t in report.ranked] == ["Retainer", "Audit", "Pitch", "Backlog"]
    assert report.summary['total_revenue'] == 3900
    assert report.summary['total_time_taken'] == 10
    assert report.summary['time_efficiency_percent'] == 50
    assert report.summary['revenue_per_hour'] == 390
    assert report.summary['average_roi'] == 275
    assert report.summary['performance_grade'] is PerformanceGrade.GOOD
    assert report.funnel.done == 2
    assert report.velocity[Priority.HIGH].avg_days == 14
    # chronological for display
    assert report.throughput == [WeeklyBucket("2024-W1", 1), WeeklyBucket("2024-W3", 1)]
    assert [b.week for b in report.forecast] == ["+1", "+2", "+3", "+4"]
    assert all(b.count == 1 for b in report.forecast)


def test_report_respects_config(make_task):
    config = merge_config(get_default_config(), {
        'forecast': {'horizon_weeks': 2},
        'ranking': {'top_n': 1},
        'grading': {'excellent_above': 100},
    })
    report = ReportBuilder(config).build(sample_tasks(make_task))

    assert len(report.forecast) == 2
    assert [t.title for t in report.ranked] == ["Retainer"]
    assert report.summary['performance_grade'] is PerformanceGrade.EXCELLENT


def test_report_does_not_mutate_tasks(make_task):
    tasks = sample_tasks(make_task)
    before = [t.to_dict() for t in tasks]

    build_report(tasks)

    assert [t.to_dict() for t in tasks] == before


def test_report_serialization(make_task):
    report = build_report(sample_tasks(make_task))

    data = report.to_dict()
    encoded = json.loads(json.dumps(data, default=str))
    assert encoded['summary']['performance_grade'] == "Good"
    assert set(encoded['velocity']) == {"High", "Medium", "Low"}
    assert encoded['ranked'][0]['priorityWeight'] == 3

    text = report.to_human_readable()
    assert f"Task Analytics Report: {report.run_id}" in text
    assert "1. Retainer" in text


def test_empty_report():
    report = build_report([])

    assert report.ranked == []
    assert report.forecast == []
    assert report.summary['average_roi'] == 0
    assert report.summary['performance_grade'] is PerformanceGrade.NEEDS_IMPROVEMENT


def test_report_with_unrecognised_labels(make_task):
    tasks = sample_tasks(make_task) + [
        make_task(title="Odd", priority="Urgent", status="Blocked", created_at="2024-01-02"),
    ]
    report = build_report(tasks)

    assert report.funnel.todo == 2
    assert any(c.priority == "Urgent" for c in report.cohorts)
    assert "Odd" in report.to_human_readable()
