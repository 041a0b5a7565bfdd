import math
from dataclasses import replace

from task_analytics.engine.derivation import compute_priority_weight, compute_roi, with_derived
from task_analytics.models import DerivedTask, Priority, Status


def test_compute_roi_basic():
    assert compute_roi(100, 4) == 25.0
    assert compute_roi(10, 3) == 3.33
    assert compute_roi(-10, 3) == -3.33


def test_compute_roi_zero_or_negative_time():
    assert compute_roi(10, 0) == 0
    assert compute_roi(10, -2) == 0


def test_compute_roi_non_finite_inputs():
    assert compute_roi(math.nan, 5) == 0
    assert compute_roi(5, math.nan) == 0
    assert compute_roi(math.inf, 5) == 0
    assert compute_roi(5, -math.inf) == 0
    assert compute_roi(None, 5) == 0
    assert compute_roi("100", 5) == 0


def test_compute_roi_rounds_half_away_from_zero():
    # 2.675 is stored as 2.67499..., the decimal text still rounds up
    assert compute_roi(2.675, 1) == 2.68
    assert compute_roi(-2.675, 1) == -2.68
    assert compute_roi(1, 8) == 0.13


def test_compute_priority_weight():
    assert compute_priority_weight(Priority.HIGH) == 3
    assert compute_priority_weight(Priority.MEDIUM) == 2
    assert compute_priority_weight(Priority.LOW) == 1
    assert compute_priority_weight("High") == 3
    assert compute_priority_weight("Urgent") == 1
    assert compute_priority_weight(None) == 1


def test_with_derived_adds_fields_without_touching_input(make_task):
    task = make_task(title="Audit", revenue=300, time_taken=4, priority=Priority.HIGH, status=Status.DONE)
    snapshot = replace(task)

    derived = with_derived(task)

    assert isinstance(derived, DerivedTask)
    assert derived.roi == 75.0
    assert derived.priority_weight == 3
    assert derived.title == "Audit"
    assert derived.status == Status.DONE
    assert task == snapshot
    assert not hasattr(task, 'roi')


def test_compute_roi_huge_quotients_stay_numeric(make_task):
    assert compute_roi(1e30, 1) == 1e30
    assert math.isclose(compute_roi(1e300, 3), 1e300 / 3)
    assert with_derived(make_task(revenue=1e30, time_taken=1)).roi == 1e30
