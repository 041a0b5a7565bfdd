"""Sample task generator for demos and tests."""

import random
from datetime import datetime, timedelta, timezone
from typing import List

from ..models.task import Priority, Status, Task


class TaskGenerator:
    """Generates deterministic task collections."""

    def __init__(self, seed: int = 42, config: dict = None):
        """Initialize generator with seed for reproducibility."""
        self.seed = seed
        self.random = random.Random(seed)
        self.config = config or {}
        self.sample_config = self.config.get('sample', {})

    def generate_tasks(
        self,
        count: int = None,
        start_date: datetime = None,
        created_range_days: int = None,
    ) -> List[Task]:
        """Generate tasks created across a window after start_date."""
        count = count if count is not None else self.sample_config.get('task_count', 50)
        created_range_days = created_range_days or self.sample_config.get('created_range_days', 56)
        if start_date is None:
            start_date = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

        tasks = []
        categories = ['Landing page', 'Invoice run', 'Client audit', 'Bug bash', 'Onboarding']

        for i in range(count):
            # Vary task sizes (some small, some large), in hours
            if self.random.random() < 0.3:
                time_taken = self.random.randint(1, 4)  # Small
            elif self.random.random() < 0.7:
                time_taken = self.random.randint(4, 16)  # Medium
            else:
                time_taken = self.random.randint(16, 40)  # Large

            revenue = self.random.randint(0, 200) * 25

            priority = self.random.choices(
                [Priority.HIGH, Priority.MEDIUM, Priority.LOW],
                weights=[0.25, 0.45, 0.30],
            )[0]

            status = self.random.choices(
                [Status.TODO, Status.IN_PROGRESS, Status.DONE],
                weights=[0.3, 0.25, 0.45],
            )[0]

            created_at = start_date + timedelta(
                days=self.random.randint(0, created_range_days),
                hours=self.random.randint(0, 8),
            )

            # Only finished work carries a completion timestamp
            completed_at = None
            if status == Status.DONE:
                completed_at = created_at + timedelta(
                    days=self.random.randint(0, 21),
                    hours=self.random.randint(0, 8),
                )

            task = Task(
                title=f"{self.random.choice(categories)} {i}",
                revenue=float(revenue),
                time_taken=float(time_taken),
                priority=priority,
                status=status,
                created_at=created_at.isoformat(),
                completed_at=completed_at.isoformat() if completed_at else None,
                task_id=f"task_{i:03d}",
            )

            tasks.append(task)

        return tasks
