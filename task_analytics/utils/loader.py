"""Load and save task collections."""

import json
import logging
import yaml
from pathlib import Path
from typing import Iterable, List

from ..models.task import Task

logger = logging.getLogger(__name__)


def load_tasks(tasks_path: str, strict: bool = False) -> List[Task]:
    """Load tasks from a JSON or YAML file.

    The file holds either a list of task mappings or a mapping with a
    ``tasks`` list.
    """
    path = Path(tasks_path)

    if not path.exists():
        raise FileNotFoundError(f"Tasks file not found: {tasks_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported tasks file format: {path.suffix}")

    if isinstance(data, dict):
        data = data.get('tasks', [])
    if data is None:
        data = []
    if not isinstance(data, list):
        raise ValueError(f"Tasks file must contain a list of tasks: {tasks_path}")

    tasks = [Task.from_dict(item, strict=strict) for item in data]
    logger.info("Loaded %d tasks from %s", len(tasks), path)
    return tasks


def dump_tasks(tasks: Iterable[Task], tasks_path: str) -> Path:
    """Write tasks as a JSON list in the camelCase file format."""
    path = Path(tasks_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    records = [task.to_dict() for task in tasks]
    with open(path, 'w') as f:
        json.dump(records, f, indent=2)

    logger.info("Wrote %d tasks to %s", len(records), path)
    return path
