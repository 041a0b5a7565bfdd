"""Main entry point for Task Analytics."""

import argparse
import json
import logging
import sys
from pathlib import Path

from task_analytics.engine import build_report, sort_tasks, with_derived
from task_analytics.evaluation.generator import TaskGenerator
from task_analytics.models import TaskValidationError
from task_analytics.models.task import label
from task_analytics.utils.config import load_config, get_default_config
from task_analytics.utils.loader import dump_tasks, load_tasks
from task_analytics.utils.logging_utils import configure_logging

logger = logging.getLogger("task_analytics.cli")


def resolve_config(config_path: str) -> dict:
    """Load config when the file exists, defaults otherwise."""
    if config_path and Path(config_path).exists():
        return load_config(config_path)
    logger.info("Config %s not found, using defaults", config_path)
    return get_default_config()


def run_report(config: dict, tasks_path: str, strict: bool, results_dir: Path):
    """Build the full analytics report and save it."""
    tasks = load_tasks(tasks_path, strict=strict)
    report = build_report(tasks, config)

    results_dir.mkdir(exist_ok=True)

    report_path = results_dir / f"report_{report.run_id}.json"
    with open(report_path, 'w') as f:
        json.dump(report.to_dict(), f, indent=2, default=str)

    # Save human-readable log
    log_path = results_dir / f"report_{report.run_id}.log"
    with open(log_path, 'w') as f:
        f.write(report.to_human_readable())

    print(report.to_human_readable())
    print(f"\nReport saved to: {report_path}")
    print(f"Human-readable log saved to: {log_path}")

    return report


def run_rank(config: dict, tasks_path: str, strict: bool):
    """Print tasks ordered by ROI, priority and title."""
    tasks = load_tasks(tasks_path, strict=strict)
    ranked = sort_tasks(with_derived(task) for task in tasks)

    top_n = config.get('ranking', {}).get('top_n')
    if top_n is not None:
        ranked = ranked[:top_n]

    print(f"\n{'#':<4} {'Title':<30} {'ROI':>10} {'Priority':<10} {'Status':<12}")
    print("-" * 70)
    for rank, task in enumerate(ranked, start=1):
        print(f"{rank:<4} {task.title[:30]:<30} {task.roi:>10.2f} {label(task.priority):<10} {label(task.status):<12}")

    return ranked


def run_generate(config: dict, output_path: str, count: int = None):
    """Generate sample tasks and write them to a JSON file."""
    generator = TaskGenerator(seed=42, config=config)
    tasks = generator.generate_tasks(count=count)
    path = dump_tasks(tasks, output_path)

    print(f"Generated {len(tasks)} tasks")
    print(f"Tasks saved to: {path}")

    return tasks


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Task Analytics: ROI ranking, metrics and weekly trends"
    )
    parser.add_argument(
        'command',
        choices=['report', 'rank', 'generate-tasks'],
        help='Command to run'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '--tasks',
        type=str,
        default='results/generated_tasks.json',
        help='Tasks file to read, or to write for generate-tasks'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Reject malformed task records instead of coercing them'
    )
    parser.add_argument(
        '--horizon',
        type=int,
        default=None,
        help='Forecast horizon in weeks (overrides config)'
    )
    parser.add_argument(
        '--count',
        type=int,
        default=None,
        help='Number of tasks for generate-tasks'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (overrides config)'
    )

    args = parser.parse_args(argv)

    config = resolve_config(args.config)
    configure_logging(args.log_level or config.get('logging', {}).get('level', 'WARNING'))

    if args.horizon is not None:
        config.setdefault('forecast', {})['horizon_weeks'] = args.horizon
    strict = args.strict or config.get('validation', {}).get('strict', False)

    try:
        if args.command == 'report':
            run_report(config, args.tasks, strict, Path("results"))
        elif args.command == 'rank':
            run_rank(config, args.tasks, strict)
        elif args.command == 'generate-tasks':
            run_generate(config, args.tasks, args.count)
    except (FileNotFoundError, TaskValidationError) as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
