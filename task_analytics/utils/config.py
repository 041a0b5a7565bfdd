"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any, Mapping


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file, merged over the defaults."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            overrides = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            overrides = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    if overrides is None:
        overrides = {}
    if not isinstance(overrides, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return merge_config(get_default_config(), overrides)


def merge_config(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep-merge overrides into a copy of base."""
    merged = copy.deepcopy(dict(base))
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'forecast': {
            'horizon_weeks': 4,
        },
        'grading': {
            'excellent_above': 500,
            'good_from': 200,
        },
        'validation': {
            'strict': False,
        },
        'ranking': {
            'top_n': 10,
        },
        'logging': {
            'level': 'WARNING',
        },
        'sample': {
            'task_count': 50,
            'created_range_days': 56,
        },
    }
