"""Utility functions."""

from .config import load_config, get_default_config, merge_config
from .datetime_utils import days_between, iso_week_number, parse_iso, week_key
from .logging_utils import configure_logging

__all__ = [
    'load_config',
    'get_default_config',
    'merge_config',
    'days_between',
    'iso_week_number',
    'parse_iso',
    'week_key',
    'configure_logging',
]
