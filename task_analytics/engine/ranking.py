"""Deterministic ranking of derived tasks."""

import math
import unicodedata
from typing import Iterable, List

from ..models.task import DerivedTask


def collation_key(title: str) -> tuple:
    """Locale-style collation key: base letters, then accents, then case.

    Case-insensitive and accent-insensitive at the first level, so
    'apple' sorts before 'Banana'. At the last level lowercase precedes
    uppercase, as in the default root collation.
    """
    folded = title.casefold()
    decomposed = unicodedata.normalize('NFD', folded)
    base = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base, folded, title.swapcase())


def sort_tasks(tasks: Iterable[DerivedTask]) -> List[DerivedTask]:
    """Order tasks by ROI, then priority weight, then title.

    ROI and weight sort descending, titles ascending by collation key.
    A missing ROI sorts last. The input is not modified.
    """
    def sort_key(task: DerivedTask):
        # Primary: ROI (higher first, so negate)
        roi = task.roi if task.roi is not None else -math.inf
        roi_key = -roi

        # Secondary: priority weight (higher first)
        weight_key = -task.priority_weight

        # Tertiary: collated title
        title_key = collation_key(task.title)

        return (roi_key, weight_key, title_key)

    return sorted(tasks, key=sort_key)
