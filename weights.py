"""
Weight bookkeeping for criteria.

Functions here never mutate their input: each takes the current list of
criteria and returns a new one, so callers can keep the previous state around
or compare before and after.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from models import Category, Criterion

logger = logging.getLogger(__name__)

WEIGHT_TOLERANCE = 0.01
WEIGHT_MIN = 0.0
WEIGHT_MAX = 1.0
NEW_CRITERION_WEIGHT = 0.1


def weight_sum(criteria: Sequence[Criterion], category: Category) -> float:
    return sum(c.weight for c in criteria if c.category == category)


def is_weight_valid(total: float) -> bool:
    """
    True when a category's total weight is close enough to 100% to proceed.

    The comparison is strict: an error of exactly 0.01 is rejected. The error
    is rounded first so float noise from summing (0.5 + 0.49 etc.) lands on
    the intended side.
    """
    return round(abs(total - 1.0), 9) < WEIGHT_TOLERANCE


def add_criterion(
    criteria: Sequence[Criterion],
    category: Category,
    name: str,
    weight: float = NEW_CRITERION_WEIGHT,
    equal_split: bool = False,
) -> Tuple[List[Criterion], Optional[Criterion]]:
    """
    Append a new criterion to `criteria`.

    Returns the new list and the created criterion, or the unchanged list and
    None when `name` is blank. With `equal_split`, every criterion in the
    category (the new one included) is reset to 1/n.
    """
    name = (name or "").strip()
    if not name:
        return list(criteria), None

    criterion = Criterion(name=name, weight=weight, category=category)
    updated = list(criteria) + [criterion]

    if equal_split:
        n = sum(1 for c in updated if c.category == category)
        share = 1.0 / n
        updated = [
            c.model_copy(update={"weight": share}) if c.category == category else c
            for c in updated
        ]
        criterion = updated[-1]

    return updated, criterion


def update_weight(criteria: Sequence[Criterion], criterion_id: str, raw_percent: float) -> List[Criterion]:
    """Set a criterion's weight from a 0..100 slider value, clamped to [0, 1]."""
    w = max(WEIGHT_MIN, min(WEIGHT_MAX, float(raw_percent) / 100.0))
    return [
        c.model_copy(update={"weight": w}) if c.id == criterion_id else c
        for c in criteria
    ]


def remove_criterion(criteria: Sequence[Criterion], criterion_id: str) -> List[Criterion]:
    return [c for c in criteria if c.id != criterion_id]


def normalize(criteria: Sequence[Criterion], category: Category) -> List[Criterion]:
    """
    Rescale the category's weights so they sum to 1.0.

    A category whose weights total exactly 0 is returned unchanged.
    """
    total = weight_sum(criteria, category)
    if total == 0:
        logger.warning("Cannot normalize %s weights: total weight is 0", category.value)
        return list(criteria)
    return [
        c.model_copy(update={"weight": c.weight / total}) if c.category == category else c
        for c in criteria
    ]
