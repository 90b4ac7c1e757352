"""Weight allocator — keeps criteria weights inside the 100% budget.

Every operation is pure: it takes a sequence of criteria and returns a new
list, leaving the input untouched.  Persisting the result is the caller's
job.

Auto-balance policy: the unallocated budget is split evenly across the
unlocked criteria with ``floor``, and the remainder is handed out one
point at a time in the criteria's original order.  With integral weights
the new total is exactly the budget.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from src.ranking.config import settings
from src.ranking.exceptions import WeightOverflowError
from src.ranking.models import Criterion, Weight

logger = logging.getLogger(__name__)


def _index_of(criteria: Sequence[Criterion], criterion_id: str) -> int | None:
    for idx, criterion in enumerate(criteria):
        if criterion.id == criterion_id:
            return idx
    logger.debug("No criterion with id %s; leaving weights unchanged", criterion_id)
    return None


def _replace(
    criteria: Sequence[Criterion], idx: int, **update: object,
) -> list[Criterion]:
    updated = list(criteria)
    updated[idx] = criteria[idx].model_copy(update=update)
    return updated


def clamp_weight(weight: float) -> float:
    return min(max(float(weight), 0.0), settings.weight_total)


def total_weight(criteria: Sequence[Criterion]) -> float:
    return sum(c.weight for c in criteria)


def is_valid(criteria: Sequence[Criterion]) -> bool:
    """True when the weights add up to the budget within the tolerance."""
    return abs(total_weight(criteria) - settings.weight_total) < settings.weight_tolerance


def set_lock(
    criteria: Sequence[Criterion], criterion_id: str, locked: bool,
) -> list[Criterion]:
    """Set the lock flag.  An unknown id leaves the criteria unchanged."""
    idx = _index_of(criteria, criterion_id)
    if idx is None:
        return list(criteria)
    return _replace(criteria, idx, is_weight_locked=locked)


def toggle_lock(criteria: Sequence[Criterion], criterion_id: str) -> list[Criterion]:
    idx = _index_of(criteria, criterion_id)
    if idx is None:
        return list(criteria)
    return _replace(criteria, idx, is_weight_locked=not criteria[idx].is_weight_locked)


def set_weight(
    criteria: Sequence[Criterion], criterion_id: str, weight: float,
) -> list[Criterion]:
    """Overwrite one weight (clamped to the budget).

    Locked criteria and unknown ids are left as-is.
    """
    idx = _index_of(criteria, criterion_id)
    if idx is None:
        return list(criteria)
    if criteria[idx].is_weight_locked:
        logger.debug("Ignoring weight %.2f for locked criterion %s", weight, criterion_id)
        return list(criteria)
    return _replace(criteria, idx, weight=clamp_weight(weight))


def auto_balance(criteria: Sequence[Criterion]) -> list[Criterion]:
    """Spread the budget left over by locked criteria across the unlocked ones.

    Raises:
        WeightOverflowError: If the locked weights alone exceed the budget.
            No weight is changed in that case.
    """
    budget = settings.weight_total
    locked_total = sum(c.weight for c in criteria if c.is_weight_locked)
    if locked_total > budget:
        raise WeightOverflowError(
            f"Locked weights total {locked_total:.2f}%, more than {budget:.0f}%",
            context={"locked_total": locked_total},
        )

    unlocked = [idx for idx, c in enumerate(criteria) if not c.is_weight_locked]
    if not unlocked:
        return list(criteria)

    remaining = budget - locked_total
    n = len(unlocked)
    base = math.floor(remaining / n)
    extra = remaining - base * n
    whole = math.floor(extra)
    # non-zero only when locked weights are fractional
    residue = extra - whole

    balanced = list(criteria)
    for pos, idx in enumerate(unlocked):
        share = float(base + 1 if pos < whole else base)
        if pos == whole:
            share += residue
        balanced[idx] = criteria[idx].model_copy(update={"weight": share})

    logger.debug(
        "Auto-balanced %d unlocked criteria: locked=%.2f base=%d extra=%.2f",
        n, locked_total, base, extra,
    )
    return balanced


# ---------------------------------------------------------------------------
# Persistence records
# ---------------------------------------------------------------------------

def weights_of(criteria: Sequence[Criterion]) -> list[Weight]:
    return [
        Weight(criterion_id=c.id, weight=c.weight, is_locked=c.is_weight_locked)
        for c in criteria
    ]


def apply_weights(
    criteria: Sequence[Criterion], weights: Sequence[Weight],
) -> list[Criterion]:
    """Overlay stored weight records onto criteria; criteria without one keep theirs."""
    by_id = {w.criterion_id: w for w in weights}
    applied = []
    for c in criteria:
        w = by_id.get(c.id)
        if w is None:
            applied.append(c)
        else:
            applied.append(
                c.model_copy(update={"weight": w.weight, "is_weight_locked": w.is_locked})
            )
    return applied
