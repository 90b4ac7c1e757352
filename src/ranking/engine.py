"""Top-level orchestrator — evaluates criteria groups end to end.

Pipeline per group:
  1. Receive criteria + candidates (loaded by the caller)
  2. Check there is something to rank
  3. Check the weight budget adds up to 100%
  4. Score with the group's method (WPM or SAW)
  5. Rank and rescale to percentages
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from src.ranking.models import (
    Candidate,
    CriteriaGroup,
    Criterion,
    GroupResult,
    GroupStatus,
)
from src.ranking.ranker import calculate_normalized
from src.ranking.weights import is_valid, total_weight

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"

GroupInput = tuple[CriteriaGroup, list[Criterion], list[Candidate]]


def load_groups_from_json(data: list[dict]) -> list[GroupInput]:
    """Build group inputs from ``{"group", "criteria", "candidates"}`` dicts."""
    inputs: list[GroupInput] = []
    for entry in data:
        group = CriteriaGroup(**entry["group"])
        criteria = [Criterion(**c) for c in entry.get("criteria", [])]
        candidates = [Candidate(**c) for c in entry.get("candidates", [])]
        inputs.append((group, criteria, candidates))
    return inputs


def load_sample_groups() -> list[GroupInput]:
    path = DATA_DIR / "sample_groups.json"
    with open(path) as f:
        raw = json.load(f)
    return load_groups_from_json(raw)


def evaluate_group(
    group: CriteriaGroup,
    criteria: Sequence[Criterion],
    candidates: Sequence[Candidate],
) -> GroupResult:
    criteria = list(criteria)

    if not criteria:
        status = GroupStatus.MISSING_CRITERIA
    elif not candidates:
        status = GroupStatus.MISSING_CANDIDATES
    elif not is_valid(criteria):
        status = GroupStatus.INVALID_WEIGHTS
        logger.info(
            "Group %s not ranked: weights total %.2f%%",
            group.name or group.id, total_weight(criteria),
        )
    else:
        results = calculate_normalized(candidates, criteria, group.method)
        return GroupResult(
            group=group,
            criteria=criteria,
            results=results,
            status=GroupStatus.READY,
        )

    return GroupResult(group=group, criteria=criteria, status=status)


def run(groups: Iterable[GroupInput]) -> list[GroupResult]:
    outcomes = [evaluate_group(g, crit, cand) for g, crit, cand in groups]
    ready = sum(1 for o in outcomes if o.status is GroupStatus.READY)
    logger.info(
        "Evaluated %d groups: %d ready, %d skipped",
        len(outcomes), ready, len(outcomes) - ready,
    )
    return outcomes
