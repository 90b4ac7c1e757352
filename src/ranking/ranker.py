"""Ranker — raw scores to an ordered, ranked result set.

Results are sorted by score, highest first.  Ties are broken by an explicit
secondary key (input position by default, or candidate id), never by
relying on sort stability.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.ranking.config import settings
from src.ranking.matrix import DecisionMatrix
from src.ranking.models import Candidate, Criterion, DecisionMethod, DecisionResult
from src.ranking.scoring.methods import get_strategy

logger = logging.getLogger(__name__)


def _tie_key(position: int, candidate: Candidate) -> int | str:
    if settings.tie_break == "candidate_id":
        return candidate.id
    return position


def rank(
    candidates: Sequence[Candidate], scores: Sequence[float],
) -> list[DecisionResult]:
    """Pair each candidate with its score, sort descending and assign 1-based ranks."""
    order = sorted(
        range(len(candidates)),
        key=lambda i: (-scores[i], _tie_key(i, candidates[i])),
    )
    return [
        DecisionResult(
            candidate_id=candidates[i].id,
            candidate_name=candidates[i].name,
            score=float(scores[i]),
            rank=position + 1,
            values=candidates[i].value_map(),
        )
        for position, i in enumerate(order)
    ]


def normalize_to_percentage(results: Sequence[DecisionResult]) -> list[DecisionResult]:
    """Rescale so the best score reads 100; all-zero scores are returned as-is.

    A negative best score (possible with negative SAW values) inverts the
    percentages, e.g. -0.5 and -1 become 100 and 200.
    """
    if not results:
        return []
    max_score = max(r.score for r in results)
    if max_score == 0:
        return list(results)
    return [
        r.model_copy(update={"score": r.score / max_score * 100})
        for r in results
    ]


def calculate(
    candidates: Sequence[Candidate],
    criteria: Sequence[Criterion],
    method: DecisionMethod | None = None,
) -> list[DecisionResult]:
    """Score and rank candidates with the given method.

    The weight budget is not re-validated here; check ``weights.is_valid``
    first or the scores are computed but meaningless.
    """
    if not candidates or not criteria:
        return []
    method = method or settings.default_method
    matrix = DecisionMatrix(candidates, criteria)
    scores = get_strategy(method)(matrix)
    results = rank(matrix.candidates, scores)
    logger.debug(
        "%s ranked %d candidates on %d criteria",
        DecisionMethod(method).value, len(candidates), len(criteria),
    )
    return results


def calculate_normalized(
    candidates: Sequence[Candidate],
    criteria: Sequence[Criterion],
    method: DecisionMethod | None = None,
) -> list[DecisionResult]:
    return normalize_to_percentage(calculate(candidates, criteria, method))
