"""Simple Additive Weighting (SAW).

Each criterion column is normalized against the population of present
values, then weighted and summed:

    BENEFIT: r_ij = x_ij / max_j      (0 when max_j <= 0)
    COST:    r_ij = min_j / x_ij      (0 when x_ij <= 0)
    S_i     = sum_j w_j * r_ij

Missing values and zero weights contribute nothing.
"""

from __future__ import annotations

import logging

import numpy as np

from src.ranking.exceptions import UnsupportedImpactTypeError
from src.ranking.matrix import DecisionMatrix
from src.ranking.models import ImpactType

logger = logging.getLogger(__name__)


def _normalized_column(
    impact_type: ImpactType, col: np.ndarray, col_max: float, col_min: float,
) -> np.ndarray:
    filled = np.nan_to_num(col, nan=0.0)
    if impact_type is ImpactType.BENEFIT:
        if col_max > 0:
            return filled / col_max
        return np.zeros_like(filled)
    if impact_type is ImpactType.COST:
        positive = filled > 0
        return np.divide(
            col_min, filled, out=np.zeros_like(filled), where=positive,
        )
    raise UnsupportedImpactTypeError(
        f"No SAW normalization for impact type {impact_type!r}",
        context={"impact_type": impact_type},
    )


def raw_scores(matrix: DecisionMatrix) -> np.ndarray:
    """Weighted sum of normalized values, in [0, 1] for a full weight budget."""
    scores = np.zeros(matrix.shape[0])
    weights = matrix.weight_fractions()

    for j, criterion in enumerate(matrix.criteria):
        w = weights[j]
        if w == 0:
            continue
        col_max, col_min = matrix.column_bounds(j)
        normalized = _normalized_column(
            criterion.impact_type, matrix.values[:, j], col_max, col_min,
        )
        contribution = np.where(matrix.present(j), w * normalized, 0.0)
        scores += contribution
        logger.debug(
            "SAW criterion %s: w=%.3f max=%.3f min=%.3f",
            criterion.name or criterion.id, w, col_max, col_min,
        )

    for candidate, s in zip(matrix.candidates, scores):
        logger.debug("SAW %s -> %.6f", candidate.name or candidate.id, s)
    return scores
