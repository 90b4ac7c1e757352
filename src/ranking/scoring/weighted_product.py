"""Weighted Product Model (WPM).

    S_i = prod_j x_ij ** (+w_j)   for BENEFIT criteria
                     ** (-w_j)   for COST criteria

``w_j`` is the criterion weight as a fraction of 1.  A criterion is skipped
(multiplicative identity) for a candidate when its weight is zero, when the
candidate has no value for it, or when the value is not positive, since a
non-positive base has no real power under a fractional exponent.  The last
case is logged as a warning and the remaining criteria still count.
"""

from __future__ import annotations

import logging

import numpy as np

from src.ranking.exceptions import UnsupportedImpactTypeError
from src.ranking.matrix import DecisionMatrix
from src.ranking.models import ImpactType

logger = logging.getLogger(__name__)


def _exponent(impact_type: ImpactType, w: float) -> float:
    if impact_type is ImpactType.BENEFIT:
        return w
    if impact_type is ImpactType.COST:
        return -w
    raise UnsupportedImpactTypeError(
        f"No WPM exponent for impact type {impact_type!r}",
        context={"impact_type": impact_type},
    )


def _warn_invalid(matrix: DecisionMatrix, j: int, invalid: np.ndarray) -> None:
    criterion = matrix.criteria[j]
    for i in np.flatnonzero(invalid):
        candidate = matrix.candidates[i]
        logger.warning(
            "Invalid value for exponent: %s for criterion %s in candidate %s "
            "(skipped)",
            matrix.values[i, j], criterion.name or criterion.id,
            candidate.name or candidate.id,
        )


def raw_scores(matrix: DecisionMatrix) -> np.ndarray:
    """One positive score per candidate, 1.0 when no criterion contributed."""
    scores = np.ones(matrix.shape[0])
    weights = matrix.weight_fractions()

    for j, criterion in enumerate(matrix.criteria):
        w = weights[j]
        if w == 0:
            continue
        exponent = _exponent(criterion.impact_type, w)

        col = matrix.values[:, j]
        present = matrix.present(j)
        positive = present & (np.nan_to_num(col, nan=0.0) > 0)
        invalid = present & ~positive
        if invalid.any():
            _warn_invalid(matrix, j, invalid)

        bases = np.where(positive, col, 1.0)
        scores *= np.power(bases, exponent)

    for candidate, s in zip(matrix.candidates, scores):
        logger.debug("WPM %s -> %.6f", candidate.name or candidate.id, s)
    return scores
