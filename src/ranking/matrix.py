"""Decision matrix — candidates x criteria values as a numpy array.

Absent values are stored as NaN so that strategies can mask them per
column.  Values for criteria outside the scoring scope are dropped here.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from src.ranking.models import Candidate, Criterion


class DecisionMatrix:
    def __init__(
        self, candidates: Sequence[Candidate], criteria: Sequence[Criterion],
    ) -> None:
        self.candidates = list(candidates)
        self.criteria = list(criteria)
        self.values = np.full((len(self.candidates), len(self.criteria)), np.nan)

        column = {c.id: j for j, c in enumerate(self.criteria)}
        for i, candidate in enumerate(self.candidates):
            for criterion_id, value in candidate.value_map().items():
                j = column.get(criterion_id)
                if j is not None:
                    self.values[i, j] = value

    @property
    def shape(self) -> tuple[int, int]:
        return self.values.shape

    def weight_fractions(self) -> np.ndarray:
        """Criteria weights as fractions of 1 (percent / 100)."""
        return np.array([c.weight / 100 for c in self.criteria], dtype=float)

    def present(self, j: int) -> np.ndarray:
        """Boolean mask of candidates holding a value for column ``j``."""
        return ~np.isnan(self.values[:, j])

    def column_bounds(self, j: int) -> tuple[float, float]:
        """(max, min) of the present values in column ``j``; (0, 0) if none."""
        col = self.values[:, j]
        col = col[~np.isnan(col)]
        if col.size == 0:
            return 0.0, 0.0
        return float(col.max()), float(col.min())
