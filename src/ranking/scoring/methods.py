"""Strategy registry — decision method to raw-score function."""

from __future__ import annotations

from typing import Callable

import numpy as np

from src.ranking.exceptions import UnknownMethodError
from src.ranking.matrix import DecisionMatrix
from src.ranking.models import DecisionMethod
from src.ranking.scoring import simple_additive, weighted_product

ScoreFn = Callable[[DecisionMatrix], np.ndarray]

STRATEGIES: dict[DecisionMethod, ScoreFn] = {
    DecisionMethod.WPM: weighted_product.raw_scores,
    DecisionMethod.SAW: simple_additive.raw_scores,
}


def get_strategy(method: DecisionMethod) -> ScoreFn:
    try:
        return STRATEGIES[DecisionMethod(method)]
    except (KeyError, ValueError) as exc:
        raise UnknownMethodError(
            f"No scoring strategy for method {method!r}",
            context={"method": method},
        ) from exc
