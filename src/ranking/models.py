"""Pydantic v2 data models — the data contracts flowing through the system."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


SCALE_MIN = 1
SCALE_MAX = 5


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ImpactType(str, Enum):
    BENEFIT = "BENEFIT"
    COST = "COST"


class DataType(str, Enum):
    NUMERIC = "NUMERIC"
    SCALE = "SCALE"

    @property
    def default_value(self) -> float:
        """Value pre-filled for a new candidate entry."""
        if self is DataType.SCALE:
            return float((SCALE_MIN + SCALE_MAX) // 2)
        return 0.0


class DecisionMethod(str, Enum):
    WPM = "WPM"
    SAW = "SAW"


class GroupStatus(str, Enum):
    READY = "ready"
    MISSING_CRITERIA = "missing_criteria"
    MISSING_CANDIDATES = "missing_candidates"
    INVALID_WEIGHTS = "invalid_weights"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class _Contract(BaseModel):
    """Accepts both snake_case and the camelCase keys of the wire contract."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Criterion(_Contract):
    id: str
    name: str = ""
    weight: float = 0.0
    is_weight_locked: bool = False
    impact_type: ImpactType = ImpactType.BENEFIT
    data_type: DataType = DataType.NUMERIC
    group_id: str | None = None


class Weight(_Contract):
    criterion_id: str
    weight: float = 0.0
    is_locked: bool = False


class CandidateValue(_Contract):
    criterion_id: str
    value: float = Field(allow_inf_nan=False)
    candidate_id: str | None = None


class Candidate(_Contract):
    id: str
    name: str = ""
    values: list[CandidateValue] = Field(default_factory=list)

    def value_map(self) -> dict[str, float]:
        """criterion_id -> value; a later entry for the same criterion wins."""
        return {v.criterion_id: v.value for v in self.values}


class CriteriaGroup(_Contract):
    id: str
    name: str = ""
    description: str | None = None
    method: DecisionMethod = DecisionMethod.WPM


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------

class DecisionResult(_Contract):
    model_config = ConfigDict(frozen=True)

    candidate_id: str
    candidate_name: str
    score: float
    rank: int = Field(ge=1)
    values: dict[str, float] = Field(default_factory=dict)


class GroupResult(BaseModel):
    group: CriteriaGroup
    criteria: list[Criterion] = Field(default_factory=list)
    results: list[DecisionResult] = Field(default_factory=list)
    status: GroupStatus
