"""Unit tests for the data contracts and settings."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from src.ranking.config import Settings
from src.ranking.models import (
    Candidate,
    CandidateValue,
    Criterion,
    CriteriaGroup,
    DataType,
    DecisionMethod,
    DecisionResult,
    ImpactType,
)


class TestCriterion:
    def test_camel_case_contract(self):
        c = Criterion(**{
            "id": "price",
            "weight": 40,
            "isWeightLocked": True,
            "impactType": "COST",
            "dataType": "SCALE",
        })
        assert c.is_weight_locked
        assert c.impact_type is ImpactType.COST
        assert c.data_type is DataType.SCALE

    def test_defaults(self):
        c = Criterion(id="x")
        assert c.weight == 0
        assert not c.is_weight_locked

    def test_unknown_impact_type_rejected(self):
        with pytest.raises(ValidationError):
            Criterion(id="x", impact_type="NEUTRAL")


class TestDataType:
    def test_default_entry_values(self):
        assert DataType.SCALE.default_value == 3
        assert DataType.NUMERIC.default_value == 0


class TestCandidate:
    def test_last_value_wins(self):
        cand = Candidate(
            id="x",
            values=[
                CandidateValue(criterion_id="a", value=1),
                CandidateValue(criterion_id="a", value=2),
            ],
        )
        assert cand.value_map() == {"a": 2.0}

    def test_non_finite_value_rejected(self):
        with pytest.raises(ValidationError):
            CandidateValue(criterion_id="a", value=math.nan)
        with pytest.raises(ValidationError):
            CandidateValue(criterion_id="a", value=math.inf)


class TestCriteriaGroup:
    def test_method_defaults_to_wpm(self):
        assert CriteriaGroup(id="g").method is DecisionMethod.WPM


class TestDecisionResult:
    def test_dump_uses_wire_names(self):
        r = DecisionResult(candidate_id="x", candidate_name="X", score=100, rank=1)
        dumped = r.model_dump(by_alias=True)
        assert dumped["candidateId"] == "x"
        assert dumped["candidateName"] == "X"

    def test_rank_must_be_positive(self):
        with pytest.raises(ValidationError):
            DecisionResult(candidate_id="x", candidate_name="X", score=1, rank=0)


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.weight_total == 100
        assert s.weight_tolerance == 0.01
        assert s.default_method is DecisionMethod.WPM
        assert s.tie_break == "input_order"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("RANKING_DEFAULT_METHOD", "SAW")
        monkeypatch.setenv("RANKING_TIE_BREAK", "candidate_id")
        s = Settings(_env_file=None)
        assert s.default_method is DecisionMethod.SAW
        assert s.tie_break == "candidate_id"
