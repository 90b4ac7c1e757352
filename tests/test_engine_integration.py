"""Integration-level tests — sample data loading and group evaluation."""

import json

from src.ranking.engine import DATA_DIR, evaluate_group, load_groups_from_json, load_sample_groups, run
from src.ranking.models import (
    Candidate,
    CandidateValue,
    CriteriaGroup,
    Criterion,
    DecisionMethod,
    GroupStatus,
)
from src.ranking.weights import auto_balance


def test_sample_groups_load():
    path = DATA_DIR / "sample_groups.json"
    assert path.exists(), f"Missing {path}"
    with open(path) as f:
        raw = json.load(f)
    groups = load_groups_from_json(raw)
    assert len(groups) == 3
    for group, criteria, candidates in groups:
        assert group.id
        assert criteria
        assert all(c.id for c in candidates)


def test_sample_run_statuses():
    outcomes = run(load_sample_groups())
    assert [o.status for o in outcomes] == [
        GroupStatus.READY,
        GroupStatus.READY,
        GroupStatus.INVALID_WEIGHTS,
    ]
    assert outcomes[2].results == []


def test_sample_wpm_group():
    laptops = run(load_sample_groups())[0]
    assert laptops.group.method is DecisionMethod.WPM
    assert [r.candidate_id for r in laptops.results] == ["l1", "l3", "l2"]
    assert laptops.results[0].score == 100
    assert [r.rank for r in laptops.results] == [1, 2, 3]


def test_sample_saw_group():
    suppliers = run(load_sample_groups())[1]
    assert suppliers.group.method is DecisionMethod.SAW
    assert [r.candidate_id for r in suppliers.results] == ["s2", "s1", "s3"]
    scores = [r.score for r in suppliers.results]
    assert scores[0] == 100
    assert abs(scores[1] - 0.79 / 0.86 * 100) < 1e-9
    assert abs(scores[2] - 0.62 / 0.86 * 100) < 1e-9


def test_missing_criteria_and_candidates():
    group = CriteriaGroup(id="g", name="G")
    assert evaluate_group(group, [], []).status is GroupStatus.MISSING_CRITERIA
    criteria = [Criterion(id="a", weight=100)]
    assert evaluate_group(group, criteria, []).status is GroupStatus.MISSING_CANDIDATES


def test_auto_balance_repairs_invalid_group():
    group, criteria, candidates = load_sample_groups()[2]
    assert evaluate_group(group, criteria, candidates).status is GroupStatus.INVALID_WEIGHTS

    repaired = evaluate_group(group, auto_balance(criteria), candidates)
    assert repaired.status is GroupStatus.READY
    assert repaired.results[0].candidate_id == "d1"


def test_values_snapshot_in_results():
    group = CriteriaGroup(id="g", method=DecisionMethod.SAW)
    criteria = [Criterion(id="a", weight=100)]
    candidates = [
        Candidate(id="x", name="X", values=[
            CandidateValue(criterion_id="a", value=2),
            CandidateValue(criterion_id="note", value=7),
        ]),
    ]
    result = evaluate_group(group, criteria, candidates).results[0]
    assert result.values == {"a": 2.0, "note": 7.0}
    assert result.score == 100
