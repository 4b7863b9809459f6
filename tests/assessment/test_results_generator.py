import pytest

from services.assessment_engine.models import AssessmentDefinition
from services.assessment_engine.results_generator import (
    generate_ranked_result,
    generate_maturity_result,
    WARNING_MISSING_NARRATIVE,
    OVERALL_SCORE_KEY,
)


def narrative(title: str) -> dict:
    return {
        "title": title,
        "description": f"{title} description",
        "strengths": [f"{title} strength"],
        "growth_areas": [f"{title} growth"],
        "ministries": [f"{title} ministry"],
        "scriptures": [f"{title} 1:1"],
        "next_steps": [f"{title} step"],
    }


@pytest.fixture
def ranked_definition():
    return AssessmentDefinition.model_validate({
        "slug": "sample",
        "name": "Sample",
        "title_template": "Top: {primary} / {secondary} / {tertiary}",
        "fallbacks": {"primary": "alpha", "secondary": "gamma"},
        "categories": [
            {"key": "alpha", "question_ids": ["1"], "divisor": 5, "narrative": narrative("Alpha")},
            {"key": "beta", "question_ids": ["2"], "divisor": 5},
            {"key": "gamma", "question_ids": ["3"], "divisor": 5, "narrative": narrative("Gamma")},
        ],
    })


@pytest.fixture
def maturity_definition():
    return AssessmentDefinition.model_validate({
        "slug": "growth",
        "name": "Growth",
        "kind": "maturity",
        "title_template": "Level: {primary}",
        "maturity_levels": [
            {"key": "high", "title": "High", "min_score": 50, "description": "Doing well"},
            {"key": "low", "title": "Low", "min_score": 0, "description": "Just starting"},
        ],
        "scripture_references": ["Hebrews 5:14"],
        "ministry_recommendations": ["Small group"],
        "categories": [
            {"key": "reading", "question_ids": ["1"], "divisor": 5, "narrative": narrative("Reading")},
            {"key": "prayer", "question_ids": ["2"], "divisor": 5, "narrative": narrative("Prayer")},
            {"key": "giving", "question_ids": ["3"], "divisor": 5},
        ],
    })


def test_ranked_result_uses_primary_narrative(ranked_definition):
    scores = {"alpha": 20, "beta": 40, "gamma": 60}
    result = generate_ranked_result(ranked_definition, scores, ["gamma", "alpha", "beta"])

    assert result.primary_result == "Gamma"
    assert result.secondary_result == "Alpha"
    assert result.description == "Gamma description"
    assert result.strengths == ["Gamma strength"]
    assert result.ministry_recommendations == ["Gamma ministry"]
    assert result.scripture_references == ["Gamma 1:1"]
    assert result.next_steps == ["Gamma step"]
    assert result.scores == scores
    assert result.ranking == ["gamma", "alpha", "beta"]


def test_missing_primary_narrative_falls_back(ranked_definition):
    """A top category without narrative is replaced by the primary fallback."""
    warnings = []
    result = generate_ranked_result(
        ranked_definition, {"alpha": 0, "beta": 100, "gamma": 0}, ["beta", "alpha", "gamma"], warnings
    )

    assert result.primary_result == "Alpha"
    assert result.description == "Alpha description"
    assert result.scores["beta"] == 100
    assert result.ranking[0] == "beta"
    assert warnings == [f"{WARNING_MISSING_NARRATIVE}: primary category 'beta'"]


def test_missing_secondary_narrative_falls_back(ranked_definition):
    warnings = []
    result = generate_ranked_result(
        ranked_definition, {"alpha": 100, "beta": 50, "gamma": 0}, ["alpha", "beta", "gamma"], warnings
    )
    assert result.secondary_result == "Gamma"
    assert result.title == "Top: Alpha / Gamma / Gamma"
    assert warnings == [f"{WARNING_MISSING_NARRATIVE}: secondary category 'beta'"]


def test_missing_slot_without_fallback_is_blank(ranked_definition):
    """A slot with neither narrative nor fallback gets an empty title."""
    result = generate_ranked_result(
        ranked_definition, {"alpha": 100, "beta": 0, "gamma": 50}, ["alpha", "gamma", "beta"]
    )
    assert result.tertiary_result == ""
    assert result.title == "Top: Alpha / Gamma / "


def test_maturity_result(maturity_definition):
    scores = {"reading": 80, "prayer": 60, "giving": 20}
    result = generate_maturity_result(maturity_definition, scores, ["reading", "prayer", "giving"])

    assert result.primary_result == "High"
    assert result.title == "Level: High"
    assert result.description == "Doing well"
    assert result.scores[OVERALL_SCORE_KEY] == 53
    assert result.secondary_result == "Reading"
    # no narrative and no fallback: the key itself is shown
    assert result.tertiary_result == "giving"
    assert result.strengths == ["Strong in Reading", "Developing well in Prayer", "Overall score of 53%"]
    assert result.growth_areas[1] == "Build consistency in Prayer"
    assert result.ministry_recommendations == ["Small group"]
    assert result.scripture_references == ["Hebrews 5:14"]


def test_maturity_result_does_not_mutate_scores(maturity_definition):
    scores = {"reading": 0, "prayer": 0, "giving": 0}
    result = generate_maturity_result(maturity_definition, scores, ["reading", "prayer", "giving"])
    assert OVERALL_SCORE_KEY not in scores
    assert result.primary_result == "Low"
