# tests/assessment/test_engine.py
import pytest

from services.assessment_engine import (
    AssessmentEngine,
    calculate_assessment_result,
    evaluate_assessment,
    SpecValidationError,
)
from services.assessment_engine.engine import BUILTIN_DEFINITIONS
from services.assessment_engine.definitions import DEFAULT_ASSESSMENT_TYPE

ALL_TYPES = list(BUILTIN_DEFINITIONS)
RANKED_TYPES = [slug for slug, d in BUILTIN_DEFINITIONS.items() if d.kind == "ranked"]

# --- Helper Functions ---
def question_ids(slug: str) -> list:
    return [q for c in BUILTIN_DEFINITIONS[slug].categories for q in c.question_ids]

def uniform_responses(slug: str, value) -> dict:
    """Answers every question of the assessment with the same value."""
    return {q: value for q in question_ids(slug)}

def mixed_responses(slug: str) -> dict:
    """Deterministic spread of answers between 1 and 5."""
    return {q: (index % 5) + 1 for index, q in enumerate(question_ids(slug))}

# --- Test Cases ---

def test_builtin_types_available():
    """All six assessment types ship with the engine."""
    assert ALL_TYPES == [
        "spiritual-gifts",
        "seasonal",
        "prophetic-expression",
        "ministry-calling",
        "redemptive-gifts",
        "spiritual-maturity",
    ]
    assert DEFAULT_ASSESSMENT_TYPE == "spiritual-gifts"

@pytest.mark.parametrize("slug", ALL_TYPES)
def test_scoring_is_deterministic(engine, slug):
    """Same input, same result."""
    responses = mixed_responses(slug)
    assert engine.calculate(slug, responses) == engine.calculate(slug, responses)

@pytest.mark.parametrize("slug", ALL_TYPES)
@pytest.mark.parametrize("value", [0, 1, 3, 5, 1000, -1000, "abc"])
def test_scores_stay_in_bounds(engine, slug, value):
    """Every category score lies between 0 and 100."""
    result = engine.calculate(slug, uniform_responses(slug, value))
    assert result.scores
    assert all(0 <= score <= 100 for score in result.scores.values())

@pytest.mark.parametrize("slug", RANKED_TYPES)
def test_ranking_follows_scores(engine, slug):
    """Primary, secondary and tertiary are the three highest scores in order."""
    definition = BUILTIN_DEFINITIONS[slug]
    result = engine.calculate(slug, mixed_responses(slug))

    ranked_scores = [result.scores[key] for key in result.ranking]
    assert ranked_scores == sorted(ranked_scores, reverse=True)
    assert sorted(result.ranking) == sorted(definition.category_keys())

    titles = [definition.get_category(key).narrative.title for key in result.ranking[:3]]
    assert [result.primary_result, result.secondary_result, result.tertiary_result] == titles

@pytest.mark.parametrize("slug", ALL_TYPES)
def test_empty_responses_give_zero_scores(engine, slug):
    """No answers at all still yields a well-formed result."""
    result = engine.calculate(slug, {})
    category_scores = {k: v for k, v in result.scores.items() if k != "overall"}
    assert set(category_scores) == set(BUILTIN_DEFINITIONS[slug].category_keys())
    assert all(score == 0 for score in result.scores.values())
    assert result.primary_result
    assert result.title
    assert result.description

def test_none_responses_treated_as_empty(engine):
    assert engine.calculate("seasonal", None) == engine.calculate("seasonal", {})

@pytest.mark.parametrize("unknown_type", ["nonexistent-type", "", "Spiritual-Gifts", None, 42])
def test_unknown_type_matches_default(engine, unknown_type):
    """Unrecognized types are scored exactly like the default type."""
    responses = mixed_responses("spiritual-gifts")
    assert engine.calculate(unknown_type, responses) == engine.calculate(DEFAULT_ASSESSMENT_TYPE, responses)

def test_unknown_type_is_reported(engine):
    """The fallback is visible on the scoring outcome."""
    outcome = engine.evaluate("nonexistent-type", {})
    assert outcome.requested_type == "nonexistent-type"
    assert outcome.resolved_type == "spiritual-gifts"
    assert outcome.degraded is True
    assert outcome.warnings == [
        "unknown_assessment_type: 'nonexistent-type' (scored as 'spiritual-gifts')"
    ]

def test_clean_submission_not_degraded(engine):
    outcome = engine.evaluate("seasonal", uniform_responses("seasonal", 3))
    assert outcome.resolved_type == "seasonal"
    assert outcome.degraded is False
    assert outcome.warnings == []

def test_non_numeric_answers_degrade_outcome(engine):
    """Non-numeric answers count as 0 and mark the outcome degraded."""
    responses = uniform_responses("ministry-calling", 4)
    responses["1"] = "very much"
    outcome = engine.evaluate("ministry-calling", responses)
    assert outcome.degraded is True
    assert outcome.warnings == ["non_numeric_answer: question '1'"]

    zeroed = dict(responses, **{"1": 0})
    assert outcome.result == engine.calculate("ministry-calling", zeroed)

@pytest.mark.parametrize("responses", [
    {"1": 1e308, "13": 1e308},
    {"1": -1e308, "13": -1e308},
    {"1": 10 ** 400},
    {"1": "0x" + "f" * 400},
])
def test_huge_answers_do_not_raise(engine, responses):
    """Answers at or beyond float range still produce a bounded, degraded outcome."""
    outcome = engine.evaluate("spiritual-gifts", responses)
    assert outcome.degraded is True
    assert all(0 <= score <= 100 for score in outcome.result.scores.values())

def test_overflowing_answers_score_maximum(engine):
    result = engine.calculate("spiritual-gifts", {"1": 1e308, "13": 1e308})
    assert result.scores["administration"] == 100
    assert result.primary_result == "Administration"

# Spiritual gifts
def test_spiritual_gifts_uniform_max_answers(engine):
    """Every gift maxes out and ties resolve in declared order."""
    responses = {str(i): 5 for i in range(1, 21)}
    result = engine.calculate("spiritual-gifts", responses)

    assert result.scores["administration"] == 100
    assert result.scores["faith"] == 100
    assert all(score == 100 for score in result.scores.values())
    assert result.ranking[:3] == ["administration", "mercy", "teaching"]
    assert result.primary_result == "Administration"
    assert result.secondary_result == "Mercy"
    assert result.tertiary_result == "Teaching"
    assert result.title == "Your Spiritual Gifts: Administration, Mercy, Teaching"

def test_spiritual_gifts_single_question_gifts_not_penalized(engine):
    """Gifts measured by one question reach the same score from half the answers."""
    result = engine.calculate("spiritual-gifts", {"1": 5, "9": 5})
    # administration has two questions, faith only one
    assert result.scores["administration"] == 50
    assert result.scores["faith"] == 100
    assert result.primary_result == "Faith"

def test_spiritual_gifts_primary_narrative(engine):
    """The primary gift supplies the full narrative."""
    result = engine.calculate("spiritual-gifts", {"3": 5, "12": 5, "2": 4, "14": 4, "5": 3})
    definition = BUILTIN_DEFINITIONS["spiritual-gifts"]
    teaching = definition.get_category("teaching").narrative

    assert result.primary_result == "Teaching"
    assert result.secondary_result == "Mercy"
    assert result.tertiary_result == "Serving/Helps"
    assert result.description == teaching.description
    assert result.strengths == teaching.strengths
    assert result.growth_areas == teaching.growth_areas
    assert result.ministry_recommendations == teaching.ministries
    assert result.scripture_references == teaching.scriptures
    assert result.next_steps == teaching.next_steps

def test_string_answers_coerced(engine):
    """Numeric strings score like numbers."""
    numeric = engine.calculate("prophetic-expression", uniform_responses("prophetic-expression", 4))
    textual = engine.calculate("prophetic-expression", uniform_responses("prophetic-expression", "4"))
    assert numeric == textual

# Seasonal
def test_seasonal_all_zero_responses(engine):
    """With every season tied at 0, spring comes first."""
    result = engine.calculate("seasonal", {})
    assert result.scores == {"spring": 0, "summer": 0, "fall": 0, "winter": 0}
    assert result.ranking[0] == "spring"
    assert result.primary_result == "Spring - Season of New Beginnings"
    assert result.title == "Spring - Season of New Beginnings"

def test_seasonal_fixed_divisors(engine):
    responses = {"5": 5, "7": 5, "9": 5, "12": 5, "2": 5}
    result = engine.calculate("seasonal", responses)
    assert result.scores["winter"] == 100
    assert result.scores["fall"] == 50
    assert result.primary_result == "Winter - Season of Rest & Testing"

# Redemptive gifts and ministry calling
def test_redemptive_gifts_three_question_gift(engine):
    result = engine.calculate("redemptive-gifts", {"4": 5, "11": 5, "18": 5})
    assert result.scores["exhorter"] == 100
    assert result.primary_result == "Exhorter (Encourager)"
    assert result.title == "Your Redemptive Gift: Exhorter (Encourager)"

def test_ministry_calling_two_question_calling(engine):
    result = engine.calculate("ministry-calling", {"7": 5, "14": 4})
    assert result.scores["prayer"] == 90
    assert result.primary_result == "Prayer Ministry"

# Spiritual maturity
@pytest.mark.parametrize("value, level", [
    (5, "Mature"),
    (4, "Mature"),
    (3, "Growing"),
    (2, "Developing"),
    (1, "Beginning"),
    (0, "Beginning"),
])
def test_spiritual_maturity_levels(engine, value, level):
    result = engine.calculate("spiritual-maturity", uniform_responses("spiritual-maturity", value))
    assert result.primary_result == level
    assert result.title == f"Spiritual Maturity Level: {level}"

def test_spiritual_maturity_strongest_and_weakest(engine):
    """Secondary is the strongest area, tertiary the weakest."""
    responses = {}
    for value, key in zip([5, 4, 3, 2, 1], ["knowledge", "prayer", "character", "service", "disciplines"]):
        for q in BUILTIN_DEFINITIONS["spiritual-maturity"].get_category(key).question_ids:
            responses[q] = value
    result = engine.calculate("spiritual-maturity", responses)

    assert result.scores == {
        "knowledge": 100, "prayer": 80, "character": 60, "service": 40, "disciplines": 20, "overall": 60,
    }
    assert result.primary_result == "Growing"
    assert result.secondary_result == "Biblical Knowledge"
    assert result.tertiary_result == "Spiritual Disciplines"
    assert result.strengths == [
        "Strong in Biblical Knowledge",
        "Developing well in Prayer Life",
        "Overall score of 60%",
    ]
    assert result.growth_areas[:2] == [
        "Focus on developing Spiritual Disciplines",
        "Build consistency in Service & Ministry",
    ]
    assert result.next_steps[0] == "Take a course or read a book on spiritual disciplines"

def test_spiritual_maturity_empty_responses(engine):
    result = engine.calculate("spiritual-maturity", {})
    assert result.scores["overall"] == 0
    assert result.primary_result == "Beginning"
    assert result.secondary_result == "Biblical Knowledge"
    assert result.tertiary_result == "Spiritual Disciplines"

# Engine construction and listing
def test_engine_rejects_undefined_default_type():
    with pytest.raises(SpecValidationError, match="Default assessment type 'missing'"):
        AssessmentEngine(default_type="missing")

def test_engine_custom_default_type():
    custom = AssessmentEngine(default_type="seasonal")
    assert custom.resolve_type("unknown") == ("seasonal", True)
    assert custom.resolve_type("seasonal") == ("seasonal", False)
    assert custom.calculate("unknown", {}).primary_result == "Spring - Season of New Beginnings"

def test_list_assessments(engine):
    summaries = {s["slug"]: s for s in engine.list_assessments()}
    assert list(summaries) == ALL_TYPES
    gifts = summaries["spiritual-gifts"]
    assert gifts["kind"] == "ranked"
    assert gifts["categories"][0] == "administration"
    assert gifts["question_ids"] == [str(i) for i in range(1, 21)]
    assert summaries["spiritual-maturity"]["kind"] == "maturity"

def test_module_level_helpers():
    responses = mixed_responses("redemptive-gifts")
    assert calculate_assessment_result("redemptive-gifts", responses) == AssessmentEngine().calculate(
        "redemptive-gifts", responses
    )
    outcome = evaluate_assessment("redemptive-gifts", responses)
    assert outcome.resolved_type == "redemptive-gifts"
    assert outcome.result == calculate_assessment_result("redemptive-gifts", responses)
