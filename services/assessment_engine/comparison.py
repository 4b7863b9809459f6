# services/assessment_engine/comparison.py
# Compares a retake with the member's previous result for the same assessment.

import logging

from .models import AssessmentResult, ResultComparison
from .results_generator import OVERALL_SCORE_KEY

logger = logging.getLogger(__name__)

RESULT_NOUNS = {
    "spiritual-gifts": "gift",
    "redemptive-gifts": "gift",
    "prophetic-expression": "expression",
    "ministry-calling": "calling",
}


def _compare_top_category(previous: AssessmentResult, current: AssessmentResult, noun: str, changes: ResultComparison) -> None:
    if not previous.ranking or not current.ranking:
        return
    previous_top, current_top = previous.ranking[0], current.ranking[0]

    if previous_top != current_top:
        changes.has_changes = True
        changes.summary = f"Your top {noun} changed from {previous.primary_result} to {current.primary_result}"
        return

    previous_score = previous.scores.get(previous_top, 0)
    current_score = current.scores.get(current_top, 0)
    if current_score > previous_score:
        changes.has_changes = True
        changes.improvements.append(f"{current.primary_result} increased by {current_score - previous_score}%")
        changes.summary = f"Your {current.primary_result} {noun} has strengthened"


def _compare_season(previous: AssessmentResult, current: AssessmentResult, changes: ResultComparison) -> None:
    if previous.primary_result != current.primary_result:
        changes.has_changes = True
        changes.summary = f"You've transitioned from {previous.primary_result} to {current.primary_result}"


def _compare_maturity(previous: AssessmentResult, current: AssessmentResult, changes: ResultComparison) -> None:
    previous_overall = previous.scores.get(OVERALL_SCORE_KEY)
    current_overall = current.scores.get(OVERALL_SCORE_KEY)
    # a zero overall on either side counts as missing
    if not previous_overall or not current_overall:
        return

    diff = current_overall - previous_overall
    if diff > 0:
        changes.has_changes = True
        changes.improvements.append(f"Overall maturity increased by {diff}%")
        changes.summary = f"You've grown {diff}% in spiritual maturity"
    elif diff < 0:
        changes.has_changes = True
        changes.declines.append(f"Overall maturity decreased by {abs(diff)}%")
        changes.summary = "This may reflect honest self-assessment or a challenging season"


def compare_results(previous: AssessmentResult, current: AssessmentResult, assessment_type: str) -> ResultComparison:
    """Describes what changed between two results of the same assessment type."""
    changes = ResultComparison(assessment_type=assessment_type)

    if assessment_type == "seasonal":
        _compare_season(previous, current, changes)
    elif assessment_type == "spiritual-maturity":
        _compare_maturity(previous, current, changes)
    elif assessment_type in RESULT_NOUNS:
        _compare_top_category(previous, current, RESULT_NOUNS[assessment_type], changes)
    else:
        logger.info(f"No comparison rules for assessment type '{assessment_type}'")

    return changes
