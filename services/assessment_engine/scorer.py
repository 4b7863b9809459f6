# services/assessment_engine/scorer.py
# Turns raw questionnaire answers into normalized per-category scores and rankings.

import logging
import math
from typing import Dict, Any, List, Optional, Sequence

from .models import AssessmentDefinition, AssessmentResponse, CategoryScoreSet, MaturityLevel

logger = logging.getLogger(__name__)

# --- Constants ---

MIN_SCORE = 0
MAX_SCORE = 100
LIKERT_MAX = 5

WARNING_NON_NUMERIC = "non_numeric_answer"
WARNING_CLAMPED = "score_clamped"

_RADIX_PREFIXES = ("0x", "0o", "0b")


# --- Answer Coercion ---

def _parse_number(value: Any) -> Optional[float]:
    """Mirrors JavaScript ``Number(value)``; returns None where that yields NaN."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if text.lower().startswith(_RADIX_PREFIXES):
            try:
                return float(int(text, 0))
            except (ValueError, OverflowError):
                return None
        if "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    if isinstance(value, (list, tuple)):
        if not value:
            return 0.0
        if len(value) == 1:
            return _parse_number(value[0])
    return None


def coerce_answer(value: Any) -> float:
    """Numeric value of an answer; anything non-numeric counts as 0."""
    number = _parse_number(value)
    return number if number is not None else 0.0


def round_half_up(value: float) -> int:
    """Rounds .5 upwards (JavaScript Math.round), unlike Python's round()."""
    return int(math.floor(value + 0.5))


# --- Scoring Functions ---

def calculate_category_scores(
    definition: AssessmentDefinition,
    responses: Optional[AssessmentResponse],
    warnings: Optional[List[str]] = None
) -> CategoryScoreSet:
    """
    Sums each category's answers and normalizes the total to 0-100.

    Every category of the definition gets exactly one entry, in declared order.
    Missing answers count as 0. Non-numeric answers also count as 0 and are
    reported in ``warnings`` when a list is supplied.
    """
    responses = responses or {}
    scores: CategoryScoreSet = {}
    reported = set()

    for category in definition.categories:
        total = 0.0
        for question_id in category.question_ids:
            raw_answer = responses.get(question_id)
            if _parse_number(raw_answer) is None and question_id not in reported:
                reported.add(question_id)
                logger.warning(f"Non-numeric answer for question '{question_id}' in '{definition.slug}' treated as 0")
                if warnings is not None:
                    warnings.append(f"{WARNING_NON_NUMERIC}: question '{question_id}'")
            total += coerce_answer(raw_answer)

        normalized = total / category.divisor * category.scale
        # finite answers can still overflow to inf once summed or scaled
        score = round_half_up(normalized) if math.isfinite(normalized) else normalized
        if not MIN_SCORE <= score <= MAX_SCORE:
            clamped = MAX_SCORE if score > MAX_SCORE else MIN_SCORE
            logger.warning(
                f"Score {score} for '{category.key}' in '{definition.slug}' is out of range; clamped to {clamped}"
            )
            if warnings is not None:
                warnings.append(f"{WARNING_CLAMPED}: category '{category.key}' ({score} -> {clamped})")
            score = clamped
        scores[category.key] = score

    logger.debug(f"Calculated category scores for '{definition.slug}': {scores}")
    return scores


def rank_categories(scores: CategoryScoreSet, order: Sequence[str]) -> List[str]:
    """
    Orders category keys by descending score.

    Equal scores keep their declared table order, so the first-declared
    category wins a tie.
    """
    position = {key: index for index, key in enumerate(order)}
    return sorted(order, key=lambda key: (-scores.get(key, 0), position[key]))


def calculate_overall_score(scores: CategoryScoreSet) -> int:
    """Mean of the area scores, rounded half up."""
    if not scores:
        return 0
    return round_half_up(sum(scores.values()) / len(scores))


def determine_maturity_level(overall_score: int, levels: Sequence[MaturityLevel]) -> MaturityLevel:
    """Picks the highest band whose threshold the overall score reaches."""
    ordered = sorted(levels, key=lambda level: level.min_score, reverse=True)
    for level in ordered:
        if overall_score >= level.min_score:
            return level
    return ordered[-1]
