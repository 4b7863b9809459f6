# services/assessment_engine/results_generator.py
# Builds the user-facing result (titles and narrative lists) from ranked scores.

import logging
from typing import Dict, List, Optional

from .models import AssessmentDefinition, AssessmentResult, CategoryNarrative, CategoryScoreSet
from .scorer import calculate_overall_score, determine_maturity_level

logger = logging.getLogger(__name__)

WARNING_MISSING_NARRATIVE = "missing_narrative"

OVERALL_SCORE_KEY = "overall"


def _narrative_for(definition: AssessmentDefinition, key: Optional[str]) -> Optional[CategoryNarrative]:
    category = definition.get_category(key)
    return category.narrative if category is not None else None


def _resolve_slot(
    definition: AssessmentDefinition,
    key: Optional[str],
    slot: str,
    warnings: Optional[List[str]]
) -> Optional[CategoryNarrative]:
    """Narrative for a ranked slot, substituting the slot's fallback category when absent."""
    narrative = _narrative_for(definition, key)
    if narrative is not None:
        return narrative

    fallback_key = getattr(definition.fallbacks, slot)
    logger.warning(
        f"No narrative for {slot} category '{key}' in '{definition.slug}'; using fallback '{fallback_key}'"
    )
    if warnings is not None:
        warnings.append(f"{WARNING_MISSING_NARRATIVE}: {slot} category '{key}'")
    return _narrative_for(definition, fallback_key)


def generate_ranked_result(
    definition: AssessmentDefinition,
    scores: CategoryScoreSet,
    ranking: List[str],
    warnings: Optional[List[str]] = None
) -> AssessmentResult:
    """
    Assembles the result for a ranked assessment.

    The primary category supplies the full narrative; secondary and tertiary
    only contribute their titles.
    """
    primary_key, secondary_key, tertiary_key = (ranking + [None, None, None])[:3]

    primary = _resolve_slot(definition, primary_key, "primary", warnings)
    secondary = _resolve_slot(definition, secondary_key, "secondary", warnings)
    tertiary = _resolve_slot(definition, tertiary_key, "tertiary", warnings)

    secondary_title = secondary.title if secondary else ""
    tertiary_title = tertiary.title if tertiary else ""

    return AssessmentResult(
        primary_result=primary.title,
        secondary_result=secondary_title,
        tertiary_result=tertiary_title,
        scores=dict(scores),
        title=definition.title_template.format(
            primary=primary.title, secondary=secondary_title, tertiary=tertiary_title
        ),
        description=primary.description,
        strengths=list(primary.strengths),
        growth_areas=list(primary.growth_areas),
        ministry_recommendations=list(primary.ministries),
        scripture_references=list(primary.scriptures),
        next_steps=list(primary.next_steps),
        ranking=list(ranking),
    )


def _area_title(definition: AssessmentDefinition, key: str) -> str:
    narrative = _narrative_for(definition, key)
    return narrative.title if narrative else key


def generate_maturity_result(
    definition: AssessmentDefinition,
    scores: CategoryScoreSet,
    ranking: List[str]
) -> AssessmentResult:
    """
    Assembles the spiritual maturity result.

    ``primary_result`` is the maturity level, ``secondary_result`` the strongest
    area and ``tertiary_result`` the weakest one. ``scores`` gains an
    ``overall`` entry.
    """
    overall = calculate_overall_score(scores)
    level = determine_maturity_level(overall, definition.maturity_levels)

    strongest, second_strongest, weakest = ranking[0], ranking[1], ranking[-1]
    lowest_two = ranking[-2:]

    strongest_narrative = _narrative_for(definition, strongest) or _narrative_for(definition, definition.fallbacks.secondary)
    weakest_narrative = _narrative_for(definition, weakest) or _narrative_for(definition, definition.fallbacks.tertiary)
    strongest_title = strongest_narrative.title if strongest_narrative else strongest
    weakest_title = weakest_narrative.title if weakest_narrative else weakest

    all_scores: Dict[str, int] = dict(scores)
    all_scores[OVERALL_SCORE_KEY] = overall

    logger.debug(f"Maturity overall={overall} level={level.key} strongest={strongest} weakest={weakest}")
    return AssessmentResult(
        primary_result=level.title,
        secondary_result=strongest_title,
        tertiary_result=weakest_title,
        scores=all_scores,
        title=definition.title_template.format(primary=level.title, secondary=strongest_title, tertiary=weakest_title),
        description=level.description,
        strengths=[
            f"Strong in {strongest_title}",
            f"Developing well in {_area_title(definition, second_strongest)}",
            f"Overall score of {overall}%",
        ],
        growth_areas=[
            f"Focus on developing {weakest_title}",
            f"Build consistency in {_area_title(definition, lowest_two[0])}",
            "Consider finding a mentor in your growth areas",
        ],
        ministry_recommendations=list(definition.ministry_recommendations),
        scripture_references=list(definition.scripture_references),
        next_steps=[
            f"Take a course or read a book on {weakest_title.lower()}",
            "Find an accountability partner for growth",
            "Set specific, measurable goals for spiritual development",
        ],
        ranking=list(ranking),
    )
