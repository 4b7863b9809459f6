import logging
from types import MappingProxyType
from typing import Dict, List, Any, Mapping, Optional, Tuple

from .comparison import compare_results
from .definitions import ASSESSMENT_DEFINITIONS, DEFAULT_ASSESSMENT_TYPE
from .loader import load_assessment_definitions, load_assessment_definitions_from_file
from .models import (
    AssessmentDefinition,
    AssessmentResponse,
    AssessmentResult,
    ResultComparison,
    ScoringOutcome,
    SpecValidationError,
)
from .results_generator import generate_maturity_result, generate_ranked_result
from .scorer import calculate_category_scores, rank_categories

logger = logging.getLogger(__name__)

WARNING_UNKNOWN_TYPE = "unknown_assessment_type"

# Validated once at import; shared read-only by every engine using the built-in tables.
BUILTIN_DEFINITIONS: Mapping[str, AssessmentDefinition] = MappingProxyType(
    load_assessment_definitions(ASSESSMENT_DEFINITIONS)
)


class AssessmentEngine:
    """
    Scores questionnaire responses against a fixed set of assessment definitions.

    The engine holds no per-call state; one instance can serve any number of
    concurrent callers.
    """
    def __init__(
        self,
        definitions: Optional[Mapping[str, AssessmentDefinition]] = None,
        definitions_path: Optional[str] = None,
        default_type: str = DEFAULT_ASSESSMENT_TYPE
    ):
        """
        Args:
            definitions: Pre-validated slug -> definition mapping. Defaults to
                the built-in tables.
            definitions_path: YAML file to load definitions from instead.
            default_type: Slug used when a caller asks for an unknown type.
        """
        if definitions_path is not None:
            definitions = load_assessment_definitions_from_file(definitions_path)
            logger.info(f"Loaded assessment definitions from {definitions_path}")
        elif definitions is None:
            definitions = BUILTIN_DEFINITIONS

        if default_type not in definitions:
            raise SpecValidationError(f"Default assessment type '{default_type}' is not defined")

        self.definitions: Mapping[str, AssessmentDefinition] = MappingProxyType(dict(definitions))
        self.default_type = default_type

    def resolve_type(self, assessment_type: Any) -> Tuple[str, bool]:
        """Returns the slug that will actually be scored and whether it is a fallback."""
        if isinstance(assessment_type, str) and assessment_type in self.definitions:
            return assessment_type, False
        return self.default_type, True

    def _score(
        self,
        definition: AssessmentDefinition,
        responses: Optional[AssessmentResponse],
        warnings: Optional[List[str]]
    ) -> AssessmentResult:
        scores = calculate_category_scores(definition, responses, warnings)
        ranking = rank_categories(scores, definition.category_keys())
        if definition.kind == "maturity":
            return generate_maturity_result(definition, scores, ranking)
        return generate_ranked_result(definition, scores, ranking, warnings)

    def calculate(self, assessment_type: Any, responses: Optional[AssessmentResponse]) -> AssessmentResult:
        """
        Scores ``responses`` for ``assessment_type``.

        An unrecognized type is scored as the default type; the result is the
        same as asking for the default type directly.
        """
        return self.evaluate(assessment_type, responses).result

    def evaluate(self, assessment_type: Any, responses: Optional[AssessmentResponse]) -> ScoringOutcome:
        """Like ``calculate`` but also reports every fallback that was taken."""
        warnings: List[str] = []
        resolved_type, is_fallback = self.resolve_type(assessment_type)
        if is_fallback:
            logger.warning(f"Unknown assessment type '{assessment_type}'; scoring as '{resolved_type}'")
            warnings.append(f"{WARNING_UNKNOWN_TYPE}: '{assessment_type}' (scored as '{resolved_type}')")

        result = self._score(self.definitions[resolved_type], responses, warnings)
        logger.debug(f"Scored '{resolved_type}': primary={result.primary_result!r} scores={result.scores}")
        return ScoringOutcome(
            requested_type=str(assessment_type),
            resolved_type=resolved_type,
            degraded=bool(warnings),
            warnings=warnings,
            result=result,
        )

    def compare(self, previous: AssessmentResult, current: AssessmentResult, assessment_type: str) -> ResultComparison:
        """Describes what changed between a previous result and a retake of the same type."""
        return compare_results(previous, current, assessment_type)

    def list_assessments(self) -> List[Dict[str, Any]]:
        """Summaries of the available assessment types for presentation."""
        return [
            {
                "slug": d.slug,
                "name": d.name,
                "kind": d.kind,
                "categories": d.category_keys(),
                "question_ids": sorted(
                    {q for c in d.categories for q in c.question_ids},
                    key=lambda q: (not q.isdigit(), int(q) if q.isdigit() else 0, q),
                ),
            }
            for d in self.definitions.values()
        ]


_default_engine = AssessmentEngine()


def calculate_assessment_result(assessment_type: Any, responses: Optional[AssessmentResponse]) -> AssessmentResult:
    """Scores responses with the built-in assessment tables."""
    return _default_engine.calculate(assessment_type, responses)


def evaluate_assessment(assessment_type: Any, responses: Optional[AssessmentResponse]) -> ScoringOutcome:
    """Scores responses with the built-in tables and reports any fallbacks taken."""
    return _default_engine.evaluate(assessment_type, responses)
