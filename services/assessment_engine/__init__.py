from .engine import AssessmentEngine, calculate_assessment_result, evaluate_assessment
from .models import AssessmentResult, ScoringOutcome, ResultComparison, SpecValidationError

__all__ = [
    "AssessmentEngine",
    "calculate_assessment_result",
    "evaluate_assessment",
    "AssessmentResult",
    "ScoringOutcome",
    "ResultComparison",
    "SpecValidationError",
]
