from functools import lru_cache
from typing import List, Optional
import logging

from fastapi import APIRouter, HTTPException, Depends
from pydantic import ValidationError

from src.core.config import ServiceSettings, get_settings
from src.schemas.assessment import AssessmentSummary, CompareRequest, ScoreRequest
from services.assessment_engine.engine import AssessmentEngine
from services.assessment_engine.models import ResultComparison, ScoringOutcome, SpecValidationError

router = APIRouter()
logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def _build_engine(definitions_path: Optional[str]) -> AssessmentEngine:
    return AssessmentEngine(definitions_path=definitions_path)


def get_assessment_engine(settings: ServiceSettings = Depends(get_settings)) -> AssessmentEngine:
    try:
        return _build_engine(settings.definitions_path)
    except (SpecValidationError, ValidationError) as e:
        logger.error(f"Assessment definitions could not be loaded from {settings.definitions_path}: {e}")
        raise HTTPException(status_code=500, detail="Assessment definitions are misconfigured")


@router.get("/assessments", response_model=List[AssessmentSummary])
async def list_assessments(engine: AssessmentEngine = Depends(get_assessment_engine)):
    """Lists the assessment types this service can score."""
    return engine.list_assessments()


@router.post("/assessments/score", response_model=ScoringOutcome)
async def score_assessment(
    request: ScoreRequest,
    engine: AssessmentEngine = Depends(get_assessment_engine)
):
    """
    Scores a questionnaire submission.

    Malformed answers and unknown assessment types never fail the request; the
    outcome is marked ``degraded`` and lists what was substituted.
    """
    try:
        outcome = engine.evaluate(request.assessment_type, request.responses)
    except Exception as e:
        logger.exception(f"Unexpected error while scoring '{request.assessment_type}': {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")

    if outcome.degraded:
        logger.warning(f"Degraded scoring for '{request.assessment_type}': {outcome.warnings}")
    logger.info(f"Assessment '{outcome.resolved_type}' scored. Primary result: {outcome.result.primary_result}")
    return outcome


@router.post("/assessments/compare", response_model=ResultComparison)
async def compare_assessment_results(
    request: CompareRequest,
    engine: AssessmentEngine = Depends(get_assessment_engine)
):
    """Compares a retake with the previous result of the same assessment."""
    try:
        return engine.compare(request.previous, request.current, request.assessment_type)
    except Exception as e:
        logger.exception(f"Unexpected error while comparing '{request.assessment_type}' results: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
