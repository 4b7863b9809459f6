from typing import Dict, List, Literal
from pydantic import BaseModel, ConfigDict, Field

from services.assessment_engine.models import AnswerValue, AssessmentResult


class ScoreRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    assessment_type: str = Field(..., alias="assessmentType")
    responses: Dict[str, AnswerValue] = Field(default_factory=dict)  # question_id → answer


class CompareRequest(BaseModel):
    assessment_type: str
    previous: AssessmentResult
    current: AssessmentResult


class AssessmentSummary(BaseModel):
    slug: str
    name: str
    kind: Literal["ranked", "maturity"]
    categories: List[str]
    question_ids: List[str]
