from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict, Literal, Optional, Union

# question_id -> Likert rating, short text, or multi-select list
AnswerValue = Union[bool, int, float, str, List[Union[int, float, str]], None]
AssessmentResponse = Dict[str, AnswerValue]
CategoryScoreSet = Dict[str, int]


class CategoryNarrative(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    strengths: List[str] = Field(default_factory=list)
    growth_areas: List[str] = Field(default_factory=list)
    ministries: List[str] = Field(default_factory=list)
    scriptures: List[str] = Field(default_factory=list)
    next_steps: List[str] = Field(default_factory=list)


class CategoryDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    question_ids: List[str]
    divisor: float  # raw total is divided by this before scaling
    scale: float = 100.0
    narrative: Optional[CategoryNarrative] = None


class FallbackCategories(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: Optional[str] = None
    secondary: Optional[str] = None
    tertiary: Optional[str] = None


class MaturityLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    min_score: int
    description: str


class AssessmentDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    name: str
    kind: Literal["ranked", "maturity"] = "ranked"
    title_template: str = "{primary}"
    categories: List[CategoryDefinition]
    fallbacks: FallbackCategories = Field(default_factory=FallbackCategories)
    maturity_levels: List[MaturityLevel] = Field(default_factory=list)
    scripture_references: List[str] = Field(default_factory=list)
    ministry_recommendations: List[str] = Field(default_factory=list)

    def category_keys(self) -> List[str]:
        return [c.key for c in self.categories]

    def get_category(self, key: Optional[str]) -> Optional[CategoryDefinition]:
        if key is None:
            return None
        return next((c for c in self.categories if c.key == key), None)


class AssessmentResult(BaseModel):
    primary_result: str
    secondary_result: str
    tertiary_result: str
    scores: Dict[str, int]
    title: str
    description: str
    strengths: List[str]
    growth_areas: List[str]
    ministry_recommendations: List[str]
    scripture_references: List[str]
    next_steps: List[str]
    ranking: List[str] = Field(default_factory=list)  # category keys, best first


class ScoringOutcome(BaseModel):
    requested_type: str
    resolved_type: str
    degraded: bool = False
    warnings: List[str] = Field(default_factory=list)
    result: AssessmentResult


class ResultComparison(BaseModel):
    assessment_type: str
    has_changes: bool = False
    improvements: List[str] = Field(default_factory=list)
    declines: List[str] = Field(default_factory=list)
    summary: str = ""


# Custom Error Classes
class SpecValidationError(ValueError):
    """Raised when an assessment definition table is inconsistent."""
    pass
