import pytest

from services.assessment_engine.engine import AssessmentEngine


@pytest.fixture
def engine():
    """Engine backed by the built-in assessment tables."""
    return AssessmentEngine()
