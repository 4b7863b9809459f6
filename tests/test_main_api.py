# tests/test_main_api.py
from fastapi.testclient import TestClient

# Import the FastAPI app instance from main
from main import app

# --- Test Client Setup ---
client = TestClient(app)

# --- API Tests ---

def test_health_check():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

def test_score_through_app():
    """The assessments router is mounted under the configured prefix."""
    response = client.post(
        "/api/v1/assessments/score",
        json={"assessmentType": "spiritual-gifts", "responses": {str(i): 5 for i in range(1, 21)}}
    )
    assert response.status_code == 200
    result = response.json()["result"]
    assert result["primary_result"] == "Administration"
    assert result["secondary_result"] == "Mercy"
    assert result["tertiary_result"] == "Teaching"
