import pytest
from fastapi.testclient import TestClient

from config import settings
from main import app
from models.schemas.records import CandidateRecord, RequesterRecord
from services.matching.scorer import score
from services.matching.service import reset_matching_service

pytestmark = pytest.mark.api

client = TestClient(app)

JOB = {
    "id": "job-1",
    "required_skills": ["plumbing"],
    "category": "Plumbing",
    "location": {"lat": 40.0, "lng": -74.0},
    "budget_min": 50,
    "budget_max": 100,
    "urgency_level": "high",
    "is_verified_payment": True,
}

PLUMBER = {
    "id": "spec-1",
    "skills": ["plumbing", "electrical"],
    "location": {"lat": 40.01, "lng": -74.01},
    "rating": 4.8,
    "completed_jobs": 25,
    "hourly_rate": 75,
    "response_time_minutes": 30,
}


@pytest.fixture(autouse=True)
def _fresh_service():
    reset_matching_service()
    yield
    reset_matching_service()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["cache_entries"] == 0


def test_score():
    response = client.post("/match/score", json={"requester": JOB, "candidate": PLUMBER})
    assert response.status_code == 200
    data = response.json()
    assert data["overall_score"] == 95
    assert set(data["dimension_scores"]) == {
        "skill_match", "location_proximity", "reputation",
        "price_match", "availability", "urgency",
    }
    assert data["explanations"][0] == "Strong skills match for Plumbing"


def test_score_populates_cache():
    client.post("/match/score", json={"requester": JOB, "candidate": PLUMBER})
    assert client.get("/health").json()["cache_entries"] == 1


def test_score_same_ids_changed_records_not_stale():
    strong = {**PLUMBER, "rating": 5, "completed_jobs": 20}
    weak = {**PLUMBER, "skills": [], "hourly_rate": 500}

    first = client.post("/match/score", json={"requester": JOB, "candidate": strong}).json()
    second = client.post("/match/score", json={"requester": JOB, "candidate": weak}).json()
    uncached = score(RequesterRecord(**JOB), CandidateRecord(**weak))

    assert second["overall_score"] == uncached.overall_score
    assert second["overall_score"] < first["overall_score"]
    assert client.get("/health").json()["cache_entries"] == 2


def test_score_with_weights():
    response = client.post(
        "/match/score",
        json={
            "requester": JOB,
            "candidate": PLUMBER,
            "weights": {
                "skill_match": 1.0, "location_proximity": 0, "reputation": 0,
                "price_match": 0, "availability": 0, "urgency": 0,
            },
        },
    )
    assert response.status_code == 200
    assert response.json()["overall_score"] == 100


def test_score_minimal_records():
    response = client.post(
        "/match/score", json={"requester": {"id": "j"}, "candidate": {"id": "s"}}
    )
    assert response.status_code == 200
    assert response.json()["explanations"] == [
        "Some relevant skills for this job",
        "Location information not available",
    ]


def test_score_rejects_negative_weight():
    response = client.post(
        "/match/score",
        json={"requester": JOB, "candidate": PLUMBER, "weights": {"skill_match": -1}},
    )
    assert response.status_code == 422


def test_score_rejects_unknown_dimension():
    response = client.post(
        "/match/score",
        json={"requester": JOB, "candidate": PLUMBER, "weights": {"charisma": 0.5}},
    )
    assert response.status_code == 422


def test_score_rejects_unknown_urgency():
    response = client.post(
        "/match/score",
        json={"requester": {**JOB, "urgency_level": "yesterday"}, "candidate": PLUMBER},
    )
    assert response.status_code == 422


def test_rank():
    far = {**PLUMBER, "id": "far", "location": {"lat": 41.0, "lng": -75.0}}
    response = client.post(
        "/match/rank",
        json={"requester": JOB, "candidates": [far, {"id": "nobody"}, PLUMBER], "limit": 2},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["total_scored"] == 3
    assert [m["record_id"] for m in data["matches"]] == ["spec-1", "far"]
    assert data["matches"][0]["result"]["overall_score"] == 95


def test_rank_min_score():
    response = client.post(
        "/match/rank",
        json={"requester": JOB, "candidates": [{"id": "nobody"}, PLUMBER], "min_score": 90},
    )
    assert [m["record_id"] for m in response.json()["matches"]] == ["spec-1"]


def test_rank_too_many(monkeypatch):
    monkeypatch.setattr(settings, "max_rank_candidates", 1)
    response = client.post(
        "/match/rank",
        json={"requester": JOB, "candidates": [PLUMBER, {"id": "nobody"}]},
    )
    assert response.status_code == 400


def test_jobs_for_specialist():
    far_job = {**JOB, "id": "job-far", "location": {"lat": 41.0, "lng": -75.0}}
    response = client.post(
        "/match/jobs",
        json={
            "candidate": PLUMBER,
            "requesters": [far_job, JOB],
            "preferences": {"prioritize_location": True},
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert [m["record_id"] for m in data["matches"]] == ["job-1", "job-far"]
