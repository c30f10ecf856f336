"""Shared test configuration and record fixtures."""

import pytest

from models.schemas.records import (
    CandidateRecord,
    GeoPoint,
    RequesterRecord,
    UrgencyLevel,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP layer through TestClient"
    )


@pytest.fixture
def plumbing_job() -> RequesterRecord:
    """Urgent, verified-payment plumbing job in the New York area."""
    return RequesterRecord(
        id="job-1",
        required_skills=frozenset({"plumbing"}),
        category="Plumbing",
        location=GeoPoint(lat=40.0, lng=-74.0),
        budget_min=50,
        budget_max=100,
        urgency_level=UrgencyLevel.HIGH,
        is_verified_payment=True,
    )


@pytest.fixture
def plumber() -> CandidateRecord:
    """Well-reviewed plumber about 1.4 km from the plumbing job."""
    return CandidateRecord(
        id="spec-1",
        skills=frozenset({"plumbing", "electrical"}),
        location=GeoPoint(lat=40.01, lng=-74.01),
        rating=4.8,
        completed_jobs=25,
        hourly_rate=75,
        response_time_minutes=30,
    )


@pytest.fixture
def bare_requester() -> RequesterRecord:
    return RequesterRecord(id="job-empty")


@pytest.fixture
def bare_candidate() -> CandidateRecord:
    return CandidateRecord(id="spec-empty")
