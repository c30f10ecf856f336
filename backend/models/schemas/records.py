"""Input records for compatibility scoring: the requester (job side) and the candidate (specialist side)."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class UrgencyLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class GeoPoint(BaseModel):
    """A lat/lng pair in decimal degrees."""
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class RateRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float | None = None


class RequesterRecord(BaseModel):
    """Job or customer-side entity looking for a specialist.

    When only ``budget_min`` is given the scorer derives the maximum as
    ``budget_min * 2``.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    required_skills: frozenset[str] = frozenset()
    category: str | None = None  # used in explanation text only
    location: GeoPoint | None = None
    budget_min: float | None = None
    budget_max: float | None = None
    urgency_level: UrgencyLevel | None = None
    is_verified_payment: bool = False


class CandidateRecord(BaseModel):
    """Specialist-side entity being evaluated for fit."""
    model_config = ConfigDict(frozen=True)

    id: str
    skills: frozenset[str] = frozenset()
    location: GeoPoint | None = None
    rating: float | None = None  # 0-5 stars
    completed_jobs: int | None = None
    hourly_rate: float | None = None
    rate_range: RateRange | None = None
    response_time_minutes: float | None = None
