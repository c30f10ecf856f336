"""Per-dimension compatibility scores between a requester and a candidate.

Every function returns a raw float. Missing data collapses a dimension to
its documented default instead of raising, so one sparse record never
fails a ranking pass. Clamping to [0, 1] happens in the scorer.
"""

from models.schemas.records import CandidateRecord, RequesterRecord, UrgencyLevel
from services.geo import distance_km
from services.skill_matcher import skill_match

NEUTRAL_SCORE = 0.5
MAX_DISTANCE_KM = 50.0

# Reputation
RATING_SCALE = 5.0
EXPERIENCED_JOB_COUNT = 20
W_RATING = 0.7
W_EXPERIENCE = 0.3
VERIFIED_PAYMENT_IMPORTANCE = 0.8
UNVERIFIED_PAYMENT_IMPORTANCE = 0.5

# Price
UNDER_BUDGET_BASE = 0.5
UNDER_BUDGET_SPAN = 0.3

# No calendar data is available yet; a mildly positive constant stands in.
AVAILABILITY_PLACEHOLDER = 0.7

URGENCY_FACTORS: dict[UrgencyLevel, float] = {
    UrgencyLevel.HIGH: 0.9,
    UrgencyLevel.MEDIUM: 0.6,
    UrgencyLevel.LOW: 0.3,
}
RESPONSE_HORIZON_HOURS = 24.0


def skill_score(requester: RequesterRecord, candidate: CandidateRecord) -> float:
    return skill_match(requester.required_skills, candidate.skills)


def location_score(
    requester: RequesterRecord,
    candidate: CandidateRecord,
    max_distance_km: float = MAX_DISTANCE_KM,
) -> float:
    """Linear falloff from 1.0 at zero distance to 0.0 at ``max_distance_km``."""
    if requester.location is None or candidate.location is None:
        return NEUTRAL_SCORE
    distance = distance_km(requester.location, candidate.location)
    return max(0.0, 1 - distance / max_distance_km)


def payment_importance(requester: RequesterRecord) -> float:
    """How much reputation should matter for this job.

    Not applied to ``reputation_score``; reported alongside it only.
    """
    if requester.is_verified_payment:
        return VERIFIED_PAYMENT_IMPORTANCE
    return UNVERIFIED_PAYMENT_IMPORTANCE


def reputation_score(requester: RequesterRecord, candidate: CandidateRecord) -> float:
    # Absent rating and job count count as 0, not as a neutral midpoint.
    rating_norm = (candidate.rating or 0) / RATING_SCALE
    experience = min(1.0, (candidate.completed_jobs or 0) / EXPERIENCED_JOB_COUNT)
    return W_RATING * rating_norm + W_EXPERIENCE * experience


def candidate_rate(candidate: CandidateRecord) -> float:
    if candidate.hourly_rate is not None:
        return candidate.hourly_rate
    if candidate.rate_range is not None:
        return candidate.rate_range.min
    return 0.0


def price_score(requester: RequesterRecord, candidate: CandidateRecord) -> float:
    """1.0 inside the budget, up to 0.8 below it, decaying to 0 above it."""
    if not requester.budget_min and not requester.budget_max:
        return NEUTRAL_SCORE
    if candidate.hourly_rate is None and candidate.rate_range is None:
        return NEUTRAL_SCORE

    budget_min = requester.budget_min or 0.0
    budget_max = requester.budget_max or budget_min * 2

    rate = candidate_rate(candidate)
    if rate == 0:
        return NEUTRAL_SCORE

    if budget_min <= rate <= budget_max:
        return 1.0
    if rate < budget_min:
        return UNDER_BUDGET_BASE + (rate / budget_min) * UNDER_BUDGET_SPAN

    over_budget_ratio = (rate - budget_max) / budget_max
    return max(0.0, 1 - over_budget_ratio)


def availability_score(requester: RequesterRecord, candidate: CandidateRecord) -> float:
    return AVAILABILITY_PLACEHOLDER


def urgency_factor(requester: RequesterRecord) -> float:
    if requester.urgency_level is None:
        return URGENCY_FACTORS[UrgencyLevel.LOW]
    return URGENCY_FACTORS.get(requester.urgency_level, URGENCY_FACTORS[UrgencyLevel.LOW])


def urgency_score(requester: RequesterRecord, candidate: CandidateRecord) -> float:
    """Urgency factor scaled by how fast the candidate answers (24 h horizon)."""
    if not candidate.response_time_minutes:
        return NEUTRAL_SCORE  # 0 counts as unknown, like a missing budget or rate
    hours = candidate.response_time_minutes / 60
    response_score = max(0.0, 1 - hours / RESPONSE_HORIZON_HOURS)
    return urgency_factor(requester) * response_score
