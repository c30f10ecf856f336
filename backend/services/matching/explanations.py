"""Template-based explanations for a scored requester/candidate pair.

Lines are produced in a fixed order (skill, location, reputation, price,
urgency). A dimension outside every threshold contributes no line.
"""

from models.schemas.records import CandidateRecord, RequesterRecord, UrgencyLevel
from services.geo import distance_km

DEFAULT_CATEGORY = "this job"


def build_explanations(
    dimension_scores: dict[str, float],
    requester: RequesterRecord,
    candidate: CandidateRecord,
) -> list[str]:
    explanations: list[str] = []
    for line in (
        _skill_line(dimension_scores["skill_match"], requester),
        _location_line(requester, candidate),
        _reputation_line(dimension_scores["reputation"], candidate),
        _price_line(dimension_scores["price_match"]),
        _urgency_line(dimension_scores["urgency"], requester),
    ):
        if line:
            explanations.append(line)
    return explanations


# ---------------------------------------------------------------------------
# Per-dimension templates
# ---------------------------------------------------------------------------

def _skill_line(score: float, requester: RequesterRecord) -> str | None:
    category = requester.category or DEFAULT_CATEGORY
    if score > 0.8:
        return f"Strong skills match for {category}"
    if score > 0.5:
        return f"Good skills match for {category}"
    if score > 0:
        return f"Some relevant skills for {category}"
    return None


def _location_line(requester: RequesterRecord, candidate: CandidateRecord) -> str:
    if requester.location is None or candidate.location is None:
        return "Location information not available"

    distance = distance_km(requester.location, candidate.location)
    if distance < 2:
        return f"Very close to job location ({distance:.1f} km)"
    if distance < 10:
        return f"Near job location ({distance:.1f} km)"
    return f"{distance:.1f} km from job location"


def _reputation_line(score: float, candidate: CandidateRecord) -> str | None:
    if not candidate.rating:
        return None
    if score > 0.8:
        return f"Highly rated specialist ({candidate.rating:g}/5)"
    if score > 0.6:
        return f"Well-rated specialist ({candidate.rating:g}/5)"
    return None


def _price_line(score: float) -> str | None:
    if score > 0.9:
        return "Perfect price match"
    if score > 0.7:
        return "Good price match"
    if score < 0.3:
        return "Price may be outside your budget"
    return None


def _urgency_line(score: float, requester: RequesterRecord) -> str | None:
    if requester.urgency_level == UrgencyLevel.HIGH and score > 0.7:
        return "Quick response time for your urgent job"
    return None
