"""Pydantic contracts shared by the scorer, the service layer and the API."""

from models.schemas.preferences import MatchPreferences
from models.schemas.ranked_match import RankedMatch
from models.schemas.records import (
    CandidateRecord,
    GeoPoint,
    RateRange,
    RequesterRecord,
    UrgencyLevel,
)
from models.schemas.score_result import ScoreResult
from models.schemas.weight_profile import DEFAULT_WEIGHTS, DIMENSIONS, WeightProfile

__all__ = [
    "CandidateRecord",
    "DEFAULT_WEIGHTS",
    "DIMENSIONS",
    "GeoPoint",
    "MatchPreferences",
    "RankedMatch",
    "RateRange",
    "RequesterRecord",
    "ScoreResult",
    "UrgencyLevel",
    "WeightProfile",
]
