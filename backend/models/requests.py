from pydantic import BaseModel, Field

from models.schemas.preferences import MatchPreferences
from models.schemas.records import CandidateRecord, RequesterRecord
from models.schemas.weight_profile import WeightProfile


class ScoreRequest(BaseModel):
    requester: RequesterRecord
    candidate: CandidateRecord
    weights: WeightProfile | None = Field(None, description="Overrides preference-derived weights")
    preferences: MatchPreferences | None = None


class RankRequest(BaseModel):
    """One job against many specialists."""
    requester: RequesterRecord
    candidates: list[CandidateRecord] = Field(default_factory=list)
    weights: WeightProfile | None = None
    preferences: MatchPreferences | None = None
    min_score: int = Field(0, ge=0, le=100)
    limit: int | None = Field(None, ge=1)


class JobRankRequest(BaseModel):
    """One specialist against many jobs."""
    candidate: CandidateRecord
    requesters: list[RequesterRecord] = Field(default_factory=list)
    weights: WeightProfile | None = None
    preferences: MatchPreferences | None = None
    min_score: int = Field(0, ge=0, le=100)
    limit: int | None = Field(None, ge=1)
