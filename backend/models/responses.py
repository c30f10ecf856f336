from pydantic import BaseModel

from models.schemas.ranked_match import RankedMatch


class HealthResponse(BaseModel):
    status: str = "ok"
    cache_entries: int = 0


class RankResponse(BaseModel):
    matches: list[RankedMatch] = []
    total_scored: int = 0  # before min_score / limit were applied
