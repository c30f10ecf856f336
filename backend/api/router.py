from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_matching_service
from config import settings
from models.requests import JobRankRequest, RankRequest, ScoreRequest
from models.responses import HealthResponse, RankResponse
from models.schemas.score_result import ScoreResult
from services.matching.service import MatchingService

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _check_batch_size(size: int) -> None:
    if size > settings.max_rank_candidates:
        raise HTTPException(
            status_code=400,
            detail=f"Too many records to rank. Max: {settings.max_rank_candidates}",
        )


@router.get("/health", response_model=HealthResponse)
async def health(svc: MatchingService = Depends(get_matching_service)):
    return HealthResponse(
        status="ok",
        cache_entries=len(svc.cache) if svc.cache is not None else 0,
    )


@router.post("/match/score", response_model=ScoreResult)
@limiter.limit(settings.rate_limit)
async def match_score(
    request: Request,
    body: ScoreRequest,
    svc: MatchingService = Depends(get_matching_service),
):
    return svc.score(body.requester, body.candidate, body.weights, body.preferences)


@router.post("/match/rank", response_model=RankResponse)
@limiter.limit(settings.rate_limit)
async def match_rank(
    request: Request,
    body: RankRequest,
    svc: MatchingService = Depends(get_matching_service),
):
    _check_batch_size(len(body.candidates))
    matches = svc.rank_candidates(
        body.requester,
        body.candidates,
        weights=body.weights,
        preferences=body.preferences,
        min_score=body.min_score,
        limit=body.limit,
    )
    return RankResponse(matches=matches, total_scored=len(body.candidates))


@router.post("/match/jobs", response_model=RankResponse)
@limiter.limit(settings.rate_limit)
async def match_jobs(
    request: Request,
    body: JobRankRequest,
    svc: MatchingService = Depends(get_matching_service),
):
    _check_batch_size(len(body.requesters))
    matches = svc.rank_requesters(
        body.candidate,
        body.requesters,
        weights=body.weights,
        preferences=body.preferences,
        min_score=body.min_score,
        limit=body.limit,
    )
    return RankResponse(matches=matches, total_scored=len(body.requesters))
