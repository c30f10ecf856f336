"""Batch scoring: one record against many, best first."""

import logging
from collections.abc import Callable, Iterable

from models.schemas.ranked_match import RankedMatch
from models.schemas.records import CandidateRecord, RequesterRecord
from models.schemas.score_result import ScoreResult
from models.schemas.weight_profile import WeightProfile
from services.matching.dimensions import MAX_DISTANCE_KM
from services.matching.scorer import score

logger = logging.getLogger(__name__)

ScoreFn = Callable[[RequesterRecord, CandidateRecord], ScoreResult]


def _default_score_fn(weights: WeightProfile | None, max_distance_km: float) -> ScoreFn:
    def _score(requester: RequesterRecord, candidate: CandidateRecord) -> ScoreResult:
        return score(requester, candidate, weights, max_distance_km=max_distance_km)
    return _score


def _rank(
    pairs: Iterable[tuple[str, RequesterRecord, CandidateRecord]],
    score_fn: ScoreFn,
    min_score: int,
    limit: int | None,
) -> list[RankedMatch]:
    matches = [
        RankedMatch(record_id=record_id, result=score_fn(requester, candidate))
        for record_id, requester, candidate in pairs
    ]
    scored = len(matches)
    matches = [m for m in matches if m.result.overall_score >= min_score]
    # stable sort: equal scores keep input order
    matches.sort(key=lambda m: m.result.overall_score, reverse=True)
    if limit is not None:
        matches = matches[:limit]

    logger.info("Ranked %d records, returning %d", scored, len(matches))
    return matches


def rank_candidates(
    requester: RequesterRecord,
    candidates: Iterable[CandidateRecord],
    weights: WeightProfile | None = None,
    *,
    max_distance_km: float = MAX_DISTANCE_KM,
    min_score: int = 0,
    limit: int | None = None,
    score_fn: ScoreFn | None = None,
) -> list[RankedMatch]:
    """Rank specialists for one job. ``record_id`` is the candidate id."""
    if score_fn is None:
        score_fn = _default_score_fn(weights, max_distance_km)

    return _rank(
        ((c.id, requester, c) for c in candidates),
        score_fn,
        min_score,
        limit,
    )


def rank_requesters(
    candidate: CandidateRecord,
    requesters: Iterable[RequesterRecord],
    weights: WeightProfile | None = None,
    *,
    max_distance_km: float = MAX_DISTANCE_KM,
    min_score: int = 0,
    limit: int | None = None,
    score_fn: ScoreFn | None = None,
) -> list[RankedMatch]:
    """Rank jobs for one specialist. ``record_id`` is the requester id."""
    if score_fn is None:
        score_fn = _default_score_fn(weights, max_distance_km)

    return _rank(
        ((r.id, r, candidate) for r in requesters),
        score_fn,
        min_score,
        limit,
    )
