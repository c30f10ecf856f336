"""Compatibility scorer: weighted combination of dimension scores.

Flow:
    requester + candidate
      ├─ dimensions.*_score()        → raw per-dimension floats
      ├─ clamp each to [0, 1]
      ├─ Σ weight_i * score_i * 100  → rounded, clamped to [0, 100]
      └─ explanations.build_explanations()
                       ↓
                  ScoreResult

Pure and synchronous: no I/O and no shared mutable state, so it can be
called concurrently without coordination.
"""

import logging
import math

from models.schemas.records import CandidateRecord, RequesterRecord
from models.schemas.score_result import ScoreResult
from models.schemas.weight_profile import DEFAULT_WEIGHTS, DIMENSIONS, WeightProfile
from services.matching import dimensions
from services.matching.dimensions import MAX_DISTANCE_KM
from services.matching.explanations import build_explanations

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_dimension_scores(
    requester: RequesterRecord,
    candidate: CandidateRecord,
    max_distance_km: float = MAX_DISTANCE_KM,
) -> dict[str, float]:
    """All six dimension scores, clamped to [0, 1], in DIMENSIONS order."""
    raw = {
        "skill_match": dimensions.skill_score(requester, candidate),
        "location_proximity": dimensions.location_score(requester, candidate, max_distance_km),
        "reputation": dimensions.reputation_score(requester, candidate),
        "price_match": dimensions.price_score(requester, candidate),
        "availability": dimensions.availability_score(requester, candidate),
        "urgency": dimensions.urgency_score(requester, candidate),
    }
    return {name: _clamp(raw[name], 0.0, 1.0) for name in DIMENSIONS}


def aggregate(dimension_scores: dict[str, float], weights: WeightProfile) -> int:
    """Weighted sum scaled to 0-100. A zero weight removes its dimension."""
    weighted = sum(
        weight * dimension_scores[name]
        for name, weight in weights.as_dict().items()
    )
    return int(_clamp(_round_half_up(weighted * 100), 0, 100))


def score(
    requester: RequesterRecord,
    candidate: CandidateRecord,
    weights: WeightProfile | None = None,
    *,
    max_distance_km: float = MAX_DISTANCE_KM,
) -> ScoreResult:
    """Score one requester/candidate pair."""
    if weights is None:
        weights = DEFAULT_WEIGHTS

    dimension_scores = compute_dimension_scores(requester, candidate, max_distance_km)
    overall = aggregate(dimension_scores, weights)
    explanations = build_explanations(dimension_scores, requester, candidate)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Scored %s vs %s: overall=%d dims=%s payment_importance=%.1f",
            requester.id,
            candidate.id,
            overall,
            {k: round(v, 3) for k, v in dimension_scores.items()},
            dimensions.payment_importance(requester),
        )

    return ScoreResult(
        overall_score=overall,
        dimension_scores=dimension_scores,
        explanations=explanations,
    )


class CompatibilityScorer:
    """Scorer with a bound weight profile and proximity horizon."""

    def __init__(
        self,
        weights: WeightProfile | None = None,
        max_distance_km: float = MAX_DISTANCE_KM,
    ) -> None:
        self.weights = weights if weights is not None else DEFAULT_WEIGHTS
        self.max_distance_km = max_distance_km

    def score(
        self,
        requester: RequesterRecord,
        candidate: CandidateRecord,
        weights: WeightProfile | None = None,
    ) -> ScoreResult:
        return score(
            requester,
            candidate,
            weights if weights is not None else self.weights,
            max_distance_km=self.max_distance_km,
        )
