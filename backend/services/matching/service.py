"""Matching service: scorer + preference weights + result cache.

This is the layer the API talks to. The scorer underneath stays pure;
settings and caching live here.
"""

import logging
import threading
from collections.abc import Iterable

from config import Settings, settings as default_settings
from models.schemas.preferences import MatchPreferences
from models.schemas.ranked_match import RankedMatch
from models.schemas.records import CandidateRecord, RequesterRecord
from models.schemas.score_result import ScoreResult
from models.schemas.weight_profile import DEFAULT_WEIGHTS, WeightProfile
from services.matching.cache import ScoreCache
from services.matching.preferences import weights_for_preferences
from services.matching.ranking import rank_candidates, rank_requesters
from services.matching.scorer import score

logger = logging.getLogger(__name__)


class MatchingService:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings
        self.cache: ScoreCache | None = None
        if self.settings.cache_enabled:
            self.cache = ScoreCache(
                ttl_seconds=self.settings.cache_ttl_seconds,
                max_entries=self.settings.cache_max_entries,
            )

    def resolve(
        self,
        weights: WeightProfile | None = None,
        preferences: MatchPreferences | None = None,
    ) -> tuple[WeightProfile, float]:
        """Effective weight profile and proximity horizon for a request.

        Explicit weights win over preference-derived ones; the preferences'
        max distance applies either way.
        """
        max_distance_km = self.settings.max_distance_km
        if preferences is not None and preferences.max_distance_km is not None:
            max_distance_km = preferences.max_distance_km

        if weights is None:
            weights = (
                weights_for_preferences(preferences)
                if preferences is not None
                else DEFAULT_WEIGHTS
            )
        return weights, max_distance_km

    def score(
        self,
        requester: RequesterRecord,
        candidate: CandidateRecord,
        weights: WeightProfile | None = None,
        preferences: MatchPreferences | None = None,
        use_cache: bool = True,
    ) -> ScoreResult:
        weights, max_distance_km = self.resolve(weights, preferences)
        return self._score(requester, candidate, weights, max_distance_km, use_cache)

    def _score(
        self,
        requester: RequesterRecord,
        candidate: CandidateRecord,
        weights: WeightProfile,
        max_distance_km: float,
        use_cache: bool,
    ) -> ScoreResult:
        if self.cache is None or not use_cache:
            return score(requester, candidate, weights, max_distance_km=max_distance_km)

        key = ScoreCache.make_key(requester, candidate, weights, max_distance_km)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Using cached score for %s:%s", requester.id, candidate.id)
            return cached

        result = score(requester, candidate, weights, max_distance_km=max_distance_km)
        self.cache.set(key, result)
        return result

    def rank_candidates(
        self,
        requester: RequesterRecord,
        candidates: Iterable[CandidateRecord],
        weights: WeightProfile | None = None,
        preferences: MatchPreferences | None = None,
        min_score: int = 0,
        limit: int | None = None,
        use_cache: bool = True,
    ) -> list[RankedMatch]:
        weights, max_distance_km = self.resolve(weights, preferences)
        return rank_candidates(
            requester,
            candidates,
            min_score=min_score,
            limit=limit,
            score_fn=lambda r, c: self._score(r, c, weights, max_distance_km, use_cache),
        )

    def rank_requesters(
        self,
        candidate: CandidateRecord,
        requesters: Iterable[RequesterRecord],
        weights: WeightProfile | None = None,
        preferences: MatchPreferences | None = None,
        min_score: int = 0,
        limit: int | None = None,
        use_cache: bool = True,
    ) -> list[RankedMatch]:
        weights, max_distance_km = self.resolve(weights, preferences)
        return rank_requesters(
            candidate,
            requesters,
            min_score=min_score,
            limit=limit,
            score_fn=lambda r, c: self._score(r, c, weights, max_distance_km, use_cache),
        )


_service: MatchingService | None = None
_service_lock = threading.Lock()


def get_matching_service() -> MatchingService:
    """Process-wide service, created on first access."""
    global _service
    if _service is None:
        with _service_lock:
            if _service is None:
                _service = MatchingService()
                logger.info(
                    "Matching service ready (cache=%s, max_distance_km=%s)",
                    _service.cache is not None,
                    _service.settings.max_distance_km,
                )
    return _service


def reset_matching_service() -> None:
    """Drop the process-wide service. Useful for testing."""
    global _service
    with _service_lock:
        _service = None
