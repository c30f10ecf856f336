"""In-memory TTL cache for score results.

Entries are keyed by the full requester and candidate records plus the
weight profile and proximity horizon. Records are frozen, so a changed
record under the same id is a different key and never hits a stale entry.
The id-based invalidation helpers still drop every entry for an id.

Results are copied on the way in and out; callers never share a cached
instance.
"""

import logging
import threading
import time
from collections.abc import Callable

from models.schemas.records import CandidateRecord, RequesterRecord
from models.schemas.score_result import ScoreResult
from models.schemas.weight_profile import WeightProfile

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60
DEFAULT_MAX_ENTRIES = 10_000

CacheKey = tuple[RequesterRecord, CandidateRecord, WeightProfile, float]


class ScoreCache:
    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[CacheKey, tuple[ScoreResult, float]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def make_key(
        requester: RequesterRecord,
        candidate: CandidateRecord,
        weights: WeightProfile,
        max_distance_km: float,
    ) -> CacheKey:
        return (requester, candidate, weights, float(max_distance_km))

    def get(self, key: CacheKey) -> ScoreResult | None:
        """Copy of the cached result, or None when missing or expired (expired entries are dropped)."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            result, expires_at = entry
            if expires_at < self._clock():
                del self._entries[key]
                return None
        return result.model_copy(deep=True)

    def set(self, key: CacheKey, result: ScoreResult, ttl_seconds: float | None = None) -> None:
        """Store a copy of ``result``.

        A new key on a full cache first drops expired entries, then the
        oldest ones, so the map never grows past ``max_entries``.
        """
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        stored = result.model_copy(deep=True)
        with self._lock:
            now = self._clock()
            if key not in self._entries and len(self._entries) >= self.max_entries:
                self._evict(now)
            self._entries[key] = (stored, now + ttl)

    def _evict(self, now: float) -> None:
        # caller holds the lock
        expired = [key for key, (_, expires_at) in self._entries.items() if expires_at < now]
        for key in expired:
            del self._entries[key]
        overflow = len(self._entries) - self.max_entries + 1
        if overflow > 0:
            # dicts keep insertion order, so the first keys are the oldest writes
            for key in list(self._entries)[:overflow]:
                del self._entries[key]
        logger.debug(
            "Score cache full: dropped %d expired and %d oldest entries",
            len(expired),
            max(overflow, 0),
        )

    def has(self, key: CacheKey) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and entry[1] >= self._clock()

    def invalidate(self, key: CacheKey) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def invalidate_for_requester(self, requester_id: str) -> int:
        return self._invalidate_where(lambda key: key[0].id == requester_id)

    def invalidate_for_candidate(self, candidate_id: str) -> int:
        return self._invalidate_where(lambda key: key[1].id == candidate_id)

    def _invalidate_where(self, predicate: Callable[[CacheKey], bool]) -> int:
        with self._lock:
            doomed = [key for key in self._entries if predicate(key)]
            for key in doomed:
                del self._entries[key]
        return len(doomed)

    def cleanup(self) -> int:
        """Drop expired entries. Returns how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [key for key, (_, expires_at) in self._entries.items() if expires_at < now]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug("Removed %d expired score cache entries", len(expired))
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.info("Score cache cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
