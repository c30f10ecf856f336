"""Scorer output: overall score, per-dimension breakdown and explanations."""

from pydantic import BaseModel, ConfigDict


class ScoreResult(BaseModel):
    """Structured output of the compatibility scorer.

    Created fresh for every scoring call. Cached results are copied on the
    way in and out, so no two callers hold the same instance.
    """
    model_config = ConfigDict(frozen=True)

    overall_score: int = 0  # 0-100
    dimension_scores: dict[str, float] = {}  # each 0.0-1.0, in DIMENSIONS order
    explanations: list[str] = []  # skill, location, reputation, price, urgency
