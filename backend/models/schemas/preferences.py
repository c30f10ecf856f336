"""Caller preferences that reshape the default weight profile."""

from pydantic import BaseModel, ConfigDict, Field


class MatchPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    prioritize_location: bool = False
    prioritize_rate: bool = False
    prioritize_urgent: bool = False
    max_distance_km: float | None = Field(default=None, gt=0)  # overrides the 50 km horizon
