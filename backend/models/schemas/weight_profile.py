"""Per-dimension weights used to combine dimension scores into one overall score."""

from pydantic import BaseModel, ConfigDict, Field

DIMENSIONS: tuple[str, ...] = (
    "skill_match",
    "location_proximity",
    "reputation",
    "price_match",
    "availability",
    "urgency",
)


class WeightProfile(BaseModel):
    """Relative importance of each dimension.

    Weights are not normalized: the scorer sums ``weight * score`` and
    clamps. The defaults sum to 1.0. Omitted dimensions keep their default,
    so excluding a dimension means setting it to 0 explicitly.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    skill_match: float = Field(default=0.30, ge=0)
    location_proximity: float = Field(default=0.20, ge=0)
    reputation: float = Field(default=0.15, ge=0)
    price_match: float = Field(default=0.15, ge=0)
    availability: float = Field(default=0.10, ge=0)
    urgency: float = Field(default=0.10, ge=0)

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in DIMENSIONS}

    @property
    def total(self) -> float:
        return sum(self.as_dict().values())


DEFAULT_WEIGHTS = WeightProfile()
