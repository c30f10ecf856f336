"""Reshape a weight profile from caller preferences."""

from models.schemas.preferences import MatchPreferences
from models.schemas.weight_profile import DEFAULT_WEIGHTS, WeightProfile

# (dimension, delta) pairs, applied in order when the preference is set
_PRIORITIZE_LOCATION = (
    ("location_proximity", 0.10),
    ("skill_match", -0.05),
    ("price_match", -0.05),
)
_PRIORITIZE_RATE = (
    ("price_match", 0.10),
    ("location_proximity", -0.05),
    ("reputation", -0.05),
)
_PRIORITIZE_URGENT = (
    ("urgency", 0.10),
    ("availability", 0.05),
    ("reputation", -0.05),
    ("location_proximity", -0.05),
    ("skill_match", -0.05),
)


def weights_for_preferences(
    preferences: MatchPreferences,
    base: WeightProfile | None = None,
) -> WeightProfile:
    """Shift weight between dimensions according to the set preferences.

    Adjustments stack; any weight pushed below zero is floored at 0.
    """
    weights = (base if base is not None else DEFAULT_WEIGHTS).as_dict()

    adjustments = []
    if preferences.prioritize_location:
        adjustments.extend(_PRIORITIZE_LOCATION)
    if preferences.prioritize_rate:
        adjustments.extend(_PRIORITIZE_RATE)
    if preferences.prioritize_urgent:
        adjustments.extend(_PRIORITIZE_URGENT)

    for name, delta in adjustments:
        weights[name] += delta

    return WeightProfile(**{name: max(0.0, w) for name, w in weights.items()})
