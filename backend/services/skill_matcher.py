"""Token-overlap skill matching between a requirement set and an offered set.

Exact matches dominate (70%); literal substring containment in either
direction gives partial credit (30%). This is a crude lexical heuristic:
"plumber" does not match "plumbing", while "electric" does match "electrical".
"""

from collections.abc import Iterable

NEUTRAL_SCORE = 0.5
EXACT_WEIGHT = 0.7
PARTIAL_WEIGHT = 0.3


def normalize_skill(skill: str) -> str:
    return skill.lower().strip()


def skill_match(required: Iterable[str], offered: Iterable[str]) -> float:
    """Score 0.0-1.0 for how well ``offered`` covers ``required``.

    Directional: only ``required`` drives the denominator, so swapping the
    arguments can change the result. Either side empty gives 0.5.
    """
    required_set = {normalize_skill(s) for s in required}
    offered_set = {normalize_skill(s) for s in offered}
    if not required_set or not offered_set:
        return NEUTRAL_SCORE

    exact_matches = len(required_set & offered_set)
    partial_matches = sum(
        1 for req in required_set
        if any(off in req or req in off for off in offered_set)
    )

    exact_score = exact_matches / len(required_set)
    partial_score = partial_matches / len(required_set)
    return EXACT_WEIGHT * exact_score + PARTIAL_WEIGHT * partial_score
