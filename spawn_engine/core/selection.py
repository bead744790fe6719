"""Selection of the winning spawn candidate."""

import string
import time
import uuid
from typing import Callable, Optional, Sequence

from .models import ScoredCandidate, SpawnLocation

REASON_NEAR_FRIENDS = "Near friends for social gameplay"
REASON_SAFE = "Safe starter location"
REASON_RESOURCES = "Excellent resource access"
REASON_LOW_DENSITY = "Low population density area"
REASON_BALANCED = "Optimal balance of safety and resources"

_BASE36 = string.digits + string.ascii_lowercase


def spawn_reason(candidate: ScoredCandidate) -> str:
    """Human readable justification, most specific factor first."""
    if candidate.friend_score > 0.5:
        return REASON_NEAR_FRIENDS
    if candidate.safety_score > 0.8:
        return REASON_SAFE
    if candidate.resource_score > 0.9:
        return REASON_RESOURCES
    if candidate.population_density < 0.2:
        return REASON_LOW_DENSITY
    return REASON_BALANCED


def new_spawn_location_id(now_ms: Optional[int] = None) -> str:
    """Fresh ``spawn-<epoch ms>-<9 base36 chars>`` identifier."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    value = uuid.uuid4().int
    suffix = []
    for _ in range(9):
        value, digit = divmod(value, 36)
        suffix.append(_BASE36[digit])
    return f"spawn-{now_ms}-{''.join(suffix)}"


class SpawnSelector:
    """Turns the ranked candidates into a spawn location offer."""

    def __init__(self, id_factory: Callable[[], str] = new_spawn_location_id) -> None:
        self.id_factory = id_factory

    def select(self, scored_candidates: Sequence[ScoredCandidate]) -> SpawnLocation:
        """Pick the first (best) of the already sorted candidates."""
        if not scored_candidates:
            raise ValueError("No spawn candidates to select from")

        best = scored_candidates[0]
        return SpawnLocation(
            coordinates=best.coordinate,
            spawn_location_id=self.id_factory(),
            population_density=best.population_density,
            safety_rating=best.safety_score,
            resource_accessibility=best.resource_score,
            reason=spawn_reason(best),
        )
