"""
Candidate scoring.

Each candidate gets four sub-scores in [0, 1]:

- density: fewer bases in its map section scores higher
- safety: closer to the map origin scores higher
- resource: placeholder draw in [resource_floor, 1)
- friend: shorter mean distance to the friends' bases scores higher, 0
  without friends

The composite is a convex combination of the four, so it stays in [0, 1].
"""

from typing import Dict, List, Optional, Sequence

import numpy as np
import structlog

from ..utils.random import RandomSource
from .models import Candidate, Coordinate, ScoredCandidate
from .options import SpawnOptions

logger = structlog.get_logger()


class CandidateScorer:
    """Scores candidates and ranks them best first."""

    def __init__(self, options: SpawnOptions, rng: RandomSource) -> None:
        self.options = options
        self.rng = rng

    @property
    def weights(self) -> np.ndarray:
        o = self.options
        return np.array(
            [o.density_weight, o.safety_weight, o.resource_weight, o.friend_weight]
        )

    def population_densities(
        self, candidates: Sequence[Candidate], density_map: Optional[Dict[str, int]]
    ) -> np.ndarray:
        """Bases in each candidate's section, or the placeholder without a map."""
        if density_map is None:
            return np.full(len(candidates), self.options.placeholder_density, dtype=np.float64)
        return np.array(
            [density_map.get(c.map_section_key, 0) for c in candidates], dtype=np.float64
        )

    def score(
        self,
        candidates: Sequence[Candidate],
        friend_coords: Sequence[Coordinate],
        density_map: Optional[Dict[str, int]] = None,
    ) -> List[ScoredCandidate]:
        """
        Score candidates and sort them by composite score, descending.

        The sort is stable: equal scores keep generation order.

        Args:
            candidates: Candidates in generation order
            friend_coords: Friends' base coordinates, possibly empty
            density_map: Bases per section key; ``None`` when density is unknown

        Returns:
            Scored candidates, best first
        """
        if not candidates:
            return []

        o = self.options
        points = np.array(
            [(c.coordinate.x, c.coordinate.y) for c in candidates], dtype=np.float64
        )

        population = self.population_densities(candidates, density_map)
        density_score = np.clip(1.0 - population / o.density_saturation, 0.0, 1.0)

        from_origin = np.hypot(points[:, 0], points[:, 1])
        safety_score = np.clip(1.0 - from_origin / o.safety_falloff, 0.0, 1.0)

        draws = np.array([self.rng.random() for _ in candidates], dtype=np.float64)
        resource_score = o.resource_floor + draws * (1.0 - o.resource_floor)

        if friend_coords:
            friends = np.array([(f.x, f.y) for f in friend_coords], dtype=np.float64)
            dx = points[:, None, 0] - friends[None, :, 0]
            dy = points[:, None, 1] - friends[None, :, 1]
            mean_distance = np.hypot(dx, dy).mean(axis=1)
            friend_score = np.clip(1.0 - mean_distance / o.friend_falloff, 0.0, 1.0)
        else:
            friend_score = np.zeros(len(candidates), dtype=np.float64)

        subscores = np.column_stack([density_score, safety_score, resource_score, friend_score])
        composite = np.clip(subscores @ self.weights, 0.0, 1.0)

        order = np.argsort(-composite, kind="stable")
        scored = [
            ScoredCandidate(
                coordinate=candidates[i].coordinate,
                map_section_key=candidates[i].map_section_key,
                score=float(composite[i]),
                population_density=float(population[i]),
                density_score=float(density_score[i]),
                safety_score=float(safety_score[i]),
                resource_score=float(resource_score[i]),
                friend_score=float(friend_score[i]),
            )
            for i in order
        ]

        logger.debug(
            "Spawn candidates scored",
            count=len(scored),
            best_score=scored[0].score,
            friends=len(friend_coords),
        )
        return scored
