"""
Spawn candidate generation.

Half of the candidates are scattered around the centroid of the player's
friends (when there are any), the rest are drawn uniformly from the
requested region. Friend-biased samples falling outside the region are
dropped rather than retried, so a centroid near a region edge yields fewer
of them and more uniform ones.
"""

import math
from typing import Dict, List, Optional, Sequence, Union

import structlog

from ..utils.random import RandomSource
from .models import Candidate, Coordinate, Region, RegionBounds, map_section_key
from .options import SpawnOptions
from .regions import resolve_region_bounds

logger = structlog.get_logger()


def friend_centroid(points: Sequence[Coordinate]) -> Coordinate:
    """Arithmetic mean of the points, floored on each axis."""
    if not points:
        return Coordinate(x=0, y=0)
    sum_x = sum(p.x for p in points)
    sum_y = sum(p.y for p in points)
    return Coordinate(
        x=math.floor(sum_x / len(points)), y=math.floor(sum_y / len(points))
    )


class CandidateGenerator:
    """Produces a fixed-size list of candidate coordinates per request."""

    def __init__(self, options: SpawnOptions, rng: RandomSource) -> None:
        self.options = options
        self.rng = rng

    def generate(
        self,
        region: Union[Region, str],
        friend_coords: Sequence[Coordinate],
        density_map: Optional[Dict[str, int]] = None,
    ) -> List[Candidate]:
        """
        Generate ``candidate_count`` candidates inside ``region``.

        Args:
            region: Requested region name
            friend_coords: Friends' base coordinates, possibly empty
            density_map: Bases per section; candidates are not filtered by
                density here, scoring consumes it

        Returns:
            Candidates in generation order, friend-biased ones first
        """
        bounds = resolve_region_bounds(region, self.options.spawn_radius)
        candidates: List[Candidate] = []

        if friend_coords:
            candidates.extend(self._around_friends(friend_coords, bounds))

        friend_biased = len(candidates)
        while len(candidates) < self.options.candidate_count:
            candidates.append(self._uniform(bounds))

        logger.debug(
            "Spawn candidates generated",
            region=str(region.value if isinstance(region, Region) else region),
            friend_biased=friend_biased,
            total=len(candidates),
        )
        return candidates

    def _around_friends(
        self, friend_coords: Sequence[Coordinate], bounds: RegionBounds
    ) -> List[Candidate]:
        center = friend_centroid(friend_coords)
        accepted = []

        for _ in range(self.options.candidate_count // 2):
            angle = self.rng.random() * 2 * math.pi
            distance = self.rng.random() * self.options.friend_radius
            x = math.floor(center.x + math.cos(angle) * distance)
            y = math.floor(center.y + math.sin(angle) * distance)

            if bounds.contains(x, y):
                accepted.append(self._candidate(x, y))

        return accepted

    def _uniform(self, bounds: RegionBounds) -> Candidate:
        x = math.floor(self.rng.random() * (bounds.max_x - bounds.min_x) + bounds.min_x)
        y = math.floor(self.rng.random() * (bounds.max_y - bounds.min_y) + bounds.min_y)
        return self._candidate(x, y)

    def _candidate(self, x: int, y: int) -> Candidate:
        return Candidate(
            coordinate=Coordinate(x=x, y=y),
            map_section_key=map_section_key(x, y, self.options.section_size),
        )
