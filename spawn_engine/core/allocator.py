"""
Spawn allocation pipeline.

Process:
1. FriendLocator and PopulationDensityAnalyzer run concurrently
2. CandidateGenerator builds candidates in the requested region
3. CandidateScorer ranks them
4. SpawnSelector picks the best and explains why
5. ReservationManager records a soft reservation for the offer

Steps 1 and 5 degrade instead of failing. Anything that goes wrong in steps
2-4 is raised as a single SpawnCalculationError.
"""

import asyncio
from typing import Callable, Optional

import structlog

from ..utils.random import RandomSource, create_random_source
from .candidates import CandidateGenerator
from .density import PopulationDensityAnalyzer
from .errors import SpawnCalculationError
from .friends import FriendLocator
from .models import SpawnAllocation, SpawnRequest
from .options import SpawnOptions
from .reservations import ReservationManager
from .results import LookupResult
from .scoring import CandidateScorer
from .selection import SpawnSelector, new_spawn_location_id
from .store import SpawnStore

logger = structlog.get_logger()


class SpawnAllocator:
    """Computes and reserves a spawn location for one request at a time."""

    def __init__(
        self,
        store: SpawnStore,
        options: Optional[SpawnOptions] = None,
        rng_factory: Callable[[], RandomSource] = create_random_source,
        id_factory: Callable[[], str] = new_spawn_location_id,
        reservations: Optional[ReservationManager] = None,
    ) -> None:
        self.store = store
        self.options = options or SpawnOptions()
        self.rng_factory = rng_factory
        self.friends = FriendLocator(store, self.options)
        self.density = PopulationDensityAnalyzer(store)
        self.selector = SpawnSelector(id_factory)
        self.reservations = reservations or ReservationManager(store, self.options)

    async def _friend_locations(self, request: SpawnRequest):
        if not request.group_with_friends or not request.friend_ids:
            return LookupResult.success([])
        return await self.friends.locate(request.friend_ids)

    async def allocate(
        self, request: SpawnRequest, rng: Optional[RandomSource] = None
    ) -> SpawnAllocation:
        """
        Pick a spawn location for ``request.player_id`` and reserve it.

        Args:
            request: Validated allocation request
            rng: Random source for this request; a fresh one is created
                when omitted

        Returns:
            The chosen location, how long the offer is valid, and the
            reservation if it could be written

        Raises:
            SpawnCalculationError: Candidate generation, scoring or
                selection failed
        """
        rng = rng or self.rng_factory()
        logger.info(
            "Processing spawn location calculation",
            player_id=request.player_id,
            region=request.preferred_region.value,
            friends=len(request.friend_ids),
        )

        try:
            friends, density = await asyncio.gather(
                self._friend_locations(request), self.density.analyze()
            )
            if friends.degraded:
                logger.warning(
                    "Friend grouping degraded",
                    player_id=request.player_id,
                    found=len(friends.value),
                    error=friends.error,
                )
            density_map = density.value if density.ok else None

            candidates = CandidateGenerator(self.options, rng).generate(
                request.preferred_region, friends.value, density_map
            )
            scored = CandidateScorer(self.options, rng).score(
                candidates, friends.value, density_map
            )
            location = self.selector.select(scored)
        except Exception as e:
            logger.error(
                "Spawn calculation failed", player_id=request.player_id, error=str(e)
            )
            raise SpawnCalculationError(request.player_id, str(e)) from e

        reservation = await self.reservations.reserve(
            location.spawn_location_id, location.coordinates, request.player_id
        )

        logger.info(
            "Spawn location calculated",
            player_id=request.player_id,
            coordinates=location.coordinates.model_dump(),
            reason=location.reason,
            population_density=location.population_density,
            reserved=reservation.ok,
        )
        return SpawnAllocation(
            spawn_location=location,
            valid_for=self.options.reservation_ttl_seconds,
            reservation=reservation.value,
        )
