"""
Soft reservation of offered spawn locations.

A reservation is advisory: it is keyed by the generated spawn location id,
not by the coordinate, so two players offered the same coordinate hold two
independent records. Nothing here blocks the response when the write fails.
"""

import time
from typing import Callable, Optional

import structlog

from .errors import SpawnLookupError
from .models import Coordinate, SpawnReservation
from .options import SpawnOptions
from .results import LookupResult
from .store import SpawnStore

logger = structlog.get_logger()


class ReservationManager:
    """Writes and reads time-boxed spawn reservations."""

    def __init__(
        self,
        store: SpawnStore,
        options: SpawnOptions,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.options = options
        self.clock = clock

    def build(
        self, spawn_location_id: str, coordinates: Coordinate, player_id: str
    ) -> SpawnReservation:
        reserved_at = int(self.clock())
        return SpawnReservation(
            spawn_region_id=self.options.spawn_region_id,
            spawn_location_id=spawn_location_id,
            coordinates=coordinates,
            reserved_by=player_id,
            reserved_at=reserved_at,
            is_available="false",
            ttl=reserved_at + self.options.reservation_ttl_seconds,
        )

    async def reserve(
        self, spawn_location_id: str, coordinates: Coordinate, player_id: str
    ) -> LookupResult[Optional[SpawnReservation]]:
        """Upsert the reservation; failures are logged and reported, never raised."""
        reservation = self.build(spawn_location_id, coordinates, player_id)
        try:
            await self.store.upsert_reservation(reservation)
        except Exception as e:
            logger.warning(
                "Failed to reserve spawn location",
                spawn_location_id=spawn_location_id,
                player_id=player_id,
                error=str(e),
            )
            return LookupResult.failure(None, e)

        logger.info(
            "Spawn location reserved",
            spawn_location_id=spawn_location_id,
            player_id=player_id,
            ttl=reservation.ttl,
        )
        return LookupResult.success(reservation)

    async def lookup(self, spawn_location_id: str) -> Optional[SpawnReservation]:
        """
        Unexpired reservation for ``spawn_location_id``, if any.

        Raises:
            SpawnLookupError: The store could not be read
        """
        try:
            reservation = await self.store.get_reservation(
                self.options.spawn_region_id, spawn_location_id
            )
        except Exception as e:
            logger.error(
                "Failed to look up spawn location",
                spawn_location_id=spawn_location_id,
                error=str(e),
            )
            raise SpawnLookupError(spawn_location_id, str(e)) from e

        if reservation is None or reservation.ttl <= int(self.clock()):
            return None
        return reservation
