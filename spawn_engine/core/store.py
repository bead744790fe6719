"""Contract of the persistence collaborator the engine reads and writes."""

from typing import Iterable, Optional, Protocol

from .models import Coordinate, SpawnReservation


class SpawnStore(Protocol):
    """Async data access used by the allocation engine."""

    async def query_active_base_coordinate(self, player_id: str) -> Optional[Coordinate]:
        """Coordinate of one of the player's active bases, if any."""
        ...

    async def scan_active_base_sections(self) -> Iterable[str]:
        """Map section key of every active base."""
        ...

    async def upsert_reservation(self, reservation: SpawnReservation) -> None:
        """Create or overwrite a reservation record."""
        ...

    async def get_reservation(
        self, spawn_region_id: str, spawn_location_id: str
    ) -> Optional[SpawnReservation]:
        """Reservation stored under the key, expired or not."""
        ...
