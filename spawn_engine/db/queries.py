"""
Spawn queries against the relational store.

``SpawnQueries`` wraps a session with the reads and writes the allocation
engine needs. ``SqlSpawnStore`` exposes them through the async ``SpawnStore``
contract by running each unit of work on a worker thread.
"""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional, TypeVar

import structlog
from sqlalchemy import delete
from sqlalchemy.orm import Session

from ..core.models import Coordinate, SpawnReservation
from .connection import Database
from .models import PlayerBase, SpawnReservationRecord

logger = structlog.get_logger()

T = TypeVar("T")


class SpawnQueries:
    """Synchronous spawn queries bound to one session."""

    def __init__(self, session: Session):
        """Initialize with database session."""
        self.session = session

    def get_active_base_coordinate(self, player_id: str) -> Optional[Coordinate]:
        """Coordinate of the player's first active base."""
        base = (
            self.session.query(PlayerBase.x, PlayerBase.y)
            .filter(PlayerBase.player_id == player_id, PlayerBase.status == "active")
            .order_by(PlayerBase.created_at)
            .first()
        )
        if base is None:
            return None
        return Coordinate(x=base.x, y=base.y)

    def list_active_base_sections(self) -> List[str]:
        """Section key of every active base, one entry per base."""
        rows = (
            self.session.query(PlayerBase.map_section_id)
            .filter(PlayerBase.status == "active")
            .all()
        )
        return [row.map_section_id for row in rows]

    def upsert_reservation(self, reservation: SpawnReservation) -> None:
        """Insert or overwrite the reservation row for its key."""
        self.session.merge(
            SpawnReservationRecord(
                spawn_region_id=reservation.spawn_region_id,
                spawn_location_id=reservation.spawn_location_id,
                x=reservation.coordinates.x,
                y=reservation.coordinates.y,
                reserved_by=reservation.reserved_by,
                reserved_at=reservation.reserved_at,
                is_available=reservation.is_available,
                ttl=reservation.ttl,
            )
        )

    def get_reservation(
        self, spawn_region_id: str, spawn_location_id: str
    ) -> Optional[SpawnReservation]:
        record = self.session.get(
            SpawnReservationRecord, (spawn_region_id, spawn_location_id)
        )
        if record is None:
            return None
        return SpawnReservation(
            spawn_region_id=record.spawn_region_id,
            spawn_location_id=record.spawn_location_id,
            coordinates=Coordinate(x=record.x, y=record.y),
            reserved_by=record.reserved_by,
            reserved_at=record.reserved_at,
            is_available=record.is_available,
            ttl=record.ttl,
        )

    def purge_expired_reservations(self, now: int) -> int:
        """
        Delete reservations whose ttl has passed.

        Stores with native TTL expiry do this themselves; here it has to be
        run periodically.

        Returns:
            Number of rows removed
        """
        result = self.session.execute(
            delete(SpawnReservationRecord).where(SpawnReservationRecord.ttl <= now)
        )
        return result.rowcount or 0


class SqlSpawnStore:
    """Async ``SpawnStore`` backed by a ``Database``."""

    def __init__(self, database: Database):
        self.database = database

    def _run(self, work: Callable[[SpawnQueries], T]) -> T:
        with self.database.get_session() as session:
            return work(SpawnQueries(session))

    async def _submit(self, work: Callable[[SpawnQueries], T]) -> T:
        return await asyncio.to_thread(self._run, work)

    async def query_active_base_coordinate(self, player_id: str) -> Optional[Coordinate]:
        return await self._submit(lambda q: q.get_active_base_coordinate(player_id))

    async def scan_active_base_sections(self) -> List[str]:
        return await self._submit(lambda q: q.list_active_base_sections())

    async def upsert_reservation(self, reservation: SpawnReservation) -> None:
        await self._submit(lambda q: q.upsert_reservation(reservation))

    async def get_reservation(
        self, spawn_region_id: str, spawn_location_id: str
    ) -> Optional[SpawnReservation]:
        return await self._submit(
            lambda q: q.get_reservation(spawn_region_id, spawn_location_id)
        )

    async def purge_expired_reservations(self, now: int) -> int:
        removed = await self._submit(lambda q: q.purge_expired_reservations(now))
        if removed:
            logger.info("Expired spawn reservations purged", removed=removed)
        return removed
