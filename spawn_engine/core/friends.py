"""Lookup of friends' base coordinates for friend-biased spawning."""

import asyncio
from typing import List, Sequence

import structlog

from .models import Coordinate
from .options import SpawnOptions
from .results import LookupResult
from .store import SpawnStore

logger = structlog.get_logger()


class FriendLocator:
    """Finds the active base of each requested friend."""

    def __init__(self, store: SpawnStore, options: SpawnOptions) -> None:
        self.store = store
        self.options = options

    async def locate(self, friend_ids: Sequence[str]) -> LookupResult[List[Coordinate]]:
        """
        Fetch coordinates for at most ``max_friends`` friends.

        Lookups run concurrently. A friend without an active base contributes
        nothing; a failing lookup is logged and skipped, leaving the result
        marked partial.
        """
        wanted = list(friend_ids)[: self.options.max_friends]
        if not wanted:
            return LookupResult.success([])

        results = await asyncio.gather(
            *(self.store.query_active_base_coordinate(fid) for fid in wanted),
            return_exceptions=True,
        )

        locations: List[Coordinate] = []
        failures = []
        for friend_id, result in zip(wanted, results):
            if isinstance(result, asyncio.CancelledError):
                raise result
            if isinstance(result, BaseException):
                failures.append(friend_id)
                logger.warning(
                    "Failed to get friend location", friend_id=friend_id, error=str(result)
                )
            elif result is not None:
                locations.append(result)

        if len(failures) == len(wanted):
            return LookupResult(
                value=[], error=f"All friend lookups failed ({len(failures)})"
            )
        return LookupResult(value=locations, partial=bool(failures))
