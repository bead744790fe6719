"""Population density sampling over map sections."""

from collections import Counter
from typing import Dict

import structlog

from .results import LookupResult
from .store import SpawnStore

logger = structlog.get_logger()


class PopulationDensityAnalyzer:
    """Counts active bases per map section."""

    def __init__(self, store: SpawnStore) -> None:
        self.store = store

    async def analyze(self) -> LookupResult[Dict[str, int]]:
        """
        Scan active bases and aggregate a count per section key.

        A failed scan returns an empty map flagged with the error: that
        means "no density information", which is not the same as "empty map".
        """
        try:
            sections = await self.store.scan_active_base_sections()
            density = Counter(key for key in sections if key is not None)
        except Exception as e:
            logger.warning("Failed to analyze population density", error=str(e))
            return LookupResult.failure({}, e)

        logger.debug("Population density analyzed", sections=len(density))
        return LookupResult.success(dict(density))
