"""Domain errors raised across the engine boundary."""

from typing import Any, Dict, Optional


class GameEngineError(Exception):
    """Base error carrying a machine-readable code and context."""

    def __init__(
        self, message: str, code: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class SpawnCalculationError(GameEngineError):
    """Generating, scoring or selecting a spawn candidate failed."""

    code = "SPAWN_CALCULATION_ERROR"

    def __init__(self, player_id: str, error: str) -> None:
        super().__init__(
            "Failed to calculate spawn location",
            self.code,
            {"playerId": player_id, "error": error},
        )
        self.player_id = player_id
        self.error = error


class SpawnLookupError(GameEngineError):
    """Reading a spawn reservation from the store failed."""

    code = "SPAWN_LOOKUP_ERROR"

    def __init__(self, spawn_location_id: str, error: str) -> None:
        super().__init__(
            "Failed to look up spawn location",
            self.code,
            {"spawnLocationId": spawn_location_id, "error": error},
        )
        self.spawn_location_id = spawn_location_id
        self.error = error
