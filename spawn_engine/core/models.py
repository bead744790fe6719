"""
Data structures shared by the spawn allocation engine.

Coordinates are integer map positions. Every model serialises with the
camelCase field names used on the wire (``spawnLocationId``, ``validFor``...)
while Python code works with snake_case attributes.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_SECTION_SIZE = 100


class WireModel(BaseModel):
    """Base model emitting camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Region(str, Enum):
    """Named coarse areas of the map."""

    CENTER = "center"
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    RANDOM = "random"


class Coordinate(WireModel):
    """Integer map position."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int


def map_section_key(x: int, y: int, section_size: int = DEFAULT_SECTION_SIZE) -> str:
    """Bucket a coordinate into its ``"sx,sy"`` map section key."""
    return f"{x // section_size},{y // section_size}"


class RegionBounds(WireModel):
    """Inclusive rectangle a region's candidates must fall in."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


class Candidate(WireModel):
    """A coordinate under consideration for a single request."""

    coordinate: Coordinate
    map_section_key: str


class ScoredCandidate(Candidate):
    """Candidate annotated with its normalised sub-scores and composite score."""

    score: float = Field(ge=0.0, le=1.0)
    population_density: float = Field(ge=0.0)
    density_score: float = Field(ge=0.0, le=1.0)
    safety_score: float = Field(ge=0.0, le=1.0)
    resource_score: float = Field(ge=0.0, le=1.0)
    friend_score: float = Field(ge=0.0, le=1.0)


class SpawnLocation(WireModel):
    """Result handed back to the player."""

    coordinates: Coordinate
    spawn_location_id: str
    population_density: float
    safety_rating: float
    resource_accessibility: float
    reason: str


class SpawnReservation(WireModel):
    """Soft, time-boxed lock on an offered spawn location."""

    spawn_region_id: str = "calculated"
    spawn_location_id: str
    coordinates: Coordinate
    reserved_by: str
    reserved_at: int = Field(description="Seconds since the epoch")
    is_available: str = "false"
    ttl: int = Field(description="Expiry, seconds since the epoch")


class SpawnRequest(WireModel):
    """Validated allocation request."""

    player_id: str = Field(min_length=1, max_length=50)
    preferred_region: Region = Region.RANDOM
    group_with_friends: bool = True
    friend_ids: List[str] = Field(default_factory=list)


class SpawnAllocation(WireModel):
    """Engine output: the chosen location and how long the offer holds."""

    spawn_location: SpawnLocation
    valid_for: int = 300
    reservation: Optional[SpawnReservation] = Field(default=None, exclude=True)
