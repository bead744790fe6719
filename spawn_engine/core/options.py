"""Tuning parameters for spawn allocation."""

import math
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator

if TYPE_CHECKING:
    from ..config import Settings


class SpawnOptions(BaseModel):
    """Spawn allocation options, passed explicitly to every component."""

    spawn_radius: int = Field(default=2000, gt=0, description="Half-width of the spawnable square")
    candidate_count: int = Field(default=20, gt=0, description="Candidates generated per request")
    friend_radius: int = Field(default=500, ge=0, description="Sampling radius around friends")
    max_friends: int = Field(default=5, ge=0, description="Friend bases looked up per request")
    section_size: int = Field(default=100, gt=0, description="Edge length of a map section")
    reservation_ttl_seconds: int = Field(default=300, gt=0, description="Reservation lifetime")
    spawn_region_id: str = Field(default="calculated", description="Partition for reservations")

    # Scoring falloffs
    density_saturation: float = Field(default=10.0, gt=0, description="Bases per section scoring 0")
    placeholder_density: float = Field(
        default=0.1, ge=0, description="Density assumed when no density map is available"
    )
    safety_falloff: float = Field(default=5000.0, gt=0, description="Distance from origin scoring 0")
    friend_falloff: float = Field(default=1000.0, gt=0, description="Mean friend distance scoring 0")
    resource_floor: float = Field(default=0.7, ge=0, le=1, description="Lowest resource score")

    # Composite weights
    density_weight: float = Field(default=0.3, ge=0)
    safety_weight: float = Field(default=0.3, ge=0)
    resource_weight: float = Field(default=0.2, ge=0)
    friend_weight: float = Field(default=0.2, ge=0)

    @model_validator(mode="after")
    def _weights_are_convex(self) -> "SpawnOptions":
        total = self.density_weight + self.safety_weight + self.resource_weight + self.friend_weight
        if not math.isclose(total, 1.0):
            raise ValueError(f"Score weights must sum to 1.0, got {total}")
        return self

    @classmethod
    def from_settings(cls, settings: "Settings") -> "SpawnOptions":
        return cls(
            spawn_radius=settings.spawn_radius,
            candidate_count=settings.candidate_count,
            friend_radius=settings.friend_radius,
            max_friends=settings.max_friends,
            section_size=settings.section_size,
            reservation_ttl_seconds=settings.reservation_ttl_seconds,
        )
