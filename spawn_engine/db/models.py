"""Database models for spawn allocation storage."""

import uuid
from datetime import datetime

from sqlalchemy import BigInteger, Column, DateTime, Index, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

BASE_STATUSES = ("active", "building", "moving", "destroyed")


class PlayerBase(Base):
    """A player's base on the map. Owned by the base management service."""

    __tablename__ = "player_bases"

    player_id = Column(String(50), primary_key=True)
    base_id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    base_name = Column(String(255), nullable=False, default="")
    base_type = Column(String(50), nullable=False, default="command_center")
    status = Column(String(20), nullable=False, default="active")

    # Location
    x = Column(Integer, nullable=False)
    y = Column(Integer, nullable=False)
    map_section_id = Column(String(32), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (Index("ix_player_bases_status", "status"),)


class SpawnReservationRecord(Base):
    """Soft reservation of an offered spawn location."""

    __tablename__ = "spawn_locations"

    spawn_region_id = Column(String(50), primary_key=True)
    spawn_location_id = Column(String(64), primary_key=True)
    x = Column(Integer, nullable=False)
    y = Column(Integer, nullable=False)
    reserved_by = Column(String(50), nullable=False)
    reserved_at = Column(BigInteger, nullable=False)  # epoch seconds
    is_available = Column(String(5), nullable=False, default="false")
    ttl = Column(BigInteger, nullable=False)  # epoch seconds

    __table_args__ = (Index("ix_spawn_locations_ttl", "ttl"),)
