"""
Database utilities and models.

This package provides:
- SQLAlchemy models for player bases and spawn reservations
- Database connection management
- Spawn queries and the async store used by the allocation engine
"""

from .connection import Database, db
from .queries import SpawnQueries, SqlSpawnStore
from .models import Base, PlayerBase, SpawnReservationRecord

__all__ = [
    # Connection management
    'Database', 'db',

    # Query functionality
    'SpawnQueries', 'SqlSpawnStore',

    # Models
    'Base', 'PlayerBase', 'SpawnReservationRecord',
]
