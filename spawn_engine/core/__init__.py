"""
Core spawn allocation functionality.
"""

from .allocator import SpawnAllocator
from .candidates import CandidateGenerator, friend_centroid
from .density import PopulationDensityAnalyzer
from .errors import GameEngineError, SpawnCalculationError, SpawnLookupError
from .friends import FriendLocator
from .models import (
    Candidate, Coordinate, Region, RegionBounds, ScoredCandidate, SpawnAllocation,
    SpawnLocation, SpawnRequest, SpawnReservation, map_section_key
)
from .options import SpawnOptions
from .regions import resolve_region_bounds
from .reservations import ReservationManager
from .results import LookupResult
from .scoring import CandidateScorer
from .selection import SpawnSelector, spawn_reason

__all__ = ['SpawnAllocator', 'CandidateGenerator', 'friend_centroid',
           'PopulationDensityAnalyzer', 'GameEngineError', 'SpawnCalculationError',
           'SpawnLookupError',
           'FriendLocator', 'Candidate', 'Coordinate', 'Region', 'RegionBounds',
           'ScoredCandidate', 'SpawnAllocation', 'SpawnLocation', 'SpawnRequest',
           'SpawnReservation', 'map_section_key', 'SpawnOptions', 'resolve_region_bounds',
           'ReservationManager', 'LookupResult', 'CandidateScorer', 'SpawnSelector',
           'spawn_reason']
