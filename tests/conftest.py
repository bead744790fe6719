"""Shared fixtures for spawn engine tests."""

from unittest.mock import AsyncMock, Mock

import pytest

from spawn_engine.core.models import Coordinate, ScoredCandidate, map_section_key
from spawn_engine.core.options import SpawnOptions
from spawn_engine.db.connection import Database


@pytest.fixture
def options():
    return SpawnOptions()


@pytest.fixture
def store():
    """SpawnStore double with an empty world."""
    mock_store = Mock()
    mock_store.query_active_base_coordinate = AsyncMock(return_value=None)
    mock_store.scan_active_base_sections = AsyncMock(return_value=[])
    mock_store.upsert_reservation = AsyncMock(return_value=None)
    mock_store.get_reservation = AsyncMock(return_value=None)
    return mock_store


@pytest.fixture
def database():
    """Fresh in-memory SQLite database."""
    database = Database()
    database.initialize("sqlite://")
    yield database
    database.dispose()


def make_scored(
    x=0,
    y=0,
    score=0.5,
    population_density=0.1,
    density_score=0.99,
    safety_score=0.5,
    resource_score=0.8,
    friend_score=0.0,
):
    """ScoredCandidate with sensible defaults."""
    return ScoredCandidate(
        coordinate=Coordinate(x=x, y=y),
        map_section_key=map_section_key(x, y),
        score=score,
        population_density=population_density,
        density_score=density_score,
        safety_score=safety_score,
        resource_score=resource_score,
        friend_score=friend_score,
    )
