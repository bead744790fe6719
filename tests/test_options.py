"""Tests for spawn options."""

from spawn_engine.config import Settings
from spawn_engine.core.options import SpawnOptions


class TestSpawnOptionsFromSettings:
    """Test building options from application settings."""

    def test_tuning_fields_copied(self):
        settings = Settings(
            spawn_radius=1500,
            candidate_count=8,
            friend_radius=250,
            max_friends=3,
            section_size=50,
            reservation_ttl_seconds=120,
        )
        options = SpawnOptions.from_settings(settings)

        assert options.spawn_radius == 1500
        assert options.candidate_count == 8
        assert options.friend_radius == 250
        assert options.max_friends == 3
        assert options.section_size == 50
        assert options.reservation_ttl_seconds == 120

    def test_scoring_defaults_kept(self):
        options = SpawnOptions.from_settings(Settings())
        assert options.spawn_region_id == "calculated"
        assert options.density_weight == 0.3
        assert options.placeholder_density == 0.1
