"""
Test suite for NavConfig.

Tests cover:
- Defaults
- Immutability
- Value validation
"""

import dataclasses

import pytest
from tick_nav import NavConfig, SearchConfig


class TestNavConfig:
    """Test defaults and validation."""

    def test_defaults(self):
        config = NavConfig()
        assert config.grid_size == 10
        assert config.obstacle_chance == 0.2
        assert config.walk_speed == 2.0
        assert config.search == SearchConfig()

    def test_frozen(self):
        config = NavConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.grid_size = 20

    def test_custom_search(self):
        config = NavConfig(search=SearchConfig.admissible())
        assert config.search.heuristic == "manhattan"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"grid_size": 0},
            {"obstacle_chance": -0.1},
            {"obstacle_chance": 1.5},
            {"walk_speed": 0.0},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            NavConfig(**kwargs)

    def test_reexported_search_config(self):
        from tick_nav.config import SearchConfig as Reexported

        assert Reexported is SearchConfig
