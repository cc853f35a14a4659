"""Tests for SimulationConfig defaults and validation."""

import pytest

from gridsnake.world.settings import SimulationConfig


def test_defaults_match_classic_game():
    cfg = SimulationConfig().validate()
    assert cfg.cell_size == 16
    assert (cfg.grid_width, cfg.grid_height) == (50, 37)
    assert cfg.initial_interval_ms == 150
    assert cfg.interval_step_ms == 3
    assert cfg.min_interval_ms == 80
    assert cfg.food_award == 10
    assert cfg.initial_length == 1
    assert cfg.food_placement == "rejection"
    assert cfg.start_cell == (25, 18)


def test_validate_returns_self():
    cfg = SimulationConfig(grid_width=12, grid_height=12)
    assert cfg.validate() is cfg


@pytest.mark.parametrize(
    "overrides",
    [
        {"cell_size": 0},
        {"grid_width": 0},
        {"grid_height": -1},
        {"min_interval_ms": 0},
        {"initial_interval_ms": 50, "min_interval_ms": 80},
        {"interval_step_ms": -3},
        {"food_award": -10},
        {"initial_length": 0},
        {"grid_width": 4, "initial_length": 4},
        {"grid_width": 2, "grid_height": 1, "initial_length": 2},
        {"food_placement": "spiral"},
    ],
)
def test_invalid_parameters_raise(overrides):
    with pytest.raises(ValueError):
        SimulationConfig(**overrides).validate()


def test_three_segment_seed_fits_small_grid():
    SimulationConfig(grid_width=5, grid_height=3, initial_length=3).validate()
