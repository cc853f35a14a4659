import os

# Headless SDL so pygame imports and fonts work without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from gridsnake.world.settings import SimulationConfig
from gridsnake.world.simulation import GridSimulation, Heading


@pytest.fixture
def make_sim():
    """Build a seeded simulation on a small grid; keyword args override the config."""

    def _make(**overrides):
        params = dict(grid_width=20, grid_height=20, seed=1234)
        params.update(overrides)
        return GridSimulation(SimulationConfig(**params))

    return _make


@pytest.fixture
def place():
    """Force a known body, heading and food onto a simulation."""

    def _place(sim, body, heading=Heading.RIGHT, food=None):
        sim.body = list(body)
        sim.heading = heading
        sim.pending_heading = heading
        sim.food = food

    return _place


@pytest.fixture
def rng():
    return random.Random(42)
