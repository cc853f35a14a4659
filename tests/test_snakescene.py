"""Tests for the snake scene wiring (update and event paths only)."""

import pygame
import pytest

pytest.importorskip("OpenGL.GL", exc_type=ImportError)

from gridsnake.world.settings import SimulationConfig  # noqa: E402
from gridsnake.world.simulation import GameStatus, Heading  # noqa: E402
from gridsnake.world.snakescene import SnakeScene  # noqa: E402


@pytest.fixture
def scene():
    return SnakeScene(SimulationConfig(grid_width=20, grid_height=20, seed=3))


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_scene_starts_with_sprites_and_hud(scene):
    sim = scene.simulation
    assert set(scene.sprites.sprites) == {sim.head, sim.food}
    assert scene.hud.score_label == "Score: 0"
    assert scene.hud.overlay_visible is False
    assert scene.sprites in scene.drawables


def test_update_ticks_once_interval_has_passed(scene):
    sim = scene.simulation
    sim.food = (0, 0)
    scene.update(0.1)
    assert sim.head == (10, 10)
    scene.update(0.06)
    assert sim.head == (11, 10)
    assert (11, 10) in scene.sprites.sprites


def test_key_event_steers_on_next_tick(scene):
    sim = scene.simulation
    sim.food = (0, 0)
    scene.handle_event(_key(pygame.K_DOWN))
    scene.update(0.2)
    assert sim.head == (10, 11)


def test_game_over_shows_overlay_and_stops_ticking(scene):
    sim = scene.simulation
    sim.body = [(19, 4)]
    sim.food = (0, 0)
    scene.update(0.2)
    assert sim.status is GameStatus.OVER
    assert scene.hud.overlay_visible is True
    assert scene.clock.paused is True
    scene.update(1.0)
    assert sim.body == [(19, 4)]


def test_space_restarts_after_game_over(scene):
    sim = scene.simulation
    sim.body = [(0, 4)]
    sim.heading = sim.pending_heading = Heading.LEFT
    scene.update(0.2)
    assert sim.status is GameStatus.OVER

    scene.handle_event(_key(pygame.K_SPACE))
    assert sim.status is GameStatus.RUNNING
    assert sim.body == [(10, 10)]
    assert scene.hud.overlay_visible is False
    assert scene.clock.paused is False
    assert scene.clock.elapsed_ms == 0.0


def test_score_label_tracks_food(scene):
    sim = scene.simulation
    sim.food = (11, 10)
    scene.update(0.2)
    assert sim.score == 10
    assert scene.hud.score_label == "Score: 10"
