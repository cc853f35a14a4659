"""Tests for keyboard to simulation mapping."""

import pygame
import pytest

from gridsnake.world.controls import Controls, HEADING_KEYS, RESTART_KEY
from gridsnake.world.simulation import GameStatus, Heading


@pytest.fixture
def controls(make_sim):
    return Controls(make_sim())


def test_arrow_keys_map_to_headings():
    assert HEADING_KEYS[pygame.K_UP] is Heading.UP
    assert HEADING_KEYS[pygame.K_DOWN] is Heading.DOWN
    assert HEADING_KEYS[pygame.K_LEFT] is Heading.LEFT
    assert HEADING_KEYS[pygame.K_RIGHT] is Heading.RIGHT
    assert RESTART_KEY == pygame.K_SPACE


def test_direction_key_buffers_heading(controls):
    controls.on_key_down(pygame.K_UP)
    assert controls.simulation.pending_heading is Heading.UP
    assert controls.simulation.heading is Heading.RIGHT


def test_reverse_key_is_ignored(controls):
    controls.on_key_down(pygame.K_LEFT)
    assert controls.simulation.pending_heading is Heading.RIGHT


def test_unmapped_key_does_nothing(controls):
    assert controls.on_key_down(pygame.K_q) is False
    assert controls.simulation.pending_heading is Heading.RIGHT


def test_restart_ignored_while_running(controls, place):
    sim = controls.simulation
    place(sim, [(5, 5)], Heading.RIGHT, food=(0, 0))
    assert controls.on_key_down(pygame.K_SPACE) is False
    assert sim.body == [(5, 5)]


def test_restart_after_game_over(controls, place):
    sim = controls.simulation
    place(sim, [(0, 5)], Heading.LEFT, food=(3, 3))
    sim.tick()
    assert sim.status is GameStatus.OVER
    assert controls.on_key_down(pygame.K_SPACE) is True
    assert sim.status is GameStatus.RUNNING
    assert sim.body == [(10, 10)]


def test_handle_event_reads_keydown_only(controls):
    up = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)
    release = pygame.event.Event(pygame.KEYUP, key=pygame.K_DOWN)
    controls.handle_event(release)
    assert controls.simulation.pending_heading is Heading.RIGHT
    controls.handle_event(up)
    assert controls.simulation.pending_heading is Heading.UP


def test_custom_bindings(make_sim):
    controls = Controls(make_sim(), heading_keys={pygame.K_i: Heading.UP}, restart_key=pygame.K_r)
    controls.on_key_down(pygame.K_UP)
    assert controls.simulation.pending_heading is Heading.RIGHT
    controls.on_key_down(pygame.K_i)
    assert controls.simulation.pending_heading is Heading.UP
