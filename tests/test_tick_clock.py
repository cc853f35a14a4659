"""Tests for the frame-time accumulator."""

from gridsnake.world.tick_clock import TickClock


def test_no_tick_before_interval_elapses():
    clock = TickClock()
    assert clock.advance(0.1, 150) is False
    assert clock.advance(0.04, 150) is False
    assert clock.advance(0.02, 150) is True


def test_interval_must_be_exceeded():
    clock = TickClock()
    assert clock.advance(0.125, 125) is False
    assert clock.advance(0.001, 125) is True


def test_at_most_one_tick_per_frame_and_remainder_dropped():
    clock = TickClock()
    assert clock.advance(1.0, 150) is True
    assert clock.elapsed_ms == 0.0
    assert clock.advance(0.1, 150) is False


def test_uses_current_interval():
    clock = TickClock()
    clock.advance(0.1, 150)
    assert clock.advance(0.0, 80) is False
    assert clock.advance(0.001, 80) is True


def test_pause_and_restart():
    clock = TickClock()
    clock.advance(0.1, 150)
    clock.pause()
    assert clock.advance(1.0, 150) is False
    clock.restart()
    assert clock.elapsed_ms == 0.0
    assert clock.advance(0.1, 150) is False
    assert clock.advance(0.1, 150) is True


def test_non_positive_dt_is_ignored():
    clock = TickClock()
    assert clock.advance(-1.0, 150) is False
    assert clock.elapsed_ms == 0.0
