"""Tick clock: turns variable frame times into discrete simulation ticks.

The engine hands every frame's `dt` (seconds) to `advance()`. Once more than
the current interval has accumulated the clock reports a tick and starts
accumulating from zero again; the leftover is dropped, so at most one tick
happens per frame even after a long stall.
"""

from __future__ import annotations


class TickClock:
    def __init__(self) -> None:
        self.elapsed_ms = 0.0
        self.paused = False

    def advance(self, dt: float, interval_ms: float) -> bool:
        """Accumulate `dt` seconds; return True when a tick is due."""
        if self.paused or dt <= 0.0:
            return False
        self.elapsed_ms += dt * 1000.0
        if self.elapsed_ms > interval_ms:
            self.elapsed_ms = 0.0
            return True
        return False

    def pause(self) -> None:
        self.paused = True

    def restart(self) -> None:
        """Resume with an empty accumulator (used after a reset)."""
        self.elapsed_ms = 0.0
        self.paused = False


__all__ = ["TickClock"]
