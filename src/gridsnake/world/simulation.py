"""Grid simulation: the whole game state and its per-tick rules.

`GridSimulation` knows nothing about pixels, fonts or keys. It is driven from
outside (`set_pending_heading`, `tick`, `reset`) and publishes an immutable
`Snapshot` to every subscribed renderer after each tick and each reset.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from gridsnake.world.food import Cell, PLACEMENT_STRATEGIES
from gridsnake.world.settings import SimulationConfig


class Heading(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Heading":
        dx, dy = self.value
        return Heading((-dx, -dy))


class GameStatus(Enum):
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    score: int
    interval_ms: int
    status: GameStatus

    @property
    def head(self) -> Cell:
        return self.snake[0]


SnapshotListener = Callable[[Snapshot], None]


class GridSimulation:
    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = (config or SimulationConfig()).validate()
        self.width = self.config.grid_width
        self.height = self.config.grid_height
        self._rng = rng or random.Random(self.config.seed)
        self._place = PLACEMENT_STRATEGIES[self.config.food_placement]
        self._listeners: List[SnapshotListener] = []

        self.body: List[Cell] = []
        self.heading = Heading.RIGHT
        self.pending_heading = Heading.RIGHT
        self.food: Optional[Cell] = None
        self.score = 0
        self.interval_ms = self.config.initial_interval_ms
        self.status = GameStatus.RUNNING
        self._init_state()

    # ------------------------------------------------------------------
    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING

    def subscribe(self, listener: SnapshotListener) -> None:
        """Register a renderer; it immediately receives the current snapshot."""
        self._listeners.append(listener)
        listener(self.snapshot())

    def unsubscribe(self, listener: SnapshotListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.body),
            food=self.food,
            score=self.score,
            interval_ms=self.interval_ms,
            status=self.status,
        )

    def _emit(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # ------------------------------------------------------------------
    def _init_state(self) -> None:
        cx, cy = self.config.start_cell
        # Seed segments trail behind the head, opposite to the initial heading
        self.body = [(cx - i, cy) for i in range(self.config.initial_length)]
        self.heading = Heading.RIGHT
        self.pending_heading = Heading.RIGHT
        self.score = 0
        self.interval_ms = self.config.initial_interval_ms
        self.status = GameStatus.RUNNING
        self.food = self._place_food()

    def _place_food(self) -> Optional[Cell]:
        return self._place(self.width, self.height, set(self.body), self._rng)

    def _in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def _game_over(self) -> GameStatus:
        self.status = GameStatus.OVER
        self._emit()
        return self.status

    # ------------------------------------------------------------------
    def set_pending_heading(self, heading: Heading) -> None:
        """Buffer a heading for the next tick; reversals and input while over are ignored."""
        if not self.running:
            return
        if heading is self.heading.opposite:
            return
        self.pending_heading = heading

    def tick(self) -> GameStatus:
        if not self.running:
            return self.status

        self.heading = self.pending_heading
        dx, dy = self.heading.delta
        hx, hy = self.head
        new_head = (hx + dx, hy + dy)

        if not self._in_bounds(new_head):
            return self._game_over()
        # The tail has not moved yet, so stepping onto it also counts
        if new_head in self.body:
            return self._game_over()

        self.body.insert(0, new_head)
        if new_head == self.food:
            self.score += self.config.food_award
            self.interval_ms = max(
                self.config.min_interval_ms,
                self.interval_ms - self.config.interval_step_ms,
            )
            self.food = self._place_food()
        else:
            self.body.pop()

        self._emit()
        return self.status

    def reset(self) -> None:
        self._init_state()
        self._emit()


__all__ = [
    "GameStatus",
    "GridSimulation",
    "Heading",
    "Snapshot",
    "SnapshotListener",
]
