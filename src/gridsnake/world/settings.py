"""Simulation parameters.

The defaults come from `config.py`; tests and alternative front ends build
their own `SimulationConfig` instead of patching module constants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gridsnake.config import (
    CELL_SIZE,
    GRID_WIDTH,
    GRID_HEIGHT,
    INITIAL_TICK_MS,
    TICK_STEP_MS,
    MIN_TICK_MS,
    FOOD_AWARD,
    INITIAL_SNAKE_LENGTH,
    FOOD_PLACEMENT,
)
from gridsnake.world.food import PLACEMENT_STRATEGIES


@dataclass(frozen=True)
class SimulationConfig:
    cell_size: int = CELL_SIZE
    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    initial_interval_ms: int = INITIAL_TICK_MS
    interval_step_ms: int = TICK_STEP_MS
    min_interval_ms: int = MIN_TICK_MS
    food_award: int = FOOD_AWARD
    initial_length: int = INITIAL_SNAKE_LENGTH
    food_placement: str = FOOD_PLACEMENT
    # Seed for the food RNG; None draws from system entropy
    seed: Optional[int] = None

    @property
    def start_cell(self) -> tuple[int, int]:
        return (self.grid_width // 2, self.grid_height // 2)

    def validate(self) -> "SimulationConfig":
        """Raise ValueError on an unusable parameter set; returns self."""
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(
                f"grid must be at least 1x1, got {self.grid_width}x{self.grid_height}"
            )
        if self.min_interval_ms <= 0:
            raise ValueError(
                f"min_interval_ms must be positive, got {self.min_interval_ms}"
            )
        if self.initial_interval_ms < self.min_interval_ms:
            raise ValueError(
                "initial_interval_ms "
                f"({self.initial_interval_ms}) is below min_interval_ms "
                f"({self.min_interval_ms})"
            )
        if self.interval_step_ms < 0:
            raise ValueError(
                f"interval_step_ms must not be negative, got {self.interval_step_ms}"
            )
        if self.food_award < 0:
            raise ValueError(f"food_award must not be negative, got {self.food_award}")
        if self.initial_length < 1:
            raise ValueError(
                f"initial_length must be at least 1, got {self.initial_length}"
            )
        # The seed snake trails to the left of the start cell
        if self.initial_length > self.start_cell[0] + 1:
            raise ValueError(
                f"a snake of length {self.initial_length} does not fit a grid "
                f"{self.grid_width} cells wide"
            )
        if self.initial_length >= self.grid_width * self.grid_height:
            raise ValueError("the seed snake must leave room for food")
        if self.food_placement not in PLACEMENT_STRATEGIES:
            raise ValueError(
                f"unknown food_placement {self.food_placement!r}; "
                f"expected one of {sorted(PLACEMENT_STRATEGIES)}"
            )
        return self
