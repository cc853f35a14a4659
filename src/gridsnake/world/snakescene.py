"""Snake scene: wires the grid simulation to input, timing and drawing.

The scene owns one `GridSimulation` and hands that same instance to the
controls (input side) and to the sprite layer and HUD (render side); there is
no module-level game object. Each frame the tick clock decides whether the
simulation advances.
"""

from __future__ import annotations

import random
from typing import Optional

from OpenGL.GL import (
    glClear,
    glClearColor,
    glMatrixMode,
    glLoadIdentity,
    glOrtho,
    GL_COLOR_BUFFER_BIT,
    GL_PROJECTION,
    GL_MODELVIEW,
)

from gridsnake.config import WIDTH, HEIGHT, BACKGROUND
from gridsnake.core.scene import Scene
from gridsnake.world.cell_sprites import CellSpriteLayer
from gridsnake.world.controls import Controls
from gridsnake.world.settings import SimulationConfig
from gridsnake.world.simulation import GameStatus, GridSimulation, Snapshot
from gridsnake.world.snake_hud import SnakeHUD
from gridsnake.world.tick_clock import TickClock


class SnakeScene(Scene):
    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        hud: Optional[SnakeHUD] = None,
    ) -> None:
        super().__init__()
        self.simulation = GridSimulation(config, rng=rng)
        self.clock = TickClock()
        self.controls = Controls(self.simulation)
        self.sprites = CellSpriteLayer(self.simulation.config.cell_size)
        self.hud = hud or SnakeHUD(WIDTH, HEIGHT)
        self._last_status = self.simulation.status

        self.simulation.subscribe(self.sprites)
        self.simulation.subscribe(self.hud)
        self.simulation.subscribe(self._on_snapshot)

        self.drawables.append(self.sprites)
        self.updaters.append(self._advance)

        print(
            f"[Snake] Scene ready: {self.simulation.width}x{self.simulation.height} grid, "
            f"{self.simulation.interval_ms} ms per move"
        )

    def _advance(self, dt: float) -> None:
        if not self.simulation.running:
            return
        if self.clock.advance(dt, self.simulation.interval_ms):
            self.simulation.tick()

    def _on_snapshot(self, snapshot: Snapshot) -> None:
        if snapshot.status is not self._last_status:
            if snapshot.status is GameStatus.OVER:
                self.clock.pause()
                print(f"[Snake] Game over, score {snapshot.score}")
            else:
                self.clock.restart()
                print("[Snake] Restarted")
        self._last_status = snapshot.status

    def handle_event(self, event) -> None:
        self.controls.handle_event(event)

    def render(self, *, fps: float | None = None) -> None:  # pragma: no cover - visual
        glClearColor(*BACKGROUND)
        glClear(GL_COLOR_BUFFER_BIT)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, WIDTH, HEIGHT, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

        self.draw()
        self.hud.draw(fps=fps)
