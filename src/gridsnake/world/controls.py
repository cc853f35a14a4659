"""Controls: keyboard input for the snake scene.

Translates pygame key events into the two calls the simulation accepts:
`set_pending_heading()` for direction keys and `reset()` for the restart key.
Restart only works once the game is over.
"""

from __future__ import annotations

from typing import Dict, Optional

import pygame

from gridsnake.world.simulation import GridSimulation, Heading

HEADING_KEYS: Dict[int, Heading] = {
    pygame.K_UP: Heading.UP,
    pygame.K_DOWN: Heading.DOWN,
    pygame.K_LEFT: Heading.LEFT,
    pygame.K_RIGHT: Heading.RIGHT,
    pygame.K_w: Heading.UP,
    pygame.K_s: Heading.DOWN,
    pygame.K_a: Heading.LEFT,
    pygame.K_d: Heading.RIGHT,
}
RESTART_KEY = pygame.K_SPACE


class Controls:
    def __init__(
        self,
        simulation: GridSimulation,
        *,
        heading_keys: Optional[Dict[int, Heading]] = None,
        restart_key: int = RESTART_KEY,
    ) -> None:
        self.simulation = simulation
        self.heading_keys = dict(HEADING_KEYS if heading_keys is None else heading_keys)
        self.restart_key = restart_key

    def heading_for_key(self, key: int) -> Optional[Heading]:
        return self.heading_keys.get(key)

    def on_key_down(self, key: int) -> bool:
        """Apply a key press. Returns True when the simulation was restarted."""
        if key == self.restart_key:
            if not self.simulation.running:
                self.simulation.reset()
                return True
            return False
        heading = self.heading_for_key(key)
        if heading is not None:
            self.simulation.set_pending_heading(heading)
        return False

    def handle_event(self, event) -> bool:
        if event.type == pygame.KEYDOWN:
            return self.on_key_down(event.key)
        return False


__all__ = ["Controls", "HEADING_KEYS", "RESTART_KEY"]
