"""Snake HUD: score label and the game-over / restart overlay.

Subscribes to the simulation like the sprite layer does, keeping only what it
needs to draw: the score text and whether the overlay is showing.
"""

from __future__ import annotations

from typing import Optional

from gridsnake.config import WIDTH, HEIGHT, HUD_FONT_SIZE, GAME_OVER_FONT_SIZE
from gridsnake.ui.text_renderer import TextRenderer
from gridsnake.world.simulation import GameStatus, Snapshot

SCORE_COLOR = (255, 255, 255, 255)
GAME_OVER_COLOR = (255, 0, 0, 255)
FPS_COLOR = (255, 255, 0, 255)
GAME_OVER_TEXT = "GAME OVER"
RESTART_TEXT = "Press SPACE to restart"


class SnakeHUD:
    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        *,
        text: Optional[TextRenderer] = None,
        title_text: Optional[TextRenderer] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.text = text or TextRenderer(HUD_FONT_SIZE)
        self.title_text = title_text or TextRenderer(GAME_OVER_FONT_SIZE)
        self.score_label = "Score: 0"
        self.overlay_visible = False

    def __call__(self, snapshot: Snapshot) -> None:
        self.present(snapshot)

    def present(self, snapshot: Snapshot) -> None:
        self.score_label = f"Score: {snapshot.score}"
        self.overlay_visible = snapshot.status is GameStatus.OVER

    def draw(self, fps: Optional[float] = None) -> None:  # pragma: no cover - visual
        self.text.begin()
        self.text.draw_text(self.score_label, 16, 16, SCORE_COLOR, key="score")
        if fps is not None:
            self.text.draw_text(
                f"FPS: {fps:5.1f}", self.width - 16, 16, FPS_COLOR, key="fps", align="topright"
            )
        if self.overlay_visible:
            cx, cy = self.width / 2, self.height / 2
            self.title_text.draw_text(GAME_OVER_TEXT, cx, cy, GAME_OVER_COLOR, align="center")
            self.text.draw_text(RESTART_TEXT, cx, cy + 50, SCORE_COLOR, align="center")
        self.text.end()


__all__ = ["SnakeHUD"]
