"""Retained-mode sprites for the grid.

`CellSpriteLayer` subscribes to a simulation and keeps one `CellSprite` per
occupied cell. Each snapshot is diffed against the previous one and only the
cells whose sprite appeared, vanished or changed kind are touched, so a normal
move updates three cells (new head, old head turned body, old tail) instead of
rebuilding the whole snake.

Drawing uses flat colored quads through the fixed-function pipeline in a
screen-space ortho projection set up by the scene.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Set, Tuple

from pygame.math import Vector2
from OpenGL.GL import (
    glBegin,
    glEnd,
    glColor3f,
    glVertex2f,
    GL_QUADS,
)

from gridsnake.config import HEAD_COLOR, BODY_COLOR, FOOD_COLOR
from gridsnake.world.food import Cell
from gridsnake.world.simulation import Snapshot

HEAD = "head"
BODY = "body"
FOOD = "food"

DEFAULT_COLORS: Dict[str, Tuple[float, float, float]] = {
    HEAD: HEAD_COLOR,
    BODY: BODY_COLOR,
    FOOD: FOOD_COLOR,
}


def cell_to_pixel(cell: Cell, cell_size: int) -> Vector2:
    """Pixel-space center of a grid cell."""
    x, y = cell
    half = cell_size / 2.0
    return Vector2(x * cell_size + half, y * cell_size + half)


def sprite_kinds(snapshot: Snapshot) -> Dict[Cell, str]:
    """Which sprite belongs on which cell: head for index 0, body for the rest."""
    kinds: Dict[Cell, str] = {}
    if snapshot.food is not None:
        kinds[snapshot.food] = FOOD
    for i, cell in enumerate(snapshot.snake):
        kinds[cell] = HEAD if i == 0 else BODY
    return kinds


@dataclass
class CellSprite:
    cell: Cell
    kind: str
    position: Vector2
    size: float
    color: Tuple[float, float, float] = (1.0, 1.0, 1.0)

    def draw(self) -> None:  # pragma: no cover - visual
        half = self.size / 2.0
        x, y = self.position.x, self.position.y
        glColor3f(*self.color)
        glBegin(GL_QUADS)
        glVertex2f(x - half, y - half)
        glVertex2f(x + half, y - half)
        glVertex2f(x + half, y + half)
        glVertex2f(x - half, y + half)
        glEnd()


class CellSpriteLayer:
    def __init__(
        self,
        cell_size: int,
        colors: Optional[Dict[str, Tuple[float, float, float]]] = None,
    ) -> None:
        self.cell_size = cell_size
        self.colors = dict(DEFAULT_COLORS if colors is None else colors)
        self.sprites: Dict[Cell, CellSprite] = {}
        # Cells touched by the most recent snapshot
        self.last_changed: Set[Cell] = set()

    def __call__(self, snapshot: Snapshot) -> None:
        self.present(snapshot)

    def present(self, snapshot: Snapshot) -> Set[Cell]:
        wanted = sprite_kinds(snapshot)
        changed: Set[Cell] = set()

        for cell in list(self.sprites):
            if cell not in wanted:
                del self.sprites[cell]
                changed.add(cell)

        for cell, kind in wanted.items():
            sprite = self.sprites.get(cell)
            if sprite is None:
                self.sprites[cell] = self._make_sprite(cell, kind)
                changed.add(cell)
            elif sprite.kind != kind:
                sprite.kind = kind
                sprite.color = self.colors[kind]
                changed.add(cell)

        self.last_changed = changed
        return changed

    def _make_sprite(self, cell: Cell, kind: str) -> CellSprite:
        return CellSprite(
            cell=cell,
            kind=kind,
            position=cell_to_pixel(cell, self.cell_size),
            size=float(self.cell_size),
            color=self.colors[kind],
        )

    def draw(self) -> None:  # pragma: no cover - visual
        for sprite in self.sprites.values():
            sprite.draw()


__all__ = [
    "BODY",
    "CellSprite",
    "CellSpriteLayer",
    "FOOD",
    "HEAD",
    "cell_to_pixel",
    "sprite_kinds",
]
