from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Protocol

UpdateFn = Callable[[float], None]


class Drawable(Protocol):
    def draw(self) -> None: ...  # noqa: D401


@dataclass
class Scene:
    # Drawn in insertion order, back to front
    drawables: List[Drawable] = field(default_factory=list)
    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, dt: float) -> None:
        for fn in self.updaters:
            fn(dt)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    def draw(self) -> None:  # pragma: no cover - visual
        for d in self.drawables:
            d.draw()

    # Scenes own their full render pipeline (projection, clear, overlays)
    def render(self, *, fps: float | None = None) -> None:  # pragma: no cover - visual
        self.draw()
