"""Window, GL state and the frame loop.

The engine knows nothing about snakes. Every frame it drains the pygame event
queue into the active scene, passes the elapsed frame time to
`scene.update(dt)` and lets the scene render before flipping the display.
Scene timing (when the snake moves) is the scene's business.
"""

from __future__ import annotations

from typing import Callable, Optional

import pygame
from OpenGL.GL import (
    glDisable,
    glClearColor,
    GL_DEPTH_TEST,
    GL_CULL_FACE,
)

from gridsnake.config import WIDTH, HEIGHT, FULLSCREEN, FPS, VSYNC, CAPTION, BACKGROUND, SHOW_FPS
from gridsnake.core.scene import Scene


def open_window(width: int, height: int) -> pygame.Surface:  # pragma: no cover - visual
    flags = pygame.DOUBLEBUF | pygame.OPENGL
    if FULLSCREEN:
        flags |= pygame.FULLSCREEN
    try:
        return pygame.display.set_mode((width, height), flags, vsync=(1 if VSYNC else 0))
    except (TypeError, pygame.error):
        # Older pygame builds reject the vsync kwarg, or the driver cannot
        # provide vsync; open the window without it.
        return pygame.display.set_mode((width, height), flags)


class Engine:
    def __init__(self, scene_factory: Optional[Callable[[], Scene]] = None):
        pygame.init()
        pygame.display.set_caption(CAPTION)
        self.window = open_window(WIDTH, HEIGHT)
        self.clock = pygame.time.Clock()

        # 2D only: no depth testing or culling
        glDisable(GL_DEPTH_TEST)
        glDisable(GL_CULL_FACE)
        glClearColor(*BACKGROUND)

        # Scenes may create GL resources, so build one only once the context exists
        if scene_factory is None:
            from gridsnake.world.snakescene import SnakeScene

            scene_factory = SnakeScene
        self.scene: Scene = scene_factory()

    def handle_events(self) -> bool:
        """Forward queued events to the scene; False once the player quits."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            self.scene.handle_event(event)
        return True

    def frame_time(self) -> float:
        # With vsync the driver paces frames; otherwise cap at FPS
        ms = self.clock.tick() if VSYNC else self.clock.tick(FPS)
        return ms / 1000.0

    def render(self):  # pragma: no cover - visual
        fps = self.clock.get_fps() if SHOW_FPS else None
        self.scene.render(fps=fps)
        pygame.display.flip()

    def run(self):  # pragma: no cover - visual
        try:
            while True:
                dt = self.frame_time()
                if not self.handle_events():
                    break
                self.scene.update(dt)
                self.render()
        finally:
            pygame.quit()
