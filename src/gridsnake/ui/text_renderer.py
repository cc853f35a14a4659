"""Text labels for the 2D OpenGL overlay, rasterized with pygame fonts.

Each label is rendered to a pygame surface once and uploaded as a texture.
Labels drawn with a `key` keep their texture slot and re-upload only when the
text or color changes, which suits counters such as the score.

Expects a screen-space ortho projection (origin top-left) to be active.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    glBegin,
    glEnd,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    glBlendFunc,
    glEnable,
    glDisable,
    GL_TEXTURE_2D,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_LINEAR,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_BLEND,
    GL_SRC_ALPHA,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_QUADS,
)

Color = Tuple[int, int, int, int]

# Fraction of the label size to shift left/up for each anchor
_ANCHORS: Dict[str, Tuple[float, float]] = {
    "topleft": (0.0, 0.0),
    "topright": (1.0, 0.0),
    "bottomleft": (0.0, 1.0),
    "bottomright": (1.0, 1.0),
    "center": (0.5, 0.5),
}


def anchor_offset(align: str, size: Tuple[int, int]) -> Tuple[float, float]:
    """Top-left corner offset for a label of `size` drawn at an anchor point."""
    try:
        fx, fy = _ANCHORS[align]
    except KeyError:
        raise ValueError(
            f"unknown align {align!r}; expected one of {sorted(_ANCHORS)}"
        ) from None
    w, h = size
    return -w * fx, -h * fy


@dataclass
class _Label:
    texture: int
    size: Tuple[int, int] = (0, 0)
    text: Optional[str] = None
    color: Optional[Color] = None


class TextRenderer:
    """Draws single-line labels; call begin() before and end() after a batch."""

    def __init__(self, size: int = 24, font: Optional[pygame.font.Font] = None) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = font or pygame.font.Font(None, size)
        self._labels: Dict[object, _Label] = {}
        self._active = False

    def begin(self) -> None:  # pragma: no cover - visual
        if self._active:
            return
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_TEXTURE_2D)
        self._active = True

    def end(self) -> None:  # pragma: no cover - visual
        if not self._active:
            return
        glDisable(GL_TEXTURE_2D)
        glDisable(GL_BLEND)
        self._active = False

    def _upload(self, label: _Label, text: str, color: Color) -> None:
        surf = self.font.render(text, True, color)
        data = pygame.image.tostring(surf, "RGBA", True)
        w, h = surf.get_size()
        glBindTexture(GL_TEXTURE_2D, label.texture)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        label.size = (w, h)
        label.text = text
        label.color = color

    def _label_for(self, text: str, color: Color, key: Optional[str]) -> _Label:
        slot = key if key is not None else (text, color)
        label = self._labels.get(slot)
        if label is None:
            label = _Label(texture=glGenTextures(1))
            self._labels[slot] = label
        if label.text != text or label.color != color:
            self._upload(label, text, color)
        return label

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color = (255, 255, 255, 255),
        *,
        key: Optional[str] = None,
        align: str = "topleft",
    ) -> Tuple[int, int]:  # pragma: no cover - visual
        """Draw `text` anchored at (x, y); returns the label size."""
        label = self._label_for(text, tuple(color), key)
        w, h = label.size
        dx, dy = anchor_offset(align, label.size)
        left, top = x + dx, y + dy

        glBindTexture(GL_TEXTURE_2D, label.texture)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # Surface rows were flipped on upload, so v=1 is the top edge
        glTexCoord2f(0.0, 1.0)
        glVertex2f(left, top)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(left + w, top)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(left + w, top + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(left, top + h)
        glEnd()
        return w, h


__all__ = ["TextRenderer", "anchor_offset"]
