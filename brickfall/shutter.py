"""The tiled curtain that slides over the screen between stages."""

from __future__ import annotations

from typing import Protocol

from brickfall.constants import (
    MAIN_WINDOW_HEIGHT,
    SHUTTER_HEIGHT,
    SHUTTER_SPEED,
    SHUTTER_START_Y,
    SHUTTER_TRANSPARENT_HEIGHT,
    SHUTTER_WIDTH,
)

SHUTTER_IMAGE = "brack(128x128).png"

_STEP = SHUTTER_HEIGHT - SHUTTER_TRANSPARENT_HEIGHT - 1


class _Canvas(Protocol):
    def draw_image(self, x: float, y: float, name: str) -> None: ...


class Shutter:
    """A square grid of tiles that slides up (fade in) or down (fade out)."""

    def __init__(self) -> None:
        self._count = MAIN_WINDOW_HEIGHT // _STEP + 1
        self._lowered_y = SHUTTER_START_Y + (self._count - 1) * _STEP + SHUTTER_HEIGHT
        self.y = self._lowered_y

    def fade_in(self) -> bool:
        """Slide up one step; return True once fully raised."""
        if self.y > SHUTTER_START_Y:
            self.y -= SHUTTER_SPEED
            return False
        self.y = SHUTTER_START_Y
        return True

    def fade_out(self) -> bool:
        """Slide down one step; return True once fully lowered."""
        if self.y < self._lowered_y:
            self.y += SHUTTER_SPEED
            return False
        self.y = self._lowered_y
        return True

    def draw(self, canvas: _Canvas) -> None:
        for row in range(self._count):
            for column in range(self._count):
                canvas.draw_image(float(SHUTTER_WIDTH * column), self.y + _STEP * row, SHUTTER_IMAGE)