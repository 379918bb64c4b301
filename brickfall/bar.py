"""The paddle the player steers along the bottom of the playfield."""

from __future__ import annotations

from typing import Protocol

from brickfall.collision import CollisionWorld
from brickfall.constants import (
    BAR_LENGTH,
    BAR_SPEED,
    BAR_START_X,
    BAR_THICKNESS,
    BAR_Y,
    MAIN_WINDOW_WIDTH,
    SCREEN_FRAME_SIZE,
    Key,
)
from brickfall.keyboard import KeyState
from brickfall.vector2 import Box, Vector2

BAR_IMAGE = "bar.png"

_MIN_X = float(SCREEN_FRAME_SIZE + 1)
_MAX_X = float(MAIN_WINDOW_WIDTH - SCREEN_FRAME_SIZE - BAR_LENGTH - 1)


class _Canvas(Protocol):
    def draw_image(self, x: float, y: float, name: str) -> None: ...


class Bar:
    """A horizontally moving paddle registered in the collision world as ``bar``."""

    def __init__(self) -> None:
        self.x = BAR_START_X
        self._move_left = False
        self._move_right = False

    def input_update(self, keys: KeyState) -> None:
        """Remember which arrow keys are held for the next update."""
        if keys.is_held(Key.LEFT):
            self._move_left = True
        if keys.is_held(Key.RIGHT):
            self._move_right = True

    def update(self, world: CollisionWorld, delta_time: float) -> None:
        """Move as requested, stay inside the frame and register the bar's box."""
        if self._move_left:
            self.x -= BAR_SPEED * delta_time
            self._move_left = False
        if self._move_right:
            self.x += BAR_SPEED * delta_time
            self._move_right = False
        self.x = min(max(self.x, _MIN_X), _MAX_X)
        top_left = Vector2(self.x, BAR_Y)
        bottom_right = Vector2(self.x + BAR_LENGTH, BAR_Y + BAR_THICKNESS)
        world.register("bar", Box(top_left, bottom_right))

    def draw(self, canvas: _Canvas) -> None:
        canvas.draw_image(self.x, BAR_Y, BAR_IMAGE)