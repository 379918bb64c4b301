"""The player's remaining lives."""

from __future__ import annotations

from typing import Protocol

from brickfall.constants import LIFE_INTERVAL, LIFE_X, LIFE_Y, START_LIFE_COUNT

HEART_IMAGE = "heart(32x32).png"
EMPTY_HEART_IMAGE = "emptyHeart(32x32).png"


class _Canvas(Protocol):
    def draw_image(self, x: float, y: float, name: str) -> None: ...


class _BallLike(Protocol):
    def is_out(self) -> bool: ...


class Life:
    """Counts lives down each time the ball leaves the playfield."""

    def __init__(self) -> None:
        self.count = START_LIFE_COUNT

    def update(self, ball: _BallLike) -> None:
        if ball.is_out():
            self.count -= 1

    def draw(self, canvas: _Canvas) -> None:
        """Draw empty hearts for every starting life, then full ones on top."""
        for index in range(START_LIFE_COUNT):
            canvas.draw_image(LIFE_X, LIFE_Y - LIFE_INTERVAL * index, EMPTY_HEART_IMAGE)
        for index in range(self.count):
            canvas.draw_image(LIFE_X, LIFE_Y - LIFE_INTERVAL * index, HEART_IMAGE)

    def is_empty(self) -> bool:
        return self.count <= 0