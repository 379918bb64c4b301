"""The ball and how it bounces off walls, the bar and blocks."""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum
from typing import Protocol

from brickfall.bar import Bar
from brickfall.block import BlockField
from brickfall.collision import CollisionWorld
from brickfall.constants import (
    BALL_DIAMETER,
    BALL_START_ANGLE,
    BALL_START_SPEED,
    BALL_START_X,
    BALL_START_Y,
    BAR_SLOPE_CHANGE_INTERVAL,
    BAR_SLOPE_LARGE,
    BAR_SLOPE_MEDIUM,
    BAR_SLOPE_SMALL,
    BAR_Y,
    BLOCK_COLUMNS,
    BLOCK_HEIGHT,
    BLOCK_START_X,
    BLOCK_START_Y,
    BLOCK_WIDTH,
    MAIN_WINDOW_HEIGHT,
    MAIN_WINDOW_WIDTH,
    PI,
    SCREEN_FRAME_SIZE,
    Stage,
)
from brickfall.vector2 import Box, Vector2

BALL_IMAGE = "ball.png"

# (segment count from the bar's left end, tilt added to the 90 degree bounce)
_BAR_SLOPES = (
    (1, BAR_SLOPE_LARGE),
    (2, BAR_SLOPE_MEDIUM),
    (3, BAR_SLOPE_SMALL),
    (5, 0.0),
    (6, -BAR_SLOPE_SMALL),
    (7, -BAR_SLOPE_MEDIUM),
)


class _Canvas(Protocol):
    def draw_image(self, x: float, y: float, name: str) -> None: ...


class _Side(Enum):
    """Which side or corner of a block the ball came from."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    LU = "lu"
    RU = "ru"
    RD = "rd"
    LD = "ld"


_REFLECT: dict[_Side, Callable[[Vector2], Vector2]] = {
    _Side.LEFT: Vector2.reverse_left,
    _Side.RIGHT: Vector2.reverse_right,
    _Side.UP: Vector2.reverse_up,
    _Side.DOWN: Vector2.reverse_down,
    _Side.LU: Vector2.reverse_lu,
    _Side.RU: Vector2.reverse_ru,
    _Side.RD: Vector2.reverse_rd,
    _Side.LD: Vector2.reverse_ld,
}


class Ball:
    """The ball, registered in the collision world as ``ball``."""

    def __init__(self) -> None:
        self.position = Vector2(BALL_START_X, BALL_START_Y)
        self.old_position = self.position
        self.angle = BALL_START_ANGLE
        self.speed = BALL_START_SPEED
        self.direction = self._heading()

    def reset(self) -> None:
        """Put the ball back at its start position, speed and angle."""
        self.position = Vector2(BALL_START_X, BALL_START_Y)
        self.old_position = self.position
        self.angle = BALL_START_ANGLE
        self.speed = BALL_START_SPEED
        self.direction = self._heading()

    def _heading(self) -> Vector2:
        radians = self.angle * PI / 180.0
        return Vector2(self.speed * math.cos(radians), -self.speed * math.sin(radians))

    def update(
        self,
        world: CollisionWorld,
        stage: Stage,
        blocks: BlockField,
        bar: Bar,
        delta_time: float,
    ) -> None:
        """Move one step and bounce off whatever was hit.

        The bar and the stage's blocks must already be registered in ``world``.
        """
        self.position += self.direction * delta_time
        size = Vector2(BALL_DIAMETER, BALL_DIAMETER)
        world.register("ball", Box(self.position, self.position + size))

        self._bounce_off_walls()
        self._bounce_off_bar(world, bar)
        self._bounce_off_blocks(world, stage, blocks)

        self.old_position = self.position

    def is_out(self) -> bool:
        """Whether the ball has fallen below the bottom of the window."""
        return self.position.y > MAIN_WINDOW_HEIGHT + BALL_DIAMETER

    def draw(self, canvas: _Canvas) -> None:
        canvas.draw_image(self.position.x, self.position.y, BALL_IMAGE)

    def _bounce_off_walls(self) -> None:
        right_limit = MAIN_WINDOW_WIDTH - SCREEN_FRAME_SIZE - BALL_DIAMETER
        if self.position.x < SCREEN_FRAME_SIZE:
            self.direction = self.direction.reverse_right()
            self.position = Vector2(SCREEN_FRAME_SIZE, self.position.y)
        if self.position.x > right_limit:
            self.direction = self.direction.reverse_left()
            self.position = Vector2(right_limit, self.position.y)
        if self.position.y < SCREEN_FRAME_SIZE:
            self.direction = self.direction.reverse_down()
            self.position = Vector2(self.position.x, SCREEN_FRAME_SIZE)
        self.angle = self.direction.theta()

    def _bounce_off_bar(self, world: CollisionWorld, bar: Bar) -> None:
        if world.is_hit("ball", "bar"):
            ball_center_x = self.position.x - BALL_DIAMETER / 2.0
            for steps, tilt in _BAR_SLOPES:
                if ball_center_x < bar.x + BAR_SLOPE_CHANGE_INTERVAL * steps:
                    break
            else:
                tilt = -BAR_SLOPE_LARGE
            self.direction = self.direction.turn(90.0 + tilt)
            self.position = Vector2(self.position.x, BAR_Y - BALL_DIAMETER)
        self.angle = self.direction.theta()

    def _bounce_off_blocks(self, world: CollisionWorld, stage: Stage, blocks: BlockField) -> None:
        side: _Side | None = None
        for index, standing in enumerate(blocks.active_blocks(stage)):
            if standing and world.is_hit("ball", f"block{index}"):
                row, column = divmod(index, BLOCK_COLUMNS)
                base = Vector2(
                    BLOCK_START_X + BLOCK_WIDTH * column,
                    BLOCK_START_Y + BLOCK_HEIGHT * row,
                )
                side = self._resolve(base, side)
        if side is not None:
            self.direction = _REFLECT[side](self.direction)
        self.angle = self.direction.theta()

    def _resolve(self, base: Vector2, side: _Side | None) -> _Side | None:
        """Find where the ball came from relative to a block and push it out."""
        old_x = int(self.old_position.x)
        old_y = int(self.old_position.y)
        # An earlier position inside the block matches no region; give up then.
        limit = int(max(abs(old_x - base.x), abs(old_y - base.y))) + BLOCK_WIDTH + BLOCK_HEIGHT + 2
        for grow in range(limit):
            left = base.x - grow
            top = base.y - grow
            right = base.x + BLOCK_WIDTH + grow
            bottom = base.y + BLOCK_HEIGHT + grow
            if old_x < left and top <= old_y < bottom:
                side = _Side.LEFT
            elif old_x >= right and top <= old_y < bottom:
                side = _Side.RIGHT
            elif old_y < top and left <= old_x < right:
                side = _Side.UP
            elif old_y >= bottom and left <= old_x < right:
                side = _Side.DOWN
            elif old_x == left and old_y == top:
                side = _Side.LU
            elif old_x == right and old_y == top - 1.0:
                side = _Side.RU
            elif old_x == right and old_y == bottom:
                side = _Side.RD
            elif old_x == left and old_y == bottom - 1.0:
                side = _Side.LD
            if side is not None:
                break

        x, y = self.position.x, self.position.y
        block_left = base.x - BALL_DIAMETER
        block_right = base.x + BLOCK_WIDTH
        block_top = base.y - BALL_DIAMETER
        block_bottom = base.y + BLOCK_HEIGHT
        placements = {
            _Side.LEFT: (block_left, y),
            _Side.RIGHT: (block_right, y),
            _Side.UP: (x, block_top),
            _Side.DOWN: (x, block_bottom),
            _Side.LU: (block_left, block_top),
            _Side.RU: (block_right, block_top),
            _Side.RD: (block_right, block_bottom),
            _Side.LD: (block_left, block_bottom),
        }
        if side is not None:
            self.position = Vector2(*placements[side])
        return side