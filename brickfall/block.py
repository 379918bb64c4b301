"""The grid of breakable blocks for every stage."""

from __future__ import annotations

from typing import Protocol

from brickfall.collision import CollisionWorld
from brickfall.constants import (
    BLOCK_COLUMNS,
    BLOCK_HEIGHT,
    BLOCK_ROWS,
    BLOCK_START_X,
    BLOCK_START_Y,
    BLOCK_WIDTH,
    Stage,
)
from brickfall.vector2 import Box, Vector2

BLOCK_IMAGE = "block.png"

_EMPTY_ROW = "0" * BLOCK_COLUMNS
_FULL_ROW = "1" * BLOCK_COLUMNS
_FRAMED_ROW = "0" + "1" * (BLOCK_COLUMNS - 2) + "0"

_LAYOUTS: dict[Stage, tuple[str, ...]] = {
    Stage.FIRST: (_EMPTY_ROW,) + (_FRAMED_ROW,) * 6 + (_EMPTY_ROW,) * 5,
    Stage.SECOND: (_FULL_ROW,) * BLOCK_ROWS,
    Stage.THIRD: (_FULL_ROW,) * BLOCK_ROWS,
    Stage.FOURTH: (_FULL_ROW,) * BLOCK_ROWS,
    Stage.FIFTH: (_FULL_ROW,) * BLOCK_ROWS,
}


class _Canvas(Protocol):
    def draw_image(self, x: float, y: float, name: str) -> None: ...


def _origin(index: int) -> Vector2:
    row, column = divmod(index, BLOCK_COLUMNS)
    return Vector2(BLOCK_START_X + BLOCK_WIDTH * column, BLOCK_START_Y + BLOCK_HEIGHT * row)


class BlockField:
    """Which blocks are still standing on each stage, and which are about to break."""

    def __init__(self) -> None:
        self._blocks: dict[Stage, list[bool]] = {
            stage: [cell == "1" for row in rows for cell in row]
            for stage, rows in _LAYOUTS.items()
        }
        self._pending: list[int] = []

    def register_collisions(self, world: CollisionWorld, stage: Stage) -> None:
        """Register a box named ``block<i>`` for every standing block."""
        for index, standing in enumerate(self._blocks[stage]):
            if standing:
                top_left = _origin(index)
                bottom_right = top_left + Vector2(BLOCK_WIDTH, BLOCK_HEIGHT)
                world.register(f"block{index}", Box(top_left, bottom_right))

    def update(self, world: CollisionWorld, stage: Stage) -> None:
        """Mark every standing block that the ball touches for destruction."""
        for index, standing in enumerate(self._blocks[stage]):
            if standing and world.is_hit(f"block{index}", "ball"):
                self._pending.append(index)

    def destroy(self, stage: Stage) -> None:
        """Remove the marked blocks from ``stage``."""
        blocks = self._blocks[stage]
        for index in self._pending:
            blocks[index] = False
        self._pending.clear()

    def active_blocks(self, stage: Stage) -> tuple[bool, ...]:
        """Standing flags of the stage's blocks, row by row."""
        return tuple(self._blocks[stage])

    def is_cleared(self, stage: Stage) -> bool:
        """Whether no block is left standing on ``stage``."""
        return not any(self._blocks[stage])

    def draw(self, canvas: _Canvas, stage: Stage) -> None:
        for index, standing in enumerate(self._blocks[stage]):
            if standing:
                origin = _origin(index)
                canvas.draw_image(origin.x, origin.y, BLOCK_IMAGE)