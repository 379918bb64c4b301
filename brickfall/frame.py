"""The border drawn around the window and the playfield."""

from __future__ import annotations

from typing import Protocol

from brickfall.constants import (
    FRAME_LENGTH,
    FRAME_THICKNESS,
    IN_FRAME_H_NUM,
    IN_FRAME_V_NUM,
    MAIN_WINDOW_WIDTH,
    OUT_FRAME_H_NUM,
    OUT_FRAME_V_NUM,
    SCREEN_FRAME_SIZE,
)

VERTICAL_IMAGE = "frameV(4x16).png"
HORIZONTAL_IMAGE = "frameH(16x4).png"


class _Canvas(Protocol):
    def draw_image(self, x: float, y: float, name: str) -> None: ...


def draw_frame(canvas: _Canvas) -> None:
    """Draw the outer window border and the inner playfield border."""
    for index in range(OUT_FRAME_V_NUM):
        canvas.draw_image(0, index * FRAME_LENGTH, VERTICAL_IMAGE)
        canvas.draw_image(MAIN_WINDOW_WIDTH - FRAME_THICKNESS, index * FRAME_LENGTH, VERTICAL_IMAGE)
    for index in range(OUT_FRAME_H_NUM):
        canvas.draw_image(index * FRAME_LENGTH, 0, HORIZONTAL_IMAGE)

    inner_top = SCREEN_FRAME_SIZE - FRAME_THICKNESS
    for index in range(IN_FRAME_V_NUM):
        canvas.draw_image(inner_top, inner_top + index * FRAME_LENGTH, VERTICAL_IMAGE)
        canvas.draw_image(
            MAIN_WINDOW_WIDTH - SCREEN_FRAME_SIZE,
            inner_top + index * FRAME_LENGTH,
            VERTICAL_IMAGE,
        )
    for index in range(IN_FRAME_H_NUM):
        canvas.draw_image(SCREEN_FRAME_SIZE + index * FRAME_LENGTH, inner_top, HORIZONTAL_IMAGE)