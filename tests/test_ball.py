import pytest

from brickfall.ball import Ball
from brickfall.bar import Bar
from brickfall.block import BlockField
from brickfall.collision import CollisionWorld
from brickfall.constants import (
    BALL_DIAMETER,
    BALL_START_X,
    BALL_START_Y,
    BAR_Y,
    BLOCK_START_X,
    BLOCK_START_Y,
    MAIN_WINDOW_HEIGHT,
    MAIN_WINDOW_WIDTH,
    SCREEN_FRAME_SIZE,
    Stage,
)
from brickfall.vector2 import Vector2


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def draw_image(self, x, y, name):
        self.calls.append((x, y, name))


def _step(ball, stage=Stage.FIRST, delta_time=1.0, blocks=None):
    world = CollisionWorld()
    blocks = blocks or BlockField()
    bar = Bar()
    blocks.register_collisions(world, stage)
    bar.update(world, delta_time)
    ball.update(world, stage, blocks, bar, delta_time)
    return world


def _place(ball, position, direction):
    ball.position = position
    ball.old_position = position
    ball.direction = direction


def test_initial_state():
    ball = Ball()
    assert ball.position == Vector2(BALL_START_X, BALL_START_Y)
    assert ball.direction.x == pytest.approx(-2.5, abs=1e-3)
    assert ball.direction.y > 0
    assert ball.direction.length() == pytest.approx(5.0, abs=1e-4)


def test_free_flight_moves_by_direction():
    ball = Ball()
    start, direction = ball.position, ball.direction
    _step(ball)
    assert ball.position.x == pytest.approx(start.x + direction.x)
    assert ball.position.y == pytest.approx(start.y + direction.y)
    assert ball.old_position == ball.position


def test_registers_ball_box():
    ball = Ball()
    world = _step(ball)
    assert "ball" in world


def test_left_wall():
    ball = Ball()
    _place(ball, Vector2(42, 300), Vector2(-5, 0))
    _step(ball)
    assert ball.position.x == SCREEN_FRAME_SIZE
    assert ball.direction == Vector2(5, 0)


def test_right_wall():
    ball = Ball()
    _place(ball, Vector2(590, 300), Vector2(5, 0))
    _step(ball)
    assert ball.position.x == MAIN_WINDOW_WIDTH - SCREEN_FRAME_SIZE - BALL_DIAMETER
    assert ball.direction == Vector2(-5, 0)


def test_top_wall():
    ball = Ball()
    _place(ball, Vector2(300, 42), Vector2(0, -5))
    _step(ball)
    assert ball.position.y == SCREEN_FRAME_SIZE
    assert ball.direction == Vector2(0, 5)


def test_bar_bounce_center():
    ball = Ball()
    _place(ball, Vector2(352, 420), Vector2(0, 5))
    _step(ball)
    assert ball.position.y == BAR_Y - BALL_DIAMETER
    assert ball.direction.y < 0
    assert ball.direction.x == pytest.approx(0.0, abs=1e-3)
    assert ball.direction.length() == pytest.approx(5.0)


def test_bar_bounce_left_end_sends_ball_left():
    ball = Ball()
    _place(ball, Vector2(322, 420), Vector2(0, 5))
    _step(ball)
    assert ball.direction.y < 0
    assert ball.direction.x < 0


def test_missing_bar_raises():
    ball = Ball()
    world = CollisionWorld()
    blocks = BlockField()
    blocks.register_collisions(world, Stage.FIRST)
    with pytest.raises(KeyError):
        ball.update(world, Stage.FIRST, blocks, Bar(), 1.0)


def test_block_hit_from_above():
    ball = Ball()
    _place(ball, Vector2(100, 58), Vector2(0, 5))
    _step(ball, stage=Stage.SECOND)
    assert ball.position.y == BLOCK_START_Y - BALL_DIAMETER
    assert ball.direction == Vector2(0, -5)


def test_block_hit_from_left():
    ball = Ball()
    _place(ball, Vector2(55, 75), Vector2(8, 0))
    _step(ball, stage=Stage.SECOND)
    assert ball.position.x == BLOCK_START_X - BALL_DIAMETER
    assert ball.direction == Vector2(-8, 0)


def test_block_hit_on_corner():
    ball = Ball()
    _place(ball, Vector2(60, 60), Vector2(6, 6))
    _step(ball, stage=Stage.SECOND)
    assert ball.position == Vector2(BLOCK_START_X - BALL_DIAMETER, BLOCK_START_Y - BALL_DIAMETER)
    assert ball.direction == Vector2(-6, -6)


def test_missing_block_is_passed():
    ball = Ball()
    start, direction = Vector2(100, 58), Vector2(0, 5)
    _place(ball, start, direction)
    _step(ball, stage=Stage.FIRST)
    assert ball.position == start + direction
    assert ball.direction == direction


def test_is_out():
    ball = Ball()
    assert not ball.is_out()
    ball.position = Vector2(300, MAIN_WINDOW_HEIGHT + BALL_DIAMETER + 1)
    assert ball.is_out()
    ball.position = Vector2(300, MAIN_WINDOW_HEIGHT + BALL_DIAMETER)
    assert not ball.is_out()


def test_reset():
    ball = Ball()
    fresh = Ball()
    _place(ball, Vector2(10, 10), Vector2(1, 1))
    ball.reset()
    assert ball.position == fresh.position
    assert ball.old_position == fresh.position
    assert ball.direction == fresh.direction


def test_draw():
    ball = Ball()
    canvas = RecordingCanvas()
    ball.draw(canvas)
    assert canvas.calls == [(BALL_START_X, BALL_START_Y, "ball.png")]