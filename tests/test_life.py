from brickfall.ball import Ball
from brickfall.constants import (
    BALL_DIAMETER,
    LIFE_INTERVAL,
    LIFE_X,
    LIFE_Y,
    MAIN_WINDOW_HEIGHT,
    START_LIFE_COUNT,
)
from brickfall.life import Life
from brickfall.vector2 import Vector2


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def draw_image(self, x, y, name):
        self.calls.append((x, y, name))


def _lost_ball():
    ball = Ball()
    ball.position = Vector2(300, MAIN_WINDOW_HEIGHT + BALL_DIAMETER + 5)
    return ball


def test_starts_full():
    life = Life()
    assert life.count == START_LIFE_COUNT
    assert not life.is_empty()


def test_ball_in_play_keeps_lives():
    life = Life()
    life.update(Ball())
    assert life.count == START_LIFE_COUNT


def test_lost_ball_costs_a_life():
    life = Life()
    life.update(_lost_ball())
    assert life.count == START_LIFE_COUNT - 1


def test_empty_after_all_lives_lost():
    life = Life()
    for _ in range(START_LIFE_COUNT):
        assert not life.is_empty()
        life.update(_lost_ball())
    assert life.is_empty()


def test_draw_hearts():
    life = Life()
    life.update(_lost_ball())
    canvas = RecordingCanvas()
    life.draw(canvas)
    empty = [call for call in canvas.calls if call[2] == "emptyHeart(32x32).png"]
    full = [call for call in canvas.calls if call[2] == "heart(32x32).png"]
    assert len(empty) == START_LIFE_COUNT
    assert len(full) == life.count
    assert canvas.calls[: len(empty)] == empty
    assert full[-1] == (LIFE_X, LIFE_Y - LIFE_INTERVAL * (life.count - 1), "heart(32x32).png")