import pytest

from brickfall.block import BlockField
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


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def draw_image(self, x, y, name):
        self.calls.append((x, y, name))


def _ball_over(index):
    row, column = divmod(index, BLOCK_COLUMNS)
    corner = Vector2(BLOCK_START_X + BLOCK_WIDTH * column + 2, BLOCK_START_Y + BLOCK_HEIGHT * row + 2)
    return Box(corner, corner + Vector2(8, 8))


def test_first_stage_layout():
    field = BlockField()
    active = field.active_blocks(Stage.FIRST)
    assert len(active) == BLOCK_ROWS * BLOCK_COLUMNS
    assert sum(active) == 60
    assert not active[0]
    assert active[BLOCK_COLUMNS + 1]


@pytest.mark.parametrize("stage", [Stage.SECOND, Stage.THIRD, Stage.FOURTH, Stage.FIFTH])
def test_later_stages_are_full(stage):
    field = BlockField()
    active = field.active_blocks(stage)
    assert len(active) == BLOCK_ROWS * BLOCK_COLUMNS
    assert sum(active) == BLOCK_ROWS * BLOCK_COLUMNS
    assert field.is_cleared(stage) is False


def test_register_only_standing_blocks():
    world = CollisionWorld()
    BlockField().register_collisions(world, Stage.FIRST)
    assert "block0" not in world
    assert "block13" in world


def test_hit_block_is_destroyed():
    field = BlockField()
    world = CollisionWorld()
    field.register_collisions(world, Stage.FIRST)
    world.register("ball", _ball_over(13))
    field.update(world, Stage.FIRST)
    before = field.active_blocks(Stage.FIRST)
    field.destroy(Stage.FIRST)
    after = field.active_blocks(Stage.FIRST)
    assert not after[13]
    assert [i for i, (a, b) in enumerate(zip(before, after)) if a != b] == [13]


def test_destroy_is_per_stage_and_clears_pending():
    field = BlockField()
    world = CollisionWorld()
    field.register_collisions(world, Stage.SECOND)
    world.register("ball", _ball_over(0))
    field.update(world, Stage.SECOND)
    field.destroy(Stage.SECOND)
    field.destroy(Stage.THIRD)
    assert sum(field.active_blocks(Stage.THIRD)) == BLOCK_ROWS * BLOCK_COLUMNS
    assert sum(field.active_blocks(Stage.SECOND)) == BLOCK_ROWS * BLOCK_COLUMNS - 1


def test_update_needs_ball():
    field = BlockField()
    world = CollisionWorld()
    field.register_collisions(world, Stage.FIRST)
    with pytest.raises(KeyError):
        field.update(world, Stage.FIRST)


def test_clearing_a_stage():
    field = BlockField()
    assert not field.is_cleared(Stage.FIRST)
    standing = [i for i, s in enumerate(field.active_blocks(Stage.FIRST)) if s]
    world = CollisionWorld()
    for index in standing:
        world.clear()
        field.register_collisions(world, Stage.FIRST)
        world.register("ball", _ball_over(index))
        field.update(world, Stage.FIRST)
        field.destroy(Stage.FIRST)
    assert field.is_cleared(Stage.FIRST)
    assert not field.is_cleared(Stage.SECOND)


def test_draw_one_image_per_standing_block():
    field = BlockField()
    canvas = RecordingCanvas()
    field.draw(canvas, Stage.FIRST)
    assert len(canvas.calls) == sum(field.active_blocks(Stage.FIRST))
    assert {name for _, _, name in canvas.calls} == {"block.png"}
    assert canvas.calls[0][:2] == (BLOCK_START_X + BLOCK_WIDTH, BLOCK_START_Y + BLOCK_HEIGHT)