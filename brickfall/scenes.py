"""Scenes the game can show: the playfield and placeholder scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from brickfall.ball import Ball
from brickfall.bar import Bar
from brickfall.block import BlockField
from brickfall.collision import CollisionWorld
from brickfall.constants import Key, SceneId, Stage
from brickfall.frame import draw_frame
from brickfall.keyboard import KeyState
from brickfall.life import Life
from brickfall.shutter import Shutter


class Canvas(Protocol):
    def draw_image(self, x: float, y: float, name: str) -> None: ...


class Scene(ABC):
    """One screen of the game, driven once per frame.

    A scene asks for the game to end by setting ``quit_requested``.
    """

    quit_requested: bool = False

    @abstractmethod
    def input_update(self, keys: KeyState) -> None:
        """Read the keyboard for this frame."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def draw(self, canvas: Canvas) -> None:
        """Draw the scene."""

    @abstractmethod
    def transition_update(self, keys: KeyState) -> SceneId | None:
        """Return the scene to switch to, or None to stay."""


class NullScene(Scene):
    """A scene that does nothing."""

    def input_update(self, keys: KeyState) -> None:
        pass

    def update(self, delta_time: float) -> None:
        pass

    def draw(self, canvas: Canvas) -> None:
        pass

    def transition_update(self, keys: KeyState) -> SceneId | None:
        return None


class GameOverScene(NullScene):
    """The game-over screen; it shows nothing yet and never moves on."""


class MainScene(Scene):
    """The playfield: bar, ball, blocks, lives and the stage-change shutter."""

    def __init__(self) -> None:
        self.world = CollisionWorld()
        self.blocks = BlockField()
        self.bar = Bar()
        self.ball = Ball()
        self.shutter = Shutter()
        self.life = Life()
        self.stage = Stage.FIRST
        self.accepting_input = False
        self.fading_in = True
        self.fading_out = False
        self.quit_requested = False

    def input_update(self, keys: KeyState) -> None:
        if self.accepting_input:
            self.bar.input_update(keys)

    def update(self, delta_time: float) -> None:
        self.world.clear()
        if self.fading_in:
            self._fade_in()
            return
        if self.fading_out:
            self._fade_out()
            return

        self.blocks.register_collisions(self.world, self.stage)
        self.bar.update(self.world, delta_time)
        self.ball.update(self.world, self.stage, self.blocks, self.bar, delta_time)
        self.blocks.update(self.world, self.stage)
        self.life.update(self.ball)
        self.blocks.destroy(self.stage)

        if self.life.is_empty():
            self.quit_requested = True
        if self.ball.is_out():
            self.bar = Bar()
            self.ball = Ball()
        if self.blocks.is_cleared(self.stage):
            self.accepting_input = False
            self.fading_out = True

    def draw(self, canvas: Canvas) -> None:
        self.bar.draw(canvas)
        draw_frame(canvas)
        self.ball.draw(canvas)
        self.blocks.draw(canvas, self.stage)
        self.life.draw(canvas)
        self.shutter.draw(canvas)

    def transition_update(self, keys: KeyState) -> SceneId | None:
        if keys.is_pressed(Key.RETURN):
            return SceneId.GAME_OVER
        return None

    def _next_stage(self) -> None:
        if self.stage is Stage.FIRST:
            self.stage = Stage.SECOND

    def _fade_in(self) -> None:
        if self.shutter.fade_in():
            self.fading_in = False
            self.accepting_input = True

    def _fade_out(self) -> None:
        if self.shutter.fade_out():
            self.fading_out = False
            self.accepting_input = False
            self._next_stage()
            self.fading_in = True
            self.bar = Bar()
            self.ball = Ball()