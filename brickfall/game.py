"""The stack of scenes and the per-frame game step."""

from __future__ import annotations

from typing import Protocol

from brickfall.constants import Key, SceneId
from brickfall.fps import FrameRateController
from brickfall.keyboard import KeyState
from brickfall.scenes import Canvas, GameOverScene, MainScene, NullScene, Scene


class _Pacer(Protocol):
    def wait(self) -> None: ...


class Game:
    """Runs the scene on top of a stack of scenes, one frame per ``play``."""

    def __init__(self, frame_rate: _Pacer | None = None) -> None:
        self._scenes: list[Scene] = [MainScene()]
        self.pause_scene: Scene = NullScene()
        self.delta_time = 1.0
        self.running = True
        self._frame_rate: _Pacer = frame_rate if frame_rate is not None else FrameRateController()

    @property
    def current_scene(self) -> Scene:
        """The scene on top of the stack; raises RuntimeError if there is none."""
        if not self._scenes:
            raise RuntimeError("no scene to run")
        return self._scenes[-1]

    @property
    def scene_count(self) -> int:
        return len(self._scenes)

    def play(self, keys: KeyState, canvas: Canvas) -> bool:
        """Run one frame; return whether the game should keep running."""
        scene = self.current_scene
        scene.input_update(keys)
        scene.update(self.delta_time)
        scene.draw(canvas)
        target = scene.transition_update(keys)
        if target is not None:
            self.next_scene(target, False)
        if scene.quit_requested or keys.is_pressed(Key.ESCAPE):
            self.running = False
        self._frame_rate.wait()
        return self.running

    def next_scene(self, scene: SceneId, clear_stack: bool) -> None:
        """Push the scene for ``scene``, first emptying the stack if asked.

        Scenes without an implementation push nothing.
        """
        if clear_stack:
            self._scenes.clear()
        if scene is SceneId.MAIN:
            self._scenes.append(MainScene())
        elif scene is SceneId.GAME_OVER:
            self._scenes.append(GameOverScene())

    def back_scene(self) -> None:
        """Drop the top scene, if any."""
        if self._scenes:
            self._scenes.pop()