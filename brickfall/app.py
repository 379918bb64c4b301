"""The game window, its event loop and the command that starts it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

import pygame

from brickfall.constants import MAIN_WINDOW_HEIGHT, MAIN_WINDOW_TITLE, MAIN_WINDOW_WIDTH, Key
from brickfall.fps import FrameRateController
from brickfall.game import Game
from brickfall.graphics import GraphicsError, Renderer
from brickfall.keyboard import KeyState

DEFAULT_IMAGE_DIRECTORY = "image"

_PYGAME_KEYS: dict[Key, int] = {
    Key.ESCAPE: pygame.K_ESCAPE,
    Key.A: pygame.K_a,
    Key.C: pygame.K_c,
    Key.D: pygame.K_d,
    Key.P: pygame.K_p,
    Key.R: pygame.K_r,
    Key.S: pygame.K_s,
    Key.W: pygame.K_w,
    Key.X: pygame.K_x,
    Key.Z: pygame.K_z,
    Key.RETURN: pygame.K_RETURN,
    Key.LSHIFT: pygame.K_LSHIFT,
    Key.UP: pygame.K_UP,
    Key.DOWN: pygame.K_DOWN,
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
}


class _PressedKeys(Protocol):
    def __getitem__(self, keycode: int) -> bool: ...


def keys_from_pressed(pressed: _PressedKeys) -> frozenset[Key]:
    """The watched keys that are down in ``pressed``, indexed by pygame key code."""
    return frozenset(key for key, code in _PYGAME_KEYS.items() if pressed[code])


class Application:
    """Opens the window, runs the game loop until it ends and cleans up."""

    def __init__(
        self,
        image_directory: str | Path = DEFAULT_IMAGE_DIRECTORY,
        windowed: bool = True,
        max_frames: int | None = None,
    ) -> None:
        self.image_directory = Path(image_directory)
        self.windowed = windowed
        self.max_frames = max_frames
        self.frames = 0

    def run(self) -> int:
        """Play until the window is closed or the game ends; return the exit status.

        Raises GraphicsError if the window or the images cannot be set up.
        """
        self.frames = 0
        pygame.display.init()
        try:
            flags = 0 if self.windowed else pygame.FULLSCREEN
            try:
                screen = pygame.display.set_mode((MAIN_WINDOW_WIDTH, MAIN_WINDOW_HEIGHT), flags)
            except pygame.error as exc:
                raise GraphicsError("002", f"cannot open the window: {exc}") from exc
            pygame.display.set_caption(MAIN_WINDOW_TITLE)

            renderer = Renderer(screen)
            renderer.load_images(self.image_directory)
            try:
                self._loop(renderer)
            finally:
                renderer.release()
        finally:
            pygame.quit()
        return 0

    def _loop(self, renderer: Renderer) -> None:
        frame_rate = FrameRateController()
        game = Game(frame_rate)
        keys = KeyState()
        running = True
        while running and (self.max_frames is None or self.frames < self.max_frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.WINDOWMOVED:
                    frame_rate.invalidate()
            if not running:
                break
            keys.update(keys_from_pressed(pygame.key.get_pressed()))
            renderer.begin()
            running = game.play(keys, renderer)
            pygame.display.flip()
            self.frames += 1


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="brickfall", description="A block-breaking arcade game.")
    parser.add_argument(
        "--images",
        default=DEFAULT_IMAGE_DIRECTORY,
        help="directory holding the game's images (default: %(default)s)",
    )
    parser.add_argument("--fullscreen", action="store_true", help="run in full-screen mode")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; report a setup failure on stderr and return 1."""
    args = _parse_args(argv)
    app = Application(args.images, windowed=not args.fullscreen, max_frames=args.frames)
    try:
        return app.run()
    except GraphicsError as exc:
        print(f"Error Code: {exc.code}\n{exc}\n{MAIN_WINDOW_TITLE} will now exit.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())