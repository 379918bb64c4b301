"""Image loading and drawing onto a pygame surface."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

import pygame

IMAGES: tuple[str, ...] = (
    "frameV(4x16).png",
    "frameH(16x4).png",
    "bar.png",
    "block.png",
    "ball.png",
    "fontex.png",
    "brack(128x128).png",
    "heart(32x32).png",
    "emptyHeart(32x32).png",
)

BACKGROUND = (40, 0, 60)
COLOR_KEY = (0, 255, 0)


class GraphicsError(Exception):
    """Raised when an image cannot be loaded."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"error {code}: {message}")
        self.code = code


@dataclass(frozen=True)
class Color:
    """An ARGB colour with 8-bit channels."""

    a: int = 255
    r: int = 255
    g: int = 255
    b: int = 255

    def to_pygame(self) -> pygame.Color:
        return pygame.Color(self.r, self.g, self.b, self.a)


WHITE = Color()


def _clamp_alpha(alpha: int) -> int:
    return max(0, min(255, alpha))


def _point(x: float, y: float) -> tuple[int, int]:
    return math.floor(x), math.floor(y)


class Renderer:
    """Draws named images, tiles, lines and rectangles onto a target surface."""

    def __init__(self, target: pygame.Surface) -> None:
        self.target = target
        self._textures: dict[str, pygame.Surface] = {}

    def load_images(self, directory: str | Path) -> None:
        """Load every image the game uses from ``directory``.

        Images without an alpha channel treat pure green as transparent.
        Raises GraphicsError if an image is missing or unreadable.
        """
        base = Path(directory)
        for name in IMAGES:
            path = base / name
            try:
                image = pygame.image.load(str(path))
            except (pygame.error, FileNotFoundError, OSError) as exc:
                raise GraphicsError("009", f"cannot load {path}: {exc}") from exc
            if image.get_width() == 0 or image.get_height() == 0:
                raise GraphicsError("010", f"{path} has no pixels")
            if pygame.display.get_surface() is not None:
                image = image.convert_alpha() if image.get_flags() & pygame.SRCALPHA else image.convert()
            if not image.get_flags() & pygame.SRCALPHA:
                image.set_colorkey(COLOR_KEY)
            self._textures[name] = image

    def release(self) -> None:
        """Drop every loaded image."""
        self._textures.clear()

    def size_of(self, name: str) -> tuple[int, int]:
        """Width and height of a loaded image; raises KeyError if unknown."""
        return self._textures[name].get_size()

    def begin(self) -> None:
        """Clear the target to the background colour."""
        self.target.fill(BACKGROUND)

    def draw_image(self, x: float, y: float, name: str) -> None:
        """Draw a loaded image with its top-left corner at (x, y)."""
        self.target.blit(self._textures[name], _point(x, y))

    def draw_image_alpha(self, x: float, y: float, name: str, alpha: int) -> None:
        """Draw an image with its opacity scaled by ``alpha`` (clamped to 0..255)."""
        texture = self._textures[name]
        self.target.blit(self._faded(texture, None, alpha), _point(x, y))

    def draw_tile(self, x: float, y: float, name: str, target_id: int, target_size: int) -> None:
        """Draw square tile number ``target_id`` of a tile sheet."""
        texture = self._textures[name]
        self.target.blit(texture, _point(x, y), self._tile_area(texture, target_id, target_size))

    def draw_tile_alpha(
        self, x: float, y: float, name: str, target_id: int, target_size: int, alpha: int
    ) -> None:
        """Draw a tile with its opacity scaled by ``alpha`` (clamped to 0..255)."""
        texture = self._textures[name]
        area = self._tile_area(texture, target_id, target_size)
        self.target.blit(self._faded(texture, area, alpha), _point(x, y))

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color = WHITE) -> None:
        """Draw a line; the end point is extended one pixel downwards."""
        pygame.draw.line(self.target, color.to_pygame(), (x1, y1), (x2, y2 + 1))

    def draw_square(self, x1: int, y1: int, x2: int, y2: int, color: Color = WHITE) -> None:
        """Draw the outline of the rectangle with corners (x1, y1) and (x2, y2)."""
        corners = [(x1, y1), (x2, y1), (x2, y2), (x1, y2)]
        pygame.draw.lines(self.target, color.to_pygame(), True, corners)

    @staticmethod
    def _tile_area(texture: pygame.Surface, target_id: int, target_size: int) -> pygame.Rect:
        if target_size <= 0:
            raise ValueError("tile size must be positive")
        columns = texture.get_width() // target_size
        if columns == 0:
            raise ValueError("tile size is wider than the image")
        row, column = divmod(target_id, columns)
        return pygame.Rect(target_size * column, target_size * row, target_size, target_size)

    @staticmethod
    def _faded(texture: pygame.Surface, area: pygame.Rect | None, alpha: int) -> pygame.Surface:
        rect = area if area is not None else texture.get_rect()
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        layer.blit(texture, (0, 0), rect)
        layer.fill((255, 255, 255, _clamp_alpha(alpha)), special_flags=pygame.BLEND_RGBA_MULT)
        return layer