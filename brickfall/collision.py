"""Named axis-aligned boxes and overlap tests between them."""

from __future__ import annotations

from brickfall.vector2 import Box


class CollisionWorld:
    """A registry of named boxes, rebuilt every frame."""

    def __init__(self) -> None:
        self._boxes: dict[str, Box] = {}

    def clear(self) -> None:
        """Forget every registered box."""
        self._boxes.clear()

    def register(self, name: str, box: Box) -> None:
        """Add a box under ``name``; an existing entry with that name is kept."""
        self._boxes.setdefault(name, box)

    def __contains__(self, name: object) -> bool:
        return name in self._boxes

    def is_hit(self, name1: str, name2: str) -> bool:
        """Whether the two named boxes overlap (touching edges do not count).

        Raises KeyError if either name has not been registered.
        """
        first = self._boxes[name1]
        second = self._boxes[name2]
        c1 = first.center
        c2 = second.center
        distance_x = abs(c1.x - c2.x)
        distance_y = abs(c1.y - c2.y)
        half_width_sum = (first.width + second.width) / 2.0
        half_height_sum = (first.height + second.height) / 2.0
        return distance_x < half_width_sum and distance_y < half_height_sum