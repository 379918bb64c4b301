"""Per-frame keyboard state with press and release counters."""

from __future__ import annotations

from collections.abc import Collection

from brickfall.constants import Key


class KeyState:
    """Counts, for every watched key, how many frames it has been held or released."""

    def __init__(self) -> None:
        self._pressing: dict[Key, int] = dict.fromkeys(Key, 0)
        self._releasing: dict[Key, int] = dict.fromkeys(Key, 0)

    def update(self, pressed: Collection[Key]) -> None:
        """Advance one frame; ``pressed`` holds the keys that are down now."""
        for key in Key:
            if key in pressed:
                self._pressing[key] += 1
                self._releasing[key] = 0
            else:
                self._releasing[key] += 1
                self._pressing[key] = 0

    def is_held(self, key: Key) -> bool:
        """Whether the key is down this frame."""
        return self._pressing[key] > 0

    def is_pressed(self, key: Key) -> bool:
        """Whether the key went down on this frame."""
        return self._pressing[key] == 1

    def is_released(self, key: Key) -> bool:
        """Whether the key went up on this frame."""
        return self._releasing[key] == 1

    def pressing_count(self, key: Key) -> int:
        """Number of consecutive frames the key has been down."""
        return self._pressing[key]

    def releasing_count(self, key: Key) -> int:
        """Number of consecutive frames the key has been up."""
        return self._releasing[key]