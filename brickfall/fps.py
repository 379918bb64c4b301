"""Frame pacing towards a fixed target rate, with a running average."""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable

from brickfall.constants import FPS_UPDATE_INTERVAL, TARGET_FPS

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class FrameRateController:
    """Sleeps between frames so the game runs at the target frame rate.

    ``clock`` returns the current time in whole milliseconds; ``sleep``
    takes a duration in seconds.
    """

    def __init__(
        self,
        clock: Callable[[], int] = _now_ms,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self._stamps: deque[int] = deque()
        self._counter = 0
        self._active = True
        self.fps = 0.0

    def invalidate(self) -> None:
        """Discard the timing history, e.g. after the window was moved."""
        self._active = False

    def wait(self) -> None:
        """Sleep until the current frame is due and record its time."""
        if not self._active:
            self._stamps.clear()
            self.fps = 0.0
            self._active = True
        if self.fps == 0.0:
            logger.debug("measuring FPS...")
        else:
            logger.debug("FPS: %f", self.fps)
        self._counter += 1
        self._sleep(self._wait_time() / 1000)
        self._record()
        if self._counter == TARGET_FPS:
            self._update_average()
            self._counter = 0

    def _update_average(self) -> None:
        count = len(self._stamps)
        if count < FPS_UPDATE_INTERVAL:
            return
        took = self._stamps[-1] - self._stamps[0]
        average = took / (count - 1)
        if average == 0:
            return
        self.fps = 1000 / average

    def _record(self) -> None:
        self._stamps.append(self._clock())
        if len(self._stamps) > FPS_UPDATE_INTERVAL:
            self._stamps.popleft()

    def _wait_time(self) -> int:
        count = len(self._stamps)
        if count == 0:
            return 0
        should_take = int(1000 / TARGET_FPS * count)
        actually_took = self._clock() - self._stamps[0]
        return max(should_take - actually_took, 0)