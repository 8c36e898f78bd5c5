"""FrameLoop - fixed-timestep frame and timer scheduler."""

import heapq
import logging
import time
from typing import Callable

from tick_transition.types import FrameCallback, FrameHandle

logger = logging.getLogger(__name__)


class FrameLoop:
    """Deterministic scheduler that presents frames on a virtual millisecond clock.

    Each step advances the clock by one frame interval, fires timers that
    have come due, then presents the frames that were requested before the
    step began. A frame requested while a step is in progress is presented
    on the following step, the way a display's next-frame callback behaves.
    """

    def __init__(self, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._interval = 1000.0 / fps
        self._time = 0.0
        self._frame_number = 0
        self._frames: list[FrameHandle] = []
        self._timers: list[tuple[float, int, FrameHandle]] = []
        self._seq = 0
        self._stop_requested: bool = False

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def pending(self) -> int:
        frames = sum(1 for handle in self._frames if not handle.cancelled)
        timers = sum(1 for _, _, handle in self._timers if not handle.cancelled)
        return frames + timers

    def now(self) -> float:
        return self._time

    def request_frame(self, callback: FrameCallback) -> FrameHandle:
        handle = FrameHandle(callback)
        self._frames.append(handle)
        return handle

    def call_later(self, delay: float, callback: Callable[[], None]) -> FrameHandle:
        handle = FrameHandle(callback)
        self._seq += 1
        heapq.heappush(self._timers, (self._time + max(delay, 0.0), self._seq, handle))
        return handle

    def advance(self, ms: float) -> None:
        """Move the clock forward without presenting frames or firing timers."""
        if ms < 0:
            raise ValueError("cannot advance the clock backwards")
        self._time += ms

    def stop(self) -> None:
        self._stop_requested = True

    def step(self) -> None:
        self._frame_number += 1
        self._time += self._interval

        frames = self._frames
        self._frames = []

        while self._timers and self._timers[0][0] <= self._time:
            _, _, handle = heapq.heappop(self._timers)
            if not handle.cancelled:
                handle.callback()

        for handle in frames:
            if not handle.cancelled:
                handle.callback(self._time)

    def run(self, n: int) -> None:
        self._stop_requested = False
        for _ in range(n):
            self.step()
            if self._stop_requested:
                break

    def run_forever(self) -> None:
        self._stop_requested = False
        logger.debug("Frame loop started at %d fps", self._fps)
        dt = self._interval / 1000.0
        while not self._stop_requested:
            start = time.monotonic()
            self.step()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
        logger.debug("Frame loop stopped after %d frames", self._frame_number)
