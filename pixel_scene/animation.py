"""Frame driver.

:class:`AnimationLoop` calls registered tick callbacks with a monotonically
increasing time value (milliseconds since start). Callbacks run strictly in
registration order, so registering "move sprites" before "draw" guarantees
every draw sees the settled post-move scene.

Replaying the same time values through :meth:`AnimationLoop.run` always
produces the same draw calls.
"""

import logging
import math
import time
from typing import Callable, Iterable, List, Optional

from pixel_scene.point import Point

logger = logging.getLogger(__name__)

TickFn = Callable[[float], None]


def js_round(value: float) -> int:
    """Round half up (``round`` in Python rounds half to even)."""
    return math.floor(value + 0.5)


def orbit_point(
    t: float, center: Point, radius: float, period_ms: float = 1000.0
) -> Point:
    """Integer point on a circle around ``center`` at time ``t``.

    ``period_ms`` is the time for one radian of travel.
    """
    angle = t / period_ms
    return Point(
        js_round(center.x + radius * math.cos(angle)),
        js_round(center.y + radius * math.sin(angle)),
    )


class AnimationLoop:
    fps: float
    running: bool

    def __init__(
        self,
        fps: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive: {fps}")
        self.fps = fps
        self.running = False
        self._clock = clock
        self._sleep = sleep
        self._callbacks: List[TickFn] = []
        self._last_t: Optional[float] = None

    def on_tick(self, callback: TickFn) -> TickFn:
        """Register ``callback``; usable as a decorator."""
        self._callbacks.append(callback)
        return callback

    def tick(self, t: float) -> None:
        """Run one frame at time ``t`` (ms).

        Raises:
            ValueError: If ``t`` is earlier than the previous tick.
        """
        if self._last_t is not None and t < self._last_t:
            raise ValueError(f"Time went backwards: {t} < {self._last_t}")
        self._last_t = t
        for callback in self._callbacks:
            callback(t)

    def run(self, times: Iterable[float]) -> int:
        """Tick once per value in ``times``; returns the frame count."""
        frames = 0
        for t in times:
            self.tick(t)
            frames += 1
        return frames

    def start(self, max_frames: Optional[int] = None) -> int:
        """Tick in real time at ``fps`` until :meth:`stop` or ``max_frames``.

        Returns:
            int: Number of frames ticked.
        """
        interval = 1.0 / self.fps
        started = self._clock()
        next_frame = started
        frames = 0
        self.running = True
        logger.debug("animation loop started at %s fps", self.fps)
        while self.running and (max_frames is None or frames < max_frames):
            now = self._clock()
            if now < next_frame:
                self._sleep(next_frame - now)
                now = self._clock()
            self.tick((now - started) * 1000.0)
            frames += 1
            next_frame += interval
        self.running = False
        logger.debug("animation loop stopped after %s frames", frames)
        return frames

    def stop(self) -> None:
        """Stop after the current frame; no in-flight work is interrupted."""
        self.running = False
