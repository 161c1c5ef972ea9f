# MIT License (see LICENSE)
"""
Pointer input to spawn requests.

PointerState follows a press/drag/release sequence in screen pixels and, while
the pointer is held, produces one SpawnRequest per tick at the pointer's
world position. The spawn velocity follows the drag velocity plus a little
random jitter, biased upward so particles fountain out of the pointer.
"""
from __future__ import annotations

import numpy as np

from .constants import JITTER_VX, JITTER_VY, POINTER_SAMPLE_INTERVAL, SCREEN_SIZE
from .types import SpawnRequest
from .util import screen_to_world


def jitter_velocity(
    vx_screen: float,
    vy_screen: float,
    screen_size: float,
    rng: np.random.Generator,
) -> tuple[float, float]:
    """
    Convert a pointer velocity (pixels/s, y down) to a jittered world velocity.

        vx = vx_screen/S*2 + U(-0.75, 0.75)
        vy = -vy_screen/S*2 + U(0, 0.75)
    """
    vx = vx_screen / screen_size * 2 + rng.uniform(-JITTER_VX, JITTER_VX)
    vy = -vy_screen / screen_size * 2 + rng.uniform(0.0, JITTER_VY)
    return float(vx), float(vy)


class PointerState:
    """
    Tracks the spawn pointer in screen space.

    Attributes:
        held: True between press() and release().
        x, y: Last pointer position in pixels.
        vx, vy: Last sampled pointer velocity in pixels per second.
    """

    def __init__(self, screen_size: float = SCREEN_SIZE,
                 sample_interval: float = POINTER_SAMPLE_INTERVAL) -> None:
        self.screen_size = screen_size
        self.sample_interval = sample_interval
        self.held = False
        self.x = 0.0
        self.y = 0.0
        self.vx = 0.0
        self.vy = 0.0

    def press(self, x: float, y: float) -> None:
        self.held = True
        self.x, self.y = float(x), float(y)
        self.vx = self.vy = 0.0

    def release(self) -> None:
        self.held = False

    def motion(self, x: float, y: float) -> None:
        """Record a drag sample. Samples outside the window are dropped."""
        if not (0 <= x <= self.screen_size and 0 <= y <= self.screen_size):
            return
        self.vx = (x - self.x) / self.sample_interval
        self.vy = (y - self.y) / self.sample_interval
        self.x, self.y = float(x), float(y)

    def spawn_request(self, rng: np.random.Generator) -> SpawnRequest | None:
        """Spawn request for this tick, or None if the pointer is not held."""
        if not self.held:
            return None
        wx, wy = screen_to_world(self.x, self.y, self.screen_size)
        vx, vy = jitter_velocity(self.vx, self.vy, self.screen_size, rng)
        return SpawnRequest(wx, wy, vx, vy)
