# MIT License (see LICENSE)
"""
Utility functions for vector math and coordinate conversion.

Particles live in world space ([-1, 1] on each axis, y up) while pointer
input arrives in screen space (pixels, origin top-left, y down).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used for particle positions and velocities so tuple/list inputs are
    accepted and the numerics stay in double precision.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a vector of any length. Avoids sqrt."""
    return float(np.dot(v, v))


def screen_to_world(x: float, y: float, screen_size: float) -> tuple[float, float]:
    """
    Map a pixel coordinate to world space.

    (0, 0) maps to (-1, 1) and (screen_size, screen_size) maps to (1, -1).
    """
    return x / screen_size * 2.0 - 1.0, -y / screen_size * 2.0 + 1.0


def world_to_screen(x: float, y: float, screen_size: float) -> tuple[float, float]:
    """Inverse of screen_to_world."""
    return (x + 1.0) * screen_size / 2.0, (1.0 - y) * screen_size / 2.0
