# MIT License (see LICENSE)
"""
Force models for the particle simulation.

Particles are unit mass, so each model is expressed directly as an
acceleration:

- Gravity: constant acceleration g along y.
- Attractor: inverse-square pull toward the origin. The returned scalar
  a = C / r² is applied per axis as -pos * a (so the resulting vector has
  magnitude C / r rather than following a true 1/r² law).

Key concepts:
- The attractor is singular at the origin. r² is floored at `r2_floor`
  (see constants.R2_FLOOR) so the pull stays finite.
"""
from __future__ import annotations

import numpy as np

from ..constants import ATTRACTOR_STRENGTH, GRAVITY, R2_FLOOR
from ..util import norm2


def gravity_acceleration(g: float = GRAVITY) -> float:
    """Vertical acceleration under uniform gravity. Independent of position."""
    return g


def attractor_acceleration(
    position: np.ndarray,
    strength: float = ATTRACTOR_STRENGTH,
    r2_floor: float = R2_FLOOR,
) -> float:
    """
    Scalar central pull at a position.

    Implements a = C / max(x² + y² + z², r2_floor).

    Args:
        position: [x, y, z] world position.
        strength: Attractor constant C.
        r2_floor: Smallest r² used in the division.

    Returns:
        The pull magnitude a, to be multiplied by -position per axis.
    """
    r2 = max(norm2(position), r2_floor)
    return strength / r2
