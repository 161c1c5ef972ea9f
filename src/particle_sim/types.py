# MIT License (see LICENSE)
"""
Core type definitions for the particle simulation.

Defines the fundamental data structures:
- Model / Integrator: closed enumerations selecting the physics and scheme.
- Particle: one pool slot with kinematic state, carried acceleration and ttl.
- ParticleView: immutable per-particle record handed to renderers.
- SpawnRequest: position and velocity of a particle to create.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .constants import DEFAULT_MAX_TTL
from .util import f64


class Model(Enum):
    """Force model driving the particles."""
    FROZEN = "frozen"
    GRAVITY = "gravity"
    ATTRACTOR = "attractor"


class Integrator(Enum):
    """Numerical scheme used to advance a particle by one step."""
    EULER = "euler"
    RK4 = "rk4"


@dataclass
class Particle:
    """
    A single pool slot.

    Attributes:
        exists: Whether the slot holds a live particle.
        position: [x, y, z] in world units. z is carried but never driven.
        velocity: [vx, vy] in world units per second.
        acceleration: Magnitude of the central pull computed at the end of the
                      previous attractor step. The RK4 attractor uses it as its
                      first stage, so it survives mode switches.
        ttl: Remaining lifetime. Counts down by a fixed amount per tick.
    """
    exists: bool = False
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    acceleration: float = 0.0
    ttl: float = DEFAULT_MAX_TTL

    def __post_init__(self) -> None:
        """Convert position/velocity to float64 arrays for consistent numerics."""
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    @property
    def z(self) -> float:
        return float(self.position[2])

    @property
    def vx(self) -> float:
        return float(self.velocity[0])

    @property
    def vy(self) -> float:
        return float(self.velocity[1])

    def expire(self, max_ttl: float) -> None:
        """Kill the particle and reset its slot for reuse."""
        self.exists = False
        self.ttl = max_ttl
        self.acceleration = 0.0


@dataclass(frozen=True)
class ParticleView:
    """
    Read-only view of a live particle for rendering.

    Attributes:
        x, y, z: World position.
        ttl_ratio: Remaining lifetime as a fraction of the current maximum,
                   in (0, 1]. Renderers fade colour with it.
        integrator: Scheme active when the view was produced.
    """
    x: float
    y: float
    z: float
    ttl_ratio: float
    integrator: Integrator


@dataclass(frozen=True)
class SpawnRequest:
    """Position and initial velocity for a new particle, in world units."""
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def velocity(self) -> tuple[float, float]:
        return (self.vx, self.vy)

