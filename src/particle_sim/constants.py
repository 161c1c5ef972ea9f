# MIT License (see LICENSE)
"""
Physical and pool constants used throughout the simulation.

World coordinates span [-1, 1] on both axes with the attractor sitting at the
origin. Units are arbitrary "screen" units; the values below are tuned for
that space rather than for SI.
"""
from __future__ import annotations

# Uniform gravitational acceleration along y.
GRAVITY: float = -9.8

# Strength of the central inverse-square pull (a = C / r²).
ATTRACTOR_STRENGTH: float = 10.0

# Floor applied to r² before dividing by it in the attractor model.
# Without it a particle reaching the origin would get an infinite
# acceleration; with it the pull is capped at ATTRACTOR_STRENGTH / R2_FLOOR.
R2_FLOOR: float = 1e-4

# Fixed number of particle slots in the pool.
PARTICLE_COUNT: int = 500

# Lifetime removed from every live particle per tick, independent of dt.
AGE_DECREMENT: float = 0.1

# Absorbs accumulated rounding of repeated AGE_DECREMENT subtraction so that
# a ttl of T expires after exactly ceil(T / AGE_DECREMENT) ticks.
TTL_EPSILON: float = 1e-9

# Startup mode values (frozen, Euler, small gravity step).
DEFAULT_TIME_STEP: float = 0.005
DEFAULT_MAX_TTL: float = 15.0

# Host-facing hints: window edge length in pixels and target tick period.
SCREEN_SIZE: int = 1000
TICK_INTERVAL_MS: int = 15

# Pointer velocity is sampled as a pixel delta over this many seconds.
POINTER_SAMPLE_INTERVAL: float = 0.005

# Uniform jitter added to spawn velocity: vx in [-0.75, 0.75], vy in [0, 0.75].
JITTER_VX: float = 0.75
JITTER_VY: float = 0.75

DEFAULT_POINT_SIZE: float = 5.0
