# MIT License (see LICENSE)
"""
Diagnostic quantities over the live particles of a pool.

Used for sanity checks in tests and for the benchmark printout. None of
these are conserved in general (particles spawn and expire every tick), but
over a run with no spawning they make energy drift between the Euler and
RK4 schemes visible.
"""
from __future__ import annotations
import numpy as np

from ..pool import ParticlePool


def live_count(pool: ParticlePool) -> int:
    """Number of particles that currently exist."""
    return pool.live_count()


def kinetic_energy(pool: ParticlePool) -> float:
    """
    Total kinetic energy of the live particles.

    T = Σ 0.5 * v²   (all particles have unit mass)
    """
    ke = 0.0
    for p in pool.live():
        ke += 0.5 * float(np.dot(p.velocity, p.velocity))
    return ke


def mean_ttl_ratio(pool: ParticlePool) -> float:
    """Mean remaining lifetime fraction of the live particles; 0.0 if none."""
    ratios = [p.ttl / pool.max_ttl for p in pool.live()]
    if not ratios:
        return 0.0
    return float(np.mean(ratios))
