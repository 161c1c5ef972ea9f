# MIT License (see LICENSE)
"""
Fixed-capacity particle storage.

ParticlePool is a ring buffer: N preallocated Particle slots plus a cursor
naming the next slot to overwrite. Spawning always succeeds; when the cursor
lands on a particle that is still alive, that particle is evicted early.
Particles die on their own once their ttl is used up by age().

Structure:
    pool = ParticlePool(capacity=500, max_ttl=15.0)
    pool.spawn((x, y), (vx, vy))
    ...integrate live particles...
    pool.age(0.1)
    for view in pool.snapshot(Integrator.EULER):
        draw(view)
"""
from __future__ import annotations
import logging
from typing import Iterator, Sequence

from .constants import AGE_DECREMENT, DEFAULT_MAX_TTL, PARTICLE_COUNT, TTL_EPSILON
from .types import Integrator, Particle, ParticleView

logger = logging.getLogger(__name__)


class PoolSnapshot:
    """
    Lazy view over the live particles of a pool.

    Each iteration walks the pool afresh, so the same snapshot object can be
    iterated any number of times and always reflects the current state.
    Nothing is mutated. Use freeze() to take an immutable copy, e.g. at the
    end of a tick when another thread will render it.
    """

    def __init__(self, pool: "ParticlePool", integrator: Integrator) -> None:
        self._pool = pool
        self._integrator = integrator

    def __iter__(self) -> Iterator[ParticleView]:
        max_ttl = self._pool.max_ttl
        for p in self._pool:
            if p.exists:
                yield ParticleView(
                    x=p.x,
                    y=p.y,
                    z=p.z,
                    ttl_ratio=p.ttl / max_ttl,
                    integrator=self._integrator,
                )

    def __len__(self) -> int:
        return self._pool.live_count()

    def freeze(self) -> tuple[ParticleView, ...]:
        """Materialize the current views into a tuple."""
        return tuple(self)


class ParticlePool:
    """
    Ring buffer of particles with round-robin recycling and age-based expiry.

    Attributes:
        max_ttl: Lifetime given to newly spawned particles. Changed only via
                 rescale_ttl() so live lifetimes stay proportional.
    """

    def __init__(self, capacity: int = PARTICLE_COUNT, max_ttl: float = DEFAULT_MAX_TTL) -> None:
        if capacity < 1:
            raise ValueError(f"Pool capacity must be at least 1, got {capacity}")
        if max_ttl <= 0:
            raise ValueError(f"max_ttl must be positive, got {max_ttl}")
        self.max_ttl = float(max_ttl)
        self._slots = [Particle(ttl=self.max_ttl) for _ in range(capacity)]
        self._cursor = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def cursor(self) -> int:
        """Index of the slot the next spawn will overwrite."""
        return self._cursor

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> Particle:
        return self._slots[index]

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._slots)

    def live(self) -> Iterator[Particle]:
        """Iterate over the particles that currently exist."""
        return (p for p in self._slots if p.exists)

    def live_count(self) -> int:
        return sum(1 for p in self._slots if p.exists)

    def spawn(self, position: Sequence[float], velocity: Sequence[float]) -> int:
        """
        Place a new particle in the slot under the cursor.

        The slot is overwritten whether or not it holds a live particle.
        z is always set to 0 and the carried acceleration is reset.

        Args:
            position: (x, y) in world units.
            velocity: (vx, vy) in world units per second.

        Returns:
            Index of the slot that was written.
        """
        index = self._cursor
        p = self._slots[index]
        if p.exists:
            logger.debug("Evicting live particle in slot %d (ttl=%.3f)", index, p.ttl)

        p.exists = True
        p.ttl = self.max_ttl
        p.acceleration = 0.0
        p.position[0] = position[0]
        p.position[1] = position[1]
        p.position[2] = 0.0
        p.velocity[0] = velocity[0]
        p.velocity[1] = velocity[1]

        self._cursor = (index + 1) % len(self._slots)
        return index

    def age(self, decrement: float = AGE_DECREMENT) -> int:
        """
        Reduce the ttl of every live particle and expire the exhausted ones.

        Returns:
            Number of particles that expired during this call.
        """
        expired = 0
        for p in self._slots:
            if not p.exists:
                continue
            p.ttl -= decrement
            if p.ttl <= TTL_EPSILON:
                p.expire(self.max_ttl)
                expired += 1
        return expired

    def clear(self) -> None:
        """Kill every particle. Carried acceleration is left for spawn to reset."""
        for p in self._slots:
            p.exists = False
            p.ttl = self.max_ttl

    def rescale_ttl(self, old_max: float, new_max: float) -> None:
        """
        Switch to a new maximum lifetime, keeping each particle's remaining
        fraction of life unchanged: ttl_after / new_max == ttl_before / old_max.
        """
        if old_max <= 0:
            raise ValueError(f"old_max must be positive, got {old_max}")
        scale = new_max / old_max
        for p in self._slots:
            if p.exists:
                p.ttl *= scale
        self.max_ttl = float(new_max)

    def snapshot(self, integrator: Integrator) -> PoolSnapshot:
        """Return a lazy, restartable view of the live particles."""
        return PoolSnapshot(self, integrator)
