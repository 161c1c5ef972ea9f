# MIT License (see LICENSE)
"""
The per-frame simulation driver.

Simulation ties the particle pool, the mode controller and the force
constants together behind a single tick() entry point. It runs no timer of
its own; the host calls tick() from whatever scheduler it has (render-loop
callback, fixed-rate thread, test loop).

A tick runs, in order:
    1. At most one spawn (if the host passes a SpawnRequest).
    2. One integration pass with the active mode's step function.
    3. Aging of every live particle.
Steps 2 and 3 are skipped entirely while the mode is frozen.

Structure:
    - Host creates a Simulation.
    - Host forwards commands via apply_command() between ticks.
    - Host calls tick(spawn) once per frame and renders snapshot().
"""
from __future__ import annotations
import logging

import numpy as np

from .config import SimulationConfig
from .core.integrators import integrate
from .modes import DEFAULT_MODE, Mode, ModeController
from .pool import ParticlePool, PoolSnapshot
from .profiler import Profiler
from .types import SpawnRequest

logger = logging.getLogger(__name__)


class Simulation:
    """
    Particle simulation session.

    Attributes:
        config: Settings the session was created with.
        pool: Particle storage.
        profiler: Optional Profiler receiving "spawn", "integrate" and "age"
                  section timings.
        rng: Generator for spawn jitter, shared with input collaborators.
        tick_count: Number of tick() calls so far.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        profiler: Profiler | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config or SimulationConfig()
        self.profiler = profiler
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.pool = ParticlePool(self.config.capacity, DEFAULT_MODE.max_ttl)
        self.controller = ModeController(self.pool, DEFAULT_MODE)
        self.tick_count = 0

        if self.config.initial_mode is not None:
            self.controller.apply(self.config.initial_mode)

    @property
    def mode(self) -> Mode:
        return self.controller.mode

    def apply_command(self, command) -> str | None:
        """
        Apply a mode command between ticks.

        Returns:
            The mode description if the command was accepted, else None.
        """
        return self.controller.apply(command)

    def spawn(self, request: SpawnRequest) -> int:
        """Add one particle immediately. Returns its slot index."""
        index = self.pool.spawn(request.position, request.velocity)
        logger.debug("Spawned particle in slot %d at (%.3f, %.3f)", index, request.x, request.y)
        return index

    def tick(self, spawn: SpawnRequest | None = None) -> None:
        """
        Advance the simulation by one frame.

        Args:
            spawn: Optional particle to add before integrating.
        """
        prof = self.profiler
        mode = self.mode

        if spawn is not None:
            if prof:
                with prof.section("spawn"):
                    self.spawn(spawn)
            else:
                self.spawn(spawn)

        if not mode.frozen:
            if prof:
                with prof.section("integrate"):
                    self._integrate(mode)
                with prof.section("age"):
                    self.pool.age(self.config.age_decrement)
            else:
                self._integrate(mode)
                self.pool.age(self.config.age_decrement)

        self.tick_count += 1

    def _integrate(self, mode: Mode) -> None:
        integrate(self.pool, mode, self.config.forces)

    def snapshot(self) -> PoolSnapshot:
        """Lazy view of the live particles, tagged with the active integrator."""
        return self.pool.snapshot(self.mode.integrator)
