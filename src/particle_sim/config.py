# MIT License (see LICENSE)
"""
Simulation configuration.

SimulationConfig gathers everything a host may want to tune: pool capacity,
force constants, the aging rate and the screen/tick hints used by input and
render collaborators. It is validated once on construction; the simulation
core assumes a valid config and never re-checks it.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field

from .constants import (
    AGE_DECREMENT,
    ATTRACTOR_STRENGTH,
    GRAVITY,
    PARTICLE_COUNT,
    R2_FLOOR,
    SCREEN_SIZE,
    TICK_INTERVAL_MS,
)
from .modes import ModeCommand, parse_command


@dataclass(frozen=True)
class ForceParams:
    """
    Constants consumed by the step functions.

    Attributes:
        gravity: Uniform acceleration along y for the gravity model.
        attractor_strength: C in a = C / r² for the attractor model.
        r2_floor: Lower bound on r² in the attractor model.
    """
    gravity: float = GRAVITY
    attractor_strength: float = ATTRACTOR_STRENGTH
    r2_floor: float = R2_FLOOR

    def __post_init__(self) -> None:
        if not math.isfinite(self.gravity):
            raise ValueError(f"gravity must be finite, got {self.gravity}")
        if not math.isfinite(self.attractor_strength):
            raise ValueError(f"attractor_strength must be finite, got {self.attractor_strength}")
        if not math.isfinite(self.r2_floor) or self.r2_floor <= 0:
            raise ValueError(f"r2_floor must be positive and finite, got {self.r2_floor}")


@dataclass(frozen=True)
class SimulationConfig:
    """
    Top-level simulation settings.

    Attributes:
        capacity: Number of particle slots (N).
        forces: Force-model constants.
        age_decrement: ttl removed from each live particle per tick.
        initial_mode: Command applied once at startup, e.g. "small-gravity-euler".
                      A ModeCommand or key character is stored as its id.
                      None keeps the default frozen mode.
        screen_size: Edge length of the (square) host window in pixels.
        tick_interval_ms: Target period of the host's tick scheduler.
        seed: Seed for the spawn-jitter generator. None draws from OS entropy.
    """
    capacity: int = PARTICLE_COUNT
    forces: ForceParams = field(default_factory=ForceParams)
    age_decrement: float = AGE_DECREMENT
    initial_mode: str | ModeCommand | None = None
    screen_size: int = SCREEN_SIZE
    tick_interval_ms: int = TICK_INTERVAL_MS
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {self.capacity}")
        if not math.isfinite(self.age_decrement) or self.age_decrement <= 0:
            raise ValueError(f"age_decrement must be positive and finite, got {self.age_decrement}")
        if self.screen_size <= 0:
            raise ValueError(f"screen_size must be positive, got {self.screen_size}")
        if self.tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {self.tick_interval_ms}")
        if self.initial_mode is not None:
            command = parse_command(self.initial_mode)
            if command is None:
                raise ValueError(f"Unknown initial mode: '{self.initial_mode}'")
            object.__setattr__(self, "initial_mode", command.value)
