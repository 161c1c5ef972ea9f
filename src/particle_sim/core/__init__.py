# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force models: uniform gravity, central attractor.
    - Step functions: Euler and RK4-style blends for each model.
    - Diagnostics: live count, kinetic energy, lifetime fraction.

Typical usage:
    from particle_sim.core import integrate

    integrate(pool, PRESETS[ModeCommand.SMALL_ATTRACTOR_RK4].to_mode())
"""
from .forces import attractor_acceleration, gravity_acceleration
from .integrators import (
    STEP_FUNCTIONS,
    attractor_euler_step,
    attractor_rk4_step,
    gravity_euler_step,
    gravity_rk4_step,
    integrate,
    step_function,
)
from .invariants import kinetic_energy, live_count, mean_ttl_ratio

__all__ = [
    # Forces
    "gravity_acceleration",
    "attractor_acceleration",
    # Integrators
    "gravity_euler_step",
    "gravity_rk4_step",
    "attractor_euler_step",
    "attractor_rk4_step",
    "STEP_FUNCTIONS",
    "step_function",
    "integrate",
    # Diagnostics
    "live_count",
    "kinetic_energy",
    "mean_ttl_ratio",
]
