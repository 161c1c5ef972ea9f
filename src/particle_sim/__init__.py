# MIT License (see LICENSE)
"""
particle_sim - A point-particle animation core.

A bounded pool of particles moves under uniform gravity or a central
attractor, integrated with explicit Euler or an RK4-style blend. The package
holds the numerical and state-machine core; windowing, drawing and real
input capture are left to the host.

Main entry points:
    - Simulation: Pool + mode controller behind a single tick() call.
    - ParticlePool: Fixed-capacity ring buffer of particles.
    - ModeController, ModeCommand, PRESETS: Mode switching.
    - SimulationConfig: Tunable settings.

Submodules:
    - core: Force models, step functions and diagnostics.
    - io: JSON configuration files.
    - renderer: Optional visualization adapters.
    - input: Pointer-to-spawn translation.

Example:
    from particle_sim import Simulation, SpawnRequest

    sim = Simulation()
    sim.apply_command("small-gravity-rk4")
    sim.tick(SpawnRequest(0.0, 0.5, vx=0.2, vy=0.4))
    for view in sim.snapshot():
        print(view.x, view.y, view.ttl_ratio)
"""
from .config import ForceParams, SimulationConfig
from .input import PointerState
from .modes import DEFAULT_MODE, KEY_BINDINGS, PRESETS, Mode, ModeCommand, ModeController, Preset
from .pool import ParticlePool, PoolSnapshot
from .simulation import Simulation
from .types import Integrator, Model, Particle, ParticleView, SpawnRequest

__all__ = [
    # Simulation
    "Simulation",
    "SimulationConfig",
    "ForceParams",
    # Pool
    "ParticlePool",
    "PoolSnapshot",
    "Particle",
    "ParticleView",
    "SpawnRequest",
    # Modes
    "Model",
    "Integrator",
    "Mode",
    "ModeCommand",
    "ModeController",
    "Preset",
    "PRESETS",
    "DEFAULT_MODE",
    "KEY_BINDINGS",
    # Input
    "PointerState",
]
