# MIT License (see LICENSE)
"""
Step functions for the particle simulation.

Each function advances one particle by dt in-place. There is one function
per (force model, scheme) pair:

- gravity_euler_step: explicit Euler under constant gravity.
- gravity_rk4_step: closed-form RK4-style blend under constant gravity.
- attractor_euler_step: explicit Euler under the central attractor.
- attractor_rk4_step: RK4-style blend under the central attractor, seeded
  with the acceleration carried over from the previous step.

These are not general ODE solvers. The RK4 variants weight start, midpoint
and end values with (1, 2, 2, 1)/6 but evaluate the midpoint as the mean of
start and end, which is exact for constant acceleration. For gravity the
velocity therefore matches Euler exactly and only the position update differs
(trapezoidal vs rectangular). That contrast is the point of the pairing.

Reference:
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Callable

from ..config import ForceParams
from ..types import Integrator, Model, Particle
from .forces import attractor_acceleration, gravity_acceleration

if TYPE_CHECKING:
    from ..modes import Mode
    from ..pool import ParticlePool

StepFunction = Callable[[Particle, float, ForceParams], None]

_DEFAULT_PARAMS = ForceParams()


def gravity_euler_step(p: Particle, dt: float, params: ForceParams = _DEFAULT_PARAMS) -> None:
    """
    Advance under gravity with explicit Euler.

        vy += g*dt
        y  += vy*dt
        x  += vx*dt

    vx is never changed; there is no horizontal force.
    """
    g = gravity_acceleration(params.gravity)
    p.velocity[1] += g * dt
    p.position[1] += p.velocity[1] * dt
    p.position[0] += p.velocity[0] * dt


def gravity_rk4_step(p: Particle, dt: float, params: ForceParams = _DEFAULT_PARAMS) -> None:
    """
    Advance under gravity with the RK4-style blend.

    k1 is the vertical velocity at the start of the step and k4 the velocity
    at the end; the two midpoint stages are their mean:

        k1 = vy,  k4 = vy + g*dt,  k2 = k3 = (k1 + k4)/2
        vy = k4
        y += dt*(k1 + 2k2 + 2k3 + k4)/6
        x += vx*dt
    """
    g = gravity_acceleration(params.gravity)
    k1 = p.velocity[1]
    k4 = k1 + g * dt
    k2 = k3 = (k1 + k4) / 2

    p.velocity[1] = k4
    p.position[1] += dt * (k1 + 2 * k2 + 2 * k3 + k4) / 6
    p.position[0] += p.velocity[0] * dt


def attractor_euler_step(p: Particle, dt: float, params: ForceParams = _DEFAULT_PARAMS) -> None:
    """
    Advance under the central attractor with explicit Euler.

        a   = C / r²
        v  += -pos*a*dt     (x and y)
        pos += v*dt         (y, then x)

    The pull a is stored on the particle so a later switch to
    attractor_rk4_step has a first stage to start from.
    """
    a = attractor_acceleration(p.position, params.attractor_strength, params.r2_floor)
    p.acceleration = a

    p.velocity[0] += -p.position[0] * a * dt
    p.velocity[1] += -p.position[1] * a * dt

    p.position[1] += p.velocity[1] * dt
    p.position[0] += p.velocity[0] * dt


def attractor_rk4_step(p: Particle, dt: float, params: ForceParams = _DEFAULT_PARAMS) -> None:
    """
    Advance under the central attractor with the RK4-style blend.

    The pull stages come from the previous step's end (k1, stored on the
    particle) and from the start-of-step position (k4):

        k1 = p.acceleration,  k4 = C / r²,  k2 = k3 = (k1 + k4)/2
        p.acceleration = k4

    Each axis is then blended independently with the averaged pull
    A = (k1 + 2k2 + 2k3 + k4)/6:

        ka1 = v,  ka4 = v - pos*A*dt,  ka2 = ka3 = (ka1 + ka4)/2
        v    = ka4
        pos += dt*(ka1 + 2ka2 + 2ka3 + ka4)/6

    The y axis is updated before x. Neither axis reads the other's updated
    values, so the order does not change the result.
    """
    k1 = p.acceleration
    k4 = attractor_acceleration(p.position, params.attractor_strength, params.r2_floor)
    k2 = k3 = (k1 + k4) / 2
    p.acceleration = k4
    pull = (k1 + 2 * k2 + 2 * k3 + k4) / 6

    for axis in (1, 0):
        ka1 = p.velocity[axis]
        ka4 = ka1 - p.position[axis] * pull * dt
        ka2 = ka3 = (ka1 + ka4) / 2

        p.velocity[axis] = ka4
        p.position[axis] += dt * (ka1 + 2 * ka2 + 2 * ka3 + ka4) / 6


# Every non-frozen (model, integrator) pair must appear here.
STEP_FUNCTIONS: dict[tuple[Model, Integrator], StepFunction] = {
    (Model.GRAVITY, Integrator.EULER): gravity_euler_step,
    (Model.GRAVITY, Integrator.RK4): gravity_rk4_step,
    (Model.ATTRACTOR, Integrator.EULER): attractor_euler_step,
    (Model.ATTRACTOR, Integrator.RK4): attractor_rk4_step,
}


def step_function(model: Model, integrator: Integrator) -> StepFunction | None:
    """
    Look up the step function for a model/scheme pair.

    Returns None for Model.FROZEN, which has no dynamics.
    """
    if model is Model.FROZEN:
        return None
    return STEP_FUNCTIONS[(model, integrator)]


def integrate(pool: ParticlePool, mode: Mode, params: ForceParams = _DEFAULT_PARAMS) -> int:
    """
    Advance every live particle by one step.

    Args:
        pool: Particles to advance.
        mode: Active mode. Its model selects the step function (FROZEN
              leaves everything untouched) and its time_step is dt.
        params: Force constants.

    Returns:
        Number of particles advanced.
    """
    step = step_function(mode.model, mode.integrator)
    if step is None:
        return 0

    n = 0
    for p in pool.live():
        step(p, mode.time_step, params)
        n += 1
    return n
