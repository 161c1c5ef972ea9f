import numpy as np
import pytest
from particle_sim.config import ForceParams
from particle_sim.core.forces import attractor_acceleration
from particle_sim.core.integrators import (
    STEP_FUNCTIONS,
    attractor_euler_step,
    attractor_rk4_step,
    gravity_euler_step,
    gravity_rk4_step,
    integrate,
    step_function,
)
from particle_sim.modes import Mode
from particle_sim.pool import ParticlePool
from particle_sim.types import Integrator, Model, Particle


def test_every_model_has_step_functions():
    """All non-frozen model/integrator pairs dispatch to a step function."""
    for model in Model:
        for integrator in Integrator:
            if model is Model.FROZEN:
                assert step_function(model, integrator) is None
            else:
                assert (model, integrator) in STEP_FUNCTIONS
                assert callable(step_function(model, integrator))
    assert len(STEP_FUNCTIONS) == 4


def test_gravity_euler_vs_rk4_single_step():
    """
    Same velocity after one step, but RK4 moves half as far:
      Euler: y = vy_new * dt             = -0.049 * 0.005
      RK4:   y = dt * (vy_old + vy_new)/2 = -0.0245 * 0.005
    """
    params = ForceParams(gravity=-9.8)
    euler = Particle(exists=True)
    rk4 = Particle(exists=True)

    gravity_euler_step(euler, 0.005, params)
    gravity_rk4_step(rk4, 0.005, params)

    assert euler.vy == pytest.approx(-0.049)
    assert rk4.vy == pytest.approx(-0.049)
    assert euler.y == pytest.approx(-0.000245)
    assert rk4.y == pytest.approx(-0.0001225)


def test_gravity_keeps_horizontal_velocity():
    p = Particle(exists=True, velocity=(0.3, 1.0))
    for _ in range(10):
        gravity_euler_step(p, 0.02)
    assert p.vx == 0.3
    assert p.x == pytest.approx(0.3 * 0.02 * 10)

    q = Particle(exists=True, velocity=(0.3, 1.0))
    for _ in range(10):
        gravity_rk4_step(q, 0.02)
    assert q.vx == 0.3
    assert q.vy == pytest.approx(p.vy)


def test_gravity_rk4_matches_analytic_position():
    """For constant acceleration the trapezoidal update is exact."""
    g, dt, n = -9.8, 0.02, 50
    p = Particle(exists=True, position=(0.0, 1.0, 0.0), velocity=(0.0, 2.0))
    for _ in range(n):
        gravity_rk4_step(p, dt, ForceParams(gravity=g))

    t = n * dt
    assert p.y == pytest.approx(1.0 + 2.0 * t + 0.5 * g * t * t, rel=1e-9)


def test_gravity_steps_leave_acceleration_alone():
    p = Particle(exists=True, position=(1.0, 0.0, 0.0))
    gravity_euler_step(p, 0.005)
    gravity_rk4_step(p, 0.005)
    assert p.acceleration == 0.0


def test_attractor_euler_single_step():
    params = ForceParams(attractor_strength=10.0)
    p = Particle(exists=True, position=(1.0, 0.0, 0.0))

    attractor_euler_step(p, 0.0018, params)

    assert p.acceleration == pytest.approx(10.0)
    assert p.vx == pytest.approx(-0.018)
    assert p.vy == 0.0
    assert p.x - 1.0 == pytest.approx(-0.0000324)
    assert p.y == 0.0


def test_attractor_rk4_from_zero_acceleration():
    """
    k1 = 0 (nothing stored yet), k4 = 10, k2 = k3 = 5  ->  averaged pull 5.
    vx = -1 * 5 * dt, x moves by dt * (vx_old + vx_new)/2.
    """
    dt = 0.0018
    p = Particle(exists=True, position=(1.0, 0.0, 0.0))

    attractor_rk4_step(p, dt, ForceParams(attractor_strength=10.0))

    assert p.acceleration == pytest.approx(10.0)
    assert p.vx == pytest.approx(-5.0 * dt)
    assert p.x - 1.0 == pytest.approx(dt * (-5.0 * dt) / 2)
    assert p.vy == 0.0


def test_attractor_rk4_uses_acceleration_from_euler():
    """A preceding Euler step seeds k1, so the full pull is used."""
    dt = 0.0018
    seeded = Particle(exists=True, position=(1.0, 0.0, 0.0), acceleration=10.0)

    attractor_rk4_step(seeded, dt, ForceParams(attractor_strength=10.0))

    assert seeded.vx == pytest.approx(-10.0 * dt)
    assert seeded.x - 1.0 == pytest.approx(dt * (-10.0 * dt) / 2)


def test_attractor_rk4_axes_are_independent():
    """Updating y before x gives the same result as the vectorized formula."""
    dt, c = 0.01, 10.0
    p = Particle(exists=True, position=(0.3, -0.4, 0.0), velocity=(0.5, 0.2), acceleration=35.0)
    pos0 = p.position[:2].copy()
    v0 = p.velocity.copy()

    attractor_rk4_step(p, dt, ForceParams(attractor_strength=c))

    k1, k4 = 35.0, c / 0.25
    pull = (k1 + 4 * (k1 + k4) / 2 + k4) / 6
    v1 = v0 - pos0 * pull * dt
    assert np.allclose(p.velocity, v1)
    assert np.allclose(p.position[:2], pos0 + dt * (v0 + v1) / 2)
    assert p.acceleration == pytest.approx(k4)


def test_attractor_pulls_toward_origin():
    for step in (attractor_euler_step, attractor_rk4_step):
        p = Particle(exists=True, position=(0.6, 0.8, 0.0))
        r0 = np.hypot(p.x, p.y)
        for _ in range(20):
            step(p, 0.0018)
        assert np.hypot(p.x, p.y) < r0


def test_attractor_singularity_is_floored():
    params = ForceParams(attractor_strength=10.0, r2_floor=1e-4)
    assert attractor_acceleration(np.zeros(3), 10.0, 1e-4) == pytest.approx(1e5)

    p = Particle(exists=True, position=(1e-4, 0.0, 0.0))
    attractor_euler_step(p, 0.0018, params)
    assert np.isfinite(p.acceleration)
    assert p.acceleration == pytest.approx(1e5)

    q = Particle(exists=True)
    for _ in range(100):
        attractor_rk4_step(q, 0.01, params)
    assert np.all(np.isfinite(q.position))
    assert np.all(np.isfinite(q.velocity))


def test_integrate_skips_dead_and_frozen():
    pool = ParticlePool(capacity=3)
    pool.spawn((0.0, 0.5), (0.0, 0.0))

    assert integrate(pool, Mode(Model.FROZEN, Integrator.EULER, 0.005, 15.0)) == 0
    assert pool[0].y == 0.5

    assert integrate(pool, Mode(Model.GRAVITY, Integrator.EULER, 0.005, 15.0)) == 1
    assert pool[0].y == pytest.approx(0.5 - 0.000245)
    assert pool[1].y == 0.0
