import numpy as np
import pytest
from particle_sim.pool import ParticlePool
from particle_sim.types import Integrator


def test_spawn_initializes_slot():
    pool = ParticlePool(capacity=4, max_ttl=15.0)
    pool[0].acceleration = 3.0

    index = pool.spawn((0.25, -0.5), (1.0, 2.0))

    p = pool[index]
    assert index == 0
    assert p.exists
    assert p.ttl == 15.0
    assert p.acceleration == 0.0
    assert np.allclose(p.position, [0.25, -0.5, 0.0])
    assert np.allclose(p.velocity, [1.0, 2.0])
    assert pool.cursor == 1


def test_spawns_within_capacity_live_until_ttl_exhausted():
    """Spawning at most N particles never kills any of them early."""
    pool = ParticlePool(capacity=5, max_ttl=1.0)
    for i in range(5):
        pool.spawn((0.1 * i, 0.0), (0.0, 0.0))

    for _ in range(9):
        pool.age(0.1)
        assert pool.live_count() == 5

    pool.age(0.1)
    assert pool.live_count() == 0


@pytest.mark.parametrize("ttl, ticks", [(1.0, 10), (0.25, 3), (15.0, 150), (0.1, 1)])
def test_lifetime_is_ceil_of_ttl_over_decrement(ttl, ticks):
    pool = ParticlePool(capacity=1, max_ttl=ttl)
    pool.spawn((0.0, 0.0), (0.0, 0.0))

    for _ in range(ticks - 1):
        pool.age(0.1)
    assert pool[0].exists, f"expired before {ticks} ticks"

    pool.age(0.1)
    assert not pool[0].exists


def test_expiry_resets_slot():
    pool = ParticlePool(capacity=2, max_ttl=0.1)
    pool.spawn((0.5, 0.5), (0.0, 0.0))
    pool[0].acceleration = 7.0

    expired = pool.age(0.1)

    assert expired == 1
    assert not pool[0].exists
    assert pool[0].ttl == 0.1
    assert pool[0].acceleration == 0.0


def test_wraparound_overwrites_oldest_slot():
    """Spawn N+1 evicts slot 0 even though it still has plenty of life."""
    pool = ParticlePool(capacity=3, max_ttl=15.0)
    for i in range(3):
        pool.spawn((0.1 * i, 0.0), (0.0, 0.0))
    assert pool.cursor == 0

    index = pool.spawn((0.9, 0.9), (0.0, 0.0))

    assert index == 0
    assert pool.cursor == 1
    assert pool.live_count() == 3
    assert np.allclose(pool[0].position, [0.9, 0.9, 0.0])
    assert np.allclose(pool[1].position, [0.1, 0.0, 0.0])


def test_clear_is_idempotent():
    pool = ParticlePool(capacity=8, max_ttl=5.0)
    for _ in range(6):
        pool.spawn((0.0, 0.0), (0.0, 0.0))
    pool.age(0.1)

    pool.clear()
    assert pool.live_count() == 0
    assert all(p.ttl == 5.0 for p in pool)

    pool.clear()
    assert pool.live_count() == 0
    assert list(pool.snapshot(Integrator.EULER)) == []


def test_rescale_preserves_lifetime_fraction():
    pool = ParticlePool(capacity=4, max_ttl=15.0)
    for i in range(3):
        pool.spawn((0.0, 0.0), (0.0, 0.0))
        for _ in range(i * 7 + 1):
            pool.age(0.1)
    before = [p.ttl / 15.0 for p in pool.live()]

    pool.rescale_ttl(15.0, 70.0)

    after = [p.ttl / 70.0 for p in pool.live()]
    assert pool.max_ttl == 70.0
    assert after == pytest.approx(before, abs=1e-6)
    assert all(0 < p.ttl <= pool.max_ttl for p in pool.live())


def test_rescale_with_equal_maxima_is_noop():
    pool = ParticlePool(capacity=2, max_ttl=5.0)
    pool.spawn((0.0, 0.0), (0.0, 0.0))
    pool.age(0.1)
    ttl = pool[0].ttl

    pool.rescale_ttl(5.0, 5.0)

    assert pool[0].ttl == pytest.approx(ttl)


def test_snapshot_is_lazy_and_restartable():
    pool = ParticlePool(capacity=4, max_ttl=10.0)
    snap = pool.snapshot(Integrator.RK4)
    assert list(snap) == []

    pool.spawn((0.5, -0.5), (0.0, 0.0))
    pool.age(0.1)

    first = list(snap)
    second = list(snap)
    assert first == second
    assert len(first) == 1
    assert len(snap) == 1

    view = first[0]
    assert (view.x, view.y, view.z) == (0.5, -0.5, 0.0)
    assert view.ttl_ratio == pytest.approx(0.99)
    assert view.integrator is Integrator.RK4


def test_frozen_snapshot_does_not_follow_pool():
    pool = ParticlePool(capacity=4, max_ttl=10.0)
    pool.spawn((0.0, 0.0), (0.0, 0.0))
    frozen = pool.snapshot(Integrator.EULER).freeze()

    pool.clear()

    assert isinstance(frozen, tuple)
    assert len(frozen) == 1


def test_invalid_pool_arguments():
    with pytest.raises(ValueError):
        ParticlePool(capacity=0)
    with pytest.raises(ValueError):
        ParticlePool(capacity=4, max_ttl=0.0)
    with pytest.raises(ValueError):
        ParticlePool(capacity=4).rescale_ttl(0.0, 5.0)
