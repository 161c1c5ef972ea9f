import numpy as np
import pytest
from particle_sim.input import PointerState, jitter_velocity
from particle_sim.util import screen_to_world, world_to_screen


def test_screen_to_world_corners():
    assert screen_to_world(0, 0, 1000) == (-1.0, 1.0)
    assert screen_to_world(1000, 1000, 1000) == (1.0, -1.0)
    assert screen_to_world(500, 500, 1000) == (0.0, 0.0)
    assert world_to_screen(*screen_to_world(250, 750, 1000), 1000) == pytest.approx((250, 750))


def test_no_spawn_unless_held():
    rng = np.random.default_rng(0)
    pointer = PointerState()
    assert pointer.spawn_request(rng) is None

    pointer.press(100, 100)
    assert pointer.spawn_request(rng) is not None

    pointer.release()
    assert pointer.spawn_request(rng) is None


def test_stationary_pointer_jitter_ranges():
    """Without drag, vx jitters both ways and vy only upward."""
    rng = np.random.default_rng(42)
    pointer = PointerState(screen_size=1000)
    pointer.press(500, 500)

    for _ in range(200):
        req = pointer.spawn_request(rng)
        assert (req.x, req.y) == (0.0, 0.0)
        assert -0.75 <= req.vx <= 0.75
        assert 0.0 <= req.vy <= 0.75


def test_drag_velocity_carries_into_spawn():
    pointer = PointerState(screen_size=1000, sample_interval=0.005)
    pointer.press(500, 500)
    pointer.motion(505, 490)

    # 5 px / 0.005 s = 1000 px/s right, 2000 px/s up (screen y down).
    assert pointer.vx == pytest.approx(1000.0)
    assert pointer.vy == pytest.approx(-2000.0)

    rng = np.random.default_rng(3)
    req = pointer.spawn_request(rng)
    assert 2.0 - 0.75 <= req.vx <= 2.0 + 0.75
    assert 4.0 <= req.vy <= 4.0 + 0.75


def test_motion_outside_window_ignored():
    pointer = PointerState(screen_size=1000)
    pointer.press(10, 10)
    pointer.motion(-5, 10)
    pointer.motion(10, 1200)

    assert (pointer.x, pointer.y) == (10.0, 10.0)
    assert (pointer.vx, pointer.vy) == (0.0, 0.0)


def test_jitter_velocity_is_seeded():
    a = jitter_velocity(100.0, -50.0, 1000, np.random.default_rng(9))
    b = jitter_velocity(100.0, -50.0, 1000, np.random.default_rng(9))
    assert a == b
