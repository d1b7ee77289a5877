import numpy as np
import pytest

from cardswarm.compute.integrate import cap_speed, integrate
from cardswarm.compute.state import ParticleStore
from cardswarm.config.schema import PhysicsParams
from cardswarm.types import Geometry
from _util_swarm import place


def test_order_damp_then_cap_then_move(params, geometry):
    s = ParticleStore(2)
    place(s, [[100.0, 100.0], [500.0, 500.0]], V=[[1.0, 0.0], [0.0, 0.0]])
    dV = np.array([[0.0, 0.0], [30.0, 40.0]])
    stats = integrate(s, dV, geometry, params)
    # row 0: damped only
    assert s.V[0] == pytest.approx([params.damping, 0.0])
    assert s.P[0] == pytest.approx([100.0 + params.damping, 100.0])
    # row 1: 50 * 0.92 = 46 > 4 -> rescaled to exactly max_speed, same direction
    assert np.hypot(*s.V[1]) == pytest.approx(params.max_speed)
    assert s.V[1] == pytest.approx([0.6 * params.max_speed, 0.8 * params.max_speed])
    assert stats["capped"] == 1
    assert stats["max_speed_observed"] == pytest.approx(params.max_speed)


def test_cap_speed_leaves_slow_rows_alone():
    V = np.array([[1.0, 1.0], [10.0, 0.0]])
    assert cap_speed(V, 4.0) == 1
    assert V.tolist() == [[1.0, 1.0], [4.0, 0.0]]


def test_clamp_after_move(params):
    g = Geometry(300.0, 200.0)
    s = ParticleStore(2)
    place(s, [[219.0, 5.0], [2.0, 169.0]], V=[[3.0, -3.0], [-3.0, 3.0]])
    integrate(s, np.zeros((2, 2)), g, params)
    assert np.allclose(s.P, [[220.0, 5.0 - 3.0 * params.damping], [0.0, 170.0]])


def test_bounds_and_speed_invariants_hold_under_random_forces(geometry, rng):
    params = PhysicsParams()
    s = ParticleStore(15)
    s.measure(rng.uniform(40, 160, size=(15, 2)))
    s.scatter(geometry, rng)
    hi = np.array(geometry.frame_size) - s.WH
    for _ in range(300):
        dV = rng.normal(0.0, 6.0, size=(15, 2))
        integrate(s, dV, geometry, params)
        assert np.all(s.P >= 0.0) and np.all(s.P <= hi + 1e-9)
        assert np.all(np.hypot(s.V[:, 0], s.V[:, 1]) <= params.max_speed + 1e-9)


def test_physics_step_counts_cards_over_an_edge(params, geometry):
    from cardswarm.compute.pointer import PointerState
    from cardswarm.compute.step import physics_step

    s = ParticleStore(3)
    # card 1 sits past the bottom-right corner, card 2 is well inside
    place(s, [[-2.0, 50.0], [950.0, 790.0], [400.0, 400.0]])
    report = physics_step(s, PointerState(), geometry, params)
    assert report.stats["edge_cards"] == 2
    assert report.metas["boundary.push"]["cards"] == 2
