import numpy as np
import pytest

from cardswarm.compute.pointer import (
    OFFSCREEN,
    PointerEvent,
    PointerState,
    apply_pointer_event,
    pointer_left,
    pointer_moved,
)
from cardswarm.compute.state import ParticleStore
from cardswarm.data.catalog import DEFAULT_CATALOG
from cardswarm.types import Geometry


def test_pointer_move_is_container_local_and_unclamped():
    s0 = PointerState()
    assert (s0.x, s0.y, s0.active) == (OFFSCREEN, OFFSCREEN, False)
    s1 = pointer_moved(PointerEvent("pointermove", 50.0, 20.0), s0, origin=(100.0, 40.0))
    assert s1 == PointerState(-50.0, -20.0, True)
    assert s0.active is False  # transitions never mutate


def test_pointer_leave_keeps_position():
    s = PointerState(10.0, 20.0, True)
    assert pointer_left(PointerEvent("pointerleave"), s) == PointerState(10.0, 20.0, False)
    assert apply_pointer_event(PointerEvent("pointerleave"), s).active is False
    with pytest.raises(ValueError):
        apply_pointer_event(PointerEvent("click"), s)


def test_store_initialize_measure_scatter(rng):
    s = ParticleStore.initialize(DEFAULT_CATALOG)
    assert len(s) == 20 and not s.P.any() and not s.V.any()
    s.measure([(100.0, 30.0)] * 20)
    g = Geometry(400.0, 300.0)
    s.scatter(g, rng, speed=0.25)
    assert np.all(s.P >= 0) and np.all(s.P[:, 0] <= 300.0) and np.all(s.P[:, 1] <= 270.0)
    assert np.all(np.abs(s.V) <= 0.25)
    with pytest.raises(ValueError):
        s.measure([(1.0, 1.0)])


def test_scatter_before_measure_lands_on_origin_side(rng):
    s = ParticleStore(3)
    s.WH[:] = [[500.0, 500.0]] * 3  # larger than the container
    s.scatter(Geometry(200.0, 100.0), rng)
    assert np.all(s.P == 0.0)


def test_clamp_pins_oversized_cards_to_zero():
    s = ParticleStore(1)
    s.WH[:] = [[300.0, 10.0]]
    s.P[:] = [[50.0, 95.0]]
    s.clamp(Geometry(200.0, 100.0))
    assert s.P.tolist() == [[0.0, 90.0]]
