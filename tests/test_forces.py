import math

import numpy as np
import pytest

from cardswarm.compute.forces import ORDER, REGISTRY, accumulate, enabled_terms
from cardswarm.compute.pointer import PointerState
from cardswarm.config.schema import SwarmConfig


WH2 = np.array([[80.0, 30.0], [80.0, 30.0]])


def _scene(pointer=None, size=(1000.0, 800.0)):
    return {"frame_size": size, "pointer": pointer or PointerState()}


def test_registry_has_all_terms():
    assert set(ORDER) <= set(REGISTRY)


def test_attraction_scales_with_distance(params):
    # 80x30 cards: centers at (400, 400) and (100, 400), pointer at (500, 400)
    P = np.array([[360.0, 385.0], [60.0, 385.0]])
    scene = _scene(PointerState(500.0, 400.0, True))
    dV, meta = REGISTRY["pointer.attract"](P, WH2, scene, params)
    assert meta["dist"] == pytest.approx([100.0, 400.0])
    assert dV[:, 1] == pytest.approx([0.0, 0.0])
    assert dV[0, 0] == pytest.approx(params.attraction * 100.0)
    assert dV[1, 0] == pytest.approx(params.attraction * 400.0)


def test_attraction_floor_keeps_minimum_pull(params):
    P = np.array([[450.0, 385.0]])  # center (490, 400): 10 px from the pointer
    scene = _scene(PointerState(500.0, 400.0, True))
    dV, meta = REGISTRY["pointer.attract"](P, WH2[:1], scene, params)
    assert meta["dist"][0] == pytest.approx(10.0)
    assert dV[0, 0] == pytest.approx(params.attraction * params.attraction_min_dist)


def test_attraction_on_pointer_center_has_no_direction(params):
    P = np.array([[460.0, 385.0]])  # center exactly at pointer
    dV, meta = REGISTRY["pointer.attract"](P, WH2[:1], _scene(PointerState(500.0, 400.0, True)), params)
    assert np.all(dV == 0.0) and meta["dist"][0] == 0.0


def test_inactive_pointer_means_no_pull_and_infinite_distance(params):
    P = np.array([[0.0, 0.0], [300.0, 300.0]])
    dV, meta = REGISTRY["pointer.attract"](P, WH2, _scene(PointerState(10.0, 10.0, False)), params)
    assert np.all(dV == 0.0)
    assert np.all(np.isinf(meta["dist"]))


def test_separation_is_equal_and_opposite(params):
    P = np.array([[300.0, 300.0], [340.0, 330.0]])  # centers 50 px apart
    dV, meta = REGISTRY["ll.separate"](P, WH2, _scene(), params)
    assert np.allclose(dV[0], -dV[1])
    expected = (params.separation_dist - 50.0) / params.separation_dist * params.separation_force
    assert math.hypot(*dV[0]) == pytest.approx(expected)
    # card 0 is up-left of card 1, so it is pushed further up-left
    assert dV[0, 0] < 0 and dV[0, 1] < 0
    (i, j, fx, fy), = meta["pairs"]
    assert (i, j) == (0, 1) and (fx, fy) == pytest.approx(tuple(dV[0]))


def test_separation_ignores_far_and_coincident_pairs(params):
    P = np.array([[100.0, 100.0], [100.0, 100.0], [700.0, 500.0]])
    WH = np.array([[80.0, 30.0]] * 3)
    dV, meta = REGISTRY["ll.separate"](P, WH, _scene(), params)
    assert np.all(dV == 0.0)
    assert meta["degenerate"] == 1 and meta["pairs"] == []


def test_separation_sums_symmetrically_over_many_cards(params, rng):
    N = 12
    P = rng.uniform(0, 300, size=(N, 2))
    WH = np.tile([60.0, 24.0], (N, 1))
    dV, _ = REGISTRY["ll.separate"](P, WH, _scene(), params)
    # internal forces only: total momentum change is zero
    assert np.allclose(dV.sum(axis=0), 0.0, atol=1e-12)


def test_boundary_push_is_constant_and_inward(params):
    P = np.array([[-5.0, 10.0], [950.0, 790.0], [-500.0, -500.0], [100.0, 100.0]])
    WH = np.array([[80.0, 30.0]] * 4)
    dV, meta = REGISTRY["boundary.push"](P, WH, _scene(size=(1000.0, 800.0)), params)
    e = params.edge_push
    assert dV.tolist() == [[e, 0.0], [-e, -e], [e, e], [0.0, 0.0]]
    # the corner card crosses two edges but counts once
    assert meta["cards"] == 3


def test_accumulate_sums_terms_in_order(params):
    P = np.array([[300.0, 300.0], [340.0, 330.0]])
    scene = _scene(PointerState(800.0, 100.0, True))
    total, metas = accumulate(P, WH2, scene, params)
    assert list(metas) == list(ORDER)
    parts = sum(REGISTRY[n](P, WH2, scene, params)[0] for n in ORDER)
    assert np.allclose(total, parts)


def test_enabled_terms_follow_config():
    cfg = SwarmConfig.model_validate({"forces": {"pointer.attract": {"enable": False}}})
    assert enabled_terms(cfg) == ["ll.separate", "boundary.push"]
    assert enabled_terms(None) == list(ORDER)
    assert enabled_terms({"forces": {"boundary.push": {"enable": False}}}) == ["pointer.attract", "ll.separate"]


def test_unknown_term_raises(params):
    with pytest.raises(KeyError):
        accumulate(np.zeros((1, 2)), np.ones((1, 2)), _scene(), params, ["gravity"])
