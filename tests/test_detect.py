import numpy as np

from cardswarm.compute.detect import NONE, ActiveHighlight, select_active
from cardswarm.data.catalog import DEFAULT_CATALOG
from cardswarm.surface import HeadlessSurface


def test_select_nearest_within_radius():
    assert select_active(np.array([120.0, 30.0, 79.0]), 80.0) == 1
    assert select_active(np.array([80.0, 95.0]), 80.0) == NONE
    assert select_active(np.array([np.inf, np.inf]), 80.0) == NONE
    assert select_active(np.array([]), 80.0) == NONE


def test_ties_go_to_lowest_index():
    assert select_active(np.array([50.0, 10.0, 10.0]), 80.0) == 1


def test_highlight_moves_and_never_doubles():
    surf = HeadlessSurface()
    handles = [surf.create_card(c) for c in DEFAULT_CATALOG[:4]]
    hl = ActiveHighlight()
    assert hl.update(2, surf, handles) is True
    assert surf.highlighted() == [2]
    assert hl.update(2, surf, handles) is False  # same index again: no-op
    assert surf.highlighted() == [2]
    assert hl.update(0, surf, handles) is True
    assert surf.highlighted() == [0]
    assert hl.clear(surf, handles) is True
    assert surf.highlighted() == [] and hl.index == NONE
