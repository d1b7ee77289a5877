# -*- coding: utf-8 -*-
from __future__ import annotations
import numpy as np
from . import register
from ._common import ensure_vec2, frame_size


@register("boundary.push")
def evaluate(P: np.ndarray, WH: np.ndarray, scene: dict, params):
    """Constant inward nudge on each axis where a card box crosses an edge."""
    N = int(P.shape[0])
    W, H = frame_size(scene)
    push = float(params.edge_push)
    lo = P < 0.0
    hi = (P + WH) > np.array([W, H], float)
    dV = push * (lo.astype(float) - hi.astype(float))
    # cards over at least one edge, not crossed axes
    cards = int(np.count_nonzero((lo | hi).any(axis=1)))
    return ensure_vec2(dV, N), {"term": "boundary.push", "cards": cards}
