# -*- coding: utf-8 -*-
from __future__ import annotations
import numpy as np
from . import register
from ._common import centers, ensure_vec2


def pointer_offsets(P: np.ndarray, WH: np.ndarray, pointer):
    """Return ``(D, dist)``: center-to-pointer vectors and their lengths.

    ``dist`` is ``inf`` for every card while the pointer is inactive.
    """
    N = int(P.shape[0])
    if pointer is None or not pointer.active:
        return np.zeros((N, 2), float), np.full((N,), np.inf)
    D = np.array([pointer.x, pointer.y], float) - centers(P, WH)
    return D, np.hypot(D[:, 0], D[:, 1])


@register("pointer.attract")
def evaluate(P: np.ndarray, WH: np.ndarray, scene: dict, params):
    """Pull every card toward the pointer while it is over the container.

    The pull grows with distance, ``k * max(d, d_min)``, so far cards travel
    faster and cards already near the pointer keep a bounded minimum pull.
    ``meta['dist']`` holds the center-to-pointer distances; the active-card
    detector reuses them instead of measuring again.
    """
    N = int(P.shape[0])
    D, dist = pointer_offsets(P, WH, scene.get("pointer"))
    dV = np.zeros((N, 2), float)
    if N == 0 or not np.isfinite(dist).any():
        return dV, {"term": "pointer.attract", "dist": dist, "disabled": True}

    mag = float(params.attraction) * np.maximum(dist, float(params.attraction_min_dist))
    # a card centered exactly on the pointer has no direction to move in
    nz = dist > 0.0
    dV[nz] = D[nz] / dist[nz, None] * mag[nz, None]
    return ensure_vec2(dV, N), {"term": "pointer.attract", "dist": dist}
