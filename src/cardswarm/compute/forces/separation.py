# -*- coding: utf-8 -*-
from __future__ import annotations
import math
import numpy as np
from . import register
from ._common import centers, ensure_vec2


@register("ll.separate")
def evaluate(P: np.ndarray, WH: np.ndarray, scene: dict, params):
    N = int(P.shape[0])
    sd = float(params.separation_dist)
    k = float(params.separation_force)
    C = centers(P, WH)

    dV = np.zeros((N, 2), float)
    pairs = []
    degenerate = 0
    for i in range(N):
        xi, yi = float(C[i, 0]), float(C[i, 1])
        for j in range(i + 1, N):
            dx = xi - float(C[j, 0])
            dy = yi - float(C[j, 1])
            d = math.sqrt(dx * dx + dy * dy)
            if d >= sd:
                continue
            if d <= 0.0:
                # coincident centers; retried next tick once motion separates them
                degenerate += 1
                continue
            f = (sd - d) / sd * k
            fx, fy = dx / d * f, dy / d * f
            dV[i, 0] += fx
            dV[i, 1] += fy
            dV[j, 0] -= fx
            dV[j, 1] -= fy
            pairs.append((i, j, fx, fy))

    dV = ensure_vec2(dV, N)
    return dV, {"term": "ll.separate", "pairs": pairs, "degenerate": degenerate}
