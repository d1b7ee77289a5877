# -*- coding: utf-8 -*-
"""Explicit Euler step with damping, speed cap and hard clamp."""
from __future__ import annotations

from typing import Dict

import numpy as np

from cardswarm.types import Array2, Geometry
from .state import ParticleStore, clamp_positions


def cap_speed(V: Array2, max_speed: float) -> int:
    """Rescale rows of ``V`` faster than ``max_speed`` in place; return how many."""
    speed = np.hypot(V[:, 0], V[:, 1])
    over = speed > max_speed
    n = int(np.count_nonzero(over))
    if n:
        V[over] *= (max_speed / speed[over])[:, None]
    return n


def integrate(store: ParticleStore, dV: Array2, geometry: Geometry, params) -> Dict[str, float]:
    """Advance ``store`` by one tick using the accumulated velocity delta ``dV``.

    Order: add forces, damp, cap speed, move, clamp into the container.
    """
    V = store.V
    V += dV
    V *= float(params.damping)
    capped = cap_speed(V, float(params.max_speed))
    store.P += V
    clamp_positions(store.P, store.WH, geometry)
    speed = np.hypot(V[:, 0], V[:, 1])
    return {
        "capped": capped,
        "max_speed_observed": float(speed.max()) if speed.size else 0.0,
    }


__all__ = ["integrate", "cap_speed"]
