# -*- coding: utf-8 -*-
"""Per-card kinematic state."""
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from cardswarm.types import Array2, Geometry


def clamp_positions(P: Array2, WH: Array2, geometry: Geometry) -> Array2:
    """Clamp top-left positions into ``[0, W-w] x [0, H-h]`` in place.

    A card wider (or taller) than the container has an empty range and is
    pinned to 0 on that axis.
    """
    W, H = geometry.frame_size
    hi = np.maximum(np.array([W, H], float) - WH, 0.0)
    np.minimum(P, hi, out=P)
    np.maximum(P, 0.0, out=P)
    return P


class ParticleStore:
    """Owns position ``P``, velocity ``V`` and measured size ``WH`` of every card.

    Row ``i`` of each array belongs to card ``i`` of the catalog.  Nothing
    else keeps a copy; consumers read the arrays through this object.
    """

    def __init__(self, n: int):
        self.P = np.zeros((n, 2), float)
        self.V = np.zeros((n, 2), float)
        self.WH = np.zeros((n, 2), float)

    @classmethod
    def initialize(cls, cards: Sequence) -> "ParticleStore":
        return cls(len(cards))

    def __len__(self) -> int:
        return int(self.P.shape[0])

    def measure(self, sizes: Sequence[Tuple[float, float]]) -> None:
        WH = np.asarray(sizes, float).reshape(-1, 2)
        if WH.shape != self.WH.shape:
            raise ValueError(f"[measure] sizes shape {WH.shape} != {self.WH.shape}")
        self.WH[:] = np.maximum(WH, 0.0)

    def scatter(self, geometry: Geometry, rng: np.random.Generator, speed: float = 0.25) -> None:
        n = len(self)
        span = np.maximum(np.array(geometry.frame_size, float) - self.WH, 0.0)
        self.P[:] = rng.random((n, 2)) * span
        self.V[:] = rng.uniform(-speed, speed, size=(n, 2))

    def clamp(self, geometry: Geometry) -> None:
        clamp_positions(self.P, self.WH, geometry)

    def centers(self) -> Array2:
        return self.P + 0.5 * self.WH

    def snapshot(self) -> Array2:
        return self.P.copy()


__all__ = ["ParticleStore", "clamp_positions"]
