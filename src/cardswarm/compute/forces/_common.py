from __future__ import annotations
import numpy as np


def centers(P: np.ndarray, WH: np.ndarray) -> np.ndarray:
    return np.asarray(P, float) + 0.5 * np.asarray(WH, float)


def ensure_vec2(F: np.ndarray, N: int) -> np.ndarray:
    F = np.asarray(F, float)
    if F.shape != (N, 2):
        raise ValueError(f"velocity delta shape {F.shape} != (N,2)")
    return F


def frame_size(scene: dict):
    W, H = scene.get("frame_size", (0.0, 0.0))
    return float(W), float(H)
