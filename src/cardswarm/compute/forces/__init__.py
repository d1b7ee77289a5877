# -*- coding: utf-8 -*-
"""Force term registry and per-tick accumulation.

Each term lives in ``compute/forces/<name>.py`` and registers an
``evaluate(P, WH, scene, params) -> (dV, meta)`` where ``dV`` is the ``(N,2)``
velocity delta the term contributes this tick.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Tuple
import numpy as np

REGISTRY: Dict[str, Callable] = {}

# Evaluation order within a tick.  The result does not depend on it since
# every term only adds into the same accumulator.
ORDER = ("pointer.attract", "ll.separate", "boundary.push")


def register(name: str):
    """Decorator registering a force term implementation."""

    def deco(fn):
        REGISTRY[name] = fn
        return fn

    return deco


def enabled_terms(cfg: Any) -> List[str]:
    """Return enabled term names in evaluation order.

    ``cfg`` may be a ``SwarmConfig`` or a mapping holding ``forces``.
    """
    if cfg is None:
        return list(ORDER)
    forces = cfg.forces if hasattr(cfg, "forces") else (cfg.get("forces") or {})
    out = []
    for name in ORDER:
        tog = forces.get(name)
        if tog is None:
            out.append(name)
            continue
        enable = tog.enable if hasattr(tog, "enable") else bool((tog or {}).get("enable", True))
        if enable:
            out.append(name)
    return out


def accumulate(
    P: np.ndarray,
    WH: np.ndarray,
    scene: dict,
    params,
    terms: Optional[List[str]] = None,
) -> Tuple[np.ndarray, Dict[str, dict]]:
    """Sum the velocity deltas of ``terms`` and collect each term's meta."""
    N = int(P.shape[0])
    dV = np.zeros((N, 2), float)
    metas: Dict[str, dict] = {}
    for name in (ORDER if terms is None else terms):
        fn = REGISTRY.get(name)
        if fn is None:
            raise KeyError(f"[forces] unknown term {name!r}")
        d, meta = fn(P, WH, scene, params)
        dV += d
        metas[name] = meta
    return dV, metas


from .attract import evaluate as _attract_eval  # pointer.attract
from .separation import evaluate as _separate_eval  # ll.separate
from .boundary import evaluate as _push_eval  # boundary.push

__all__ = [
    "REGISTRY",
    "ORDER",
    "register",
    "enabled_terms",
    "accumulate",
]
