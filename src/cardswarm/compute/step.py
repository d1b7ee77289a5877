# -*- coding: utf-8 -*-
"""One physics tick: force accumulation followed by integration."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from cardswarm.types import Geometry
from .forces import accumulate
from .forces.attract import pointer_offsets
from .integrate import integrate
from .pointer import PointerState
from .state import ParticleStore


@dataclass
class StepReport:
    dist: np.ndarray
    metas: Dict[str, dict]
    stats: Dict[str, Any] = field(default_factory=dict)


def physics_step(
    store: ParticleStore,
    pointer: PointerState,
    geometry: Geometry,
    params,
    terms: Optional[List[str]] = None,
) -> StepReport:
    """Accumulate every enabled force for all cards, then integrate all of them.

    ``dist`` holds the pointer distances measured before the cards move.  They
    come from the attraction pass; only when that term is switched off are
    they measured here instead.
    """
    scene = {"frame_size": geometry.frame_size, "pointer": pointer}
    dV, metas = accumulate(store.P, store.WH, scene, params, terms)
    att = metas.get("pointer.attract")
    if att is not None:
        dist = att["dist"]
    else:
        _, dist = pointer_offsets(store.P, store.WH, pointer)
    stats = integrate(store, dV, geometry, params)
    sep = metas.get("ll.separate") or {}
    stats["degenerate"] = int(sep.get("degenerate", 0))
    stats["edge_cards"] = int((metas.get("boundary.push") or {}).get("cards", 0))
    return StepReport(dist=dist, metas=metas, stats=stats)


__all__ = ["StepReport", "physics_step"]
