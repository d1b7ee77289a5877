# -*- coding: utf-8 -*-
"""Headless entry point: run the swarm for a number of frames and collect the result."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from cardswarm.compute.recorder import Recorder
from cardswarm.config.schema import SwarmConfig
from cardswarm.data.catalog import Card
from cardswarm.engine import SwarmEngine, create_engine
from cardswarm.host import Environment, HeadlessContainer
from cardswarm.schedule import ManualScheduler
from cardswarm.surface import HeadlessSurface

PointerSpec = Optional[Tuple[float, float]]
PointerPath = Union[Callable[[int], PointerSpec], Sequence[PointerSpec], None]


@dataclass
class SimulationResult:
    coords: np.ndarray            # (T, N, 2)
    active: np.ndarray            # (T,)
    events: List[Dict[str, Any]] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)
    engine: Optional[SwarmEngine] = None


def _as_callable(path: PointerPath) -> Callable[[int], PointerSpec]:
    if path is None:
        return lambda t: None
    if callable(path):
        return path
    seq = list(path)
    return lambda t: seq[t] if t < len(seq) else (seq[-1] if seq else None)


def circle_path(center: Tuple[float, float], radius: float, period: int = 240) -> Callable[[int], PointerSpec]:
    """Pointer circling ``center`` once every ``period`` frames."""
    cx, cy = center

    def _at(t: int) -> PointerSpec:
        a = 2.0 * math.pi * (t % period) / period
        return (cx + radius * math.cos(a), cy + radius * math.sin(a))

    return _at


def simulate(
    cfg: Optional[SwarmConfig] = None,
    catalog: Optional[Sequence[Card]] = None,
    *,
    ticks: int = 600,
    size: Tuple[float, float] = (1200.0, 700.0),
    pointer: PointerPath = None,
    visibility: Optional[Callable[[int], float]] = None,
    env: Optional[Environment] = None,
    seed: Optional[int] = 0,
) -> SimulationResult:
    """Pump ``ticks`` frames of a headless swarm.

    Before each frame ``pointer(t)`` is applied (``None`` means the pointer
    left the container) and ``visibility(t)`` is fed to the gate.  Every
    frame's positions are returned, whether or not a tick ran in it.
    """
    cfg = cfg or SwarmConfig()
    container = HeadlessContainer(size[0], size[1], env=env)
    surface = HeadlessSurface(cfg.render)
    scheduler = ManualScheduler()
    recorder = Recorder(cfg.capture)
    rng = np.random.default_rng(cfg.seed if seed is None else seed)
    engine = create_engine(container, surface, scheduler, catalog, cfg, rng=rng, recorder=recorder)
    engine.start()

    at = _as_callable(pointer)
    coords = []
    active = []
    for t in range(int(ticks)):
        p = at(t)
        if p is None:
            if engine.pointer.active:
                container.emit("pointerleave")
        else:
            ox, oy = container.origin()
            container.emit("pointermove", p[0] + ox, p[1] + oy)
        if visibility is not None:
            container.emit("visibility", float(visibility(t)))
        scheduler.pump()
        coords.append(engine.positions())
        active.append(engine.active_index)
    recorder.finish()

    summary = recorder.summary(engine.events)
    summary.update({"cards": len(engine.cards), "state": engine.state.value, "frames": int(ticks)})
    return SimulationResult(
        coords=np.asarray(coords, float).reshape(int(ticks), len(engine.cards), 2),
        active=np.asarray(active, int),
        events=list(engine.events),
        summary=summary,
        engine=engine,
    )


__all__ = ["SimulationResult", "simulate", "circle_path"]
