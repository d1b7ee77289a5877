# -*- coding: utf-8 -*-
"""The swarm engine: one object owning catalog, particles, pointer, highlight and gate.

Per tick, while the visibility gate is open::

    forces (all cards) -> integrate (all cards) -> detect active card -> render

Listeners are thin: every host event goes through a pure transition
(:func:`~cardswarm.compute.pointer.pointer_moved`, :func:`visibility_changed`)
and the engine keeps the returned state.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence

import numpy as np

from cardswarm.compute.detect import ActiveHighlight, select_active
from cardswarm.compute.forces import enabled_terms
from cardswarm.compute.pointer import PointerEvent, PointerState, pointer_left, pointer_moved
from cardswarm.compute.recorder import Recorder
from cardswarm.compute.state import ParticleStore
from cardswarm.compute.step import physics_step
from cardswarm.config.schema import SwarmConfig
from cardswarm.data.catalog import DEFAULT_CATALOG, Card, load_catalog
from cardswarm.host import Environment
from cardswarm.schedule import Scheduler
from cardswarm.surface import static_layout, sync_positions
from cardswarm.types import Event, Geometry
from cardswarm.utils.logging import logger


class EngineState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    STATIC = "static"


@dataclass(frozen=True)
class GateState:
    visible: bool = True


def visibility_changed(fraction: float, gate: GateState) -> GateState:
    """Any visible fraction above zero opens the gate."""
    return GateState(visible=float(fraction) > 0.0)


def resolve_environment(container: Any, env_cfg: Any = None) -> Environment:
    query = getattr(container, "environment", None)
    env = query() if callable(query) else Environment()
    coarse = getattr(env_cfg, "coarse_pointer", None)
    reduced = getattr(env_cfg, "reduced_motion", None)
    return Environment(
        coarse_pointer=env.coarse_pointer if coarse is None else bool(coarse),
        reduced_motion=env.reduced_motion if reduced is None else bool(reduced),
    )


class SwarmEngine:
    """Drives the card swarm inside one container.

    Construction creates the card elements on ``surface`` (they exist even
    when motion is disabled).  :meth:`start` measures, scatters and begins
    ticking; :meth:`stop` pauses; :meth:`dispose` releases listeners and
    any pending tick.
    """

    def __init__(
        self,
        container: Any,
        surface: Any,
        scheduler: Scheduler,
        catalog: Optional[Sequence[Card]] = None,
        cfg: Optional[SwarmConfig] = None,
        *,
        env: Optional[Environment] = None,
        rng: Optional[np.random.Generator] = None,
        recorder: Optional[Recorder] = None,
    ):
        self.cfg = cfg or SwarmConfig()
        self.params = self.cfg.physics
        self.terms = enabled_terms(self.cfg)
        self.container = container
        self.surface = surface
        self.scheduler = scheduler
        self.cards = tuple(DEFAULT_CATALOG if catalog is None else catalog)
        self.env = env or resolve_environment(container, self.cfg.environment)
        self.rng = rng if rng is not None else np.random.default_rng(self.cfg.seed)
        self.recorder = recorder

        self.handles = [surface.create_card(c) for c in self.cards]
        self.store = ParticleStore.initialize(self.cards)
        self.pointer = PointerState()
        self.highlight = ActiveHighlight()
        self.gate = GateState()
        self.state = EngineState.IDLE
        self.events: List[Event] = []
        self.tick_count = 0

        self._pending: Any = None
        self._in_tick = False
        self._started = False
        self._held = False
        self._disposed = False
        self._cids: List[Any] = []
        if not self.env.static:
            self._cids = [
                container.connect("pointermove", self.on_pointer_move),
                container.connect("pointerleave", self.on_pointer_leave),
                container.connect("resize", self.on_resize),
                container.connect("visibility", self.on_visibility),
            ]

    # ---------- lifecycle ----------
    def start(self) -> None:
        if self._disposed:
            logger.debug("[engine] start() after dispose ignored")
            return
        if self.state is EngineState.STATIC:
            return
        # start() always releases a stop(), including one issued before the first start
        self._held = False
        if self._started:
            if self.gate.visible:
                self._set_state(EngineState.RUNNING)
                self._schedule()
            return

        geometry = self.measure()
        if self.env.static:
            self.store.P[:] = static_layout(self.store.WH, geometry, self.cfg.render.static_gap)
            self.store.clamp(geometry)
            sync_positions(self.surface, self.handles, self.store.P)
            self._set_state(EngineState.STATIC)
            logger.info(
                "[engine] static layout (coarse_pointer=%s reduced_motion=%s)",
                self.env.coarse_pointer,
                self.env.reduced_motion,
            )
            return

        self.store.scatter(geometry, self.rng, self.params.scatter_speed)
        self._started = True
        if self.gate.visible:
            self._set_state(EngineState.RUNNING)
            self._schedule()
        else:
            self._set_state(EngineState.PAUSED)

    def stop(self) -> None:
        """Pause ticking until :meth:`start` is called again."""
        self._cancel()
        self._held = True
        if self.state is EngineState.RUNNING:
            self._set_state(EngineState.PAUSED)

    def dispose(self) -> None:
        if self._disposed:
            return
        self._cancel()
        for cid in self._cids:
            self.container.disconnect(cid)
        self._cids = []
        if self.highlight.clear(self.surface, self.handles):
            self.surface.flush()
        self._set_state(EngineState.IDLE)
        self._disposed = True

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def active_index(self) -> int:
        return self.highlight.index

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def positions(self) -> np.ndarray:
        return self.store.snapshot()

    # ---------- geometry ----------
    def measure(self) -> Geometry:
        """Re-read card sizes from the surface and return the container box."""
        self.store.measure([self.surface.measure(h) for h in self.handles])
        return self.container.size()

    # ---------- host events ----------
    def on_pointer_move(self, client_x: float, client_y: float) -> None:
        if self._disposed:
            return
        event = PointerEvent("pointermove", client_x, client_y)
        self.pointer = pointer_moved(event, self.pointer, self.container.origin())

    def on_pointer_leave(self, *_: Any) -> None:
        if self._disposed:
            return
        self.pointer = pointer_left(PointerEvent("pointerleave"), self.pointer)

    def on_visibility(self, fraction: float) -> None:
        if self._disposed or self.state is EngineState.STATIC:
            return
        self.gate = visibility_changed(fraction, self.gate)
        if not self._started or self._held:
            return
        if self.gate.visible:
            if self.state is EngineState.PAUSED:
                self._set_state(EngineState.RUNNING)
            self._schedule()
        elif self.state is EngineState.RUNNING:
            # a tick already requested sees the closed gate and stops there
            self._set_state(EngineState.PAUSED)

    def on_resize(self, *_: Any) -> None:
        if self._disposed or self.state is EngineState.STATIC:
            return
        geometry = self.measure()
        self.store.clamp(geometry)
        self._emit({"kind": "resize", "width": geometry.width, "height": geometry.height, "tick": self.tick_count})
        logger.debug("[engine] resize %gx%g", geometry.width, geometry.height)

    # ---------- ticking ----------
    def tick(self) -> bool:
        """Run one frame of the pipeline; return whether it ran."""
        if self._in_tick:
            self._schedule()
            return False
        if self.state is not EngineState.RUNNING or not self.gate.visible:
            return False

        self._in_tick = True
        try:
            geometry = self.container.size()
            report = physics_step(self.store, self.pointer, geometry, self.params, self.terms)
            prev = self.highlight.index
            new = select_active(report.dist, self.params.active_radius)
            if self.highlight.update(new, self.surface, self.handles):
                self._emit({"kind": "highlight", "from": prev, "to": new, "tick": self.tick_count})
            sync_positions(self.surface, self.handles, self.store.P)
            self.tick_count += 1
            if self.recorder is not None:
                self.recorder.on_tick(self.tick_count, self.store.P, self.highlight.index, report.stats)
        finally:
            self._in_tick = False
        self._schedule()
        return True

    def _on_frame(self) -> None:
        self._pending = None
        self.tick()

    def _schedule(self) -> None:
        if self._pending is None and self.state is EngineState.RUNNING:
            self._pending = self.scheduler.request_tick(self._on_frame)

    def _cancel(self) -> None:
        if self._pending is not None:
            self.scheduler.cancel_tick(self._pending)
            self._pending = None

    # ---------- events ----------
    def _set_state(self, new: EngineState) -> None:
        old = self.state
        if old is new:
            return
        self.state = new
        self._emit({"kind": "state", "from": old.value, "to": new.value, "tick": self.tick_count})
        logger.debug("[engine] %s -> %s at tick %d", old.value, new.value, self.tick_count)

    def _emit(self, event: Event) -> None:
        self.events.append(event)


def create_engine(
    container: Any,
    surface: Any,
    scheduler: Optional[Scheduler],
    catalog: Optional[Sequence[Card]] = None,
    cfg: Optional[SwarmConfig] = None,
    **kwargs: Any,
) -> Optional[SwarmEngine]:
    """Build an engine, or return ``None`` when a collaborator is missing.

    Nothing is created on the surface in that case.
    """
    missing = [n for n, v in (("container", container), ("surface", surface), ("scheduler", scheduler)) if v is None]
    if missing:
        logger.debug("[engine] not initialised, missing %s", ", ".join(missing))
        return None
    cfg = cfg or SwarmConfig()
    if catalog is None and cfg.catalog_path:
        catalog = load_catalog(cfg.catalog_path)
    return SwarmEngine(container, surface, scheduler, catalog, cfg, **kwargs)


__all__ = ["EngineState", "GateState", "visibility_changed", "resolve_environment", "SwarmEngine", "create_engine"]
