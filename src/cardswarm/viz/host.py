# -*- coding: utf-8 -*-
"""Matplotlib figure as swarm host: container events, card artists and a frame timer.

The figure's single axes spans the whole canvas with limits equal to the
canvas size in pixels and an inverted y axis, so data coordinates are the
container-local, y-down pixels the engine works in.
"""
from __future__ import annotations

import itertools
from typing import Any, Callable, Dict, Tuple

from cardswarm.data.catalog import Card, Category
from cardswarm.host import EVENTS, Environment
from cardswarm.schedule import Scheduler
from cardswarm.types import Geometry

_FACE = {Category.SERVICE: "#1f3a2e", Category.TECH: "#f2efe6"}
_TEXT = {Category.SERVICE: "#f2efe6", Category.TECH: "#1f3a2e"}
_ACTIVE_FACE = "#d9a441"


class FigureContainer:
    """Adapts a matplotlib figure to the container protocol.

    Pressing ``v`` toggles the visibility signal, standing in for the
    container scrolling out of (and back into) view.
    """

    def __init__(self, fig: Any, env: Environment | None = None):
        self.fig = fig
        self.ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
        self.ax.set_axis_off()
        self._env = env or Environment()
        self._visible = True
        self._ids = itertools.count(1)
        self._listeners: Dict[int, Tuple[str, Callable[..., None]]] = {}
        self._sync_limits()
        canvas = fig.canvas
        self._mpl_cids = [
            canvas.mpl_connect("motion_notify_event", self._on_motion),
            canvas.mpl_connect("figure_leave_event", self._on_leave),
            canvas.mpl_connect("resize_event", self._on_resize),
            canvas.mpl_connect("key_press_event", self._on_key),
        ]

    def _sync_limits(self) -> None:
        g = self.size()
        self.ax.set_xlim(0.0, g.width)
        self.ax.set_ylim(g.height, 0.0)

    def size(self) -> Geometry:
        bb = self.fig.bbox
        return Geometry(float(bb.width), float(bb.height))

    def origin(self) -> Tuple[float, float]:
        return (0.0, 0.0)

    def environment(self) -> Environment:
        return self._env

    def connect(self, event: str, callback: Callable[..., None]) -> int:
        if event not in EVENTS:
            raise ValueError(f"[container] unknown event {event!r}")
        cid = next(self._ids)
        self._listeners[cid] = (event, callback)
        return cid

    def disconnect(self, cid: Any) -> None:
        self._listeners.pop(cid, None)

    def close(self) -> None:
        for cid in self._mpl_cids:
            self.fig.canvas.mpl_disconnect(cid)
        self._mpl_cids = []
        self._listeners.clear()

    def _emit(self, event: str, *args: Any) -> None:
        for ev, cb in list(self._listeners.values()):
            if ev == event:
                cb(*args)

    # matplotlib reports y up from the bottom edge
    def _on_motion(self, mevent) -> None:
        if mevent.x is None or mevent.y is None:
            return
        self._emit("pointermove", float(mevent.x), self.size().height - float(mevent.y))

    def _on_leave(self, _mevent) -> None:
        self._emit("pointerleave")

    def _on_resize(self, _mevent) -> None:
        self._sync_limits()
        self._emit("resize")

    def _on_key(self, mevent) -> None:
        if mevent.key == "v":
            self._visible = not self._visible
            self._emit("visibility", 1.0 if self._visible else 0.0)


class FigureSurface:
    """Draws each card as a text artist with a rounded box."""

    def __init__(self, container: FigureContainer, render_cfg: Any = None, *, fontsize: float = 10.0, pad: float = 0.6):
        self.container = container
        self.fig = container.fig
        self.ax = container.ax
        self.fontsize = float(fontsize)
        self.pad = float(pad)
        # positions snap to the same precision the headless surface writes
        self.decimals = int(getattr(render_cfg, "decimals", 1))
        self._category: Dict[int, Category] = {}

    @property
    def _pad_px(self) -> float:
        return self.pad * self.fontsize * self.fig.dpi / 72.0

    def create_card(self, card: Card):
        t = self.ax.text(
            0.0,
            0.0,
            card.label,
            ha="left",
            va="top",
            fontsize=self.fontsize,
            color=_TEXT[card.category],
            bbox=dict(boxstyle=f"round,pad={self.pad}", fc=_FACE[card.category], ec="#1f3a2e", lw=0.8),
        )
        t.set_url(card.href)
        t.set_gid(card.category.value)
        self._category[id(t)] = card.category
        return t

    def measure(self, handle) -> Tuple[float, float]:
        renderer = self.fig.canvas.get_renderer()
        bb = handle.get_window_extent(renderer)
        p = 2.0 * self._pad_px
        return (float(bb.width) + p, float(bb.height) + p)

    def set_transform(self, handle, x: float, y: float) -> None:
        # text anchor sits inside the box padding
        p = self._pad_px
        d = self.decimals
        handle.set_position((round(x, d) + p, round(y, d) + p))

    def set_highlight(self, handle, on: bool) -> None:
        cat = self._category.get(id(handle), Category.TECH)
        handle.get_bbox_patch().set_facecolor(_ACTIVE_FACE if on else _FACE[cat])
        handle.set_fontweight("bold" if on else "normal")

    def flush(self) -> None:
        self.fig.canvas.draw_idle()


class TimerScheduler(Scheduler):
    """One-shot canvas timers, one per requested frame."""

    def __init__(self, fig: Any, frame_ms: float = 1000.0 / 60.0):
        self.fig = fig
        self.interval = max(1, int(round(frame_ms)))

    def request_tick(self, callback: Callable[[], None]):
        timer = self.fig.canvas.new_timer(interval=self.interval)
        timer.single_shot = True
        timer.add_callback(callback)
        timer.start()
        return timer

    def cancel_tick(self, handle) -> None:
        if handle is not None:
            handle.stop()


__all__ = ["FigureContainer", "FigureSurface", "TimerScheduler"]
