# -*- coding: utf-8 -*-
"""Pointer tracking as pure state transitions.

Listeners never mutate shared state; the engine feeds each event through
one of the transitions below and keeps the returned value.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

OFFSCREEN = -9999.0


@dataclass(frozen=True)
class PointerState:
    x: float = OFFSCREEN
    y: float = OFFSCREEN
    active: bool = False

    @property
    def xy(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class PointerEvent:
    """Pointer position in viewport (client) coordinates."""

    kind: str
    client_x: float = 0.0
    client_y: float = 0.0


def pointer_moved(event: PointerEvent, state: PointerState, origin: Tuple[float, float] = (0.0, 0.0)) -> PointerState:
    # container-local, deliberately unclamped
    left, top = origin
    return PointerState(x=float(event.client_x) - float(left), y=float(event.client_y) - float(top), active=True)


def pointer_left(event: PointerEvent, state: PointerState) -> PointerState:
    return replace(state, active=False)


def apply_pointer_event(event: PointerEvent, state: PointerState, origin: Tuple[float, float] = (0.0, 0.0)) -> PointerState:
    if event.kind == "pointermove":
        return pointer_moved(event, state, origin)
    if event.kind == "pointerleave":
        return pointer_left(event, state)
    raise ValueError(f"[pointer] unknown event kind {event.kind!r}")


__all__ = ["PointerState", "PointerEvent", "pointer_moved", "pointer_left", "apply_pointer_event", "OFFSCREEN"]
