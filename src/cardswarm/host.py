# -*- coding: utf-8 -*-
"""Host-page collaborators: the container the swarm lives in.

A container exposes its geometry, its viewport origin, an event source
(``pointermove``, ``pointerleave``, ``resize``, ``visibility``) and the
environment capability query.
"""
from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Protocol, Tuple

from cardswarm.types import Geometry

EVENTS = ("pointermove", "pointerleave", "resize", "visibility")


@dataclass(frozen=True)
class Environment:
    coarse_pointer: bool = False
    reduced_motion: bool = False

    @property
    def static(self) -> bool:
        return self.coarse_pointer or self.reduced_motion


class Container(Protocol):
    def size(self) -> Geometry: ...

    def origin(self) -> Tuple[float, float]: ...

    def connect(self, event: str, callback: Callable[..., None]) -> Any: ...

    def disconnect(self, cid: Any) -> None: ...

    def environment(self) -> Environment: ...


class HeadlessContainer:
    """In-memory container; tests and the headless runner fire events with :meth:`emit`."""

    def __init__(
        self,
        width: float = 1200.0,
        height: float = 700.0,
        *,
        origin: Tuple[float, float] = (0.0, 0.0),
        env: Environment | None = None,
    ):
        self._geometry = Geometry(float(width), float(height))
        self._origin = (float(origin[0]), float(origin[1]))
        self._env = env or Environment()
        self._ids = itertools.count(1)
        self._listeners: Dict[int, Tuple[str, Callable[..., None]]] = {}

    def size(self) -> Geometry:
        return self._geometry

    def origin(self) -> Tuple[float, float]:
        return self._origin

    def environment(self) -> Environment:
        return self._env

    def resize(self, width: float, height: float) -> None:
        """Change the box and fire ``resize``."""
        self._geometry = Geometry(float(width), float(height))
        self.emit("resize")

    def connect(self, event: str, callback: Callable[..., None]) -> int:
        if event not in EVENTS:
            raise ValueError(f"[container] unknown event {event!r}")
        cid = next(self._ids)
        self._listeners[cid] = (event, callback)
        return cid

    def disconnect(self, cid: Any) -> None:
        self._listeners.pop(cid, None)

    def listeners(self, event: str | None = None) -> List[Callable[..., None]]:
        return [cb for ev, cb in self._listeners.values() if event is None or ev == event]

    def emit(self, event: str, *args: Any) -> None:
        for cb in self.listeners(event):
            cb(*args)


__all__ = ["EVENTS", "Environment", "Container", "HeadlessContainer"]
