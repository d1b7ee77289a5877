# -*- coding: utf-8 -*-
"""Frame scheduling.

The engine asks for one tick at a time through :class:`Scheduler`; the host
decides what "next frame" means.  :class:`ManualScheduler` is a frame pump
driven by the caller, used by the headless runner and the tests.
"""
from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict


class Scheduler(ABC):
    @abstractmethod
    def request_tick(self, callback: Callable[[], None]) -> Any:
        """Arrange for ``callback`` to run once on the next frame; return a handle."""

    @abstractmethod
    def cancel_tick(self, handle: Any) -> None:
        """Drop a pending request.  Unknown or already-run handles are ignored."""


class ManualScheduler(Scheduler):
    """Runs pending callbacks when :meth:`pump` is called.

    Callbacks requested while a pump is in progress wait for the next pump,
    so a tick never runs inside another tick.
    """

    def __init__(self):
        self._ids = itertools.count(1)
        self._pending: Dict[int, Callable[[], None]] = {}
        self._due: Dict[int, Callable[[], None]] = {}
        self.frames = 0

    def request_tick(self, callback: Callable[[], None]) -> int:
        h = next(self._ids)
        self._pending[h] = callback
        return h

    def cancel_tick(self, handle: Any) -> None:
        self._pending.pop(handle, None)
        self._due.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def pump(self, frames: int = 1) -> int:
        """Advance ``frames`` frames; return how many callbacks ran."""
        ran = 0
        for _ in range(frames):
            self.frames += 1
            self._due, self._pending = self._pending, {}
            while self._due:
                h = next(iter(self._due))
                self._due.pop(h)()
                ran += 1
        return ran


__all__ = ["Scheduler", "ManualScheduler"]
