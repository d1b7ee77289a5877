"""Frame and event capture for headless runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from cardswarm.types import Array2, Event


@dataclass
class Frame:
    """Positions and highlight after one tick."""

    tick: int
    P: Array2
    active: int


class Recorder:
    """Capture frames according to the capture policy and tally tick stats."""

    def __init__(self, capture_cfg: Any = None):
        self.every = max(1, int(getattr(capture_cfg, "every", 1)))
        self.limit: Optional[int] = getattr(capture_cfg, "limit", None)
        self.final_always = bool(getattr(capture_cfg, "final_always", True))
        self.frames: List[Frame] = []
        self.ticks = 0
        self.capped = 0
        self.degenerate = 0
        self._last: Optional[Frame] = None

    def on_tick(self, tick: int, P: Array2, active: int, stats: Dict[str, Any] | None = None) -> None:
        self.ticks += 1
        if stats:
            self.capped += int(stats.get("capped", 0))
            self.degenerate += int(stats.get("degenerate", 0))
        frame = Frame(tick=int(tick), P=np.array(P, float, copy=True), active=int(active))
        self._last = frame
        if tick % self.every != 0:
            return
        if self.limit is not None and len(self.frames) >= self.limit:
            return
        self.frames.append(frame)

    def finish(self) -> None:
        """Make sure the last tick is captured when ``final_always`` is set."""
        last = self._last
        if self.final_always and last is not None:
            if not self.frames or self.frames[-1].tick != last.tick:
                self.frames.append(last)

    def summary(self, events: List[Event]) -> Dict[str, Any]:
        return {
            "ticks": self.ticks,
            "frames_captured": len(self.frames),
            "highlight_changes": sum(1 for e in events if e.get("kind") == "highlight"),
            "state_changes": sum(1 for e in events if e.get("kind") == "state"),
            "capped_speed": self.capped,
            "degenerate_pairs": self.degenerate,
        }


__all__ = ["Frame", "Recorder"]
