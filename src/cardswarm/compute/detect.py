# -*- coding: utf-8 -*-
"""Active-card detection: the single card nearest the pointer, if close enough."""
from __future__ import annotations

from typing import Any, Sequence

import numpy as np

NONE = -1


def select_active(dist: np.ndarray, radius: float) -> int:
    """Index of the smallest finite distance below ``radius``, else ``NONE``.

    Ties resolve to the lowest index.
    """
    dist = np.asarray(dist, float)
    if dist.size == 0:
        return NONE
    i = int(np.argmin(dist))
    d = float(dist[i])
    if not np.isfinite(d) or d >= float(radius):
        return NONE
    return i


class ActiveHighlight:
    """Tracks which card carries the highlight marker."""

    def __init__(self):
        self.index = NONE

    def update(self, new_index: int, surface: Any, handles: Sequence[Any]) -> bool:
        if new_index == self.index:
            return False
        if self.index != NONE:
            surface.set_highlight(handles[self.index], False)
        if new_index != NONE:
            surface.set_highlight(handles[new_index], True)
        self.index = new_index
        return True

    def clear(self, surface: Any, handles: Sequence[Any]) -> bool:
        return self.update(NONE, surface, handles)


__all__ = ["NONE", "select_active", "ActiveHighlight"]
