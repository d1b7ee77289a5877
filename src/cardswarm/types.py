# -*- coding: utf-8 -*-
"""Shared value types."""

from dataclasses import dataclass
from typing import Dict, Union

import numpy as np

Array2 = np.ndarray  # shape == (N, 2)

Event = Dict[str, Union[str, int, float, None]]


@dataclass(frozen=True)
class Geometry:
    """Measured container box in container-local pixels."""

    width: float
    height: float

    @property
    def frame_size(self):
        return (float(self.width), float(self.height))


__all__ = ["Array2", "Event", "Geometry"]
