# -*- coding: utf-8 -*-
"""Headless swarm simulation core: state, forces, integration, detection."""

from .state import ParticleStore
from .pointer import PointerState, PointerEvent, pointer_moved, pointer_left
from .step import physics_step, StepReport
from .detect import select_active, ActiveHighlight

__all__ = [
    "ParticleStore",
    "PointerState",
    "PointerEvent",
    "pointer_moved",
    "pointer_left",
    "physics_step",
    "StepReport",
    "select_active",
    "ActiveHighlight",
]
