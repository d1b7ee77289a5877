"""cardswarm: floating labelled cards that drift, repel and follow the pointer.

External users can simply ``from cardswarm import simulate`` for a headless
run, or build a :class:`SwarmEngine` against their own host.
"""

from .api import simulate, SimulationResult
from .engine import SwarmEngine, create_engine

__all__ = ["simulate", "SimulationResult", "SwarmEngine", "create_engine"]
