import numpy as np
import pytest

from cardswarm.config.schema import PhysicsParams, SwarmConfig
from cardswarm.engine import SwarmEngine
from cardswarm.host import Environment, HeadlessContainer
from cardswarm.schedule import ManualScheduler
from cardswarm.surface import HeadlessSurface
from cardswarm.types import Geometry


@pytest.fixture
def rng(): return np.random.default_rng(0)

@pytest.fixture
def params(): return PhysicsParams()

@pytest.fixture
def geometry(): return Geometry(1000.0, 800.0)


class Rig:
    """Headless container + surface + scheduler + engine."""

    def __init__(self, engine, container, surface, scheduler):
        self.engine = engine
        self.container = container
        self.surface = surface
        self.scheduler = scheduler

    def frames(self, n=1):
        return self.scheduler.pump(n)


@pytest.fixture
def headless():
    def _fn(catalog=None, cfg=None, size=(1200.0, 700.0), env=None, seed=0):
        cfg = cfg or SwarmConfig()
        container = HeadlessContainer(size[0], size[1], env=env or Environment())
        surface = HeadlessSurface(cfg.render)
        scheduler = ManualScheduler()
        engine = SwarmEngine(container, surface, scheduler, catalog, cfg, rng=np.random.default_rng(seed))
        return Rig(engine, container, surface, scheduler)
    return _fn
