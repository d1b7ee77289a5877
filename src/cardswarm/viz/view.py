# -*- coding: utf-8 -*-
"""Open an interactive window with the swarm running in it."""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from cardswarm.config.schema import SwarmConfig
from cardswarm.data.catalog import Card
from cardswarm.engine import SwarmEngine, create_engine
from cardswarm.utils.logging import logger
from .backend import setup_matplotlib_backend


def build_figure_engine(
    fig,
    cfg: Optional[SwarmConfig] = None,
    catalog: Optional[Sequence[Card]] = None,
) -> Tuple[SwarmEngine, "FigureContainer"]:
    """Wire a figure to a new engine.  The figure must be drawable (Agg-based)."""
    from .host import FigureContainer, FigureSurface, TimerScheduler

    cfg = cfg or SwarmConfig()
    container = FigureContainer(fig)
    surface = FigureSurface(container, cfg.render)
    scheduler = TimerScheduler(fig, cfg.physics.frame_ms)
    engine = create_engine(container, surface, scheduler, catalog, cfg)

    def _on_close(_evt):
        engine.dispose()
        container.close()

    fig.canvas.mpl_connect("close_event", _on_close)
    return engine, container


def run_interactive(
    cfg: Optional[SwarmConfig] = None,
    catalog: Optional[Sequence[Card]] = None,
    size: Tuple[float, float] = (12.0, 7.0),
    block: bool = True,
) -> SwarmEngine:
    backend = setup_matplotlib_backend()
    logger.info("[view] matplotlib backend %s", backend)
    import matplotlib.pyplot as plt

    fig = plt.figure(figsize=size)
    if fig.canvas.manager is not None:
        fig.canvas.manager.set_window_title("cardswarm")
    engine, _ = build_figure_engine(fig, cfg, catalog)
    # cards must be laid out once before they can be measured
    fig.canvas.draw()
    engine.start()
    if block:
        plt.show()
    return engine


__all__ = ["build_figure_engine", "run_interactive"]
