"""Run the swarm headless with a circling pointer and print a short report."""

from cardswarm import simulate
from cardswarm.api import circle_path
from cardswarm.config import load_config
from cardswarm.utils.logging import configure_logging

configure_logging()
cfg = load_config("configs/swarm.yaml")
res = simulate(cfg, ticks=600, size=(1200.0, 700.0), pointer=circle_path((600.0, 350.0), 220.0))
print("frames:", res.coords.shape[0], "cards:", res.coords.shape[1])
print("summary:", res.summary)
