"""Open a window with the swarm; move the mouse over it, press ``v`` to toggle visibility."""

from cardswarm.config import load_config
from cardswarm.viz.view import run_interactive

run_interactive(load_config("configs/swarm.yaml"))
