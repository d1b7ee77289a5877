"""Interactive matplotlib host for the swarm."""

from .backend import setup_matplotlib_backend

__all__ = ["setup_matplotlib_backend"]
