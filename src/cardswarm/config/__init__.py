"""Configuration schema and loader."""

from .loader import load_config, merge_overrides
from .schema import PhysicsParams, SwarmConfig

__all__ = ["load_config", "merge_overrides", "PhysicsParams", "SwarmConfig"]
