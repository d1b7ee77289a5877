"""Pydantic models for the swarm configuration."""
from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

TERM_NAMES = ("pointer.attract", "ll.separate", "boundary.push")


class PhysicsParams(BaseModel):
    """Tunable constants of the force model and integrator."""

    attraction: float = Field(default=0.0008, ge=0)
    attraction_min_dist: float = Field(default=50.0, gt=0)
    separation_dist: float = Field(default=120.0, gt=0)
    separation_force: float = Field(default=0.8, ge=0)
    damping: float = Field(default=0.92, gt=0, le=1)
    max_speed: float = Field(default=4.0, gt=0)
    edge_push: float = Field(default=0.3, ge=0)
    active_radius: float = Field(default=80.0, ge=0)
    frame_ms: float = Field(default=1000.0 / 60.0, gt=0)
    scatter_speed: float = Field(default=0.25, ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)


class ForceToggle(BaseModel):
    enable: bool = True

    model_config = ConfigDict(extra="forbid")


def _default_forces() -> Dict[str, ForceToggle]:
    return {name: ForceToggle() for name in TERM_NAMES}


class RenderCfg(BaseModel):
    decimals: int = Field(default=1, ge=0, le=6)
    card_class: str = "swarm-card"
    highlight_class: str = "swarm-card--active"
    category_attr: str = "data-card-type"
    static_gap: float = Field(default=12.0, ge=0)

    model_config = ConfigDict(extra="forbid")


class CaptureCfg(BaseModel):
    every: int = Field(default=1, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)
    final_always: bool = True

    model_config = ConfigDict(extra="forbid")


class LoggingCfg(BaseModel):
    level: Literal["none", "debug", "info", "warning", "error"] = "info"
    format: Literal["text", "json"] = "text"

    model_config = ConfigDict(extra="forbid")


class EnvironmentCfg(BaseModel):
    """Overrides for the host capability query; ``None`` defers to the host."""

    coarse_pointer: Optional[bool] = None
    reduced_motion: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")


class SwarmConfig(BaseModel):
    physics: PhysicsParams = Field(default_factory=PhysicsParams)
    forces: Dict[str, ForceToggle] = Field(default_factory=_default_forces)
    render: RenderCfg = Field(default_factory=RenderCfg)
    capture: CaptureCfg = Field(default_factory=CaptureCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)
    environment: EnvironmentCfg = Field(default_factory=EnvironmentCfg)
    catalog_path: Optional[str] = None
    seed: Optional[int] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("forces")
    @classmethod
    def _known_terms(cls, v: Dict[str, ForceToggle]) -> Dict[str, ForceToggle]:
        unknown = sorted(set(v) - set(TERM_NAMES))
        if unknown:
            raise ValueError(f"unknown force terms: {unknown}")
        # Terms left out of a partial mapping stay enabled.
        merged = _default_forces()
        merged.update(v)
        return merged


__all__ = [
    "TERM_NAMES",
    "PhysicsParams",
    "ForceToggle",
    "RenderCfg",
    "CaptureCfg",
    "LoggingCfg",
    "EnvironmentCfg",
    "SwarmConfig",
]
