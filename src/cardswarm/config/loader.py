"""Swarm configuration loader."""
from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .schema import SwarmConfig

__all__ = ["load_config", "read_yaml", "merge_overrides"]

DEFAULT_CONFIG_PATH = "configs/swarm.yaml"


def read_yaml(path: str | Path) -> Dict[str, Any]:
    """Read a YAML mapping; a missing file reads as ``{}``."""
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise TypeError(f"Top-level YAML at {path} must be a mapping")
    return data


def _ensure_only_swarm(d: Mapping[str, Any]) -> None:
    extra = set(d.keys()) - {"swarm"}
    if extra:
        raise ValueError(f"unexpected top-level keys: {sorted(extra)}")


def merge_overrides(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``.

    Mappings merge key by key; any other value replaces what ``base`` held.
    """
    out = deepcopy(dict(base))
    for key, val in override.items():
        cur = out.get(key)
        if isinstance(val, Mapping) and isinstance(cur, Mapping):
            out[key] = merge_overrides(cur, val)
        else:
            out[key] = deepcopy(val)
    return out


def load_config(
    path: str | Path | None = DEFAULT_CONFIG_PATH,
    overrides: Optional[Mapping[str, Any]] = None,
) -> SwarmConfig:
    """Load ``{"swarm": {...}}`` from YAML, apply overrides and validate.

    ``overrides`` may be given with or without the ``swarm`` root key.
    """
    raw = read_yaml(path) if path else {}
    _ensure_only_swarm(raw)
    cfg: Dict[str, Any] = dict(raw.get("swarm") or {})
    if overrides:
        ov = overrides["swarm"] if "swarm" in overrides else overrides
        cfg = merge_overrides(cfg, ov)
    return SwarmConfig.model_validate(cfg)
