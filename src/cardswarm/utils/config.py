"""Dotted-path helpers for configuration mappings and CLI overrides."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

import yaml


def get(cfg: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Return ``cfg[path]`` where *path* uses dot notation.

    Missing keys return *default*.  Term names contain dots themselves
    (``forces.ll.separate.enable``), so a longest-prefix match is tried at
    each level before splitting further.
    """
    cur: Any = cfg
    parts = path.split(".")
    while parts:
        if not isinstance(cur, Mapping):
            return default
        for n in range(len(parts), 0, -1):
            key = ".".join(parts[:n])
            if key in cur:
                cur = cur[key]
                parts = parts[n:]
                break
        else:
            return default
    return cur


def set_path(cfg: Dict[str, Any], path: str, value: Any) -> Dict[str, Any]:
    """Assign ``value`` at dotted ``path`` inside ``cfg`` (in place) and return it.

    ``forces.<term>`` is special-cased so term names keep their dots.
    """
    parts = path.split(".")
    if parts[0] == "forces" and len(parts) >= 3:
        parts = ["forces", ".".join(parts[1:-1]), parts[-1]]
    cur = cfg
    for key in parts[:-1]:
        nxt = cur.get(key)
        if not isinstance(nxt, dict):
            nxt = {}
            cur[key] = nxt
        cur = nxt
    cur[parts[-1]] = value
    return cfg


def parse_assignments(items: Iterable[str]) -> Dict[str, Any]:
    """Turn ``["physics.damping=0.9", ...]`` into a nested override mapping.

    Values are parsed as YAML scalars, so ``true``, ``0.9`` and ``null`` get
    their natural types.
    """
    out: Dict[str, Any] = {}
    for item in items or ():
        if "=" not in item:
            raise ValueError(f"override {item!r} is not of the form key=value")
        key, raw = item.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"override {item!r} has an empty key")
        set_path(out, key, yaml.safe_load(raw))
    return out


__all__ = ["get", "set_path", "parse_assignments"]
