# -*- coding: utf-8 -*-
from __future__ import annotations
import json, logging, os, sys
from typing import Any, Dict


class _JSONFormatter(logging.Formatter):
    def format(self, record):
        base = {"level": record.levelname, "name": record.name}
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            base.update(extra)
        return json.dumps(base, ensure_ascii=False)


def _logging_section(cfg: Any) -> Dict[str, Any]:
    if cfg is None:
        return {}
    if hasattr(cfg, "logging"):
        lg = cfg.logging
        return lg.model_dump() if hasattr(lg, "model_dump") else dict(lg)
    if isinstance(cfg, dict):
        return cfg.get("swarm", cfg).get("logging", {}) or {}
    return {}


def get_logger(name: str, cfg: Any = None) -> logging.Logger:
    """Return a stdout logger configured from ``cfg['logging']`` and env vars.

    ``cfg`` may be a :class:`~cardswarm.config.schema.SwarmConfig` or a plain
    mapping (with or without the ``swarm`` root key).
    """
    lg = _logging_section(cfg)
    level = lg.get("level", "INFO")
    fmt = lg.get("format", "text")
    level = os.getenv("CARDSWARM_LOG_LEVEL", level)
    fmt = os.getenv("CARDSWARM_LOG_FORMAT", fmt)

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
        h = logging.StreamHandler(stream=sys.stdout)
        if fmt == "json":
            h.setFormatter(_JSONFormatter())
        else:
            h.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(h)
        logger.propagate = False
    return logger
