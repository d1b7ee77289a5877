# -*- coding: utf-8 -*-
"""Card catalog: the labelled links that make up the swarm.

The catalog is plain data.  A card's identity is its index in the list; the
same index addresses its particle state and its rendered element.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, List, Sequence

import yaml


class Category(str, Enum):
    SERVICE = "service"
    TECH = "tech"


@dataclass(frozen=True)
class Card:
    label: str
    href: str
    category: Category = Category.TECH


def _services(*labels: str) -> List[Card]:
    return [Card(lab, "#services", Category.SERVICE) for lab in labels]


def _tech(*labels: str) -> List[Card]:
    return [Card(lab, "#services", Category.TECH) for lab in labels]


# 6 services (primary) + 14 tech tags (secondary)
DEFAULT_CATALOG: Sequence[Card] = tuple(
    _services(
        "3D Animation",
        "Web Applications",
        "Websites",
        "AR/VR Experiences",
        "AI Automations",
        "Branding & Design",
    )
    + _tech(
        "Character Design",
        "Motion Graphics",
        "React",
        "Next.js",
        "Node.js",
        "Unity",
        "WebXR",
        "Machine Learning",
        "UI/UX Design",
        "WordPress",
        "Blender",
        "LLM Integration",
        "Spatial Computing",
        "E-Commerce",
    )
)


def card_from_mapping(d: Any, index: int = 0) -> Card:
    if not isinstance(d, dict):
        raise ValueError(f"[catalog] entry {index} must be a mapping, got {type(d).__name__}")
    label = d.get("label")
    href = d.get("href")
    if not isinstance(label, str) or not label:
        raise ValueError(f"[catalog] entry {index} missing label")
    if not isinstance(href, str) or not href:
        raise ValueError(f"[catalog] entry {index} missing href")
    # ``type`` is the attribute name used in the page markup
    raw = d.get("category", d.get("type", Category.TECH.value))
    try:
        category = Category(str(raw).lower())
    except ValueError:
        raise ValueError(f"[catalog] entry {index} has unknown category {raw!r}") from None
    return Card(label=label, href=href, category=category)


def load_catalog(path: str | Path) -> List[Card]:
    """Read a catalog from a YAML or JSON list of ``{label, href, category}``."""
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        if p.suffix.lower() == ".json":
            raw = json.load(f)
        else:
            raw = yaml.safe_load(f)
    if isinstance(raw, dict) and "cards" in raw:
        raw = raw["cards"]
    if not isinstance(raw, list):
        raise ValueError(f"[catalog] {path} must hold a list of cards")
    return [card_from_mapping(d, i) for i, d in enumerate(raw)]


def catalog_to_dicts(cards: Sequence[Card]) -> List[dict]:
    return [{"label": c.label, "href": c.href, "category": c.category.value} for c in cards]


__all__ = ["Card", "Category", "DEFAULT_CATALOG", "load_catalog", "card_from_mapping", "catalog_to_dicts"]
