# -*- coding: utf-8 -*-
"""Rendering surface: card elements, batched position writes, static layout.

A surface is whatever draws the cards.  The engine only talks to it
through :class:`Surface`; :class:`HeadlessSurface` keeps everything in
memory so the swarm runs without a display.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, Sequence, Set, Tuple

import numpy as np

from cardswarm.data.catalog import Card
from cardswarm.types import Array2, Geometry


class Surface(Protocol):
    def create_card(self, card: Card) -> Any: ...

    def measure(self, handle: Any) -> Tuple[float, float]: ...

    def set_transform(self, handle: Any, x: float, y: float) -> None: ...

    def set_highlight(self, handle: Any, on: bool) -> None: ...

    def flush(self) -> None: ...


@dataclass
class CardElement:
    """In-memory stand-in for a rendered link element."""

    label: str
    href: str
    classes: Set[str] = field(default_factory=set)
    attrs: Dict[str, str] = field(default_factory=dict)
    transform: str = ""
    size: Tuple[float, float] = (0.0, 0.0)
    write_count: int = 0


class HeadlessSurface:
    """Surface that records element state instead of drawing.

    Card sizes are estimated from the label length, which is enough for
    the physics to see realistic, varied boxes.
    """

    def __init__(
        self,
        render_cfg: Any = None,
        *,
        char_width: float = 7.5,
        pad_x: float = 16.0,
        line_height: float = 34.0,
    ):
        self.card_class = getattr(render_cfg, "card_class", "swarm-card")
        self.highlight_class = getattr(render_cfg, "highlight_class", "swarm-card--active")
        self.category_attr = getattr(render_cfg, "category_attr", "data-card-type")
        self.decimals = int(getattr(render_cfg, "decimals", 1))
        self.char_width = float(char_width)
        self.pad_x = float(pad_x)
        self.line_height = float(line_height)
        self.elements: List[CardElement] = []
        self.flushes = 0

    def create_card(self, card: Card) -> CardElement:
        el = CardElement(label=card.label, href=card.href)
        el.classes.add(self.card_class)
        el.attrs[self.category_attr] = card.category.value
        el.size = (self.char_width * len(card.label) + 2.0 * self.pad_x, self.line_height)
        self.elements.append(el)
        return el

    def measure(self, handle: CardElement) -> Tuple[float, float]:
        return handle.size

    def set_transform(self, handle: CardElement, x: float, y: float) -> None:
        d = self.decimals
        handle.transform = f"translate({x:.{d}f}px,{y:.{d}f}px)"
        handle.write_count += 1

    def set_highlight(self, handle: CardElement, on: bool) -> None:
        if on:
            handle.classes.add(self.highlight_class)
        else:
            handle.classes.discard(self.highlight_class)

    def flush(self) -> None:
        self.flushes += 1

    def highlighted(self) -> List[int]:
        return [i for i, el in enumerate(self.elements) if self.highlight_class in el.classes]


def sync_positions(surface: Any, handles: Sequence[Any], P: Array2) -> None:
    """Write every settled position to its element, then flush once."""
    for h, (x, y) in zip(handles, np.asarray(P, float)):
        surface.set_transform(h, float(x), float(y))
    surface.flush()


def static_layout(WH: Array2, geometry: Geometry, gap: float = 12.0) -> Array2:
    """Flow cards left to right, wrapping into rows, starting at ``(gap, gap)``.

    Rows past the container height are returned as laid out. The engine
    clamps them into the box, so they pile up along the bottom edge.
    """
    WH = np.asarray(WH, float)
    W = float(geometry.width)
    P = np.zeros_like(WH)
    x, y, row_h = gap, gap, 0.0
    for i, (w, h) in enumerate(WH):
        if x > gap and x + w > W - gap:
            x = gap
            y += row_h + gap
            row_h = 0.0
        P[i] = (x, y)
        x += w + gap
        row_h = max(row_h, h)
    return P


__all__ = ["Surface", "CardElement", "HeadlessSurface", "sync_positions", "static_layout"]
