from __future__ import annotations

import os
import sys
from typing import Optional


def _has_display() -> bool:
    if sys.platform.startswith("linux"):
        return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))
    return True


def _tk_available() -> bool:
    try:
        import tkinter  # noqa: F401
    except ImportError:
        return False
    return True


def detect_backend(prefer: str = "TkAgg") -> str:
    """Pick an interactive backend when one can open a window, else ``Agg``."""
    env = os.environ.get("MPLBACKEND")
    if env:
        return env
    if prefer.lower() in ("tkagg", "tk") and _tk_available() and _has_display():
        return "TkAgg"
    return "Agg"


def setup_matplotlib_backend(prefer: str = "TkAgg", force: Optional[str] = None) -> str:
    """Select the backend before ``pyplot`` is imported and return its name.

    Once ``pyplot`` is loaded the backend is left alone.  The swarm host
    measures cards through the Agg renderer, so only Agg-based backends are
    chosen here.
    """
    import matplotlib

    if "matplotlib.pyplot" in sys.modules:
        return matplotlib.get_backend()
    backend = force or detect_backend(prefer)
    matplotlib.use(backend, force=True)
    return matplotlib.get_backend()


__all__ = ["detect_backend", "setup_matplotlib_backend"]
