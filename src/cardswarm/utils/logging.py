"""The ``cardswarm`` package logger.

Engine, host and viz modules log here. Nothing is printed until a host or the
CLI calls :func:`configure_logging`; output goes to stderr so that ``run
--print`` can keep stdout for JSON.
"""

import logging
import sys
from typing import Union


logger = logging.getLogger("cardswarm")
logger.addHandler(logging.NullHandler())


def _to_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    # config spells levels in lowercase ("debug", "info", ...)
    return int(getattr(logging, str(level).upper(), logging.INFO))


def configure_logging(enabled: bool = True, level: Union[int, str] = logging.INFO) -> None:
    """Switch the ``cardswarm`` logger on at ``level``, or silence it.

    ``level`` may be a ``logging`` constant or a ``LoggingCfg.level`` name;
    ``"none"`` is the same as ``enabled=False``. Calling again replaces the
    handler installed before.
    """
    logger.handlers.clear()
    if not enabled or level == "none":
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(_to_level(level))


__all__ = ["logger", "configure_logging"]
