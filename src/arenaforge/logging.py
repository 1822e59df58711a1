from __future__ import annotations

import logging
from typing import Optional

from arenaforge.config.schema import LayoutConfig
from arenaforge.logging_util import JSONFormatter

_LEVEL_MAP = {
    "none": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

# Silent until an application configures logging.
logging.getLogger("arenaforge").addHandler(logging.NullHandler())

_HANDLER_TAG = "_arenaforge_root"


def _normalize(level: Optional[str]) -> int:
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().lower(), logging.WARNING)


def level_from_cfg(cfg: Optional[LayoutConfig]) -> int:
    if cfg is None:
        return logging.WARNING
    return _normalize(cfg.logging.level)


def _formatter(fmt: Optional[str]) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter()
    return logging.Formatter(fmt="[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S")


def init_logging(level: int | str | None = None, fmt: Optional[str] = None) -> None:
    """
    Set up the root handler and the ``arenaforge`` logger level.
    Safe to call repeatedly: level and format are updated, the handler is added once.
    ``fmt`` is ``"text"`` (default) or ``"json"``.
    """
    lvl = _normalize(level) if isinstance(level, str) or level is None else int(level)

    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, _HANDLER_TAG, False)]
    if ours:
        ours[0].setFormatter(_formatter(fmt))
    elif not root.handlers:
        h = logging.StreamHandler()
        setattr(h, _HANDLER_TAG, True)
        h.setFormatter(_formatter(fmt))
        root.addHandler(h)
    root.setLevel(lvl)

    logging.getLogger("arenaforge").setLevel(lvl)


def init_logging_from_cfg(cfg: Optional[LayoutConfig]) -> None:
    init_logging(level_from_cfg(cfg), fmt=None if cfg is None else cfg.logging.format)
