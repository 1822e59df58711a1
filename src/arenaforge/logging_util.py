# -*- coding: utf-8 -*-
from __future__ import annotations
import json, logging, os, sys
from typing import Optional


class JSONFormatter(logging.Formatter):
    """One JSON object per record; ``extra={"extra": {...}}`` is merged in."""

    def format(self, record: logging.LogRecord) -> str:
        base = {"level": record.levelname, "name": record.name, "message": record.getMessage()}
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            base.update(extra)
        return json.dumps(base, ensure_ascii=False)


def get_logger(name: str, fmt: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """Logger writing to stdout in ``text`` or ``json`` format.

    ``ARENAFORGE_LOG_LEVEL`` and ``ARENAFORGE_LOG_FORMAT`` override the
    arguments.  Handlers are installed only on first use of ``name``.
    """
    level = os.getenv("ARENAFORGE_LOG_LEVEL", level or "INFO")
    fmt = os.getenv("ARENAFORGE_LOG_FORMAT", fmt or "text")

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        h = logging.StreamHandler(stream=sys.stdout)
        if fmt == "json":
            h.setFormatter(JSONFormatter())
        else:
            h.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(h)
    return logger
