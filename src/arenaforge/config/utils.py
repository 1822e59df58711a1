# src/arenaforge/config/utils.py
from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Mapping, Optional


def merge(*cfgs: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge mappings left to right, later ones winning.
    Nested mappings merge key by key; any other value replaces.
    """
    out: Dict[str, Any] = {}
    for c in cfgs:
        if not c:
            continue
        for k, v in c.items():
            if isinstance(v, Mapping) and isinstance(out.get(k), dict):
                out[k] = merge(out[k], v)
            else:
                out[k] = deepcopy(v)
    return out


__all__ = ["merge"]
