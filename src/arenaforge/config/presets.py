# src/arenaforge/config/presets.py
from __future__ import annotations

from typing import Any, Callable, Dict

from arenaforge.errors import ConfigError
from .schema import LayoutConfig
from .utils import merge

PRESET_ARENA_SIZE = 20.0


def _layout(x: int, z: int, obstacles: int, **overrides: Any) -> LayoutConfig:
    base: Dict[str, Any] = {
        "arena": {"arena_size": PRESET_ARENA_SIZE},
        "grid": {"x": x, "z": z},
        "obstacles_per_arena": obstacles,
    }
    return LayoutConfig.model_validate(merge(base, overrides))


def single_arena_cfg(**overrides: Any) -> LayoutConfig:
    """1x1 grid with a few obstacles, for quick checks."""
    return _layout(1, 1, 3, **overrides)


def training_cfg(**overrides: Any) -> LayoutConfig:
    """
    2x2 grid with minimal obstacles; keeps per-step cost low during training.
    """
    return _layout(2, 2, 2, **overrides)


def large_training_cfg(**overrides: Any) -> LayoutConfig:
    return _layout(6, 6, 8, **overrides)


def custom_cfg(x: int, z: int, obstacles_per_arena: int, **overrides: Any) -> LayoutConfig:
    return _layout(x, z, obstacles_per_arena, **overrides)


PRESETS: Dict[str, Callable[..., LayoutConfig]] = {
    "single": single_arena_cfg,
    "training": training_cfg,
    "large": large_training_cfg,
    "custom": custom_cfg,
}


def preset_cfg(name: str, **overrides: Any) -> LayoutConfig:
    """Look up a preset by name.  ``custom`` needs ``x``, ``z`` and ``obstacles_per_arena``."""
    key = str(name).strip().lower()
    if key not in PRESETS:
        raise ConfigError(f"unknown preset {name!r}; expected one of {sorted(PRESETS)}")
    if key == "custom":
        missing = [k for k in ("x", "z", "obstacles_per_arena") if k not in overrides]
        if missing:
            raise ConfigError(f"custom preset requires {missing}")
    return PRESETS[key](**overrides)


__all__ = [
    "PRESET_ARENA_SIZE",
    "single_arena_cfg",
    "training_cfg",
    "large_training_cfg",
    "custom_cfg",
    "PRESETS",
    "preset_cfg",
]
