"""Configuration models, presets and loading utilities."""
from .loader import dump_effective_config, load_layout_config, load_layout_defaults
from .presets import PRESETS, custom_cfg, large_training_cfg, preset_cfg, single_arena_cfg, training_cfg
from .schema import ArenaConfig, GoalStrategy, GridSize, LayoutConfig, LoggingConfig
from .utils import merge

__all__ = [
    "ArenaConfig",
    "GoalStrategy",
    "GridSize",
    "LayoutConfig",
    "LoggingConfig",
    "PRESETS",
    "custom_cfg",
    "large_training_cfg",
    "preset_cfg",
    "single_arena_cfg",
    "training_cfg",
    "load_layout_config",
    "load_layout_defaults",
    "dump_effective_config",
    "merge",
]
