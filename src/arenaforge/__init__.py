"""ArenaForge top-level API.

External users can simply ``from arenaforge import generate_layout``.
"""

from . import logging as _logging  # noqa: F401  installs the package NullHandler
from .api import LayoutResult, generate_layout
from .config import ArenaConfig, GoalStrategy, GridSize, LayoutConfig
from .errors import ConfigError

__all__ = [
    "ArenaConfig",
    "ConfigError",
    "GoalStrategy",
    "GridSize",
    "LayoutConfig",
    "LayoutResult",
    "generate_layout",
]
