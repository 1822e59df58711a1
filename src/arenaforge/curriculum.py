"""Difficulty levels that scale arena size and obstacle count."""
from __future__ import annotations

from dataclasses import dataclass

from arenaforge.config.schema import LayoutConfig


@dataclass(frozen=True)
class CurriculumLevels:
    arena_size_base: float = 6.0
    arena_size_step: float = 1.2
    obstacles_base: int = 2
    obstacles_step: int = 2
    max_level: int = 5

    def clamp(self, level: int) -> int:
        return max(0, min(int(level), self.max_level))

    def arena_size(self, level: int) -> float:
        return self.arena_size_base + self.clamp(level) * self.arena_size_step

    def obstacles(self, level: int) -> int:
        return self.obstacles_base + self.clamp(level) * self.obstacles_step


DEFAULT_LEVELS = CurriculumLevels()


def apply_curriculum(
    layout: LayoutConfig, level: int, levels: CurriculumLevels = DEFAULT_LEVELS
) -> LayoutConfig:
    """Copy of ``layout`` with arena size and obstacle count for ``level``.

    Out-of-range levels are clamped to ``[0, levels.max_level]``.
    """
    arena = layout.arena.model_dump()
    arena["arena_size"] = levels.arena_size(level)
    return layout.replace(arena=arena, obstacles_per_arena=levels.obstacles(level))


__all__ = ["CurriculumLevels", "DEFAULT_LEVELS", "apply_curriculum"]
