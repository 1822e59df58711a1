"""Arena geometry: derived radii and containment predicates.

All functions are pure.  Containment uses axis-aligned squares, matching the
square regions the placement engine samples from, even though the rendered
ground is usually a disc.
"""
from __future__ import annotations

from arenaforge.config.schema import ArenaConfig
from arenaforge.types import Point3

# Edge length of the unit ground primitive the footprint scale is applied to.
GROUND_PRIMITIVE_SIZE = 10.0


def arena_radius(cfg: ArenaConfig) -> float:
    """Half the spacing between neighbouring arena centres."""
    return cfg.arena_size / 2.0


def ground_radius(cfg: ArenaConfig) -> float:
    return cfg.arena_size * cfg.ground_percentage / 2.0


def safe_zone_radius(cfg: ArenaConfig) -> float:
    return ground_radius(cfg) * cfg.safe_zone_percentage


def _within_square(p: Point3, center: Point3, half_extent: float) -> bool:
    return abs(p.x - center.x) <= half_extent and abs(p.z - center.z) <= half_extent


def is_within_safe_zone(p: Point3, center: Point3, cfg: ArenaConfig) -> bool:
    return _within_square(p, center, safe_zone_radius(cfg))


def is_within_arena_bounds(p: Point3, center: Point3, cfg: ArenaConfig) -> bool:
    return _within_square(p, center, ground_radius(cfg))


def ground_footprint_scale(cfg: ArenaConfig, primitive_size: float = GROUND_PRIMITIVE_SIZE) -> float:
    """Uniform scale that makes a ``primitive_size`` ground span ``2 * ground_radius``."""
    if primitive_size <= 0:
        raise ValueError("primitive_size must be > 0")
    return 2.0 * ground_radius(cfg) / primitive_size


def describe(cfg: ArenaConfig) -> str:
    return (
        f"Arena size={cfg.arena_size:g} | ground_radius={ground_radius(cfg):.2f} | "
        f"safe_zone_radius={safe_zone_radius(cfg):.2f} | agent_height={cfg.agent_height:g} | "
        f"goal_height={cfg.goal_height:g} | min distances: agent-goal={cfg.min_goal_distance:g}, "
        f"obstacle={cfg.min_obstacle_distance:g} | max_attempts={cfg.max_attempts}"
    )


__all__ = [
    "GROUND_PRIMITIVE_SIZE",
    "arena_radius",
    "ground_radius",
    "safe_zone_radius",
    "is_within_safe_zone",
    "is_within_arena_bounds",
    "ground_footprint_scale",
    "describe",
]
