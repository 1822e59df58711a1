"""Placement engine and random-source helpers."""
from .engine import (
    GOAL_ANGLE_STEP_DEG,
    goal_angle_deg,
    place_agent,
    place_arena,
    place_goal,
    place_goal_distributed,
    place_goal_rejecting,
    place_obstacles,
    reset_episode,
)
from .sampling import RngFactory, make_rng, make_rng_factory, uniform_square_offset

__all__ = [
    "GOAL_ANGLE_STEP_DEG",
    "goal_angle_deg",
    "place_agent",
    "place_arena",
    "place_goal",
    "place_goal_distributed",
    "place_goal_rejecting",
    "place_obstacles",
    "reset_episode",
    "RngFactory",
    "make_rng",
    "make_rng_factory",
    "uniform_square_offset",
]
