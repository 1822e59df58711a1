"""Constrained placement of agents, goals and obstacles inside one arena.

Each placement is a small rejection-sampling loop: draw a candidate, test the
separation constraint, accept or retry until ``max_attempts`` is used up.  On
exhaustion the caller gets the best-effort result with ``exhausted`` set;
nothing here raises for an unsatisfiable layout.
"""
from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

import numpy as np

from arenaforge.config.schema import ArenaConfig, GoalStrategy
from arenaforge.geometry import ground_radius, safe_zone_radius
from arenaforge.types import (
    ArenaIndex,
    ConstraintViolation,
    EntityKind,
    ObstacleResult,
    Placement,
    PlacementOutcome,
    Point3,
    SampleResult,
    ViolationKind,
)
from .sampling import uniform_square_offset

logger = logging.getLogger(__name__)

# Small prime, coprime with 360: consecutive indices visit all 360 integer
# bearings before any repeats.
GOAL_ANGLE_STEP_DEG = 73
GOAL_RADIUS_MIN_FRAC = 0.2
GOAL_RADIUS_MAX_FRAC = 0.8


# ---------------------------------------------------------------------------
# Agent / goal
# ---------------------------------------------------------------------------


def place_agent(center: Point3, cfg: ArenaConfig, rng: np.random.Generator) -> SampleResult:
    """Uniform spawn point in the safe-zone square at ``agent_height``."""
    dx, dz = uniform_square_offset(rng, safe_zone_radius(cfg))
    return SampleResult(Point3(center.x + dx, center.y + cfg.agent_height, center.z + dz), attempts=1)


def place_goal_rejecting(
    center: Point3,
    agent: Point3,
    cfg: ArenaConfig,
    rng: np.random.Generator,
    *,
    min_distance: Optional[float] = None,
) -> SampleResult:
    """Sample the safe zone until the goal is at least ``min_distance`` from ``agent``.

    ``min_distance`` defaults to ``cfg.min_goal_distance``.  When the budget
    runs out the last candidate is returned with ``exhausted=True``.
    """
    min_d = cfg.min_goal_distance if min_distance is None else float(min_distance)
    if min_d < 0:
        raise ValueError("min_distance must be >= 0")
    r = safe_zone_radius(cfg)

    candidate = center
    for attempt in range(1, cfg.max_attempts + 1):
        dx, dz = uniform_square_offset(rng, r)
        candidate = Point3(center.x + dx, center.y + cfg.goal_height, center.z + dz)
        if candidate.distance_to(agent) >= min_d:
            return SampleResult(candidate, attempts=attempt)

    logger.warning(
        "Could not place goal with minimum distance %g after %d attempts",
        min_d,
        cfg.max_attempts,
    )
    return SampleResult(candidate, attempts=cfg.max_attempts, exhausted=True)


def goal_angle_deg(arena_index: int) -> float:
    """Bearing of the distributed goal for ``arena_index`` in degrees, in ``[0, 360)``."""
    if arena_index < 0:
        raise ValueError("arena_index must be >= 0")
    return float((int(arena_index) * GOAL_ANGLE_STEP_DEG) % 360)


def place_goal_distributed(
    center: Point3,
    arena_index: int,
    cfg: ArenaConfig,
    rng: np.random.Generator,
) -> SampleResult:
    """Goal on a deterministic bearing with a random radius.

    The bearing depends only on ``arena_index``; the radius is uniform in
    ``[0.2, 0.8] * ground_radius``.  There is no separation check against the
    agent, so this never retries.
    """
    gr = ground_radius(cfg)
    theta = math.radians(goal_angle_deg(arena_index))
    radius = float(rng.uniform(GOAL_RADIUS_MIN_FRAC * gr, GOAL_RADIUS_MAX_FRAC * gr))
    pos = Point3(
        center.x + math.cos(theta) * radius,
        center.y + cfg.goal_height,
        center.z + math.sin(theta) * radius,
    )
    return SampleResult(pos, attempts=1)


def place_goal(
    strategy: GoalStrategy | str,
    center: Point3,
    agent: Point3,
    arena_index: int,
    cfg: ArenaConfig,
    rng: np.random.Generator,
) -> SampleResult:
    strategy = GoalStrategy(strategy)
    if strategy is GoalStrategy.REJECTING:
        return place_goal_rejecting(center, agent, cfg, rng)
    return place_goal_distributed(center, arena_index, cfg, rng)


# ---------------------------------------------------------------------------
# Obstacles
# ---------------------------------------------------------------------------


def _clears(candidate: Point3, others: Sequence[Point3], min_d: float) -> bool:
    return all(candidate.distance_to(o) > min_d for o in others)


def place_obstacles(
    center: Point3,
    agent: Point3,
    goal: Point3,
    count: int,
    cfg: ArenaConfig,
    rng: np.random.Generator,
) -> ObstacleResult:
    """Place up to ``count`` obstacles with pairwise clearance.

    A candidate is accepted only if it is farther than
    ``min_obstacle_distance`` from the agent, the goal and every obstacle
    accepted before it.  Slots that exhaust their budget are skipped, so the
    result may hold fewer than ``count`` obstacles.
    """
    if count < 0:
        raise ValueError("count must be >= 0")
    gr = ground_radius(cfg)
    scale = cfg.safe_zone_percentage
    min_d = cfg.min_obstacle_distance
    y = center.y + cfg.obstacle_height / 2.0

    placed: List[Point3] = []
    skipped: List[int] = []
    total_attempts = 0
    for slot in range(count):
        accepted = None
        for _ in range(cfg.max_attempts):
            total_attempts += 1
            dx = float(rng.uniform(-gr, gr)) * scale
            dz = float(rng.uniform(-gr, gr)) * scale
            candidate = Point3(center.x + dx, y, center.z + dz)
            if _clears(candidate, [agent, goal], min_d) and _clears(candidate, placed, min_d):
                accepted = candidate
                break
        if accepted is None:
            logger.warning("Could not place obstacle %d after %d attempts", slot, cfg.max_attempts)
            skipped.append(slot)
        else:
            placed.append(accepted)

    return ObstacleResult(obstacles=tuple(placed), skipped=tuple(skipped), attempts=total_attempts)


# ---------------------------------------------------------------------------
# Whole arena
# ---------------------------------------------------------------------------


def _goal_violation(arena: ArenaIndex, goal: SampleResult, cfg: ArenaConfig) -> ConstraintViolation:
    return ConstraintViolation(
        arena=arena,
        entity=EntityKind.GOAL,
        kind=ViolationKind.PLACEMENT_EXHAUSTED,
        reason=(
            f"goal closer than {cfg.min_goal_distance:g} to agent "
            f"after {goal.attempts} attempts"
        ),
        position=goal.position,
    )


def place_arena(
    cfg: ArenaConfig,
    arena: ArenaIndex,
    center: Point3,
    rng: np.random.Generator,
    *,
    obstacle_count: int = 0,
    strategy: GoalStrategy | str = GoalStrategy.DISTRIBUTED,
) -> PlacementOutcome:
    """Agent, goal and obstacles for one arena, with exhaustion recorded as violations."""
    agent = place_agent(center, cfg, rng)
    goal = place_goal(strategy, center, agent.position, arena.linear_index, cfg, rng)
    obstacles = place_obstacles(center, agent.position, goal.position, obstacle_count, cfg, rng)

    violations: List[ConstraintViolation] = []
    if goal.exhausted:
        violations.append(_goal_violation(arena, goal, cfg))
    for slot in obstacles.skipped:
        violations.append(
            ConstraintViolation(
                arena=arena,
                entity=EntityKind.OBSTACLE,
                kind=ViolationKind.PLACEMENT_EXHAUSTED,
                reason=(
                    f"obstacle {slot} could not clear {cfg.min_obstacle_distance:g} "
                    f"after {cfg.max_attempts} attempts"
                ),
                slot=slot,
            )
        )

    logger.debug(
        "Arena %d: placed %d/%d obstacles, agent->goal distance %.2f",
        arena.linear_index,
        len(obstacles.obstacles),
        obstacle_count,
        agent.position.distance_to(goal.position),
    )
    return PlacementOutcome(
        arena=arena,
        center=center,
        placement=Placement(agent.position, goal.position, obstacles.obstacles),
        unsatisfied_constraints=tuple(violations),
    )


def reset_episode(
    cfg: ArenaConfig,
    arena: ArenaIndex,
    center: Point3,
    rng: np.random.Generator,
    *,
    strategy: GoalStrategy | str = GoalStrategy.REJECTING,
    strict: bool = False,
    strict_retries: int = 3,
) -> PlacementOutcome:
    """Fresh agent/goal pair for a single arena at the start of an episode.

    Obstacles are left to the caller (they persist across episodes).  With
    ``strict=True`` an exhausted goal triggers up to ``strict_retries`` more
    agent/goal draws; the last draw is returned, still flagged if it failed.
    """
    if strict_retries < 0:
        raise ValueError("strict_retries must be >= 0")
    rounds = 1 + (strict_retries if strict else 0)
    for _ in range(rounds):
        agent = place_agent(center, cfg, rng)
        goal = place_goal(strategy, center, agent.position, arena.linear_index, cfg, rng)
        if not goal.exhausted:
            break
    violations = (_goal_violation(arena, goal, cfg),) if goal.exhausted else ()
    logger.debug(
        "Episode reset: arena %d agent=%s goal=%s",
        arena.linear_index,
        agent.position.as_tuple(),
        goal.position.as_tuple(),
    )
    return PlacementOutcome(
        arena=arena,
        center=center,
        placement=Placement(agent.position, goal.position),
        unsatisfied_constraints=violations,
    )


__all__ = [
    "GOAL_ANGLE_STEP_DEG",
    "place_agent",
    "place_goal_rejecting",
    "goal_angle_deg",
    "place_goal_distributed",
    "place_goal",
    "place_obstacles",
    "place_arena",
    "reset_episode",
]
