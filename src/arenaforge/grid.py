"""Grid layout: tile arenas, place each one, validate containment.

Arenas are enumerated row-major (``linear_index = iz * X + ix``).  A bad arena
never aborts the batch; its problems are attached to its own
:class:`PlacementOutcome`.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Optional

from arenaforge.config.schema import ArenaConfig, GoalStrategy, GridSize
from arenaforge.geometry import is_within_arena_bounds
from arenaforge.placement.engine import place_arena
from arenaforge.placement.sampling import RngFactory
from arenaforge.types import ArenaIndex, ConstraintViolation, PlacementOutcome, Point3, ViolationKind

logger = logging.getLogger(__name__)


def arena_indices(grid: GridSize) -> Iterator[ArenaIndex]:
    for iz in range(grid.z):
        for ix in range(grid.x):
            yield ArenaIndex(linear_index=iz * grid.x + ix, x=ix, z=iz)


def arena_center(origin: Point3, index: ArenaIndex, arena_size: float) -> Point3:
    return Point3(origin.x + index.x * arena_size, origin.y, origin.z + index.z * arena_size)


def validate_bounds(outcome: PlacementOutcome, cfg: ArenaConfig) -> List[ConstraintViolation]:
    """Bounds violations for every point of ``outcome`` outside its ground footprint.

    Points are reported, never moved.
    """
    found: List[ConstraintViolation] = []
    for entity, slot, p in outcome.placement.points():
        if is_within_arena_bounds(p, outcome.center, cfg):
            continue
        local = p - outcome.center
        name = entity.value if slot is None else f"{entity.value} {slot}"
        logger.error(
            "Arena %d: %s is OUTSIDE arena bounds at %s (local offset %s)",
            outcome.arena.linear_index,
            name,
            p.as_tuple(),
            local.as_tuple(),
        )
        found.append(
            ConstraintViolation(
                arena=outcome.arena,
                entity=entity,
                kind=ViolationKind.BOUNDS_VIOLATION,
                reason=f"{name} outside ground footprint, local offset ({local.x:.3f}, {local.z:.3f})",
                slot=slot,
                position=p,
            )
        )
    return found


def _place_cell(
    cfg: ArenaConfig,
    index: ArenaIndex,
    origin: Point3,
    rng_factory: RngFactory,
    obstacle_count: int,
    strategy: GoalStrategy,
) -> PlacementOutcome:
    center = arena_center(origin, index, cfg.arena_size)
    outcome = place_arena(
        cfg,
        index,
        center,
        rng_factory(index.linear_index),
        obstacle_count=obstacle_count,
        strategy=strategy,
    )
    return outcome.with_violations(validate_bounds(outcome, cfg))


def place_grid(
    cfg: ArenaConfig,
    grid: GridSize,
    rng_factory: RngFactory,
    *,
    obstacle_count: int = 0,
    strategy: GoalStrategy | str = GoalStrategy.DISTRIBUTED,
    origin: Optional[Point3] = None,
    workers: int = 1,
) -> List[PlacementOutcome]:
    """Place every arena of ``grid``; results are ordered by ``linear_index``.

    Each arena draws from ``rng_factory(linear_index)``, so output is the same
    for any ``workers`` count.  With ``workers > 1`` cells are fanned out on a
    thread pool.
    """
    if obstacle_count < 0:
        raise ValueError("obstacle_count must be >= 0")
    if workers < 1:
        raise ValueError("workers must be >= 1")
    strategy = GoalStrategy(strategy)
    origin = Point3.origin() if origin is None else origin
    cells = list(arena_indices(grid))

    logger.info(
        "Creating %dx%d arena grid (%d arenas, %d obstacles each, goal strategy %s)",
        grid.x,
        grid.z,
        len(cells),
        obstacle_count,
        strategy.value,
    )

    def _run(index: ArenaIndex) -> PlacementOutcome:
        return _place_cell(cfg, index, origin, rng_factory, obstacle_count, strategy)

    if workers == 1 or len(cells) <= 1:
        outcomes = [_run(ix) for ix in cells]
    else:
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="arenaforge-grid") as pool:
            outcomes = list(pool.map(_run, cells))
    outcomes.sort(key=lambda o: o.arena.linear_index)

    degraded = sum(1 for o in outcomes if not o.ok)
    if degraded:
        logger.warning("%d/%d arenas have unsatisfied constraints", degraded, len(outcomes))
    else:
        logger.info("All %d arenas placed cleanly", len(outcomes))
    return outcomes


__all__ = ["arena_indices", "arena_center", "validate_bounds", "place_grid"]
