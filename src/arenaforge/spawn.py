"""Hand-off from placements to whatever instantiates scene entities."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Protocol

from arenaforge.types import ArenaIndex, EntityKind, PlacementOutcome, Point3


class EntitySpawner(Protocol):
    def spawn_entity(self, kind: EntityKind, world_position: Point3, parent_arena: ArenaIndex) -> Any: ...


def spawn_outcomes(
    outcomes: Iterable[PlacementOutcome],
    spawner: EntitySpawner,
    *,
    skip_degraded: bool = False,
) -> Dict[int, List[Any]]:
    """Spawn agent, goal and obstacles of each outcome.

    Returns the spawner's handles keyed by ``linear_index``, in spawn order.
    Degraded arenas are spawned too unless ``skip_degraded`` is set.
    """
    handles: Dict[int, List[Any]] = {}
    for outcome in outcomes:
        if skip_degraded and not outcome.ok:
            continue
        handles[outcome.arena.linear_index] = [
            spawner.spawn_entity(kind, p, outcome.arena)
            for kind, _slot, p in outcome.placement.points()
        ]
    return handles


__all__ = ["EntitySpawner", "spawn_outcomes"]
