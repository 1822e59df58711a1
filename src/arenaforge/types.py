# -*- coding: utf-8 -*-
"""Shared dataclasses for arena placements.

Everything here is plain immutable data: the placement engine produces it, the
grid layout aggregates it and the spawner/diagnostics consumers read it.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Point3:
    """A position in world space (``y`` is up)."""

    x: float
    y: float
    z: float

    def __add__(self, other: "Point3") -> "Point3":
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point3") -> "Point3":
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def distance_to(self, other: "Point3") -> float:
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def origin(cls) -> "Point3":
        return cls(0.0, 0.0, 0.0)


@dataclass(frozen=True, order=True)
class ArenaIndex:
    """Cell of the arena grid; ordering follows ``linear_index``."""

    linear_index: int
    x: int = field(compare=False)
    z: int = field(compare=False)

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "z": self.z, "linear_index": self.linear_index}


class EntityKind(str, Enum):
    AGENT = "agent"
    GOAL = "goal"
    OBSTACLE = "obstacle"


class ViolationKind(str, Enum):
    PLACEMENT_EXHAUSTED = "placement_exhausted"
    BOUNDS_VIOLATION = "bounds_violation"


@dataclass(frozen=True)
class ConstraintViolation:
    arena: Optional[ArenaIndex]
    entity: EntityKind
    kind: ViolationKind
    reason: str
    slot: Optional[int] = None
    position: Optional[Point3] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "arena": None if self.arena is None else self.arena.linear_index,
            "entity": self.entity.value,
            "kind": self.kind.value,
            "reason": self.reason,
            "slot": self.slot,
            "position": None if self.position is None else list(self.position.as_tuple()),
        }


@dataclass(frozen=True)
class SampleResult:
    """Outcome of one rejection-sampling loop.

    ``position`` is the accepted point, or the last candidate drawn when
    ``exhausted`` is set.
    """

    position: Point3
    attempts: int
    exhausted: bool = False


@dataclass(frozen=True)
class ObstacleResult:
    obstacles: Tuple[Point3, ...]
    skipped: Tuple[int, ...]
    attempts: int

    @property
    def requested(self) -> int:
        return len(self.obstacles) + len(self.skipped)


@dataclass(frozen=True)
class Placement:
    agent: Point3
    goal: Point3
    obstacles: Tuple[Point3, ...] = ()

    def points(self) -> List[Tuple[EntityKind, Optional[int], Point3]]:
        """Every placed point tagged with its entity kind and obstacle slot."""
        out: List[Tuple[EntityKind, Optional[int], Point3]] = [
            (EntityKind.AGENT, None, self.agent),
            (EntityKind.GOAL, None, self.goal),
        ]
        out.extend((EntityKind.OBSTACLE, i, p) for i, p in enumerate(self.obstacles))
        return out


@dataclass(frozen=True)
class PlacementOutcome:
    arena: ArenaIndex
    center: Point3
    placement: Placement
    unsatisfied_constraints: Tuple[ConstraintViolation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.unsatisfied_constraints

    def with_violations(self, extra: List[ConstraintViolation]) -> "PlacementOutcome":
        if not extra:
            return self
        return PlacementOutcome(
            arena=self.arena,
            center=self.center,
            placement=self.placement,
            unsatisfied_constraints=self.unsatisfied_constraints + tuple(extra),
        )

    def to_dict(self) -> Dict[str, Any]:
        p = self.placement
        return {
            "arena": self.arena.to_dict(),
            "center": list(self.center.as_tuple()),
            "agent": list(p.agent.as_tuple()),
            "goal": list(p.goal.as_tuple()),
            "obstacles": [list(o.as_tuple()) for o in p.obstacles],
            "ok": self.ok,
            "violations": [v.to_dict() for v in self.unsatisfied_constraints],
        }


__all__ = [
    "Point3",
    "ArenaIndex",
    "EntityKind",
    "ViolationKind",
    "ConstraintViolation",
    "SampleResult",
    "ObstacleResult",
    "Placement",
    "PlacementOutcome",
]
