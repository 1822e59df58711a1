"""Constraint-violation stream for external loggers and dashboards."""
from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, Iterable, Iterator, List, Optional, Protocol

from arenaforge.types import ConstraintViolation, PlacementOutcome, ViolationKind


class DiagnosticsSink(Protocol):
    def emit(self, violation: ConstraintViolation) -> None: ...


class CollectingSink:
    """Keeps every violation in memory (handy in tests and notebooks)."""

    def __init__(self) -> None:
        self.violations: List[ConstraintViolation] = []

    def emit(self, violation: ConstraintViolation) -> None:
        self.violations.append(violation)


class LoggingSink:
    """Forwards violations to a :mod:`logging` logger.

    Exhaustion is a warning, bounds failures are errors.  The violation dict
    rides along as ``extra={"extra": ...}`` so the JSON formatter from
    :func:`arenaforge.logging_util.get_logger` can emit it as fields.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("arenaforge.diagnostics")

    def emit(self, violation: ConstraintViolation) -> None:
        level = logging.ERROR if violation.kind is ViolationKind.BOUNDS_VIOLATION else logging.WARNING
        arena = "-" if violation.arena is None else violation.arena.linear_index
        self.logger.log(
            level,
            "Arena %s: %s",
            arena,
            violation.reason,
            extra={"extra": violation.to_dict()},
        )


def iter_violations(outcomes: Iterable[PlacementOutcome]) -> Iterator[ConstraintViolation]:
    for outcome in outcomes:
        yield from outcome.unsatisfied_constraints


def report(outcomes: Iterable[PlacementOutcome], sink: DiagnosticsSink) -> int:
    """Send every violation to ``sink``; returns how many were sent."""
    n = 0
    for v in iter_violations(outcomes):
        sink.emit(v)
        n += 1
    return n


def summarize(outcomes: Iterable[PlacementOutcome]) -> Dict[str, Any]:
    outcomes = list(outcomes)
    kinds: Counter[str] = Counter(v.kind.value for v in iter_violations(outcomes))
    return {
        "arenas": len(outcomes),
        "clean": sum(1 for o in outcomes if o.ok),
        "degraded": [o.arena.linear_index for o in outcomes if not o.ok],
        "obstacles_placed": sum(len(o.placement.obstacles) for o in outcomes),
        "violations": {k.value: kinds.get(k.value, 0) for k in ViolationKind},
    }


__all__ = [
    "DiagnosticsSink",
    "CollectingSink",
    "LoggingSink",
    "iter_violations",
    "report",
    "summarize",
]
