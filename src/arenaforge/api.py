from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from arenaforge.config.schema import LayoutConfig
from arenaforge.diagnostics import DiagnosticsSink, report, summarize
from arenaforge.grid import place_grid
from arenaforge.placement.sampling import RngFactory, make_rng_factory
from arenaforge.types import PlacementOutcome


@dataclass
class LayoutResult:
    outcomes: List[PlacementOutcome]
    summary: Dict[str, Any] = field(default_factory=dict)
    config: Optional[LayoutConfig] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "config": None if self.config is None else self.config.model_dump(mode="json"),
            "arenas": [o.to_dict() for o in self.outcomes],
        }


# -----------------------------------------------------------------------------
# public layout API
# -----------------------------------------------------------------------------


def generate_layout(
    cfg: LayoutConfig,
    *,
    rng_factory: Optional[RngFactory] = None,
    sink: Optional[DiagnosticsSink] = None,
) -> LayoutResult:
    """Lay out every arena described by ``cfg``.

    Parameters
    ----------
    cfg:
        Validated layout configuration (see :mod:`arenaforge.config`).
    rng_factory:
        Per-arena random streams; defaults to ``make_rng_factory(cfg.seed)``.
    sink:
        Optional diagnostics sink that receives every constraint violation.
    """
    factory = rng_factory or make_rng_factory(cfg.seed)
    outcomes = place_grid(
        cfg.arena,
        cfg.grid,
        factory,
        obstacle_count=cfg.obstacles_per_arena,
        strategy=cfg.goal_strategy,
        origin=cfg.origin_point,
        workers=cfg.workers,
    )
    if sink is not None:
        report(outcomes, sink)
    return LayoutResult(outcomes=outcomes, summary=summarize(outcomes), config=cfg)


__all__ = ["LayoutResult", "generate_layout"]
