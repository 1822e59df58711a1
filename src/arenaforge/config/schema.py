"""Pydantic models for arena and grid configuration."""
from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from arenaforge.errors import ConfigError
from arenaforge.types import Point3


class _ConfigMeta(type(BaseModel)):
    # Only direct construction passes through here; nested models are built
    # inside pydantic-core, so their errors keep the full dotted location.
    def __call__(cls, *args: Any, **kwargs: Any):
        try:
            return super().__call__(*args, **kwargs)
        except ValidationError as exc:
            raise ConfigError.from_validation_error(exc) from None


class _FrozenModel(BaseModel, metaclass=_ConfigMeta):
    """Base for config models: immutable, strict keys, finite numbers only.

    Validation failures surface as :class:`ConfigError` whether the model is
    built with keyword arguments or ``model_validate``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any):  # type: ignore[override]
        try:
            return super().model_validate(obj, *args, **kwargs)
        except ValidationError as exc:
            raise ConfigError.from_validation_error(exc) from None


class GoalStrategy(str, Enum):
    """How goals are placed relative to the agent.

    ``REJECTING`` guarantees a minimum agent/goal distance (best effort);
    ``DISTRIBUTED`` spreads goal bearings across the batch by arena index.
    """

    REJECTING = "rejecting"
    DISTRIBUTED = "distributed"


class ArenaConfig(_FrozenModel):
    arena_size: float = Field(default=20.0, gt=0)
    ground_percentage: float = Field(default=0.7, gt=0, le=1)
    safe_zone_percentage: float = Field(default=0.8, gt=0, le=1)

    agent_height: float = 0.5
    goal_height: float = 1.0
    obstacle_height: float = 1.0

    min_goal_distance: float = Field(default=1.5, ge=0)
    min_obstacle_distance: float = Field(default=1.5, ge=0)
    max_attempts: int = Field(default=20, ge=1)


class GridSize(_FrozenModel):
    x: int = Field(default=1, ge=1)
    z: int = Field(default=1, ge=1)

    @property
    def count(self) -> int:
        return self.x * self.z


class LoggingConfig(_FrozenModel):
    level: Literal["none", "info", "debug"] = "none"
    format: Literal["text", "json"] = "text"


class LayoutConfig(_FrozenModel):
    """Everything needed to lay out one batch of arenas."""

    arena: ArenaConfig = Field(default_factory=ArenaConfig)
    grid: GridSize = Field(default_factory=GridSize)
    obstacles_per_arena: int = Field(default=0, ge=0)
    goal_strategy: GoalStrategy = GoalStrategy.DISTRIBUTED
    seed: int | None = None
    origin: tuple[float, float, float] = (0.0, 0.0, 0.0)
    workers: int = Field(default=1, ge=1)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def origin_point(self) -> Point3:
        return Point3(*self.origin)

    def replace(self, **update: Any) -> "LayoutConfig":
        """Return a validated copy with top-level fields replaced."""
        data = self.model_dump()
        data.update(update)
        return LayoutConfig.model_validate(data)


__all__ = [
    "GoalStrategy",
    "ArenaConfig",
    "GridSize",
    "LoggingConfig",
    "LayoutConfig",
]
